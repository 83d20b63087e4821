"""File-system queries and a small path/name splitter."""

from __future__ import annotations

import enum
import os
import stat

from exlibs.util import EnumLabels

PATH_SEPARATOR = "\\" if os.name == "nt" else "/"
_FOREIGN_SEPARATOR = "/" if PATH_SEPARATOR == "\\" else "\\"


class FileType(enum.IntEnum):
    """Kind of file-system entry."""

    NONE = 0
    FILE = 1
    DIR = 2
    SYMLINK = 3
    CHARACTER = 4

    @property
    def label(self) -> str:
        """Human-readable name of the kind."""
        return FILE_TYPE_LABELS.get(self)


FILE_TYPE_LABELS = EnumLabels(
    {
        FileType.NONE: "알수없음",
        FileType.FILE: "파일",
        FileType.DIR: "디렉토리",
        FileType.SYMLINK: "심볼릭 링크",
        FileType.CHARACTER: "문자 장치 파일",
    }
)


def is_exist_file(path: str) -> bool:
    """Return True if anything exists at *path*."""
    return os.path.exists(path)


def is_exist_dir(path: str) -> bool:
    """Return True if *path* is a directory."""
    return os.path.isdir(path)


def normalize_path(path: str) -> str:
    """Turn foreign separators into the platform separator.

    A path ending in a separator loses its last two characters; a path
    made of a single separator is returned unchanged.
    """
    normalized = path.replace(_FOREIGN_SEPARATOR, PATH_SEPARATOR)
    if normalized.endswith(PATH_SEPARATOR) and len(normalized) >= 2:
        normalized = normalized[:-2]
    return normalized


def _is_character_device(path: str) -> bool:
    try:
        return stat.S_ISCHR(os.stat(path).st_mode)
    except OSError:
        return False


class ExtFile:
    """A path split into its directory part and file name."""

    def __init__(self, full_path: str = "") -> None:
        self._reset()
        if full_path:
            self.set_path(full_path)

    def _reset(self) -> None:
        self._exists = False
        self._type = FileType.NONE
        self._full_path = ""
        self._dir_path = ""
        self._file_name = ""

    @property
    def file_type(self) -> FileType:
        """Kind of entry found when the path was set."""
        return self._type

    def set_path(self, full_path: str) -> None:
        """Forget the previous path and split *full_path*."""
        self._reset()
        self._full_path = full_path
        self._divide(full_path)

    def _divide(self, full_path: str) -> None:
        normalized = normalize_path(full_path)
        self._full_path = full_path

        if not os.path.exists(full_path):
            self._exists = False
            return

        if os.path.isdir(normalized):
            self._dir_path = full_path
            self._file_name = ""
            self._type = FileType.DIR
            return

        if os.path.isfile(normalized):
            self._type = FileType.FILE
        elif _is_character_device(normalized):
            self._type = FileType.CHARACTER
        else:
            return

        pos = normalized.rfind(PATH_SEPARATOR)
        if pos != -1:
            # The directory part stops one character short of the separator,
            # and the name keeps the separator.
            self._dir_path = normalized[: pos - 1] if pos > 0 else normalized
            self._file_name = normalized[pos:]

    def is_exist(self) -> bool:
        """Return True if the combined path exists now."""
        return os.path.exists(self.full_path())

    def path(self) -> str:
        """Directory part of the path."""
        return self._dir_path

    def name(self) -> str:
        """File-name part of the path; empty for directories."""
        return self._file_name

    def full_path(self) -> str:
        """Directory part and name joined by the platform separator."""
        if not self._file_name and not self._dir_path:
            return ""
        if not self._file_name:
            return self._dir_path
        return self._dir_path + PATH_SEPARATOR + self._file_name