"""Template formatting with '{}' placeholders and an optional boolean spec.

A template holds literal text and placeholders:

* ``{}`` takes the next positional argument,
* ``{N}`` takes argument ``N`` without moving the positional cursor,
* ``{:b}`` / ``{N:b}`` (or ``B``) writes ``true`` or ``false`` depending
  on whether the argument text is one of the accepted truth strings,
* ``{{}}`` writes a literal ``{}``.

A placeholder whose argument is missing, or whose spec is not ``b``/``B``,
produces no output.
"""

from __future__ import annotations

from exlibs.util import is_true

UNKNOWN_TYPE = "unknown type"


def format_as(value: object) -> str:
    """Return the text used for *value* when it is substituted into a template.

    Integers are written in decimal, floats with six decimals, strings as
    they are and bytes widened one character per byte. Any other type,
    ``bool`` included, is written as ``"unknown type"``.
    """
    if isinstance(value, bool):
        return UNKNOWN_TYPE
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return UNKNOWN_TYPE


def _render(template: str, args: list[str]) -> str:
    out: list[str] = []
    in_placeholder = False
    in_type = False
    in_bracket = False
    type_spec = ""
    index = -1
    next_arg = 0

    pos = 0
    length = len(template)
    while pos < length:
        char = template[pos]

        if in_bracket:
            in_bracket = False
            in_placeholder = False
            if char == "}":
                pos += 1
                if pos < length and template[pos] == "}":
                    out.append("{}")
                    pos += 1
                    continue
            out.append("{")
            continue

        if in_placeholder and in_type:
            if char not in "{}":
                type_spec += char
                pos += 1
                continue
            if char == "}":
                pos += 1
                if type_spec in ("b", "B"):
                    if index == -1:
                        if next_arg < len(args):
                            out.append("true" if is_true(args[next_arg]) else "false")
                            next_arg += 1
                        in_type = False
                    else:
                        if index < len(args):
                            # The type flag deliberately stays set here.
                            out.append("true" if is_true(args[index]) else "false")
                        else:
                            in_type = False
                        index = -1
                else:
                    index = -1
                    in_type = False
                in_placeholder = False
                type_spec = ""
                continue

        if in_placeholder:
            if char == "{":
                in_bracket = True
                pos += 1
                continue
            if char == "}":
                pos += 1
                in_placeholder = False
                if index == -1:
                    if next_arg < len(args):
                        out.append(args[next_arg])
                        next_arg += 1
                else:
                    if index < len(args):
                        out.append(args[index])
                    index = -1
                continue
            if char == ":":
                in_type = True
                pos += 1
                continue
            if "0" <= char <= "9":
                digit = ord(char) - ord("0")
                index = digit if index == -1 else index * 10 + digit
                pos += 1
                continue
            raise ValueError(
                f"invalid character {char!r} in placeholder at position {pos}"
            )

        if char == "{":
            in_placeholder = True
        else:
            out.append(char)
        pos += 1

    return "".join(out)


def format_string(template: str, *args: object) -> str:
    """Substitute *args* into *template* and return the result.

    Raises ValueError when a placeholder holds a character other than a
    digit or ``:`` before its spec.
    """
    template = template.split("\0", 1)[0]
    return _render(template, [format_as(arg) for arg in args])