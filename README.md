# exlibs

A small collection of everyday helpers for Python applications. It uses only
the standard library.

## Modules

- `exlibs.base`: the constants `DEFAULT_TIME_STRING` and `PORT_RANGE_MAX`, and a
  thread-safe `Singleton` base class. A subclass's `get_instance()` builds one
  shared instance on first use, and `destroy_instance()` drops it so that the next
  call builds a fresh one.
- `exlibs.text`: string helpers.
  - `to_bool` is true only for `y`, `yes`, `true` or `1` in any case.
  - `to_int` parses a leading integer and returns 0 when there is none. `to_long`
    raises `ValueError` in that case. Both raise `OverflowError` outside the 32-bit range.
  - `is_digit` and `count_occurrences` (overlapping matches are counted).
  - `split_tokens` returns the pieces that are followed by the separator, so the
    text after the last separator is dropped.
  - `replace_all` replaces repeatedly until no match is left. `replace_first`
    replaces only the first match.
  - `compare` gives -1, 0 or 1. `contains`, `starts_with` and `ends_with` take an
    optional `case_insensitive` flag.
  - `decode_ansi`, `decode_utf8` and `encode_utf8` convert between text and bytes.
- `exlibs.util`:
  - `CaseType` and `CaseSensitivity` enums.
  - `EnumLabels`, a mapping from members to labels; `get` returns `""` for a member
    without a label.
  - `is_true` accepts exactly `Y`, `y`, `True`, `TRUE` or `1`.
  - `create_guid` returns a random version-4 UUID, in upper case with
    `CaseType.UPPER`.
  - `calc_percentage_increase` returns the change as a percentage of the initial value.
  - `RandomRange` is a uniform integer generator over an inclusive range. The
    bounds may be given in either order.
- `exlibs.formatting`:
  - `format_string` fills `{}`, `{N}`, `{:b}` and `{N:b}` placeholders. `{{}}`
    writes a literal `{}`.
  - `format_as` turns a single value into the text that is substituted. A
    placeholder with no matching argument writes nothing.
- `exlibs.files`:
  - `is_exist_file`, `is_exist_dir` and `normalize_path`.
  - `FileType`, an enum whose members have a `label`.
  - `ExtFile`, which splits an existing path into `path()` and `name()` and
    joins them again with `full_path()`.
- `exlibs.eventqueue`: `EventQueue` is a blocking FIFO queue with `enqueue`,
  `dequeue`, `size`, `stop` and the `stopped` property. After `stop()`, `dequeue()`
  returns the queue's default value, which is `None` unless another is passed to
  the constructor.
- `exlibs.sqlitedb`: named SQLite databases.
  - `SQLiteManager` keeps a registry. `get_manager()` returns the process-wide
    instance, and `init_db`, `open`, `get_db` and `close` manage the entries.
  - `DBInfo` describes one database.
  - `SQLiteDB` has `prepare`, `bind_value`, `execute` and `run`.
  - `Statement` has `next`, `value` and iteration over rows.
  - `Transaction` begins on creation. Used as a context manager, it commits on a
    normal exit and rolls back when the block raises.

## Installation

```
pip install .
```

## Examples

```python
from exlibs.formatting import format_string
from exlibs.text import to_bool, split_tokens
from exlibs.util import create_guid, CaseType, RandomRange

format_string("{} {0} {} {2:b}", 10, 20, 1)   # "10 10 20 true"
to_bool("Yes")                                 # True
split_tokens("a,b,c,", ",")                    # ["a", "b", "c"]
create_guid(CaseType.UPPER)                    # a 36-character upper-case UUID
RandomRange(1, 6).generate()                   # an int from 1 to 6
```

```python
from exlibs.eventqueue import EventQueue

queue = EventQueue()
queue.enqueue("job")
queue.dequeue()   # "job"
queue.stop()
queue.dequeue()   # None
```

```python
from exlibs.sqlitedb import get_manager

manager = get_manager()
db = manager.open("main", "main.db")
db.run("CREATE TABLE IF NOT EXISTS items (name TEXT)")

statement = db.prepare("INSERT INTO items (name) VALUES (:name)")
db.bind_value(statement, ":name", "apple")
db.execute(statement)

for row in db.run("SELECT name FROM items"):
    print(row.value("NAME"))   # column names match without regard to case

manager.close("main")
```

### Creating a schema from JSON

A `DBInfo` can name a JSON file with `json_path`. If that file holds an object
under the database's name, and the database file did not exist before, the
statements `"1"` up to `"Rev"` under `"Create"` run in one transaction. The
revision is then recorded in the table `TBL_DEFAULT`.

```json
{
  "main": {
    "Create": {
      "Rev": 2,
      "1": "CREATE TABLE items (name TEXT);",
      "2": "CREATE INDEX idx_items_name ON items (name);"
    }
  }
}
```

```python
from exlibs.sqlitedb import DBInfo, get_manager

get_manager().init_db(DBInfo(name="main", file_path="main.db", json_path="schema.json"))
```

## What it does not do

- There is no command-line program. The package is a library only.
- A database file that already exists is opened as it is. Its schema is not
  upgraded to a newer revision.

## Running the tests

```
pip install .[test]
pytest
```