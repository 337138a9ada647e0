# confscope

Building blocks for describing, reading and validating configuration objects.
It has no dependencies outside the standard library.

## Modules

- **`confscope.namespacing`**: nested parameter namespaces such as
  `"sub_ns/sub_sub_ns"` while a visitor is active. `enter_namespace` opens
  a namespace that stays open until `exit_namespace`, `switch_namespace` or
  `clear_namespaces` closes it. `current_namespace` returns the active one.
  `NameSpace` enters its sub-namespace when it is created. Its `exit`,
  `enter` and `close` methods leave and re-enter it, and as a context
  manager it closes at the end of the block. `OpenNameSpace` and
  `perform_with_guarded_namespaces` lock the open namespaces while an
  operation runs. Once the operation ends, the trailing namespaces that
  are no longer locked are closed.
- **`confscope.visitor`**: `Visitor` objects activated as context managers.
  Each thread has its own stack of them. A visitor runs in a `Mode` (`GET`,
  `GET_DEFAULTS`, `SET`, `CHECK`) and holds a `MetaData` tree together with
  its current namespace. The module also provides `has_instance` and
  `instance`. `instance` raises `NoVisitorError` when no visitor is active.
  - `visit_name` sets the config name unless one is already set.
  - `visit_check` records checks, in `CHECK` mode only.
  - `visit_virtual_config` records whether a virtual config is set (in
    `CHECK` mode). In `GET` mode it writes its `type` back to the data, and
    in `SET` mode it returns the data under the current namespace.
- **`confscope.checks`**: `CheckBase` is the base class, with `valid`,
  `message`, `name`, `clone` and truthiness. The checks are:
  - `Check`, whose result is fixed when it is made.
  - `BinaryCheck`, which compares with a `CompareMode` (`GT`, `GE`, `LT`,
    `LE`, `EQ`, `NE`).
  - `CheckRange`, with inclusive or exclusive bounds.
  - `CheckIsOneOf`.
- **`confscope.path_checks`**: `normalize_path` normalizes a path
  lexically. The path checks are `IsSet`, `Exists`, `DoesNotExist`,
  `IsFile`, `IsDirectory`, `IsEmptyDirectory` and `HasExtension`, all built
  on `PathCheck`.
- **`confscope.meta_data`**: `FieldInfo` and `MetaData`. `MetaData` has
  `walk`, `perform_on_all`, `has_errors` and `has_missing`.
  `has_no_invalid_checks` tells whether every check in a `MetaData` tree is
  valid.
- **`confscope.logger`**: `Severity`, `Logger`, `set_logger`, `log`,
  `log_info`, `log_warning`, `log_error`, `log_fatal` and
  `severity_to_string`. The default `Logger` discards every message except
  fatal ones. For those it raises `FatalError`. Subclass `Logger` and
  override `log_impl` to capture or print messages.
- **`confscope.string_utils`**: `split_namespace`, `join_namespace`,
  `join_namespaces`, `print_center`, `wrap_string`, `data_to_string`,
  `scalar_to_string`, `find_all_substrings` and whitespace pruning helpers.
- **`confscope.yaml_parser`**:
  - `uint8_from_yaml` reads an unsigned 8-bit integer. It raises
    `ValueError` when the value is out of range or is not a number.
  - `uint8_to_yaml` writes one as `{name: value}`.

## Installation

```
pip install confscope
```

## Examples

```python
from confscope.visitor import Visitor, Mode
from confscope.namespacing import NameSpace, enter_namespace, current_namespace

with Visitor(Mode.SET, "", ""):
    enter_namespace("sub_ns")
    with NameSpace("nested"):
        print(current_namespace())  # sub_ns/nested
    print(current_namespace())      # sub_ns
```

```python
from confscope.checks import BinaryCheck, CompareMode

check = BinaryCheck(-1, 0, CompareMode.GE, "f")
if not check:
    print(check.message())  # param >= 0 (is: '-1')
```

```python
from confscope.string_utils import join_namespace, split_namespace

split_namespace("a/b///c/")       # ['a', 'b', 'c']
join_namespace("a/b///", "//c/")  # 'a/b/c'
```

## What it does not do

confscope supplies the pieces a configuration framework is built from, not
the framework itself. It has no way to declare the fields of a config
class. It does not load configs from or save them to YAML files, has no
factory for creating objects from a `type` entry, and cannot print a
config as a formatted table. Data passed to a visitor is plain Python
dicts and lists. Reading it from files is left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```