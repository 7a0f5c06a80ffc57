# rsassist

Building blocks for Rust code-completion tooling, in plain Python with no
runtime dependencies.

Positions taken and returned by the text helpers are byte offsets into the
UTF-8 encoding of the text, so they line up with source locations reported
by editors and compilers.

## Modules

### `rsassist.textutil`

- Character classes: `is_ident_char`, `is_pattern_char`,
  `is_search_expr_char`.
- Whole-word search: `txt_matches` and `txt_matches_with_pos` find a needle
  that starts the haystack or follows a non-identifier character; with
  `SearchType.EXACT_MATCH` it must also end at a word boundary, with
  `SearchType.STARTS_WITH` it need not. `symbol_matches` compares a search
  string with a candidate name the same two ways.
- Closures: `closure_valid_arg_scope` finds a `|...|` argument list and
  returns its `ByteRange` and text; `find_closure` returns the ranges of the
  argument list and of the closure body.
- Prefix stripping: `strip_visibility` (`pub`, `pub(...)`, `crate`),
  `strip_word`, `strip_words` and `trim_visibility`.
- `find_ident_end`, `char_before`, `char_at`, `in_fn_name` (whether the
  cursor is in the name after `fn`), `gen_tuple_fields` (`"0"` to `"15"`),
  `calculate_str_hash` (a stable 64-bit hash).
- `StackNode`, an immutable linked stack: `StackNode()` is empty, `push`
  returns a new node, `contains` (or `in`) searches it.

### `rsassist.srcpath`

`get_rust_src_path()` finds the Rust standard library sources. If
`RUST_SRC_PATH` is set, its first entry is validated and returned, or an
error raised. Otherwise it asks `rustc --print sysroot` and looks for
`lib/rustlib/src/rust/library` or `lib/rustlib/src/rust/src` there, and
then tries `/usr/local/src/rust/src` and `/usr/src/rust/src`. Failures are
raised as `MissingSrcPath`, `SrcPathDoesNotExist` or `NotRustSourceTree`,
all subclasses of `RustSrcPathError`; the latter two carry the offending
`path`. `validate_rust_src_path` and `check_rust_sysroot` are available on
their own.

### `rsassist.tmpfiles`

- `TmpDir()` creates a fresh temporary directory named after the current
  thread (`tmpname()`) and removes it on `cleanup()`, on leaving a `with`
  block, or when collected; `TmpDir(path)` wraps an existing directory and
  never removes it. `nested_dir` returns a subdirectory, creating it if
  absent; `write_file` creates a `TmpFile` with the exact name given.
- `TmpFile` holds a file that is deleted on `close()` or when collected.
- `get_pos_and_source` takes a snippet with a `~` cursor marker and
  returns the marker's byte offset and the text without it; it raises
  `ValueError` if there is no marker.

### `rsassist.typeinf`

- `generate_skeleton_for_parsing` keeps an item's header up to the first
  `{` and closes it with `}`, or returns `None` if there is no brace.
- `get_operator_trait` maps a `BinOpKind` to the trait that overloads it
  (`Add`, `Sub`, ..., `Shr`), and comparison operators to `bool`.

## Example

```python
from rsassist.textutil import SearchType, txt_matches, trim_visibility
from rsassist.typeinf import BinOpKind, generate_skeleton_for_parsing, get_operator_trait

txt_matches(SearchType.STARTS_WITH, "Vec", "use Vector")   # True
trim_visibility("pub(crate)   struct")                       # "struct"
generate_skeleton_for_parsing("mod foo { blah }")            # "mod foo {}"
get_operator_trait(BinOpKind.ADD)                            # "Add"
```

## What it does not do

This package is a set of helpers, not a completion engine. It does not
parse Rust source, resolve names or imports, infer the types of
expressions, or find completions or definitions, and it has no command-line
tool or editor server.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```