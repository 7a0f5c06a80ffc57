"""Small text helpers for scanning Rust source snippets.

Positions taken and returned by these helpers are byte offsets into the
UTF-8 encoding of the text, matching how source locations are reported.
"""

from __future__ import annotations

import enum
import hashlib
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_WHITESPACE_BYTES = frozenset(b" \r\n\t")


class SearchType(enum.Enum):
    """How a search string is compared with candidate text."""

    EXACT_MATCH = "exact"
    STARTS_WITH = "starts_with"


@dataclass(frozen=True)
class ByteRange:
    """A half-open range ``[start, end)`` of byte offsets."""

    start: int
    end: int

    def to_range(self) -> slice:
        return slice(self.start, self.end)

    def shift(self, offset: int) -> "ByteRange":
        return ByteRange(self.start + offset, self.end + offset)

    def __len__(self) -> int:
        return self.end - self.start


class StackNode:
    """An immutable stack built as a linked list of nodes.

    ``StackNode()`` is the empty stack; ``push`` returns a new node on top of
    the receiver without changing it.
    """

    __slots__ = ("_item", "_previous")

    def __init__(self) -> None:
        self._item: Any = None
        self._previous: Optional[StackNode] = None

    def push(self, item: Any) -> "StackNode":
        node = StackNode()
        node._item = item
        node._previous = self
        return node

    def contains(self, item: Any) -> bool:
        current = self
        while current._previous is not None:
            if current._item == item:
                return True
            current = current._previous
        return False

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)


def is_pattern_char(c: str) -> bool:
    return c.isalnum() or c.isspace() or c in "_:."


def is_search_expr_char(c: str) -> bool:
    return c.isalnum() or c in "_:."


def is_ident_char(c: str) -> bool:
    return c.isalnum() or c in "_!"


def _byte_offset(s: str, char_index: int) -> int:
    return len(s[:char_index].encode("utf-8"))


def _char_indices(s: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, char)`` pairs for ``s``."""
    offset = 0
    for ch in s:
        yield offset, ch
        offset += len(ch.encode("utf-8"))


def _suffix_from_byte(s: str, pos: int) -> str:
    data = s.encode("utf-8")
    try:
        return data[pos:].decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"byte offset {pos} is not on a character boundary") from exc


def txt_matches(stype: SearchType, needle: str, haystack: str) -> bool:
    """Whether ``needle`` occurs in ``haystack`` as a standalone identifier."""
    return txt_matches_with_pos(stype, needle, haystack) is not None


def txt_matches_with_pos(stype: SearchType, needle: str, haystack: str) -> Optional[int]:
    """Byte offset of the first standalone occurrence of ``needle``, or None.

    The match must start the haystack or follow a non-identifier character;
    with an exact search it must also end the haystack or precede one.
    """
    if not needle:
        return 0
    start = 0
    while (n := haystack.find(needle, start)) != -1:
        end = n + len(needle)
        before_ok = n == 0 or not is_ident_char(haystack[n - 1])
        if stype is SearchType.EXACT_MATCH:
            after_ok = end == len(haystack) or not is_ident_char(haystack[end])
        else:
            after_ok = True
        if before_ok and after_ok:
            return _byte_offset(haystack, n)
        start = end
    return None


def symbol_matches(stype: SearchType, searchstr: str, candidate: str) -> bool:
    if stype is SearchType.EXACT_MATCH:
        return searchstr == candidate
    return candidate.startswith(searchstr)


def _closure_arg_chars(scope_src: str) -> Optional[tuple[int, int]]:
    """Character indices of the opening pipe and one past the closing pipe."""
    left_pipe = scope_src.find("|")
    if left_pipe == -1:
        return None
    brace_level = 0
    for i, c in enumerate(scope_src[left_pipe + 1:]):
        if c == "{":
            brace_level += 1
        elif c == "}":
            brace_level -= 1
        elif c == "|":
            if brace_level == 0:
                return left_pipe, left_pipe + 1 + i + 1
            break
        elif c == ";":
            break
        if brace_level < 0:
            break
    return None


def closure_valid_arg_scope(scope_src: str) -> Optional[tuple[ByteRange, str]]:
    """Find a closure argument list ``|...|`` and return its range and text."""
    found = _closure_arg_chars(scope_src)
    if found is None:
        return None
    start, end = found
    byte_range = ByteRange(_byte_offset(scope_src, start), _byte_offset(scope_src, end))
    return byte_range, scope_src[start:end]


def find_closure(src: str) -> Optional[tuple[ByteRange, ByteRange]]:
    """Locate a closure's argument list and body in ``src``."""
    found = _closure_arg_chars(src)
    if found is None:
        return None
    pipe_start, pipe_end = found

    body_start = pipe_end
    while body_start < len(src) and src[body_start].isspace():
        body_start += 1
    if body_start >= len(src):
        return None

    start_char = src[body_start]
    start = body_start + 1 if start_char == "{" else body_start
    clevel = 1 if start_char == "{" else 0
    plevel = 0
    last: Optional[int] = None

    for i in range(body_start + 1, len(src)):
        current = src[i]
        if current == "{":
            clevel += 1
        elif current == "(":
            plevel += 1
        elif current == "}":
            clevel -= 1
            if (clevel == 0 and start_char == "{") or clevel == -1:
                last = i
                break
        elif current == ";":
            if start_char != "{":
                last = i
                break
        elif current == ")":
            plevel -= 1
            if plevel == 0:
                last = i + 1
            if plevel == -1:
                last = i + 1
                break

    if last is None:
        return None
    pipe_range = ByteRange(_byte_offset(src, pipe_start), _byte_offset(src, pipe_end))
    body_range = ByteRange(_byte_offset(src, start), _byte_offset(src, last))
    return pipe_range, body_range


def find_ident_end(s: str, pos: int) -> int:
    """Byte offset where the identifier starting at byte ``pos`` ends."""
    for i, c in _char_indices(_suffix_from_byte(s, pos)):
        if not is_ident_char(c):
            return pos + i
    return len(s.encode("utf-8"))


def char_before(src: str, i: int) -> str:
    """The character that precedes byte offset ``i`` (NUL at the start)."""
    prev = "\0"
    for offset, ch in _char_indices(src):
        if offset >= i:
            return prev
        prev = ch
    return prev


def char_at(src: str, i: int) -> str:
    """The character starting at byte offset ``i``."""
    rest = _suffix_from_byte(src, i)
    if not rest:
        raise IndexError(f"byte offset {i} is past the end of the text")
    return rest[0]


def _strip_word_impl(src: bytes, allow_paren: bool) -> Optional[int]:
    level = 0
    for i, b in enumerate(src):
        if allow_paren and b == ord("("):
            level += 1
        elif allow_paren and b == ord(")"):
            level -= 1
        elif level >= 1:
            pass
        elif b not in _WHITESPACE_BYTES:
            if i == 0:
                break
            return i
    return None


def _strip_prefix_word(data: bytes, word: bytes, allow_paren: bool) -> Optional[int]:
    if not data.startswith(word):
        return None
    rest = _strip_word_impl(data[len(word):], allow_paren)
    return None if rest is None else rest + len(word)


def strip_visibility(src: str) -> Optional[int]:
    """Byte offset just past a leading ``pub(...)`` or ``crate`` keyword."""
    data = src.encode("utf-8")
    if data.startswith(b"pub"):
        return _strip_prefix_word(data, b"pub", True)
    if data.startswith(b"crate"):
        return _strip_prefix_word(data, b"crate", False)
    return None


def strip_word(src: str, word: str) -> Optional[int]:
    """Byte offset just past a leading keyword ``word`` and its whitespace."""
    return _strip_prefix_word(src.encode("utf-8"), word.encode("utf-8"), False)


def strip_words(src: str, words: Iterable[str]) -> int:
    """Byte offset after stripping each of ``words`` in turn, where present."""
    data = src.encode("utf-8")
    start = 0
    for word in words:
        start += _strip_prefix_word(data[start:], word.encode("utf-8"), False) or 0
    return start


def trim_visibility(blob: str) -> str:
    """Remove a leading visibility qualifier such as ``pub(crate)``."""
    start = strip_visibility(blob)
    if start is None:
        return blob
    return _suffix_from_byte(blob, start)


def in_fn_name(line_before_point: str) -> bool:
    """Whether the cursor sits in the name of a function being declared."""
    has_started_name = not (line_before_point and line_before_point[-1].isspace())
    words = iter(reversed(line_before_point.split()))
    if has_started_name:
        ident = next(words, None)
        if ident is not None and not all(is_ident_char(c) for c in ident):
            return False
    return next(words, None) == "fn"


def calculate_str_hash(s: str) -> int:
    """A stable 64-bit hash of ``s``."""
    digest = hashlib.blake2b(s.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


def gen_tuple_fields(u: int) -> Iterator[str]:
    """Names of the first ``u`` tuple fields, at most sixteen."""
    for n in range(min(u, 16)):
        yield str(n)