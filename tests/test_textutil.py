import pytest

from rsassist.textutil import (
    ByteRange,
    SearchType,
    StackNode,
    calculate_str_hash,
    char_at,
    char_before,
    closure_valid_arg_scope,
    find_closure,
    find_ident_end,
    gen_tuple_fields,
    in_fn_name,
    is_ident_char,
    is_pattern_char,
    is_search_expr_char,
    strip_visibility,
    strip_word,
    strip_words,
    symbol_matches,
    trim_visibility,
    txt_matches,
    txt_matches_with_pos,
)

EXACT = SearchType.EXACT_MATCH
STARTS = SearchType.STARTS_WITH


def _find(src, a, off1, b, off2):
    return ByteRange(src.find(a) + off1, src.rfind(b) + 1 + off2)


def _pipe(src):
    return _find(src, "|", 0, "|", 0)


def test_find_closure():
    src = "|a, b, c| something()"
    src2 = "|a, b, c| { something() }"
    src3 = "let a = |a, b, c|something();"
    src4 = "let a = |a, b, c| something().second().third();"
    src5 = "| x: i32 | y.map(|z| z~)"
    src6 = "| x: i32 | Struct { x };"
    src7 = "y.map(| x: i32 | y.map(|z| z) )"
    src8 = "|z| z)"
    src9 = "let p = |z| something() + 5;"

    assert find_closure(src) == (_pipe(src), _find(src, "s", 0, ")", 0))
    assert find_closure(src2) == (_pipe(src2), _find(src2, "{", 1, "}", -1))
    assert find_closure(src3) == (_pipe(src3), _find(src3, "s", 0, ")", 0))
    assert find_closure(src4) == (_pipe(src4), _find(src4, "s", 0, ")", 0))
    assert find_closure(src5) == (
        _find(src5, "|", 0, "y", -2),
        _find(src5, "y", 0, ")", 0),
    )
    assert find_closure(src6) == (_pipe(src6), _find(src6, "S", 0, ";", -1))
    assert find_closure(src7) == (
        _find(src7, "|", 0, "y", -2),
        _find(src7, "2", 4, ")", 0),
    )
    assert find_closure(src8) == (_pipe(src8), _find(src8, " ", 1, ")", 0))
    assert find_closure(src9) == (_pipe(src9), _find(src9, "s", 0, "5", 0))


def test_find_closure_without_pipes():
    assert find_closure("let a = b;") is None


def test_closure_valid_arg_scope():
    valid = "\n    let a = |int, int| int * int;\n"
    assert closure_valid_arg_scope(valid) == (ByteRange(13, 23), "|int, int|")

    confusing = """
    match a {
        EnumA::A => match b {
            EnumB::A(u) | EnumB::B(u) => println!("u: {}", u),
        },
        EnumA::B => match b {
            EnumB::A(u) | EnumB::B(u) => println!("u: {}", u),
        },
    }
"""
    assert closure_valid_arg_scope(confusing) is None


def test_closure_valid_arg_scope_stops_at_semicolon():
    assert closure_valid_arg_scope("a | b; c | d") is None


def test_txt_matches_matches_stuff():
    assert txt_matches(EXACT, "Vec", "Vec") is True
    assert txt_matches(EXACT, "Vec", "use Vec") is True
    assert txt_matches(EXACT, "Vec", "use Vecä") is False

    assert txt_matches(STARTS, "Vec", "Vector") is True
    assert txt_matches(STARTS, "Vec", "use Vector") is True
    assert txt_matches(STARTS, "Vec", "use Vec") is True
    assert txt_matches(STARTS, "Vec", "use äVector") is False


def test_txt_matches_matches_methods():
    assert txt_matches(STARTS, "do_st", "fn do_stuff") is True
    assert txt_matches(STARTS, "do_st", "pub fn do_stuff") is True
    assert txt_matches(STARTS, "do_st", "pub(crate) fn do_stuff") is True
    assert txt_matches(STARTS, "do_st", "pub(in codegen) fn do_stuff") is True


def test_txt_matches_with_pos_returns_byte_offset():
    assert txt_matches_with_pos(EXACT, "Vec", "use Vec") == 4
    assert txt_matches_with_pos(EXACT, "Vec", "ä Vec") == 3
    assert txt_matches_with_pos(EXACT, "Vec", "Vector Vec") == 7
    assert txt_matches_with_pos(EXACT, "", "anything") == 0
    assert txt_matches_with_pos(EXACT, "Vec", "Vector") is None


def test_symbol_matches():
    assert symbol_matches(EXACT, "foo", "foo") is True
    assert symbol_matches(EXACT, "foo", "foobar") is False
    assert symbol_matches(STARTS, "foo", "foobar") is True
    assert symbol_matches(STARTS, "bar", "foobar") is False


def test_char_classes():
    assert is_ident_char("a") and is_ident_char("_") and is_ident_char("!")
    assert not is_ident_char(" ")
    assert is_pattern_char(" ") and is_pattern_char(":") and is_pattern_char(".")
    assert not is_pattern_char("(")
    assert is_search_expr_char(":") and not is_search_expr_char(" ")


def test_find_ident_end_ascii():
    assert find_ident_end("ident", 0) == 5
    assert find_ident_end("(ident)", 1) == 6
    assert find_ident_end("let an_identifier = 100;", 4) == 17


def test_find_ident_end_unicode():
    assert find_ident_end("num_µs", 0) == 7
    assert find_ident_end("ends_in_µ", 0) == 10


def test_char_before():
    assert char_before("täst", 3) == "ä"
    assert char_before("täst", 2) == "ä"
    assert char_before("täst", 4) == "s"
    assert char_before("täst", 100) == "t"
    assert char_before("täst", 0) == "\0"


def test_char_at():
    assert char_at("täst", 1) == "ä"
    assert char_at("täst", 3) == "s"


def test_char_at_errors():
    with pytest.raises(ValueError):
        char_at("täst", 2)
    with pytest.raises(IndexError):
        char_at("ab", 2)


def test_strip_words():
    assert strip_words("const  unsafe  fn", ["const", "unsafe"]) == 15
    assert strip_words("unsafe  fn", ["const", "unsafe"]) == 8
    assert strip_words("const   fn", ["const", "unsafe"]) == 8
    assert strip_words("fn", ["const", "unsafe"]) == 0


def test_strip_word():
    assert strip_word("unsafe fn", "unsafe") == 7
    assert strip_word("unsafely", "unsafe") is None
    assert strip_word("fn", "unsafe") is None


def test_strip_visibility():
    assert strip_visibility("pub fn") == 4
    assert strip_visibility("crate fn") == 6
    assert strip_visibility("fn foo") is None


def test_trim_visibility():
    assert trim_visibility("pub fn") == "fn"
    assert trim_visibility("pub(crate)   struct") == "struct"
    assert trim_visibility("pub (in super)  const fn") == "const fn"
    assert trim_visibility("fn main") == "fn main"


def test_in_fn_name():
    assert in_fn_name("fn foo")
    assert in_fn_name(" fn  foo")
    assert in_fn_name("fn ")
    assert not in_fn_name("fn foo(b")
    assert not in_fn_name("fn")


def test_calculate_str_hash():
    first = calculate_str_hash("hello")
    assert first == calculate_str_hash("hello")
    assert first != calculate_str_hash("hellp")
    assert 0 <= first < 2**64


def test_gen_tuple_fields():
    assert list(gen_tuple_fields(3)) == ["0", "1", "2"]
    assert list(gen_tuple_fields(0)) == []
    many = list(gen_tuple_fields(20))
    assert len(many) == 16
    assert many[-1] == "15"


def test_stack_node():
    empty = StackNode()
    assert empty.contains(1) is False
    one = empty.push(1)
    two = one.push(2)
    assert two.contains(1) is True
    assert two.contains(2) is True
    assert one.contains(2) is False
    assert 1 in two
    assert 3 not in two


def test_byte_range():
    r = ByteRange(2, 5)
    assert "abcdefg"[r.to_range()] == "cde"
    assert r.shift(3) == ByteRange(5, 8)
    assert len(r) == 3