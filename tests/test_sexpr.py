import re
from dataclasses import dataclass
from typing import Any, Optional

import pytest

from samplekit.sexpr import SExprError, marshal, marshal_indent, unmarshal


@dataclass
class Movie:
    title: str
    subtitle: str
    year: int
    actor: dict[str, str]
    oscars: list[str]
    sequel: Optional[str] = None


@dataclass
class Point:
    x: int
    y: int


STRANGELOVE = Movie(
    title="Dr. Strangelove",
    subtitle="How I Learned to Stop Worrying and Love the Bomb",
    year=1964,
    actor={
        "Dr. Strangelove": "Peter Sellers",
        "Grp. Capt. Lionel Mandrake": "Peter Sellers",
        "Pres. Merkin Muffley": "Peter Sellers",
        "Gen. Buck Turgidson": "George C. Scott",
        "Brig. Gen. Jack D. Ripper": "Sterling Hayden",
        'Maj. T.J. "King" Kong': "Slim Pickens",
    },
    oscars=[
        "Best Actor (Nomin.)",
        "Best Adapted Screenplay (Nomin.)",
        "Best Director (Nomin.)",
        "Best Picture (Nomin.)",
    ],
)


def test_round_trip_movie():
    data = marshal(STRANGELOVE)
    assert unmarshal(data, Movie) == STRANGELOVE


def test_pretty_matches_plain_encoding():
    pretty = marshal_indent(STRANGELOVE)
    assert b"\n" in pretty
    assert re.sub(rb"\n *", b" ", pretty) == marshal(STRANGELOVE)
    assert unmarshal(pretty, Movie) == STRANGELOVE


def test_marshal_atoms_and_lists():
    assert marshal(None) == b"nil"
    assert marshal(42) == b"42"
    assert marshal([1, 2, 3]) == b"(1 2 3)"
    assert marshal([]) == b"()"


def test_marshal_struct_and_map():
    assert marshal(Point(1, 2)) == b"((x 1) (y 2))"
    assert marshal({"a": 1, "b": [2]}) == b'(("a" 1) ("b" (2)))'


def test_marshal_quotes_strings():
    assert marshal('say "hi"\n') == b'"say \\"hi\\"\\n"'
    assert marshal("é\t") == '"é\\t"'.encode("utf-8")


@pytest.mark.parametrize("value, name", [(1.5, "float"), (True, "bool"), (1j, "complex")])
def test_marshal_unsupported(value, name):
    with pytest.raises(SExprError, match=f"unsupported type: {name}"):
        marshal(value)
    with pytest.raises(SExprError, match=f"unsupported type: {name}"):
        marshal_indent([value])


def test_marshal_indent_short_stays_on_one_line():
    assert marshal_indent([1, 2, 3]) == b"(1 2 3)"
    assert marshal_indent(Point(1, 2)) == b"((x 1) (y 2))"


def test_marshal_indent_breaks_long_list():
    word = "a" * 30
    expected = f'("{word}" "{word}"\n "{word}")'.encode()
    assert marshal_indent([word, word, word]) == expected


def test_unmarshal_list_and_map():
    assert unmarshal(b"(1 2 3)", list[int]) == [1, 2, 3]
    assert unmarshal(b'(("a" 1) ("b" 2))', dict[str, int]) == {"a": 1, "b": 2}


def test_unmarshal_nil():
    assert unmarshal(b"nil", Optional[str]) is None
    assert unmarshal(b"nil", list[int]) == []
    assert unmarshal(b"nil", Point) == Point(0, 0)


def test_unmarshal_string_escapes():
    assert unmarshal(b'"a\\x41\\u00e9\\n"', str) == "aA\u00e9\n"
    assert unmarshal(b"`raw\\n`", str) == "raw\\n"


def test_unmarshal_missing_field_is_zero():
    assert unmarshal(b"((x 5))", Point) == Point(5, 0)


def test_unmarshal_dynamic():
    assert unmarshal(b'(1 "a" (2))', Any) == [1, "a", [2]]


def test_unmarshal_skips_comments():
    assert unmarshal(b"(1 /* two */ 3) // end", list[int]) == [1, 3]


def test_unmarshal_fixed_tuple():
    assert unmarshal(b"(1 2)", tuple[int, int, int]) == (1, 2, 0)
    with pytest.raises(SExprError, match="index out of range"):
        unmarshal(b"(1 2 3 4)", tuple[int, int, int])


def test_unmarshal_end_of_file():
    with pytest.raises(SExprError, match="end of file"):
        unmarshal(b"(1 2", list[int])


def test_unmarshal_unexpected_token():
    with pytest.raises(SExprError) as info:
        unmarshal(b"-1", int)
    assert str(info.value) == 'error at 1:1: unexpected token "-"'


def test_unmarshal_unexpected_identifier_position():
    with pytest.raises(SExprError) as info:
        unmarshal(b"(1 x)", list[int])
    assert str(info.value) == 'error at 1:4: unexpected token "x"'


def test_unmarshal_position_on_later_line():
    with pytest.raises(SExprError) as info:
        unmarshal(b"(1\n  x)", list[int])
    assert str(info.value) == 'error at 2:3: unexpected token "x"'


def test_unmarshal_list_into_int():
    with pytest.raises(SExprError, match="cannot decode list into int"):
        unmarshal(b"(1)", int)


def test_unmarshal_string_into_int():
    with pytest.raises(SExprError, match="cannot decode string into int"):
        unmarshal(b'"a"', int)


def test_unmarshal_field_name_required():
    with pytest.raises(SExprError) as info:
        unmarshal(b"((1 2))", Point)
    assert str(info.value) == 'error at 1:3: got token "1", want field name'


def test_unmarshal_unknown_field():
    with pytest.raises(SExprError, match="no field z in Point"):
        unmarshal(b"((z 1))", Point)


def test_unmarshal_missing_open_paren():
    with pytest.raises(SExprError, match="got \"x\", want '\\('"):
        unmarshal(b"(x 1)", Point)