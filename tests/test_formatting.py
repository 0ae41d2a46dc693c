import io
from dataclasses import dataclass, field
from typing import Any, Optional

from samplekit.formatting import display, format_atom


class Nanos(int):
    pass


@dataclass
class Holder:
    x: Any


@dataclass
class ObjectHolder:
    x: object


@dataclass
class Movie:
    title: str
    subtitle: str
    year: int
    color: bool
    actor: dict
    oscars: list
    sequel: Optional[str] = None


def _display(name, value):
    buf = io.StringIO()
    display(name, value, buf)
    return buf.getvalue()


def test_format_atom_int():
    assert format_atom(1) == "1"


def test_format_atom_int_subclass():
    assert format_atom(Nanos(1)) == "1"


def test_format_atom_list_has_address():
    value = [1]
    name, address = format_atom(value).split(" 0x")
    assert name == "list"
    assert int(address, 16) == id(value)


def test_format_atom_bool_and_string():
    assert format_atom(True) == "true"
    assert format_atom(False) == "false"
    assert format_atom('say "hi"\n') == '"say \\"hi\\"\\n"'


def test_format_atom_value_types():
    assert format_atom(None) == "invalid"
    assert format_atom((1, 2)) == "tuple value"
    assert format_atom(1.5) == "float value"


def test_display_slice():
    assert _display("slice", [0, None]) == (
        "Display slice (list):\n"
        "slice[0] = 0\n"
        "slice[1] = nil\n"
    )


def test_display_nil():
    assert _display("w", None) == "Display w (NoneType):\nw = invalid\n"


def test_display_struct_with_interface_field():
    assert _display("x", Holder(3)) == (
        "Display x (Holder):\n"
        "x.x.type = int\n"
        "x.x.value = 3\n"
    )


def test_display_struct_with_object_field_nil():
    assert _display("x", ObjectHolder(None)) == "Display x (ObjectHolder):\nx.x = nil\n"


def test_display_plain_value():
    assert _display("i", 3) == "Display i (int):\ni = 3\n"


def test_display_array():
    assert _display("x", [3]) == "Display x (list):\nx[0] = 3\n"


def test_display_movie():
    strangelove = Movie(
        title="Dr. Strangelove",
        subtitle="How I Learned to Stop Worrying and Love the Bomb",
        year=1964,
        color=False,
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
    expected = [
        "Display strangelove (Movie):",
        'strangelove.title = "Dr. Strangelove"',
        'strangelove.subtitle = "How I Learned to Stop Worrying and Love the Bomb"',
        "strangelove.year = 1964",
        "strangelove.color = false",
        'strangelove.actor["Dr. Strangelove"] = "Peter Sellers"',
        'strangelove.actor["Grp. Capt. Lionel Mandrake"] = "Peter Sellers"',
        'strangelove.actor["Pres. Merkin Muffley"] = "Peter Sellers"',
        'strangelove.actor["Gen. Buck Turgidson"] = "George C. Scott"',
        'strangelove.actor["Brig. Gen. Jack D. Ripper"] = "Sterling Hayden"',
        'strangelove.actor["Maj. T.J. \\"King\\" Kong"] = "Slim Pickens"',
        'strangelove.oscars[0] = "Best Actor (Nomin.)"',
        'strangelove.oscars[1] = "Best Adapted Screenplay (Nomin.)"',
        'strangelove.oscars[2] = "Best Director (Nomin.)"',
        'strangelove.oscars[3] = "Best Picture (Nomin.)"',
        "strangelove.sequel = nil",
    ]
    assert _display("strangelove", strangelove).splitlines() == expected


def test_display_nested_struct_in_interface():
    @dataclass
    class Inner:
        n: int = 0
        tags: list = field(default_factory=list)

    out = _display("h", Holder(Inner(7, ["a"])))
    assert out.splitlines() == [
        "Display h (Holder):",
        "h.x.type = Inner",
        "h.x.value.n = 7",
        'h.x.value.tags[0] = "a"',
    ]