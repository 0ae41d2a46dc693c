import pytest

from samplekit.tempconv import (
    ABSOLUTE_ZERO_C,
    BOILING_C,
    FREEZING_C,
    Celsius,
    Fahrenheit,
    Kelvin,
    c_to_f,
    c_to_k,
    f_to_c,
    main,
)


def test_arithmetic_example():
    assert "%g" % (BOILING_C - FREEZING_C) == "100"
    boiling_f = c_to_f(BOILING_C)
    assert "%g" % (boiling_f - c_to_f(FREEZING_C)) == "180"


def test_printf_example():
    c = f_to_c(212.0)
    assert str(c) == "100°C"
    assert f"{c}" == "100°C"
    assert "%s" % c == "100°C"
    assert "%g" % c == "100"
    assert float(c) == 100.0


def test_conversion_types():
    assert isinstance(c_to_f(Celsius(0)), Fahrenheit)
    assert isinstance(f_to_c(Fahrenheit(32)), Celsius)
    assert isinstance(c_to_k(Celsius(0)), Kelvin)
    assert float(c_to_f(Celsius(0))) == 32.0


def test_kelvin_string():
    assert str(c_to_k(FREEZING_C)) == "273.15°K"


def test_absolute_zero_string():
    assert str(Celsius(-273.15)) == "-273.15°C"
    assert str(c_to_k(ABSOLUTE_ZERO_C)) == "0°K"


@pytest.mark.parametrize(
    "value, text",
    [(1e21, "1e+21°C"), (0.0001, "0.0001°C"), (1e-05, "1e-05°C"), (0.5, "0.5°C")],
)
def test_shortest_formatting(value, text):
    assert str(Celsius(value)) == text


def test_round_trip():
    for value in (-40.0, 0.0, 37.5, 100.0):
        assert f_to_c(c_to_f(Celsius(value))) == pytest.approx(value)


def test_main_prints_conversions(capsys):
    assert main(["100"]) == 0
    out = capsys.readouterr().out
    assert out == "100°F = 37.77777777777778°C, 100°C = 212°F, 100°C = 373.15°K\n"


def test_main_rejects_bad_number(capsys):
    assert main(["abc"]) == 1
    assert capsys.readouterr().err.startswith("cf: ")