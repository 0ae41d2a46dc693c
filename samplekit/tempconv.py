"""Celsius, Fahrenheit and Kelvin temperatures and conversions between them."""

from __future__ import annotations

import math
import sys
from decimal import Decimal


def _format_g(x: float) -> str:
    """Format ``x`` with the fewest digits that round-trip, exponent only for extremes."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    d = Decimal(repr(float(x))).normalize()
    sign, digits, exp = d.as_tuple()
    exp10 = len(digits) + exp - 1
    prefix = "-" if sign else ""
    if exp10 < -4 or exp10 >= 21:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(digit) for digit in digits[1:])
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    return format(d, "f")


class _Temperature(float):
    _unit = ""

    def __str__(self) -> str:
        return f"{_format_g(self)}{self._unit}"

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        return float.__format__(self, spec)


class Celsius(_Temperature):
    """A temperature in degrees Celsius."""

    _unit = "°C"


class Fahrenheit(_Temperature):
    """A temperature in degrees Fahrenheit."""

    _unit = "°F"


class Kelvin(_Temperature):
    """A temperature in kelvins."""

    _unit = "°K"


ABSOLUTE_ZERO_C = Celsius(-273.15)
FREEZING_C = Celsius(0)
BOILING_C = Celsius(100)


def c_to_f(c: float) -> Fahrenheit:
    """Convert a Celsius temperature to Fahrenheit."""
    return Fahrenheit(c * 9 / 5 + 32)


def f_to_c(f: float) -> Celsius:
    """Convert a Fahrenheit temperature to Celsius."""
    return Celsius((f - 32) * 5 / 9)


def c_to_k(c: float) -> Kelvin:
    """Convert a Celsius temperature to Kelvin."""
    return Kelvin(c + 273.15)


def main(argv: list[str] | None = None) -> int:
    """Interpret each argument as both Fahrenheit and Celsius and print conversions."""
    args = sys.argv[1:] if argv is None else argv
    for arg in args:
        try:
            t = float(arg)
        except ValueError:
            print(f"cf: invalid number {arg!r}", file=sys.stderr)
            return 1
        f = Fahrenheit(t)
        c = Celsius(t)
        print(f"{f} = {f_to_c(f)}, {c} = {c_to_f(c)}, {c} = {c_to_k(c)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())