"""Weather reports and a division that fails in several ways."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Union


@dataclass(frozen=True)
class Sunny:
    """A sunny day at a temperature in degrees Celsius."""

    temperature: float


@dataclass(frozen=True)
class Rainy:
    """A rainy day with the rainfall in millimetres."""

    rainfall: int


@dataclass(frozen=True)
class Cloudy:
    """A cloudy day."""


@dataclass(frozen=True)
class Snowy:
    """A snowy day with the snowfall in centimetres."""

    snowfall: float


Weather = Union[Sunny, Rainy, Cloudy, Snowy]


def _format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` on whole values."""
    if isinstance(value, int):
        return str(value)
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def describe_weather(weather: Weather) -> str:
    """One sentence describing ``weather``."""
    match weather:
        case Sunny(temperature=temperature):
            return (
                "Today is sunny with a temperature of "
                f"{_format_number(temperature)}°C"
            )
        case Rainy(rainfall=rainfall):
            return f"Today is rainy with {_format_number(rainfall)}mm of rain"
        case Cloudy():
            return "Today is cloudy"
        case Snowy(snowfall=snowfall):
            return f"Today is snowy with {_format_number(snowfall)}cm of snow"
    raise TypeError(f"not a weather value: {weather!r}")


class MathError(Exception):
    """Base class for failures of :func:`divide`."""


class DivisionByZero(MathError):
    """The denominator was zero."""


class IncorrectInput(MathError):
    """A negative operand was given."""


class UnknownError(MathError):
    """The division failed for no particular reason."""


class _CoinSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def divide(a: float, b: float, rng: Optional[_CoinSource] = None) -> float:
    """Divide ``a`` by ``b``.

    Raises :class:`DivisionByZero` for a zero denominator,
    :class:`IncorrectInput` for a negative operand, and otherwise
    :class:`UnknownError` whenever a coin flip from ``rng`` comes up 0.
    """
    if b == 0.0:
        raise DivisionByZero(f"cannot divide {a} by zero")
    if a < 0.0 or b < 0.0:
        raise IncorrectInput(f"negative operands are not supported: {a}, {b}")
    coin = (rng if rng is not None else random).randint(0, 1)
    if coin == 0:
        raise UnknownError("the division failed")
    return a / b


def describe_division(
    a: float, b: float, rng: Optional[_CoinSource] = None
) -> str:
    """The quotient as text, or a message naming the error that occurred."""
    try:
        return _format_number(divide(a, b, rng))
    except DivisionByZero:
        return "DivisionByZero Detected"
    except IncorrectInput:
        return "IncorrectInput Detected"
    except MathError:
        return "Unknown Error Detected"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print two weather reports and three attempted divisions."""
    parser = argparse.ArgumentParser(
        prog="codedrills-weather", description="Weather and division demo."
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    for weather in (Sunny(43.2), Rainy(10)):
        print(describe_weather(weather))
    for a, b in ((10.0, 0.0), (10.0, 2.0), (-10.0, 2.0)):
        print(describe_division(a, b, rng))
    return 0