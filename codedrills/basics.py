"""Small first programs: arithmetic, control flow, data types and structs."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def add(a: int, b: int) -> int:
    """Sum of two 32-bit signed integers; overflow raises."""
    total = a + b
    if not _I32_MIN <= total <= _I32_MAX:
        raise OverflowError(f"{a} + {b} does not fit in 32 bits")
    return total


def firstname() -> str:
    """The first name used by the examples."""
    return "Jake"


def lastname() -> str:
    """The last name used by the examples."""
    return "Thomas"


@dataclass(frozen=True)
class Person:
    """A person's name, age and country."""

    name: str
    age: int
    country: str


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with whole-number sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("rectangle sides must not be negative")

    def area(self) -> int:
        """Width times height."""
        return self.width * self.height


def control_flow_lines(a: int = 99, limit: int = 5) -> list[str]:
    """Lines from a comparison with 1 and two counting loops up to ``limit``."""
    lines = [
        "a is greater than 1" if a > 1 else "a is less than or equal to 1"
    ]
    lines.extend(f"b: {b}" for b in range(limit))
    lines.extend(f"c: {c}" for c in range(limit))
    return lines


def datatype_lines() -> list[str]:
    """Lines showing integers, floats, booleans and characters in use."""
    a, b = 10, 100
    c, d = 10.5, 100.5
    e, f = True, False
    g, h = "A", "B"
    return [
        "Data types!",
        f"Sum of a and b: {a + b}",
        f"Product of c and d: {c * d}",
        f"Logical AND of e and f: {str(e and f).lower()}",
        f"Logical OR of e and f: {str(e or f).lower()}",
        f"Concatenation of g and h: {g}{h}",
    ]


def _hello() -> list[str]:
    return ["Hello, world!"]


def _test() -> list[str]:
    return ["Test file!", "Hello, world!"]


def _arithmetic() -> list[str]:
    return [f"Sum of 10 and 20: {add(10, 20)}"]


def _functions() -> list[str]:
    x = add(10, 20)
    return [f"Sum of 10 and 20: {x}", f"Sum of x and 30: {add(x, 30)}"]


def _names() -> list[str]:
    return [f"First name: {firstname()}", f"Last name: {lastname()}"]


def _structs() -> list[str]:
    example = Person(name="John Doe", age=30, country="USA")
    older = replace(example, age=31)
    rect = Rectangle(width=30, height=50)
    return [repr(older), f"The area of the rectangle is: {rect.area()}"]


_PROGRAMS: dict[str, Callable[[], list[str]]] = {
    "hello": _hello,
    "test": _test,
    "arithmetic": _arithmetic,
    "functions": _functions,
    "names": _names,
    "ctrlflow": control_flow_lines,
    "datatypes": datatype_lines,
    "structs": _structs,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the small example programs."""
    parser = argparse.ArgumentParser(
        prog="codedrills-basics", description="Small example programs."
    )
    parser.add_argument(
        "program", nargs="?", default="hello", choices=sorted(_PROGRAMS)
    )
    args = parser.parse_args(argv)
    for line in _PROGRAMS[args.program]():
        print(line)
    return 0