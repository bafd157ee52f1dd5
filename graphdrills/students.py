"""Student records and a small overloaded combine routine, with a console demo."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Student:
    """A student with an identifier, a CGPA and a name."""

    id: int = 0
    cgpa: float = 0.0
    name: str = ""


def combine(x, y):
    """Add integers, concatenate strings, average floats."""
    if type(x) is not type(y):
        raise TypeError(f"cannot combine {type(x).__name__} with {type(y).__name__}")
    if isinstance(x, bool):
        raise TypeError("cannot combine bool values")
    if isinstance(x, int):
        return x + y
    if isinstance(x, str):
        return x + y
    if isinstance(x, float):
        return (x + y) / 2
    raise TypeError(f"cannot combine {type(x).__name__} values")


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing value for {what}") from None


def main(argv=None) -> int:
    """Print a fixed student, read a second one from standard input, combine them."""
    parser = argparse.ArgumentParser(description="Student record demo")
    parser.parse_args(argv)

    yordanos = Student(id=489, name="yordanos", cgpa=4.0)
    print(f"your id is: {yordanos.id}")
    print(f"your name is: {yordanos.name}")
    print(f"your cgpa is: {yordanos.cgpa:g}")

    tokens = _tokens(sys.stdin)
    elshu = Student()
    try:
        print("enter elshu's name: ")
        elshu.name = _next(tokens, "name")
        print(f"elshu's name is: {elshu.name}")
        print("enter elshu's id: ")
        elshu.id = int(_next(tokens, "id"))
        print(f"elshu's id is: {elshu.id}")
        print("enter elshu's cgpa: ")
        elshu.cgpa = float(_next(tokens, "cgpa"))
        print(f"elshu's cgpa is: {elshu.cgpa:g}")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    print(combine(elshu.id, yordanos.id))
    print(f"{elshu.cgpa + yordanos.cgpa:g}")
    print(combine("hello", " I'm shalom harloy"))

    age = 20
    print(f"yordi::assignment is: {age}")
    print(f"elshu::assignment is: {elshu.cgpa:g}")
    return 0