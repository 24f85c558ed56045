"""Interactive menu that prints shapes and characters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from asciidraw.chars import render_5x7, render_8x12
from asciidraw.shapes import arrow, square, triangle

PROMPT = (
    "Select which shape you want to print (Triangle = t, Square = s, "
    "Chars(font 5x7) = c, Chars(font 8x12) = d, Arrow = a) or 'q' to quit\n> "
)

_SAMPLE_CHARS = "abc"

_OPTIONS: dict[str, tuple[str, Callable[[], str]]] = {
    "t": ("You selected triangle:", lambda: triangle(5, 7)),
    "s": ("You selected square:", lambda: square(5, 5)),
    "a": ("You selected arrow", arrow),
    "c": (
        "You selected chars with font 5x7:",
        lambda: "".join(render_5x7(ch) for ch in _SAMPLE_CHARS),
    ),
    "d": (
        "You selected chars with font 8x12:",
        lambda: "".join(render_8x12(ch) for ch in _SAMPLE_CHARS),
    ),
}


def _next_choice(stdin: TextIO) -> str:
    """Return the next non-newline character, or '' at end of input."""
    while True:
        ch = stdin.read(1)
        if ch != "\n":
            return ch


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop until 'q' is chosen or input ends."""
    stdout.write("Welcome!\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        choice = _next_choice(stdin)
        if not choice:
            return
        if choice == "q":
            stdout.write("Bye!\n")
            return
        option = _OPTIONS.get(choice)
        if option is None:
            stdout.write(f"Unrecognized option '{choice}', please try again!\n")
            continue
        message, render = option
        stdout.write(message + "\n")
        stdout.write(render())


def main(argv: list[str] | None = None) -> int:
    """Entry point for the interactive drawing menu."""
    parser = argparse.ArgumentParser(
        prog="asciidraw", description="Print shapes and characters as asterisk art."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())