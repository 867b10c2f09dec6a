"""Console prompts that keep asking until the answer can be used."""

from __future__ import annotations

import re
import sys
from typing import Callable, TextIO, TypeVar

from combatsim.logger import TextColor, TextStyle, ansi_string, clear_console
from combatsim.stats import USHORT_MAX

T = TypeVar("T")

INCORRECT_INPUT = "Incorrect input"
OUT_OF_RANGE = "Value out of range (unsigned short)"

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LLONG_MIN = -(2**63)
_LLONG_MAX = 2**63 - 1
_TRUE_ANSWERS = frozenset({"yes", "y", "true", "1"})
_FALSE_ANSWERS = frozenset({"no", "n", "false", "0"})


def parse_ushort(raw: str) -> int:
    """Parse a whole integer; negative values count by magnitude, capped at 65535."""
    match = _INTEGER.fullmatch(raw)
    if match is None:
        raise ValueError(INCORRECT_INPUT)
    value = int(match.group(1))
    if not _LLONG_MIN <= value <= _LLONG_MAX:
        raise ValueError(INCORRECT_INPUT)
    value = abs(value)
    if value > USHORT_MAX:
        raise ValueError(OUT_OF_RANGE)
    return value


def parse_bool(raw: str) -> bool:
    """Accept yes/y/true/1 and no/n/false/0, exactly as typed."""
    if raw in _TRUE_ANSWERS:
        return True
    if raw in _FALSE_ANSWERS:
        return False
    raise ValueError(INCORRECT_INPUT)


def _parse_text(raw: str) -> str:
    if not raw:
        raise ValueError(INCORRECT_INPUT)
    return raw


def _emit(text: str, out: TextIO | None) -> None:
    print(text, end="", file=sys.stdout if out is None else out, flush=True)


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    if not line:
        raise EOFError("input stream ended")
    return line.removesuffix("\n").removesuffix("\r")


def _ask(
    prompt: str,
    parse: Callable[[str], T],
    stream: TextIO | None,
    out: TextIO | None,
) -> T:
    source = sys.stdin if stream is None else stream
    while True:
        _emit(prompt + "\n", out)
        raw = _read_line(source)
        try:
            return parse(raw)
        except ValueError as exc:
            if out is None:
                clear_console()
            _emit(
                ansi_string(f"{exc}. Try again: \n", TextStyle.BLINK, TextColor.RED),
                out,
            )


def ask_text(prompt: str, stream: TextIO | None = None, out: TextIO | None = None) -> str:
    """Ask until a non-empty line is entered."""
    return _ask(prompt, _parse_text, stream, out)


def ask_ushort(prompt: str, stream: TextIO | None = None, out: TextIO | None = None) -> int:
    """Ask until a value in 0..65535 is entered."""
    return _ask(prompt, parse_ushort, stream, out)


def ask_bool(prompt: str, stream: TextIO | None = None, out: TextIO | None = None) -> bool:
    """Ask until a yes or no answer is entered."""
    return _ask(prompt, parse_bool, stream, out)