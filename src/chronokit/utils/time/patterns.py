#!/usr/bin/env python
"""Format-pattern compiler.

Callers describe text layouts with conventional date/time pattern letters
(yyyy-MM-dd HH:mm:ss, with quoted literals such as 'T'). pendulum uses its own
token set (YYYY-MM-DD HH:mm:ss) and silently passes unknown letters through,
so patterns are validated and translated here before pendulum sees them.

Supported letters (count -> meaning):
    y, u   year; yy is the last two digits, yyy and yyyy are zero-padded
           to 3 and 4 digits, y is unpadded
    M, L   month; M, MM numeric, MMM short name, MMMM full name
    d      day of month (d, dd)
    D      day of year; D unpadded, DD and DDD padded to 2 and 3  format only
    Q, q   quarter (Q)                                  format only
    E      weekday name; E-EEE short, EEEE full         format only
    a      AM/PM marker
    H      hour 0-23 (H, HH)
    h      hour 1-12 (h, hh)
    k      hour 1-24, midnight is 24 (k, kk)            format only
    m      minute (m, mm)
    s      second (s, ss)
    S      fraction of second, 1 to 6 digits
    VV     zone id (America/New_York)
    z      zone abbreviation (z-zzz, format only); zone id (zzzz)
    X, x   offset: +0000 for counts 1, 2, 4; +00:00 for counts 3, 5
    Z      offset: +0000 for counts 1-3; +00:00 for count 5

A doubled numeric letter (yy, MM, dd, HH, hh, mm, ss) and a run of S read
exactly that many digits; yyy and yyyy read at least 3 and 4. X runs and ZZZZZ
also read "Z" as the UTC offset.

Text between single quotes is literal, '' is a literal quote. Any other
non-letter character is literal, except the reserved characters [ ] { } # \\.
"""

from __future__ import annotations

import functools
from datetime import datetime
from typing import Callable, Final

import attrs

from chronokit.utils.for_core.time_exceptions import FormatError, InvalidArgumentError
from chronokit.utils.loguru_setup import logger

_YEAR = {1: ("YYYY", True), 2: ("YY", True), 3: ("YYYY", True), 4: ("YYYY", True)}
_MONTH = {1: ("M", True), 2: ("MM", True), 3: ("MMM", True), 4: ("MMMM", True)}
_OFFSET_X = {1: ("ZZ", True), 2: ("ZZ", True), 3: ("Z", True), 4: ("ZZ", True), 5: ("Z", True)}

# letter -> (field, {count: (pendulum token, parseable)})
PATTERN_LETTERS: Final[dict[str, tuple[str, dict[int, tuple[str, bool]]]]] = {
    "y": ("year", _YEAR),
    "u": ("year", _YEAR),
    "M": ("month", _MONTH),
    "L": ("month", _MONTH),
    "d": ("day", {1: ("D", True), 2: ("DD", True)}),
    "D": ("day_of_year", {1: ("DDD", False), 2: ("DDD", False), 3: ("DDDD", False)}),
    "Q": ("quarter", {1: ("Q", False)}),
    "q": ("quarter", {1: ("Q", False)}),
    "E": ("weekday", {1: ("ddd", False), 2: ("ddd", False), 3: ("ddd", False), 4: ("dddd", False)}),
    "a": ("am_pm", {1: ("A", True)}),
    "H": ("hour", {1: ("H", True), 2: ("HH", True)}),
    "h": ("hour", {1: ("h", True), 2: ("hh", True)}),
    "k": ("hour", {1: ("k", False), 2: ("kk", False)}),
    "m": ("minute", {1: ("m", True), 2: ("mm", True)}),
    "s": ("second", {1: ("s", True), 2: ("ss", True)}),
    "S": ("fraction", {count: ("S" * count, True) for count in range(1, 7)}),
    "V": ("zone", {2: ("z", True)}),
    "z": ("zone", {1: ("zz", False), 2: ("zz", False), 3: ("zz", False), 4: ("z", True)}),
    "X": ("offset", _OFFSET_X),
    "x": ("offset", _OFFSET_X),
    "Z": ("offset", {1: ("ZZ", True), 2: ("ZZ", True), 3: ("ZZ", True), 5: ("Z", True)}),
}

# Runs pendulum renders differently (or not at all), filled in as digits before formatting
_RENDERED_RUNS: Final[dict[str, Callable[[datetime], str]]] = {
    "k": lambda dt: str(dt.hour or 24),
    "kk": lambda dt: f"{dt.hour or 24:02d}",
    "DD": lambda dt: f"{dt.timetuple().tm_yday:02d}",
    "yy": lambda dt: f"{dt.year % 100:02d}",
    "yyy": lambda dt: f"{dt.year:03d}",
    "yyyy": lambda dt: f"{dt.year:04d}",
    "uu": lambda dt: f"{dt.year % 100:02d}",
    "uuu": lambda dt: f"{dt.year:03d}",
    "uuuu": lambda dt: f"{dt.year:04d}",
}

_FIXED_WIDTH_FIELDS: Final = frozenset({"year", "month", "day", "hour", "minute", "second"})

RESERVED_CHARACTERS: Final = frozenset("[]{}#\\")
DATE_FIELDS: Final = frozenset({"year", "month", "day"})
ZONE_FIELDS: Final = frozenset({"zone", "offset"})

__all__ = [
    "DATE_FIELDS",
    "PATTERN_LETTERS",
    "ZONE_FIELDS",
    "CompiledPattern",
    "Segment",
    "compile_pattern",
]


@attrs.frozen
class Segment:
    """One letter run or literal piece of a compiled pattern.

    Attributes:
        text: pendulum format text (a token, or literal text pendulum leaves alone)
        run: The letter run as written; empty for literals
        field: Field the run renders or reads; None for literals
        parseable: Whether pendulum can read the run back
        min_width: Fewest digits the run accepts when parsing; 0 for no minimum
    """

    text: str
    run: str = ""
    field: str | None = None
    parseable: bool = True
    min_width: int = 0


@attrs.frozen
class CompiledPattern:
    """A validated pattern translated to pendulum format tokens.

    Attributes:
        source: The pattern as written by the caller
        segments: Letter runs and literals in pattern order
    """

    source: str
    segments: tuple[Segment, ...]

    @property
    def pendulum_format(self) -> str:
        """Equivalent pendulum format string, used for parsing."""
        return "".join(segment.text for segment in self.segments)

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(segment.field for segment in self.segments if segment.field)

    @property
    def format_only(self) -> tuple[str, ...]:
        """Letter runs that can be rendered but not parsed."""
        return tuple(segment.run for segment in self.segments if segment.field and not segment.parseable)

    @property
    def has_date(self) -> bool:
        return DATE_FIELDS <= self.fields

    @property
    def has_zone(self) -> bool:
        return bool(ZONE_FIELDS & self.fields)

    @property
    def accepts_zulu(self) -> bool:
        """Whether an offset field in the pattern reads "Z" as UTC."""
        return any(segment.run[:1] == "X" or segment.run == "ZZZZZ" for segment in self.segments)

    def render_format(self, dt: datetime) -> str:
        """pendulum format string for dt, with the runs pendulum cannot render filled in."""
        return "".join(
            _RENDERED_RUNS[segment.run](dt) if segment.run in _RENDERED_RUNS else segment.text
            for segment in self.segments
        )

    def require_parseable(self) -> CompiledPattern:
        """Raise FormatError if any letter run in the pattern cannot be parsed."""
        if self.format_only:
            raise FormatError(
                f"Pattern {self.source!r} contains letters that cannot be parsed: {', '.join(self.format_only)}",
                details={"pattern": self.source, "format_only": list(self.format_only)},
            )
        return self


def _is_pattern_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _literal(text: str) -> str:
    """Render literal text so pendulum neither tokenizes nor escapes it."""
    return "".join(f"[{char}]" if _is_pattern_letter(char) else char for char in text)


def _min_width(field: str, count: int) -> int:
    if field == "fraction":
        return count
    if field == "year" and count >= 2:
        return count
    if field in _FIXED_WIDTH_FIELDS and count == 2:
        return 2
    return 0


def _pattern_error(pattern: str, position: int, reason: str) -> FormatError:
    return FormatError(
        f"Invalid pattern {pattern!r} at position {position}: {reason}",
        details={"pattern": pattern, "position": position, "reason": reason},
    )


@functools.lru_cache(maxsize=256)
def _compile(pattern: str) -> CompiledPattern:
    segments: list[Segment] = []
    previous_token = ""
    index = 0

    while index < len(pattern):
        char = pattern[index]

        if char == "'":
            end = index + 1
            literal: list[str] = []
            while True:
                if end >= len(pattern):
                    raise _pattern_error(pattern, index, "unterminated quoted literal")
                if pattern[end] == "'":
                    if end + 1 < len(pattern) and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1

            text = "'" if end == index + 1 else "".join(literal)
            reserved = RESERVED_CHARACTERS.intersection(text)
            if reserved:
                raise _pattern_error(pattern, index, f"character {sorted(reserved)[0]!r} cannot be used in a literal")
            segments.append(Segment(_literal(text)))
            previous_token = ""
            index = end + 1
            continue

        if char in RESERVED_CHARACTERS:
            raise _pattern_error(pattern, index, f"reserved character {char!r}")

        if not _is_pattern_letter(char):
            segments.append(Segment(char))
            previous_token = ""
            index += 1
            continue

        run_end = index
        while run_end < len(pattern) and pattern[run_end] == char:
            run_end += 1
        count = run_end - index
        run = char * count

        if char not in PATTERN_LETTERS:
            raise _pattern_error(pattern, index, f"unsupported pattern letter {char!r}")

        field, counts = PATTERN_LETTERS[char]
        if count not in counts:
            raise _pattern_error(pattern, index, f"invalid number of pattern letters: {run!r}")

        token, parseable = counts[count]
        if previous_token and previous_token[-1] == token[0]:
            raise _pattern_error(pattern, index, f"{run!r} cannot directly follow the previous field")
        segments.append(Segment(token, run=run, field=field, parseable=parseable, min_width=_min_width(field, count)))
        previous_token = token
        index = run_end

    compiled = CompiledPattern(source=pattern, segments=tuple(segments))
    logger.debug(f"Compiled pattern {pattern!r} to pendulum format {compiled.pendulum_format!r}")
    return compiled


def compile_pattern(pattern: str) -> CompiledPattern:
    """Validate a format pattern and translate it to pendulum tokens.

    Args:
        pattern: Pattern such as "yyyy-MM-dd'T'HH:mm:ss.SSSXXX"

    Returns:
        CompiledPattern (cached per pattern string)

    Raises:
        InvalidArgumentError: If pattern is not a string
        FormatError: If the pattern is malformed
    """
    if not isinstance(pattern, str):
        raise InvalidArgumentError(
            f"Pattern must be a string, got {type(pattern).__name__}",
            details={"argument": "pattern", "type": type(pattern).__name__},
        )
    return _compile(pattern)
