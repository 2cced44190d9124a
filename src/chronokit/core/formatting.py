#!/usr/bin/env python
"""Rendering temporal values as text and strict parsing of text.

Patterns use conventional date/time letters (see chronokit.utils.time.patterns)
and are validated before use: a malformed pattern raises FormatError, text
that does not match a valid pattern raises ParseError.

Parsing is strict:
- the whole text must match the pattern
- the pattern must contain year, month and day fields (there is no implicit
  "today"); missing time-of-day fields default to midnight
- the matched fields must form a real date-time (2021-02-30 is rejected)
- fixed-width fields need all their digits ("21" does not match yyyy, "9"
  does not match MM)

Example:
    >>> from chronokit.core.formatting import format_zoned, parse_zoned
    >>> text = format_zoned(parse_zoned("2021-09-06 08:05 America/New_York", "yyyy-MM-dd HH:mm VV"), "dd/MM/yyyy HH:mmXXX")
    >>> text
    '06/09/2021 08:05-04:00'
"""

import re
from datetime import date, datetime
from typing import Any

import pendulum

from chronokit.core.conversion import as_pendulum, instant_to_zoned
from chronokit.utils.config import get_settings
from chronokit.utils.for_core.time_exceptions import InvalidArgumentError, ParseError
from chronokit.utils.loguru_setup import logger
from chronokit.utils.time.patterns import CompiledPattern, Segment, compile_pattern
from chronokit.utils.time.values import EpochDate, Instant, require_epoch_date, require_instant, require_local
from chronokit.utils.time.zones import ZoneLike, resolve_zone

_FORMATTER = pendulum.Formatter()

# A standalone "Z" where an offset is expected
_ZULU = re.compile(r"(?<![A-Za-z])Z(?![A-Za-z])")
_BRACKETED = re.compile(r"\[(.)\]")

__all__ = [
    "format_epoch_date",
    "format_instant",
    "format_local",
    "format_zoned",
    "parse_date",
    "parse_epoch_date",
    "parse_instant",
    "parse_local",
    "parse_zoned",
]


def _render(zoned: pendulum.DateTime, pattern: str) -> str:
    compiled = compile_pattern(pattern)
    return zoned.format(compiled.render_format(zoned), locale=get_settings().locale)


def format_zoned(zoned: datetime, pattern: str) -> str:
    """Render a zoned date-time.

    Args:
        zoned: Zone-aware date-time to render
        pattern: Format pattern, e.g. "yyyy-MM-dd'T'HH:mm:ssXXX"

    Returns:
        The rendered text

    Raises:
        FormatError: If the pattern is malformed
        InvalidArgumentError: If zoned is not zone-aware
    """
    return _render(as_pendulum(zoned), pattern)


def format_local(local: datetime, zone: ZoneLike, pattern: str) -> str:
    """Render a naive local date-time read off the wall clock of zone.

    The wall-clock fields render exactly as given, even when they fall in a
    daylight-saving gap of zone. Offset letters render the offset of the
    instant local_to_zoned would pick: the pre-transition offset in a gap,
    standard time in an overlap.
    """
    local = require_local(local)
    tz = resolve_zone(zone)
    wall = datetime(local.year, local.month, local.day, local.hour, local.minute, local.second, local.microsecond)
    # fold=1 selects the later occurrence of an overlapping wall time
    fold = 1 if tz.utcoffset(wall) > tz.utcoffset(wall.replace(fold=1)) else 0
    bound = pendulum.DateTime(
        wall.year,
        wall.month,
        wall.day,
        wall.hour,
        wall.minute,
        wall.second,
        wall.microsecond,
        tzinfo=tz,
        fold=fold,
    )
    return _render(bound, pattern)


def format_epoch_date(date: EpochDate, zone: ZoneLike, pattern: str) -> str:
    """Render a legacy epoch value as seen on the wall clock of zone."""
    return _render(instant_to_zoned(require_epoch_date(date).to_instant(), zone), pattern)


def format_instant(instant: Instant, zone: ZoneLike, pattern: str) -> str:
    """Render an instant as seen on the wall clock of zone."""
    return _render(instant_to_zoned(require_instant(instant), zone), pattern)


def _field_value(segment: Segment, parts: dict[str, Any]) -> int:
    """The number a fixed-width letter run read, as it appears in the text."""
    if segment.field == "fraction":
        return parts["microsecond"] // 10 ** (6 - len(segment.run))
    if segment.field == "year" and len(segment.run) == 2:
        return parts["year"] % 100
    if segment.run == "hh":
        return parts["hour"] % 12 or 12
    return parts[segment.field]


def _field_widths_match(text: str, compiled: CompiledPattern, parts: dict[str, Any], now: pendulum.DateTime, locale: str) -> bool:
    """Check that every fixed-width run in the pattern read all of its digits.

    pendulum accepts one digit for MM, dd, HH and friends and one to four for
    YYYY. Any run that read a number shorter than its width is replaced with
    that number zero-padded; the text only matches if it still parses against
    the padded format.
    """
    pieces: list[str] = []
    padded = False
    tokens_left = False
    for segment in compiled.segments:
        if segment.min_width:
            value = _field_value(segment, parts)
            if value < 10 ** (segment.min_width - 1):
                pieces.append(f"{value:0{segment.min_width}d}")
                padded = True
                continue
        pieces.append(segment.text)
        tokens_left = tokens_left or segment.field is not None

    if not padded:
        return True

    check_format = "".join(pieces)
    if not tokens_left:
        return text == _BRACKETED.sub(r"\1", check_format)
    try:
        _FORMATTER.parse(text, check_format, now, locale=locale)
    except ValueError:
        return False
    return True


def _parse(text: str, pattern: str, zone: ZoneLike | None = None) -> tuple[pendulum.DateTime, CompiledPattern]:
    """Parse text with pendulum after validating the pattern.

    Returns the parsed value (in the zone the text encodes, else zone or UTC)
    together with the compiled pattern.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(
            f"Text must be a string, got {type(text).__name__}",
            details={"argument": "text", "type": type(text).__name__},
        )

    compiled = compile_pattern(pattern).require_parseable()
    if not compiled.has_date:
        raise ParseError(
            f"Pattern {pattern!r} must contain year, month and day fields to parse a date",
            details={"text": text, "pattern": pattern, "fields": sorted(compiled.fields)},
        )

    tz = resolve_zone(zone) if zone is not None else pendulum.UTC
    locale = get_settings().locale
    source = _ZULU.sub("+00:00", text) if compiled.accepts_zulu else text
    try:
        now = pendulum.now(tz)
        parts = _FORMATTER.parse(source, compiled.pendulum_format, now, locale=locale)
        widths_match = _field_widths_match(source, compiled, parts, now, locale)
        if parts["tz"] is None:
            parts["tz"] = tz
        parsed = pendulum.datetime(**parts)
    except (ValueError, re.error) as e:
        raise ParseError(
            f"Text {text!r} could not be parsed with pattern {pattern!r}: {e}",
            details={"text": text, "pattern": pattern},
        ) from e

    if not widths_match:
        raise ParseError(
            f"Text {text!r} could not be parsed with pattern {pattern!r}: a fixed-width field is missing digits",
            details={"text": text, "pattern": pattern},
        )

    logger.debug(f"Parsed {text!r} with pattern {pattern!r} to {parsed.isoformat()}")
    return parsed, compiled


def parse_local(text: str, pattern: str) -> pendulum.DateTime:
    """Parse text into a naive local date-time.

    The wall-clock fields are taken as written; a zone or offset in the text
    is read but not applied.
    """
    parsed, _ = _parse(text, pattern)
    return parsed.naive()


def parse_zoned(text: str, pattern: str) -> pendulum.DateTime:
    """Parse text into a zoned date-time.

    Raises:
        ParseError: If the pattern encodes neither a zone id nor an offset,
            or the text does not match the pattern
        FormatError: If the pattern is malformed
    """
    compiled = compile_pattern(pattern)
    if not compiled.has_zone:
        raise ParseError(
            f"Pattern {pattern!r} has no zone or offset field; cannot obtain a zoned date-time",
            details={"text": text, "pattern": pattern},
        )
    parsed, _ = _parse(text, pattern)
    return parsed


def parse_instant(text: str, pattern: str) -> Instant:
    """Parse text into an instant.

    The zone or offset in the text is used when the pattern has one; otherwise
    the text is read on the wall clock of the configured default parse zone
    (UTC unless changed with chronokit.configure).
    """
    parsed, _ = _parse(text, pattern, zone=get_settings().default_parse_zone)
    return Instant.of_datetime(parsed)


def parse_epoch_date(text: str, pattern: str) -> EpochDate:
    """Parse text into a legacy epoch value (same zone rule as parse_instant)."""
    return EpochDate(parse_instant(text, pattern).to_epoch_milli())


def parse_date(text: str, pattern: str) -> date:
    """Parse text into a calendar date, dropping any time-of-day fields."""
    parsed, _ = _parse(text, pattern)
    return parsed.date()
