#!/usr/bin/env python3
"""Unit tests for the format-pattern compiler."""

import pytest

from chronokit.utils.for_core.time_exceptions import FormatError, InvalidArgumentError
from chronokit.utils.time.patterns import compile_pattern


class TestTranslation:
    """Pattern letters map onto pendulum tokens."""

    @pytest.mark.parametrize(
        "pattern, expected",
        [
            ("yyyy-MM-dd", "YYYY-MM-DD"),
            ("yy/M/d", "YY/M/D"),
            ("uuuu", "YYYY"),
            ("HH:mm:ss.SSS", "HH:mm:ss.SSS"),
            ("hh:mm a", "hh:mm A"),
            ("EEEE", "dddd"),
            ("EEE", "ddd"),
            ("MMMM", "MMMM"),
            ("VV", "z"),
            ("zzzz", "z"),
            ("z", "zz"),
            ("XXX", "Z"),
            ("xx", "ZZ"),
            ("Z", "ZZ"),
            ("ZZZZZ", "Z"),
            ("D", "DDD"),
            ("Q", "Q"),
        ],
    )
    def test_tokens(self, pattern, expected):
        assert compile_pattern(pattern).pendulum_format == expected

    def test_quoted_letters_are_bracketed_one_by_one(self):
        assert compile_pattern("yyyy'T'HH").pendulum_format == "YYYY[T]HH"
        assert compile_pattern("'at' H").pendulum_format == "[a][t] H"

    def test_doubled_quote_is_a_literal_quote(self):
        assert compile_pattern("H''mm").pendulum_format == "H'mm"
        assert compile_pattern("'o''clock'").pendulum_format == "[o]'[c][l][o][c][k]"

    def test_non_letters_pass_through(self):
        assert compile_pattern("dd/MM/yyyy, HH:mm").pendulum_format == "DD/MM/YYYY, HH:mm"

    def test_compilation_is_cached(self):
        assert compile_pattern("yyyy-MM-dd") is compile_pattern("yyyy-MM-dd")


class TestFields:
    """Compiled patterns know which fields they read."""

    def test_date_and_zone_fields(self):
        compiled = compile_pattern("yyyy-MM-dd HH:mm VV")
        assert compiled.fields == frozenset({"year", "month", "day", "hour", "minute", "zone"})
        assert compiled.has_date
        assert compiled.has_zone

    def test_offset_counts_as_zone(self):
        assert compile_pattern("yyyy-MM-dd XXX").has_zone

    def test_time_only_pattern(self):
        compiled = compile_pattern("HH:mm")
        assert not compiled.has_date
        assert not compiled.has_zone

    def test_format_only_letters(self):
        compiled = compile_pattern("EEE, d MMM yyyy (D) z")
        assert compiled.format_only == ("EEE", "D", "z")
        with pytest.raises(FormatError):
            compiled.require_parseable()

    def test_parseable_pattern_passes_through(self):
        compiled = compile_pattern("yyyy-MM-dd")
        assert compiled.require_parseable() is compiled

    def test_clock_hour_is_format_only(self):
        assert compile_pattern("kk:mm").format_only == ("kk",)


class TestSegments:
    """Per-run metadata used for rendering and strict parsing."""

    @pytest.mark.parametrize(
        "pattern, widths",
        [
            ("yyyy-MM-dd", [4, 2, 2]),
            ("yy/M/d", [2, 0, 0]),
            ("y-MM", [0, 2]),
            ("yyy", [3]),
            ("HH:mm:ss.SSS", [2, 2, 2, 3]),
            ("hh a", [2, 0]),
            ("H:m:s.S", [0, 0, 0, 1]),
            ("MMM dd", [0, 2]),
        ],
    )
    def test_min_widths(self, pattern, widths):
        compiled = compile_pattern(pattern)
        assert [segment.min_width for segment in compiled.segments if segment.field] == widths

    def test_literals_carry_no_field(self):
        segments = compile_pattern("yyyy'T'").segments
        assert segments[1].field is None
        assert segments[1].text == "[T]"
        assert segments[1].min_width == 0

    @pytest.mark.parametrize("pattern", ["yyyy-MM-dd'T'HH:mmXXX", "HH:mmX", "HH:mmZZZZZ"])
    def test_offset_runs_accepting_zulu(self, pattern):
        assert compile_pattern(pattern).accepts_zulu

    @pytest.mark.parametrize("pattern", ["yyyy-MM-dd HH:mm", "HH:mm Z", "HH:mmxxx", "HH:mm VV"])
    def test_runs_without_zulu(self, pattern):
        assert not compile_pattern(pattern).accepts_zulu


class TestMalformed:
    """Malformed patterns report the offending position."""

    @pytest.mark.parametrize(
        "pattern, position, reason",
        [
            ("yyyy-MM-dd G", 11, "unsupported pattern letter 'G'"),
            ("yyyyy", 0, "invalid number of pattern letters: 'yyyyy'"),
            ("yyyy-'MM", 5, "unterminated quoted literal"),
            ("yyyy[MM]", 4, "reserved character '['"),
            ("HH{mm}", 2, "reserved character '{'"),
            ("'a#b'", 0, "character '#' cannot be used in a literal"),
            ("dD", 1, "'D' cannot directly follow the previous field"),
            ("SSSSSSS", 0, "invalid number of pattern letters: 'SSSSSSS'"),
            ("V", 0, "invalid number of pattern letters: 'V'"),
        ],
    )
    def test_rejected(self, pattern, position, reason):
        with pytest.raises(FormatError) as exc_info:
            compile_pattern(pattern)
        assert exc_info.value.details == {"pattern": pattern, "position": position, "reason": reason}

    def test_adjacent_distinct_fields_are_allowed(self):
        assert compile_pattern("yyyyMMdd").pendulum_format == "YYYYMMDD"

    def test_non_string_pattern(self):
        with pytest.raises(InvalidArgumentError):
            compile_pattern(None)
