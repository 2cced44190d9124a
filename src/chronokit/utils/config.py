#!/usr/bin/env python
"""Centralized configuration for chronokit.

Constants used across the conversion and calendar modules, plus the
process-wide runtime settings (default parse zone, formatting locale).

Environment variables:
- CHRONOKIT_DEFAULT_ZONE: zone assumed when parsed text carries no zone (default "UTC")
- CHRONOKIT_LOCALE: pendulum locale used for month/weekday names (default "en")
"""

import os
from typing import Any, Final

import attrs
from pendulum.locales.locale import Locale

from chronokit.utils.for_core.time_exceptions import InvalidArgumentError
from chronokit.utils.loguru_setup import logger

# Time unit constants
MICROS_PER_MILLI: Final = 1_000
MILLIS_PER_SECOND: Final = 1_000
MICROS_PER_SECOND: Final = 1_000_000
DAYS_PER_WEEK: Final = 7

# U.S. presidential election rule
ELECTION_MONTH: Final = 11  # November
ELECTION_CYCLE_YEARS: Final = 4  # Simplified eligibility: year divisible by 4

# Logging
LOG_LEVELS: Final[list[str]] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Defaults
DEFAULT_PARSE_ZONE: Final = "UTC"
DEFAULT_LOCALE: Final = "en"


def _validate_zone(_instance: Any, attribute: attrs.Attribute, value: str) -> None:
    """Reject zone names that do not resolve."""
    from chronokit.utils.time.zones import resolve_zone

    resolve_zone(value)


def _validate_locale(_instance: Any, attribute: attrs.Attribute, value: str) -> None:
    """Reject locales pendulum does not ship."""
    try:
        Locale.load(value)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Unsupported locale: {value!r}",
            details={"argument": attribute.name, "value": value},
        ) from e


@attrs.define(slots=True, frozen=True)
class ChronokitSettings:
    """Runtime settings for conversion and formatting.

    Attributes:
        default_parse_zone: Zone assumed by parse_instant/parse_epoch_date when
            the parsed text carries no zone or offset. Default is "UTC".
        locale: pendulum locale used for month and weekday names. Default is "en".
    """

    default_parse_zone: str = attrs.field(
        factory=lambda: os.getenv("CHRONOKIT_DEFAULT_ZONE", DEFAULT_PARSE_ZONE),
        validator=[attrs.validators.instance_of(str), _validate_zone],
    )
    locale: str = attrs.field(
        factory=lambda: os.getenv("CHRONOKIT_LOCALE", DEFAULT_LOCALE),
        validator=[attrs.validators.instance_of(str), _validate_locale],
        converter=str.lower,
    )


_settings = ChronokitSettings()


def get_settings() -> ChronokitSettings:
    """Return the active runtime settings."""
    return _settings


def configure(**overrides: Any) -> ChronokitSettings:
    """Replace the active runtime settings with the given overrides.

    Args:
        **overrides: Field values to change (default_parse_zone, locale)

    Returns:
        The new active settings

    Raises:
        InvalidArgumentError: If a key is unknown or a value is invalid

    Example:
        configure(default_parse_zone="Europe/Paris")
        configure(locale="fr")
    """
    global _settings

    known = {field.name for field in attrs.fields(ChronokitSettings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidArgumentError(
            f"Unknown settings: {', '.join(unknown)}",
            details={"unknown": unknown, "known": sorted(known)},
        )

    try:
        new_settings = attrs.evolve(_settings, **overrides)
    except TypeError as e:
        raise InvalidArgumentError(f"Invalid settings value: {e}", details={"overrides": overrides}) from e

    _settings = new_settings
    logger.debug(f"Settings updated: {_settings}")
    return _settings


def reset_settings() -> ChronokitSettings:
    """Restore settings from the environment and built-in defaults."""
    global _settings

    _settings = ChronokitSettings()
    return _settings
