"""Configuration management. All settings from environment variables with sensible defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from booking_analytics.periods import MONDAY, SUNDAY
from booking_analytics.schema import COMPARE_MODES, COMPARE_NONE, RangeKind

logger = logging.getLogger(__name__)

_WEEK_STARTS = {"sunday": SUNDAY, "monday": MONDAY}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


@dataclass(frozen=True)
class AnalyticsConfig:
    week_start: int = SUNDAY
    default_range: str = RangeKind.DAY.value
    compare_mode: str = COMPARE_NONE
    fetch_limit: int = 10000  # events requested from the API per dashboard load
    log_level: str = "INFO"


def load_config() -> AnalyticsConfig:
    """Load configuration from the environment (and a local ``.env`` file)."""

    load_dotenv()

    week_start_name = os.getenv("BOOKING_ANALYTICS_WEEK_START", "sunday").strip().lower()
    if week_start_name not in _WEEK_STARTS:
        raise ValueError(f"Invalid BOOKING_ANALYTICS_WEEK_START '{week_start_name}' (valid: sunday, monday)")

    default_range = os.getenv("BOOKING_ANALYTICS_DEFAULT_RANGE", RangeKind.DAY.value).strip().lower()
    if default_range not in {kind.value for kind in RangeKind}:
        raise ValueError(f"Invalid BOOKING_ANALYTICS_DEFAULT_RANGE '{default_range}'")

    compare_mode = os.getenv("BOOKING_ANALYTICS_COMPARE_MODE", COMPARE_NONE).strip().lower()
    if compare_mode not in COMPARE_MODES:
        raise ValueError(
            f"Invalid BOOKING_ANALYTICS_COMPARE_MODE '{compare_mode}' (valid: {', '.join(COMPARE_MODES)})"
        )

    try:
        fetch_limit = int(os.getenv("BOOKING_ANALYTICS_FETCH_LIMIT", "10000"))
    except ValueError as exc:
        raise ValueError("BOOKING_ANALYTICS_FETCH_LIMIT must be an integer") from exc

    log_level = os.getenv("BOOKING_ANALYTICS_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Invalid BOOKING_ANALYTICS_LOG_LEVEL '{log_level}' (valid: {', '.join(_LOG_LEVELS)})")

    config = AnalyticsConfig(
        week_start=_WEEK_STARTS[week_start_name],
        default_range=default_range,
        compare_mode=compare_mode,
        fetch_limit=fetch_limit,
        log_level=log_level,
    )
    logger.debug("Loaded config: %s", config)
    return config


def configure_logging(config: AnalyticsConfig) -> None:
    """Configure root logging for scripts and the dashboard."""

    logging.basicConfig(level=config.log_level, format=_LOG_FORMAT)
