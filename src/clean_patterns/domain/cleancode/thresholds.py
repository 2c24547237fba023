"""Named, configurable constants instead of magic numbers."""
import logging
import os
from typing import Optional

from clean_patterns.domain.base.exceptions import ConfigurationError

DEFAULT_SENIOR_AGE_THRESHOLD = 65
SENIOR_AGE_THRESHOLD_ENV = "SENIOR_AGE_THRESHOLD"

logger = logging.getLogger(__name__)


def senior_age_threshold() -> int:
    """
    Resolve the senior age threshold.

    The environment variable SENIOR_AGE_THRESHOLD takes precedence over the
    built-in default.

    Raises:
        ConfigurationError: If the environment value is not a non-negative integer
    """
    raw = os.environ.get(SENIOR_AGE_THRESHOLD_ENV)
    if raw is None or raw.strip() == "":
        return DEFAULT_SENIOR_AGE_THRESHOLD
    try:
        threshold = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{SENIOR_AGE_THRESHOLD_ENV} must be an integer, got {raw!r}",
            missing_fields=[SENIOR_AGE_THRESHOLD_ENV],
        )
    if threshold < 0:
        raise ConfigurationError(f"{SENIOR_AGE_THRESHOLD_ENV} must not be negative")
    logger.debug(f"Using senior age threshold {threshold} from environment")
    return threshold


def is_senior(age: int, threshold: Optional[int] = None) -> bool:
    """Return True when ``age`` is strictly above the senior threshold."""
    limit = senior_age_threshold() if threshold is None else threshold
    return age > limit
