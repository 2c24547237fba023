"""Comments that explain intent rather than restate the code."""
import logging

from clean_patterns.domain.base.exceptions import ValidationError

DEFAULT_MAX_CONNECTION_ATTEMPTS = 3

logger = logging.getLogger(__name__)


class ConnectionRetryCounter:
    """Counts connection attempts against an upper bound."""

    def __init__(self, max_attempts: int = DEFAULT_MAX_CONNECTION_ATTEMPTS):
        if max_attempts < 1:
            raise ValidationError("max_attempts must be at least 1", {"max_attempts": max_attempts})
        self.max_attempts = max_attempts
        self._attempts = 0

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def exhausted(self) -> bool:
        return self._attempts >= self.max_attempts

    def register_attempt(self) -> int:
        """Record one more attempt and return the running count."""
        # Reflects the next connection attempt, not a retry of the previous one
        self._attempts += 1
        if self.exhausted:
            logger.warning(f"Connection attempts exhausted ({self._attempts}/{self.max_attempts})")
        return self._attempts

    def reset(self) -> None:
        self._attempts = 0
