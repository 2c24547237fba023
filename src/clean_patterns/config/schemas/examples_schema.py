"""Configuration for the clean code and pattern examples."""

from pydantic import BaseModel, Field

from clean_patterns.domain.cleancode.retry_counter import DEFAULT_MAX_CONNECTION_ATTEMPTS
from clean_patterns.domain.cleancode.thresholds import DEFAULT_SENIOR_AGE_THRESHOLD


class CleanCodeConfig(BaseModel):
    """Named constants used by the clean code examples."""

    senior_age_threshold: int = Field(
        DEFAULT_SENIOR_AGE_THRESHOLD, ge=0, description="Age above which a person is a senior"
    )
    max_connection_attempts: int = Field(
        DEFAULT_MAX_CONNECTION_ATTEMPTS, ge=1, description="Connection attempts before giving up"
    )


class ObserverConfig(BaseModel):
    """Observer notification behavior."""

    contain_failures: bool = Field(
        True, description="Log and skip observers that raise instead of propagating"
    )
