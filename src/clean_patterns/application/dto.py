"""Data transfer objects returned by application services."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from clean_patterns.domain.base.value_objects import ErrorKind


class DemoResult(BaseModel):
    """Printable outcome of running one example."""

    name: str
    lines: List[str] = Field(default_factory=list)
    data: Dict[str, Any] = Field(default_factory=dict)
    error_kind: Optional[ErrorKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
