"""Parameter objects in place of long argument lists."""
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clean_patterns.domain.base.exceptions import ValidationError


class User(BaseModel):
    """User record grouping what would otherwise be five positional arguments."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    age: int = Field(ge=0)
    address: str = ""
    phone: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Car(BaseModel):
    """Car record built from a JSON-like mapping."""

    model_config = ConfigDict(frozen=True)

    brand: str
    model: str
    year: int

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Validate model year."""
        if v < 1886:
            raise ValueError("Year must not predate the automobile")
        return v


# Accepted spellings for each field, first match wins
_CAR_FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "brand": ("brand", "marca"),
    "model": ("model", "modelo"),
    "year": ("year", "anio"),
}


def create_user(**fields: Any) -> User:
    """
    Create a user from keyword fields.

    Raises:
        ValidationError: If a field is missing or invalid
    """
    try:
        return User(**fields)
    except ValueError as e:
        raise ValidationError(f"Invalid user data: {e}", details=fields)


def _lookup(data: Mapping[str, Any], aliases: Tuple[str, ...]) -> Optional[Any]:
    for alias in aliases:
        if alias in data:
            return data[alias]
    return None


def create_car(data: Mapping[str, Any]) -> Car:
    """
    Create a car from a JSON mapping.

    Both English keys (brand, model, year) and Spanish keys
    (marca, modelo, anio) are accepted.

    Raises:
        ValidationError: If a required key is missing or a value is invalid
    """
    if not data:
        raise ValidationError("empty data")

    values = {field: _lookup(data, aliases) for field, aliases in _CAR_FIELD_ALIASES.items()}
    missing = [field for field, value in values.items() if value is None]
    if missing:
        raise ValidationError(f"Missing car fields: {', '.join(missing)}", details=missing)

    try:
        return Car(**values)
    except ValueError as e:
        raise ValidationError(f"Invalid car data: {e}", details=dict(data))
