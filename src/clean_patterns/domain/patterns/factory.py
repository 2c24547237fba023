"""Vehicle Factory - construction dispatcher keyed on a vehicle kind.

Kinds are registered in a table instead of a hard-coded conditional, so adding
a kind does not touch the dispatch code.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from clean_patterns.domain.base.exceptions import UnrecognizedKindError

logger = logging.getLogger(__name__)


class VehicleKind(str, Enum):
    """Vehicle kinds the factory can build."""

    SEDAN = "sedan"
    SUV = "suv"


class Vehicle(BaseModel):
    """Immutable vehicle record."""

    model_config = ConfigDict(frozen=True)

    model: str
    price: int = Field(ge=0)


class VehicleFactory:
    """Creates vehicles without callers naming a concrete configuration."""

    _builders: Dict[VehicleKind, Callable[[], Vehicle]] = {
        VehicleKind.SEDAN: lambda: Vehicle(model="Sedan", price=20000),
        VehicleKind.SUV: lambda: Vehicle(model="SUV", price=30000),
    }

    @classmethod
    def create(cls, kind: Union[VehicleKind, str]) -> Vehicle:
        """
        Create a new vehicle for a kind.

        Args:
            kind: VehicleKind or its string value (case-insensitive)

        Returns:
            New Vehicle instance

        Raises:
            UnrecognizedKindError: If the kind is not registered
        """
        vehicle_kind = cls._resolve_kind(kind)
        vehicle = cls._builders[vehicle_kind]()
        logger.debug(f"Created vehicle {vehicle.model} for kind {vehicle_kind.value}")
        return vehicle

    @classmethod
    def supported_kinds(cls) -> List[str]:
        """Get list of recognised kind names."""
        return [kind.value for kind in cls._builders]

    @classmethod
    def _resolve_kind(cls, kind: Union[VehicleKind, str]) -> VehicleKind:
        if isinstance(kind, VehicleKind):
            return kind
        if isinstance(kind, str):
            try:
                return VehicleKind(kind.strip().lower())
            except ValueError:
                pass
        raise UnrecognizedKindError(kind, supported=cls.supported_kinds())


def create_vehicle(kind: Union[VehicleKind, str]) -> Vehicle:
    """Create vehicle with the default factory."""
    return VehicleFactory.create(kind)
