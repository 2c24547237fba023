"""Application layer - services that orchestrate the domain examples."""

from .demo_service import DemoApplicationService
from .dto import DemoResult

__all__ = ["DemoApplicationService", "DemoResult"]
