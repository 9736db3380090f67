"""Base controller classes."""

from fleetscope.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
)

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
]
