"""Telemetry domain controller."""

from fleetscope.controllers.telemetry.controller import TelemetryController

__all__ = ["TelemetryController"]
