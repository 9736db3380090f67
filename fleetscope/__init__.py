"""FleetScope - terminal telemetry viewer for search-engine cluster fleets."""

__version__ = "0.1.0"
