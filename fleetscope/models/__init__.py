"""Data models for FleetScope TUI."""
