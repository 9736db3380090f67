"""Utility functions for FleetScope TUI."""
