"""Application and per-view state models."""
