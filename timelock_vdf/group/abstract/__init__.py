"""Group element interface."""
