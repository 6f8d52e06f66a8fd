"""Random number generation interfaces."""
