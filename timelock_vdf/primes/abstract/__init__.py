"""Prime generation interfaces."""
