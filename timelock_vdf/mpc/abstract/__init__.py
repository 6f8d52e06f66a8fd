"""Multi-precision interfaces."""
