"""Interfaces of the RSA VDF components."""
