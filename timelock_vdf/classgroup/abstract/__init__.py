"""Class group VDF interface."""
