"""Core building blocks for field-access."""
