"""Built-in rule library."""
