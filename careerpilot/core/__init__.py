"""Configuration, identity and application lifecycle."""
