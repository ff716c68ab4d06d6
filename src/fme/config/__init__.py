"""Configuration — settings, fme.toml discovery, and logging."""
