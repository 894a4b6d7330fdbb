"""Configuration: TOML section models, layered settings, and logging setup."""
