"""Configuration, startup validation and logging setup."""
