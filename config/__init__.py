"""
Configuration package.

All tunable values live in config.settings.
"""
