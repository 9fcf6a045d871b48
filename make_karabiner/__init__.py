"""Generate Karabiner-Elements rules from a JIS-based key mapping table."""

__version__ = "0.1.0"
__all__ = ["cli", "generator", "keycodes", "mappings_parser", "models"]