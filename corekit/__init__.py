"""String, buffer, string-map, process and clock utilities."""

__version__ = "0.1.0"
__all__ = ["errors", "strutil", "string_array", "char_array", "string_map", "process", "timeutil"]