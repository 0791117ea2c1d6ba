"""Key bindings, searchable tables and dialog logic for a terminal version browser."""

__version__ = "0.1.0"
__all__ = ["application", "key_action", "keys", "table"]