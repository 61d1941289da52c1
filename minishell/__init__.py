"""A minimal command shell with process, environment and PATH helpers."""

__version__ = "0.1.0"
__all__ = ["environment", "lineio", "process", "shell", "tokens", "which"]