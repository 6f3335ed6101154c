"""Two-stack sorting puzzle solver that reports the operations it uses."""

__version__ = "0.1.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]