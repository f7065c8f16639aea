"""Two-stack integer sorting with a limited set of stack operations, plus small C-style helper modules."""

__version__ = "1.0.0"