"""
Error types for the minefield package.
"""


class InvalidConfiguration(ValueError):
    """Raised when board dimensions, mine counts or layouts are unusable."""
