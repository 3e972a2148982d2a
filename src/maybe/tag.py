__all__ = ["Maybe"]

import enum


@enum.unique
class Maybe(enum.Enum):
    """Tells whether an `Option` holds a value."""

    SOME = enum.auto()
    NONE = enum.auto()
