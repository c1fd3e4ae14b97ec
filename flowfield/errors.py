"""Exceptions raised by the navigation layer."""


class NavigationError(Exception):
    """Base class for navigation failures."""

    default_message = "navigation error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class InvalidPositionError(NavigationError):
    """A position lies outside the grid."""

    default_message = "position is outside grid bounds"


class InvalidCostError(NavigationError):
    """A movement cost is negative."""

    default_message = "cost must be non-negative"


class NoPathError(NavigationError):
    """The goal cannot be reached from a position."""

    default_message = "no path exists to goal"


class InvalidGoalError(NavigationError):
    """The goal is missing, out of bounds or blocked."""

    default_message = "goal position is invalid or blocked"


class EmptyGridError(NavigationError):
    """The grid has no cells."""

    default_message = "grid is empty or not initialized"


class InvalidDirectionError(NavigationError):
    """A direction is not usable."""

    default_message = "invalid direction"