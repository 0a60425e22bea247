"""Base component shared by the application's classes."""

from typing import Any

from math_utils.utils.logging import get_logger


class BaseComponent:
    """Base class that provides a component-bound structured logger."""

    def __init__(self) -> None:
        """Bind a logger named after the concrete component class."""
        self.logger: Any = get_logger(
            type(self).__module__,
            component=type(self).__name__,
        )
