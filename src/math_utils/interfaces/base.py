"""Base interface definition for Math Utils front ends."""

from abc import ABC, abstractmethod

from math_utils.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Abstract base class for user-facing interfaces."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
