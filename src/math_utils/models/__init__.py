"""Data models for Math Utils."""

from .io import OperationResult, WelcomeMessage

__all__ = ["OperationResult", "WelcomeMessage"]
