"""Exceptions raised by the countdown engine."""

from __future__ import annotations


class CountdownError(Exception):
    """Base class for every countdown error."""


class InvalidArgumentError(CountdownError, ValueError):
    """A duration or snapshot value is out of range."""


class InvalidStateError(CountdownError, RuntimeError):
    """The operation is not allowed in the engine's current state."""
