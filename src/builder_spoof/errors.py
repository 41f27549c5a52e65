"""Exceptions raised by the spoofer."""

from __future__ import annotations


class SpoofError(Exception):
    """Base error for the spoofer."""


class RouteError(SpoofError, ValueError):
    """A route was declared with an unsupported method."""


class GenerationError(SpoofError, RuntimeError):
    """The dataset could not be generated; fatal at startup."""
