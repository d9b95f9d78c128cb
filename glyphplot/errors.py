from __future__ import annotations


class DrawingError(Exception):
    """Raised when a drawing backend cannot complete an operation."""


class BackendError(DrawingError):
    """Wraps a failure of the backend's underlying output (see ``__cause__``)."""
