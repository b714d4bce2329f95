"""Error taxonomy shared by every module.

The API layer never inspects concrete module exceptions; it only maps
these base kinds to HTTP responses (see ``modules.core.exception_handler``).
"""

from __future__ import annotations

from typing import Dict, List, Optional


class InvalidArgument(ValueError):
    """A domain invariant was violated by the supplied value."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFound(Exception):
    """The requested resource does not exist."""


class ValidationFailure(Exception):
    """User input failed one or more declarative field rules.

    ``errors`` maps a field name to every message raised for it.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        super().__init__("One or more validation errors occurred.")
        self.errors = errors


class StorageError(Exception):
    """The backing store rejected the operation or is unreachable."""


class ConfigurationError(Exception):
    """Handler wiring is ambiguous or incomplete."""
