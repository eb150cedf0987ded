"""Errors raised by the RBAC catalog for values outside its closed vocabularies.

Denial is never an error: the decision functions return ``False``. These
exceptions mark malformed input reaching the catalog boundary.
"""

from typing import Any


class InvalidRoleError(ValueError):
    """Raised when a role value does not match any enumerated role."""

    def __init__(self, value: Any):
        super().__init__(f"Unknown role: {value!r}")
        self.value = value


class InvalidPermissionError(ValueError):
    """Raised when a permission token is malformed or not in the catalog."""

    def __init__(self, value: Any, reason: str = "not a defined permission"):
        super().__init__(f"Invalid permission {value!r}: {reason}")
        self.value = value
        self.reason = reason
