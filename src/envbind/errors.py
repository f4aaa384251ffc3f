"""
Errors raised while binding environment variables onto a structure.

Only two things can go wrong at a leaf:
    - The variable is set but cannot be parsed as the field's kind
    - The field's kind is not one the binder knows how to set

A missing variable is never an error; the field keeps its default.
"""


class BindError(Exception):
    """Base class for every failure reported by the binder."""
    pass


class CoercionError(BindError):
    """
    Raised when an environment value cannot be parsed as the target kind.

    Properties:
        key: Environment key that held the offending value
        target_kind: Kind the value was parsed as ("int" or "bool")
        cause: Underlying parse failure
    """

    def __init__(self, key: str, target_kind: str, cause: Exception):
        self.key = key
        self.target_kind = target_kind
        self.cause = cause
        super().__init__(
            f"failed to parse environment key: {key} to {target_kind}: {cause}"
        )


class UnsupportedTypeError(BindError):
    """Raised when a variable is set for a leaf whose kind cannot be bound."""

    def __init__(self, key: str, kind: str):
        self.key = key
        self.kind = kind
        super().__init__(f"failed to parse key: {key}, unsupported field type: {kind}")


__all__ = ["BindError", "CoercionError", "UnsupportedTypeError"]
