"""Zero-field value object and its builder.

``Type`` carries no attributes, so structural equality over its (empty)
field set makes every instance equal to every other. The hash is the
constant seed an empty field fold produces, and the string form is the
fixed literal ``Type()``.

INVARIANT: instances are never mutated after construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel

_HASH_SEED: Final[int] = 1
_NAME: Final[str] = "Type"


class Type(BaseModel):
    """Immutable value object with no fields."""

    model_config = {"frozen": True}

    def __eq__(self, other: object) -> bool:
        if other is None:
            return False
        if not isinstance(other, Type):
            return False
        return True

    def __hash__(self) -> int:
        return _HASH_SEED

    def __str__(self) -> str:
        return f"{_NAME}()"

    def __repr__(self) -> str:
        return f"{_NAME}()"

    def foo(self) -> None:
        """Behaviour hook; does nothing."""

    # --- Codec ---

    def encode(self) -> dict[str, Any]:
        """Return the JSON-compatible form (always an empty mapping)."""
        return self.model_dump(mode="json")

    @classmethod
    def decode(cls, data: Mapping[str, Any], *, strict: bool = False) -> Type:
        """Build a fresh instance from a decoded JSON object.

        Unknown keys are ignored unless *strict* is set.

        Raises:
            TypeError: If *data* is not a mapping.
            ValueError: If *strict* is set and *data* carries any key.
        """
        if not isinstance(data, Mapping):
            msg = f"{_NAME} expects a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        if strict and data:
            unknown = sorted(str(key) for key in data)
            msg = f"Unknown field(s) for {_NAME}: {unknown}"
            raise ValueError(msg)
        return cls.model_validate(dict(data))

    class Builder:
        """Companion factory; holds no state, so ``build`` never fails."""

        def build(self) -> Type:
            return Type()
