"""valobj — immutable value objects with structural equality and builders."""

from valobj.domain.types import Type

__version__ = "0.1.0"

__all__ = ["Type", "__version__"]
