"""CodecService — build, encode, and decode value objects.

Domain errors (TypeError/ValueError from :meth:`Type.decode`) are turned
into ``ServiceResult(ok=False)`` with a machine-readable code. Every
operation runs with ``op`` and ``strict`` bound in the structlog context
and reports its wall time in ``meta["duration_ms"]``.
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import structlog

from valobj.config.logging import configure_logging
from valobj.config.settings import ValobjSettings
from valobj.domain.types import Type
from valobj.services.result import ServiceResult

logger = logging.getLogger(__name__)

_Method = Callable[..., ServiceResult]


def _timed(op: str) -> Callable[[_Method], _Method]:
    """Bind log context for *op* and merge the elapsed time into ``meta``."""

    def decorator(func: _Method) -> _Method:
        @functools.wraps(func)
        def wrapper(self: CodecService, *args: Any, **kwargs: Any) -> ServiceResult:
            with structlog.contextvars.bound_contextvars(op=op, strict=self.strict):
                start = time.perf_counter()
                result = func(self, *args, **kwargs)
                duration_ms = round((time.perf_counter() - start) * 1000, 3)
                logger.debug("%s finished ok=%s in %.3fms", op, result.ok, duration_ms)
            meta = {**(result.meta or {}), "duration_ms": duration_ms}
            return result.model_copy(update={"meta": meta})

        return wrapper

    return decorator


class CodecService:
    """Wraps the :class:`Type` codec in the service contract.

    Usage::

        service = CodecService.load(verbose=True)
        result = service.decode({})
        if result.ok:
            value = result.data["value"]
    """

    def __init__(self, settings: ValobjSettings) -> None:
        self._settings = settings

    @classmethod
    def load(cls, **kwargs: Any) -> CodecService:
        """Load settings from every source, apply their logging flags, and build."""
        settings = ValobjSettings.load(**kwargs)
        configure_logging(settings)
        return cls(settings)

    @property
    def strict(self) -> bool:
        return self._settings.codec.strict

    @_timed("build")
    def build(self) -> ServiceResult:
        value = Type.Builder().build()
        logger.debug("Built %r", value)
        return ServiceResult(ok=True, op="build", data={"value": value})

    @_timed("encode")
    def encode(self, value: Any) -> ServiceResult:
        if not isinstance(value, Type):
            type_name = type(value).__name__
            logger.debug("Refusing to encode %s", type_name)
            return ServiceResult.failure(
                "encode", "INVALID_VALUE", f"Cannot encode {type_name} as Type", type=type_name
            )
        return ServiceResult(ok=True, op="encode", data={"value": value.encode()})

    @_timed("decode")
    def decode(self, data: Any) -> ServiceResult:
        """Decode *data* honouring ``[codec] strict``.

        In lenient mode unknown keys are dropped and reported as a warning.
        """
        try:
            value = Type.decode(data, strict=self.strict)
        except TypeError as exc:
            logger.debug("Decode rejected payload: %s", exc)
            return ServiceResult.failure(
                "decode", "INVALID_PAYLOAD", str(exc), type=type(data).__name__
            )
        except ValueError as exc:
            logger.debug("Decode rejected unknown fields: %s", exc)
            return ServiceResult.failure(
                "decode", "UNKNOWN_FIELDS", str(exc), fields=_field_names(data)
            )

        ignored = _field_names(data)
        warnings = [f"Ignored unknown field(s): {ignored}"] if ignored else []
        return ServiceResult(ok=True, op="decode", data={"value": value}, warnings=warnings)


def _field_names(data: Mapping[str, Any]) -> list[str]:
    return sorted(str(key) for key in data)
