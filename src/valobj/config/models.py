"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valobj.toml only contains overrides.
An empty (or missing) valobj.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- valobj.toml sections ---


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    strict: bool = False

