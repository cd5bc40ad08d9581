from __future__ import annotations

"""Result contracts.

These models represent outputs produced by the use-cases and are intended to
be stable across callers (scripts, notebooks, services).

Design goals:
- JSON-friendly field types (lists, dicts, scalars) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.

Note: contracts should only depend on stdlib + pydantic.
"""

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")
