"""JSON result envelope printed by the ``vpath`` command."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class ErrorInfo(BaseModel):
    """Typed failure reported instead of a result."""

    type: str = Field(description="Error class name, e.g. PathEscapesRootError")
    message: str = Field(description="Human-readable error message")


class OperationResult(BaseModel):
    """Outcome of one virtual path operation."""

    v: int = Field(default=1, description="Schema version")
    op: str = Field(description="Operation name as given on the command line")
    args: Dict[str, Optional[str]] = Field(default_factory=dict, description="Operation inputs")
    ok: bool = Field(default=True, description="False when the operation raised")
    result: Optional[str] = Field(default=None, description="Operation output; null for a missing parent or not-in-app")
    error: Optional[ErrorInfo] = Field(default=None, description="Failure details when ok is false")
