from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ApiResult:
    """Outcome of one NetSapiens call. Failures are values here, never exceptions."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None, message: Optional[str] = None) -> "ApiResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def failed(cls, error: str, data: Any = None) -> "ApiResult":
        return cls(success=False, data=data, error=error)

    @property
    def count(self) -> int:
        return len(self.data) if isinstance(self.data, list) else 0
