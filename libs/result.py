"""
Result type shared by use cases.

A use case never raises for business outcomes. It returns either
``Return.ok(value)`` or ``Return.err(Error(...))`` and the caller branches on
``is_ok()`` / ``is_err()``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Error payload: a machine-readable code, optional message and cause"""

    code: str
    message: Optional[str] = None
    cause: Optional[BaseException] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[Error] = None

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def as_dict(self) -> Dict[str, Any]:
        """
        Uniform response shape.

        ``{"success": True, "data": ...}`` when a value is present,
        ``{"success": False, "error": ...}`` when the error carries a message.
        """
        if self.is_ok():
            body: Dict[str, Any] = {"success": True}
            if self.value is not None:
                body["data"] = self.value
            return body

        body = {"success": False}
        if self.error.message:
            body["error"] = self.error.message
        return body


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result[Any]:
        return Result(error=error)
