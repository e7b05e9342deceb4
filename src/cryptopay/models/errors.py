"""Error models for Crypto Pay SDK."""
from __future__ import annotations

from typing import Any, Optional


class CryptoPayError(Exception):
    """Base exception for Crypto Pay SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "CRYPTOPAY_ERROR"
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class APIError(CryptoPayError):
    """The API answered with ``ok: false``.

    ``code`` is the numeric code from the error envelope and ``message`` its
    text. ``str(err)`` reads ``"<method> failed: <code> - <message>"``.
    """

    def __init__(self, method: str, code: int, message: str):
        super().__init__(message, code="API_ERROR", details={"method": method, "code": code})
        self.method = method
        self.code = code

    def __str__(self) -> str:
        return f"{self.method} failed: {self.code} - {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "method": self.method,
            }
        }

    @classmethod
    def from_envelope(cls, method: str, error: Any) -> "APIError":
        """Create APIError from the ``error`` member of a failed response."""
        if isinstance(error, str):
            return cls(method, 0, error)
        if not isinstance(error, dict):
            return cls(method, 0, "Unknown error")
        # The live API sends ``name``; older docs describe ``message``.
        message = error.get("message") or error.get("name") or "Unknown error"
        return cls(method, error.get("code", 0), str(message))


class WebhookPayloadError(CryptoPayError):
    """A webhook body passed signature verification but is not a valid update."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None):
        super().__init__(message, code="WEBHOOK_PAYLOAD_ERROR", details={"errors": errors or []})


class UnknownFrameworkError(CryptoPayError, KeyError):
    """No adapter is registered under the requested framework name."""

    def __init__(self, framework: str, available: list[str]):
        super().__init__(
            f"Unknown framework {framework!r}; available: {', '.join(sorted(available))}",
            code="UNKNOWN_FRAMEWORK",
            details={"framework": framework, "available": sorted(available)},
        )
        self.framework = framework

    def __str__(self) -> str:
        return CryptoPayError.__str__(self)
