"""Base model for Crypto Pay SDK."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class CryptoPayModel(BaseModel):
    """Base model with common configuration.

    Unknown fields sent by the API are kept rather than dropped, so a result
    model never loses data the remote side added after this SDK was released.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CryptoPayModel":
        """Create model from dictionary."""
        return cls.model_validate(data)
