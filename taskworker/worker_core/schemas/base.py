"""Pydantic base schema utilities for worker core models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base Pydantic model for all domain schemas.

    Configures common Pydantic behaviors:
    - ``populate_by_name=True``: Allow initialization by alias or field name.
    - ``extra="forbid"``: Prevent unknown fields from slipping into the model, ensuring strict validation.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )


class WireSchema(BaseModel):
    """
    Base model for payloads received from the decision authority.

    Unknown fields are ignored so that newer server responses keep validating.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
