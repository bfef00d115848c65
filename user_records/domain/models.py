"""
Domain models for the user records store.

A storage file holds a JSON array of `User` objects. Decoding is structural:
keys match field names case-insensitively, unknown keys are dropped, and
missing or null keys fall back to their zero values. The types of present
keys are checked strictly.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

MAX_AGE = 2**64 - 1


class User(BaseModel):
    """
    A single user entry in the collection.
    """

    id: str = Field("", description="Identifier, unique within the collection.")
    email: str = Field("", description="Contact e-mail address.")
    age: int = Field(0, ge=0, le=MAX_AGE, description="Age in years.")

    model_config = {
        "frozen": True,
        "strict": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _fold_keys(cls, data: Any) -> Any:
        # A null element decodes to the zero user.
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        folded = {}
        # Later keys win when several spellings of one field are present.
        for key, value in data.items():
            name = key.lower() if isinstance(key, str) else key
            if name not in cls.model_fields or value is None:
                continue
            folded[name] = value
        return folded


__all__ = ["MAX_AGE", "User"]
