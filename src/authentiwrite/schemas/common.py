"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema exposing camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordModel(ApiModel):
    """Schema built from an in-memory store record.

    Sets on the record are emitted as sorted lists so responses are stable.
    """

    @model_validator(mode="before")
    @classmethod
    def _extract_record(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        extracted: dict[str, object | None] = {}
        for field_name in cls.model_fields:
            if not hasattr(data, field_name):
                continue
            value = getattr(data, field_name)
            if isinstance(value, set | frozenset):
                value = sorted(value)
            extracted[field_name] = value
        return extracted


class StatusResponse(ApiModel):
    """Bare acknowledgement envelope."""

    success: bool = True
    message: str | None = None
