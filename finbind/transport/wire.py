"""Base class for wire models: the exact JSON shape an external API speaks.

Wire models are pydantic models with camelCase aliases. Decoding matches keys
case-insensitively, so a reply carrying ``AcceptanceKeyClass`` fills the same
field as ``acceptanceKeyClass``. Unknown keys are ignored. Missing keys, and
nulls sent for fields whose default is not None, take the field default.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


def _int_to_str(value: int | None) -> str | None:
    return None if value is None else str(value)


# Optional integer sent as a decimal string; decoding accepts 1000, "1000" and ""
WireInt = Annotated[
    int | None,
    BeforeValidator(_blank_to_none),
    PlainSerializer(_int_to_str, return_type=str | None),
]


class WireModel(BaseModel):
    """Shared configuration for every wire-level record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        known: dict[str, str] = {}
        # fields whose default is not None: a JSON null leaves the default
        null_to_default: set[str] = set()
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            known[alias.lower()] = alias
            known[name.lower()] = name
            if not field.is_required() and field.default is not None:
                null_to_default.update((alias, name))

        normalized: dict[str, Any] = {}
        for key, value in data.items():
            target = known.get(key.lower(), key) if isinstance(key, str) else key
            if value is None and target in null_to_default:
                continue
            # an exact key wins over a case-folded duplicate
            if target in normalized and key != target:
                continue
            normalized[target] = value
        return normalized

    def to_body(self, omit_empty: bool = False) -> dict[str, Any]:
        """Serialize for a JSON request body.

        Keys are wire names and unset (None) fields are dropped. With
        omit_empty, empty strings are dropped as well, at any depth. Lists are
        always kept, so an explicitly empty list is sent as [].
        """
        body = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        if omit_empty:
            body = _drop_empty_strings(body)
        return body


def _drop_empty_strings(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_empty_strings(v) for k, v in value.items() if v != ""}
    elif isinstance(value, list):
        return [_drop_empty_strings(item) for item in value]
    return value

