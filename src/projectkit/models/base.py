"""Shared pydantic base for every persisted or configured document."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Frozen model serialized with camelCase keys.

    Source YAML, stored JSON and project config all use camelCase field
    names, so aliases are the default on both the way in and the way out.
    Raw bytes travel as base64 in JSON.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Override to use by_alias=True by default."""
        kwargs.setdefault("by_alias", True)
        return super().model_dump(**kwargs)

    def model_dump_json(self, **kwargs: Any) -> str:
        """Override to use by_alias=True by default."""
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(**kwargs)
