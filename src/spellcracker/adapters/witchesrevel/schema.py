"""Pydantic models describing the Witches' Revel catalog payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _number_to_str(value: object) -> object:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class WitchesRevelBaseModel(BaseModel):
    # unknown keys are kept so they can travel with the entry as payload
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class FullNames(WitchesRevelBaseModel):
    front_face: str = Field(alias="frontFace", min_length=1)
    back_face: str | None = Field(default=None, alias="backFace")


class PrintPayload(WitchesRevelBaseModel):
    id: str
    expansion_id: str = Field(alias="expansionID")

    _coerce_ids = field_validator("id", "expansion_id", mode="before")(_number_to_str)


class PrintsPayload(WitchesRevelBaseModel):
    prints_by_id: dict[str, PrintPayload] = Field(default_factory=dict, alias="printsByID")


class CardPayload(WitchesRevelBaseModel):
    id: str = Field(min_length=1)
    full_names: FullNames = Field(alias="fullNames")
    prints: PrintsPayload | None = None

    _coerce_id = field_validator("id", mode="before")(_number_to_str)


class ExpansionPayload(WitchesRevelBaseModel):
    id: str = Field(min_length=1)
    collation_name: str = Field(alias="collationName")

    _coerce_id = field_validator("id", mode="before")(_number_to_str)


class CatalogResponse(WitchesRevelBaseModel):
    cards: list[CardPayload]
    expansions: list[ExpansionPayload]
