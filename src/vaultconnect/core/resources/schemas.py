from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConnectModel(BaseModel):
    # Server payloads use camelCase; unknown fields are dropped.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ItemCategory(str, Enum):
    API_CREDENTIAL = "API_CREDENTIAL"
    LOGIN = "LOGIN"
    PASSWORD = "PASSWORD"


class VaultData(ConnectModel):
    id: str
    name: str
    description: str | None = None
    attribute_version: int = 0
    content_version: int = 0
    type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VaultID(ConnectModel):
    id: str


class UrlObject(ConnectModel):
    url: str
    primary: bool = False


class SectionID(ConnectModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))


class SectionObject(ConnectModel):
    id: str
    label: str | None = None


class FieldObject(ConnectModel):
    id: str | None = None
    section: SectionID | None = None
    purpose: str | None = None
    type: str | None = None
    value: str | None = None
    generate: bool | None = None
    label: str | None = None


class ItemData(ConnectModel):
    id: str
    title: str = ""
    vault: VaultID
    category: str | None = None
    urls: list[UrlObject] | None = None
    favorite: bool | None = None
    tags: list[str] | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FullItem(ConnectModel):
    """An item with its fields and sections, as sent on create and returned on get."""

    id: str | None = None
    title: str = ""
    vault: VaultID
    category: str | None = None
    urls: list[UrlObject] | None = None
    favorite: bool = False
    tags: list[str] | None = None
    fields: list[FieldObject] = Field(default_factory=list)
    sections: list[SectionObject] = Field(default_factory=list)
