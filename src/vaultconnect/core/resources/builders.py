from __future__ import annotations

from .schemas import FieldObject, FullItem, ItemCategory, SectionID, SectionObject, UrlObject, VaultID


class ItemBuilderError(ValueError):
    """Raised when an item cannot be built from the collected values."""


class ItemBuilder:
    """Fluent builder for new vault items.

    ``ItemBuilder(vault_id, ItemCategory.LOGIN).title("Mail").username("bob").password("")``
    builds a login whose password is generated server-side.
    """

    def __init__(self, vault_id: str, category: ItemCategory = ItemCategory.API_CREDENTIAL) -> None:
        self.vault = VaultID(id=vault_id)
        self.category = category
        self._title = ""
        self._favorite = False
        self._urls: list[UrlObject] = []
        self._tags: list[str] = []
        self._fields: list[FieldObject] = []
        self._sections: list[SectionObject] = []

    def title(self, title: str) -> ItemBuilder:
        self._title = title
        return self

    def favorite(self, favorite: bool = True) -> ItemBuilder:
        self._favorite = favorite
        return self

    def tag(self, tag: str) -> ItemBuilder:
        self._tags.append(tag)
        return self

    def url(self, url: str, primary: bool = False) -> ItemBuilder:
        self._urls.append(UrlObject(url=url, primary=primary))
        return self

    def username(self, username: str) -> ItemBuilder:
        self._fields.append(FieldObject(purpose="USERNAME", value=username))
        return self

    def password(self, password: str) -> ItemBuilder:
        # An empty password asks the server to generate one.
        if password:
            self._fields.append(FieldObject(purpose="PASSWORD", value=password))
        else:
            self._fields.append(FieldObject(purpose="PASSWORD", generate=True))
        return self

    def api_key(self, value: str, title: str) -> ItemBuilder:
        self._title = title
        if value:
            self._fields.append(FieldObject(type="CONCEALED", label="credential", value=value))
        else:
            self._fields.append(FieldObject(type="CONCEALED", label="credential", generate=True))
        return self

    def add_otp(self, secret: str) -> ItemBuilder:
        section = SectionID()
        self._sections.append(SectionObject(id=section.id, label="OTP"))
        self._fields.append(FieldObject(section=section, type="OTP", value=secret))
        return self

    def build(self) -> FullItem:
        if self.category is ItemCategory.LOGIN and not self._title:
            raise ItemBuilderError("Title is required")
        return FullItem(
            title=self._title,
            vault=self.vault.model_copy(),
            category=self.category.value,
            urls=[url.model_copy() for url in self._urls] or None,
            favorite=self._favorite,
            tags=list(self._tags) or None,
            fields=[field.model_copy() for field in self._fields],
            sections=[section.model_copy() for section in self._sections],
        )
