"""Modelos de domínio de leads e tags."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CustomUserField(BaseModel):
    """Campo customizado livre de um lead."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Lead(BaseModel):
    """Lead (perfil LinkedIn) usado em listas, campanhas e consultas."""

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    profile_url: str
    location: str | None = None
    summary: str | None = None
    company_name: str | None = None
    position: str | None = None
    about: str | None = None
    email_address: str | None = None
    custom_user_fields: list[CustomUserField] = Field(default_factory=list)


class LeadListsRequest(BaseModel):
    """Consulta das listas que contêm um lead (qualquer identificador)."""

    model_config = ConfigDict(frozen=True)

    email: str | None = None
    linkedin_id: str | None = None
    profile_url: str | None = None
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)


class LeadListSummary(BaseModel):
    """Referência resumida a uma lista que contém o lead."""

    model_config = ConfigDict(frozen=True)

    list_id: int
    list_name: str = ""


class LeadReplaceTagsRequest(BaseModel):
    """Substituição completa das tags de um lead.

    Não é aditiva: o conjunto enviado sobrescreve o atual.
    """

    model_config = ConfigDict(frozen=True)

    lead_profile_url: str | None = None
    lead_linked_in_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    create_tag_if_not_existing: bool = False


class LeadTags(BaseModel):
    """Conjunto completo de tags de um lead, como devolvido pela API."""

    model_config = ConfigDict(frozen=True)

    tags: list[str] = Field(default_factory=list)
