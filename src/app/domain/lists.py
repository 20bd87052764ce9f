"""Modelos de domínio de listas de leads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import ListType


class ListSummary(BaseModel):
    """Lista de leads ou empresas."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    total_items_count: int = Field(default=0, ge=0)
    list_type: ListType = ListType.UNKNOWN
    creation_time: str = ""
    campaign_ids: list[int] = Field(default_factory=list)


class ListGetAllFilter(BaseModel):
    """Filtro de listagem de listas."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)
    keyword: str | None = None


class ListGetLeadsRequest(BaseModel):
    """Consulta paginada dos leads de uma lista."""

    model_config = ConfigDict(frozen=True)

    list_id: int
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)
    keyword: str | None = None


class ListLeadDeleteRequest(BaseModel):
    """Remoção de leads de uma lista por member id."""

    model_config = ConfigDict(frozen=True)

    list_id: int
    lead_member_ids: list[str] = Field(default_factory=list)


class ListLeadDeleteByProfileUrlRequest(BaseModel):
    """Remoção de leads de uma lista por URL de perfil."""

    model_config = ConfigDict(frozen=True)

    list_id: int
    profile_urls: list[str] = Field(default_factory=list)


class DeleteByProfileUrlResult(BaseModel):
    """URLs enviadas que não estavam na lista.

    Informativo: URLs ausentes não são erro.
    """

    model_config = ConfigDict(frozen=True)

    not_found_in_list: list[str] = Field(default_factory=list)
