"""Página genérica estável exposta aos chamadores."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Resultado paginado normalizado.

    `total_count` é apenas informativo: a API pode subcontar, então
    `len(items) <= total_count` não é garantido nem validado.
    """

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(default=0, ge=0, description="Total reportado pela API.")
    items: list[T] = Field(default_factory=list, description="Itens na ordem recebida.")
