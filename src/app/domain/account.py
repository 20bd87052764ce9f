"""Modelos de domínio de contas LinkedIn conectadas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LiAccountFilter(BaseModel):
    """Filtro de listagem de contas LinkedIn."""

    model_config = ConfigDict(frozen=True)

    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=0)
    keyword: str | None = None


class LinkedInAccount(BaseModel):
    """Conta LinkedIn (sender).

    As três flags de validade são independentes: uma conta pode ter auth
    válida e assento Navigator inválido, por exemplo.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    email_address: str = ""
    first_name: str = ""
    last_name: str = ""
    is_active: bool = False
    active_campaigns: int = Field(default=0, ge=0)
    auth_is_valid: bool = False
    is_valid_recruiter: bool = False
    is_valid_navigator: bool = False
