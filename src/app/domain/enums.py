"""Enumerações de domínio com parse liberal e token canônico próprio.

Cada enumeração é instanciada com um único LiberalEnumParser, parametrizado
por uma tabela de sinônimos e um membro de fallback. Strings desconhecidas
nunca falham: degradam para UNKNOWN.

O valor de cada membro é o seu token canônico (o que vai para o wire).
Cada enumeração define o seu próprio formato: campanhas e listas usam
minúsculas, eventos de webhook usam CamelCase.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping

E = TypeVar("E", bound=Enum)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class LiberalEnumParser(Generic[E]):
    """Parser case-insensitive de string para membro de enumeração.

    A tabela de lookup é montada a partir dos tokens canônicos dos membros
    e dos sinônimos extras informados. O membro de fallback não entra na
    tabela, então o próprio token "unknown" também resolve para o fallback.

    Args:
        enum_cls: Enumeração alvo.
        fallback: Membro retornado para qualquer string não mapeada.
        synonyms: Sinônimos extras (string -> membro).
    """

    def __init__(
        self,
        enum_cls: type[E],
        *,
        fallback: E,
        synonyms: Mapping[str, E] | None = None,
    ) -> None:
        self._fallback = fallback
        self._table: dict[str, E] = {
            str(member.value).lower(): member for member in enum_cls if member is not fallback
        }
        for raw, member in (synonyms or {}).items():
            self._table[raw.lower()] = member

    def parse(self, raw: str | None) -> E:
        """Converte string do wire em membro; nunca levanta exceção."""
        if not isinstance(raw, str):
            return self._fallback
        return self._table.get(raw.strip().lower(), self._fallback)


def separated_synonyms(enum_cls: type[E], *, fallback: E) -> dict[str, E]:
    """Gera sinônimos snake_case e kebab-case a partir de tokens CamelCase.

    Ex.: "ConnectionRequestSent" -> "connection_request_sent",
    "connection-request-sent".
    """
    synonyms: dict[str, E] = {}
    for member in enum_cls:
        if member is fallback:
            continue
        words = _CAMEL_BOUNDARY.split(str(member.value))
        synonyms["_".join(words)] = member
        synonyms["-".join(words)] = member
    return synonyms


class CampaignStatus(str, Enum):
    """Status de campanha. Token canônico: minúsculo."""

    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    FINISHED = "finished"
    CANCELED = "canceled"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> CampaignStatus:
        return _CAMPAIGN_STATUS_PARSER.parse(raw)

    def to_wire(self) -> str:
        return self.value


class ListType(str, Enum):
    """Tipo de lista. Token canônico: minúsculo."""

    LEADS = "leads"
    COMPANIES = "companies"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> ListType:
        return _LIST_TYPE_PARSER.parse(raw)

    def to_wire(self) -> str:
        return self.value


class WebhookEventType(str, Enum):
    """Tipo de evento de webhook. Token canônico: CamelCase."""

    CONNECTION_REQUEST_SENT = "ConnectionRequestSent"
    CONNECTION_ACCEPTED = "ConnectionAccepted"
    MESSAGE_SENT = "MessageSent"
    MESSAGE_REPLIED = "MessageReplied"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, raw: str | None) -> WebhookEventType:
        return _WEBHOOK_EVENT_TYPE_PARSER.parse(raw)

    def to_wire(self) -> str:
        return self.value


_CAMPAIGN_STATUS_PARSER: LiberalEnumParser[CampaignStatus] = LiberalEnumParser(
    CampaignStatus,
    fallback=CampaignStatus.UNKNOWN,
)

_LIST_TYPE_PARSER: LiberalEnumParser[ListType] = LiberalEnumParser(
    ListType,
    fallback=ListType.UNKNOWN,
)

_WEBHOOK_EVENT_TYPE_PARSER: LiberalEnumParser[WebhookEventType] = LiberalEnumParser(
    WebhookEventType,
    fallback=WebhookEventType.UNKNOWN,
    synonyms=separated_synonyms(WebhookEventType, fallback=WebhookEventType.UNKNOWN),
)
