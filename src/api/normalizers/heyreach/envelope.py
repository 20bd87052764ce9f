"""Reconciliação de envelopes paginados da API HeyReach.

A API já publicou dois formatos de envelope:
- direto:   {totalCount, items}
- aninhado: {page: {offset, limit, totalCount}, items}

Os decoders são tentados em ordem fixa (direto antes de aninhado); cada um
só olha as chaves do próprio formato, sem reparse especulativo do documento.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from api.connectors.heyreach.wire_models import WireDirectEnvelope, WireNestedEnvelope
from app.domain.page import Page
from config.logging import log_fallback
from utils.errors import ApiError, ApiErrorKind

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=BaseModel)
D = TypeVar("D")

EnvelopeDecoder = Callable[[dict[str, Any]], tuple[int, list[Any]] | None]


def decode_direct(payload: dict[str, Any]) -> tuple[int, list[Any]] | None:
    """Formato atual: totalCount e items como irmãos."""
    if payload.get("totalCount") is None:
        return None
    envelope = WireDirectEnvelope.model_validate(payload)
    return envelope.total_count, envelope.items


def decode_nested(payload: dict[str, Any]) -> tuple[int, list[Any]] | None:
    """Formato antigo: objeto page com offset, limit e totalCount."""
    if not isinstance(payload.get("page"), dict):
        return None
    envelope = WireNestedEnvelope.model_validate(payload)
    return envelope.page.total_count, envelope.items


# Ordem de preferência
ENVELOPE_DECODERS: tuple[EnvelopeDecoder, ...] = (decode_direct, decode_nested)


def reconcile_page(
    payload: Any,
    item_model: type[W],
    convert: Callable[[W], D],
) -> Page[D]:
    """Normaliza qualquer envelope conhecido em Page.

    Itens nunca são filtrados nem derrubam a página: drift por item é
    absorvido pelos defaults dos modelos de wire, e um item que nem é objeto
    vira um item só com defaults. Só o envelope pode falhar a chamada.

    Args:
        payload: JSON já decodificado da resposta
        item_model: Modelo de wire de cada item
        convert: Conversor wire -> domínio

    Raises:
        ApiError: UNKNOWN se o envelope não é reconhecido ou não valida
    """
    if not isinstance(payload, dict):
        raise ApiError(ApiErrorKind.UNKNOWN, "Unrecognized page envelope")

    try:
        total_count, raw_items = _decode_envelope(payload)
        wire_items = [_validate_item(item_model, item) for item in raw_items]
    except ValidationError as exc:
        raise ApiError(
            ApiErrorKind.UNKNOWN,
            f"Failed to parse response: {exc.error_count()} validation error(s)",
        ) from exc

    logger.debug(
        "heyreach_page_reconciled",
        extra={"total_count": total_count, "item_count": len(wire_items)},
    )
    return Page(total_count=total_count, items=[convert(item) for item in wire_items])


def _validate_item(item_model: type[W], item: Any) -> W:
    if not isinstance(item, dict):
        log_fallback(logger, item_model.__name__, reason="item_not_an_object")
        item = {}
    return item_model.model_validate(item)


def _decode_envelope(payload: dict[str, Any]) -> tuple[int, list[Any]]:
    for decoder in ENVELOPE_DECODERS:
        decoded = decoder(payload)
        if decoded is not None:
            return decoded
    raise ApiError(ApiErrorKind.UNKNOWN, "Unrecognized page envelope")
