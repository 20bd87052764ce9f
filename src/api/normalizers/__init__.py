"""Normalizers — conversão de respostas externas para modelos internos.

Estrutura:
- heyreach/: envelopes paginados e conversores wire -> domínio da API HeyReach

Cada API tem seu próprio normalizer, mantendo SRP.
"""

from .heyreach import reconcile_page

__all__ = [
    "reconcile_page",
]
