"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- heyreach/: HeyReach public API

Cada API tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
