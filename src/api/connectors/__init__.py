"""Connectors — adapters de borda para APIs externas.

Estrutura:
- heyreach/: HeyReach public API (transport, erros, wire models, operações)

Cada API tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
