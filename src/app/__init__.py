"""App — modelo de domínio, contratos e observabilidade.

Subpastas:
- domain/: modelos de domínio (campanhas, listas, leads, inbox, contas, webhooks)
- protocols/: contratos/interfaces (Transport HeyReach)
- observability/: contexto de operação para logs estruturados

Padrão: app define; api adapta; config configura; utils apoia.
"""
