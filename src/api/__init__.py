"""API — camada de borda com a HeyReach public API.

Responsabilidades:
- Enviar requisições HTTP e classificar falhas
- Construir payloads de wire a partir de requests de domínio
- Normalizar respostas (envelopes paginados, campos ausentes) em modelos internos

Subpastas:
- connectors/: transport HTTP, erros, wire models e Operation Set
- normalizers/: conversão de respostas externas → modelos internos
- payload_builders/: construção de payloads para a API externa

NÃO PODE conter: regras de domínio além de conversão de campos.
"""
