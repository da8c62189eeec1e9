"""API — camada de borda com a API Domosed.

Subpastas:
- connectors/: gateway RPC, erros, modelos e verificação de webhook
- routes/: endpoint HTTP do webhook

NÃO PODE conter: estado do cliente nem orquestração (ficam em app/).
"""
