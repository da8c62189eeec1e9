"""App — cliente Domosed, listener de webhook e inicialização.

Subpastas:
- domosed/: fachada Domosed, opções e servidor do webhook
- bootstrap/: composition root (logging, validação de settings)
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
