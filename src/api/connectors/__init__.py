"""Connectors — adapters de borda para APIs externas.

Estrutura:
- domosed/: API de pagamentos Domosed (gateway RPC + webhook)

Cada provider tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
