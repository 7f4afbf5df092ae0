"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: RegisterPayment and SettlePayment orchestration
- Ports: Abstract interfaces for external dependencies
- DTOs: Request objects and the SettlementResult tagged union

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
