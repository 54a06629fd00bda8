"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (events, attendees, notification outbox)
- Object storage for event materials (S3, in-memory)
- Message transports for notifications (Redis streams, in-memory)
- Secrets backends and the structured logger

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
