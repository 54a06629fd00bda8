"""Domain layer - Pure business logic.

Events, attendees and notification outbox entries, the domain events that
announce registrations and reminders, field validators, and the protocols
(ports) implemented by infrastructure. No framework or infrastructure
imports.
"""
