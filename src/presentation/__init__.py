"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. The presentation
layer is thin - it dispatches commands/queries to the application layer and
translates results to HTTP responses.

Structure:
- routers/system.py: service banner and health check
- routers/api/v1/: API version 1 endpoints (events, attendees, notifications)
- routers/api/middleware/: request tracing
"""
