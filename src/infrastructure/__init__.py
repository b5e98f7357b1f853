"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Database repositories (SQLAlchemy async)
- Structured logging (structlog)

Structure:
- persistence/: Database engine, models and repositories
- logging/: Logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
