"""Domain layer - Pure business logic.

This layer contains the core business entities, enums, protocols (ports)
and domain services. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (clubs, teams, players, coaches, ...)
- enums/: Integer-coded enums with their wire labels
- protocols/: Repository and logger interfaces
- services/: Pure calculations (match statistics, drill scopes)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
