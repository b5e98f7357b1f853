"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- Dispatcher: Validates a request's rules, then runs its handler

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- cqrs/: Registry of every command and query with handler metadata
- dtos/: Result types returned by handlers

The application layer orchestrates domain logic but contains no business rules.
"""
