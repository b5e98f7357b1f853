"""Test suite for the OurGame API.

Test structure follows the test pyramid:
- unit/: Unit tests - handlers, validation, mappings and client hooks in isolation
- integration/: Integration tests - repositories and transactions against SQLite
- api/: API endpoint tests - HTTP request/response cycle with dependency overrides
- smoke/: Smoke tests - end-to-end journeys through the full stack
"""
