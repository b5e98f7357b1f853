"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead. Values shared by the API and its Python
client live here so both sides agree on them.

Categories:
- Prefixes: Versioned route prefix
- Headers: Identity provider principal header
- Timeouts: Default timeouts for client calls

Example:
    >>> from src.core.constants import API_V1_PREFIX
    >>> url = f"{API_V1_PREFIX}/teams/{team_id}/players"
"""

# =============================================================================
# Prefixes
# =============================================================================

API_V1_PREFIX: str = "/api/v1"
"""Route prefix of the versioned API."""


# =============================================================================
# Headers
# =============================================================================

PRINCIPAL_HEADER: str = "X-MS-CLIENT-PRINCIPAL"
"""Header carrying the base64 JSON principal injected by the identity provider."""


# =============================================================================
# Timeouts
# =============================================================================

CLIENT_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for API client calls in seconds."""
