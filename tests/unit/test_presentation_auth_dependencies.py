"""Unit tests for client principal decoding.

The identity provider forwards the caller as base64-encoded JSON in the
principal header; anything undecodable is treated as unauthenticated.
"""

import base64
import json

import pytest

from src.client import encode_principal
from src.presentation.routers.api.middleware.auth_dependencies import (
    decode_principal,
)


def encode(payload) -> str:
    return base64.b64encode(json.dumps(payload).encode()).decode()


@pytest.mark.unit
class TestDecodePrincipal:
    def test_decodes_full_principal(self):
        principal = decode_principal(
            encode(
                {
                    "userId": "abc-123",
                    "userDetails": "coach@club.org",
                    "identityProvider": "aad",
                    "userRoles": ["anonymous", "authenticated"],
                }
            )
        )

        assert principal is not None
        assert principal.user_id == "abc-123"
        assert principal.user_details == "coach@club.org"
        assert principal.identity_provider == "aad"
        assert principal.user_roles == ["anonymous", "authenticated"]

    def test_client_encoding_round_trips(self):
        principal = decode_principal(encode_principal("abc-123"))

        assert principal is not None
        assert principal.user_id == "abc-123"
        assert "authenticated" in principal.user_roles

    @pytest.mark.parametrize(
        "header_value",
        [
            "%%%",
            base64.b64encode(b"not json").decode(),
            encode(["userId"]),
            encode({"userDetails": "no id"}),
            encode({"userId": ""}),
        ],
    )
    def test_unusable_values_decode_to_none(self, header_value):
        assert decode_principal(header_value) is None

    def test_non_list_roles_are_dropped(self):
        principal = decode_principal(encode({"userId": "x", "userRoles": "admin"}))

        assert principal is not None
        assert principal.user_roles == []
