"""Unit tests for client data hooks.

Tests cover:
- QueryHook: loading state, skipped calls when the key is None,
  re-fetch on parameter change, error capture
- MutationHook: data on success, None plus stored error on failure
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.client import (
    ApiError,
    MutationHook,
    QueryHook,
    use_club_players,
    use_my_clubs,
    use_team_players,
)
from src.client.api_client import ApiClient


@pytest.mark.unit
class TestQueryHook:
    """Test QueryHook."""

    @pytest.mark.asyncio
    async def test_fetches_and_stores_data(self):
        fetcher = AsyncMock(return_value=["player"])
        team_id = uuid7()
        hook = QueryHook(fetcher, team_id)
        assert hook.is_loading is True

        await hook.refetch()

        assert hook.data == ["player"]
        assert hook.error is None
        assert hook.is_loading is False
        fetcher.assert_awaited_once_with(team_id)

    @pytest.mark.asyncio
    async def test_missing_key_skips_call(self):
        fetcher = AsyncMock()
        hook = QueryHook(fetcher, None)
        assert hook.is_loading is False

        await hook.refetch()

        assert hook.data is None
        assert hook.error is None
        fetcher.assert_not_called()

    @pytest.mark.asyncio
    async def test_hook_without_params_always_fetches(self):
        fetcher = AsyncMock(return_value=[])
        hook = QueryHook(fetcher)

        await hook.refetch()

        fetcher.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_error_is_stored(self):
        error = ApiError("Team with ID 'x' was not found", status_code=404)
        hook = QueryHook(AsyncMock(side_effect=error), uuid7())

        await hook.refetch()

        assert hook.error is error
        assert hook.data is None
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_set_params_refetches_only_on_change(self):
        first, second = uuid7(), uuid7()
        fetcher = AsyncMock(side_effect=lambda team_id: [str(team_id)])
        hook = QueryHook(fetcher, first)
        await hook.refetch()

        await hook.set_params(first)
        assert fetcher.await_count == 1

        await hook.set_params(second)
        assert fetcher.await_count == 2
        assert hook.data == [str(second)]
        assert hook.params == (second,)

    @pytest.mark.asyncio
    async def test_set_params_to_none_clears_data(self):
        hook = QueryHook(AsyncMock(return_value=["player"]), uuid7())
        await hook.refetch()

        await hook.set_params(None)

        assert hook.data is None
        assert hook.is_loading is False

    @pytest.mark.asyncio
    async def test_factory_binds_client_method(self):
        client = AsyncMock(spec=ApiClient)
        client.get_team_players.return_value = []
        team_id = uuid7()

        hook = use_team_players(client, team_id)
        await hook.refetch()

        client.get_team_players.assert_awaited_once_with(team_id)
        assert hook.data == []

    @pytest.mark.asyncio
    async def test_filtered_hook_passes_options_through(self):
        # Arrange
        client = AsyncMock(spec=ApiClient)
        client.get_club_players.return_value = "page"
        club_id, team_id = uuid7(), uuid7()
        hook = use_club_players(client, club_id, page=2, team_id=team_id, search="ada")

        # Act
        await hook.refetch()

        # Assert
        client.get_club_players.assert_awaited_once_with(
            club_id,
            page=2,
            page_size=30,
            age_group_id=None,
            team_id=team_id,
            position=None,
            search="ada",
            include_archived=False,
        )
        assert hook.data == "page"

    @pytest.mark.asyncio
    async def test_filtered_hook_without_club_is_skipped(self):
        client = AsyncMock(spec=ApiClient)
        hook = use_club_players(client, None, search="ada")

        await hook.refetch()

        client.get_club_players.assert_not_called()
        assert hook.data is None

    @pytest.mark.asyncio
    async def test_my_clubs_hook_has_no_key(self):
        client = AsyncMock(spec=ApiClient)
        client.get_my_clubs.return_value = []
        hook = use_my_clubs(client)

        await hook.refetch()

        client.get_my_clubs.assert_awaited_once_with()
        assert hook.data == []


@pytest.mark.unit
class TestMutationHook:
    """Test MutationHook."""

    @pytest.mark.asyncio
    async def test_execute_returns_data(self):
        action = AsyncMock(return_value="membership")
        hook = MutationHook(action)

        result = await hook.execute("team", body="request")

        assert result == "membership"
        assert hook.data == "membership"
        assert hook.is_submitting is False
        action.assert_awaited_once_with("team", body="request")

    @pytest.mark.asyncio
    async def test_failure_returns_none_and_stores_error(self):
        error = ApiError(
            "Squad number 7 is already assigned to another player", status_code=409
        )
        hook = MutationHook(AsyncMock(side_effect=error))

        result = await hook.execute("team")

        assert result is None
        assert hook.error is error
        assert hook.is_submitting is False

    @pytest.mark.asyncio
    async def test_next_execute_clears_previous_error(self):
        hook = MutationHook(
            AsyncMock(side_effect=[ApiError("boom", status_code=500), "ok"])
        )
        await hook.execute()

        result = await hook.execute()

        assert result == "ok"
        assert hook.error is None

    def test_reset(self):
        hook = MutationHook(AsyncMock())
        hook.data = "x"
        hook.error = ApiError("boom")

        hook.reset()

        assert hook.data is None
        assert hook.error is None
