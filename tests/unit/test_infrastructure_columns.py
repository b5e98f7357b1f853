"""Unit tests for list-valued text column helpers.

Legacy rows hold either JSON arrays or comma-separated text; malformed
values must read as empty lists rather than failing the request.
"""

import pytest
from uuid_extensions import uuid7

from src.infrastructure.persistence.columns import (
    dump_text_list,
    dump_uuid_list,
    parse_text_list,
    parse_uuid_list,
)


@pytest.mark.unit
class TestParseTextList:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, []),
            ("", []),
            ("   ", []),
            ('["2023/24", "2024/25"]', ["2023/24", "2024/25"]),
            ("GK, CB", ["GK", "CB"]),
            ("GK,,CB,", ["GK", "CB"]),
            ("[bad", []),
            ('{"a": 1}', ['{"a": 1}']),
            ('[1, null, "x"]', ["1", "x"]),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_text_list(raw) == expected

    def test_dump_writes_json(self):
        assert dump_text_list(["GK", "CB"]) == '["GK", "CB"]'
        assert dump_text_list(None) is None


@pytest.mark.unit
class TestParseUuidList:
    def test_invalid_entries_are_skipped(self):
        first, second = uuid7(), uuid7()
        raw = dump_uuid_list([first, second])[:-1] + ', "not-a-uuid"]'

        assert parse_uuid_list(raw) == [first, second]
