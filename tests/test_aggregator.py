"""Unit tests for cursor pagination and the partial-result-on-error policy."""

from __future__ import annotations

import pytest
from fathom_mcp_server.aggregator import fetch_all_meetings

from .conftest import FakeMeetingSource, make_meeting


def _ids(result):
    return [m.recording_id for m in result.meetings]


class TestFetchAllMeetings:
    @pytest.mark.asyncio
    async def test_concatenates_pages_in_cursor_order(self):
        source = FakeMeetingSource(
            [
                ([make_meeting(1), make_meeting(2)], "c1"),
                ([make_meeting(3)], "c2"),
                ([make_meeting(4)], None),
            ]
        )
        result = await fetch_all_meetings(source)
        assert _ids(result) == [1, 2, 3, 4]
        assert result.had_error is False
        assert [c["cursor"] for c in source.list_calls] == ["", "c1", "c2"]

    @pytest.mark.asyncio
    async def test_zero_meetings(self):
        source = FakeMeetingSource([([], None)])
        result = await fetch_all_meetings(source)
        assert result.meetings == []
        assert result.had_error is False
        assert len(source.list_calls) == 1

    @pytest.mark.asyncio
    async def test_empty_page_with_cursor_continues(self):
        source = FakeMeetingSource([([], "c1"), ([make_meeting(7)], "")])
        result = await fetch_all_meetings(source)
        assert _ids(result) == [7]
        assert len(source.list_calls) == 2

    @pytest.mark.asyncio
    async def test_duplicates_are_kept(self):
        source = FakeMeetingSource([([make_meeting(1)], "c1"), ([make_meeting(1)], None)])
        result = await fetch_all_meetings(source)
        assert _ids(result) == [1, 1]

    @pytest.mark.asyncio
    async def test_failure_returns_pages_before_it(self):
        source = FakeMeetingSource(
            [
                ([make_meeting(1)], "c1"),
                ([make_meeting(2)], "c2"),
                ([make_meeting(3)], None),
            ],
            fail_at=1,
        )
        result = await fetch_all_meetings(source)
        assert _ids(result) == [1]
        assert result.had_error is True
        # Page 3 is never requested
        assert [c["cursor"] for c in source.list_calls] == ["", "c1"]

    @pytest.mark.asyncio
    async def test_failure_on_first_page(self):
        source = FakeMeetingSource([([make_meeting(1)], None)], fail_at=0)
        result = await fetch_all_meetings(source)
        assert result.meetings == []
        assert result.had_error is True

    @pytest.mark.asyncio
    async def test_include_flags_forwarded(self):
        source = FakeMeetingSource([([], None)])
        await fetch_all_meetings(source, include_summary=True, include_transcript=True)
        assert source.list_calls[0]["include_summary"] is True
        assert source.list_calls[0]["include_transcript"] is True
