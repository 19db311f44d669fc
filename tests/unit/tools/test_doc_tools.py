"""Unit tests for DocumentTools handlers."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from yuque.docs.connectors.yuque import YuqueConfig, YuqueRESTConnector
from yuque.docs.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from yuque.docs.models import Doc, User
from yuque.docs.runtime.chunking import serialize
from yuque.docs.tools import DocumentTools, ToolResult


@pytest.fixture
def connector():
    return AsyncMock()


@pytest.fixture
def tools(connector):
    return DocumentTools(connector, logger=MagicMock())


class TestGetDoc:
    """Test the get_doc tool."""

    @pytest.mark.asyncio
    async def test_small_doc_returned_whole(self, tools, connector, sample_doc):
        connector.get_doc.return_value = sample_doc

        result = await tools.get_doc("alice/notes", "intro")

        assert isinstance(result, ToolResult)
        assert result.content[0].type == "text"
        assert result.text == serialize(sample_doc)
        connector.get_doc.assert_awaited_once_with("alice/notes", "intro")

    @pytest.mark.asyncio
    async def test_large_doc_first_chunk_by_default(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc

        result = await tools.get_doc("alice/notes", "handbook", chunk_size=1000)
        payload = json.loads(result.text)

        assert payload["_original_doc_id"] == 7
        assert payload["_chunk_info"]["index"] == 0
        assert payload["_chunk_info"]["total"] == 4
        assert payload["title"] == "Handbook [part 1/4]"
        assert payload["text_content"] == serialize(large_doc)[:1000]

    @pytest.mark.asyncio
    async def test_large_doc_requested_chunk(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc
        text = serialize(large_doc)

        result = await tools.get_doc("alice/notes", "handbook", chunk_index=3, chunk_size=1000)
        payload = json.loads(result.text)

        assert payload["_chunk_info"]["start_offset"] == 2400
        assert payload["_chunk_info"]["context"]["has_next"] is False
        assert payload["text_content"] == text[2400:]

    @pytest.mark.asyncio
    async def test_out_of_range_index_is_text(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc

        result = await tools.get_doc("alice/notes", "handbook", chunk_index=9, chunk_size=1000)

        assert result.text == "Invalid chunk_index: 9. Valid range is 0-3"

    @pytest.mark.asyncio
    async def test_invalid_chunk_size_is_text(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc

        result = await tools.get_doc("alice/notes", "handbook", chunk_size=100)

        assert result.text.startswith("Error fetching doc: chunk_size (100)")
        connector.get_doc.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remote_error_is_text(self, tools, connector):
        connector.get_doc.side_effect = NotFoundError("GET /x failed with HTTP 404", status_code=404)

        result = await tools.get_doc("alice/notes", "gone")

        assert result.text == "Error fetching doc: GET /x failed with HTTP 404"

    @pytest.mark.asyncio
    async def test_transport_error_is_text(self, tools, connector):
        connector.get_doc.side_effect = aiohttp.ClientConnectionError("connection refused")

        result = await tools.get_doc("alice/notes", "intro")

        assert result.text == "Error fetching doc: connection refused"


class TestGetDocChunksInfo:
    """Test the get_doc_chunks_info tool."""

    @pytest.mark.asyncio
    async def test_estimate_payload(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc
        total_length = len(serialize(large_doc))

        result = await tools.get_doc_chunks_info("alice/notes", "handbook", chunk_size=1000)
        payload = json.loads(result.text)

        assert payload["document_id"] == 7
        assert payload["title"] == "Handbook"
        assert payload["total_length"] == total_length
        assert payload["total_chunks"] == 4
        assert payload["overlap_size"] == 200
        assert payload["estimated_chunks"][1]["how_to_get"] == (
            "Use the get_doc tool with chunk_index=1"
        )

    @pytest.mark.asyncio
    async def test_estimate_agrees_with_get_doc(self, tools, connector, large_doc):
        connector.get_doc.return_value = large_doc

        info = json.loads((await tools.get_doc_chunks_info("a/b", "s", chunk_size=1000)).text)
        for summary in info["estimated_chunks"]:
            chunk = json.loads(
                (await tools.get_doc("a/b", "s", chunk_index=summary["index"], chunk_size=1000)).text
            )
            assert chunk["_chunk_info"]["start_offset"] == summary["approximate_start"]
            assert chunk["_chunk_info"]["end_offset"] == summary["approximate_end"]

    @pytest.mark.asyncio
    async def test_error_is_text(self, tools, connector):
        connector.get_doc.side_effect = AuthenticationError("denied", status_code=401)

        result = await tools.get_doc_chunks_info("alice/notes", "intro")

        assert result.text == "Error fetching doc chunks info: denied"


class TestOtherTools:
    """Test the forwarding tools."""

    @pytest.mark.asyncio
    async def test_get_current_user(self, tools, connector):
        connector.get_current_user.return_value = User(id=1, login="alice")

        result = await tools.get_current_user()

        assert json.loads(result.text) == {"id": 1, "login": "alice"}

    @pytest.mark.asyncio
    async def test_get_repo_docs(self, tools, connector):
        connector.get_repo_docs.return_value = [Doc(id=1, title="a"), Doc(id=2, title="b")]

        result = await tools.get_repo_docs("alice/notes")

        assert json.loads(result.text) == [{"id": 1, "title": "a"}, {"id": 2, "title": "b"}]

    @pytest.mark.asyncio
    async def test_create_doc_defaults(self, tools, connector):
        connector.create_doc.return_value = Doc(id=3, title="New")

        await tools.create_doc("alice/notes", "New", "new", "# New")

        connector.create_doc.assert_awaited_once_with(
            "alice/notes", "New", "new", "# New", format="markdown", public=1
        )

    @pytest.mark.asyncio
    async def test_delete_doc_message(self, tools, connector):
        result = await tools.delete_doc("alice/notes", 12)

        assert result.text == "Document 12 has been successfully deleted"
        connector.delete_doc.assert_awaited_once_with("alice/notes", 12)

    @pytest.mark.asyncio
    async def test_search_error_label(self, tools, connector):
        connector.search.side_effect = AuthenticationError("denied", status_code=403)

        result = await tools.search("x", "doc")

        assert result.text == "Error searching: denied"

    @pytest.mark.asyncio
    async def test_group_statistics(self, tools, connector):
        connector.get_group_statistics.return_value = {"members": 3}

        result = await tools.get_group_statistics("team")

        assert json.loads(result.text) == {"members": 3}

    @pytest.mark.asyncio
    async def test_failure_logged(self, connector):
        logger = MagicMock()
        tools = DocumentTools(connector, logger=logger)
        connector.get_user_docs.side_effect = NotFoundError("nope", status_code=404)

        await tools.get_user_docs()

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["extra"]["tool"] == "get_user_docs"


class TestCall:
    """Test argument validation and dispatch through call()."""

    @pytest.mark.asyncio
    async def test_call_get_doc_defaults(self, tools, connector, sample_doc):
        connector.get_doc.return_value = sample_doc

        result = await tools.call("get_doc", {"namespace": "alice/notes", "slug": "intro"})

        assert result.text == serialize(sample_doc)

    @pytest.mark.asyncio
    async def test_call_uses_wire_argument_names(self, tools, connector):
        connector.update_doc.return_value = Doc(id=4, title="T")

        await tools.call("update_doc", {"namespace": "a/b", "id": 4, "title": "T", "public": 0})

        connector.update_doc.assert_awaited_once_with(
            "a/b", 4, title="T", slug=None, body=None, public=0, format=None
        )

    @pytest.mark.asyncio
    async def test_call_statistics_arguments(self, tools, connector):
        connector.get_group_doc_statistics.return_value = {}

        await tools.call(
            "get_group_doc_statistics",
            {"login": "team", "bookId": 3, "sortField": "read_count", "sortOrder": "asc"},
        )

        connector.get_group_doc_statistics.assert_awaited_once_with(
            "team",
            name=None,
            range=None,
            page=None,
            limit=None,
            sort_field="read_count",
            sort_order="asc",
            book_id=3,
        )

    @pytest.mark.asyncio
    async def test_call_create_doc_public_level(self, tools, connector):
        connector.create_doc.return_value = Doc(id=3)

        await tools.call(
            "create_doc",
            {"namespace": "a/b", "title": "T", "slug": "t", "body": "b", "public_level": 2},
        )

        connector.create_doc.assert_awaited_once_with(
            "a/b", "T", "t", "b", format="markdown", public=2
        )

    @pytest.mark.asyncio
    async def test_call_unknown_tool(self, tools):
        with pytest.raises(ValidationError, match="Unknown tool"):
            await tools.call("format_disk", {})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,arguments",
        [
            ("get_doc", {"namespace": "a/b"}),
            ("search", {"query": "x", "type": "user"}),
            ("get_group_member_statistics", {"login": "team", "limit": 50}),
            ("get_current_user", {"unexpected": 1}),
        ],
    )
    async def test_call_invalid_arguments(self, tools, connector, name, arguments):
        with pytest.raises(ValidationError, match=f"Invalid arguments for {name}"):
            await tools.call(name, arguments)

        assert connector.mock_calls == []


class TestRemotePayloads:
    """Test handlers against a real connector with a mocked transport."""

    @pytest.fixture
    def remote(self):
        connector = YuqueRESTConnector(YuqueConfig(api_token="secret"))
        connector._transport.get = AsyncMock()
        return connector

    @pytest.fixture
    def remote_tools(self, remote):
        return DocumentTools(remote, logger=MagicMock())

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "handler,label",
        [("get_doc", "Error fetching doc"), ("get_doc_chunks_info", "Error fetching doc chunks info")],
    )
    async def test_doc_without_id_is_text(self, remote, remote_tools, handler, label):
        """Test a payload that fails model validation comes back as text."""
        remote._transport.get.return_value = {"data": {"title": "no id"}}

        result = await getattr(remote_tools, handler)("alice/notes", "intro")

        assert isinstance(result, ToolResult)
        assert result.text.startswith(f"{label}: Invalid response format for Doc")

    @pytest.mark.asyncio
    async def test_listing_with_bad_item_is_text(self, remote, remote_tools):
        remote._transport.get.return_value = {"data": [{"id": 1}, {"title": "no id"}]}

        result = await remote_tools.get_repo_docs("alice/notes")

        assert result.text.startswith("Error fetching docs: Invalid response format for Doc")

    @pytest.mark.asyncio
    async def test_doc_returned_as_received(self, remote, remote_tools):
        """Test a small document is returned with the remote values and key order."""
        payload = {"id": 1, "title": "T", "word_count": 12.0, "public": True, "body": "x"}
        remote._transport.get.return_value = {"data": payload}

        result = await remote_tools.get_doc("alice/notes", "intro")

        assert result.text == json.dumps(payload, indent=2, ensure_ascii=False)
