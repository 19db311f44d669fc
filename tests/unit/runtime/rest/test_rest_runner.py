"""Precise unit tests for RestRunner.

Tests focus on endpoint execution, parameter building, and method dispatch.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from yuque.docs.runtime.rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        """Create mock REST transport."""
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(return_value={"data": "read"})
        transport.post = AsyncMock(return_value={"data": "created"})
        transport.put = AsyncMock(return_value={"data": "updated"})
        transport.delete = AsyncMock(return_value={"data": "deleted"})
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        """Test GET endpoints send the built path and query."""
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: f"/repos/{p['namespace']}/docs",
            build_query=lambda p: {"offset": p.get("offset")},
        )
        params = {"namespace": "a/b", "offset": 20}

        result = await runner.run(spec=spec, adapter=mock_adapter, params=params)

        assert result == {"parsed": "data"}
        mock_transport.get.assert_awaited_once_with(
            "/repos/a/b/docs", params={"offset": 20}, headers=None
        )
        mock_adapter.parse.assert_called_once_with({"data": "read"}, params)

    @pytest.mark.asyncio
    async def test_run_post_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="create",
            method="POST",
            build_path=lambda p: "/docs",
            build_body=lambda p: {"title": p["title"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"title": "t"})

        mock_transport.post.assert_awaited_once_with(
            "/docs", json_body={"title": "t"}, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_put_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="update",
            method="put",
            build_path=lambda p: f"/docs/{p['id']}",
            build_body=lambda p: {"body": p["body"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"id": 3, "body": "x"})

        mock_transport.put.assert_awaited_once_with("/docs/3", json_body={"body": "x"}, headers=None)

    @pytest.mark.asyncio
    async def test_run_delete_endpoint(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(id="delete", method="DELETE", build_path=lambda p: "/docs/3")

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.delete.assert_awaited_once_with("/docs/3", params=None, headers=None)

    @pytest.mark.asyncio
    async def test_run_with_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: "/user",
            build_headers=lambda p: {"X-Request-Id": p["rid"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"rid": "r1"})

        assert mock_transport.get.call_args.kwargs["headers"] == {"X-Request-Id": "r1"}

    def test_default_adapter_passes_through(self):
        assert ResponseAdapter().parse({"data": 1}, {}) == {"data": 1}
