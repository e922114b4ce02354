"""Tests for the copywriting snippet client with mocked httpx."""

from unittest.mock import patch

import httpx
import pytest
import respx

from collector.config.schema import CopywritingSource
from collector.ingest.copywriting_client import CopywritingClient
from collector.text.converter import ChineseConverter

SOURCE = CopywritingSource(
    key="love",
    name="愛情文案",
    url="https://test-snippets.example.com/love?type=json",
    response_key="text",
    filename="love-copywriting.json",
)


@pytest.fixture
def client(passthrough: ChineseConverter) -> CopywritingClient:
    return CopywritingClient(passthrough, max_retries=1, retry_delay_ms=0)


class TestFetchText:
    @respx.mock
    def test_success(self, client: CopywritingClient):
        respx.get(SOURCE.url).mock(
            return_value=httpx.Response(200, json={"text": "你好"})
        )
        assert client.fetch_text(SOURCE) == "你好"

    @respx.mock
    def test_missing_key_retried_then_none(self, client: CopywritingClient):
        route = respx.get(SOURCE.url).mock(
            return_value=httpx.Response(200, json={"msg": "wrong key"})
        )
        assert client.fetch_text(SOURCE) is None
        assert route.call_count == 2

    @respx.mock
    def test_error_then_success(self, client: CopywritingClient):
        route = respx.get(SOURCE.url).mock(
            side_effect=[
                httpx.Response(500),
                httpx.Response(200, json={"text": "再試一次"}),
            ]
        )
        assert client.fetch_text(SOURCE) == "再試一次"
        assert route.call_count == 2

    @respx.mock
    def test_converter_applied(self):
        respx.get(SOURCE.url).mock(
            return_value=httpx.Response(200, json={"text": "爱情"})
        )
        client = CopywritingClient(ChineseConverter(), max_retries=0)
        assert client.fetch_text(SOURCE) == "愛情"

    @respx.mock
    def test_retry_sleeps(self, passthrough: ChineseConverter):
        respx.get(SOURCE.url).mock(side_effect=httpx.ConnectError("down"))
        client = CopywritingClient(passthrough, max_retries=2, retry_delay_ms=2000)
        with patch("collector.ingest.copywriting_client.time.sleep") as sleep:
            assert client.fetch_text(SOURCE) is None
        assert sleep.call_count == 2
