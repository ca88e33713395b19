"""
Telegram sender tests
"""

import json
import pytest
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from lazyfestival.delivery import ConsoleSender, TelegramSender
from lazyfestival.exceptions import DeliveryError


def make_sender(handler) -> TelegramSender:
    client = httpx.Client(
        base_url="https://api.telegram.org/bottest-token",
        transport=httpx.MockTransport(handler),
    )
    return TelegramSender(token="test-token", client=client)


class TestTelegramSender:
    """TelegramSender tests"""

    def test_send_success(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"ok": True, "result": {"message_id": 1}})

        result = make_sender(handler).send(42, '🔔 5 minutes until "Alpha"')

        assert result.success
        assert result.chat_id == 42
        assert requests[0].url.path == "/bottest-token/sendMessage"
        assert json.loads(requests[0].content) == {"chat_id": 42, "text": '🔔 5 minutes until "Alpha"'}

    def test_api_error_is_failure(self):
        def handler(request):
            return httpx.Response(403, json={"ok": False, "description": "Forbidden: bot was blocked by the user"})

        result = make_sender(handler).send(42, "hi")

        assert not result.success
        assert "blocked" in result.error_message

    def test_timeout_is_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = make_sender(handler).send(42, "hi")

        assert not result.success
        assert result.error_message == "request timed out"

    def test_connection_error_is_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        assert not make_sender(handler).send(42, "hi").success

    def test_invalid_json_is_failure(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        assert not make_sender(handler).send(42, "hi").success

    def test_missing_token(self, monkeypatch):
        monkeypatch.setattr("lazyfestival.delivery.telegram.settings.bot_token", "")
        with pytest.raises(DeliveryError):
            TelegramSender(token="")


class TestConsoleSender:
    """ConsoleSender tests"""

    def test_always_succeeds(self):
        assert ConsoleSender().send(42, "hi").success


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
