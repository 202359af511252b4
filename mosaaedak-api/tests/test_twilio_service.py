import asyncio
from unittest.mock import AsyncMock, MagicMock, Mock, patch

import httpx

from app.services.twilio_service import TwilioService


def _response(status_code: int, json_data=None, text: str = "") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text
    response.json.return_value = json_data or {}
    return response


def _setup_client(mock_client_class, response=None, error=None) -> MagicMock:
    mock_client = MagicMock()
    if error is not None:
        mock_client.post = AsyncMock(side_effect=error)
    else:
        mock_client.post = AsyncMock(return_value=response)
    mock_client_class.return_value.__aenter__.return_value = mock_client
    return mock_client


class TestTwilioService:
    def test_messages_url(self):
        service = TwilioService("AC123", "token", base_url="https://api.twilio.test/2010-04-01/")
        assert service.messages_url == "https://api.twilio.test/2010-04-01/Accounts/AC123/Messages.json"

    @patch("app.services.twilio_service.httpx.AsyncClient")
    def test_sends_form_with_basic_auth(self, mock_client_class):
        mock_client = _setup_client(mock_client_class, _response(201, {"sid": "SM1"}))

        service = TwilioService("AC123", "secret")
        result = asyncio.run(service.send_message(from_="whatsapp:+1", to="whatsapp:+2", body="hello"))

        assert result.ok is True
        assert result.value == {"sid": "SM1"}
        assert mock_client_class.call_args[1]["auth"] == ("AC123", "secret")
        call_args = mock_client.post.call_args
        assert call_args[0][0].endswith("/Accounts/AC123/Messages.json")
        assert call_args[1]["data"] == {"From": "whatsapp:+1", "To": "whatsapp:+2", "Body": "hello"}

    @patch("app.services.twilio_service.httpx.AsyncClient")
    def test_includes_media_url(self, mock_client_class):
        mock_client = _setup_client(mock_client_class, _response(201, {"sid": "SM2"}))

        service = TwilioService("AC123", "secret")
        asyncio.run(service.send_message(from_="a", to="b", body=" ", media_url="https://x.test/a.png"))

        assert mock_client.post.call_args[1]["data"]["MediaUrl"] == "https://x.test/a.png"

    @patch("app.services.twilio_service.httpx.AsyncClient")
    def test_non_success_is_failure(self, mock_client_class):
        _setup_client(mock_client_class, _response(400, text='{"code": 21211}'))

        result = asyncio.run(TwilioService("AC123", "secret").send_message(from_="a", to="b", body="c"))

        assert result.ok is False
        assert result.error_code == "send_failed"
        assert result.status_code == 400

    @patch("app.services.twilio_service.httpx.AsyncClient")
    def test_transport_error_is_failure(self, mock_client_class):
        _setup_client(mock_client_class, error=httpx.ReadTimeout("timeout"))

        result = asyncio.run(TwilioService("AC123", "secret").send_message(from_="a", to="b", body="c"))

        assert result.ok is False
        assert result.error_code == "transport_error"
