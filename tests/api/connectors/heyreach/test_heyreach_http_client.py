"""Testes para o Transport HTTP da HeyReach (httpx.MockTransport, sem rede)."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from api.connectors.heyreach.http_client import (
    JSON_CONTENT_TYPE,
    HeyReachHttpClient,
    HttpClientConfig,
    create_heyreach_http_client,
)
from api.connectors.heyreach.wire_models import WireCampaignSummary
from app.protocols import HttpMethod
from config.settings import HeyReachSettings
from utils.errors import ApiError, ApiErrorKind

API_KEY = "secret-key-123"

Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler) -> HeyReachHttpClient:
    return HeyReachHttpClient(HttpClientConfig(transport=httpx.MockTransport(handler)))


def _recording(
    response: httpx.Response,
) -> tuple[Handler, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response

    return handler, seen


class TestRequestConstruction:
    """Montagem da requisição."""

    def test_url_method_and_headers(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={"ok": True}))

        result = _client(handler).send(
            HttpMethod.GET, "/api/public/campaign/GetById?campaignId=7", API_KEY
        )

        assert result == {"ok": True}
        request = seen[0]
        assert request.method == "GET"
        assert str(request.url) == "https://api.heyreach.io/api/public/campaign/GetById?campaignId=7"
        assert request.headers["content-type"] == JSON_CONTENT_TYPE
        assert request.headers["x-api-key"] == API_KEY
        assert request.headers["user-agent"] == "heyreach-client/0.1"

    def test_body_is_json(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={"totalCount": 0, "items": []}))

        _client(handler).send(
            HttpMethod.POST,
            "/api/public/campaign/GetAll",
            API_KEY,
            {"offset": 0, "limit": 10, "keyword": "ação"},
        )

        assert json.loads(seen[0].content) == {"offset": 0, "limit": 10, "keyword": "ação"}

    def test_get_without_body_sends_no_content(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={}))

        _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert seen[0].content == b""

    def test_custom_api_key_header(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={}))
        client = HeyReachHttpClient(
            HttpClientConfig(api_key_header="X-Custom-Key", transport=httpx.MockTransport(handler))
        )

        client.send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert seen[0].headers["x-custom-key"] == API_KEY

    def test_header_injection_is_rejected_before_sending(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={}))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", "key\r\nX-Evil: 1")

        assert exc_info.value == ApiError(ApiErrorKind.UNKNOWN, "Failed to build request headers")
        assert seen == []

    def test_unserializable_body_is_bad_request(self) -> None:
        handler, seen = _recording(httpx.Response(200, json={}))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(
                HttpMethod.POST, "/api/public/lead/GetLead", API_KEY, {"when": object()}
            )

        assert exc_info.value.kind is ApiErrorKind.BAD_REQUEST
        assert exc_info.value.message.startswith("Failed to serialize body")
        assert seen == []


class TestErrorClassification:
    """Status >= 400 viram ApiError classificado."""

    def test_rate_limited(self) -> None:
        handler, _ = _recording(httpx.Response(429, json={"message": "rate limited"}))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(HttpMethod.POST, "/api/public/campaign/GetAll", API_KEY, {})

        assert exc_info.value == ApiError(ApiErrorKind.TOO_MANY_REQUESTS, "rate limited")

    def test_not_found_plain_text(self) -> None:
        handler, _ = _recording(httpx.Response(404, content=b"not found"))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(
                HttpMethod.GET, "/api/public/list/GetById?listId=1", API_KEY
            )

        assert exc_info.value == ApiError(ApiErrorKind.NOT_FOUND, "not found")

    def test_server_error_is_unknown(self) -> None:
        handler, _ = _recording(httpx.Response(500, json={"detail": "boom"}))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send_empty(HttpMethod.POST, "/api/public/campaign/Pause?campaignId=1", API_KEY)

        assert exc_info.value == ApiError(ApiErrorKind.UNKNOWN, "boom")

    def test_unauthorized_on_send_empty(self) -> None:
        handler, _ = _recording(httpx.Response(401, json={"errorMessage": "invalid api key"}))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send_empty(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert exc_info.value == ApiError(ApiErrorKind.UNAUTHORIZED, "invalid api key")

    def test_redirect_is_not_followed(self) -> None:
        handler, seen = _recording(
            httpx.Response(302, headers={"Location": "https://elsewhere.example/"}, content=b"")
        )

        _client(handler).send_empty(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert len(seen) == 1


class TestTransportFailures:
    """Falhas de rede viram UNKNOWN com a etapa na mensagem."""

    @pytest.mark.parametrize(
        ("exc_factory", "message"),
        [
            (lambda r: httpx.ReadTimeout("timed out", request=r), "Request timed out"),
            (lambda r: httpx.ConnectTimeout("timed out", request=r), "Request timed out"),
            (lambda r: httpx.ReadError("reset", request=r), "Failed to read response"),
            (lambda r: httpx.ConnectError("refused", request=r), "Failed to send request"),
        ],
    )
    def test_transport_exception(
        self,
        exc_factory: Callable[[httpx.Request], Exception],
        message: str,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert exc_info.value == ApiError(ApiErrorKind.UNKNOWN, message)


class TestResponseParsing:
    """Desserialização de respostas 2xx."""

    def test_invalid_utf8(self) -> None:
        handler, _ = _recording(httpx.Response(200, content=b"\xff\xfe"))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert exc_info.value == ApiError(ApiErrorKind.UNKNOWN, "Invalid UTF-8 in response")

    def test_invalid_json(self) -> None:
        handler, _ = _recording(httpx.Response(200, content=b"{not json"))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert exc_info.value.kind is ApiErrorKind.UNKNOWN
        assert exc_info.value.message.startswith("Failed to parse response")

    def test_typed_response(self) -> None:
        handler, _ = _recording(
            httpx.Response(200, json={"id": 7, "name": "Q3 outreach", "status": "ACTIVE"})
        )

        wire = _client(handler).send(
            HttpMethod.GET,
            "/api/public/campaign/GetById?campaignId=7",
            API_KEY,
            response_type=WireCampaignSummary,
        )

        assert isinstance(wire, WireCampaignSummary)
        assert wire.id == 7
        assert wire.status == "ACTIVE"

    def test_typed_response_validation_failure(self) -> None:
        handler, _ = _recording(httpx.Response(200, json=[1, 2]))

        with pytest.raises(ApiError) as exc_info:
            _client(handler).send(
                HttpMethod.GET,
                "/api/public/campaign/GetById?campaignId=7",
                API_KEY,
                response_type=WireCampaignSummary,
            )

        assert exc_info.value.kind is ApiErrorKind.UNKNOWN
        assert exc_info.value.message.startswith("Failed to parse response")

    def test_int_response(self) -> None:
        handler, _ = _recording(httpx.Response(200, content=b"3"))

        count = _client(handler).send(
            HttpMethod.POST, "/api/public/campaign/AddLeadsToCampaign", API_KEY, {}, response_type=int
        )

        assert count == 3

    def test_send_empty_ignores_body(self) -> None:
        handler, _ = _recording(httpx.Response(200, content=b"\xff not json at all"))

        result = _client(handler).send_empty(
            HttpMethod.POST, "/api/public/campaign/Resume?campaignId=1", API_KEY
        )

        assert result is None


class TestLoggingHygiene:
    """A API key nunca aparece em logs."""

    def test_api_key_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        handler, _ = _recording(httpx.Response(401, json={"message": "bad key"}))

        with caplog.at_level(logging.DEBUG), pytest.raises(ApiError):
            _client(handler).send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

        assert caplog.records
        for record in caplog.records:
            rendered: dict[str, Any] = vars(record)
            assert API_KEY not in repr(rendered)

    def test_error_is_logged_with_kind(self, caplog: pytest.LogCaptureFixture) -> None:
        handler, _ = _recording(httpx.Response(429, json={"message": "slow down"}))

        with caplog.at_level(logging.WARNING), pytest.raises(ApiError):
            _client(handler).send(HttpMethod.POST, "/api/public/campaign/GetAll", API_KEY, {})

        record = next(r for r in caplog.records if r.getMessage() == "heyreach_api_error")
        assert record.error_kind == "too_many_requests"
        assert record.status_code == 429


def test_factory_uses_settings() -> None:
    handler, seen = _recording(httpx.Response(200, json={}))
    settings = HeyReachSettings(
        api_base_url="https://staging.heyreach.io",
        api_key_header="X-Other",
        user_agent="custom/2.0",
    )

    client = create_heyreach_http_client(settings, transport=httpx.MockTransport(handler))
    client.send(HttpMethod.GET, "/api/public/auth/CheckApiKey", API_KEY)

    assert client.config.base_url == "https://staging.heyreach.io"
    assert seen[0].url.host == "staging.heyreach.io"
    assert seen[0].headers["x-other"] == API_KEY
    assert seen[0].headers["user-agent"] == "custom/2.0"
