"""Transport HTTP da API HeyReach.

Responsabilidades:
- Montar uma requisição (método, path com query, API key, corpo JSON)
- Enviar com exatamente uma ida e volta (sem retry, sem redirect)
- Bufferizar o corpo inteiro da resposta
- Classificar status >= 400 em ApiErrorKind
- Desserializar respostas 2xx no tipo alvo (pydantic TypeAdapter)

Toda falha vira ApiError com mensagem que nomeia a etapa. A API key nunca
é logada; corpos também não.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from api.connectors.heyreach.api_errors import error_from_response
from api.connectors.heyreach.api_logging import log_api_error, log_success
from app.protocols.http_client import HttpMethod
from utils.errors import ApiError, ApiErrorKind

if TYPE_CHECKING:
    from config.settings import HeyReachSettings

logger: logging.Logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# Status considerados sucesso: [200, 400)
_SUCCESS_MIN = 200
_ERROR_MIN = 400


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do Transport.

    `transport` permite injetar um httpx.BaseTransport (ex: MockTransport
    em testes); None usa a pilha de rede padrão do httpx.
    """

    base_url: str = "https://api.heyreach.io"
    api_key_header: str = "X-API-KEY"
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "heyreach-client/0.1"
    transport: httpx.BaseTransport | None = None


@lru_cache(maxsize=64)
def _type_adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


class HeyReachHttpClient:
    """Cliente HTTP da API HeyReach.

    Sem estado entre chamadas: cada envio abre e fecha o seu próprio
    httpx.Client, então instâncias podem ser compartilhadas entre threads.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def send(
        self,
        method: HttpMethod,
        path: str,
        api_key: str,
        body: dict[str, Any] | None = None,
        *,
        response_type: Any = Any,
    ) -> Any:
        """Envia a requisição e desserializa a resposta 2xx.

        Args:
            method: GET, POST ou DELETE
            path: Path relativo à origem, incluindo query string
            api_key: Credencial enviada no header de API key
            body: Corpo serializado como JSON, se presente
            response_type: Tipo alvo da desserialização (Any = JSON cru)

        Returns:
            Valor validado como `response_type`

        Raises:
            ApiError: Em qualquer falha, já classificada
        """
        response = self._round_trip(method, path, api_key, body)
        return self._parse_response(response, method, path, response_type)

    def send_empty(
        self,
        method: HttpMethod,
        path: str,
        api_key: str,
        body: dict[str, Any] | None = None,
    ) -> None:
        """Como send, mas descarta o corpo de sucesso por completo."""
        response = self._round_trip(method, path, api_key, body)
        log_success(method.value, path, response.status_code, len(response.content))

    def _round_trip(
        self,
        method: HttpMethod,
        path: str,
        api_key: str,
        body: dict[str, Any] | None,
    ) -> httpx.Response:
        """Monta, envia e classifica; retorna apenas respostas de sucesso."""
        headers = self._build_headers(api_key)
        content = _serialize_body(body)

        with self._open_client() as client:
            try:
                request = client.build_request(
                    method.value,
                    path,
                    headers=headers,
                    content=content,
                )
            except (httpx.InvalidURL, TypeError, ValueError) as exc:
                raise self._fail(ApiErrorKind.UNKNOWN, "Failed to build request", method, path) from exc

            logger.debug(
                "heyreach_request_sending",
                extra={
                    "method": method.value,
                    "path": path,
                    "body_bytes": len(content) if content else 0,
                },
            )
            response = self._execute(client, request, method, path)

        status = response.status_code
        logger.debug(
            "heyreach_response_received",
            extra={
                "method": method.value,
                "path": path,
                "status_code": status,
                "body_bytes": len(response.content),
            },
        )

        if status >= _ERROR_MIN:
            error = error_from_response(status, response.content)
            log_api_error(error, method.value, path, status)
            raise error
        if status < _SUCCESS_MIN:
            raise self._fail(
                ApiErrorKind.UNKNOWN,
                f"Unexpected informational status HTTP {status}",
                method,
                path,
                status,
            )
        return response

    def _open_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            verify=self._config.verify_ssl,
            follow_redirects=False,
            transport=self._config.transport,
        )

    def _build_headers(self, api_key: str) -> httpx.Headers:
        """Monta headers obrigatórios; falha vira UNKNOWN sem vazar a chave."""
        try:
            if "\r" in api_key or "\n" in api_key:
                raise ValueError("line break in header value")
            return httpx.Headers(
                {
                    "Content-Type": JSON_CONTENT_TYPE,
                    "Accept": "application/json",
                    "User-Agent": self._config.user_agent,
                    self._config.api_key_header: api_key,
                }
            )
        except (TypeError, ValueError) as exc:
            # UnicodeEncodeError é subclasse de ValueError
            raise ApiError(ApiErrorKind.UNKNOWN, "Failed to build request headers") from exc

    def _execute(
        self,
        client: httpx.Client,
        request: httpx.Request,
        method: HttpMethod,
        path: str,
    ) -> httpx.Response:
        """Executa o envio; o corpo é lido por inteiro antes de retornar."""
        try:
            return client.send(request)
        except httpx.TimeoutException as exc:
            raise self._fail(ApiErrorKind.UNKNOWN, "Request timed out", method, path) from exc
        except (httpx.ReadError, httpx.StreamError) as exc:
            raise self._fail(ApiErrorKind.UNKNOWN, "Failed to read response", method, path) from exc
        except httpx.HTTPError as exc:
            raise self._fail(ApiErrorKind.UNKNOWN, "Failed to send request", method, path) from exc

    def _parse_response(
        self,
        response: httpx.Response,
        method: HttpMethod,
        path: str,
        response_type: Any,
    ) -> Any:
        status = response.status_code
        try:
            text = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise self._fail(
                ApiErrorKind.UNKNOWN, "Invalid UTF-8 in response", method, path, status
            ) from exc

        try:
            data = json.loads(text)
        except ValueError as exc:
            raise self._fail(
                ApiErrorKind.UNKNOWN, f"Failed to parse response: {exc}", method, path, status
            ) from exc

        try:
            value = _type_adapter(response_type).validate_python(data)
        except ValidationError as exc:
            raise self._fail(
                ApiErrorKind.UNKNOWN,
                f"Failed to parse response: {exc.error_count()} validation error(s)",
                method,
                path,
                status,
            ) from exc

        log_success(method.value, path, status, len(response.content))
        return value

    @staticmethod
    def _fail(
        kind: ApiErrorKind,
        message: str,
        method: HttpMethod,
        path: str,
        status_code: int | None = None,
    ) -> ApiError:
        error = ApiError(kind, message)
        log_api_error(error, method.value, path, status_code)
        return error


def _serialize_body(body: dict[str, Any] | None) -> bytes | None:
    if body is None:
        return None
    try:
        return json.dumps(body, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise ApiError(ApiErrorKind.BAD_REQUEST, f"Failed to serialize body: {exc}") from exc


def create_heyreach_http_client(
    settings: HeyReachSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> HeyReachHttpClient:
    """Factory para criar o Transport a partir das settings.

    Args:
        settings: HeyReachSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes).

    Returns:
        Transport configurado.
    """
    # Import local para evitar dependência circular
    from config.settings import get_heyreach_settings

    heyreach = settings or get_heyreach_settings()
    config = HttpClientConfig(
        base_url=heyreach.api_base_url,
        api_key_header=heyreach.api_key_header,
        timeout_seconds=heyreach.request_timeout_seconds,
        verify_ssl=heyreach.verify_ssl,
        user_agent=heyreach.user_agent,
        transport=transport,
    )
    return HeyReachHttpClient(config)
