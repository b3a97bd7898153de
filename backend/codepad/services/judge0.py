import asyncio, logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable

import httpx
from pydantic import ValidationError

from codepad.core.config import Settings
from codepad.core.errors import (
    ConfigurationError,
    ExecutionTimeout,
    ProtocolError,
    RemoteRejectionError,
    TransportError,
)
from codepad.schemas.run import ExecutionResult
from codepad.services.encoding import encode_base64
from codepad.services.status import format_result, is_terminal, status_label

log = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

INVALID_KEY_MESSAGE = (
    "Error: Invalid API key. Please check your Judge0 API configuration."
)
FORBIDDEN_MESSAGE = (
    "Error: API access forbidden. Please check your Judge0 subscription."
)
RATE_LIMIT_MESSAGE = "Error: Rate limit exceeded. Please try again later."
NOT_CONFIGURED_MESSAGE = (
    "Error: Judge0 API key not configured. "
    "Please add JUDGE0_API_KEY and JUDGE0_API_URL to your .env file."
)

_REJECTION_MESSAGES = {
    401: INVALID_KEY_MESSAGE,
    403: FORBIDDEN_MESSAGE,
    429: RATE_LIMIT_MESSAGE,
}


def _rejection_detail(resp: httpx.Response) -> str:
    text = resp.text
    try:
        data = resp.json()
    except ValueError:
        return text
    if not isinstance(data, dict):
        return text
    parts = [str(data[k]) for k in ("error", "message") if data.get(k)]
    return " - ".join(parts) if parts else text


class Judge0Client:
    """Submit source to Judge0, poll for the verdict and render it as text.

    One instance may serve many concurrent runs: every call keeps its own
    token and loop state, and settings are only read.
    """

    def __init__(
        self,
        settings: Settings,
        http: httpx.AsyncClient | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.settings = settings
        self._http = http
        self._sleep = sleep

    @property
    def base_url(self) -> str:
        return self.settings.JUDGE0_API_URL.rstrip("/")

    def _ensure_configured(self):
        if not self.settings.JUDGE0_API_KEY:
            raise ConfigurationError(
                "Judge0 API key not configured. Please set JUDGE0_API_KEY."
            )
        if not self.settings.JUDGE0_API_URL:
            raise ConfigurationError(
                "Judge0 API URL not configured. Please set JUDGE0_API_URL."
            )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-RapidAPI-Key": self.settings.JUDGE0_API_KEY,
        }
        if self.settings.JUDGE0_API_HOST:
            headers["X-RapidAPI-Host"] = self.settings.JUDGE0_API_HOST
        return headers

    @asynccontextmanager
    async def _client(self):
        if self._http is not None:
            yield self._http
            return
        async with httpx.AsyncClient(timeout=self.settings.HTTP_TIMEOUT_S) as client:
            yield client

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        self._ensure_configured()
        url = f"{self.base_url}{path}"
        try:
            async with self._client() as client:
                resp = await client.request(
                    method, url, headers=self._headers(), **kwargs
                )
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e
        if not resp.is_success:
            raise RemoteRejectionError(resp.status_code, _rejection_detail(resp))
        return resp

    async def submit(self, language_id: int, source_code: str, stdin: str = "") -> str:
        payload = {
            "language_id": language_id,
            "source_code": encode_base64(source_code),
            "stdin": encode_base64(stdin) if stdin else "",
        }
        preview = source_code[:100] + ("..." if len(source_code) > 100 else "")
        log.info(
            "Submitting code language_id=%d source_len=%d has_stdin=%s preview=%r",
            language_id,
            len(source_code),
            bool(stdin),
            preview,
        )
        resp = await self._request(
            "POST",
            "/submissions",
            params={"base64_encoded": "true", "wait": "false"},
            json=payload,
        )
        log.debug("Submit response status: %d", resp.status_code)
        try:
            data = resp.json()
        except ValueError as e:
            raise ProtocolError("Submission response is not JSON") from e
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ProtocolError("No token received from Judge0 API")
        log.info("Received token", extra={"token": token, "language_id": language_id})
        return token

    async def get_result(self, token: str) -> ExecutionResult:
        resp = await self._request(
            "GET",
            f"/submissions/{token}",
            params={"base64_encoded": "true", "fields": "*"},
        )
        try:
            return ExecutionResult.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise ProtocolError(f"Malformed result for {token}: {e}") from e

    async def await_result(self, token: str) -> ExecutionResult:
        interval = self.settings.POLL_INTERVAL_S
        max_attempts = self.settings.POLL_MAX_ATTEMPTS
        for attempt in range(1, max_attempts + 1):
            await self._sleep(interval)
            result = await self.get_result(token)
            log.info(
                "Poll attempt %d status=%s (%s)",
                attempt,
                status_label(result.status.id),
                result.status.description,
                extra={
                    "token": token,
                    "attempt": attempt,
                    "status_id": result.status.id,
                },
            )
            if is_terminal(result.status.id):
                return result
        raise ExecutionTimeout(token, max_attempts, max_attempts * interval)

    @staticmethod
    def format_result(result: ExecutionResult) -> str:
        return format_result(result)

    async def execute_code(
        self, language_id: int, source_code: str, stdin: str = ""
    ) -> str:
        try:
            token = await self.submit(language_id, source_code, stdin)
            result = await self.await_result(token)
        except ConfigurationError:
            log.warning("Execution requested without Judge0 configuration")
            return NOT_CONFIGURED_MESSAGE
        except RemoteRejectionError as e:
            message = _REJECTION_MESSAGES.get(e.status_code)
            if message is None:
                log.error("Judge0 rejected request: %s", e)
                raise
            log.warning("Judge0 rejected request: %s", e)
            return message
        except ExecutionTimeout as e:
            log.warning("Execution timed out: %s", e)
            return f"Error: Code execution timed out after {e.waited_seconds:g} seconds"
        return self.format_result(result)
