import base64, json
import httpx
import pytest
from codepad.core.config import Settings
from codepad.services.judge0 import Judge0Client


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def judge0_result(status_id: int, description: str = "", **fields) -> dict:
    return {"status": {"id": status_id, "description": description}, **fields}


QUEUED = judge0_result(1, "In Queue")
PROCESSING = judge0_result(2, "Processing")


class FakeJudge0:
    """MockTransport handler standing in for the Judge0 submissions API."""

    def __init__(
        self,
        results=(),
        token="tok-1",
        submit_status=201,
        submit_body=None,
        error=None,
    ):
        self.results = list(results)
        self.token = token
        self.submit_status = submit_status
        self.submit_body = submit_body
        self.error = error
        self.requests: list[httpx.Request] = []
        self.polls = 0

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.method == "POST":
            body = self.submit_body
            if body is None:
                body = {"token": self.token}
            if isinstance(body, str):
                return httpx.Response(self.submit_status, text=body)
            return httpx.Response(self.submit_status, json=body)
        self.polls += 1
        result = self.results[min(self.polls, len(self.results)) - 1]
        return httpx.Response(200, json=result)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def submitted(self) -> dict:
        return json.loads(self.requests[0].content)


class RecordingSleep:
    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float):
        self.calls.append(seconds)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        JUDGE0_API_KEY="test-key",
        JUDGE0_API_HOST="judge0.test",
        JUDGE0_API_URL="https://judge0.test/",
    )


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(settings, sleep):
    def _make(fake: FakeJudge0, cfg: Settings | None = None) -> Judge0Client:
        cfg = settings if cfg is None else cfg
        return Judge0Client(cfg, http=fake.client(), sleep=sleep)

    return _make
