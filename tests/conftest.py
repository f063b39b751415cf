from __future__ import annotations

import os
from typing import Callable, Mapping

import httpx
import pytest

from core.classifier import ABSENT_MARKER, EXISTS_MARKER
from core.config import AppSettings

ENDPOINT = "https://login.example.test/common/GetCredentialType"

EXISTS_BODY = '{"Username":"x","Display":"x",' + EXISTS_MARKER + ',"ThrottleStatus":0}'
ABSENT_BODY = '{"Username":"x","Display":"x",' + ABSENT_MARKER + ',"ThrottleStatus":0}'


def address_from_request(request: httpx.Request) -> str:
    body = request.content.decode("utf-8", errors="surrogateescape")
    prefix, suffix = '{"Username":"', '"}'
    assert body.startswith(prefix) and body.endswith(suffix)
    return body[len(prefix) : -len(suffix)]


def endpoint_transport(
    responses: Mapping[str, str | int | Exception],
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Fake GetCredentialType.

    Values are a response body (HTTP 200), an int status code (empty body) or
    an exception to raise. Addresses missing from the map get an empty 200.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        value = responses.get(address_from_request(request), "")
        if isinstance(value, Exception):
            raise value
        if isinstance(value, int):
            return httpx.Response(value, request=request)
        return httpx.Response(200, text=value, request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, endpoint_url=ENDPOINT)


@pytest.fixture
def make_transport() -> Callable[..., httpx.MockTransport]:
    return endpoint_transport


@pytest.fixture(autouse=True)
def no_user_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings built without `_env_file` must not read the developer's `.env`."""

    monkeypatch.setitem(AppSettings.model_config, "env_file", None)
    for name in list(os.environ):
        if name.upper().startswith("AZCHECK_"):
            monkeypatch.delenv(name)
