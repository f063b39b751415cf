from __future__ import annotations

import asyncio

import httpx
import pytest

from adapters.credential_type import CredentialTypeProber, build_request_body
from adapters.http_client import build_async_client
from core.domain.errors import ProbeError
from core.domain.models import Outcome

from conftest import ABSENT_BODY, ENDPOINT, EXISTS_BODY, endpoint_transport


async def _probe(settings, transport, address: str) -> Outcome:
    async with build_async_client(settings, transport=transport) as client:
        return await CredentialTypeProber(client, settings).probe(address)


def test_request_body_is_not_escaped() -> None:
    assert build_request_body('we"ird\t@x.com') == b'{"Username":"we"ird\t@x.com"}'


def test_probe_sends_single_json_post(settings) -> None:
    seen: list[httpx.Request] = []
    transport = endpoint_transport({"b@x.com": EXISTS_BODY}, seen)

    outcome = asyncio.run(_probe(settings, transport, "b@x.com"))

    assert outcome is Outcome.VALID
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == ENDPOINT
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"Username":"b@x.com"}'


def test_probe_classifies_absent_account(settings) -> None:
    transport = endpoint_transport({"a@x.com": ABSENT_BODY})
    assert asyncio.run(_probe(settings, transport, "a@x.com")) is Outcome.INVALID


def test_probe_unrecognised_body_is_unknown(settings) -> None:
    transport = endpoint_transport({"c@x.com": "<html>maintenance</html>"})
    assert asyncio.run(_probe(settings, transport, "c@x.com")) is Outcome.UNKNOWN


def test_transport_error_raises_probe_error(settings) -> None:
    transport = endpoint_transport({"a@x.com": httpx.ConnectError("connection refused")})

    with pytest.raises(ProbeError) as excinfo:
        asyncio.run(_probe(settings, transport, "a@x.com"))

    assert excinfo.value.address == "a@x.com"
    assert "ConnectError" in excinfo.value.reason


def test_non_2xx_raises_probe_error(settings) -> None:
    transport = endpoint_transport({"a@x.com": 429})

    with pytest.raises(ProbeError, match="HTTP 429"):
        asyncio.run(_probe(settings, transport, "a@x.com"))


def test_client_has_no_timeout_by_default(settings) -> None:
    client = build_async_client(settings)
    try:
        assert client.timeout.connect is None
        assert client.timeout.read is None
    finally:
        asyncio.run(client.aclose())


def test_client_uses_configured_timeout(settings) -> None:
    client = build_async_client(settings.model_copy(update={"http_timeout_seconds": 3.0}))
    try:
        assert client.timeout.read == 3.0
    finally:
        asyncio.run(client.aclose())


def test_undecodable_argv_bytes_are_sent_verbatim(settings) -> None:
    address = "jos\udce9@x.com"
    seen: list[httpx.Request] = []
    transport = endpoint_transport({address: EXISTS_BODY}, seen)

    assert build_request_body(address) == b'{"Username":"jos\xe9@x.com"}'
    assert asyncio.run(_probe(settings, transport, address)) is Outcome.VALID
    assert seen[0].content == b'{"Username":"jos\xe9@x.com"}'
