from __future__ import annotations

import pytest

from core.classifier import ABSENT_MARKER, EXISTS_MARKER, classify
from core.domain.models import Outcome

from conftest import ABSENT_BODY, EXISTS_BODY


def test_exists_marker_is_valid() -> None:
    assert classify(EXISTS_BODY) is Outcome.VALID


def test_absent_marker_is_invalid() -> None:
    assert classify(ABSENT_BODY) is Outcome.INVALID


def test_absent_marker_wins_over_exists_marker() -> None:
    body = "{" + EXISTS_MARKER + "," + ABSENT_MARKER + "}"
    assert classify(body) is Outcome.INVALID


@pytest.mark.parametrize(
    "body",
    [
        "",
        None,
        b"",
        "<html>Service Unavailable</html>",
        '{"IfExistsResult": 0}',
        '{"IfExistsResult":5}',
        '{"Username":"a@b.c"',
        b"\xff\xfe\x00garbage",
    ],
)
def test_unmatched_bodies_are_unknown(body) -> None:
    assert classify(body) is Outcome.UNKNOWN


def test_bytes_are_decoded() -> None:
    assert classify(EXISTS_BODY.encode("utf-8")) is Outcome.VALID
    assert classify(b"\xff" + ABSENT_BODY.encode("utf-8")) is Outcome.INVALID
