"""Account probing orchestration.

The pipeline fans out one asyncio task per address, waits for all of them
and folds the collected results once, single-threaded. Each task returns
its own `CheckResult`; nothing is mutated concurrently. A transport failure
in one task is recorded as a failed result and never cancels its siblings.

Side-effects (printing, progress) stay in the CLI through `PipelineHooks`.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Sequence

import httpx

from adapters.credential_type import CredentialTypeProber
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.errors import ProbeError
from core.domain.models import Aggregate, CheckResult, Outcome, PipelineResult
from core.interfaces.prober import AccountProber

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    on_start: Callable[[int], None] | None = None
    on_result: Callable[[CheckResult], None] | None = None


async def _run_unit(
    prober: AccountProber,
    address: str,
    semaphore: asyncio.Semaphore | None,
) -> CheckResult:
    try:
        if semaphore is None:
            outcome = await prober.probe(address)
        else:
            async with semaphore:
                outcome = await prober.probe(address)
    except ProbeError as exc:
        logger.warning("probe failed for %r: %s", address, exc.reason)
        return CheckResult.failure(address, exc.reason)
    return CheckResult.success(address, outcome)


async def dispatch(
    addresses: Sequence[str],
    prober: AccountProber,
    *,
    max_concurrency: int | None = None,
    on_result: Callable[[CheckResult], None] | None = None,
) -> list[CheckResult]:
    """Probe every address concurrently and return results in completion order.

    One task per address is created up front. With `max_concurrency=None`
    there is no ceiling; otherwise a semaphore bounds the in-flight probes.
    Returns only after every task has finished.
    """

    if not addresses:
        return []

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    tasks = [asyncio.create_task(_run_unit(prober, address, semaphore)) for address in addresses]
    logger.info("dispatched %d probe(s) (max_concurrency=%s)", len(tasks), max_concurrency or "unbounded")

    results: list[CheckResult] = []
    for next_done in asyncio.as_completed(tasks):
        result = await next_done
        results.append(result)
        if on_result:
            on_result(result)
    return results


def aggregate(results: Iterable[CheckResult]) -> Aggregate:
    """Fold results into counts and the ordered list of valid addresses.

    Counts and the set of valid addresses do not depend on the order of
    `results`; only the order of `valid_addresses` follows it.
    """

    total = valid = invalid = unknown = failed = 0
    valid_addresses: list[str] = []
    for result in results:
        total += 1
        if result.failed:
            failed += 1
        elif result.outcome is Outcome.VALID:
            valid += 1
            valid_addresses.append(result.address)
        elif result.outcome is Outcome.INVALID:
            invalid += 1
        else:
            unknown += 1
    return Aggregate(
        total=total,
        valid=valid,
        invalid=invalid,
        unknown=unknown,
        failed=failed,
        valid_addresses=valid_addresses,
    )


async def check_addresses(
    *,
    settings: AppSettings,
    addresses: Sequence[str],
    hooks: PipelineHooks | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()
    started_at = datetime.now(timezone.utc)

    if hooks.on_start:
        hooks.on_start(len(addresses))

    async with build_async_client(settings, transport=transport) as client:
        prober = CredentialTypeProber(client, settings)
        results = await dispatch(
            addresses,
            prober,
            max_concurrency=settings.max_concurrency,
            on_result=hooks.on_result,
        )

    summary = aggregate(results)
    logger.info(
        "finished: %d valid, %d invalid, %d unknown, %d failed of %d",
        summary.valid,
        summary.invalid,
        summary.unknown,
        summary.failed,
        summary.total,
    )
    return PipelineResult(
        results=results,
        aggregate=summary,
        started_at=started_at,
        finished_at=datetime.now(timezone.utc),
    )


async def check_address(
    *,
    settings: AppSettings,
    address: str,
    hooks: PipelineHooks | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PipelineResult:
    return await check_addresses(settings=settings, addresses=[address], hooks=hooks, transport=transport)
