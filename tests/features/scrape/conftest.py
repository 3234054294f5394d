"""Step definitions for scrape features."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from pytest_bdd import given, parsers, then, when

from lve_exporter.app import create_app
from tests.payloads import build_payload, lve_user


class ScenarioSource:
    """StatsSourcePort whose payload can change between scrapes."""

    def __init__(self) -> None:
        self.payload = b""
        self.calls = 0

    def fetch(self) -> bytes:
        self.calls += 1
        return self.payload


@dataclass
class ScrapeScenarioContext:
    """State shared between the steps of one scenario."""

    source: ScenarioSource = field(default_factory=ScenarioSource)
    status_code: int | None = None
    samples: list[tuple[str, dict[str, str], float]] = field(default_factory=list)


def run_async(coro: Any) -> Any:
    """Run a coroutine from a synchronous step."""
    return asyncio.run(coro)


def parse_samples(text: str) -> list[tuple[str, dict[str, str], float]]:
    """Parse LVE sample lines of a Prometheus text body.

    Only handles the single `username` label the exporter emits, with
    label values free of escaped quotes.
    """
    samples = []
    for line in text.splitlines():
        if not line.startswith("LVE_"):
            continue
        series, _, value = line.rpartition(" ")
        name, _, rest = series.partition("{")
        key, _, quoted = rest.rstrip("}").partition("=")
        samples.append((name, {key: quoted.strip('"')}, float(value)))
    return samples


async def scrape(ctx: ScrapeScenarioContext) -> None:
    app = create_app(ctx.source)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/metrics")
    ctx.status_code = response.status_code
    ctx.samples = parse_samples(response.text)


@pytest.fixture
def ctx() -> ScrapeScenarioContext:
    """Fresh scenario context for each test."""
    return ScrapeScenarioContext()


@given("the statistics output:")
def given_statistics_output(ctx: ScrapeScenarioContext, docstring: str) -> None:
    ctx.source.payload = docstring.encode()


@given("the statistics output is empty")
def given_empty_output(ctx: ScrapeScenarioContext) -> None:
    ctx.source.payload = b""


@given(parsers.parse('a statistics output with users "{first}" and "{second}"'))
def given_two_users(ctx: ScrapeScenarioContext, first: str, second: str) -> None:
    ctx.source.payload = build_payload(
        lve_user(first, usage={"cpu": 1.0}), lve_user(second, usage={"cpu": 2.0})
    )


@when("the exporter is scraped")
def when_scraped(ctx: ScrapeScenarioContext) -> None:
    run_async(scrape(ctx))


@when(parsers.parse('the statistics output changes to a single user "{username}"'))
def when_output_changes(ctx: ScrapeScenarioContext, username: str) -> None:
    ctx.source.payload = build_payload(lve_user(username))


@then(parsers.parse("the scrape has {n:d} samples"))
def then_sample_count(ctx: ScrapeScenarioContext, n: int) -> None:
    assert len(ctx.samples) == n


@then(parsers.parse('sample "{name}" for "{username}" is {value:g}'))
def then_sample_value(
    ctx: ScrapeScenarioContext, name: str, username: str, value: float
) -> None:
    matching = [
        v for n, labels, v in ctx.samples if n == name and labels["username"] == username
    ]
    assert matching == [value]


@then(parsers.parse('every other sample for "{username}" is 0.0'))
def then_other_samples_zero(ctx: ScrapeScenarioContext, username: str) -> None:
    user_samples = [s for s in ctx.samples if s[1]["username"] == username]
    assert len(user_samples) == 21
    assert sum(1 for _, _, v in user_samples if v != 0.0) <= 1


@then(parsers.parse('{n:d} samples are labelled "{username}"'))
def then_samples_labelled(ctx: ScrapeScenarioContext, n: int, username: str) -> None:
    assert sum(1 for _, labels, _ in ctx.samples if labels == {"username": username}) == n


@then(parsers.parse("the metrics endpoint answered {code:d}"))
def then_status(ctx: ScrapeScenarioContext, code: int) -> None:
    assert ctx.status_code == code
