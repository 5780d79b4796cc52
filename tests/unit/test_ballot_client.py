"""Tests for the proposition API client."""

import asyncio

import httpx

from app.models.proposition import PropositionCategory
from ballot_client import PropositionClient
from ballot_client.base import _is_retryable_error

PROPOSITIONS = [
    {
        "id": "2022-1",
        "number": "1",
        "year": 2022,
        "electionDate": "2022-11-08",
        "title": "Constitutional Right to Reproductive Freedom",
        "status": "passed",
        "category": "civil_rights",
        "result": {
            "yesVotes": 7176883,
            "noVotes": 3874524,
            "yesPercentage": 66.9,
            "noPercentage": 33.1,
            "totalVotes": 11051407,
            "passed": True,
        },
    },
    {"id": "2022-30", "number": "30", "year": 2022, "title": "Clean Air Tax", "status": "failed"},
]

FINANCE = {
    "propositionId": "2022-30",
    "totalSupport": 25000000,
    "totalOpposition": 8500000,
    "oppositionCommittees": [
        {"id": "c1", "name": "No on 30", "position": "opposition", "totalRaised": 8500000, "totalSpent": 8000000}
    ],
}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/propositions"):
        assert request.url.params["year"] == "2022"
        return httpx.Response(200, json=PROPOSITIONS)
    if request.url.path.endswith("/finance"):
        return httpx.Response(200, json=FINANCE)
    return httpx.Response(404)


def _client() -> PropositionClient:
    return PropositionClient(transport=httpx.MockTransport(_handler))


class TestPropositionClient:
    def test_propositions_by_year(self):
        async def run():
            async with _client() as client:
                return await client.propositions_by_year(2022)

        props = asyncio.run(run())
        assert [p.id for p in props] == ["2022-1", "2022-30"]
        assert props[0].category == PropositionCategory.CIVIL_RIGHTS
        assert props[0].result.passed
        assert props[1].result is None
        assert props[1].category == PropositionCategory.OTHER

    def test_finance(self):
        async def run():
            async with _client() as client:
                return await client.proposition_finance("2022-30")

        finance = asyncio.run(run())
        assert finance.total_support == 25_000_000
        assert finance.opposition_committees[0].total_spent == 8_000_000

    def test_opens_lazily(self):
        async def run():
            client = _client()
            props = await client.propositions_by_year(2022)
            await client.__aexit__(None, None, None)
            return props

        assert len(asyncio.run(run())) == 2


class TestRetryable:
    def test_network_errors(self):
        assert _is_retryable_error(httpx.ConnectError("down"))

    def test_server_errors_only(self):
        request = httpx.Request("GET", "https://example.org")
        server = httpx.HTTPStatusError("boom", request=request, response=httpx.Response(503, request=request))
        client = httpx.HTTPStatusError("nope", request=request, response=httpx.Response(404, request=request))
        assert _is_retryable_error(server)
        assert not _is_retryable_error(client)
