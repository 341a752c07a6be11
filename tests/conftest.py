from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pytest
import requests
from requests import Session

import config

FULL_PROFILE: dict[str, Any] = {
    "schemaVersion": "1.0",
    "handle": "rg",
    "versionId": "v42",
    "lastUpdated": "2025-03-07T15:04:05Z",
    "contentHash": "abc123",
    "identity": {
        "name": "Ryan Guidry",
        "headline": "Software Engineer",
        "summary": "Builds things.\nShips things.",
        "image": "https://cdn.example.test/rg.png",
        "location": {"city": "Austin", "region": "TX", "country": "USA"},
    },
    "links": {
        "website": "https://rg.example.test",
        "sameAs": [
            "https://www.linkedin.com/in/rg",
            "https://github.com/rg/",
        ],
    },
    "contact": {"publicEmail": "rg@example.test", "phone": "+1 555 0100"},
    "experience": [
        {
            "organization": "Zeta Corp",
            "title": "Staff Engineer",
            "location": "Remote",
            "startDate": "2022-01",
            "isCurrent": True,
            "highlights": ["Led platform team", "Cut build times in half"],
            "tags": ["python", "k8s"],
        },
        {
            "organization": "Alpha LLC",
            "title": "Engineer",
            "startDate": "2018-06",
            "endDate": "2021-12",
        },
    ],
    "education": [
        {
            "institution": "University of Texas",
            "degree": "B.S.",
            "program": "Computer Science",
            "startDate": "2014",
            "endDate": "2018",
            "status": "completed",
        },
        {"institution": "Online Academy", "program": "ML", "status": "in-progress"},
    ],
    "skills": [
        {"category": "Languages", "items": ["Python", "TypeScript"]},
        {"category": "Cloud", "items": ["AWS"]},
    ],
    "projects": [
        {
            "name": "Truth Engine",
            "description": "Structured public profiles.",
            "tech": ["Next.js", "Postgres"],
            "url": "https://ryanguidry.com",
            "repoUrl": "https://github.com/rg/truth-engine",
        },
        {"name": "Side Thing"},
    ],
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env / shell settings out of the tests."""
    monkeypatch.delenv(config.HANDLE_ENV_VAR, raising=False)
    monkeypatch.delenv(config.API_URL_ENV_VAR, raising=False)


@pytest.fixture
def full_profile() -> dict[str, Any]:
    return copy.deepcopy(FULL_PROFILE)


# ----- HTTP test doubles -----------------------------------------------------


class DummyResp:
    """Minimal Response-like object with the attributes the fetcher uses."""

    def __init__(self, *, status: int = 200, body: Any = None, text: Optional[str] = None,
                 reason: str = "OK") -> None:
        self.status_code = status
        self.reason = reason
        self.text = text if text is not None else json.dumps(body)

    def json(self) -> Any:
        return json.loads(self.text)


@dataclass
class Call:
    method: str
    url: str


@pytest.fixture
def http(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[Call]]:
    """Patch Session.request; returns the list of captured calls.

    Usage: calls = http(DummyResp(...)) or http(raise_exc=requests.ConnectionError())
    """

    def _install(resp: Optional[DummyResp] = None, *,
                 raise_exc: Optional[Exception] = None) -> list[Call]:
        calls: list[Call] = []

        def _fake_request(self: Session, method: str, url: str, **_: Any) -> Any:
            calls.append(Call(method=method, url=url))
            if raise_exc is not None:
                raise raise_exc
            return resp

        monkeypatch.setattr(requests.Session, "request", _fake_request)
        return calls

    return _install
