from __future__ import annotations

from bs4 import BeautifulSoup

from conftest import DummyResp
from page import RenderedPage, render_page


def test_render_page_with_profile(http, full_profile) -> None:
    http(DummyResp(body=full_profile))
    page = render_page("rg", "https://api.example.test")
    assert isinstance(page, RenderedPage)
    assert page.ok
    assert page.profile == full_profile
    soup = BeautifulSoup(page.html, "html5lib")
    assert soup.h1.get_text() == "Ryan Guidry"
    assert soup.style is not None  # inline by default


def test_render_page_without_handle_shows_error_view(http) -> None:
    calls = http(DummyResp(body={}))
    page = render_page("", "https://api.example.test")
    assert not page.ok
    assert page.profile is None
    assert "Profile Unavailable" in page.html
    assert calls == []


def test_render_page_fetch_failure_shows_error_view(http) -> None:
    http(DummyResp(status=404, text="nope", reason="Not Found"))
    page = render_page("ghost", "https://api.example.test", inline=False)
    assert not page.ok
    assert "Profile Unavailable" in page.html
    assert 'href="style.css"' in page.html


def test_footer_links_use_requested_handle_when_profile_has_none(http) -> None:
    http(DummyResp(body={"identity": {"name": "R"}}))
    page = render_page("rg", "https://api.example.test")
    soup = BeautifulSoup(page.html, "html5lib")
    assert soup.select_one("a.json-link")["href"] == "https://api.example.test/u/rg.json"
    assert soup.select_one("a.jsonld-link")["href"] == "https://api.example.test/u/rg.jsonld"


def test_profile_handle_wins_over_requested_handle(http, full_profile) -> None:
    http(DummyResp(body=full_profile))
    page = render_page("alias", "https://api.example.test")
    assert 'href="https://api.example.test/u/rg.json"' in page.html
