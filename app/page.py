"""
Fetch + render in one step. Every delivery strategy (HTTP server, static
export, Streamlit app) goes through render_page().
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from fetcher import ProfileClient, fetch_profile
from renderer import render_error_html, render_profile_html
from schema_profile import Profile


@dataclass(frozen=True)
class RenderedPage:
    html: str
    profile: Optional[Profile] = None

    @property
    def ok(self) -> bool:
        return self.profile is not None


def render_page(handle: Optional[str] = None, api_base: Optional[str] = None, *,
                inline: bool = True, client: Optional[ProfileClient] = None) -> RenderedPage:
    profile = fetch_profile(handle, api_base, client=client)
    if profile is None:
        return RenderedPage(render_error_html(inline=inline))
    return RenderedPage(render_profile_html(profile, api_base=api_base, handle=handle,
                                           inline=inline), profile)
