from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import ChainableUndefined, Environment, FileSystemLoader

import config
from formatters import (
    data_links,
    degree_line,
    education_range,
    experience_range,
    format_last_updated,
    format_location,
    link_label,
)
from schema_profile import LIST_SECTIONS, SECTION_ORDER, Profile
from structured_data import build_person_jsonld

_CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True,
                  undefined=ChainableUndefined,   # profile.identity.location.city on partial data
                  finalize=lambda v: "" if v is None else v)
env.policies["json.dumps_kwargs"] = {"sort_keys": False}
env.filters.update(
    location=format_location,
    link_label=link_label,
    experience_range=experience_range,
    education_range=education_range,
    degree_line=degree_line,
    last_updated=format_last_updated,
)


def stylesheet() -> str:
    return _CSS_PATH.read_text(encoding="utf-8")


def visible_sections(profile: Profile) -> List[str]:
    """Sections to render, in page order. List sections need at least one entry."""
    return [name for name in SECTION_ORDER
            if name not in LIST_SECTIONS or profile.get(name)]


def page_metadata(profile: Optional[Profile]) -> Dict[str, str]:
    if not profile:
        return {"title": "Profile Not Found", "description": ""}
    identity = profile.get("identity") or {}
    name = identity.get("name") or ""
    return {
        "title": f"{name} | Portfolio",
        "description": identity.get("headline") or f"{name}'s professional portfolio",
    }


def _render(template: str, inline: bool, **context: Any) -> str:
    css_inline = stylesheet() if inline else ""
    return env.get_template(template).render(inline_css=css_inline, **context)


def render_profile_html(profile: Profile, *, api_base: Optional[str] = None,
                        handle: Optional[str] = None, inline: bool = False) -> str:
    """Render profile → HTML.  If inline=True, embed CSS in a <style> tag."""
    api_base = config.get_api_base() if api_base is None else api_base
    handle = profile.get("handle") or handle or config.get_handle()
    return _render(
        "profile.html",
        inline,
        p=profile,
        sections=visible_sections(profile),
        meta=page_metadata(profile),
        person_jsonld=build_person_jsonld(profile),
        data_links=data_links(api_base, handle),
        powered_by=config.DEFAULT_API_BASE,
    )


def render_error_html(*, inline: bool = False) -> str:
    """The "Profile Unavailable" panel shown when no profile could be loaded."""
    return _render(
        "error.html",
        inline,
        meta=page_metadata(None),
        env_var=config.HANDLE_ENV_VAR,
    )
