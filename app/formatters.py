"""
Presentation-only derived values used by the page templates.
Nothing here filters, sorts or reorders profile entries.
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

DASH = " — "

# ───────────────────────────────────────── helpers ──
def _text(value: Any) -> str:
    return "" if value is None else str(value)

def _join_present(parts, sep: str) -> str:
    return sep.join(str(p) for p in parts if p)

# ───────────────────────────────────────── header ──
def format_location(location: Optional[Mapping[str, Any]]) -> str:
    """City, region, country in that order; empty parts dropped."""
    if not location:
        return ""
    return _join_present(
        [location.get("city"), location.get("region"), location.get("country")], ", "
    )

def link_label(url: str) -> str:
    """`https://www.linkedin.com/in/rg` → `linkedin.com/in/rg`."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return url
    if not host:
        return url
    if host.startswith("www."):
        host = host[len("www."):]
    return host + parts.path.rstrip("/")

# ───────────────────────────────────────── sections ──
def experience_range(entry: Mapping[str, Any]) -> str:
    end = "Present" if entry.get("isCurrent") else _text(entry.get("endDate"))
    return _text(entry.get("startDate")) + DASH + end

def education_range(entry: Mapping[str, Any]) -> str:
    return _text(entry.get("startDate")) + DASH + (entry.get("endDate") or "Present")

def degree_line(entry: Mapping[str, Any]) -> str:
    return _join_present([entry.get("degree"), entry.get("program")], DASH)

# ───────────────────────────────────────── footer ──
def format_last_updated(value: Optional[str], today: Optional[date] = None) -> str:
    """Render an ISO timestamp as M/D/YYYY; today when missing, raw text when unparseable."""
    if not value:
        d = today or date.today()
    else:
        try:
            d = datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            # 3.10 only takes 3- or 6-digit fractions; the date part is enough
            try:
                d = date.fromisoformat(value[:10])
            except ValueError:
                return value
    return f"{d.month}/{d.day}/{d.year}"

def data_links(api_base: str, handle: Optional[str]) -> Dict[str, str]:
    handle = _text(handle)
    return {
        "json": f"{api_base}/u/{handle}.json",
        "jsonld": f"{api_base}/u/{handle}.jsonld",
    }
