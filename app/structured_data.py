"""
schema.org Person block for the page's <script type="application/ld+json">.
Fields missing from the profile are left out rather than written as null.
"""
from __future__ import annotations
from typing import Any, Dict

from schema_profile import Profile


def _drop_missing(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def build_person_jsonld(profile: Profile) -> Dict[str, Any]:
    identity = profile.get("identity") or {}
    links = profile.get("links") or {}
    location = identity.get("location")

    address = None
    if location is not None:
        address = _drop_missing({
            "@type": "PostalAddress",
            "addressLocality": location.get("city"),
            "addressRegion": location.get("region"),
            "addressCountry": location.get("country"),
        })

    return _drop_missing({
        "@context": "https://schema.org",
        "@type": "Person",
        "name": identity.get("name"),
        "jobTitle": identity.get("headline"),
        "description": identity.get("summary"),
        "image": identity.get("image"),
        "url": links.get("website"),
        "sameAs": links.get("sameAs"),
        "address": address,
    })
