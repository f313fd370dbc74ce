from __future__ import annotations

import json
import re

from resume_skills.utils.logger import get_logger

logger = get_logger(__name__)

_STRIP_CHARS = re.compile(r"[\[\]\"']")
_SPLIT = re.compile(r",|\n")


def normalize_skills(raw) -> list[str]:
    """Turn the backend's ``skills`` field into a list of skill names.

    The field is not consistently typed upstream, so the order below matters:
    a real list wins, then a JSON-encoded list, then a loose string split.
    Anything else yields no skills.
    """
    if isinstance(raw, list):
        return clean_skill_list(raw)
    if not raw:
        logger.debug("No skills data received")
        return []

    logger.debug("Received non-list skills of type %s", type(raw).__name__)
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        parsed = None
    if isinstance(parsed, list):
        return clean_skill_list(parsed)

    if isinstance(raw, str):
        logger.debug("JSON parse failed, splitting skills string")
        return split_skill_string(raw)
    return []


def clean_skill_list(items: list) -> list[str]:
    return [s for s in items if isinstance(s, str) and s.strip()]


def split_skill_string(text: str) -> list[str]:
    text = _STRIP_CHARS.sub("", text)
    pieces = (p.strip() for p in _SPLIT.split(text))
    return [p for p in pieces if p]


def unique_skills(skill_lists) -> list[str]:
    """Union of several skill lists, first occurrence order kept."""
    seen: dict[str, None] = {}
    for skills in skill_lists:
        for skill in skills:
            seen.setdefault(skill, None)
    return list(seen)
