"""LLM output parsing utilities.

Helpers for stripping think tags and locating the JSON object in a model reply.
"""

import re

_THINK_PAIR_RE = re.compile(r"<think>.*?</think>", re.DOTALL)
_THINK_OPEN_RE = re.compile(r"<think>.*", re.DOTALL)
_THINK_CLOSE_RE = re.compile(r"^.*?</think>", re.DOTALL)


def strip_think_tags(text: str) -> str:
    """Remove <think>...</think> tags from LLM output."""
    text = _THINK_PAIR_RE.sub("", text)
    text = _THINK_OPEN_RE.sub("", text)
    text = _THINK_CLOSE_RE.sub("", text)
    return text


def extract_json_object(text: str | None) -> str | None:
    """Return the widest ``{...}`` region of an LLM reply, or None.

    Think tags are removed first. The region runs from the first ``{`` to the
    last ``}``, so prose and markdown fences around the object are dropped while
    backticks inside string values are kept.
    """
    if not text:
        return None
    text = strip_think_tags(text)
    start = text.find("{")
    end = text.rfind("}")
    if start < 0 or end <= start:
        return None
    return text[start : end + 1]
