"""Cleanup of model output before JSON parsing."""

import re

_CODE_FENCE = re.compile(r"```(?:json)?\n?")
_TRAILING_BACKTICKS = re.compile(r"`+$")


def sanitize(raw_text: str) -> str:
    """Strip Markdown code fences and surrounding whitespace from model output.

    Args:
        raw_text: Message content returned by the model

    Returns:
        Text ready for ``json.loads``. Already-clean text is returned unchanged.

    Example:
        A fenced ``json`` block such as ``'```json\\n{"a": 1}\\n```'`` becomes
        ``'{"a": 1}'``.
    """
    text = _CODE_FENCE.sub("", raw_text)
    text = _TRAILING_BACKTICKS.sub("", text)
    return text.strip()
