"""Quantifiable-achievement detection.

Counts are only meaningful relative to each other: the arbiter compares the
original and tailored versions of one bullet, never scores an absolute count.
"""

import re

# One alternation so overlapping forms ("$1.5M", "10K users") count once.
# Currency comes first: "$40%" is a currency token, not a percentage.
_METRIC_RE = re.compile(
    r"\$\d[\d,.]*[KMB]?"
    r"|\d+(?:[.,]\d+)*%"
    r"|\d+(?:\.\d+)?x(?!\w)"
    r"|\d+(?:[.,]\d+)*\+?[KMB]?\s+"
    r"(?:users|customers|clients|patients|people|employees|stakeholders|members|engineers)\b",
    re.IGNORECASE,
)


def find_metrics(text: str | None) -> list[str]:
    """Metric tokens in order of appearance."""
    if not text:
        return []
    return [match.group(0).strip() for match in _METRIC_RE.finditer(text)]


def count_metrics(text: str | None) -> int:
    """Number of non-overlapping metric tokens (percentages, currency,
    multipliers, people/user counts) in ``text``."""
    return len(find_metrics(text))
