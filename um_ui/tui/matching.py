"""Row match predicates supplied by the host."""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz import fuzz

from um_core.navigation import Matcher


@dataclass(frozen=True)
class MatcherConfig:
    """Configuration for host-side row matching."""

    enable_fuzzy: bool = True
    fuzzy_score_cutoff: int = 60


def make_matcher(query: str, config: MatcherConfig | None = None) -> Matcher:
    """Return a predicate testing a row's plain text against ``query``."""
    cfg = config or MatcherConfig()
    needle = query.strip()
    if not needle:
        return lambda text: True

    lowered = needle.lower()
    if not cfg.enable_fuzzy:
        return lambda text: lowered in text.lower()

    def _fuzzy(text: str) -> bool:
        if lowered in text.lower():
            return True
        return fuzz.WRatio(needle, text) >= cfg.fuzzy_score_cutoff

    return _fuzzy
