"""
Policy deciding whether the best local candidate is trusted or deferred to
the fallback resolver.

Changing any threshold here changes observable search outcomes.
"""
import re
from typing import List, Optional

from loguru import logger

from branch_locator.models import Branch, LocalMatch, NormalizedQuery
from branch_locator.matchers.local_matcher import pick_best_branch

ALIAS_SCORE_FLOOR = 100  # minimum score when an alias matched
TOKEN_SCORE_FLOOR = 40  # minimum score otherwise
MIN_MATCH_RATIO = 0.4  # below this, numeric addresses without alias go to the fallback
MIN_RATIO_TOKEN_LENGTH = 3

_HAS_DIGIT = re.compile(r"[0-9]")


def match_ratio(tokens: List[str], search_str: str) -> float:
    """
    Share of meaningful query tokens (longer than two characters) found in a search string.

    Returns:
        float: Ratio in [0, 1]; 0 when the query has no meaningful tokens.
    """
    meaningful = [t for t in tokens if len(t) >= MIN_RATIO_TOKEN_LENGTH]
    if not meaningful:
        return 0.0
    matched = sum(1 for t in meaningful if t in search_str)
    return matched / len(meaningful)


def accept_local_match(
    candidate: Optional[Branch],
    score: int,
    alias_value: str,
    tokens: List[str],
    address: str,
) -> bool:
    """
    Decide whether a local candidate is confident enough to return without the fallback.

    Args:
        candidate (Optional[Branch]): Best scoring branch, or None.
        score (int): Its score.
        alias_value (str): Region keyword of the matched alias, empty if none.
        tokens (List[str]): Query tokens.
        address (str): Raw customer address as typed.

    Returns:
        bool: True if the candidate is accepted.
    """
    floor = ALIAS_SCORE_FLOOR if alias_value else TOKEN_SCORE_FLOOR
    if candidate is None or score < floor:
        return False

    # A house number with weak token overlap needs precise resolution,
    # unless a known alias placed the address.
    ratio = match_ratio(tokens, candidate.search_str)
    if _HAS_DIGIT.search(address or "") and ratio < MIN_MATCH_RATIO and not alias_value:
        logger.debug(f"🚫 Local match rejected. Score: {score}, ratio: {ratio:.2f}")
        return False

    return True


def local_reasoning(alias_value: str, alias_key: str) -> str:
    """Human-readable explanation of an accepted local match."""
    if alias_value:
        return f"Found a branch in the {alias_value.upper()} area (matched: {alias_key})."
    return "Found a branch whose address matches the address tokens you entered."


def find_local_match(address: str, branches: List[Branch], query: NormalizedQuery) -> Optional[LocalMatch]:
    """
    Run scoring and the confidence gate over active branches.

    Returns:
        Optional[LocalMatch]: Accepted local match, or None to defer to the fallback.
    """
    candidate, score = pick_best_branch(query, branches)
    if not accept_local_match(candidate, score, query.alias_value, query.tokens, address):
        return None
    return LocalMatch(
        branch=candidate,
        score=score,
        reasoning=local_reasoning(query.alias_value, query.alias_key),
    )
