from typing import Iterable, List, Optional, Tuple

from loguru import logger

from branch_locator.geo_aliases import CONFUSING_WORDS, expand_aliases
from branch_locator.models import Branch, NormalizedQuery
from branch_locator.text_normalizer import normalize, remove_stop_words

# Scoring weights
ALIAS_MATCH_SCORE = 500  # branch contains the alias region keyword
TOKEN_MATCH_SCORE = 10
CONFUSING_TOKEN_SCORE = 5  # token is both a street and a province name
PHRASE_MATCH_SCORE = 30  # two consecutive query tokens found together
MIN_SCORED_TOKEN_LENGTH = 2


def tokenize(text: str) -> List[str]:
    """Split normalized text into tokens after dropping stop words."""
    return remove_stop_words(text).split()


def adjacent_phrases(tokens: List[str]) -> List[str]:
    """Join every pair of consecutive tokens with a space."""
    return [f"{first} {second}" for first, second in zip(tokens, tokens[1:])]


def build_query(address: str) -> NormalizedQuery:
    """
    Normalize a raw customer address and expand it with its geographic alias.

    Args:
        address (str): Raw customer address.

    Returns:
        NormalizedQuery: Normalized and expanded text, alias fields, tokens and bigrams.
    """
    text = normalize(address)
    hit = expand_aliases(text)
    tokens = tokenize(hit.expanded_query)
    return NormalizedQuery(
        text=text,
        expanded=hit.expanded_query,
        alias_value=hit.alias_value,
        alias_key=hit.alias_key,
        tokens=tokens,
        phrases=adjacent_phrases(tokens),
    )


def score_branch(query: NormalizedQuery, search_str: str) -> int:
    """
    Score how well a branch search string covers a query.

    Args:
        query (NormalizedQuery): Query built by build_query.
        search_str (str): Normalized search surface of the branch.

    Returns:
        int: Accumulated score, 0 when nothing matches.
    """
    score = 0
    if query.alias_value and query.alias_value in search_str:
        score += ALIAS_MATCH_SCORE

    for token in query.tokens:
        if len(token) < MIN_SCORED_TOKEN_LENGTH:
            continue
        if token in search_str:
            score += CONFUSING_TOKEN_SCORE if token in CONFUSING_WORDS else TOKEN_MATCH_SCORE

    for phrase in query.phrases:
        if phrase in search_str:
            score += PHRASE_MATCH_SCORE

    return score


def pick_best_branch(
    query: NormalizedQuery,
    branches: Iterable[Branch],
) -> Tuple[Optional[Branch], int]:
    """
    Find the highest scoring branch for a query.

    Only a strictly higher score replaces the current best, so ties go to the
    branch that comes first in catalog order and a branch must score above 0.

    Args:
        query (NormalizedQuery): Query built by build_query.
        branches (Iterable[Branch]): Candidate branches, in catalog order.

    Returns:
        Tuple[Optional[Branch], int]: Best branch (None if nothing scored) and its score.
    """
    best_branch = None
    best_score = 0
    for branch in branches:
        score = score_branch(query, branch.search_str)
        if score > best_score:
            best_branch, best_score = branch, score

    if best_branch is not None:
        logger.debug(f"🏷️ Best local candidate '{best_branch.name}' scored {best_score}")
    return best_branch, best_score
