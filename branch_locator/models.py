"""
Typed data models for the branch lookup pipeline.
All data structures used throughout the codebase should be defined here.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class HolidaySchedule:
    """Holiday closure window of a branch. Passed through to results, never scored."""
    is_enabled: bool = False
    start_time: str = ""  # ISO-8601 instant, empty when unset
    end_time: str = ""
    reason: str = ""

    def is_in_effect(self, at: Optional[datetime] = None) -> bool:
        """
        Check whether the branch is closed for holiday at a given instant.

        Args:
            at (Optional[datetime]): Instant to check. Defaults to now (UTC).

        Returns:
            bool: True if the schedule is enabled and covers `at`.
                  Unparsable or missing times count as not in effect.
        """
        if not self.is_enabled or not self.start_time or not self.end_time:
            return False
        try:
            start = _parse_instant(self.start_time)
            end = _parse_instant(self.end_time)
        except ValueError:
            return False
        now = at or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return start <= now <= end


def _parse_instant(value: str) -> datetime:
    # fromisoformat() rejects a trailing "Z" before Python 3.11
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Branch:
    """Service branch as held in the in-memory catalog."""
    id: str
    name: str = ""
    manager: str = ""
    address: str = ""
    phone_number: str = ""
    search_str: str = ""  # normalized name + address + phone + name
    holiday_schedule: HolidaySchedule = field(default_factory=HolidaySchedule)
    is_active: bool = True
    note: str = ""


@dataclass(frozen=True)
class AliasHit:
    """Outcome of geographic alias expansion. Empty alias fields mean no hit."""
    expanded_query: str
    alias_value: str = ""
    alias_key: str = ""


@dataclass(frozen=True)
class NormalizedQuery:
    """Per-search query derived from the raw customer address."""
    text: str  # normalized input
    expanded: str  # normalized input with the alias value appended
    alias_value: str
    alias_key: str
    tokens: List[str]
    phrases: List[str]  # adjacent-token bigrams


@dataclass(frozen=True)
class LocalMatch:
    """A local candidate that passed the confidence gate."""
    branch: Branch
    score: int
    reasoning: str


@dataclass(frozen=True)
class FallbackCandidate:
    """Branch as exposed to the fallback resolver."""
    id: str
    address: str


@dataclass(frozen=True)
class FallbackRequest:
    """Request handed to the external fallback resolver."""
    query_text: str
    candidates: List[FallbackCandidate]


@dataclass(frozen=True)
class FallbackResponse:
    """Answer returned by the external fallback resolver."""
    selected_branch_id: str
    estimated_distance: str = ""
    reasoning: str = ""


class SearchSource(str, Enum):
    """Tier that produced a result."""
    INSTANT = "INSTANT"
    AI = "AI"


@dataclass
class MatchResult:
    """Final lookup result for a customer address."""
    branch_id: str
    branch_name: str
    manager_name: str
    branch_address: str
    phone_number: str
    reasoning: str
    estimated_distance: str
    customer_address_original: str
    holiday_schedule: HolidaySchedule
    search_source: SearchSource
