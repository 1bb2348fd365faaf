# branch_locator/matchers/hybrid_orchestrator.py

import asyncio
from typing import Awaitable, Callable, List, Optional

from loguru import logger

from branch_locator.catalog import active_branches
from branch_locator.config import FALLBACK_TIMEOUT
from branch_locator.errors import (
    EmptyCatalogError,
    FallbackCancelledError,
    FallbackTimeoutError,
    NoActiveBranchesError,
    NoFallbackMatchError,
)
from branch_locator.matchers.confidence_gate import find_local_match
from branch_locator.matchers.llm_resolver import llm_resolve_branch
from branch_locator.matchers.local_matcher import build_query
from branch_locator.models import (
    Branch,
    FallbackCandidate,
    FallbackRequest,
    FallbackResponse,
    MatchResult,
    SearchSource,
)

FallbackResolver = Callable[[FallbackRequest], Awaitable[FallbackResponse]]

INSTANT_DISTANCE_LABEL = "Nearest (instant lookup)"
DEFAULT_AI_REASONING = "Suggested by the AI resolver."
UNKNOWN_DISTANCE_LABEL = "Unknown"


def _to_result(
    branch: Branch,
    address: str,
    reasoning: str,
    estimated_distance: str,
    source: SearchSource,
) -> MatchResult:
    return MatchResult(
        branch_id=branch.id,
        branch_name=branch.name,
        manager_name=branch.manager,
        branch_address=branch.address,
        phone_number=branch.phone_number,
        reasoning=reasoning,
        estimated_distance=estimated_distance,
        customer_address_original=address,
        holiday_schedule=branch.holiday_schedule,
        search_source=source,
    )


async def _resolve_with_fallback(
    address: str,
    branches: List[Branch],
    resolver: FallbackResolver,
    timeout: float,
) -> MatchResult:
    """
    Delegate an address the local matcher was not confident about to the fallback resolver.

    Raises:
        FallbackTimeoutError: If the resolver does not answer within `timeout` seconds.
        FallbackCancelledError: If the resolver itself gets cancelled. Cancellation of
            the calling task propagates unchanged.
        NoFallbackMatchError: If the resolver fails or picks an id outside the active set.
    """
    request = FallbackRequest(
        query_text=address,
        candidates=[FallbackCandidate(id=b.id, address=b.address) for b in branches],
    )
    try:
        response = await asyncio.wait_for(resolver(request), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.debug(f"⏱️ TIMEOUT resolver call for '{address}' after {timeout}s")
        raise FallbackTimeoutError() from e
    except asyncio.CancelledError as e:
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            # cancelled by our caller, not by the resolver
            raise
        logger.debug(f"🛑 Resolver call cancelled for '{address}'")
        raise FallbackCancelledError() from e
    except Exception as e:
        logger.debug(f"⚠️ Resolver failed for '{address}': {e}")
        raise NoFallbackMatchError() from e

    by_id = {b.id: b for b in branches}
    branch = by_id.get(response.selected_branch_id)
    if branch is None:
        logger.debug(f"⚠️ Resolver picked unknown branch id '{response.selected_branch_id}'")
        raise NoFallbackMatchError()

    logger.debug(f"🤖 Fallback match used: {branch.name}")
    return _to_result(
        branch,
        address,
        reasoning=response.reasoning or DEFAULT_AI_REASONING,
        estimated_distance=response.estimated_distance or UNKNOWN_DISTANCE_LABEL,
        source=SearchSource.AI,
    )


async def find_nearest_branch(
    address: str,
    branches: List[Branch],
    resolver: Optional[FallbackResolver] = None,
    timeout: Optional[float] = None,
) -> MatchResult:
    """
    Resolve a customer address to the nearest branch of the catalog.

    The instant local matcher answers first; the fallback resolver is consulted
    only when the local candidate does not pass the confidence gate.

    Args:
        address (str): Raw customer address.
        branches (List[Branch]): Catalog snapshot, in catalog order.
        resolver (Optional[FallbackResolver]): Fallback collaborator. Defaults to the LLM resolver.
        timeout (Optional[float]): Seconds to wait for the fallback. Defaults to FALLBACK_TIMEOUT.

    Returns:
        MatchResult: Result tagged INSTANT or AI.

    Raises:
        EmptyCatalogError: If the catalog is empty.
        NoActiveBranchesError: If no branch is active.
        NoFallbackMatchError, FallbackTimeoutError, FallbackCancelledError: See _resolve_with_fallback.
    """
    if not branches:
        raise EmptyCatalogError()
    active = active_branches(branches)
    if not active:
        raise NoActiveBranchesError()

    query = build_query(address)
    local = find_local_match(address, active, query)
    if local is not None:
        logger.debug(f"⚡ Local match used: {local.branch.name} (score {local.score})")
        return _to_result(
            local.branch,
            address,
            reasoning=local.reasoning,
            estimated_distance=INSTANT_DISTANCE_LABEL,
            source=SearchSource.INSTANT,
        )

    return await _resolve_with_fallback(
        address,
        active,
        resolver or llm_resolve_branch,
        FALLBACK_TIMEOUT if timeout is None else timeout,
    )
