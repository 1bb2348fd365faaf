import json

from loguru import logger

from branch_locator.clients import OpenAIClient
from branch_locator.config import OPENAI_MODEL
from branch_locator.errors import FallbackResponseError
from branch_locator.models import FallbackRequest, FallbackResponse

PROMPT_TEMPLATE = """
Find the closest warehouse for: "{address}"
List:
{candidates}

Instructions:
1. Identify the location of the user address.
2. Identify the location of each warehouse.
3. Calculate approximated driving distance.
4. Select the warehouse with the SHORTEST distance.
5. VERY IMPORTANT: If the user provides a specific street address, prioritize physical proximity over name matching.

Return JSON:
{{
  "selectedBranchId": "string",
  "estimatedDistance": "string",
  "reasoning": "string (Vietnamese)"
}}
"""


def build_prompt(request: FallbackRequest) -> str:
    """Render the resolver prompt, one `ID: ... | Address: ...` line per candidate."""
    cand_text = "\n".join(f"ID: {c.id} | Address: {c.address}" for c in request.candidates)
    return PROMPT_TEMPLATE.format(address=request.query_text, candidates=cand_text)


def parse_response(content: str) -> FallbackResponse:
    """
    Parse the JSON answer of the resolver model.

    Raises:
        FallbackResponseError: If the content is not a JSON object with a selected id.
    """
    try:
        data = json.loads(content or "{}")
    except json.JSONDecodeError as e:
        raise FallbackResponseError(f"Resolver returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise FallbackResponseError(f"Resolver returned {type(data).__name__}, expected an object")

    selected = data.get("selectedBranchId")
    if selected is None or str(selected).strip() == "":
        raise FallbackResponseError("Resolver response has no selectedBranchId")

    return FallbackResponse(
        selected_branch_id=str(selected).strip(),
        estimated_distance=str(data.get("estimatedDistance") or ""),
        reasoning=str(data.get("reasoning") or ""),
    )


async def llm_resolve_branch(request: FallbackRequest) -> FallbackResponse:
    """
    Ask the LLM which candidate branch is physically closest to the customer address.

    Args:
        request (FallbackRequest): Raw customer address and active {id, address} candidates.

    Returns:
        FallbackResponse: Selected branch id, distance estimate and reasoning.
    """
    # Cache here - Cache resolver answers by (address, sorted candidate ids)
    # Branch addresses change rarely and temperature is 0
    openai_client = OpenAIClient()
    content = await openai_client.complete_json(
        messages=[{"role": "user", "content": build_prompt(request)}],
        model=OPENAI_MODEL,
    )
    logger.debug(f"🤖 Resolver answer for '{request.query_text}': {content}")
    return parse_response(content)
