import os
import asyncio
import pandas as pd
import csv
from typing import List
import sys
from loguru import logger

from branch_locator.models import Branch, MatchResult
from branch_locator.catalog import load_catalog
from branch_locator.errors import BranchLookupError
from branch_locator.matchers.hybrid_orchestrator import find_nearest_branch
from branch_locator.config import BRANCHES_CSV, INPUT_CSV, OUTPUT_CSV, BATCH_SIZE, LOG_LEVEL

OUTPUT_HEADER = [
    "Address", "Branch", "Manager", "Branch address", "Phone",
    "Source", "Distance", "Reasoning", "On holiday", "Error",
]


def load_addresses_from_csv(file_path: str, nrows: int = None) -> List[str]:
    """Load customer addresses from the `Address` column of a CSV."""
    df = pd.read_csv(file_path, nrows=nrows, dtype=str)
    return [str(a) if pd.notna(a) else "" for a in df["Address"]]


def batch_iter(addresses: List[str], batch_size: int):
    """
    Yield index and address slices of size `batch_size` for batched processing.
    """
    n = len(addresses)
    for i in range(0, n, batch_size):
        yield i, addresses[i:i+batch_size]


async def process_address(address: str, branches: List[Branch]) -> list:
    """
    Look up the nearest branch for one address and format it as an output row.

    Lookup failures become a row carrying only the user-facing error message.
    """
    try:
        result: MatchResult = await find_nearest_branch(address, branches)
    except BranchLookupError as e:
        logger.debug(f"⚠️ Lookup failed for '{address}': {e!r}")
        return [address, "", "", "", "", "", "", "", "", e.user_message]

    return [
        address,
        result.branch_name,
        result.manager_name,
        result.branch_address,
        result.phone_number,
        result.search_source.value,
        result.estimated_distance,
        result.reasoning,
        result.holiday_schedule.is_in_effect(),
        "",
    ]


async def main():
    """
    Orchestrate the batch lookup.

    - Loads the branch catalog and the customer addresses.
    - Resolves each batch concurrently.
    - Writes results incrementally to an output CSV.
    """
    # Initialize logs
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=LOG_LEVEL, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    branches = load_catalog(BRANCHES_CSV)
    addresses = load_addresses_from_csv(INPUT_CSV)

    # Initialize output file
    output_path = OUTPUT_CSV
    if os.path.exists(output_path):
        os.remove(output_path)
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(OUTPUT_HEADER)

    for start_idx, batch in batch_iter(addresses, BATCH_SIZE):
        logger.info(f"Processing rows {start_idx}..{start_idx + len(batch) - 1}")

        rows = await asyncio.gather(*[process_address(address, branches) for address in batch])

        with open(output_path, "a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(rows)


if __name__ == "__main__":
    asyncio.run(main())
