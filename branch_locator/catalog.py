"""
Build Branch records from raw catalog data.

Malformed records are normalized to safe defaults (empty strings, active,
generated id) instead of failing the matcher.
"""
import json
import re
import uuid
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from loguru import logger

from branch_locator.models import Branch, HolidaySchedule
from branch_locator.seed_branches import RAW_BRANCH_DATA
from branch_locator.text_normalizer import normalize

ID_KEYS = ("id", "ID", "Id", "iD", "_id")
DEFAULT_MANAGER = "Quản lý kho"
HOLIDAY_PREFIX = "holidaySchedule."

_TRUE_STRINGS = {"true", "1", "yes", "y"}
_FALSE_STRINGS = {"false", "0", "no", "n"}

# "<name> <manager title ...> <address>" when a line is not tab separated
_UNTABBED_LINE = re.compile(
    r"^(.+?)\s+((?:Chị|Anh|Cô|Chú|Thúy|Thu|Linh|Hoàng|Tổ|Kho|Nhà xe).+?)\s+(.+)$"
)


def build_search_str(name: str, address: str, phone_number: str = "") -> str:
    """Normalized search surface of a branch. The name appears twice to weight its tokens."""
    return normalize(f"{name} {address} {phone_number} {normalize(name)}")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def _flag(value: Any, default: bool = True) -> bool:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return default
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in _TRUE_STRINGS:
        return True
    if s in _FALSE_STRINGS:
        return False
    return default


def _flat_holiday_fields(record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    # CSV exports flatten the schedule into holidaySchedule.<field> columns
    fields = {
        key[len(HOLIDAY_PREFIX):]: value
        for key, value in record.items()
        if isinstance(key, str) and key.startswith(HOLIDAY_PREFIX)
    }
    return fields or None


def _holiday_schedule(value: Any) -> HolidaySchedule:
    if isinstance(value, str) and value.strip():
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            logger.debug(f"⚠️ Ignoring unparsable holiday schedule: {value!r}")
            return HolidaySchedule()
    if not isinstance(value, dict):
        return HolidaySchedule()
    return HolidaySchedule(
        is_enabled=_flag(value.get("isEnabled"), default=False),
        start_time=_text(value.get("startTime")),
        end_time=_text(value.get("endTime")),
        reason=_text(value.get("reason")),
    )


def branch_from_record(record: Dict[str, Any]) -> Branch:
    """
    Convert a raw catalog record (camelCase keys) into a Branch.

    Args:
        record (Dict[str, Any]): Record as exported by the catalog store.

    Returns:
        Branch: Branch with every field defaulted and `search_str` derived when absent.
    """
    raw_id = next((_text(record.get(k)) for k in ID_KEYS if _text(record.get(k))), "")
    branch_id = raw_id or f"gen-{uuid.uuid4().hex}"

    name = _text(record.get("name"))
    address = _text(record.get("address"))
    phone_number = _text(record.get("phoneNumber"))
    search_str = normalize(_text(record.get("searchStr"))) or build_search_str(name, address, phone_number)
    holiday = record.get("holidaySchedule")
    if holiday is None or (isinstance(holiday, float) and pd.isna(holiday)):
        holiday = _flat_holiday_fields(record)

    return Branch(
        id=branch_id,
        name=name,
        manager=_text(record.get("manager")),
        address=address,
        phone_number=phone_number,
        search_str=search_str,
        holiday_schedule=_holiday_schedule(holiday),
        is_active=_flag(record.get("isActive"), default=True),
        note=_text(record.get("note")),
    )


def load_branches_from_csv(file_path: str, nrows: Optional[int] = None) -> List[Branch]:
    """Load branches from a CSV export of the catalog."""
    df = pd.read_csv(file_path, nrows=nrows, dtype=str)
    # NaN → None so missing cells fall back to defaults
    df = df.astype(object).where(pd.notna(df), None)
    branches = [branch_from_record(row) for row in df.to_dict(orient="records")]
    logger.debug(f"📦 Loaded {len(branches)} branches from {file_path}")
    return branches


def parse_branch_lines(raw_text: str) -> List[Branch]:
    """
    Parse the built-in seed list: one "name<TAB>manager<TAB>address" branch per line.

    Lines with fewer than three tab-separated columns are split at the first
    manager title (Chị, Anh, Kho, ...). Lines that still lack a name or an
    address are skipped.
    """
    branches = []
    lines = [line for line in (raw_text or "").split("\n") if line.strip()]
    for index, line in enumerate(lines):
        parts = line.split("\t")
        if len(parts) < 3:
            match = _UNTABBED_LINE.match(line)
            if not match:
                continue
            parts = list(match.groups())

        name = parts[0].strip()
        manager = parts[1].strip()
        address = parts[2].strip()
        if len(address) >= 2 and address.startswith('"') and address.endswith('"'):
            address = address[1:-1]

        if name and address:
            branches.append(Branch(
                id=f"init-{index}",
                name=name,
                manager=manager or DEFAULT_MANAGER,
                address=address,
                search_str=normalize(f"{name} {address}"),
            ))
    return branches


def load_catalog(file_path: str, seed_text: str = RAW_BRANCH_DATA) -> List[Branch]:
    """
    Load the branch catalog, falling back to the built-in seed list.

    Args:
        file_path (str): CSV export of the catalog.
        seed_text (str): Seed lines used when the export is missing, empty or unreadable.

    Returns:
        List[Branch]: Catalog branches in file order.
    """
    try:
        branches = load_branches_from_csv(file_path)
    except (FileNotFoundError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.warning(f"⚠️ Cannot read catalog {file_path} ({e}), using seed branches")
        return parse_branch_lines(seed_text)

    if not branches:
        logger.warning(f"⚠️ Catalog {file_path} is empty, using seed branches")
        return parse_branch_lines(seed_text)
    return branches


def active_branches(branches: Iterable[Branch]) -> List[Branch]:
    """Branches that take part in lookups, in catalog order."""
    return [b for b in branches if b.is_active is not False]
