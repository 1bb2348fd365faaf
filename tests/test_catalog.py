from branch_locator.catalog import (
    DEFAULT_MANAGER,
    active_branches,
    branch_from_record,
    build_search_str,
    load_branches_from_csv,
    load_catalog,
    parse_branch_lines,
)
from branch_locator.models import Branch
from branch_locator.seed_branches import RAW_BRANCH_DATA


def test_empty_record_gets_safe_defaults():
    branch = branch_from_record({})
    assert branch.id.startswith("gen-")
    assert branch.name == ""
    assert branch.address == ""
    assert branch.phone_number == ""
    assert branch.search_str == ""
    assert branch.is_active is True
    assert branch.holiday_schedule.is_enabled is False


def test_generated_ids_are_unique():
    assert branch_from_record({}).id != branch_from_record({}).id


def test_id_key_variants():
    assert branch_from_record({"ID": 7}).id == "7"
    assert branch_from_record({"_id": "abc"}).id == "abc"
    assert branch_from_record({"id": "  ", "Id": "x1"}).id == "x1"


def test_search_str_is_derived_when_missing():
    branch = branch_from_record({
        "id": "1",
        "name": "Kho Hải Châu",
        "address": "10 Bạch Đằng, Đà Nẵng",
        "phoneNumber": 905123456,
    })
    assert branch.phone_number == "905123456"
    assert branch.search_str == "kho hai chau 10 bach dang da nang 905123456 kho hai chau"
    assert branch.search_str == build_search_str(branch.name, branch.address, branch.phone_number)


def test_search_str_is_kept_when_present():
    branch = branch_from_record({"id": "1", "name": "Kho A", "searchStr": "custom surface"})
    assert branch.search_str == "custom surface"


def test_is_active_parsing():
    assert branch_from_record({"isActive": False}).is_active is False
    assert branch_from_record({"isActive": "FALSE"}).is_active is False
    assert branch_from_record({"isActive": "0"}).is_active is False
    assert branch_from_record({"isActive": "true"}).is_active is True
    assert branch_from_record({"isActive": None}).is_active is True
    assert branch_from_record({"isActive": "maybe"}).is_active is True


def test_holiday_schedule_from_dict_and_json():
    schedule = {
        "isEnabled": True,
        "startTime": "2026-02-14T00:00:00Z",
        "endTime": "2026-02-20T23:59:00Z",
        "reason": "Tết",
    }
    from_dict = branch_from_record({"holidaySchedule": schedule}).holiday_schedule
    assert from_dict.is_enabled is True
    assert from_dict.reason == "Tết"

    as_json = '{"isEnabled": true, "startTime": "2026-02-14T00:00:00Z", "endTime": "2026-02-20T23:59:00Z"}'
    from_json = branch_from_record({"holidaySchedule": as_json}).holiday_schedule
    assert from_json.is_enabled is True
    assert from_json.end_time == "2026-02-20T23:59:00Z"

    assert branch_from_record({"holidaySchedule": "{not json"}).holiday_schedule.is_enabled is False


def test_load_branches_from_csv(tmp_path):
    csv_path = tmp_path / "branches.csv"
    csv_path.write_text(
        "id,name,manager,address,phoneNumber,isActive\n"
        "b1,Kho Liên Chiểu,Chị Lan,\"120 Nguyễn Lương Bằng, Liên Chiểu\",0905123456,TRUE\n"
        ",Kho Cẩm Lệ,,\"45 Cách Mạng Tháng 8, Cẩm Lệ\",,FALSE\n",
        encoding="utf-8",
    )
    branches = load_branches_from_csv(str(csv_path))
    assert len(branches) == 2
    first, second = branches
    assert first.id == "b1"
    assert first.phone_number == "0905123456"
    assert "lien chieu" in first.search_str
    assert first.is_active is True
    assert second.id.startswith("gen-")
    assert second.manager == ""
    assert second.phone_number == ""
    assert second.is_active is False


def test_parse_branch_lines():
    raw = "\n".join([
        "Kho Liên Chiểu\tChị Lan\t\"120 Nguyễn Lương Bằng, Đà Nẵng\"",
        "",
        "Chi nhánh Hòa Khánh Anh Tuấn 12 Âu Cơ, Đà Nẵng",
        "garbage",
        "Kho Trống\t\t5 Lê Duẩn",
    ])
    branches = parse_branch_lines(raw)
    assert [b.id for b in branches] == ["init-0", "init-1", "init-3"]

    first, second, third = branches
    assert first.address == "120 Nguyễn Lương Bằng, Đà Nẵng"
    assert first.search_str == "kho lien chieu 120 nguyen luong bang da nang"

    assert second.name == "Chi nhánh Hòa Khánh"
    assert second.manager == "Anh Tuấn"
    assert second.address == "12 Âu Cơ, Đà Nẵng"

    assert third.manager == DEFAULT_MANAGER


def test_parse_branch_lines_empty():
    assert parse_branch_lines("") == []
    assert parse_branch_lines(None) == []


def test_active_branches_keeps_order():
    branches = [
        Branch(id="a"),
        Branch(id="b", is_active=False),
        Branch(id="c"),
    ]
    assert [b.id for b in active_branches(branches)] == ["a", "c"]


def test_stored_search_str_is_normalized():
    branch = branch_from_record({"id": "1", "name": "Kho A", "searchStr": "Kho Liên Chiểu, ĐÀ NẴNG"})
    assert branch.search_str == "kho lien chieu da nang"


def test_holiday_schedule_from_flat_columns():
    schedule = branch_from_record({
        "id": "1",
        "holidaySchedule.isEnabled": "true",
        "holidaySchedule.startTime": "2026-02-14T00:00:00Z",
        "holidaySchedule.endTime": "2026-02-20T23:59:00Z",
        "holidaySchedule.reason": "Tết",
    }).holiday_schedule
    assert schedule.is_enabled is True
    assert schedule.start_time == "2026-02-14T00:00:00Z"
    assert schedule.end_time == "2026-02-20T23:59:00Z"
    assert schedule.reason == "Tết"


def test_holiday_schedule_from_flat_csv_columns(tmp_path):
    csv_path = tmp_path / "branches.csv"
    csv_path.write_text(
        "id,name,address,holidaySchedule.isEnabled,holidaySchedule.startTime,holidaySchedule.endTime\n"
        "b1,Kho A,1 Lê Duẩn,TRUE,2026-02-14T00:00:00Z,2026-02-20T23:59:00Z\n"
        "b2,Kho B,2 Lê Duẩn,,,\n",
        encoding="utf-8",
    )
    first, second = load_branches_from_csv(str(csv_path))
    assert first.holiday_schedule.is_enabled is True
    assert first.holiday_schedule.end_time == "2026-02-20T23:59:00Z"
    assert second.holiday_schedule.is_enabled is False
    assert second.holiday_schedule.start_time == ""


def test_seed_branches_parse():
    branches = parse_branch_lines(RAW_BRANCH_DATA)
    assert len(branches) == len(RAW_BRANCH_DATA.splitlines())
    assert all(b.name and b.address and b.search_str for b in branches)
    assert len({b.id for b in branches}) == len(branches)


def test_load_catalog_reads_csv(tmp_path):
    csv_path = tmp_path / "branches.csv"
    csv_path.write_text("id,name,address\nb1,Kho A,1 Lê Duẩn\n", encoding="utf-8")
    assert [b.id for b in load_catalog(str(csv_path))] == ["b1"]


def test_load_catalog_falls_back_to_seed_when_missing(tmp_path):
    branches = load_catalog(str(tmp_path / "missing.csv"))
    assert [b.id for b in branches] == [b.id for b in parse_branch_lines(RAW_BRANCH_DATA)]


def test_load_catalog_falls_back_to_seed_when_empty(tmp_path):
    header_only = tmp_path / "header_only.csv"
    header_only.write_text("id,name,address\n", encoding="utf-8")
    blank = tmp_path / "blank.csv"
    blank.write_text("", encoding="utf-8")
    seed = "Kho A\tChị Lan\t1 Lê Duẩn, Đà Nẵng"

    assert [b.name for b in load_catalog(str(header_only), seed_text=seed)] == ["Kho A"]
    assert [b.name for b in load_catalog(str(blank), seed_text=seed)] == ["Kho A"]
