import pytest

from branch_locator.catalog import branch_from_record


@pytest.fixture
def da_nang_catalog():
    """Small catalog of Da Nang branches plus one in Dong Nai, in catalog order."""
    records = [
        {
            "id": "lien-chieu",
            "name": "Kho Liên Chiểu",
            "manager": "Chị Lan",
            "address": "120 Nguyễn Lương Bằng, Hòa Khánh Bắc, Liên Chiểu, Đà Nẵng",
        },
        {
            "id": "cam-le",
            "name": "Kho Cẩm Lệ",
            "manager": "Anh Tuấn",
            "address": "45 Cách Mạng Tháng 8, Khuê Trung, Cẩm Lệ, Đà Nẵng",
        },
        {
            "id": "hai-chau",
            "name": "Kho Hải Châu",
            "manager": "Cô Hoa",
            "address": "10 Bạch Đằng, Hải Châu, Đà Nẵng",
            "phoneNumber": "02363819999",
        },
        {
            "id": "bien-hoa",
            "name": "Kho Biên Hòa",
            "manager": "Chú Ba",
            "address": "Quốc lộ 1A, Tam Hiệp, Biên Hòa, Đồng Nai",
        },
    ]
    return [branch_from_record(r) for r in records]
