"""
Built-in branch list used when the catalog export is missing or empty.
One "name<TAB>manager<TAB>address" branch per line.
"""

RAW_BRANCH_DATA = "\n".join([
    "Kho Bình Thạnh\tAnh Minh\t\"215 Xô Viết Nghệ Tĩnh, Phường 17, Bình Thạnh, TP. Hồ Chí Minh\"",
    "Kho Phú Nhuận\tChị Hạnh\t\"88 Phan Xích Long, Phường 2, Phú Nhuận, TP. Hồ Chí Minh\"",
    "Kho Quận 7\tAnh Khoa\t\"1020 Nguyễn Văn Linh, Tân Phong, Quận 7, TP. Hồ Chí Minh\"",
    "Kho Quận 8\tChú Sáu\t\"312 Phạm Thế Hiển, Phường 3, Quận 8, TP. Hồ Chí Minh\"",
    "Kho Tân Phú\tChị Vy\t\"145 Lũy Bán Bích, Tân Thới Hòa, Tân Phú, TP. Hồ Chí Minh\"",
    "Kho Nhà Bè\tAnh Lộc\t\"56 Nguyễn Bình, Phú Xuân, Nhà Bè, TP. Hồ Chí Minh\"",
    "Kho Thủ Dầu Một\tAnh Tâm\t\"402 Đại lộ Bình Dương, Phú Hòa, Thủ Dầu Một, Bình Dương\"",
    "Kho Biên Hòa\tChị Ngọc\t\"Quốc lộ 1A, Tam Hiệp, Biên Hòa, Đồng Nai\"",
    "Kho Long Khánh\tAnh Phúc\t\"27 Hùng Vương, Xuân Trung, Long Khánh, Đồng Nai\"",
    "Kho Vũng Tàu\tCô Thủy\t\"75 Lê Hồng Phong, Phường 7, Vũng Tàu, Bà Rịa - Vũng Tàu\"",
    "Kho Cần Thơ\tAnh Huy\t\"19 Đường 30 Tháng 4, Xuân Khánh, Ninh Kiều, Cần Thơ\"",
    "Kho Mỹ Tho\tChị Diễm\t\"130 Ấp Bắc, Phường 5, Mỹ Tho, Tiền Giang\"",
    "Kho Liên Chiểu\tChị Lan\t\"120 Nguyễn Lương Bằng, Hòa Khánh Bắc, Liên Chiểu, Đà Nẵng\"",
    "Kho Cẩm Lệ\tAnh Tuấn\t\"45 Cách Mạng Tháng 8, Khuê Trung, Cẩm Lệ, Đà Nẵng\"",
    "Kho Huế\tCô Hằng\t\"22 Hùng Vương, Phú Nhuận, Huế, Thừa Thiên Huế\"",
    "Kho Nha Trang\tAnh Bảo\t\"9 Lê Thánh Tôn, Lộc Thọ, Nha Trang, Khánh Hòa\"",
    "Kho Đà Lạt\tChị Mai\t\"14 Phan Đình Phùng, Phường 2, Đà Lạt, Lâm Đồng\"",
    "Kho Buôn Ma Thuột\tAnh Y Đen\t\"60 Lê Duẩn, Tân Thành, Buôn Ma Thuột, Đắk Lắk\"",
    "Kho Hà Nội\tAnh Dũng\t\"36 Xuân Thủy, Dịch Vọng Hậu, Cầu Giấy, Hà Nội\"",
    "Kho Hải Phòng\tChị Thu\t\"201 Lạch Tray, Đằng Giang, Ngô Quyền, Hải Phòng\"",
    "Kho Hạ Long\tAnh Quân\t\"8 Hạ Long, Bãi Cháy, Hạ Long, Quảng Ninh\"",
    "Kho Bắc Ninh\tNhà xe Hùng Anh\t\"95 Lý Thái Tổ, Suối Hoa, Bắc Ninh\"",
])
