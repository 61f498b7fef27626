from __future__ import annotations

from typing import Tuple

MONTH_NAMES: Tuple[str, ...] = (
    "Tháng Giêng", "Tháng Hai", "Tháng Ba", "Tháng Tư", "Tháng Năm", "Tháng Sáu",
    "Tháng Bảy", "Tháng Tám", "Tháng Chín", "Tháng Mười", "Tháng Mười Một", "Tháng Chạp",
)

LEAP_PREFIX = "Nhuận"

# Sexagenary cycle (can chi)
STEMS: Tuple[str, ...] = (
    "Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý",
)
BRANCHES: Tuple[str, ...] = (
    "Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ", "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi",
)


def month_name(month: int, is_leap_month: bool = False) -> str:
    """Canonical name of lunar month 1..12 (indices outside are clamped)."""
    name = MONTH_NAMES[max(0, min(11, month - 1))]
    return f"{LEAP_PREFIX} {name}" if is_leap_month else name


def can_chi_year(year: int) -> str:
    """Sexagenary name of a lunar year, e.g. 2024 -> 'Giáp Thìn'."""
    return f"{STEMS[(year + 6) % 10]} {BRANCHES[(year + 8) % 12]}"
