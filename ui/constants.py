"""Display constants shared by UI components."""

from catalog import OptionTier

TIER_COLORS = {
    OptionTier.COMMON: "#d1d5db",
    OptionTier.UNCOMMON: "#4ade80",
    OptionTier.RARE: "#60a5fa",
    OptionTier.LEGENDARY: "#facc15",
}

TARGET_PLACEHOLDER = "-- 목표 옵션 선택 --"
