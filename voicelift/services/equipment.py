"""Bar and machine base weights (the empty bar counts toward the load)."""

from __future__ import annotations

from voicelift.core.constants import LBS_PER_KG
from voicelift.core.enums import Equipment, WeightUnit

BASE_WEIGHTS_LBS: dict[Equipment, float] = {
    Equipment.BARBELL: 45,
    Equipment.EZ_BAR: 25,
    Equipment.TRAP_BAR: 45,
    Equipment.SMITH_MACHINE: 20,
}


def has_base_weight(equipment: Equipment) -> bool:
    return equipment in BASE_WEIGHTS_LBS


def base_weight(equipment: Equipment, unit: WeightUnit = WeightUnit.LBS) -> float:
    """Empty bar weight in the requested unit, 0 for equipment without one."""
    weight_lbs = BASE_WEIGHTS_LBS.get(equipment)
    if weight_lbs is None:
        return 0.0
    if unit == WeightUnit.KG:
        return weight_lbs / LBS_PER_KG
    return float(weight_lbs)


def base_weight_description(equipment: Equipment, unit: WeightUnit = WeightUnit.LBS) -> str | None:
    """e.g. '45 lbs', or None when the equipment has no base weight."""
    if not has_base_weight(equipment):
        return None
    return f"{int(base_weight(equipment, unit))} {unit.value}"
