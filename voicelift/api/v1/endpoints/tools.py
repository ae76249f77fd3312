"""Development tools: sample data and equipment reference values."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from voicelift.core.config import get_settings
from voicelift.core.enums import Equipment, WeightUnit
from voicelift.db.session import get_db
from voicelift.services import equipment as equipment_service
from voicelift.services.sample_data import clear_all_workouts, populate_week_of_workouts

router = APIRouter()


def _require_development() -> None:
    settings = get_settings()
    if not (settings.debug or settings.environment == "development"):
        raise HTTPException(status_code=403, detail="Only available in development")


@router.get("/base-weight")
def base_weight(equipment: Equipment, unit: WeightUnit = WeightUnit.LBS):
    """Empty bar weight for equipment (0 when it has none)."""
    return {
        "equipment": equipment,
        "unit": unit,
        "base_weight": equipment_service.base_weight(equipment, unit),
        "description": equipment_service.base_weight_description(equipment, unit),
    }


@router.post("/sample-data", status_code=201, dependencies=[Depends(_require_development)])
def seed_sample_data(db: Session = Depends(get_db)):
    """Insert a week of sample workouts."""
    workouts = populate_week_of_workouts(db)
    return {"created": len(workouts)}


@router.delete("/workouts", dependencies=[Depends(_require_development)])
def delete_all_workouts(db: Session = Depends(get_db)):
    """Delete every workout (and everything it owns)."""
    return {"deleted": clear_all_workouts(db)}
