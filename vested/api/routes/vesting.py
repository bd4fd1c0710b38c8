from datetime import date

from fastapi import APIRouter, Depends

from vested.api.deps import get_grant
from vested.models import Grant
from vested.schemas import GrantVestingSummary, VestedAmountRequest, VestingSchedule
from vested.services.vesting import summarize_grant, vesting_schedule_for_grant

router = APIRouter(prefix="/api/vesting", tags=["vesting"])


@router.post("/amount", response_model=GrantVestingSummary)
def vested_amount(payload: VestedAmountRequest) -> GrantVestingSummary:
    grant = get_grant(payload.grant)
    effective_date = payload.as_of or date.today()
    return summarize_grant(grant, effective_date)


@router.post("/schedule", response_model=VestingSchedule)
def vesting_schedule(grant: Grant = Depends(get_grant)) -> VestingSchedule:
    return vesting_schedule_for_grant(grant)
