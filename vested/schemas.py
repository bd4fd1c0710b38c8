from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from vested.models import VestingInterval


class VestingPeriod(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    cumulative_vested_amount: int = Field(ge=0)


class VestingSchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_date: date
    to_date: date
    periods: list[VestingPeriod]


class GrantPayload(BaseModel):
    amount: int
    grant_date: date
    interval: VestingInterval = VestingInterval.MONTHLY
    cliff_percentage: float = 0.25
    cliff: int = 12
    length: int = 48


class VestedAmountRequest(BaseModel):
    grant: GrantPayload
    as_of: date | None = None


class GrantVestingSummary(BaseModel):
    as_of: date
    amount: int
    grant_date: date
    months_elapsed: int
    vested_amount: float
    vested_units: int
    unvested_units: int
    vested_fraction: float
    before_cliff: bool
    fully_vested: bool
