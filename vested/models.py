from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class VestingInterval(str, Enum):
    MONTHLY = "monthly"


class VestingScheduleConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval: VestingInterval = VestingInterval.MONTHLY
    cliff_percentage: float = Field(default=0.25, ge=0, le=1)
    cliff: int = Field(default=12, ge=0)
    length: int = Field(default=48, ge=1)

    @model_validator(mode="after")
    def validate_periods(self) -> "VestingScheduleConfiguration":
        """A grant with no cliff would otherwise vest its cliff lump on the grant date itself."""
        if self.cliff > self.length:
            raise ValueError("cliff cannot exceed length")
        if self.cliff == 0 and self.cliff_percentage > 0:
            raise ValueError("cliff_percentage must be 0 when there is no cliff")
        return self


class Grant(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: int = Field(ge=0)
    grant_date: date
    vesting_schedule: VestingScheduleConfiguration = Field(default_factory=VestingScheduleConfiguration)
