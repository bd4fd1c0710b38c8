from datetime import date

import pytest
from pydantic import ValidationError

from vested.models import Grant, VestingInterval, VestingScheduleConfiguration
from vested.services.vesting import InvalidConfigurationError, build_grant


def test_configuration_defaults_to_monthly_four_year_schedule() -> None:
    configuration = VestingScheduleConfiguration()
    assert configuration.interval == VestingInterval.MONTHLY
    assert configuration.cliff == 12
    assert configuration.length == 48
    assert configuration.cliff_percentage == 0.25


def test_grant_is_immutable(standard_grant) -> None:
    with pytest.raises(ValidationError):
        standard_grant.amount = 1
    with pytest.raises(ValidationError):
        standard_grant.vesting_schedule.cliff = 1


def test_cliff_cannot_exceed_length() -> None:
    with pytest.raises(ValidationError, match="cliff cannot exceed length"):
        VestingScheduleConfiguration(cliff=13, length=12)


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": -1},
        {"cliff_percentage": 1.5},
        {"cliff_percentage": -0.1},
        {"cliff": 24, "length": 12},
        {"cliff": -1},
        {"length": 0, "cliff": 0, "cliff_percentage": 0},
        {"cliff": 0, "cliff_percentage": 0.25},
    ],
)
def test_build_grant_rejects_invalid_configuration(overrides) -> None:
    params = {"amount": 1000, "grant_date": date(2024, 1, 1), "cliff_percentage": 0.25, "cliff": 12, "length": 48}
    params.update(overrides)

    with pytest.raises(InvalidConfigurationError):
        build_grant(**params)


def test_grant_accepts_zero_amount() -> None:
    grant = Grant(amount=0, grant_date=date(2024, 1, 1))
    assert grant.vesting_schedule.length == 48
