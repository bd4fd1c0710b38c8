import logging
import math
from datetime import date

from dateutil.relativedelta import relativedelta
from pydantic import ValidationError

from vested.models import Grant, VestingInterval, VestingScheduleConfiguration
from vested.schemas import GrantVestingSummary, VestingPeriod, VestingSchedule

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    pass


def months_between(start: date, end: date) -> int:
    """Calendar-month index difference; the day of month is ignored."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def monthly_dates(start: date, count: int) -> list[date]:
    # Each step is offset from start so a month-end clamp never carries over.
    return [start + relativedelta(months=index) for index in range(count)]


def build_grant(
    amount: int,
    grant_date: date,
    cliff_percentage: float,
    cliff: int,
    length: int,
    interval: VestingInterval = VestingInterval.MONTHLY,
) -> Grant:
    try:
        configuration = VestingScheduleConfiguration(
            interval=interval,
            cliff_percentage=cliff_percentage,
            cliff=cliff,
            length=length,
        )
        return Grant(amount=amount, grant_date=grant_date, vesting_schedule=configuration)
    except ValidationError as exc:
        messages = "; ".join(error["msg"] for error in exc.errors())
        logger.warning("Rejected vesting configuration: %s", messages)
        raise InvalidConfigurationError(messages) from exc


class VestingCalculator:
    def __init__(self, grant: Grant):
        self.grant = grant
        self._calculators = {
            VestingInterval.MONTHLY: self._monthly_vested_amount,
        }

    @property
    def schedule(self) -> VestingScheduleConfiguration:
        return self.grant.vesting_schedule

    def months_difference(self, reference_date: date) -> int:
        return months_between(self.grant.grant_date, reference_date)

    def is_before_cliff(self, reference_date: date) -> bool:
        return self.months_difference(reference_date) < self.schedule.cliff

    def cliff_vested_amount(self) -> float:
        return self.grant.amount * self.schedule.cliff_percentage

    def calculate_vested_amount(self, reference_date: date) -> float:
        calculator = self._calculators.get(self.schedule.interval)
        if calculator is None:
            raise NotImplementedError(f"Unsupported vesting interval: {self.schedule.interval}")
        return calculator(reference_date)

    def _monthly_vested_amount(self, reference_date: date) -> float:
        months = self.months_difference(reference_date)
        if months < 0 or self.is_before_cliff(reference_date):
            return 0.0
        if months > self.schedule.length:
            return float(self.grant.amount)

        months_past_cliff = months - self.schedule.cliff
        # The last month pays out exactly; this also covers cliff == length.
        if months_past_cliff == self.schedule.length - self.schedule.cliff:
            return float(self.grant.amount)
        if months_past_cliff == 0:
            return self.cliff_vested_amount()

        remaining_after_cliff = self.grant.amount - self.cliff_vested_amount()
        vested_per_month = remaining_after_cliff / (self.schedule.length - self.schedule.cliff)
        return self.cliff_vested_amount() + vested_per_month * months_past_cliff

    def calculate_vesting_schedule(self) -> VestingSchedule:
        dates = monthly_dates(self.grant.grant_date, self.schedule.length + 1)
        periods = [
            VestingPeriod(date=period_date, cumulative_vested_amount=math.floor(self.calculate_vested_amount(period_date)))
            for period_date in dates
        ]
        logger.debug(
            "Built %s-period vesting schedule for grant of %s from %s",
            len(periods),
            self.grant.amount,
            self.grant.grant_date,
        )
        return VestingSchedule(from_date=self.grant.grant_date, to_date=dates[-1], periods=periods)


def vested_amount_for_grant(grant: Grant, as_of: date) -> float:
    return VestingCalculator(grant).calculate_vested_amount(as_of)


def vesting_schedule_for_grant(grant: Grant) -> VestingSchedule:
    return VestingCalculator(grant).calculate_vesting_schedule()


def summarize_grant(grant: Grant, as_of: date) -> GrantVestingSummary:
    calculator = VestingCalculator(grant)
    vested = calculator.calculate_vested_amount(as_of)
    vested_units = min(math.floor(vested), grant.amount)
    vested_fraction = vested / grant.amount if grant.amount else 1.0

    return GrantVestingSummary(
        as_of=as_of,
        amount=grant.amount,
        grant_date=grant.grant_date,
        months_elapsed=max(calculator.months_difference(as_of), 0),
        vested_amount=vested,
        vested_units=vested_units,
        unvested_units=max(grant.amount - vested_units, 0),
        vested_fraction=vested_fraction,
        before_cliff=calculator.is_before_cliff(as_of),
        fully_vested=vested_units >= grant.amount,
    )
