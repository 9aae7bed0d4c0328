"""Interest policies - one eligibility/rate rule per plan type"""

from decimal import Decimal

from time_deposits.domain.models import PlanType

MONTHS_PER_YEAR = 12
GRACE_PERIOD_DAYS = 30


class InterestPolicy:
    """
    Monthly interest rule for a single plan.

    Subclasses set plan_type and annual_rate and decide eligibility from the
    deposit age. Interest for one accrual period is balance * annual_rate / 12,
    left unrounded; ineligible deposits earn exactly 0.0.
    """

    plan_type: PlanType
    annual_rate: float

    def is_eligible(self, days: int) -> bool:
        raise NotImplementedError

    def calculate(self, balance: "Decimal | float", days: int) -> float:
        """Raw interest for one period. Assumes days >= 0 and balance >= 0."""
        if not self.is_eligible(days):
            return 0.0
        return float(balance) * self.annual_rate / MONTHS_PER_YEAR

    def supports(self, plan_type: "PlanType | str | None") -> bool:
        return PlanType.from_value(plan_type) is self.plan_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(plan_type={self.plan_type.value!r}, annual_rate={self.annual_rate})"


class BasicPolicy(InterestPolicy):
    """1% a year once the 30-day grace period is over"""

    plan_type = PlanType.BASIC
    annual_rate = 0.01

    def is_eligible(self, days: int) -> bool:
        return days > GRACE_PERIOD_DAYS


class StudentPolicy(InterestPolicy):
    """3% a year after the grace period, only during the first year (day 31 to 365)"""

    plan_type = PlanType.STUDENT
    annual_rate = 0.03
    max_days = 366

    def is_eligible(self, days: int) -> bool:
        return GRACE_PERIOD_DAYS < days < self.max_days


class PremiumPolicy(InterestPolicy):
    """5% a year from day 46; the 45-day minimum already covers the grace period"""

    plan_type = PlanType.PREMIUM
    annual_rate = 0.05
    minimum_days = 45

    def is_eligible(self, days: int) -> bool:
        return days > self.minimum_days


class InternalPolicy(InterestPolicy):
    """
    8.5% a year from day 1, plan terminates at day 300.

    Termination only stops interest. Closing the account or zeroing the
    balance is left to the host.
    """

    plan_type = PlanType.INTERNAL
    annual_rate = 0.085
    termination_day = 300

    def is_eligible(self, days: int) -> bool:
        return days < self.termination_day

    def is_terminated(self, days: int) -> bool:
        return days >= self.termination_day
