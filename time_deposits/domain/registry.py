"""Plan policy registry - maps a deposit's plan type to its interest policy"""

import logging
from typing import Dict, Iterable, List, Optional

from time_deposits.domain.exceptions import DuplicatePolicyError
from time_deposits.domain.models import PlanType, TimeDeposit
from time_deposits.domain.plans import (
    BasicPolicy,
    InterestPolicy,
    InternalPolicy,
    PremiumPolicy,
    StudentPolicy,
)

logger = logging.getLogger(__name__)


class PolicyRegistry:
    """
    Lookup table of interest policies keyed by plan type.

    Each plan type may be claimed by at most one policy; a second claim is a
    configuration error and fails at registration. A registry with no policies
    is valid and accrues nothing for every deposit.
    """

    def __init__(self, policies: Optional[Iterable[InterestPolicy]] = None):
        self._policies: Dict[PlanType, InterestPolicy] = {}
        for policy in policies or ():
            self.register(policy)

    def register(self, policy: InterestPolicy) -> None:
        existing = self._policies.get(policy.plan_type)
        if existing is not None:
            raise DuplicatePolicyError(
                f"Plan type '{policy.plan_type.value}' already handled by {existing!r}"
            )
        self._policies[policy.plan_type] = policy

    @property
    def policies(self) -> List[InterestPolicy]:
        return list(self._policies.values())

    def __len__(self) -> int:
        return len(self._policies)

    def resolve(self, plan_type: "PlanType | str | None") -> Optional[InterestPolicy]:
        """Return the policy for plan_type, or None when nothing handles it"""
        key = PlanType.from_value(plan_type)
        if key is None:
            return None
        return self._policies.get(key)

    def accrue(self, deposit: TimeDeposit) -> float:
        """Raw interest owed to deposit this period, 0.0 when no policy applies"""
        policy = self.resolve(deposit.plan_type)
        if policy is None:
            logger.debug(
                "No interest policy for plan type",
                extra={"deposit_id": deposit.id, "plan_type": str(deposit.plan_type)},
            )
            return 0.0
        return policy.calculate(deposit.balance, deposit.days)


def default_registry() -> PolicyRegistry:
    """Registry wired with the four standard plans"""
    return PolicyRegistry([BasicPolicy(), StudentPolicy(), PremiumPolicy(), InternalPolicy()])
