import logging
from decimal import Decimal
from typing import Iterable, Optional

from .aggregator import aggregate_balances, balance_total
from .config import SettlementConfig
from .errors import SettlementError, UnknownMemberError, InvalidSplitError
from .models import (
    Balance,
    Expense,
    Member,
    MemberSummary,
    Settlement,
    SettlementPlan,
)
from .reducer import reduce_balances, remaining_balances

log = logging.getLogger(__name__)

__all__ = [
    "SettlementService",
    "SettlementError",
    "UnknownMemberError",
    "InvalidSplitError",
]


class SettlementService:
    """Computes balances and settle-up plans for one group at a time.

    Stateless apart from its config: every call is a pure function of the
    members and expenses passed in, so one instance can serve any number of
    groups concurrently.
    """

    def __init__(self, config: Optional[SettlementConfig] = None):
        self.config = config or SettlementConfig()

    def calculate_balances(self, members: Iterable[Member], expenses: Iterable[Expense]) -> list[Balance]:
        nets = self._aggregate(members, expenses)
        return [Balance(member_id=member_id, net_amount=net) for member_id, net in nets.items()]

    def settle(self, balances: Iterable[Balance]) -> list[Settlement]:
        nets = {b.member_id: b.net_amount for b in balances}
        return reduce_balances(nets, self.config.epsilon, self.config.decimals)

    def build_plan(self, members: Iterable[Member], expenses: Iterable[Expense]) -> SettlementPlan:
        members = list(members)
        expenses = list(expenses)
        log.debug("Building settlement plan for %d members and %d expenses", len(members), len(expenses))

        nets = self._aggregate(members, expenses)
        epsilon = self.config.epsilon

        total = balance_total(nets)
        if abs(total) > epsilon:
            log.warning("Balances do not sum to zero (off by %s); splits disagree with expense totals", total)

        settlements = reduce_balances(nets, epsilon, self.config.decimals)
        leftover = remaining_balances(nets, settlements)
        unresolved = [
            Balance(member_id=member_id, net_amount=net)
            for member_id, net in leftover.items()
            if abs(net) > epsilon
        ]
        if unresolved:
            log.warning(
                "%d member(s) keep an unresolved balance after settlement: %s",
                len(unresolved),
                ", ".join(f"{b.member_id}={b.net_amount}" for b in unresolved),
            )

        return SettlementPlan(
            balances=[Balance(member_id=member_id, net_amount=net) for member_id, net in nets.items()],
            settlements=settlements,
            unresolved=unresolved,
            epsilon=epsilon,
        )

    def summarize_member(self, plan: SettlementPlan, member_id: str) -> MemberSummary:
        balance = plan.balance_of(member_id)
        if balance is None:
            raise UnknownMemberError(member_id)

        owes: list[Settlement] = []
        owed_by: list[Settlement] = []
        others: list[Settlement] = []
        for settlement in plan.settlements:
            if settlement.from_member_id == member_id:
                owes.append(settlement)
            elif settlement.to_member_id == member_id:
                owed_by.append(settlement)
            else:
                others.append(settlement)

        return MemberSummary(
            member_id=member_id,
            balance=balance.net_amount,
            status=balance.status(plan.epsilon),
            owes=owes,
            owed_by=owed_by,
            others=others,
        )

    def has_outstanding_debts(self, members: Iterable[Member], expenses: Iterable[Expense]) -> bool:
        nets = self._aggregate(members, expenses)
        epsilon = self.config.epsilon
        return any(abs(net) > epsilon for net in nets.values())

    def _aggregate(self, members: Iterable[Member], expenses: Iterable[Expense]) -> dict[str, Decimal]:
        return aggregate_balances(members, expenses, self.config.unknown_member_policy)
