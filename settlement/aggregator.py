import logging
from decimal import Decimal
from typing import Iterable

from .errors import UnknownMemberError
from .models import Expense, Member, UnknownMemberPolicy

log = logging.getLogger(__name__)

ZERO = Decimal("0")


def aggregate_balances(
    members: Iterable[Member],
    expenses: Iterable[Expense],
    policy: UnknownMemberPolicy = UnknownMemberPolicy.REJECT,
) -> dict[str, Decimal]:
    """Fold expenses into a net balance per member.

    net = total paid - total owed. Every listed member starts at zero, so
    members without expenses still appear. Keys keep member-list order;
    auto-included members (``INCLUDE`` policy) follow in the order they
    are first referenced.
    """
    balances: dict[str, Decimal] = {}
    for member in members:
        balances.setdefault(member.id, ZERO)

    known = len(balances)

    for expense in expenses:
        _ensure_member(balances, expense.payer_id, expense.id, policy)
        balances[expense.payer_id] += expense.total_amount

        for split in expense.splits:
            _ensure_member(balances, split.member_id, expense.id, policy)
            balances[split.member_id] -= split.amount

    if len(balances) > known:
        log.debug("Auto-included %d member(s) referenced only by expenses", len(balances) - known)

    return balances


def balance_total(balances: dict[str, Decimal]) -> Decimal:
    return sum(balances.values(), ZERO)


def _ensure_member(
    balances: dict[str, Decimal],
    member_id: str,
    expense_id: str,
    policy: UnknownMemberPolicy,
) -> None:
    if member_id in balances:
        return
    if policy == UnknownMemberPolicy.INCLUDE:
        log.warning("Expense %s references unlisted member %s; including it", expense_id, member_id)
        balances[member_id] = ZERO
        return
    raise UnknownMemberError(member_id, expense_id)
