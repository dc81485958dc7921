"""
Settlement reduction

Greedy largest-first matching of debtors against creditors. Debtors are
walked most-negative first, creditors most-positive first, and each step
settles as much as the smaller side allows. This usually yields the
fewest transfers, but minimum-transaction debt simplification is
NP-hard and the greedy walk is not guaranteed optimal for every
multi-party cycle.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from .models import Settlement

# half a minor unit, so every whole-cent balance is settled
DEFAULT_EPSILON = Decimal("0.005")


@dataclass
class _Position:
    member_id: str
    remaining: Decimal


def quantize_amount(amount: Decimal, decimals: int = 2) -> Decimal:
    exponent = Decimal("1").scaleb(-decimals)
    return amount.quantize(exponent, rounding=ROUND_HALF_UP)


def reduce_balances(
    balances: dict[str, Decimal],
    epsilon: Decimal = DEFAULT_EPSILON,
    decimals: int = 2,
) -> list[Settlement]:
    debtors = sorted(
        (_Position(member_id, -net) for member_id, net in balances.items() if net < -epsilon),
        key=lambda p: (-p.remaining, p.member_id),
    )
    creditors = sorted(
        (_Position(member_id, net) for member_id, net in balances.items() if net > epsilon),
        key=lambda p: (-p.remaining, p.member_id),
    )

    settlements: list[Settlement] = []
    i, j = 0, 0
    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        amount = min(debtor.remaining, creditor.remaining)
        rounded = quantize_amount(amount, decimals)
        if rounded > epsilon:
            settlements.append(Settlement(
                from_member_id=debtor.member_id,
                to_member_id=creditor.member_id,
                amount=rounded,
            ))

        debtor.remaining -= amount
        creditor.remaining -= amount

        # min() zeroes at least one side, so the walk always advances
        if abs(debtor.remaining) <= epsilon:
            i += 1
        if abs(creditor.remaining) <= epsilon:
            j += 1

    return settlements


def remaining_balances(
    balances: dict[str, Decimal],
    settlements: Iterable[Settlement],
) -> dict[str, Decimal]:
    remaining = dict(balances)
    for settlement in settlements:
        remaining[settlement.from_member_id] = remaining.get(settlement.from_member_id, Decimal("0")) + settlement.amount
        remaining[settlement.to_member_id] = remaining.get(settlement.to_member_id, Decimal("0")) - settlement.amount
    return remaining
