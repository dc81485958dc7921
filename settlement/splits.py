from decimal import Decimal, ROUND_DOWN
from typing import Sequence

from .errors import InvalidSplitError
from .models import Expense, Split
from .reducer import quantize_amount


def split_equally(total_amount: Decimal, member_ids: Sequence[str], decimals: int = 2) -> list[Split]:
    """Divide ``total_amount`` equally between ``member_ids``.

    Shares are truncated to ``decimals`` places and the leftover minor
    units go one each to the first participants, so the shares always sum
    to the total exactly: 100.00 over three members gives 33.34, 33.33,
    33.33.
    """
    if not member_ids:
        raise InvalidSplitError("Must split with at least one person")
    if len(set(member_ids)) != len(member_ids):
        raise InvalidSplitError("Each member may only appear once in a split")
    if total_amount < 0:
        raise InvalidSplitError(f"Cannot split a negative amount: {total_amount}")

    unit = Decimal("1").scaleb(-decimals)
    total = quantize_amount(total_amount, decimals)
    base = (total / len(member_ids)).quantize(unit, rounding=ROUND_DOWN)
    leftover_units = int((total - base * len(member_ids)) / unit)

    return [
        Split(member_id=member_id, amount=base + unit if index < leftover_units else base)
        for index, member_id in enumerate(member_ids)
    ]


def check_split_sum(expense: Expense, tolerance: Decimal = Decimal("0.01")) -> bool:
    allocated = sum((split.amount for split in expense.splits), Decimal("0"))
    return abs(allocated - expense.total_amount) <= tolerance
