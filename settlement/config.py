import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from .models import UnknownMemberPolicy
from .reducer import DEFAULT_EPSILON

DEFAULT_DECIMALS = 2


@dataclass(frozen=True)
class SettlementConfig:
    """Tunables for the settlement engine.

    ``epsilon`` is the tolerance below which a balance or a transfer is
    treated as zero. ``decimals`` is the scale every emitted amount is
    rounded to.
    """

    epsilon: Decimal = DEFAULT_EPSILON
    decimals: int = DEFAULT_DECIMALS
    unknown_member_policy: UnknownMemberPolicy = UnknownMemberPolicy.REJECT

    def __post_init__(self):
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")

    @classmethod
    def from_env(cls) -> "SettlementConfig":
        epsilon = os.getenv("SETTLEMENT_EPSILON")
        decimals = os.getenv("SETTLEMENT_DECIMALS")
        policy = os.getenv("SETTLEMENT_UNKNOWN_MEMBERS")

        kwargs = {}
        if epsilon:
            try:
                kwargs["epsilon"] = Decimal(epsilon)
            except InvalidOperation as exc:
                raise ValueError(f"SETTLEMENT_EPSILON is not a decimal: {epsilon!r}") from exc
        if decimals:
            try:
                kwargs["decimals"] = int(decimals)
            except ValueError as exc:
                raise ValueError(f"SETTLEMENT_DECIMALS is not an integer: {decimals!r}") from exc
        if policy:
            try:
                kwargs["unknown_member_policy"] = UnknownMemberPolicy(policy.strip().upper())
            except ValueError as exc:
                raise ValueError(
                    f"SETTLEMENT_UNKNOWN_MEMBERS must be REJECT or INCLUDE, got {policy!r}"
                ) from exc
        return cls(**kwargs)
