from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class ExpenseCategory(str, Enum):
    FOOD = "food"
    TRANSPORT = "transport"
    ACCOMMODATION = "accommodation"
    ENTERTAINMENT = "entertainment"
    OTHER = "other"


class BalanceStatus(str, Enum):
    OWED = "OWED"
    OWES = "OWES"
    SETTLED = "SETTLED"


class UnknownMemberPolicy(str, Enum):
    REJECT = "REJECT"
    INCLUDE = "INCLUDE"


class Member(BaseModel):
    id: str
    display_name: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Split(BaseModel):
    member_id: str
    amount: Decimal

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Expense(BaseModel):
    id: str
    payer_id: str
    total_amount: Decimal
    splits: list[Split] = Field(default_factory=list)
    title: Optional[str] = None
    category: ExpenseCategory = ExpenseCategory.OTHER

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "exp-001",
                "payer_id": "alice",
                "total_amount": "100.00",
                "splits": [
                    {"member_id": "alice", "amount": "50.00"},
                    {"member_id": "bob", "amount": "50.00"},
                ],
                "title": "Dinner",
                "category": "food",
            }
        },
    )


class Balance(BaseModel):
    member_id: str
    net_amount: Decimal

    model_config = ConfigDict(from_attributes=True)

    def status(self, epsilon: Decimal) -> BalanceStatus:
        if self.net_amount > epsilon:
            return BalanceStatus.OWED
        if self.net_amount < -epsilon:
            return BalanceStatus.OWES
        return BalanceStatus.SETTLED


class Settlement(BaseModel):
    from_member_id: str
    to_member_id: str
    amount: Decimal

    model_config = ConfigDict(from_attributes=True)


class SettlementPlan(BaseModel):
    balances: list[Balance]
    settlements: list[Settlement]
    unresolved: list[Balance] = Field(default_factory=list)
    epsilon: Decimal

    @property
    def is_settled(self) -> bool:
        return not self.settlements and not self.unresolved

    def balance_of(self, member_id: str) -> Optional[Balance]:
        for balance in self.balances:
            if balance.member_id == member_id:
                return balance
        return None


class MemberSummary(BaseModel):
    member_id: str
    balance: Decimal
    status: BalanceStatus
    owes: list[Settlement]
    owed_by: list[Settlement]
    others: list[Settlement]

    @property
    def total_owed(self) -> Decimal:
        return sum((s.amount for s in self.owes), Decimal("0.00"))

    @property
    def total_receivable(self) -> Decimal:
        return sum((s.amount for s in self.owed_by), Decimal("0.00"))
