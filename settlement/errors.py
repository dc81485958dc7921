from typing import Optional


class SettlementError(Exception):
    pass


class UnknownMemberError(SettlementError):
    def __init__(self, member_id: str, expense_id: Optional[str] = None):
        self.member_id = member_id
        self.expense_id = expense_id
        if expense_id is None:
            message = f"Member {member_id} is not part of this group"
        else:
            message = f"Expense {expense_id} references member {member_id} who is not part of this group"
        super().__init__(message)


class InvalidSplitError(SettlementError):
    pass
