"""Text rendering of accounts and operation outcomes."""

from collections.abc import Iterable
from decimal import Decimal

from bank_sim.models import BankAccount, Operation, Outcome, OutcomeStatus

_REJECTIONS = {
    (Operation.DEPOSIT, OutcomeStatus.INVALID_AMOUNT): "Deposit amount must be greater than 0.",
    (Operation.WITHDRAW, OutcomeStatus.INVALID_AMOUNT): "Withdrawal amount must be greater than 0.",
    (Operation.WITHDRAW, OutcomeStatus.INSUFFICIENT_FUNDS): "Insufficient funds.",
    (Operation.WITHDRAW, OutcomeStatus.CREDIT_LIMIT_EXCEEDED): (
        "Credit limit exceeded. Operation cancelled."
    ),
    (Operation.CREDIT_LIMIT, OutcomeStatus.INVALID_AMOUNT): "Credit limit cannot be negative.",
}


def money(value: Decimal) -> str:
    return f"{value:.2f}"


def render_outcome(outcome: Outcome) -> list[str]:
    """Return the status lines describing an outcome."""
    lines: list[str] = []

    if not outcome.ok:
        lines.append(_REJECTIONS.get((outcome.operation, outcome.status), outcome.status.value))
    elif outcome.operation == Operation.DEPOSIT:
        if outcome.external_funds == 0:
            lines.append(
                f"Deposited {money(outcome.amount)} from cash. "
                f"Cash left: {money(outcome.cash_on_hand)}. "
                f"Balance: {money(outcome.balance - outcome.debt_paid - outcome.interest)}"
            )
        else:
            lines.append(
                f"Deposited. Cash used: {money(outcome.cash_used)}, "
                f"external funds added: {money(outcome.external_funds)}. "
                f"Balance: {money(outcome.balance - outcome.debt_paid - outcome.interest)}"
            )
        if outcome.debt_paid:
            lines.append(
                f"Debt paid off: {money(outcome.debt_paid)}. "
                f"Current balance: {money(outcome.balance - outcome.interest)}"
            )
    elif outcome.operation == Operation.WITHDRAW:
        lines.append(
            f"Withdrawn. New balance: {money(outcome.balance - outcome.interest)}. "
            f"Cash on hand: {money(outcome.cash_on_hand)}"
        )
    elif outcome.operation == Operation.CREDIT_LIMIT:
        lines.append(f"Credit limit set: {money(outcome.amount)}")

    if outcome.interest:
        lines.append(
            f"Interest accrued: {money(outcome.interest)}. New balance: {money(outcome.balance)}"
        )
    elif outcome.operation == Operation.INTEREST:
        lines.append("No interest accrued: balance is not positive.")

    return lines


def render_accounts(accounts: Iterable[BankAccount]) -> list[str]:
    """Return one line per account, or a notice when there are none."""
    lines = [account.describe() for account in accounts]
    return lines or ["No accounts available."]
