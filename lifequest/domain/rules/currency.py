"""Currency ledger: coin and gem balances that never go negative."""

from dataclasses import dataclass

from lifequest.domain.model import UserState


@dataclass(frozen=True)
class LedgerResult:
    """Outcome of a balance change.

    When ``success`` is False the state is returned unchanged and the caller
    reports insufficient funds.
    """

    state: UserState
    success: bool


def _apply(state: UserState, field_name: str, amount: int) -> LedgerResult:
    balance = getattr(state, field_name)
    if amount < 0 and balance + amount < 0:
        return LedgerResult(state=state, success=False)
    return LedgerResult(
        state=state.model_copy(update={field_name: balance + amount}), success=True
    )


def apply_coin_delta(state: UserState, amount: int) -> LedgerResult:
    """Add ``amount`` coins; negative amounts that would overdraw are rejected."""
    return _apply(state, "coins", amount)


def apply_gem_delta(state: UserState, amount: int) -> LedgerResult:
    """Add ``amount`` gems; negative amounts that would overdraw are rejected."""
    return _apply(state, "gems", amount)
