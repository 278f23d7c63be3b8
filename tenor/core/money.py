"""Currency and Money.

Notional amounts carry their currency. Both types have a canonical
text form: "USD" and "USD 10000000".
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import final

from tenor.core.result import Err, Ok

VALID_CURRENCIES: frozenset[str] = frozenset({
    "USD", "EUR", "GBP", "CHF", "CAD", "AUD", "SEK", "JPY", "KRW",
    "HKD", "SGD", "NZD", "NOK", "DKK", "ZAR", "MXN", "BRL", "INR",
    "CNY", "TWD", "THB", "PLN", "CZK", "HUF", "TRY", "ILS",
})


@final
@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 currency code from the known set."""

    code: str

    def __post_init__(self) -> None:
        if self.code not in VALID_CURRENCIES:
            raise TypeError(f"Currency: unknown code {self.code!r}")

    @staticmethod
    def parse(raw: str) -> Ok[Currency] | Err[str]:
        code = raw.strip().upper()
        if code not in VALID_CURRENCIES:
            return Err(f"Currency: unknown code {raw!r}")
        return Ok(Currency(code=code))

    def __str__(self) -> str:
        return self.code


@final
@dataclass(frozen=True, slots=True)
class Money:
    """Finite Decimal amount in a currency."""

    currency: Currency
    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal) or not self.amount.is_finite():
            raise TypeError(f"Money.amount must be finite Decimal, got {self.amount!r}")

    @staticmethod
    def of(currency: str, amount: Decimal | str | int) -> Money:
        """Convenience constructor. Raises TypeError on invalid input."""
        match Currency.parse(currency):
            case Err(e):
                raise TypeError(e)
            case Ok(cur):
                try:
                    value = Decimal(amount)
                except InvalidOperation as exc:
                    raise TypeError(f"Money.amount: not a decimal {amount!r}") from exc
                return Money(currency=cur, amount=value)

    @staticmethod
    def parse(raw: str) -> Ok[Money] | Err[str]:
        """Parse "CCY amount", e.g. "GBP 1000000"."""
        parts = raw.split()
        if len(parts) != 2:
            return Err(f"Money must look like 'USD 1000', got {raw!r}")
        match Currency.parse(parts[0]):
            case Err(e):
                return Err(f"Money.currency: {e}")
            case Ok(cur):
                pass
        try:
            amount = Decimal(parts[1])
        except InvalidOperation:
            return Err(f"Money.amount: not a decimal {parts[1]!r}")
        if not amount.is_finite():
            return Err(f"Money.amount must be finite, got {parts[1]!r}")
        return Ok(Money(currency=cur, amount=amount))

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"
