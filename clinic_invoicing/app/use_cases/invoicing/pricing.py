"""Invoice pricing

Prices lines and derives invoice totals with exact Decimal arithmetic.

Rounding happens only on the per-line total and on the aggregate sums. The
running subtotal and tax accumulators stay unrounded, so the sum of displayed
line totals may differ by a cent from the invoice total.
"""

from dataclasses import dataclass
from decimal import Decimal
from clinic_invoicing.domain.invoice_line import VatRate
from clinic_invoicing.domain.money import ZERO, round_money

DEFAULT_VAT_RATE = VatRate.VAT_21


@dataclass(frozen=True)
class LinePrice:
    base: Decimal
    tax: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    tax_total: Decimal
    total: Decimal


def price_line(unit_price: Decimal, quantity: int, vat_rate: VatRate = DEFAULT_VAT_RATE) -> LinePrice:
    """Price one line; base and tax are returned unrounded"""
    base = unit_price * Decimal(quantity)
    tax = base * vat_rate.rate
    return LinePrice(base=base, tax=tax, line_total=round_money(base + tax))


class TotalsAccumulator:
    """Accumulates unrounded line bases and taxes"""

    def __init__(self):
        self.subtotal = ZERO
        self.tax_total = ZERO

    def add(self, price: LinePrice) -> None:
        self.subtotal += price.base
        self.tax_total += price.tax

    def finalize(self) -> InvoiceTotals:
        subtotal = round_money(self.subtotal)
        tax_total = round_money(self.tax_total)
        return InvoiceTotals(
            subtotal=subtotal,
            tax_total=tax_total,
            total=round_money(subtotal + tax_total),
        )
