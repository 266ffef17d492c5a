from __future__ import annotations

from decimal import Decimal, InvalidOperation

from domain.bid import Bid

# Characters dropped from amount cells before parsing, e.g. "$1,250.00".
_AMOUNT_NOISE = str.maketrans("", "", "$, \t")


def parse_amount(raw: str | None) -> Decimal:
    """Parse a currency cell into a Decimal.

    Empty or unparsable text yields zero, matching how the sales export leaves
    amounts blank for withdrawn articles.
    """

    if raw is None:
        return Decimal("0")
    cleaned = raw.translate(_AMOUNT_NOISE)
    if not cleaned:
        return Decimal("0")
    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


def format_currency(value: Decimal) -> str:
    try:
        cents = value.quantize(Decimal("0.01"))
    except InvalidOperation:
        # Too many digits to hold cents at the context precision.
        return format(value, "f")
    return f"{cents:.2f}"


def format_bid(bid: Bid) -> str:
    return f"{bid.bid_id}: {bid.title} | {format_currency(bid.amount)} | {bid.fund}"
