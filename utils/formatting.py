from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def format_result(similarity: float) -> str:
    # repr() gives the shortest decimal for the float, so 0.12345 rounds as 12.345
    pct = (Decimal(repr(similarity)) * 100).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return f"{pct}%"
