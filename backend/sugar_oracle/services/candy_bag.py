import math
from decimal import Decimal

MEMBER_CARD_MULTIPLIER = 2  # 50% off: twice the candies per token

def quote_candies(tokens: int, price: Decimal, member_card: bool = False) -> int:
    """Candies a bag holds for `tokens` GC tokens at the current sugar price."""
    if tokens < 0:
        raise ValueError("tokens must be >= 0")
    amount = Decimal(tokens) * Decimal(price)
    if member_card:
        amount *= MEMBER_CARD_MULTIPLIER
    return int(math.floor(amount))
