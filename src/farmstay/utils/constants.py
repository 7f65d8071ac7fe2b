from decimal import Decimal

# longest stay a single request may book, in nights
MAX_STAY = 30

COMMIT_ATTEMPTS = 3

# totals are rounded to whole rupees
CURRENCY_QUANTUM = Decimal("1")
