import math
from typing import Dict

# Share of the total budget per category. Sums to 1.0.
BUDGET_SPLIT = {
    "accommodation": 0.40,
    "transportation": 0.15,
    "food": 0.20,
    "activities": 0.10,
    "miscellaneous": 0.15,
}

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def allocate(total_budget: float) -> Dict[str, int]:
    """Split ``total_budget`` into the fixed categories.

    Each amount is rounded on its own, so the parts can drift from the total
    by a couple of units. Zero or negative budgets are not rejected.
    """
    return {name: round_half_up(total_budget * pct) for name, pct in BUDGET_SPLIT.items()}
