"""
Route Planning Module: Build routes from the place catalog.

- Greedy prefix selection (no backtracking, no knapsack)
- Stops at the first place that would overflow the budget
- Output: Route objects, rendered to text by the caller
"""

__all__ = ["route", "selector"]
