# simulations/__init__.py
"""
Monte Carlo studies for the coin-trials repo.

Run comparisons via:
    python -m simulations.compare --method-a serial --method-b parallel --occurrences ... --trials ... --workers ...
"""
