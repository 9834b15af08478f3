# simulations/__init__.py
"""
Monte Carlo experiments for the permute-by-sorting repo.

Run the comparison via:
    python -m simulations.compare [--seed N] [--plot] [--verbose]
"""
