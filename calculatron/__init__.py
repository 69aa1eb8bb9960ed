"""
Income Calculatron - Source Package

A single-page income calculator: jobs and monthly expenses go in,
weekly/monthly/yearly totals come out.

DESIGN PRINCIPLES:
1. Totals are pure functions of the current state
2. State only changes through reducer actions
3. Raw input is parsed and clamped at the mutation boundary
4. Every transition is audited
"""

__version__ = "1.0.0"
__author__ = "Income Calculatron Team"
