"""Pricing package.

Functions that operate on any price value (`Amount`, `AmountRange`,
`TaxedAmount`, `TaxedAmountRange`) and return a value of the same type.
"""
