"""Monetary domain package.

This package contains the immutable value types for prices: currencies, plain
amounts, taxed (net/gross) amounts and ranges of both, with currency-safe
arithmetic, quantization and discounting.
"""
