"""
Wallet Balance

Computes the balance of a single Solana wallet from an ordered history of
deposits and withdrawals, using Decimal for every monetary value and typed
errors for every rejected input.
"""

__version__ = "1.0.0"
