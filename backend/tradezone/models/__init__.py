"""Database model exports."""

from .ledger import Deposit, TradePnL, TradingWallet, Withdrawal

__all__ = [
    "TradePnL",
    "Deposit",
    "Withdrawal",
    "TradingWallet",
]
