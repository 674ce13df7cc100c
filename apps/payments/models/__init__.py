"""
Payment models module.

All models are exported from this module to maintain backward compatibility.
"""
from .withdrawal_method import WithdrawalMethod

__all__ = [
    'WithdrawalMethod',
]
