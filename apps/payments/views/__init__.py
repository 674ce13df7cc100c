"""
Payment views module.

All views are exported from this module to maintain backward compatibility.
"""
from .withdrawal_method_views import (
    WithdrawalMethodListCreateView, WithdrawalMethodDetailView, WithdrawalMethodStatusView
)

__all__ = [
    'WithdrawalMethodListCreateView',
    'WithdrawalMethodDetailView',
    'WithdrawalMethodStatusView',
]
