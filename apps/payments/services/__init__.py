"""
Payment services module.

All services are exported from this module to maintain backward compatibility.
"""
from .withdrawal_method_service import WithdrawalMethodService

__all__ = [
    'WithdrawalMethodService',
]
