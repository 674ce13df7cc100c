"""
Payment serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .withdrawal_method_serializers import (
    WithdrawalFieldSerializer, WithdrawalMethodSerializer, WithdrawalMethodStatusSerializer
)

__all__ = [
    'WithdrawalFieldSerializer',
    'WithdrawalMethodSerializer',
    'WithdrawalMethodStatusSerializer',
]
