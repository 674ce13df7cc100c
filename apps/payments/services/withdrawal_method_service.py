"""
Withdrawal method service.
"""
import logging

from apps.common.exceptions import NotFoundError
from ..models import WithdrawalMethod

audit_logger = logging.getLogger('audit')


class WithdrawalMethodService:
    """Service class for seller payout methods"""

    @staticmethod
    def get_method(method_id) -> WithdrawalMethod:
        try:
            return WithdrawalMethod.objects.get(pk=method_id)
        except (WithdrawalMethod.DoesNotExist, ValueError):
            raise NotFoundError('Withdrawal method not found')

    @staticmethod
    def list_methods():
        return WithdrawalMethod.objects.order_by('-created_at', '-id')

    @staticmethod
    def update_status(method: WithdrawalMethod, field: str) -> WithdrawalMethod:
        """
        ``isActive`` flips the active flag; ``isDefault`` makes this method the
        only default (already-default methods are left unchanged).
        """
        if field == 'isDefault':
            if method.is_default:
                return method
            method.is_default = True
        else:
            method.is_active = not method.is_active
        method.save()
        audit_logger.info(f"Withdrawal method {method.id} {field} updated")
        return method

    @staticmethod
    def delete_method(method: WithdrawalMethod):
        method_id = method.id
        method.delete()
        audit_logger.info(f"Withdrawal method {method_id} deleted")
