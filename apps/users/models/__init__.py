"""
User models module.

All models are exported from this module to maintain backward compatibility.
"""
from .user import User
from .customer import Customer
from .seller import Seller
from .address import CustomerAddress

__all__ = [
    'User',
    'Customer',
    'Seller',
    'CustomerAddress',
]
