"""Public exports for customer domain services."""

from .models import Customer
from .repository import CustomerRepository
from .service import CustomerService

__all__ = [
    "Customer",
    "CustomerRepository",
    "CustomerService",
]
