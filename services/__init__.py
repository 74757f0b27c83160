"""
Service layer for the home finance tracker.

Services encapsulate business logic separate from route handlers.
"""
from services.person_service import PersonService
from services.category_service import CategoryService
from services.transaction_service import TransactionService
from services.query_service import QueryService

__all__ = [
    'PersonService',
    'CategoryService',
    'TransactionService',
    'QueryService',
]
