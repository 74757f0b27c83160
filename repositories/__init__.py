"""
Repository layer for the home finance tracker.

Repositories wrap SQLAlchemy queries and session handling; they hold no business rules.
"""
from repositories.base import commit
from repositories.person_repository import PersonRepository
from repositories.category_repository import CategoryRepository
from repositories.transaction_repository import TransactionRepository

__all__ = [
    'commit',
    'PersonRepository',
    'CategoryRepository',
    'TransactionRepository',
]
