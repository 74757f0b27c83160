"""
Transaction repository.

Reads eager-load the owning person and category so serialized records carry
the person name and category description.
"""
from sqlalchemy.orm import joinedload

from extensions import db
from models import Transaction


def _with_relations(query):
    return query.options(
        joinedload(Transaction.person),
        joinedload(Transaction.category),
    )


class TransactionRepository:
    """Data access for transactions."""

    @staticmethod
    def list_filtered(person_id=None, category_id=None):
        """
        Return transactions, newest first, narrowed by the given filters.

        Args:
            person_id (str, optional): Only transactions of this person
            category_id (str, optional): Only transactions in this category

        Returns:
            list: Transaction instances with person and category loaded
        """
        query = _with_relations(Transaction.query)
        if person_id:
            query = query.filter_by(person_id=str(person_id))
        if category_id:
            query = query.filter_by(category_id=str(category_id))
        return query.order_by(Transaction.created_at.desc(), Transaction.id).all()

    @staticmethod
    def list_all():
        """Return all transactions, newest first."""
        return TransactionRepository.list_filtered()

    @staticmethod
    def list_by_person(person_id):
        """Return a person's transactions, newest first."""
        return TransactionRepository.list_filtered(person_id=person_id)

    @staticmethod
    def get(transaction_id):
        """
        Get a transaction by ID with its person and category loaded.

        Args:
            transaction_id (str): The transaction ID

        Returns:
            Transaction or None
        """
        if not transaction_id:
            return None
        return _with_relations(Transaction.query).filter_by(
            id=str(transaction_id)
        ).first()

    @staticmethod
    def add(transaction):
        db.session.add(transaction)
        return transaction

    @staticmethod
    def delete(transaction):
        db.session.delete(transaction)
