"""
Transaction service.

Handles transaction creation and validation.

Checks run in a fixed order and the first failure wins:
field checks, then existence of the referenced person and category,
then the business rules (category purpose and the minor/revenue rule).
"""
import logging

from errors import BusinessRuleError, ReferenceNotFoundError
from models import Transaction, TransactionKind, generate_id
from repositories import (
    CategoryRepository, PersonRepository, TransactionRepository, commit
)
from services.validators import require_text, require_positive_amount

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 500
ADULT_AGE = 18


class TransactionService:
    """Service for transaction operations."""

    @staticmethod
    def list_transactions(person_id=None, category_id=None):
        """
        List transactions, newest first.

        Args:
            person_id (str, optional): Only transactions of this person
            category_id (str, optional): Only transactions in this category

        Returns:
            list: Transaction instances with person and category loaded
        """
        return TransactionRepository.list_filtered(person_id=person_id, category_id=category_id)

    @staticmethod
    def get_transaction(transaction_id):
        """Return the transaction with the given ID, or None."""
        return TransactionRepository.get(transaction_id)

    @staticmethod
    def validate_category_purpose(category, kind):
        """
        Check that a category may label a transaction of the given kind.

        Raises:
            BusinessRuleError: If the category's purpose excludes the kind
        """
        if not category.purpose.allows(kind):
            raise BusinessRuleError(
                f"Category '{category.description}' cannot be used for "
                f"{kind.name.lower()} transactions. "
                f"The category's purpose is {category.purpose.name.lower()}."
            )

    @staticmethod
    def validate_person_may_record(person, kind):
        """
        Check the age rule: minors may only record expenses.

        Raises:
            BusinessRuleError: If a minor is given a revenue transaction
        """
        if person.age < ADULT_AGE and kind is TransactionKind.REVENUE:
            raise BusinessRuleError(
                f"Minors (under {ADULT_AGE}) cannot have revenue transactions. "
                f"'{person.name}' is {person.age} years old."
            )

    @staticmethod
    def create_transaction(description, amount, kind, category_id, person_id):
        """
        Create a new transaction with validation.

        Args:
            description (str): What the transaction was for
            amount: Positive amount (Decimal, number or numeric string)
            kind: TransactionKind, its integer value or its name
            category_id (str): ID of an existing category
            person_id (str): ID of an existing person

        Returns:
            Transaction: The created transaction, reloaded with its person and category

        Raises:
            ValidationError: If a field is missing or malformed
            ReferenceNotFoundError: If the person or category does not exist
            BusinessRuleError: If the category purpose or the person's age forbids it
        """
        description = require_text(description, 'Transaction description', DESCRIPTION_MAX_LENGTH)
        amount = require_positive_amount(amount, 'Transaction amount must be a positive decimal number.')
        kind = TransactionKind.from_value(kind)

        person = PersonRepository.get(person_id)
        if not person:
            raise ReferenceNotFoundError(f'Person with ID {person_id} not found.')

        category = CategoryRepository.get(category_id)
        if not category:
            raise ReferenceNotFoundError(f'Category with ID {category_id} not found.')

        TransactionService.validate_category_purpose(category, kind)
        TransactionService.validate_person_may_record(person, kind)

        transaction = Transaction(
            id=generate_id(),
            description=description,
            amount=amount,
            kind=kind,
            category_id=category.id,
            person_id=person.id,
        )
        TransactionRepository.add(transaction)
        commit()

        logger.info(
            f"Created transaction {transaction.id}: {kind.name} {amount} "
            f"for person {person.id} in category {category.id}"
        )
        return TransactionRepository.get(transaction.id)
