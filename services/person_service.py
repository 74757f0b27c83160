"""
Person service.

Handles registering, listing and removing people.
"""
import logging

from models import Person, generate_id
from repositories import PersonRepository, TransactionRepository, commit
from services.validators import require_text, require_positive_int

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200


class PersonService:
    """Service for person operations."""

    @staticmethod
    def list_people():
        """Return all people ordered by name."""
        return PersonRepository.list_all()

    @staticmethod
    def get_person(person_id):
        """Return the person with the given ID, or None."""
        return PersonRepository.get(person_id)

    @staticmethod
    def create_person(name, age):
        """
        Create a new person with validation.

        Args:
            name (str): Person's name; surrounding whitespace is trimmed
            age (int): Age in years, must be positive

        Returns:
            Person: The created person

        Raises:
            ValidationError: If the name is blank or the age is not a positive integer
        """
        name = require_text(name, 'Person name', NAME_MAX_LENGTH)
        age = require_positive_int(age, 'Age must be a positive integer.')

        person = Person(id=generate_id(), name=name, age=age)
        PersonRepository.add(person)
        commit()

        logger.info(f"Created person {person.id} ({person.name})")
        return person

    @staticmethod
    def delete_person(person_id):
        """
        Delete a person together with all of their transactions.

        Dependents are collected and removed first, then the person, all in
        a single commit.

        Args:
            person_id (str): The person ID

        Returns:
            bool: False if no such person exists, True once deleted
        """
        person = PersonRepository.get(person_id)
        if not person:
            return False

        transactions = TransactionRepository.list_by_person(person.id)
        for transaction in transactions:
            TransactionRepository.delete(transaction)
        PersonRepository.delete(person)
        commit()

        logger.info(f"Deleted person {person_id} and {len(transactions)} transaction(s)")
        return True
