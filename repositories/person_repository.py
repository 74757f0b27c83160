"""
Person repository.
"""
from extensions import db
from models import Person


class PersonRepository:
    """Data access for people."""

    @staticmethod
    def list_all():
        """Return all people ordered by name."""
        return Person.query.order_by(Person.name, Person.id).all()

    @staticmethod
    def get(person_id):
        """
        Get a person by ID.

        Args:
            person_id (str): The person ID

        Returns:
            Person or None
        """
        if not person_id:
            return None
        return db.session.get(Person, str(person_id))

    @staticmethod
    def add(person):
        db.session.add(person)
        return person

    @staticmethod
    def delete(person):
        db.session.delete(person)
