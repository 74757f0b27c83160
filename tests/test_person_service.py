"""
Tests for PersonService: creation rules, listing and cascading delete.
"""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from errors import UnexpectedError, ValidationError
from models import Person, Transaction
from repositories import TransactionRepository
from services import PersonService


pytestmark = pytest.mark.unit


class TestCreatePerson:
    """Person creation tests."""

    def test_create_person_success(self, app):
        """A valid person is persisted and returned."""
        person = PersonService.create_person('João', 25)

        assert person.id
        assert person.name == 'João'
        assert person.age == 25
        assert Person.query.count() == 1

    def test_name_is_trimmed(self, app):
        person = PersonService.create_person('   Ana Souza  ', 30)
        assert person.name == 'Ana Souza'

    def test_each_person_gets_a_fresh_id(self, app):
        ids = {PersonService.create_person(f'Person {i}', 20 + i).id for i in range(5)}
        assert len(ids) == 5

    @pytest.mark.parametrize('name', ['', '   ', None, 42])
    def test_blank_name_rejected(self, app, name):
        with pytest.raises(ValidationError, match='name'):
            PersonService.create_person(name, 25)
        assert Person.query.count() == 0

    def test_overlong_name_rejected(self, app):
        with pytest.raises(ValidationError):
            PersonService.create_person('x' * 201, 25)

    @pytest.mark.parametrize('age', [0, -1, None, True, 'abc', 17.5, '²', '--5', 10**20, '99999999999', 1e20])
    def test_non_positive_or_non_integer_age_rejected(self, app, age):
        with pytest.raises(ValidationError, match='Age'):
            PersonService.create_person('João', age)
        assert Person.query.count() == 0

    def test_integral_age_from_json_accepted(self, app):
        """JSON numbers like 30.0 or "30" still describe a whole age."""
        assert PersonService.create_person('Ana', 30.0).age == 30
        assert PersonService.create_person('Bia', '31').age == 31

    def test_store_failure_is_reported_as_unexpected(self, app, db, monkeypatch):
        """A failing commit rolls back and surfaces UnexpectedError."""
        def failing_commit():
            raise SQLAlchemyError('disk I/O error')

        monkeypatch.setattr(db.session(), 'commit', failing_commit)

        with pytest.raises(UnexpectedError):
            PersonService.create_person('João', 25)


class TestReadPeople:
    """Person list/read tests."""

    def test_list_people_ordered_by_name(self, make_person):
        make_person('Maria', 17)
        make_person('Ana', 40)
        make_person('João', 25)

        names = [p.name for p in PersonService.list_people()]
        assert names == ['Ana', 'João', 'Maria']

    def test_get_person(self, joao):
        assert PersonService.get_person(joao.id) is joao

    def test_get_unknown_person_returns_none(self, app):
        assert PersonService.get_person('does-not-exist') is None
        assert PersonService.get_person(None) is None


class TestDeletePerson:
    """Person deletion tests."""

    def test_delete_person_removes_their_transactions(
            self, joao, maria, groceries, make_transaction):
        """Deleting a person deletes only that person's transactions."""
        make_transaction(joao, groceries, description='Feira')
        make_transaction(joao, groceries, description='Padaria')
        kept = make_transaction(maria, groceries, description='Lanche')
        joao_id = joao.id

        assert PersonService.delete_person(joao_id) is True

        assert PersonService.get_person(joao_id) is None
        assert TransactionRepository.list_by_person(joao_id) == []
        remaining = Transaction.query.all()
        assert [t.id for t in remaining] == [kept.id]

    def test_delete_person_without_transactions(self, joao):
        assert PersonService.delete_person(joao.id) is True
        assert Person.query.count() == 0

    def test_delete_unknown_person_returns_false(self, joao, groceries, make_transaction):
        """Deleting a missing person changes nothing."""
        make_transaction(joao, groceries)

        assert PersonService.delete_person('does-not-exist') is False

        assert Person.query.count() == 1
        assert Transaction.query.count() == 1
