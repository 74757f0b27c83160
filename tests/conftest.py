"""
Shared pytest fixtures for home finance tracker tests.
"""
import os
import sys
from decimal import Decimal

import pytest

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)


# ============================================================================
# Flask App Fixtures
# ============================================================================

@pytest.fixture
def app():
    """Create a Flask app backed by a fresh in-memory database."""
    from app import create_app
    from extensions import db as _db

    flask_app = create_app('testing')
    with flask_app.app_context():
        yield flask_app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def db(app):
    """Get database instance."""
    from extensions import db as _db
    return _db


@pytest.fixture
def client(app):
    """Create test client for API tests."""
    return app.test_client()


# ============================================================================
# Data Factory Fixtures
# ============================================================================

@pytest.fixture
def make_person(app):
    """Factory fixture to create a person through the service."""
    from services import PersonService

    def _make(name='João', age=25):
        return PersonService.create_person(name, age)

    return _make


@pytest.fixture
def make_category(app):
    """Factory fixture to create a category through the service."""
    from models import CategoryPurpose
    from services import CategoryService

    def _make(description='Alimentação', purpose=CategoryPurpose.EXPENSE):
        return CategoryService.create_category(description, purpose)

    return _make


@pytest.fixture
def make_transaction(app):
    """Factory fixture to create a transaction through the service."""
    from models import TransactionKind
    from services import TransactionService

    def _make(person, category, amount=Decimal('10.00'),
              kind=TransactionKind.EXPENSE, description='Compra'):
        return TransactionService.create_transaction(
            description, amount, kind,
            category_id=category.id,
            person_id=person.id,
        )

    return _make


@pytest.fixture
def joao(make_person):
    return make_person('João', 25)


@pytest.fixture
def maria(make_person):
    """A minor: may only record expenses."""
    return make_person('Maria', 17)


@pytest.fixture
def groceries(make_category):
    from models import CategoryPurpose
    return make_category('Alimentação', CategoryPurpose.EXPENSE)


@pytest.fixture
def salary(make_category):
    from models import CategoryPurpose
    return make_category('Salário', CategoryPurpose.REVENUE)


@pytest.fixture
def gifts(make_category):
    from models import CategoryPurpose
    return make_category('Presentes', CategoryPurpose.BOTH)
