"""Seed demo people, categories and transactions for local development.

Data goes through the services, so seeded records obey every validation rule.
"""
from decimal import Decimal

from models import CategoryPurpose, Person, TransactionKind
from services import CategoryService, PersonService, TransactionService

DEMO_PEOPLE = [
    ('João', 25),
    ('Maria', 17),
    ('Ana', 42),
]

DEMO_CATEGORIES = [
    ('Alimentação', CategoryPurpose.EXPENSE),
    ('Salário', CategoryPurpose.REVENUE),
    ('Transporte', CategoryPurpose.EXPENSE),
    ('Presentes', CategoryPurpose.BOTH),
]

# (description, amount, kind, category, person)
DEMO_TRANSACTIONS = [
    ('Compra no supermercado', Decimal('150.50'), TransactionKind.EXPENSE, 'Alimentação', 'João'),
    ('Salário', Decimal('5000.00'), TransactionKind.REVENUE, 'Salário', 'João'),
    ('Passe de ônibus', Decimal('45.00'), TransactionKind.EXPENSE, 'Transporte', 'Maria'),
    ('Lanche', Decimal('18.90'), TransactionKind.EXPENSE, 'Alimentação', 'Maria'),
    ('Salário', Decimal('7200.00'), TransactionKind.REVENUE, 'Salário', 'Ana'),
    ('Presente de aniversário', Decimal('300.00'), TransactionKind.REVENUE, 'Presentes', 'Ana'),
]


def seed_demo_data(force=False):
    """
    Insert the demo data set. Must run inside an app context.

    Args:
        force (bool): Seed even when people already exist

    Returns:
        dict or None: Counts of created records, or None if skipped
    """
    if not force and Person.query.first() is not None:
        return None

    people = {
        name: PersonService.create_person(name, age)
        for name, age in DEMO_PEOPLE
    }
    categories = {
        description: CategoryService.create_category(description, purpose)
        for description, purpose in DEMO_CATEGORIES
    }

    for description, amount, kind, category, person in DEMO_TRANSACTIONS:
        TransactionService.create_transaction(
            description, amount, kind,
            category_id=categories[category].id,
            person_id=people[person].id,
        )

    return {
        'people': len(people),
        'categories': len(categories),
        'transactions': len(DEMO_TRANSACTIONS),
    }
