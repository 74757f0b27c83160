"""
Database models for the home finance tracker.
"""
import uuid
from datetime import datetime
from enum import Enum

from extensions import db
from errors import ValidationError


def generate_id():
    """Generate a new primary key for people, categories and transactions."""
    return str(uuid.uuid4())


def _parse_enum(enum_cls, raw, aliases, message):
    """Map raw input (member, int, numeric string or name) onto an enum member."""
    if isinstance(raw, enum_cls):
        return raw
    # bool is an int subclass; True must not silently become value 1
    if isinstance(raw, bool):
        raise ValidationError(message)
    if isinstance(raw, int):
        try:
            return enum_cls(raw)
        except ValueError:
            raise ValidationError(message)
    if isinstance(raw, str):
        text = raw.strip()
        if text.isdecimal():
            return _parse_enum(enum_cls, int(text), aliases, message)
        key = text.upper()
        if key in enum_cls.__members__:
            return enum_cls[key]
        if key in aliases:
            return aliases[key]
    raise ValidationError(message)


class TransactionKind(Enum):
    """Direction of a transaction: money going out or coming in."""

    EXPENSE = 1
    REVENUE = 2

    @classmethod
    def from_value(cls, raw):
        return _parse_enum(
            cls, raw, _KIND_ALIASES,
            'Transaction type must be Expense (1) or Revenue (2).'
        )


class CategoryPurpose(Enum):
    """Which transaction kinds a category may label."""

    EXPENSE = 1
    REVENUE = 2
    BOTH = 3

    @classmethod
    def from_value(cls, raw):
        return _parse_enum(
            cls, raw, _PURPOSE_ALIASES,
            'Category purpose must be Expense (1), Revenue (2) or Both (3).'
        )

    def allows(self, kind):
        """Return True if a transaction of this kind may use the category."""
        if self is CategoryPurpose.BOTH:
            return True
        if self is CategoryPurpose.EXPENSE:
            return kind is TransactionKind.EXPENSE
        return kind is TransactionKind.REVENUE


# Labels used by the existing web client
_KIND_ALIASES = {
    'DESPESA': TransactionKind.EXPENSE,
    'RECEITA': TransactionKind.REVENUE,
}

_PURPOSE_ALIASES = {
    'DESPESA': CategoryPurpose.EXPENSE,
    'RECEITA': CategoryPurpose.REVENUE,
    'AMBAS': CategoryPurpose.BOTH,
}


class Person(db.Model):
    """A household member whose transactions are tracked."""

    __tablename__ = 'people'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    name = db.Column(db.String(200), nullable=False, index=True)
    age = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    transactions = db.relationship(
        'Transaction', back_populates='person',
        cascade='all, delete-orphan', passive_deletes=True
    )

    def __repr__(self):
        return f'<Person {self.id}: {self.name} ({self.age})>'

    def to_dict(self):
        """Convert person to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'nome': self.name,
            'idade': self.age,
        }


class Category(db.Model):
    """A label for transactions, restricted by purpose."""

    __tablename__ = 'categories'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    description = db.Column(db.String(200), nullable=False, index=True)
    purpose = db.Column(db.Enum(CategoryPurpose, name='category_purpose'), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Deleting a referenced category is left to the RESTRICT foreign key
    transactions = db.relationship(
        'Transaction', back_populates='category', passive_deletes='all'
    )

    def __repr__(self):
        return f'<Category {self.id}: {self.description} [{self.purpose.name}]>'

    def to_dict(self):
        """Convert category to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'descricao': self.description,
            'finalidade': self.purpose.value,
        }


class Transaction(db.Model):
    """A single expense or revenue tied to one person and one category."""

    __tablename__ = 'transactions'

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    description = db.Column(db.String(500), nullable=False)
    amount = db.Column(db.Numeric(18, 2), nullable=False)
    kind = db.Column(db.Enum(TransactionKind, name='transaction_kind'), nullable=False)
    category_id = db.Column(
        db.String(36),
        db.ForeignKey('categories.id', ondelete='RESTRICT'),
        nullable=False, index=True
    )
    person_id = db.Column(
        db.String(36),
        db.ForeignKey('people.id', ondelete='CASCADE'),
        nullable=False, index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    category = db.relationship('Category', back_populates='transactions')
    person = db.relationship('Person', back_populates='transactions')

    def __repr__(self):
        return f'<Transaction {self.id}: {self.description} {self.kind.name} {self.amount}>'

    def to_dict(self):
        """Convert transaction to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'descricao': self.description,
            'valor': float(self.amount),
            'tipo': self.kind.value,
            'categoriaId': self.category_id,
            'categoriaDescricao': self.category.description if self.category else None,
            'pessoaId': self.person_id,
            'pessoaNome': self.person.name if self.person else None,
        }
