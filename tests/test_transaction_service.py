"""
Tests for TransactionService: validation order, business rules and listing.
"""
import pytest
from decimal import Decimal

from errors import (
    BusinessRuleError, NotFoundError, ReferenceNotFoundError, ValidationError
)
from models import CategoryPurpose, Transaction, TransactionKind
from repositories import TransactionRepository
from services import TransactionService


pytestmark = pytest.mark.unit


def create(description='Compra', amount=Decimal('10.00'), kind=TransactionKind.EXPENSE,
           category=None, person=None, category_id=None, person_id=None):
    return TransactionService.create_transaction(
        description, amount, kind,
        category_id=category.id if category else category_id,
        person_id=person.id if person else person_id,
    )


class TestCreateTransaction:
    """Successful creation."""

    def test_expense_for_adult(self, joao, groceries):
        txn = create('Compra no supermercado', Decimal('150.50'),
                     TransactionKind.EXPENSE, groceries, joao)

        assert txn.id
        assert txn.description == 'Compra no supermercado'
        assert txn.amount == Decimal('150.50')
        assert txn.kind is TransactionKind.EXPENSE
        assert txn.person.name == 'João'
        assert txn.category.description == 'Alimentação'

    def test_revenue_for_adult(self, joao, salary):
        txn = create('Salário', '5000.00', TransactionKind.REVENUE, salary, joao)
        assert txn.kind is TransactionKind.REVENUE
        assert txn.amount == Decimal('5000.00')

    def test_both_purpose_category_accepts_either_kind(self, joao, gifts):
        create('Presente dado', 80, TransactionKind.EXPENSE, gifts, joao)
        create('Presente recebido', 120, TransactionKind.REVENUE, gifts, joao)
        assert Transaction.query.count() == 2

    def test_raw_values_are_accepted(self, joao, groceries):
        """Kind and amount arrive as JSON numbers from the API."""
        txn = create('Feira', 42.3, 1, groceries, joao)
        assert txn.amount == Decimal('42.30')
        assert txn.kind is TransactionKind.EXPENSE

    def test_description_is_trimmed(self, joao, groceries):
        txn = create('  Padaria  ', category=groceries, person=joao)
        assert txn.description == 'Padaria'

    def test_amount_rounded_to_cents(self, joao, groceries):
        txn = create(amount='10.005', category=groceries, person=joao)
        assert txn.amount == Decimal('10.01')


class TestFieldValidation:
    """Malformed fields fail with ValidationError."""

    @pytest.mark.parametrize('description', ['', '   ', None])
    def test_blank_description(self, joao, groceries, description):
        with pytest.raises(ValidationError, match='description'):
            create(description, category=groceries, person=joao)
        assert Transaction.query.count() == 0

    @pytest.mark.parametrize('amount', [0, -5, '0.00', '0.004', 'abc', None, True, 'NaN', 'Infinity'])
    def test_non_positive_or_invalid_amount(self, joao, groceries, amount):
        with pytest.raises(ValidationError, match='amount'):
            create(amount=amount, category=groceries, person=joao)
        assert Transaction.query.count() == 0

    @pytest.mark.parametrize('kind', [0, 3, None, 'both'])
    def test_unknown_kind(self, joao, groceries, kind):
        with pytest.raises(ValidationError, match='type'):
            create(kind=kind, category=groceries, person=joao)


class TestReferences:
    """Referenced person and category must exist."""

    def test_unknown_person(self, groceries):
        with pytest.raises(ReferenceNotFoundError, match='Person'):
            create(category=groceries, person_id='missing-person')

    def test_unknown_category(self, joao):
        with pytest.raises(ReferenceNotFoundError, match='Category'):
            create(person=joao, category_id='missing-category')

    def test_reference_error_is_validation_and_not_found(self, groceries):
        with pytest.raises(ReferenceNotFoundError) as excinfo:
            create(category=groceries, person_id=None)
        assert isinstance(excinfo.value, ValidationError)
        assert isinstance(excinfo.value, NotFoundError)


class TestBusinessRules:
    """Category purpose and age rules."""

    def test_revenue_in_expense_category_rejected(self, joao, groceries):
        with pytest.raises(BusinessRuleError, match='Alimentação'):
            create(kind=TransactionKind.REVENUE, category=groceries, person=joao)
        assert Transaction.query.count() == 0

    def test_expense_in_revenue_category_rejected(self, joao, salary):
        with pytest.raises(BusinessRuleError, match='Salário'):
            create(kind=TransactionKind.EXPENSE, category=salary, person=joao)

    @pytest.mark.parametrize('purpose', list(CategoryPurpose))
    @pytest.mark.parametrize('kind', list(TransactionKind))
    def test_compatibility_table(self, joao, make_category, purpose, kind):
        category = make_category('Categoria', purpose)
        compatible = purpose is CategoryPurpose.BOTH or purpose.value == kind.value

        if compatible:
            assert create(kind=kind, category=category, person=joao).id
        else:
            with pytest.raises(BusinessRuleError):
                create(kind=kind, category=category, person=joao)

    def test_minor_cannot_receive_revenue(self, maria, gifts):
        """Minors are refused revenue even in a category that allows it."""
        with pytest.raises(BusinessRuleError) as excinfo:
            create('Mesada', 50, TransactionKind.REVENUE, gifts, maria)

        message = excinfo.value.message
        assert 'Minors' in message
        assert 'revenue' in message
        assert Transaction.query.count() == 0

    @pytest.mark.parametrize('age', [1, 10, 17])
    def test_any_minor_cannot_receive_revenue(self, make_person, salary, age):
        person = make_person('Criança', age)
        with pytest.raises(BusinessRuleError, match='Minors'):
            create(kind=TransactionKind.REVENUE, category=salary, person=person)

    def test_minor_can_record_expense(self, maria, groceries):
        txn = create('Lanche', 12, TransactionKind.EXPENSE, groceries, maria)
        assert txn.person.name == 'Maria'

    def test_person_of_eighteen_can_receive_revenue(self, make_person, salary):
        person = make_person('Adulto', 18)
        assert create(kind=TransactionKind.REVENUE, category=salary, person=person).id


class TestValidationOrder:
    """The first failing check wins: fields, then references, then rules."""

    def test_field_error_before_missing_person(self, groceries):
        with pytest.raises(ValidationError) as excinfo:
            create('', category=groceries, person_id='missing')
        assert excinfo.type is ValidationError

    def test_amount_error_before_missing_category(self, joao):
        with pytest.raises(ValidationError) as excinfo:
            create(amount=0, person=joao, category_id='missing')
        assert excinfo.type is ValidationError
        assert 'amount' in excinfo.value.message

    def test_missing_person_before_missing_category(self, app):
        with pytest.raises(ReferenceNotFoundError, match='Person'):
            create(person_id='missing', category_id='missing')

    def test_missing_reference_before_business_rule(self, salary):
        with pytest.raises(ReferenceNotFoundError):
            create(kind=TransactionKind.EXPENSE, category=salary, person_id='missing')

    def test_category_rule_before_age_rule(self, maria, groceries):
        """A minor's revenue in an expense-only category reports the category."""
        with pytest.raises(BusinessRuleError) as excinfo:
            create(kind=TransactionKind.REVENUE, category=groceries, person=maria)
        assert 'Alimentação' in excinfo.value.message
        assert 'Minors' not in excinfo.value.message


class TestReadTransactions:
    """Transaction list/read tests."""

    def test_get_transaction(self, joao, groceries, make_transaction):
        txn = make_transaction(joao, groceries)
        found = TransactionService.get_transaction(txn.id)

        assert found.id == txn.id
        assert found.person.name == 'João'

    def test_get_unknown_transaction_returns_none(self, app):
        assert TransactionService.get_transaction('missing') is None

    def test_list_filters(self, joao, maria, groceries, gifts, make_transaction):
        a = make_transaction(joao, groceries)
        b = make_transaction(joao, gifts)
        c = make_transaction(maria, groceries)

        def ids(transactions):
            return {t.id for t in transactions}

        assert ids(TransactionService.list_transactions()) == {a.id, b.id, c.id}
        assert ids(TransactionService.list_transactions(person_id=joao.id)) == {a.id, b.id}
        assert ids(TransactionService.list_transactions(category_id=groceries.id)) == {a.id, c.id}
        assert ids(TransactionService.list_transactions(
            person_id=joao.id, category_id=groceries.id)) == {a.id}

    def test_combined_filters_with_no_overlap(self, joao, maria, groceries, salary, make_transaction):
        make_transaction(joao, groceries)
        make_transaction(maria, groceries)
        make_transaction(joao, salary, kind=TransactionKind.REVENUE)

        assert TransactionRepository.list_filtered(person_id=maria.id, category_id=salary.id) == []
        matched = TransactionRepository.list_filtered(person_id=maria.id, category_id=groceries.id)
        assert [t.person_id for t in matched] == [maria.id]
        assert matched[0].category.description == groceries.description
