"""
Query service.

Read-only aggregation of revenue, expense and balance per person and per
category. Totals are recomputed from the full transaction set on every call.
"""
from decimal import Decimal

from models import TransactionKind
from repositories import CategoryRepository, PersonRepository, TransactionRepository

ZERO = Decimal('0.00')


def _sum_by_kind(transactions):
    """Return (total_revenue, total_expense) for a list of transactions."""
    total_revenue = ZERO
    total_expense = ZERO
    for txn in transactions:
        if txn.kind is TransactionKind.REVENUE:
            total_revenue += txn.amount
        else:
            total_expense += txn.amount
    return total_revenue, total_expense


def build_totals(groups, transactions, key, describe):
    """
    Aggregate transactions under each group.

    Args:
        groups: People or categories; every one appears in the result
        transactions: All transactions to distribute over the groups
        key: Function mapping a transaction to its group ID
        describe: Function mapping a group to its (id, label) pair

    Returns:
        dict:
        {
            'totals': [
                {'id', 'label', 'total_revenue', 'total_expense', 'balance'}, ...
            ],
            'grand_total_revenue': Decimal,
            'grand_total_expense': Decimal,
            'grand_balance': Decimal,
        }
    """
    by_group = {}
    for txn in transactions:
        by_group.setdefault(key(txn), []).append(txn)

    totals = []
    for group in groups:
        group_id, label = describe(group)
        total_revenue, total_expense = _sum_by_kind(by_group.get(group_id, []))
        totals.append({
            'id': group_id,
            'label': label,
            'total_revenue': total_revenue,
            'total_expense': total_expense,
            'balance': total_revenue - total_expense,
        })

    grand_total_revenue = sum((entry['total_revenue'] for entry in totals), ZERO)
    grand_total_expense = sum((entry['total_expense'] for entry in totals), ZERO)

    return {
        'totals': totals,
        'grand_total_revenue': grand_total_revenue,
        'grand_total_expense': grand_total_expense,
        'grand_balance': grand_total_revenue - grand_total_expense,
    }


class QueryService:
    """Service for aggregate totals."""

    @staticmethod
    def totals_by_person():
        """
        Revenue, expense and balance for every person, plus grand totals.

        People without transactions are included with zero totals.
        """
        # Separate reads; a write landing between them is not reflected in both
        people = PersonRepository.list_all()
        transactions = TransactionRepository.list_all()

        return build_totals(
            people, transactions,
            key=lambda txn: txn.person_id,
            describe=lambda person: (person.id, person.name),
        )

    @staticmethod
    def totals_by_category():
        """
        Revenue, expense and balance for every category, plus grand totals.

        Categories without transactions are included with zero totals.
        """
        categories = CategoryRepository.list_all()
        transactions = TransactionRepository.list_all()

        return build_totals(
            categories, transactions,
            key=lambda txn: txn.category_id,
            describe=lambda category: (category.id, category.description),
        )
