"""
Category repository.

Categories are append-only: there is deliberately no delete accessor.
"""
from extensions import db
from models import Category


class CategoryRepository:
    """Data access for categories."""

    @staticmethod
    def list_all():
        """Return all categories ordered by description."""
        return Category.query.order_by(Category.description, Category.id).all()

    @staticmethod
    def get(category_id):
        """
        Get a category by ID.

        Args:
            category_id (str): The category ID

        Returns:
            Category or None
        """
        if not category_id:
            return None
        return db.session.get(Category, str(category_id))

    @staticmethod
    def add(category):
        db.session.add(category)
        return category
