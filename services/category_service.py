"""
Category service.

Categories are append-only: once created they can be listed and read but
never updated or deleted, since transactions may reference them.
"""
import logging

from models import Category, CategoryPurpose, generate_id
from repositories import CategoryRepository, commit
from services.validators import require_text

logger = logging.getLogger(__name__)

DESCRIPTION_MAX_LENGTH = 200


class CategoryService:
    """Service for category operations."""

    @staticmethod
    def list_categories():
        """Return all categories ordered by description."""
        return CategoryRepository.list_all()

    @staticmethod
    def get_category(category_id):
        """Return the category with the given ID, or None."""
        return CategoryRepository.get(category_id)

    @staticmethod
    def create_category(description, purpose):
        """
        Create a new category with validation.

        Args:
            description (str): Category description; whitespace is trimmed
            purpose: CategoryPurpose, its integer value or its name

        Returns:
            Category: The created category

        Raises:
            ValidationError: If the description is blank or the purpose is unknown
        """
        description = require_text(description, 'Category description', DESCRIPTION_MAX_LENGTH)
        purpose = CategoryPurpose.from_value(purpose)

        category = Category(id=generate_id(), description=description, purpose=purpose)
        CategoryRepository.add(category)
        commit()

        logger.info(f"Created category {category.id} ({category.description}, {purpose.name})")
        return category
