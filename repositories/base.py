"""
Session helpers shared by the repositories.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from errors import UnexpectedError

logger = logging.getLogger(__name__)


def commit():
    """
    Commit the current unit of work.

    Raises:
        UnexpectedError: If the store rejects the commit. The session is
            rolled back before raising so the request can still respond.
    """
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Database commit failed: {e}")
        raise UnexpectedError('The operation could not be saved.') from e
