"""
Translate service exceptions into JSON error responses.

ValidationError and BusinessRuleError -> 400
NotFoundError                         -> 404
UnexpectedError and anything else     -> 500 (details are logged, not returned)
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from errors import BusinessRuleError, NotFoundError, UnexpectedError, ValidationError
from blueprints.api import api_bp

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Internal server error while processing the request.'


def error_response(message, status):
    return jsonify({'message': message}), status


# ReferenceNotFoundError is also a ValidationError; this handler wins because
# Flask resolves handlers along the exception's MRO.
@api_bp.errorhandler(ValidationError)
def handle_validation_error(e):
    logger.warning(f"Rejected invalid request: {e.message}")
    return error_response(e.message, 400)


@api_bp.errorhandler(BusinessRuleError)
def handle_business_rule_error(e):
    logger.warning(f"Rejected request by business rule: {e.message}")
    return error_response(e.message, 400)


@api_bp.errorhandler(NotFoundError)
def handle_not_found_error(e):
    return error_response(e.message, 404)


@api_bp.errorhandler(UnexpectedError)
def handle_unexpected_error(e):
    logger.error(f"Unexpected service failure: {e.message}", exc_info=e)
    return error_response(GENERIC_ERROR_MESSAGE, 500)


@api_bp.errorhandler(HTTPException)
def handle_http_exception(e):
    return error_response(e.description, e.code)


@api_bp.errorhandler(Exception)
def handle_exception(e):
    logger.exception(f"Unhandled error: {e}")
    return error_response(GENERIC_ERROR_MESSAGE, 500)
