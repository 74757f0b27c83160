"""
Category API routes.

Endpoints:
- GET /api/categorias - List categories
- GET /api/categorias/<id> - Get single category
- POST /api/categorias - Create category

Categories cannot be deleted.
"""
from flask import jsonify, url_for

from errors import NotFoundError
from services import CategoryService
from blueprints.api import api_bp, get_json_body


@api_bp.route('/categorias', methods=['GET'])
def list_categories():
    categories = CategoryService.list_categories()
    return jsonify([category.to_dict() for category in categories])


@api_bp.route('/categorias/<category_id>', methods=['GET'])
def get_category(category_id):
    category = CategoryService.get_category(category_id)
    if not category:
        raise NotFoundError(f'Category with ID {category_id} not found.')
    return jsonify(category.to_dict())


@api_bp.route('/categorias', methods=['POST'])
def create_category():
    """Create a new category.

    Request body:
        {"descricao": "Alimentação", "finalidade": 1}

    finalidade: 1 = expense, 2 = revenue, 3 = both
    """
    data = get_json_body()
    category = CategoryService.create_category(
        description=data.get('descricao'),
        purpose=data.get('finalidade'),
    )

    response = jsonify(category.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('api.get_category', category_id=category.id)
    return response
