"""
Person API routes.

Endpoints:
- GET /api/pessoas - List people
- GET /api/pessoas/<id> - Get single person
- POST /api/pessoas - Create person
- DELETE /api/pessoas/<id> - Delete person and all of their transactions
"""
from flask import jsonify, url_for

from errors import NotFoundError
from services import PersonService
from blueprints.api import api_bp, get_json_body


@api_bp.route('/pessoas', methods=['GET'])
def list_people():
    """List people ordered by name.

    Returns:
        [{"id": "...", "nome": "João", "idade": 25}, ...]
    """
    people = PersonService.list_people()
    return jsonify([person.to_dict() for person in people])


@api_bp.route('/pessoas/<person_id>', methods=['GET'])
def get_person(person_id):
    person = PersonService.get_person(person_id)
    if not person:
        raise NotFoundError(f'Person with ID {person_id} not found.')
    return jsonify(person.to_dict())


@api_bp.route('/pessoas', methods=['POST'])
def create_person():
    """Create a new person.

    Request body:
        {"nome": "João", "idade": 25}

    Returns:
        201 with the created person and a Location header
    """
    data = get_json_body()
    person = PersonService.create_person(
        name=data.get('nome'),
        age=data.get('idade'),
    )

    response = jsonify(person.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('api.get_person', person_id=person.id)
    return response


@api_bp.route('/pessoas/<person_id>', methods=['DELETE'])
def delete_person(person_id):
    """Delete a person. Their transactions are deleted with them."""
    if not PersonService.delete_person(person_id):
        raise NotFoundError(f'Person with ID {person_id} not found.')
    return '', 204
