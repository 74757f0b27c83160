"""
Transaction API routes.

Endpoints:
- GET /api/transacoes - List transactions (optional pessoaId / categoriaId filters)
- GET /api/transacoes/<id> - Get single transaction
- POST /api/transacoes - Create transaction
"""
from flask import jsonify, request, url_for

from errors import NotFoundError
from services import TransactionService
from blueprints.api import api_bp, get_json_body


@api_bp.route('/transacoes', methods=['GET'])
def list_transactions():
    """List transactions, newest first.

    Query Parameters:
        pessoaId (str): Only transactions of this person
        categoriaId (str): Only transactions in this category
    """
    transactions = TransactionService.list_transactions(
        person_id=request.args.get('pessoaId'),
        category_id=request.args.get('categoriaId'),
    )
    return jsonify([txn.to_dict() for txn in transactions])


@api_bp.route('/transacoes/<transaction_id>', methods=['GET'])
def get_transaction(transaction_id):
    transaction = TransactionService.get_transaction(transaction_id)
    if not transaction:
        raise NotFoundError(f'Transaction with ID {transaction_id} not found.')
    return jsonify(transaction.to_dict())


@api_bp.route('/transacoes', methods=['POST'])
def create_transaction():
    """Create a new transaction.

    Request body:
        {
            "descricao": "Compra no supermercado",
            "valor": 150.50,
            "tipo": 1,             // 1 = expense, 2 = revenue
            "categoriaId": "...",
            "pessoaId": "..."
        }

    Returns:
        201 with the transaction, including pessoaNome and categoriaDescricao
    """
    data = get_json_body()
    transaction = TransactionService.create_transaction(
        description=data.get('descricao'),
        amount=data.get('valor'),
        kind=data.get('tipo'),
        category_id=data.get('categoriaId'),
        person_id=data.get('pessoaId'),
    )

    response = jsonify(transaction.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('api.get_transaction', transaction_id=transaction.id)
    return response
