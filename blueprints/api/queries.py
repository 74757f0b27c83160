"""
Aggregate query API routes.

Endpoints:
- GET /api/consultas/totais-por-pessoa - Totals per person and grand totals
- GET /api/consultas/totais-por-categoria - Totals per category and grand totals
"""
from flask import jsonify

from services import QueryService
from blueprints.api import api_bp


def serialize_totals(report, entries_key, id_key, label_key):
    """Convert a QueryService report into the web client's JSON shape."""
    return {
        entries_key: [
            {
                id_key: entry['id'],
                label_key: entry['label'],
                'totalReceitas': float(entry['total_revenue']),
                'totalDespesas': float(entry['total_expense']),
                'saldo': float(entry['balance']),
            }
            for entry in report['totals']
        ],
        'totalGeralReceitas': float(report['grand_total_revenue']),
        'totalGeralDespesas': float(report['grand_total_expense']),
        'saldoLiquidoGeral': float(report['grand_balance']),
    }


@api_bp.route('/consultas/totais-por-pessoa', methods=['GET'])
def totals_by_person():
    report = QueryService.totals_by_person()
    return jsonify(serialize_totals(report, 'totaisPorPessoa', 'pessoaId', 'pessoaNome'))


@api_bp.route('/consultas/totais-por-categoria', methods=['GET'])
def totals_by_category():
    report = QueryService.totals_by_category()
    return jsonify(
        serialize_totals(report, 'totaisPorCategoria', 'categoriaId', 'categoriaDescricao')
    )
