"""Create people, categories and transactions tables

Revision ID: 3f9a1c2d7b4e
Revises:
Create Date: 2026-10-19 10:12:41.532087

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9a1c2d7b4e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('people',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_people_name'), 'people', ['name'], unique=False)

    op.create_table('categories',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('description', sa.String(length=200), nullable=False),
        sa.Column('purpose', sa.Enum('EXPENSE', 'REVENUE', 'BOTH', name='category_purpose'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_categories_description'), 'categories', ['description'], unique=False)

    op.create_table('transactions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('amount', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('kind', sa.Enum('EXPENSE', 'REVENUE', name='transaction_kind'), nullable=False),
        sa.Column('category_id', sa.String(length=36), nullable=False),
        sa.Column('person_id', sa.String(length=36), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['person_id'], ['people.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_transactions_category_id'), 'transactions', ['category_id'], unique=False)
    op.create_index(op.f('ix_transactions_person_id'), 'transactions', ['person_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_transactions_person_id'), table_name='transactions')
    op.drop_index(op.f('ix_transactions_category_id'), table_name='transactions')
    op.drop_table('transactions')
    op.drop_index(op.f('ix_categories_description'), table_name='categories')
    op.drop_table('categories')
    op.drop_index(op.f('ix_people_name'), table_name='people')
    op.drop_table('people')
