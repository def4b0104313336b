"""initial_schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-02-20 17:40:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'invoices',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('image_url', sa.String(2048), nullable=True),
        sa.Column('amount', sa.Numeric(18, 2), nullable=False, server_default='0'),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(10), nullable=True),
        sa.Column('price', sa.Numeric(18, 2), nullable=False, server_default='0'),
        sa.Column('invoice_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['invoice_id'], ['invoices.id'],
            name='fk_products_invoice_id',
            ondelete='CASCADE',
        ),
    )
    op.create_index('ix_products_invoice_id', 'products', ['invoice_id'])


def downgrade() -> None:
    op.drop_index('ix_products_invoice_id', table_name='products')
    op.drop_table('products')
    op.drop_table('invoices')
