"""seeding_data

Revision ID: 0002_seeding_data
Revises: 0001_initial_schema
Create Date: 2025-02-20 17:51:16.000000

Seeds three products for invoice 5. The invoice itself is not created here.

"""
from decimal import Decimal

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0002_seeding_data'
down_revision = '0001_initial_schema'
branch_labels = None
depends_on = None

SEED_INVOICE_ID = 5

products = sa.table(
    'products',
    sa.column('id', sa.Integer),
    sa.column('invoice_id', sa.Integer),
    sa.column('name', sa.String),
    sa.column('price', sa.Numeric(18, 2)),
)


def upgrade() -> None:
    op.bulk_insert(
        products,
        [
            {'id': 6, 'invoice_id': SEED_INVOICE_ID, 'name': 'Product A', 'price': Decimal('100')},
            {'id': 7, 'invoice_id': SEED_INVOICE_ID, 'name': 'Product B', 'price': Decimal('101')},
            {'id': 8, 'invoice_id': SEED_INVOICE_ID, 'name': 'Product C', 'price': Decimal('102')},
        ],
    )


def downgrade() -> None:
    op.execute(products.delete().where(products.c.id.in_([6, 7, 8])))
