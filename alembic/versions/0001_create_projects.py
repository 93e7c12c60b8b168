"""create projects table

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("template_id", sa.String(length=100), nullable=True),
        sa.Column("infrastructure", sa.JSON(), nullable=True),
        sa.Column("bundle", sa.JSON(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
    )

def downgrade():
    op.drop_table("projects")
