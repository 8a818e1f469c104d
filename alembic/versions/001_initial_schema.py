"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "components",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "category",
            sa.Enum(
                "drone", "goggles", "radio", "battery", "accessory",
                name="componentcategory",
            ),
            nullable=False,
        ),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("in_stock", sa.Boolean(), nullable=False),
        sa.Column("specifications", sa.JSON(), nullable=False),
        sa.Column("compatible_with", sa.JSON(), nullable=False),
        sa.Column("purchase_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_components_id"), "components", ["id"], unique=False)
    op.create_index(op.f("ix_components_category"), "components", ["category"], unique=False)

    op.create_table(
        "builds",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("component_ids", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_builds_id"), "builds", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_builds_id"), table_name="builds")
    op.drop_table("builds")

    op.drop_index(op.f("ix_components_category"), table_name="components")
    op.drop_index(op.f("ix_components_id"), table_name="components")
    op.drop_table("components")

    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS componentcategory")
