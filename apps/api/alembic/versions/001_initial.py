"""Initial schema: advocates and their ordered specialties.

Revision ID: 001
Revises:
Create Date: 2025-02-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "advocates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("degree", sa.String(50), nullable=False),
        sa.Column("years_of_experience", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("phone_number", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint("years_of_experience >= 0", name="ck_advocates_years_of_experience_non_negative"),
    )
    op.create_index("ix_advocates_degree", "advocates", ["degree"])
    op.create_index("ix_advocates_years_of_experience", "advocates", ["years_of_experience"])

    op.create_table(
        "advocate_specialties",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "advocate_id",
            sa.Integer(),
            sa.ForeignKey("advocates.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_index(
        "ix_advocate_specialties_advocate_id_position",
        "advocate_specialties",
        ["advocate_id", "position"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index("ix_advocate_specialties_advocate_id_position", table_name="advocate_specialties")
    op.drop_table("advocate_specialties")
    op.drop_index("ix_advocates_years_of_experience", table_name="advocates")
    op.drop_index("ix_advocates_degree", table_name="advocates")
    op.drop_table("advocates")
