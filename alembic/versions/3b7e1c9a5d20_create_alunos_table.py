"""create alunos table

Revision ID: 3b7e1c9a5d20
Revises:
Create Date: 2026-10-19 10:12:44.018233

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3b7e1c9a5d20"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "alunos",
        sa.Column("registro", sa.String(length=36), primary_key=True),
        # Pessoa embutida
        sa.Column("primeiro_nome", sa.String(length=80), nullable=False),
        sa.Column("sobrenome", sa.String(length=120), nullable=False),
        sa.Column("documento", sa.String(length=20), nullable=False),
        sa.Column("data_da_matricula", sa.Date(), nullable=False),
        sa.Column("materia_preferida", sa.String(length=80), nullable=True),
        sa.Column("apelido", sa.String(length=60), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index(
        "ix_alunos_data_da_matricula", "alunos", ["data_da_matricula"]
    )
    op.create_index(
        "ix_alunos_materia_preferida", "alunos", ["materia_preferida"]
    )
    op.create_index("ix_alunos_apelido", "alunos", ["apelido"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_alunos_apelido", table_name="alunos")
    op.drop_index("ix_alunos_materia_preferida", table_name="alunos")
    op.drop_index("ix_alunos_data_da_matricula", table_name="alunos")
    op.drop_table("alunos")
