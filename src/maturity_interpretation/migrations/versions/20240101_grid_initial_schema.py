"""grid: initial schema — grille_interpretation.

Revision ID: grid_001_initial
Revises:
Create Date: 2024-01-01 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "grid_001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the interpretation grid table and its lookup indexes."""
    op.create_table(
        "grille_interpretation",
        sa.Column(
            "id_grille",
            sa.String(100),
            primary_key=True,
            comment="Catalog level id (e.g. devsecops_n4, cult_collab_high)",
        ),
        sa.Column("fonction", sa.String(100), nullable=False, comment="Canonical function id"),
        sa.Column(
            "thematique",
            sa.String(200),
            nullable=True,
            comment="Theme name for thematic levels, NULL for global levels",
        ),
        sa.Column("score_min", sa.Numeric(5, 2), nullable=False, comment="Inclusive lower bound"),
        sa.Column("score_max", sa.Numeric(5, 2), nullable=False, comment="Inclusive upper bound"),
        sa.Column("niveau", sa.String(200), nullable=False, comment="Level label"),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("recommandations", sa.Text, nullable=True),
        sa.Column(
            "date_creation",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "date_modification",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.CheckConstraint("score_min <= score_max", name="ck_grille_score_order"),
    )
    op.create_index("idx_grille_fonction", "grille_interpretation", ["fonction"])
    op.create_index(
        "idx_grille_fonction_thematique",
        "grille_interpretation",
        ["fonction", "thematique"],
    )


def downgrade() -> None:
    """Drop the interpretation grid table."""
    op.drop_index("idx_grille_fonction_thematique", table_name="grille_interpretation")
    op.drop_index("idx_grille_fonction", table_name="grille_interpretation")
    op.drop_table("grille_interpretation")
