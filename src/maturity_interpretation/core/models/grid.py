"""SQLAlchemy ORM model for the persisted interpretation grid.

The ``grille_interpretation`` table holds a copy of the catalog's global and
thematic levels so that reporting queries can classify stored scores with
``score BETWEEN score_min AND score_max``. Rows are generated from the
in-memory catalog; see ``adapters/grid_seeder.py``.
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Numeric, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class GridBase(DeclarativeBase):
    """Base class for interpretation grid ORM models."""


class InterpretationGridEntry(GridBase):
    """One score band of the interpretation grid.

    Global levels have ``thematique`` set to NULL; thematic levels carry the
    theme name they apply to.

    Table: grille_interpretation
    """

    __tablename__ = "grille_interpretation"
    __table_args__ = (
        Index("idx_grille_fonction", "fonction"),
        Index("idx_grille_fonction_thematique", "fonction", "thematique"),
        CheckConstraint("score_min <= score_max", name="ck_grille_score_order"),
    )

    id_grille: Mapped[str] = mapped_column(
        String(100),
        primary_key=True,
        comment="Catalog level id (e.g. devsecops_n4, cult_collab_high)",
    )
    fonction: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Canonical function id",
    )
    thematique: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        comment="Theme name for thematic levels, NULL for global levels",
    )
    score_min: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
        comment="Inclusive lower bound",
    )
    score_max: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
        comment="Inclusive upper bound",
    )
    niveau: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Level label",
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    recommandations: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_creation: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    date_modification: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_row(self) -> "GridRow":
        """Detach the persisted values into a plain GridRow."""
        return GridRow(
            id_grille=self.id_grille,
            fonction=self.fonction,
            thematique=self.thematique,
            score_min=float(self.score_min),
            score_max=float(self.score_max),
            niveau=self.niveau,
            description=self.description,
            recommandations=self.recommandations,
        )


@dataclass(frozen=True)
class GridRow:
    """Column values of one grid row, independent of any session.

    Produced from the catalog by ``catalog_to_grid_rows`` and compared with
    persisted rows for drift detection. Timestamps are not part of the value.
    """

    id_grille: str
    fonction: str
    thematique: str | None
    score_min: float
    score_max: float
    niveau: str
    description: str
    recommandations: str | None

    def to_entry(self) -> InterpretationGridEntry:
        return InterpretationGridEntry(
            id_grille=self.id_grille,
            fonction=self.fonction,
            thematique=self.thematique,
            score_min=self.score_min,
            score_max=self.score_max,
            niveau=self.niveau,
            description=self.description,
            recommandations=self.recommandations,
        )
