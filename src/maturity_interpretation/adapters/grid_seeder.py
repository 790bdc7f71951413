"""Interpretation grid generation from the in-memory catalog.

The ``grille_interpretation`` table is a derived copy of the catalog, never
edited by hand. This module turns a catalog into the exact set of rows the
table should hold; ``InterpretationService.sync_grid`` writes them and
``InterpretationService.detect_grid_drift`` compares them with the table.

Row layout:
    global levels   — thematique = NULL, niveau = 'Niveau N - ...'
    thematic levels — thematique = theme name, niveau = '{label} - {tier}'
"""

from maturity_interpretation.core.catalog import MaturityCatalog
from maturity_interpretation.core.models.grid import GridRow


def catalog_to_grid_rows(catalog: MaturityCatalog) -> list[GridRow]:
    """Generate every grid row for a catalog.

    Global rows come first, grouped per function in display order, followed
    by thematic rows in catalog declaration order.

    Args:
        catalog: Catalog to export.

    Returns:
        One GridRow per global and thematic level.
    """
    rows: list[GridRow] = [
        GridRow(
            id_grille=level.id,
            fonction=level.function_id,
            thematique=None,
            score_min=level.score_range.score_min,
            score_max=level.score_range.score_max,
            niveau=level.label,
            description=level.description,
            recommandations=level.recommendations,
        )
        for level in catalog.global_levels
    ]
    rows.extend(
        GridRow(
            id_grille=level.id,
            fonction=level.function_id,
            thematique=level.theme_name,
            score_min=level.score_range.score_min,
            score_max=level.score_range.score_max,
            niveau=level.label,
            description=level.description,
            recommandations=level.recommendations,
        )
        for level in catalog.thematic_levels
    )
    return rows
