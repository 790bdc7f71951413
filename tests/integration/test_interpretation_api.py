"""Integration tests for the maturity interpretation HTTP API.

Requests go through the full FastAPI stack; only the grid repository is
replaced with a mock, so no database is needed.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import status
from httpx import AsyncClient

from maturity_interpretation.adapters.grid_seeder import catalog_to_grid_rows
from maturity_interpretation.core.catalog import MaturityCatalog

_BASE = "/api/v1/interpretation"


class TestFunctionEndpoints:
    """Tests for catalog browsing endpoints."""

    @pytest.mark.asyncio()
    async def test_list_functions(self, client: AsyncClient) -> None:
        response = await client.get(f"{_BASE}/functions")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["total"] == 5
        assert body["functions"][0]["id"] == "devsecops"
        assert body["functions"][0]["theme_count"] == 9

    @pytest.mark.asyncio()
    async def test_get_function_by_alias(self, client: AsyncClient) -> None:
        response = await client.get(f"{_BASE}/functions/cyber")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id"] == "cybersecurite"
        assert len(body["themes"]) == 8
        assert len(body["global_levels"]) == 5
        assert body["global_levels"][0]["score_range"] == {"score_min": 0.0, "score_max": 1.5}

    @pytest.mark.asyncio()
    async def test_get_function_by_display_name(self, client: AsyncClient) -> None:
        response = await client.get(f"{_BASE}/functions/Gouvernance SI")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == "gouvernance_si"

    @pytest.mark.asyncio()
    async def test_unknown_function_is_404(self, client: AsyncClient) -> None:
        response = await client.get(f"{_BASE}/functions/finance")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestLevelEndpoints:
    """Tests for global and thematic level resolution endpoints."""

    @pytest.mark.asyncio()
    async def test_global_level(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/devsecops/global-level", params={"score": 3.6}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["function_id"] == "devsecops"
        assert body["level"]["id"] == "devsecops_n4"
        assert body["level"]["label"] == "Niveau 4 - Géré"

    @pytest.mark.asyncio()
    async def test_global_level_out_of_domain_is_404(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/devsecops/global-level", params={"score": 7}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio()
    async def test_global_level_unknown_function_is_404(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/finance/global-level", params={"score": 3.0}
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio()
    async def test_global_level_requires_score(self, client: AsyncClient) -> None:
        response = await client.get(f"{_BASE}/functions/devsecops/global-level")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio()
    async def test_curated_thematic_level(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/devsecops/thematic-level",
            params={"theme": "Culture & Collaboration", "score": 4.0},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["level_id"] == "cult_collab_high"
        assert body["is_generic"] is False
        assert body["tier"] is None

    @pytest.mark.asyncio()
    async def test_generic_thematic_level(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/cybersecurite/thematic-level",
            params={"theme": "Unlisted Theme", "score": 2.0},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["function_id"] == "cybersecurite"
        assert body["label"] == "Unlisted Theme - Intermediate"
        assert body["is_generic"] is True
        assert body["tier"] == "intermediate"

    @pytest.mark.asyncio()
    async def test_thematic_level_unknown_function_still_200(self, client: AsyncClient) -> None:
        response = await client.get(
            f"{_BASE}/functions/finance/thematic-level",
            params={"theme": "Budget", "score": 0.5},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["function_id"] is None
        assert body["label"] == "Budget - Low"


class TestAnalysisEndpoint:
    """Tests for POST /analyses."""

    @pytest.mark.asyncio()
    async def test_analysis_report(self, client: AsyncClient) -> None:
        response = await client.post(
            f"{_BASE}/analyses",
            json={
                "functions": [
                    {
                        "function": "DevSecOps",
                        "score": 3.6,
                        "themes": [
                            {"theme": "Culture & Collaboration", "score": 4.0},
                            {"theme": "Unlisted Theme", "score": 1.0},
                        ],
                    },
                    {"function": "Finance", "score": 1.2},
                ]
            },
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        devsecops, finance = body["functions"]
        assert devsecops["level_id"] == "devsecops_n4"
        assert devsecops["themes"][0]["level_id"] == "cult_collab_high"
        assert devsecops["themes"][1]["label"] == "Unlisted Theme - Low"
        assert finance["function_id"] is None
        assert finance["is_generic"] is True
        assert finance["improvement"] == {
            "points_possible": 3.8,
            "percentage": 76,
            "priority": "high",
        }
        assert [item["function_ref"] for item in body["strengths"]] == ["DevSecOps"]
        assert [item["function_ref"] for item in body["weaknesses"]] == ["Finance"]

    @pytest.mark.asyncio()
    async def test_empty_analysis_rejected(self, client: AsyncClient) -> None:
        response = await client.post(f"{_BASE}/analyses", json={"functions": []})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestGridEndpoints:
    """Tests for grid maintenance endpoints."""

    @pytest.mark.asyncio()
    async def test_sync(
        self,
        client: AsyncClient,
        mock_grid_repository: AsyncMock,
        catalog: MaturityCatalog,
    ) -> None:
        response = await client.post(f"{_BASE}/grid/sync")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"row_count": len(catalog_to_grid_rows(catalog))}
        mock_grid_repository.replace_all.assert_awaited_once()

    @pytest.mark.asyncio()
    async def test_drift(
        self,
        client: AsyncClient,
        mock_grid_repository: AsyncMock,
        catalog: MaturityCatalog,
    ) -> None:
        rows = catalog_to_grid_rows(catalog)
        mock_grid_repository.list_entries.return_value = rows[1:]

        response = await client.get(f"{_BASE}/grid/drift")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "in_sync": False,
            "missing": [rows[0].id_grille],
            "extra": [],
            "changed": [],
        }

    @pytest.mark.asyncio()
    async def test_grid_level(
        self,
        client: AsyncClient,
        mock_grid_repository: AsyncMock,
        catalog: MaturityCatalog,
    ) -> None:
        stored = next(
            row for row in catalog_to_grid_rows(catalog) if row.id_grille == "devsecops_n4"
        )
        mock_grid_repository.find_global_level.return_value = stored

        response = await client.get(
            f"{_BASE}/grid/level", params={"function": "devsecops", "score": 3.6}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["id_grille"] == "devsecops_n4"
        assert body["thematique"] is None
        assert body["niveau"] == "Niveau 4 - Géré"

    @pytest.mark.asyncio()
    async def test_grid_level_not_covered_is_404(
        self,
        client: AsyncClient,
        mock_grid_repository: AsyncMock,
    ) -> None:
        mock_grid_repository.find_thematic_level.return_value = None

        response = await client.get(
            f"{_BASE}/grid/level",
            params={"function": "devsecops", "theme": "Unlisted Theme", "score": 2.0},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
