"""
Integration tests for API endpoints.
"""

import pytest

from labelsense.api.dependencies import Settings, get_settings

pytestmark = pytest.mark.asyncio


class TestHealthEndpoints:
    """Tests for system endpoints."""

    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"

    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "LabelSense"

    async def test_request_id_header(self, client):
        response = await client.get("/", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestLabelScanEndpoints:
    """Tests for ingredient-label scanning."""

    async def test_scan_label(self, client, bilingual_label_fragments, fragment_payload):
        response = await client.post(
            "/api/v1/scan/label",
            json={
                "fragments": fragment_payload(bilingual_label_fragments),
                "barcode": "8934563138165",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["barcode"] == "8934563138165"
        assert data["detected_language"] == "vi"
        assert data["classification"]["category"] == "Vegan"
        assert data["classification"]["primary_reason"].startswith("Found vegan-safe")
        assert data["calories"] == "536 kcal"
        assert data["sections"]["allergens"] == "• may contain traces of milk"
        assert data["sections"]["other"] == {"nutrition": "Energy: 536 kcal"}

    async def test_scan_label_non_vegetarian_evidence(self, client):
        response = await client.post(
            "/api/v1/scan/label",
            json={
                "fragments": [
                    {"text": "Ingredients: noodles, chicken extract", "confidence": 0.9,
                     "center_x": 0.5, "center_y": 0.2},
                ],
            },
        )

        assert response.status_code == 200
        classification = response.json()["classification"]
        assert classification["category"] == "Non-Vegetarian"
        assert classification["evidence"][0]["keyword"] == "chicken"
        assert classification["evidence_lines"].startswith("Found in:")

    async def test_scan_label_no_text(self, client):
        response = await client.post("/api/v1/scan/label", json={"fragments": []})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "NO_TEXT"
        assert data["error"] == "No text found"
        assert "timestamp" in data

    async def test_scan_label_invalid_confidence(self, client):
        response = await client.post(
            "/api/v1/scan/label",
            json={"fragments": [{"text": "milk", "confidence": 1.5, "center_x": 0.5, "center_y": 0.5}]},
        )

        assert response.status_code == 422

    async def test_settings_override_threshold(self, app, client):
        app.dependency_overrides[get_settings] = lambda: Settings(
            environment="test", label_confidence_threshold=0.95
        )

        response = await client.post(
            "/api/v1/scan/label",
            json={"fragments": [{"text": "milk, sugar", "confidence": 0.9,
                                 "center_x": 0.5, "center_y": 0.5}]},
        )

        assert response.status_code == 422

    async def test_scan_barcode(self, client):
        response = await client.post("/api/v1/scan/barcode", json={"barcode": "8934563138165"})

        assert response.status_code == 200
        data = response.json()
        assert data["classification"]["category"] == "Possibly Non-Vegetarian"
        assert data["calories"] == "Calories not listed"

    async def test_scan_barcode_requires_value(self, client):
        response = await client.post("/api/v1/scan/barcode", json={"barcode": ""})

        assert response.status_code == 422


class TestFrontScanEndpoints:
    """Tests for front-of-pack scanning."""

    async def test_scan_front(self, client, front_fragments, fragment_payload):
        response = await client.post(
            "/api/v1/scan/front",
            json={"fragments": fragment_payload(front_fragments)},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["product_name"] == "Lay's Classic Salted"
        assert data["weight"] == {"value": 52, "unit": "g", "grams": 52, "text": "52g"}
        assert data["search_query"] == "Lay's Classic Salted 52g"

    async def test_scan_front_no_text(self, client):
        response = await client.post("/api/v1/scan/front", json={"fragments": []})

        assert response.status_code == 422
        assert response.json()["code"] == "NO_TEXT"


class TestPriceEndpoints:
    """Tests for price conversion."""

    async def test_convert_dong(self, client):
        response = await client.post(
            "/api/v1/price/convert",
            json={"price": "₫50000", "weight_grams": 500},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["local"] == "₫50000"
        assert data["converted"] == "₹165.00"
        assert data["per_kg"] == "₫100000/kg (₹330.00/kg)"
        assert data["currency"] == "VND"

    async def test_convert_unparseable(self, client):
        response = await client.post("/api/v1/price/convert", json={"price": "call us"})

        assert response.status_code == 200
        assert response.json()["converted"] == "Unable to convert"
