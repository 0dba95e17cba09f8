"""Tests for the Sell-or-Keep, tax and translation API endpoints."""

import json

import pytest


class TestDefaultsEndpoint:
    """Test cases for GET /api/sell-or-keep/defaults."""

    def test_returns_default_inputs(self, client):
        """Test that the shipped defaults are returned."""
        response = client.get("/api/sell-or-keep/defaults")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["current_market_value"] == 250000
        assert data["purchase_date"] == "2018-01-01"
        assert data["primary_goal"] == "networth"


class TestAnalysisEndpoint:
    """Test cases for POST /api/sell-or-keep/analysis."""

    def test_default_analysis(self, client):
        """Test that an empty body analyses the defaults."""
        response = client.post("/api/sell-or-keep/analysis")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["recommendation"]["best_for_goal"] == "B"
        assert data["recommendation"]["best_overall"] == "A"
        assert abs(data["scenario_b"]["final_net_worth"] - 225874.13) < 0.01
        assert len(data["yearly_projections"]) == 10
        assert len(data["stress_tests"]) == 3

    def test_partial_payload_overrides_defaults(self, client):
        """Test that only the given fields replace the defaults."""
        response = client.post(
            "/api/sell-or-keep/analysis",
            json={"investment_horizon": 30, "primary_goal": "cashflow"},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["inputs"]["investment_horizon"] == 30
        assert data["inputs"]["current_market_value"] == 250000
        assert len(data["yearly_projections"]) == 30

    @pytest.mark.parametrize(
        "payload",
        [
            {"investment_horizon": 15},
            {"mortage_rate": 3.0},
            {"primary_goal": "early_retirement"},
            {"current_market_value": "a lot"},
        ],
    )
    def test_invalid_input(self, client, payload):
        """Test that invalid fields are reported with a 400."""
        response = client.post("/api/sell-or-keep/analysis", json=payload)

        assert response.status_code == 400
        data = json.loads(response.data)
        assert data["error"] == "Invalid input"
        assert data["details"]

    def test_non_object_body(self, client):
        """Test that a JSON array is rejected."""
        response = client.post("/api/sell-or-keep/analysis", json=[1, 2, 3])

        assert response.status_code == 400
        assert "JSON object" in json.loads(response.data)["error"]


class TestReportEndpoints:
    """Test cases for report export and download."""

    def test_export_and_download(self, client):
        """Test that an exported report can be downloaded."""
        response = client.post("/api/sell-or-keep/reports?language=nl", json={})

        assert response.status_code == 201
        exported = json.loads(response.data)
        assert exported["language"] == "nl"
        assert exported["pdf_key"].startswith("reports/verkopen-of-behouden-analyse-")

        pdf = client.get(f"/api/reports/{exported['pdf_key']}")
        assert pdf.status_code == 200
        assert pdf.mimetype == "application/pdf"
        assert pdf.data.startswith(b"%PDF")

        csv = client.get(f"/api/reports/{exported['csv_key']}")
        assert csv.status_code == 200
        assert csv.mimetype == "text/csv"
        assert csv.data.decode("utf-8").startswith("year,")

    def test_default_language(self, client):
        """Test that the configured language is used when none is given."""
        response = client.post("/api/sell-or-keep/reports")

        assert response.status_code == 201
        assert json.loads(response.data)["language"] == "nl"

    def test_portuguese_report(self, client):
        """Test that a Portuguese report uses the Portuguese file name."""
        response = client.post("/api/sell-or-keep/reports?language=pt")

        assert response.status_code == 201
        assert "vender-ou-manter-analise" in json.loads(response.data)["pdf_key"]

    def test_unsupported_language(self, client):
        """Test that an unknown language is rejected."""
        response = client.post("/api/sell-or-keep/reports?language=en")

        assert response.status_code == 400

    def test_invalid_inputs(self, client):
        """Test that invalid analysis inputs are rejected before export."""
        response = client.post(
            "/api/sell-or-keep/reports", json={"investment_horizon": 20}
        )

        assert response.status_code == 400

    def test_missing_report(self, client):
        """Test that a missing report gives a 404."""
        response = client.get("/api/reports/reports/does-not-exist.pdf")

        assert response.status_code == 404


class TestValueSimulationEndpoint:
    """Test cases for POST /api/sell-or-keep/value-simulation."""

    def test_defaults(self, client):
        """Test that defaults come from the inputs and configuration."""
        response = client.post("/api/sell-or-keep/value-simulation")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["years"] == list(range(11))
        assert data["median"][0] == 250000
        assert data["num_paths"] == 1000

    def test_seeded_request_is_reproducible(self, client):
        """Test that the same seed returns the same bands."""
        payload = {"start_value": 300000, "years": 5, "num_paths": 200, "seed": 3}

        first = json.loads(
            client.post("/api/sell-or-keep/value-simulation", json=payload).data
        )
        second = json.loads(
            client.post("/api/sell-or-keep/value-simulation", json=payload).data
        )

        assert first == second
        assert len(first["p10"]) == 6
        assert first["p10"][-1] <= first["median"][-1] <= first["p90"][-1]

    def test_invalid_config(self, client):
        """Test that out-of-range settings are rejected."""
        response = client.post(
            "/api/sell-or-keep/value-simulation", json={"num_paths": 0}
        )

        assert response.status_code == 400


class TestTaxEndpoint:
    """Test cases for POST /api/taxes/portugal."""

    def test_tax_summary_with_estimated_vpt(self, client):
        """Test that VPT is estimated from the price when omitted."""
        response = client.post(
            "/api/taxes/portugal",
            json={
                "purchase_price": 200000,
                "irs": {"income_year": 2027, "monthly_rent": 1200},
            },
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["imt"]["amount"] == pytest.approx(13000)
        assert data["imi"]["annual_amount"] == pytest.approx(600)
        assert data["irs"]["annual_tax"] == pytest.approx(1440)
        assert data["annual_total"] == pytest.approx(2040)

    def test_explicit_options(self, client):
        """Test that property and municipality type are honoured."""
        response = client.post(
            "/api/taxes/portugal",
            json={
                "purchase_price": 100000,
                "vpt": 100000,
                "property_type": "residential",
                "municipality_type": "rural",
                "irs": {"income_year": 2025, "monthly_rent": 800, "contract_years": 3},
            },
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["imt"]["amount"] == 0.0
        assert data["imi"]["annual_amount"] == pytest.approx(300)
        assert data["irs"]["rate"] == 25.0

    def test_missing_irs_section(self, client):
        """Test that the IRS section is required."""
        response = client.post("/api/taxes/portugal", json={"purchase_price": 200000})

        assert response.status_code == 400


class TestTranslationsEndpoint:
    """Test cases for GET /api/translations/<language>."""

    @pytest.mark.parametrize(
        "language, title",
        [("nl", "Verkopen of Behouden?"), ("pt", "Vender ou Manter?")],
    )
    def test_label_tables(self, client, language, title):
        """Test that both label tables are served."""
        response = client.get(f"/api/translations/{language}")

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["title"] == title
        assert set(data["scenarios"]) == {"A", "B", "C"}

    def test_unsupported_language(self, client):
        """Test that an unknown language gives a 404."""
        response = client.get("/api/translations/en")

        assert response.status_code == 404


class TestInvestmentEndpoint:
    """Test cases for POST /api/investment/analysis."""

    def test_financed_purchase(self, client):
        """Test that the metrics and risk verdict are returned."""
        response = client.post(
            "/api/investment/analysis",
            json={
                "purchase_price": 200000,
                "imt": 13000,
                "notary_fees": 2000,
                "furnishing_costs": 5000,
                "ltv": 75,
                "interest_rate": 4.0,
                "monthly_rent_longterm": 1200,
                "maintenance_yearly": 1000,
                "imi_yearly": 400,
                "insurance_yearly": 300,
                "condo_monthly": 50,
            },
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["dscr"] == pytest.approx(1.41)
        assert data["irr"] == pytest.approx(6.27)
        assert data["risk"]["level"] == "risky"
        assert len(data["yearly_cashflows"]) == 10

    def test_cash_purchase_dscr_is_null(self, client):
        """Test that infinite coverage serialises as null."""
        response = client.post(
            "/api/investment/analysis",
            json={"purchase_price": 200000, "monthly_rent_longterm": 1000},
        )

        assert response.status_code == 200
        assert json.loads(response.data)["dscr"] is None

    def test_missing_purchase_price(self, client):
        """Test that the purchase price is required."""
        response = client.post("/api/investment/analysis", json={"ltv": 75})

        assert response.status_code == 400


class TestMortgageScheduleEndpoint:
    """Test cases for POST /api/mortgage/schedule."""

    def test_annuity_schedule(self, client):
        """Test that a full monthly schedule is returned."""
        response = client.post(
            "/api/mortgage/schedule",
            json={"principal": 150000, "annual_rate": 4.0, "term_years": 25},
        )

        assert response.status_code == 200
        data = json.loads(response.data)
        assert data["monthly_payment"] == pytest.approx(791.76)
        assert len(data["payments"]) == 300
        assert data["payments"][-1]["ending_balance"] == 0.0

    def test_invalid_term(self, client):
        """Test that a zero term is rejected."""
        response = client.post(
            "/api/mortgage/schedule",
            json={"principal": 150000, "annual_rate": 4.0, "term_years": 0},
        )

        assert response.status_code == 400
