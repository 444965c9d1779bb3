from __future__ import annotations

from flask.testing import FlaskClient


def test_calculators_endpoint_lists_catalog(client: FlaskClient):
    resp = client.get("/api/calculators")

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body) == 9
    assert {"id", "name", "category", "description", "keywords", "path"} <= set(body[0])


def test_calculator_detail_includes_field_constraints(client: FlaskClient):
    resp = client.get("/api/calculators/retirement-corpus")

    assert resp.status_code == 200
    fields = resp.get_json()["fields"]
    assert any(f["kind"] == "cross-field" and f["name"] == "retirementAge" for f in fields)


def test_unknown_calculator_returns_404(client: FlaskClient):
    assert client.get("/api/calculators/nope").status_code == 404
    assert client.post("/api/calc/nope", json={}).status_code == 404


def test_currencies_endpoint(client: FlaskClient):
    resp = client.get("/api/currencies")

    assert resp.status_code == 200
    codes = [c["code"] for c in resp.get_json()]
    assert codes[0] == "USD"
    assert "EUR" in codes and "CNY" in codes


def test_compound_interest_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/compound-interest",
        json={"principal": "10000", "rate": "7", "time": "10", "compoundingFrequency": "12"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["calculator"] == "compound-interest"
    assert abs(body["values"]["futureValue"] - 20096.61) <= 0.01
    assert body["chart"]["kind"] == "line"
    assert body["chart"]["categories"] == list(range(1, 11))


def test_roi_endpoint_with_currency(client: FlaskClient):
    resp = client.post(
        "/api/calc/bitcoin-roi?currency=EUR",
        json={"initialInvestment": 1000, "currentValue": 1500},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["values"]["profitLoss"] == 500.0
    assert body["values"]["roiPercentage"] == 50.0
    assert body["display"]["profitLoss"] == "€500.00"
    assert body["display"]["roiPercentage"] == "50.00%"


def test_invalid_payload_returns_422_with_field_errors(client: FlaskClient):
    resp = client.post(
        "/api/calc/retirement-corpus",
        json={
            "currentAge": 45,
            "retirementAge": 40,
            "monthlyExpensesAtRetirement": 4000,
            "lifeExpectancyPostRetirement": 20,
            "expectedInflationRate": 5,
            "expectedReturnRatePostRetirement": 8,
        },
    )

    assert resp.status_code == 422
    assert resp.get_json() == {
        "detail": [
            {"field": "retirementAge", "message": "Retirement age must be greater than current age."}
        ]
    }


def test_malformed_body_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/crypto-tax", data="not json", content_type="application/json")

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["field"] == "__root__"


def test_unknown_currency_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/crypto-tax?currency=ZZZ", json={"totalGains": 10, "taxRate": 5})

    assert resp.status_code == 400


def test_content_endpoint_falls_back_without_service(client: FlaskClient):
    resp = client.post(
        "/api/content",
        json={"topic": "SIP vs Lumpsum Calculator", "keywords": "sip, lumpsum"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["title"] == "SIP vs Lumpsum Calculator"
    assert body["generated"] is False
    assert "sip, lumpsum" in body["body"]


def test_content_endpoint_requires_topic(client: FlaskClient):
    assert client.post("/api/content", json={}).status_code == 400


def test_unknown_calculator_wins_over_unknown_currency(client: FlaskClient):
    resp = client.post("/api/calc/nope?currency=ZZZ", json={})

    assert resp.status_code == 404
