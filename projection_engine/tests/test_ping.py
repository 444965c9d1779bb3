from flask.testing import FlaskClient


def test_ping_reports_service(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong", "service": "projection-engine"}


def test_ping_allows_configured_origin(client: FlaskClient):
    response = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert response.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"
