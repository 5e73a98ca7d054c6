from flask.testing import FlaskClient


def test_ping_lists_available_modes(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"status": "ok", "modes": ["basic", "step_up", "goal"]}
