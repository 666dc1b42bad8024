"""
Route tests for the Flask shell.

Tests cover:
- page render
- step / reset / play / tick round trips through the session
- refusal of ticks scheduled before a later action
- tree generation and theme toggle
"""

import pytest

from config import Settings
from main import app, configure_app


@pytest.fixture
def client():
    configure_app(Settings(secret_key="test-secret", step_delay_ms=100))
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def post(client, url, json=None):
    res = client.post(url, json=json or {})
    return res.status_code, res.get_json()


def test_index_renders(client):
    res = client.get("/")

    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Inorder Traversal" in body
    assert "No nodes visited yet" in body
    assert "leftmost node (4)" in body


def test_initial_state(client):
    data = client.get("/api/state").get_json()

    assert data["current_step"] == -1
    assert data["total_steps"] == 7
    assert data["state"] == "not_started"
    assert data["theme"] == "light"
    assert data["delay_ms"] == 100


def test_next_steps_through_sample(client):
    for _ in range(7):
        status, data = post(client, "/api/step/next")
        assert status == 200

    assert data["result"] == [4, 2, 5, 1, 6, 3, 7]
    assert data["is_complete"]
    assert data["state"] == "complete"


def test_next_at_end_is_not_an_error(client):
    for _ in range(7):
        post(client, "/api/step/next")
    status, data = post(client, "/api/step/next")

    assert status == 200
    assert data["current_step"] == 6
    assert data["result"] == [4, 2, 5, 1, 6, 3, 7]


def test_reset(client):
    post(client, "/api/step/next")
    post(client, "/api/step/next")
    _, data = post(client, "/api/step/reset")

    assert data["current_step"] == -1
    assert data["result"] == []
    assert data["visited"] == []
    assert data["total_steps"] == 7


def test_play_and_tick(client):
    _, data = post(client, "/api/step/play")
    assert data["is_playing"]

    for _ in range(7):
        _, data = post(client, "/api/step/tick", {"epoch": data["epoch"]})

    assert data["result"] == [4, 2, 5, 1, 6, 3, 7]
    assert not data["is_playing"]


def test_tick_without_play_does_nothing(client):
    epoch = client.get("/api/state").get_json()["epoch"]
    status, data = post(client, "/api/step/tick", {"epoch": epoch})

    assert status == 200
    assert data["current_step"] == -1


def test_pause_then_tick_does_nothing(client):
    _, data = post(client, "/api/step/play")
    playing_epoch = data["epoch"]
    _, data = post(client, "/api/step/play")

    status, _ = post(client, "/api/step/tick", {"epoch": playing_epoch})
    assert status == 409
    _, data = post(client, "/api/step/tick", {"epoch": data["epoch"]})
    assert data["current_step"] == -1


def test_tick_requires_epoch(client):
    post(client, "/api/step/play")
    status, data = post(client, "/api/step/tick")

    assert status == 400
    assert "error" in data


def test_tick_after_reset_is_refused(client):
    _, data = post(client, "/api/step/play")
    _, data = post(client, "/api/step/tick", {"epoch": data["epoch"]})
    scheduled = data["epoch"]
    post(client, "/api/step/reset")

    status, data = post(client, "/api/step/tick", {"epoch": scheduled})
    assert status == 409
    assert data["stale"] is True

    state = client.get("/api/state").get_json()
    assert state["current_step"] == -1
    assert not state["is_playing"]


def test_tick_with_outdated_session_cookie_is_refused(client):
    _, data = post(client, "/api/step/play")
    _, data = post(client, "/api/step/tick", {"epoch": data["epoch"]})
    scheduled = data["epoch"]
    with client.session_transaction() as sess:
        snapshot = dict(sess)

    post(client, "/api/step/reset")
    # the browser ends up holding the cookie from before the reset
    with client.session_transaction() as sess:
        sess.clear()
        sess.update(snapshot)

    res = client.post("/api/step/tick", json={"epoch": scheduled})
    assert res.status_code == 409
    assert "Set-Cookie" not in res.headers

    state = client.get("/api/state").get_json()
    assert state["current_step"] == 0


def test_state_reports_epoch(client):
    first = client.get("/api/state").get_json()["epoch"]
    _, data = post(client, "/api/step/next")
    assert data["epoch"] == first + 1

    _, data = post(client, "/api/theme/toggle")
    assert data["epoch"] == first + 1


def test_generate_random_tree(client):
    post(client, "/api/step/next")
    status, data = post(client, "/api/tree/generate", {"seed": 5})

    assert status == 200
    assert 1 <= data["total_steps"] <= 7
    assert data["current_step"] == -1
    assert data["result"] == []
    assert not data["is_playing"]


def test_generate_rejects_bad_seed(client):
    status, data = post(client, "/api/tree/generate", {"seed": "abc"})

    assert status == 400
    assert "error" in data


def test_sample_restores_fixed_tree(client):
    post(client, "/api/tree/generate", {"seed": 1})
    _, data = post(client, "/api/tree/sample")

    assert data["total_steps"] == 7


def test_theme_toggle(client):
    _, data = post(client, "/api/theme/toggle")
    assert data["theme"] == "dark"
    assert "☀" in data["theme_toggle"]

    _, data = post(client, "/api/theme/toggle")
    assert data["theme"] == "light"


def test_corrupt_session_falls_back_to_sample(client):
    with client.session_transaction() as sess:
        sess["visualizer"] = {"tree": {"value": "x"}}

    data = client.get("/api/state").get_json()
    assert data["total_steps"] == 7
