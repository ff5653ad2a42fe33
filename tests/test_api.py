from fastapi.testclient import TestClient

from brailleease.config import HistoryConfig, Settings
from brailleease.main import create_app


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["alphabet_size"] == 28
    assert body["history_entries"] == 0


def test_alphabet(client):
    body = client.get("/api/alphabet").json()
    assert body["size"] == 28
    assert {"letter": "ñ", "cell": "⠻"} in body["entries"]


def test_keypad_follows_session_direction(client):
    body = client.get("/api/alphabet/keypad").json()
    assert body["direction"] == "spanish_to_braille"
    assert "ñ" in body["keys"]

    client.post("/api/session/toggle")
    body = client.get("/api/alphabet/keypad").json()
    assert body["direction"] == "braille_to_spanish"
    assert "⠀" in body["keys"]

    body = client.get("/api/alphabet/keypad", params={"direction": "spanish_to_braille"}).json()
    assert body["keys"][0] == "a"


def test_translate_and_history(client):
    response = client.post("/api/translate", json={"text": "casa"})
    assert response.status_code == 200
    body = response.json()
    assert body["output_text"] == "⠉⠁⠎⠁"
    assert body["record"]["input_text"] == "casa"

    response = client.post("/api/translate", json={"text": "⠉⠁⠎⠁", "direction": "braille_to_spanish"})
    assert response.json()["output_text"] == "casa"

    history = client.get("/api/history").json()
    assert history["max_entries"] == 10
    assert [entry["input_text"] for entry in history["entries"]] == ["⠉⠁⠎⠁", "casa"]
    assert history["entries"][0]["direction"] == "braille_to_spanish"


def test_translate_without_recording(client):
    body = client.post("/api/translate", json={"text": "hi!", "record": False}).json()
    assert body["output_text"] == "⠓⠊!"
    assert body["record"] is None
    assert client.get("/api/history").json()["entries"] == []


def test_translate_rejects_empty_text(client):
    assert client.post("/api/translate", json={"text": ""}).status_code == 422


def test_clear_history(client):
    client.post("/api/translate", json={"text": "casa"})
    response = client.delete("/api/history")
    assert response.status_code == 200
    assert response.json()["entries"] == []
    assert client.get("/api/history").json()["entries"] == []


def test_history_survives_restart(settings):
    with TestClient(create_app(settings)) as client:
        client.post("/api/translate", json={"text": "sol"})

    with TestClient(create_app(settings)) as client:
        entries = client.get("/api/history").json()["entries"]
        assert [entry["output_text"] for entry in entries] == ["⠎⠕⠇"]
        assert client.get("/").json()["history_entries"] == 1


def test_session_keypad_flow(client):
    for key in "hola":
        assert client.post("/api/session/keys", json={"key": key}).status_code == 200
    state = client.post("/api/session/backspace").json()
    assert state["input_text"] == "hol"

    record = client.post("/api/session/translate").json()
    assert record["output_text"] == "⠓⠕⠇"

    state = client.get("/api/session").json()
    assert state == {
        "direction": "spanish_to_braille",
        "input_text": "hol",
        "output_text": "⠓⠕⠇",
        "has_image": False,
    }


def test_session_rejects_unknown_key(client):
    response = client.post("/api/session/keys", json={"key": "7"})
    assert response.status_code == 400
    assert client.post("/api/session/keys", json={"key": "ab"}).status_code == 422


def test_session_toggle_clears_text(client):
    client.put("/api/session/input", json={"text": "casa"})
    client.post("/api/session/translate")

    response = client.post("/api/session/toggle")
    assert response.json() == {
        "new_direction": "braille_to_spanish",
        "cleared_input": "",
        "cleared_output": "",
    }
    state = client.get("/api/session").json()
    assert state["input_text"] == ""
    assert state["output_text"] == ""
    assert len(client.get("/api/history").json()["entries"]) == 1


def test_session_image_and_print(client):
    client.put("/api/session/input", json={"text": "Hola <b>"})
    client.post("/api/session/translate")

    response = client.post("/api/session/image", files={"image": ("foto.png", b"\x89PNG", "image/png")})
    assert response.status_code == 200
    assert response.json()["has_image"] is True

    response = client.get("/api/session/print")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Hola &lt;b&gt;" in response.text
    assert "data:image/png;base64,iVBORw==" in response.text

    assert client.delete("/api/session/image").json()["has_image"] is False
    assert "<img" not in client.get("/api/session/print").text


def test_session_image_rejects_other_files(client):
    response = client.post("/api/session/image", files={"image": ("notes.txt", b"hola", "text/plain")})
    assert response.status_code == 400


def test_session_image_too_large(client):
    response = client.post("/api/session/image", files={"image": ("big.jpg", b"x" * 2048, "image/jpeg")})
    assert response.status_code == 413


def test_history_write_failure_is_500(tmp_path):
    (tmp_path / "store").mkdir()
    settings = Settings(history=HistoryConfig(storage_path=str(tmp_path / "store")))
    with TestClient(create_app(settings)) as client:
        response = client.post("/api/translate", json={"text": "casa"})
        assert response.status_code == 500
        assert client.get("/api/history").json()["entries"] == []
