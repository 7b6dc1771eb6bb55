from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from questionnaire.main import create_app
from questionnaire.services.store import SubmissionStore


# --- GET /questions ---

def test_questions_listed_in_order(client):
    resp = client.get("/questions")
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": "name", "text": "Как вас зовут?", "type": "text", "required": True},
        {"id": "age", "text": "Ваш возраст", "type": "number", "required": False},
    ]


def test_default_catalog_served(settings):
    app = create_app(settings=settings)
    with TestClient(app) as c:
        questions = c.get("/questions").json()
    assert [q["id"] for q in questions] == ["name", "email", "age", "gender", "feedback"]
    gender = questions[3]
    assert gender["options"] == ["Мужской", "Женский", "Не указывать"]
    assert "placeholder" not in gender
    assert questions[0]["placeholder"] == "Введите ваше имя"


def test_cors_header_on_json_responses(client):
    for path in ("/questions", "/submissions"):
        resp = client.get(path)
        assert resp.headers["access-control-allow-origin"] == "*"

    resp = client.post("/answers", json=[{"questionId": "name", "value": "Ann"}])
    assert resp.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    resp = client.options("/answers", headers={
        "Origin": "http://example.com",
        "Access-Control-Request-Method": "POST",
    })
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"


# --- POST /answers ---

def test_scenario_missing_then_success(client):
    resp = client.post("/answers", json=[{"questionId": "age", "value": 5}])
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Обязательный вопрос не заполнен: Как вас зовут?"

    resp = client.post("/answers", json=[{"questionId": "name", "value": "Ann"}])
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Ответы сохранены"
    assert body["totalSubmissions"] == 1
    assert isinstance(body["submissionId"], str) and body["submissionId"]

    subs = client.get("/submissions").json()
    assert len(subs) == 1
    assert subs[0]["id"] == body["submissionId"]
    assert subs[0]["answers"] == [{"questionId": "name", "value": "Ann"}]
    assert datetime.fromisoformat(subs[0]["timestamp"].replace("Z", "+00:00")).tzinfo is not None


def test_total_submissions_counts_up(client):
    totals = [
        client.post("/answers", json=[{"questionId": "name", "value": "Ann"}]).json()["totalSubmissions"]
        for _ in range(3)
    ]
    assert totals == [1, 2, 3]


def test_identical_posts_create_two_records(client):
    batch = [{"questionId": "name", "value": "Ann"}, {"questionId": "age", "value": 30}]
    first = client.post("/answers", json=batch).json()
    second = client.post("/answers", json=batch).json()
    assert first["submissionId"] != second["submissionId"]

    subs = client.get("/submissions").json()
    assert [s["answers"] for s in subs] == [batch, batch]


def test_null_values_kept_in_snapshot(client):
    batch = [{"questionId": "name", "value": "Ann"}, {"questionId": "age", "value": None}]
    client.post("/answers", json=batch)
    assert client.get("/submissions").json()[0]["answers"] == batch


def test_empty_string_is_not_an_answer(client, store):
    resp = client.post("/answers", json=[{"questionId": "name", "value": ""}])
    assert resp.status_code == 400
    assert "Как вас зовут?" in resp.text
    assert len(store) == 0


def test_malformed_json(client, store):
    resp = client.post("/answers", content=b"[{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert "JSON" in resp.text
    assert len(store) == 0


@pytest.mark.parametrize("content_type", [
    "text/plain",
    "application/x-www-form-urlencoded",
    None,
])
def test_body_decoded_whatever_the_content_type(client, store, content_type):
    headers = {"Content-Type": content_type} if content_type else {}
    resp = client.post("/answers", content=b'[{"questionId": "name", "value": "Ann"}]', headers=headers)
    assert resp.status_code == 200
    assert resp.json()["totalSubmissions"] == 1
    assert len(store) == 1


def test_null_body_is_an_empty_batch(client, store):
    resp = client.post("/answers", content=b"null", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.text == "Обязательный вопрос не заполнен: Как вас зовут?"
    assert len(store) == 0


def test_empty_body(client, store):
    resp = client.post("/answers")
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert len(store) == 0


def test_body_not_a_list(client, store):
    resp = client.post("/answers", json={"questionId": "name", "value": "Ann"})
    assert resp.status_code == 400
    assert resp.headers["content-type"].startswith("text/plain")
    assert len(store) == 0


def test_non_scalar_value_is_a_decode_error(client, store):
    resp = client.post("/answers", json=[{"questionId": "name", "value": {"first": "Ann"}}])
    assert resp.status_code == 400
    assert "Обязательный" not in resp.text
    assert len(store) == 0


# --- GET /submissions ---

def test_submissions_empty(client):
    resp = client.get("/submissions")
    assert resp.status_code == 200
    assert resp.json() == []


def test_submissions_in_append_order(client):
    for name in ("a", "b", "c"):
        client.post("/answers", json=[{"questionId": "name", "value": name}])
    subs = client.get("/submissions").json()
    assert [s["answers"][0]["value"] for s in subs] == ["a", "b", "c"]


# --- errors and extras ---

class _BrokenStore(SubmissionStore):
    def snapshot(self):
        raise RuntimeError("store unavailable")


def test_unexpected_error_is_plain_text_500(settings, catalog):
    app = create_app(settings=settings, catalog=catalog, store=_BrokenStore())
    with TestClient(app, raise_server_exceptions=False) as c:
        resp = c.get("/submissions")
    assert resp.status_code == 500
    assert resp.text == "store unavailable"
    assert resp.headers["access-control-allow-origin"] == "*"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_home_page_disabled_without_templates(client):
    assert client.get("/").status_code == 404


def test_home_page_and_static(tmp_path, catalog):
    from questionnaire.config import Settings

    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "index.html").write_text("<title>{{ title }}</title>", encoding="utf-8")
    static = tmp_path / "static"
    static.mkdir()
    (static / "app.js").write_text("console.log('ok');", encoding="utf-8")

    settings = Settings(templates_dir=str(templates), static_dir=str(static))
    with TestClient(create_app(settings=settings, catalog=catalog)) as c:
        page = c.get("/")
        assert page.status_code == 200
        assert "<title>Анкета</title>" in page.text
        assert c.get("/static/app.js").text == "console.log('ok');"
