from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_root():
    r = client.get("/")
    assert r.status_code == 200
    assert r.json().get("ok") is True


def test_easy_question_shape():
    r = client.get("/integrals/question", params={"difficulty": "easy", "seed": 3})
    assert r.status_code == 200
    body = r.json()
    assert body["difficulty"] == "easy"
    assert body["difficulty_name"] == "Easy"
    assert len(body["options"]) == 4 and len(set(body["options"])) == 4
    assert 0 <= body["correct_index"] <= 3
    assert body["prompt"].startswith("∫ (")
    assert body["latex"].startswith(r"\int ") and body["latex"].endswith("dx")


def test_medium_question_has_bounds_in_latex():
    r = client.get("/integrals/question", params={"difficulty": "medium", "seed": 5})
    assert r.status_code == 200
    body = r.json()
    assert body["latex"].startswith(r"\int_{")
    float(body["options"][body["correct_index"]])


def test_seed_is_reproducible():
    a = client.get("/integrals/question", params={"difficulty": "hard", "seed": 17}).json()
    b = client.get("/integrals/question", params={"difficulty": "hard", "seed": 17}).json()
    assert a == b


def test_default_difficulty_is_easy():
    r = client.get("/integrals/question")
    assert r.status_code == 200
    assert r.json()["difficulty"] == "easy"


def test_unknown_difficulty():
    r = client.get("/integrals/question", params={"difficulty": "nightmare"})
    assert r.status_code == 422
