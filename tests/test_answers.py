"""Tests for POST /submit-test."""

from pymongo.errors import PyMongoError

from database import ANSWERS

SUBMISSION = {
    "username": "asha",
    "UID": "21BCS1001",
    "course": "B.Tech",
    "department": "CSE",
    "year": 2,
    "answers": [
        {"questionTitle": "Q1", "answer": "b", "timeTaken": 12},
        {"questionTitle": "Q2", "answer": "a", "timeTaken": 30.5},
        {"questionTitle": "Q3", "answer": "d"},
    ],
}


def test_one_document_per_answer_with_identity(client, db):
    response = client.post("/submit-test", json=SUBMISSION)

    assert response.status_code == 201
    assert response.text == "Test submitted successfully!"
    stored = db[ANSWERS].docs
    assert len(stored) == 3
    assert [d["questionTitle"] for d in stored] == ["Q1", "Q2", "Q3"]
    for doc in stored:
        assert doc["username"] == "asha"
        assert doc["UID"] == "21BCS1001"
        assert doc["course"] == "B.Tech"
        assert doc["department"] == "CSE"
        assert doc["year"] == 2
        assert doc["timestamp"] is not None
    assert stored[1]["timeTaken"] == 30.5
    assert "timeTaken" not in stored[2]


def test_legacy_identity_field_names(client, db):
    body = {k: v for k, v in SUBMISSION.items() if k not in ("department", "year")}
    body.update({"Department": "MECH", "Year": 4})

    client.post("/submit-test", json=body)

    assert {d["department"] for d in db[ANSWERS].docs} == {"MECH"}
    assert {d["year"] for d in db[ANSWERS].docs} == {4}


def test_empty_answers_creates_nothing(client, db):
    response = client.post("/submit-test", json={**SUBMISSION, "answers": []})

    assert response.status_code == 201
    assert db[ANSWERS].docs == []


def test_missing_identity_is_400(client, db):
    body = {k: v for k, v in SUBMISSION.items() if k != "UID"}
    response = client.post("/submit-test", json=body)

    assert response.status_code == 400
    assert db[ANSWERS].docs == []


def test_insert_failure_is_400(client, db):
    db[ANSWERS].error = PyMongoError("bulk write error")
    response = client.post("/submit-test", json=SUBMISSION)

    assert response.status_code == 400
    assert response.text == "Error submitting test: bulk write error"


def test_time_taken_keeps_submitted_number_type(client, db):
    client.post("/submit-test", json=SUBMISSION)

    stored = db[ANSWERS].docs
    assert type(stored[0]["timeTaken"]) is int
    assert type(stored[1]["timeTaken"]) is float
