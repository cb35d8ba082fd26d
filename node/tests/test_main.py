from __future__ import annotations

from fastapi.testclient import TestClient

from voteledger.main import create_app


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["ok"] is True


def test_each_app_owns_its_service():
    a = TestClient(create_app())
    b = TestClient(create_app())
    assert a.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate1"}).status_code == 200
    assert b.get("/results").json()["total_votes"] == 0


def test_add_candidate(client):
    r = client.post("/candidates", json={"name": "Candidate4"})
    assert r.status_code == 201
    assert r.json()["outcome"] == "added"

    r = client.post("/candidates", json={"name": "Candidate4"})
    assert r.status_code == 200
    assert r.json()["ok"] is False
    assert r.json()["outcome"] == "already_exists"

    assert client.get("/candidates").json()["candidates"]["Candidate4"] == 0


def test_vote_outcomes_map_to_status_codes(client):
    r = client.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate1"})
    assert r.status_code == 200
    assert r.json()["outcome"] == "accepted"

    r = client.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate2"})
    assert r.status_code == 409
    assert r.json()["detail"]["outcome"] == "duplicate_vote"

    r = client.post("/vote", json={"voter_id": "ab", "candidate": "Candidate1"})
    assert r.status_code == 422
    assert r.json()["detail"]["outcome"] == "invalid_voter_id"

    r = client.post("/vote", json={"voter_id": "voter002", "candidate": "Candidate9"})
    assert r.status_code == 404
    assert r.json()["detail"]["outcome"] == "unknown_candidate"

    j = client.get("/results").json()
    assert j["total_votes"] == 1
    assert j["leading"]["name"] == "Candidate1"
    assert j["no_votes_cast"] is False


def test_malformed_vote_body(client):
    r = client.post("/vote", json={"voter_id": "voter001"})
    assert r.status_code == 422
    assert isinstance(r.json()["detail"], list)


def test_fraud_log_endpoint(client):
    client.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate1"})
    client.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate3"})

    entries = client.get("/fraud-log").json()["entries"]
    assert entries == [
        {
            "voter_id": "voter001",
            "timestamp": "2024-03-05 14:07:09",
            "details": "Attempted duplicate vote for Candidate3",
        }
    ]


def test_results_before_any_vote(client):
    j = client.get("/results").json()
    assert j["total_votes"] == 0
    assert j["no_votes_cast"] is True
    assert j["leading"] is None


def test_reset(client, service):
    client.post("/candidates", json={"name": "Candidate4"})
    client.post("/vote", json={"voter_id": "voter001", "candidate": "Candidate4"})

    r = client.post("/reset")
    assert r.status_code == 200
    assert r.json()["candidates"] == ["Candidate1", "Candidate2", "Candidate3"]
    assert service.counts() == {"Candidate1": 0, "Candidate2": 0, "Candidate3": 0}
