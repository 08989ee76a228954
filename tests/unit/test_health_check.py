import json

from handlers import health_check


def test_health_check_returns_ok():
    resp = health_check.lambda_handler({}, None)
    assert resp["statusCode"] == 200
    body = json.loads(resp["body"])
    assert body["status"] == "ok"
    assert body["knowledge_entries"] == 6
    assert "timestamp" in body


def test_health_check_counts_entries_per_category():
    body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["categories"] == {
        "requirements": 2,
        "deadlines": 1,
        "fees": 1,
        "programs": 1,
        "campus": 1,
        "support": 0,
    }
