import json

from handlers import main


def test_main_routes_health(monkeypatch):
    monkeypatch.setattr(main.health_check, "lambda_handler", lambda e, c: {"status": "ok"})
    event = {"requestContext": {"http": {"method": "GET", "path": "/health"}}}
    resp = main.lambda_handler(event, None)
    assert resp["status"] == "ok"


def test_main_routes_chat(monkeypatch):
    marker = {}

    def fake_handler(event, context):
        marker["called"] = True
        return {"statusCode": 200}

    monkeypatch.setattr(main.chat, "lambda_handler", fake_handler)
    event = {"requestContext": {"http": {"method": "POST", "path": "/chat"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 200
    assert marker["called"] is True


def test_main_routes_greeting(monkeypatch):
    monkeypatch.setattr(main.chat, "greeting_handler", lambda e, c: {"hello": True})
    event = {"requestContext": {"http": {"method": "GET", "path": "/greeting"}}}
    resp = main.lambda_handler(event, None)
    assert resp["hello"] is True


def test_main_unknown_route():
    event = {"requestContext": {"http": {"method": "GET", "path": "/unknown"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 404
    body = json.loads(resp["body"])
    assert body["message"] == "Route not found"


def test_main_chat_requires_post():
    event = {"requestContext": {"http": {"method": "GET", "path": "/chat"}}}
    resp = main.lambda_handler(event, None)
    assert resp["statusCode"] == 404
