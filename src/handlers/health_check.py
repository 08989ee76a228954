"""Lightweight health check handler."""

import os
import json
from datetime import datetime, timezone

from knowledge.store import default_store
from models.knowledge import Category


def lambda_handler(event, context):
    """Return a simple 200 response to verify the assistant is alive."""
    store = default_store()
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": os.environ.get("ENVIRONMENT", "dev"),
                "knowledge_entries": len(store),
                "categories": {
                    category.value: len(store.by_category(category)) for category in Category
                },
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
