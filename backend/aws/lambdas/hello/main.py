import json
import logging
from datetime import datetime, timezone

# Set up logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)


def handler(event, context):
    """
    Log the incoming event and reply with a fixed greeting.

    The event is never inspected, only dumped to the log. The reply body
    carries the greeting plus the UTC time the response was built, e.g.
    `{"message":"Hello from Lambda!","timestamp":"2026-10-18T12:00:00.000Z"}`.
    """
    logger.info("Event: %s", json.dumps(event, indent=2, ensure_ascii=False))

    response = {
        "message": "Hello from Lambda!",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }

    return {
        "statusCode": 200,
        "body": json.dumps(response, separators=(",", ":")),
    }
