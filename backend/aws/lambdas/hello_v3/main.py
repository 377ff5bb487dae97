import json
import logging
from datetime import datetime, timezone

# Set up logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

VERSION = 3


def handler(event, context):
    """Same reply as the `hello` Lambda; also logs the build version."""
    logger.info("Event: %s", json.dumps(event, indent=2, ensure_ascii=False))
    logger.info("version: %s", VERSION)

    response = {
        "message": "Hello from Lambda!",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }

    return {
        "statusCode": 200,
        "body": json.dumps(response, separators=(",", ":")),
    }
