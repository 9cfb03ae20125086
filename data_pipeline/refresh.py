"""
Refresh trigger: asks the API to recompute the analytics snapshot.

Usage:
    python data_pipeline/refresh.py
"""
import requests
import logging
from dotenv import load_dotenv
import os

# CONFIG
load_dotenv()
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
REQUEST_TIMEOUT = 30

logger = logging.getLogger(__name__)


def _auth_headers():
    secret = os.getenv("CRON_SECRET")
    return {"Authorization": f"Bearer {secret}"} if secret else {}


def trigger_refresh():
    """Call /api/cron and return its JSON body. HTTP errors propagate."""
    response = requests.get(
        f"{API_BASE_URL}/api/cron",
        headers=_auth_headers(),
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    body = response.json()

    logger.info(f"Display date: {body['displayDate']}")
    logger.info(f"Grand total: {body['grandTotal']:,}")
    return body


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    trigger_refresh()
