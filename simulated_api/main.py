from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from dotenv import load_dotenv
import logging
import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from analytics.snapshot import compute_snapshot

# CONFIG
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="OTT Analytics API")


def _is_authorized(request):
    """Cron calls must carry the shared secret when one is configured."""
    secret = os.getenv("CRON_SECRET")
    if not secret:
        return True
    return request.headers.get("authorization") == f"Bearer {secret}"


@app.get("/api/analytics")
def get_analytics():
    return compute_snapshot()


@app.get("/api/cron")
def refresh_analytics(request: Request):
    if not _is_authorized(request):
        logger.warning("[CRON] Rejected refresh request: bad or missing credentials")
        return JSONResponse(status_code=401, content={"success": False, "error": "Unauthorized"})

    try:
        data = compute_snapshot()
        timestamp = datetime.now(timezone.utc).isoformat()

        logger.info(f"[CRON] Analytics data refreshed at {timestamp}")
        logger.info(f"[CRON] Display date: {data['displayDate']}")
        logger.info(f"[CRON] Grand total: {data['grandTotal']['total']:,}")

        return {
            "success": True,
            "message": "Analytics data refreshed",
            "timestamp": timestamp,
            "displayDate": data["displayDate"],
            "grandTotal": data["grandTotal"]["total"],
        }
    except Exception as e:
        logger.error(f"[CRON] Error refreshing data: {e}")
        return JSONResponse(status_code=500, content={"success": False, "error": "Failed to refresh data"})
