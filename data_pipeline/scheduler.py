"""
Refresh scheduler: triggers the analytics refresh once a day.

Usage:
    python data_pipeline/scheduler.py

The scheduler keeps running in the foreground. Press Ctrl+C to stop.
For production, run it as a background service or inside Docker.
"""
import schedule
import time
import logging
import os
import sys
from dotenv import load_dotenv
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from data_pipeline.refresh import trigger_refresh

load_dotenv()
REFRESH_AT = os.getenv("REFRESH_AT", "00:00")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def run_refresh_job():
    logger.info("Starting scheduled analytics refresh...")
    try:
        trigger_refresh()
        logger.info("Refresh completed successfully.")
        return True
    except Exception as e:
        logger.error(f"Refresh failed: {e}")
        return False


def main():
    # Run once immediately on startup
    run_refresh_job()

    schedule.every().day.at(REFRESH_AT).do(run_refresh_job)
    logger.info(f"Scheduler running, refresh will execute daily at {REFRESH_AT}. Press Ctrl+C to stop.")

    while True:
        schedule.run_pending()
        time.sleep(60)


if __name__ == "__main__":
    main()
