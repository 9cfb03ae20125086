import pandas as pd
from datetime import timedelta

from analytics.snapshot import build_snapshot


# ---------------------------------------------------------------------------
# Snapshot series
# ---------------------------------------------------------------------------

def build_history(end_date, days=30):
    """
    One row per (date, platform) for the `days` report dates ending at
    `end_date`, oldest first. Columns: date, platform, dailyUnits, totalUnits.
    """
    if days < 1:
        raise ValueError(f"days must be at least 1, got {days}")

    records = []
    for offset in range(days - 1, -1, -1):
        snapshot = build_snapshot(end_date - timedelta(days=offset))
        for p in snapshot["platforms"]:
            records.append({"date": pd.Timestamp(snapshot["date"]), **p})

    return pd.DataFrame(records, columns=["date", "platform", "dailyUnits", "totalUnits"])


def daily_deltas(history):
    """
    Adds an `increment` column: day-over-day change in totalUnits per
    platform. The first day of each platform has no previous value and
    gets 0.
    """
    df = history.sort_values(["platform", "date"]).copy()
    df["increment"] = (
        df.groupby("platform")["totalUnits"]
        .diff()
        .fillna(0)
        .astype(int)
    )
    return df.sort_values(["date", "platform"]).reset_index(drop=True)
