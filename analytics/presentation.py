"""Table builders shared by the dashboard page."""
import pandas as pd


PLATFORM_HEADER = "PLATAFORMA"
UNITS_HEADER    = "UNIDADES TOTALES"

# snapshot platform column -> grandTotal key
_GRAND_TOTAL_KEYS = {
    "dailyUnits": "daily",
    "totalUnits": "total",
}


def format_units(value):
    """81834 -> '81,834'"""
    return f"{value:,}"


def platform_table(snapshot, column):
    """
    PLATAFORMA / UNIDADES TOTALES table for one platform column of the
    snapshot, with a trailing TOTAL row taken from grandTotal.
    """
    if column not in _GRAND_TOTAL_KEYS:
        raise KeyError(f"Unknown platform column: {column}")

    rows = [
        {PLATFORM_HEADER: p["platform"], UNITS_HEADER: format_units(p[column])}
        for p in snapshot["platforms"]
    ]
    rows.append({
        PLATFORM_HEADER: "TOTAL",
        UNITS_HEADER:    format_units(snapshot["grandTotal"][_GRAND_TOTAL_KEYS[column]]),
    })
    return pd.DataFrame(rows)


def mobile_table(snapshot):
    return pd.DataFrame([
        {PLATFORM_HEADER: app["platform"], UNITS_HEADER: format_units(app["totalUnits"])}
        for app in snapshot["mobileApps"]
    ])
