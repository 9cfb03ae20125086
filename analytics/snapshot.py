"""
Analytics snapshot generator.

Projects the fixed baseline counts forward to a report date using a
stateless, seeded pseudo-random walk. The same report date always yields
the same numbers, so the API, the dashboard and the cron job agree without
storing anything.
"""
import math
from datetime import date, datetime, timedelta, timezone
from types import MappingProxyType
from zoneinfo import ZoneInfo


REPORT_TZ = ZoneInfo("America/Mexico_City")
_EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc)

# ---------------------------------------------------------------------------
# Baseline (as of January 29, 2026)
# ---------------------------------------------------------------------------

BASELINE_DATE = date(2026, 1, 29)

PLATFORMS = ("ROKU", "FIRE TV", "GOOGLE OS", "LG", "TVOS", "SAMSUNG")

BASELINE_TOTALS = MappingProxyType({
    "ROKU":      81834,
    "FIRE TV":   69945,
    "GOOGLE OS": 71976,
    "LG":        50440,
    "TVOS":      792,
    "SAMSUNG":   13240,
})

BASELINE_DAILY = MappingProxyType({
    "ROKU":      1999,
    "FIRE TV":   1701,
    "GOOGLE OS": 1540,
    "LG":        1230,
    "TVOS":      14,
    "SAMSUNG":   754,
})

# Approximate units per month
MONTHLY_TARGETS = MappingProxyType({
    "ROKU":      2500,
    "FIRE TV":   2000,
    "GOOGLE OS": 1600,
    "LG":        1200,
    "TVOS":      20,
    "SAMSUNG":   1000,
})

MOBILE_APPS = (
    "Azteca Noreste Mobile iOS",
    "Azteca Noreste Mobile Android",
    "El Horizonte Android",
    "El Horizonte iOS",
)

# Historic totals, these grow 1-2 units per week
MOBILE_APP_BASELINE = MappingProxyType({
    "Azteca Noreste Mobile iOS":     1190,
    "Azteca Noreste Mobile Android": 2512,
    "El Horizonte Android":          1880,
    "El Horizonte iOS":              1741,
})

SPANISH_MONTHS = (
    "ENERO", "FEBRERO", "MARZO", "ABRIL", "MAYO", "JUNIO",
    "JULIO", "AGOSTO", "SEPTIEMBRE", "OCTUBRE", "NOVIEMBRE", "DICIEMBRE",
)

DAILY_VARIATION = 0.6  # total spread, i.e. -30% to +30%


# ---------------------------------------------------------------------------
# Seeded randomness
# ---------------------------------------------------------------------------

def pseudo_random(seed):
    """Stateless hash of an integer seed into [0, 1)."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def _round_half_up(value):
    return math.floor(value + 0.5)


def daily_increment(platform, day_index):
    """
    Units gained by `platform` on the `day_index`-th day after the baseline.
    The monthly target is spread evenly over 30 days with ±30% noise.
    """
    daily_average = MONTHLY_TARGETS[platform] / 30
    seed = ord(platform[0]) * 1000 + day_index
    variation = (pseudo_random(seed) - 0.5) * DAILY_VARIATION
    return max(0, _round_half_up(daily_average * (1 + variation)))


def weekly_mobile_increment(app_name, week_index):
    seed = ord(app_name[0]) * 100 + week_index
    return 2 if pseudo_random(seed) > 0.5 else 1


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------

def report_date(reference_instant=None):
    """
    Mexico City civil date the report covers for `reference_instant`.
    Upstream figures lag a day, so this is always "yesterday" there.
    Naive datetimes are read as UTC.
    """
    if reference_instant is None:
        reference_instant = datetime.now(timezone.utc)
    elif reference_instant.tzinfo is None:
        reference_instant = reference_instant.replace(tzinfo=timezone.utc)

    # Nothing representable precedes the first day
    if reference_instant - _EARLIEST_INSTANT < timedelta(days=1):
        return date.min

    local_today = reference_instant.astimezone(REPORT_TZ).date()
    if local_today == date.min:
        return date.min
    return local_today - timedelta(days=1)


def days_since_baseline(target):
    return (target - BASELINE_DATE).days


def format_display_date(target):
    return f"AL {target.day} DE {SPANISH_MONTHS[target.month - 1]}"


def _is_baseline_month(target):
    return (target.year, target.month) == (BASELINE_DATE.year, BASELINE_DATE.month)


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

def _project_platform(platform, days_diff, month_start_offset, in_baseline_month):
    total_units = BASELINE_TOTALS[platform]
    daily_units = BASELINE_DAILY[platform] if in_baseline_month else 0

    for i in range(1, days_diff + 1):
        increment = daily_increment(platform, i)
        total_units += increment

        # Monthly column only counts days inside the report month.
        # The 1st itself is included, so `>=` and not `>`.
        if in_baseline_month or i >= month_start_offset:
            daily_units += increment

    return {
        "platform":   platform,
        "dailyUnits": daily_units,
        "totalUnits": total_units,
    }


def _project_mobile_app(app_name, days_diff):
    total_units = MOBILE_APP_BASELINE[app_name]
    for w in range(max(days_diff, 0) // 7):
        total_units += weekly_mobile_increment(app_name, w)
    return {"platform": app_name, "totalUnits": total_units}


def build_snapshot(target):
    """
    Full analytics snapshot for the report date `target`.

    Returns a dict with the JSON shape served by the API:
    date, displayDate, platforms, grandTotal, mobileApps, mobileTotal.
    Dates before the baseline get baseline values; the walk never runs
    backwards.
    """
    days_diff = days_since_baseline(target)
    month_start_offset = days_since_baseline(target.replace(day=1))
    in_baseline_month = _is_baseline_month(target)

    platforms = [
        _project_platform(p, days_diff, month_start_offset, in_baseline_month)
        for p in PLATFORMS
    ]
    mobile_apps = [_project_mobile_app(app, days_diff) for app in MOBILE_APPS]

    return {
        "date":        target.isoformat(),
        "displayDate": format_display_date(target),
        "platforms":   platforms,
        "grandTotal": {
            "daily": sum(p["dailyUnits"] for p in platforms),
            "total": sum(p["totalUnits"] for p in platforms),
        },
        "mobileApps":  mobile_apps,
        "mobileTotal": sum(app["totalUnits"] for app in mobile_apps),
    }


def compute_snapshot(reference_instant=None):
    """Snapshot for the report date of `reference_instant` (default: now)."""
    return build_snapshot(report_date(reference_instant))
