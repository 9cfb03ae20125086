import streamlit as st
import plotly.express as px
from datetime import datetime
import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from analytics.snapshot import compute_snapshot, REPORT_TZ
from analytics.history import build_history, daily_deltas
from analytics.presentation import platform_table, mobile_table

st.set_page_config(page_title="OTT Analytics Dashboard", layout="wide")

data = compute_snapshot()

st.title("OTT Analytics Dashboard")

# ── MONTHLY & CUMULATIVE TABLES ───────────────────────────────────────────────
c1, c2 = st.columns(2)
with c1:
    st.subheader(data["displayDate"])
    st.dataframe(platform_table(data, "dailyUnits"), use_container_width=True, hide_index=True)
with c2:
    st.subheader("TOTAL")
    st.dataframe(platform_table(data, "totalUnits"), use_container_width=True, hide_index=True)

# ── MOBILE APPS ───────────────────────────────────────────────────────────────
st.subheader("APLICACIONES MÓVILES")
st.dataframe(mobile_table(data), use_container_width=True, hide_index=True)

# ── TREND ─────────────────────────────────────────────────────────────────────
st.subheader("📈 Unidades totales (últimos 30 días)")

@st.cache_data
def load_history(end_date, days=30):
    return daily_deltas(build_history(end_date, days))

history = load_history(datetime.fromisoformat(data["date"]).date())

t1, t2 = st.columns(2)
with t1:
    fig_total = px.line(history, x="date", y="totalUnits", color="platform",
        title="Unidades totales por plataforma")
    fig_total.update_layout(hovermode="x unified", plot_bgcolor=None,
        legend=dict(orientation="h", y=1.1))
    st.plotly_chart(fig_total, use_container_width=True)
with t2:
    fig_inc = px.bar(history, x="date", y="increment", color="platform",
        title="Nuevas unidades por día")
    fig_inc.update_layout(hovermode="x unified", plot_bgcolor=None,
        legend=dict(orientation="h", y=1.1))
    st.plotly_chart(fig_inc, use_container_width=True)

# ── FOOTER ────────────────────────────────────────────────────────────────────
st.caption(
    "Los datos se actualizan automáticamente. Última actualización: "
    f"{datetime.now(REPORT_TZ).strftime('%d/%m/%Y, %H:%M:%S')}"
)
st.caption("Los datos mostrados tienen un día de retraso")
