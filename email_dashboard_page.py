"""
Email Dashboard Page
Stat cards, delivery charts and a searchable table over the email-sent report.
Run with: streamlit run email_dashboard_page.py
"""

import asyncio
import logging
from datetime import datetime

import streamlit as st

from config import DASHBOARD_LANGUAGE
from dashboard_state import DashboardController, PipelineStatus
from email_records import TABLE_COLUMNS, records_to_dataframe, style_status_column
from email_report_client import summarize_request
from email_stats import build_bar_data, build_pie_data, format_number
from translations import _t, set_language

logger = logging.getLogger(__name__)


def _get_controller() -> DashboardController:
    # One controller, and therefore one fetch, per browser session
    if "email_dashboard" not in st.session_state:
        st.session_state.email_dashboard = DashboardController()
    return st.session_state.email_dashboard


def _translate_chart(df):
    df = df.assign(name=[_t(name) for name in df["name"]])
    return df.set_index("name")


def main():
    set_language(st.session_state.get("language", DASHBOARD_LANGUAGE))
    st.set_page_config(page_title=_t("Email Tracking Dashboard"), layout="wide")

    st.title(_t("Email Tracking Dashboard"))
    st.caption(_t("Track and monitor email delivery status"))

    controller = _get_controller()
    if controller.state.status is PipelineStatus.IDLE:
        logger.info("Starting email report fetch for new session")
        with st.spinner(_t("Loading data...")):
            asyncio.run(controller.load())

    state = controller.state
    totals = state.totals

    # Stats cards
    c1, c2, c3 = st.columns(3)
    c1.metric(_t("Total Emails"), format_number(totals.total))
    c2.metric(_t("Sent Emails"), format_number(totals.total_sent))
    c3.metric(_t("Failed Emails"), format_number(totals.total_not_sent))

    # Charts
    left, right = st.columns(2)
    with left:
        st.subheader(_t("Delivery Status Distribution"))
        st.bar_chart(_translate_chart(build_pie_data(totals)), horizontal=True)
    with right:
        st.subheader(_t("Email Statistics"))
        st.bar_chart(_translate_chart(build_bar_data(totals)))

    query = st.text_input(
        _t("Search by email, company, or name..."),
        value=state.query,
        label_visibility="collapsed",
        placeholder=_t("Search by email, company, or name..."),
    )
    if query != state.query:
        controller.set_query(query)
        state = controller.state

    if state.status in (PipelineStatus.IDLE, PipelineStatus.LOADING):
        st.info(_t("Loading data..."))
    elif state.status is PipelineStatus.ERROR:
        st.error(_t(state.error or "Failed to fetch data."))
        with st.expander(_t("Debug Information")):
            st.json(summarize_request(controller.client))
    else:
        visible = state.visible_records
        st.caption(_t("Showing {shown} of {total} records", shown=len(visible), total=len(state.records)))
        if not visible:
            st.info(_t("No records match your search."))
        else:
            table_df = records_to_dataframe(visible)
            table_df.columns = [_t(column) for column in TABLE_COLUMNS]
            st.dataframe(
                style_status_column(table_df, visible, column=_t("Status")),
                width="stretch",
                hide_index=True,
            )
            st.download_button(
                label=_t("Download as CSV"),
                data=table_df.to_csv(index=False).encode("utf-8"),
                file_name=f"email_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv",
                mime="text/csv",
            )


if __name__ == "__main__":
    main()
