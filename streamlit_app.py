"""
streamlit_app.py: TempMail API Scout
Browse free disposable-email APIs discovered by Gemini and generate
integration snippets for them.

Run: streamlit run streamlit_app.py
Requires GEMINI_API_KEY (or API_KEY) in the environment or .env.
"""
import logging

import streamlit as st

from tempmail_scout.catalog import CatalogStatus, CatalogStore
from tempmail_scout.config import load_settings
from tempmail_scout.detail import DetailSession
from tempmail_scout.ui.actions import refresh_catalog
from tempmail_scout.ui.detail_view import reset_language_widget, show_detail
from tempmail_scout.ui.list_view import (render_controls, render_footer, render_grid, render_header,
                                         render_skeleton, render_summary)
from tempmail_scout.ui.theme import load_css

settings = load_settings()
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
# hard startup dependency
settings.require_api_key()

# ============================================================
# PAGE CONFIG
# ============================================================
st.set_page_config(page_title="TempMail API Scout", page_icon="📧", layout="wide")
load_css()

if "catalog" not in st.session_state:
    st.session_state.catalog = None
if "detail" not in st.session_state:
    st.session_state.detail = DetailSession()

render_header()

store = st.session_state.catalog
filter_state, refresh_clicked = render_controls(loading=store is not None and store.status == CatalogStatus.LOADING)

# ============================================================
# CATALOG (first load + manual refresh)
# ============================================================
if store is None or refresh_clicked:
    store = store or CatalogStore()
    st.session_state.catalog = store
    placeholder = st.empty()
    with placeholder.container():
        with st.spinner("Asking Gemini for temporary email APIs..."):
            render_skeleton()
            refresh_catalog(store, settings)
    placeholder.empty()

visible = store.view(filter_state)
if len(store):
    render_summary(store, len(visible))

selected = render_grid(visible)

# ============================================================
# DETAIL OVERLAY
# ============================================================
detail = st.session_state.detail
if selected is not None:
    detail.open(selected)
    reset_language_widget(detail)
    show_detail(detail, settings)
else:
    # a full rerun dismisses the dialog, so drop interest in any pending sample
    detail.close()

render_footer()
