from datetime import date
from typing import List, Optional, Tuple

import streamlit as st

from ..catalog import CatalogStore
from ..models import ApiDescriptor, FilterState, FilterType
from .theme import auth_badge, esc

FILTER_LABELS = {
    FilterType.ALL: "🔽 All",
    FilterType.INBOX_ONLY: "📥 Inbox",
    FilterType.ADDRESS_ONLY: "# Address Only",
}

EMPTY_TITLE = "No APIs found matching your criteria."
EMPTY_HINT = "Try adjusting the filter or search term."


def render_header():
    st.markdown('<div class="powered-badge">🟢 Powered by Gemini AI</div>', unsafe_allow_html=True)
    st.markdown('<div class="main-header">TempMail <span class="accent">API Scout</span></div>',
                unsafe_allow_html=True)
    st.markdown('<div class="sub-header">Discover and integrate free disposable email services. '
                'Filter by inbox capability to find the perfect tool for your testing needs.</div>',
                unsafe_allow_html=True)


def render_controls(loading: bool = False) -> Tuple[FilterState, bool]:
    """Search box, capability filter and refresh button. Returns (state, refresh_clicked)."""
    c1, c2, c3 = st.columns([3, 3, 1])
    with c1:
        search_term = st.text_input("Search APIs", key="search_term", placeholder="Search APIs...",
                                    label_visibility="collapsed")
    with c2:
        filter_value = st.radio(
            "Capability",
            options=[f.value for f in FilterType],
            format_func=lambda v: FILTER_LABELS[FilterType(v)],
            horizontal=True,
            key="filter_type",
            label_visibility="collapsed",
        )
    with c3:
        refresh = st.button("🔄 Refresh", key="refresh", disabled=loading, use_container_width=True)
    return FilterState(search_term=search_term or "", filter_type=FilterType(filter_value)), refresh


def render_skeleton(n: int = 6):
    cols = st.columns(3)
    for i in range(n):
        with cols[i % 3]:
            st.markdown('<div class="skeleton"></div>', unsafe_allow_html=True)


def render_summary(store: CatalogStore, shown: int):
    counts = store.summary()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Discovered", counts["total"])
    c2.metric("📥 Inbox Access", counts["inbox"])
    c3.metric("# Address Only", counts["address_only"])
    c4.metric("Showing", shown)


def render_empty_state():
    st.info(EMPTY_TITLE, icon="🔍")
    st.caption(EMPTY_HINT)


def _render_card(api: ApiDescriptor, idx: int) -> bool:
    icon = "📥" if api.has_inbox_access else "#"
    cap_css = "cap-inbox" if api.has_inbox_access else "cap-address"
    with st.container(border=True):
        st.markdown(f'{icon} &nbsp; {auth_badge(api)}', unsafe_allow_html=True)
        st.markdown(f'<div class="card-title">{esc(api.name)}</div>'
                    f'<div class="card-desc">{esc(api.description)}</div>', unsafe_allow_html=True)
        security = "HTTPS Secured" if api.is_https else "HTTP"
        st.markdown(f'<div class="card-meta">⚡ {esc(api.rate_limit)} &nbsp;&nbsp; 🛡️ {security}</div>',
                    unsafe_allow_html=True)
        st.markdown(f'<span class="{cap_css}">{api.capability_label}</span>', unsafe_allow_html=True)
        # index in the key: duplicate names are allowed in the catalog
        return st.button("View →", key=f"view_{idx}_{api.name}", use_container_width=True)


def render_grid(apis: List[ApiDescriptor]) -> Optional[ApiDescriptor]:
    """Render cards; return the descriptor whose button was clicked in this run."""
    if not apis:
        render_empty_state()
        return None
    selected = None
    cols = st.columns(3)
    for idx, api in enumerate(apis):
        with cols[idx % 3]:
            if _render_card(api, idx):
                selected = api
    return selected


def render_footer():
    st.markdown(f'<div class="footer-note">© {date.today().year} TempMail API Scout.<br>'
                f'Generated with Google Gemini.</div>', unsafe_allow_html=True)
