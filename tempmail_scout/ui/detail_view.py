import streamlit as st

from ..config import Settings
from ..detail import CodeStatus, DetailSession
from ..models import Language, LANGUAGES
from .actions import load_code
from .charts import latency_chart
from .theme import auth_badge, capability_html, esc

LANGUAGE_KEY = "detail_language"

# st.code highlighter names
HIGHLIGHT = {
    Language.JAVASCRIPT: "javascript",
    Language.PYTHON: "python",
    Language.CURL: "bash",
}


def reset_language_widget(session: DetailSession):
    """Sync the language radio with a freshly opened session; call before the dialog renders."""
    st.session_state[LANGUAGE_KEY] = session.language.value


def _render_info(session: DetailSession):
    api = session.api
    st.markdown("##### 🖥️ API Details")
    st.markdown(f'<p style="color:#94A3B8">{esc(api.description)}</p>', unsafe_allow_html=True)
    attachments = "✅ Supported" if api.supports_attachments else "❌ Not Supported"
    rows = [
        ("Base URL", f"<code>{esc(api.base_url)}</code>"),
        ("Capabilities", capability_html(api)),
        ("Rate Limit", esc(api.rate_limit)),
        ("Attachments", attachments),
    ]
    st.markdown(
        "<table style='width:100%'>"
        + "".join(f"<tr><td style='color:#64748B'>{k}</td><td>{v}</td></tr>" for k, v in rows)
        + "</table>",
        unsafe_allow_html=True,
    )


def _render_code(session: DetailSession, settings: Settings):
    st.markdown("##### 💻 Integration Guide")
    choice = st.radio(
        "Language",
        options=[l.value for l in LANGUAGES],
        format_func=lambda v: Language(v).label,
        horizontal=True,
        key=LANGUAGE_KEY,
        label_visibility="collapsed",
    )
    session.select_language(choice)

    if session.needs_code:
        with st.spinner(f"Gemini is generating {session.language.value} code..."):
            load_code(session, settings)

    if session.code_status != CodeStatus.READY or session.sample is None:
        st.caption("Waiting for code sample...")
        return
    # st.code renders its own copy-to-clipboard button
    st.code(session.sample.code, language=HIGHLIGHT.get(session.language, "text"))
    if session.sample.explanation:
        st.markdown("**Explanation**")
        st.markdown(session.sample.explanation)


@st.dialog("API details", width="large")
def show_detail(session: DetailSession, settings: Settings):
    if not session.is_open:
        return
    api = session.api
    head, close_col = st.columns([6, 1])
    with head:
        st.markdown(f"## {esc(api.name)} &nbsp; {auth_badge(api)}", unsafe_allow_html=True)
        st.markdown(f"[{api.website} ↗]({api.website})")
    with close_col:
        if st.button("✖ Close", key="detail_close"):
            session.close()
            st.rerun()

    info_col, chart_col = st.columns([1, 2])
    with info_col:
        _render_info(session)
    with chart_col:
        st.markdown("##### Estimated Response Latency (24h)")
        st.plotly_chart(latency_chart(session.stats), use_container_width=True)

    _render_code(session, settings)
