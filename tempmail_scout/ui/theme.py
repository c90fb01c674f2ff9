import html

import streamlit as st

from ..models import ApiDescriptor, AuthType

COLORS = {
    "background": "#0F172A",
    "panel":      "#1E293B",
    "border":     "#334155",
    "text":       "#E2E8F0",
    "muted":      "#94A3B8",
    "inbox":      "#60A5FA",  # blue
    "address":    "#C084FC",  # purple
    "no_auth":    "#34D399",  # emerald
    "auth":       "#FBBF24",  # amber
    "danger":     "#FB7185",
}


def load_css():
    st.markdown("""
    <style>
        .stApp { background-color: #0F172A; color: #E2E8F0; }
        .main-header {
            font-size: 3rem;
            font-weight: 800;
            color: white;
            text-align: center;
            margin-bottom: 0.2rem;
        }
        .main-header .accent {
            background: linear-gradient(90deg, #60A5FA, #A855F7);
            -webkit-background-clip: text;
            color: transparent;
        }
        .sub-header {
            font-size: 1.1rem;
            color: #94A3B8;
            text-align: center;
            margin-bottom: 1.5rem;
        }
        .powered-badge {
            display: block;
            width: fit-content;
            margin: 0 auto 1rem auto;
            padding: 0.2rem 0.8rem;
            border-radius: 999px;
            border: 1px solid #334155;
            background: rgba(30, 41, 59, 0.5);
            color: #94A3B8;
            font-size: 0.75rem;
        }
        .badge {
            display: inline-block;
            padding: 0.1rem 0.5rem;
            border-radius: 6px;
            font-size: 0.75rem;
            font-weight: 600;
        }
        .badge-no-auth { background: rgba(16, 185, 129, 0.15); color: #34D399; }
        .badge-auth { background: rgba(245, 158, 11, 0.15); color: #FBBF24; }
        .cap-inbox { color: #60A5FA; font-weight: 600; }
        .cap-address { color: #C084FC; font-weight: 600; }
        .card-title { font-size: 1.25rem; font-weight: 700; color: white; margin: 0.5rem 0; }
        .card-desc { color: #94A3B8; font-size: 0.9rem; min-height: 3em; }
        .card-meta { color: #64748B; font-size: 0.8rem; }
        .skeleton {
            height: 14rem;
            border-radius: 16px;
            background: rgba(30, 41, 59, 0.3);
            border: 1px solid #1E293B;
        }
        .footer-note {
            font-size: 0.8rem;
            color: #64748B;
            text-align: center;
            margin-top: 2rem;
        }
    </style>
    """, unsafe_allow_html=True)


def esc(value) -> str:
    """Escape model-produced text before it goes into HTML snippets."""
    return html.escape(str(value))


def auth_badge(api: ApiDescriptor) -> str:
    css = "badge-no-auth" if api.auth_type == AuthType.NO_AUTH else "badge-auth"
    return f'<span class="badge {css}">{esc(api.auth_type.value)}</span>'


def capability_html(api: ApiDescriptor) -> str:
    if api.has_inbox_access:
        return '<span class="cap-inbox">📥 Inbox Access</span>'
    return '<span class="cap-address"># Address Only</span>'
