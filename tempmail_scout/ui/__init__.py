"""Streamlit renderers for the list and detail views."""
