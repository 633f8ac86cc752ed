"""Streamlit interface."""

__all__: list[str] = []
