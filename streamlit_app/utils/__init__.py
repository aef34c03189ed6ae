"""
Utility modules for the Streamlit shell.

This package contains:
- session: per-session ownership of the RecipeState
"""
