"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Session state holder for the RecipeSearch state machine
"""
