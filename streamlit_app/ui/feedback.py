"""
Standardized feedback utilities for the search screen.

Renders the error, empty-prompt and loading states, plus the recipe cards of a
successful search, from the SearchView produced by recipe_search.presentation.
"""

from contextlib import contextmanager
from typing import List, Optional

import streamlit as st

from recipe_search.presentation import RecipeCard, SearchView

CARD_IMAGE_WIDTH = 320


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Error text to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """Display the prompt shown before any search."""
    st.info(f"📭 {title}")
    if subtitle:
        st.caption(subtitle)


@contextmanager
def working_spinner(label: str = "Searching…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Searching recipes…"):
            run_search(query)
    """
    with st.spinner(label):
        yield


def render_recipe_card(card: RecipeCard) -> None:
    """Card with thumbnail, title and the first lines of the instructions."""
    with st.container(border=True):
        if card.image_url:
            st.image(card.image_url, width=CARD_IMAGE_WIDTH)
        st.markdown(f"#### {card.title}")
        st.write(card.summary)


def render_recipe_list(cards: List[RecipeCard]) -> None:
    for card in cards:
        render_recipe_card(card)


def render_view(view: SearchView) -> None:
    """
    Render one SearchView.

    Loading is normally covered by working_spinner while the request runs; the
    placeholder here only shows if the page reruns mid-request.
    """
    if view.loading:
        st.caption("⏳ Searching…")
    elif view.error is not None:
        show_error(view.error, hint="Try another keyword, or check your connection and search again.")
    elif view.prompt is not None:
        show_empty_state(view.prompt)
    else:
        count = len(view.cards)
        st.caption(f"{count} recipe found" if count == 1 else f"{count} recipes found")
        render_recipe_list(view.cards)
