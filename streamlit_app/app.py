"""
Forkify - Streamlit shell.

Owns the session's RecipeState and renders search, pagination, the current
recipe with servings controls, bookmarks and the upload form. All state
changes go through RecipeState; this file only displays results and errors.

Run with: streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Add project root to path so the forkify package imports when run from a checkout
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from forkify.errors import ForkifyError
from forkify.logging_config import setup_logging
from streamlit_app.utils.session import get_or_create_recipe_state

st.set_page_config(page_title="Forkify", page_icon="🍴", layout="wide")

if "logging_configured" not in st.session_state:
    setup_logging()
    st.session_state["logging_configured"] = True

try:
    recipe_state = get_or_create_recipe_state()
except ForkifyError as e:
    st.error(f"Could not start: {e}")
    st.stop()

# Sidebar: search and bookmarks
with st.sidebar:
    st.markdown("### 🍴 **Forkify**")
    query = st.text_input("Search over 1,000,000 recipes...", value=recipe_state.search.query)
    if st.button("Search", use_container_width=True, type="primary") and query:
        result = recipe_state.load_search_results(query)
        if not result.ok:
            st.error(str(result.error))

    page_count = recipe_state.get_page_count()
    if page_count:
        page = st.number_input("Page", min_value=1, max_value=page_count, value=recipe_state.search.page)
        for item in recipe_state.get_search_results_page(int(page)):
            label = f"{item.title} · {item.publisher}"
            if st.button(label, key=f"result-{item.id}", use_container_width=True):
                loaded = recipe_state.load_recipe(item.id)
                if not loaded.ok:
                    st.error(str(loaded.error))

    st.divider()
    st.markdown("**Bookmarks**")
    if not recipe_state.bookmarks:
        st.caption("No bookmarks yet. Find a nice recipe and bookmark it :)")
    for bookmark in recipe_state.bookmarks:
        if st.button(bookmark.title, key=f"bookmark-{bookmark.id}", use_container_width=True):
            loaded = recipe_state.load_recipe(bookmark.id)
            if not loaded.ok:
                st.error(str(loaded.error))

# Main area: current recipe
recipe = recipe_state.recipe
if recipe is None:
    st.info("Start by searching for a recipe or an ingredient. Have fun!")
else:
    st.header(recipe.title)
    if recipe.image:
        st.image(recipe.image, use_container_width=True)
    st.caption(f"{recipe.cooking_time:g} minutes · {recipe.servings:g} servings · {recipe.publisher}")

    col_less, col_more, col_bookmark = st.columns(3)
    if col_less.button("− serving") and recipe.servings > 1:
        recipe_state.update_servings(recipe.servings - 1)
        st.rerun()
    if col_more.button("+ serving"):
        recipe_state.update_servings(recipe.servings + 1)
        st.rerun()
    if col_bookmark.button("Remove bookmark" if recipe.bookmarked else "Bookmark"):
        if recipe.bookmarked:
            recipe_state.delete_bookmark(recipe.id)
        else:
            recipe_state.add_bookmark(recipe)
        st.rerun()

    st.subheader("Recipe ingredients")
    for ing in recipe.ingredients:
        quantity = f"{ing.quantity:g} " if ing.quantity is not None else ""
        st.markdown(f"- {quantity}{ing.unit} {ing.description}".replace("  ", " "))
    if recipe.source_url:
        st.markdown(f"[Directions]({recipe.source_url})")

# Upload form
with st.expander("Add recipe"):
    with st.form("upload"):
        form = {
            "title": st.text_input("Title"),
            "sourceUrl": st.text_input("URL"),
            "image": st.text_input("Image URL"),
            "publisher": st.text_input("Publisher"),
            "cookingTime": st.number_input("Prep time", min_value=1, value=30),
            "servings": st.number_input("Servings", min_value=1, value=4),
        }
        for i in range(1, 7):
            form[f"ingredient-{i}"] = st.text_input(
                f"Ingredient {i}", placeholder="Format: 'Quantity,Unit,Description'"
            )
        if st.form_submit_button("Upload"):
            uploaded = recipe_state.upload_recipe(form)
            if uploaded.ok:
                st.success("Recipe was successfully uploaded :)")
                st.rerun()
            else:
                st.error(str(uploaded.error))
