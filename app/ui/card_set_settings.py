"""
Card set settings UI for choosing which prompts enter the deck.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from app.session_controller import can_start_session, reset_filters, toggle_filter
from core.deck import FilterPolicy, WildcardFlagPolicy
from core.schemas import UNCATEGORIZED, PromptPool


def build_card_set_overview(policy: FilterPolicy, pool: PromptPool) -> pd.DataFrame:
    """
    One row per card set with its prompt count and whether it is enabled.
    """
    if isinstance(policy, WildcardFlagPolicy):
        wildcard_count = pool.wildcard_count()
        counts = {card_set.id: wildcard_count for card_set in policy.card_sets}
    else:
        counts = pool.category_counts()

    rows = [
        {
            "Card set": card_set.label,
            "Description": card_set.description,
            "Prompts": counts.get(card_set.id, 0),
            "Enabled": card_set.enabled,
        }
        for card_set in policy.card_sets
    ]
    if not isinstance(policy, WildcardFlagPolicy) and counts.get(UNCATEGORIZED):
        rows.append({
            "Card set": UNCATEGORIZED,
            "Description": "Included while any set is enabled",
            "Prompts": counts[UNCATEGORIZED],
            "Enabled": policy.has_enabled(),
        })
    return pd.DataFrame(rows, columns=["Card set", "Description", "Prompts", "Enabled"])


def render_card_set_settings() -> None:
    """
    Render card set toggles and the resulting deck size.
    """
    policy: FilterPolicy = st.session_state.filter_policy
    pool: PromptPool = st.session_state.prompt_pool

    st.subheader("Card Options")
    st.caption("Choose which card sets to include.")

    for card_set in policy.card_sets:
        checked = st.toggle(
            card_set.label,
            value=card_set.enabled,
            key=f"card_set_{card_set.id}",
            help=card_set.description or None,
        )
        if checked != card_set.enabled:
            toggle_filter(card_set.id)
            st.rerun()

    eligible = policy.count_eligible(pool)
    st.metric("Cards in deck", f"{eligible}/{len(pool)}")
    if not can_start_session():
        st.warning("No cards selected. Enable at least one card set to play.")
    elif st.session_state.deck.started:
        st.caption("Changing card sets reshuffles the game in progress.")

    if st.button("Reset card sets"):
        reset_filters()
        for card_set in policy.card_sets:
            st.session_state.pop(f"card_set_{card_set.id}", None)
        st.rerun()

    with st.expander("Deck overview"):
        st.dataframe(
            build_card_set_overview(policy, pool),
            hide_index=True,
            use_container_width=True,
        )
