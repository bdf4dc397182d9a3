"""Selectable option cards used by the choice steps."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import streamlit as st


def render_option_cards(
    options: dict[str, tuple[str, str]],
    selected: str | None,
    on_select: Callable[[str], None],
    key: str,
    columns: int = 1,
) -> None:
    """Render one button per option, highlighting the selected one.

    Args:
        options: value -> (label, description)
        selected: Currently selected value
        on_select: Callback receiving the chosen value
        key: Unique key prefix for the buttons
        columns: Number of columns to lay the cards out in
    """
    cols = st.columns(columns)
    for i, (value, (label, description)) in enumerate(options.items()):
        with cols[i % columns]:
            with st.container(border=True):
                st.button(
                    f"✓ {label}" if value == selected else label,
                    key=f"{key}_{value}",
                    type="primary" if value == selected else "secondary",
                    use_container_width=True,
                    on_click=on_select,
                    args=(value,),
                )
                if description:
                    st.caption(description)


def enum_options(labels: dict[Any, str], descriptions: dict[Any, str] | None = None) -> dict[str, tuple[str, str]]:
    """Build card options from an enum -> label mapping."""
    descriptions = descriptions or {}
    return {member.value: (label, descriptions.get(member, "")) for member, label in labels.items()}
