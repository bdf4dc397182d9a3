"""Result step rendering."""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from avaliador.domain.calculator.valuation import ValuationBreakdown
from avaliador.ui.components.charts import breakdown_frame, render_breakdown_chart
from avaliador.ui.helpers import format_euro

DISCLAIMER = (
    "**Nota:** Esta é uma estimativa baseada nas características do imóvel fornecidas. "
    "Para uma avaliação mais precisa, recomendamos uma avaliação presencial por um perito qualificado."
)


def render_result(
    result: ValuationBreakdown | None,
    on_restart: Callable[[], None],
    show_details: bool = False,
) -> None:
    """Render the final valuation.

    Args:
        result: Valuation breakdown (None if not computed yet)
        on_restart: Callback for the "Nova Avaliação" button
        show_details: Expand the breakdown section by default
    """
    st.markdown("<h2 style='text-align:center'>✅ Avaliação Concluída!</h2>", unsafe_allow_html=True)
    st.caption("Baseado nas informações fornecidas, estimamos que o valor do seu imóvel seja:")

    value = result.value if result is not None else None
    with st.container(border=True):
        st.markdown("O valor do seu imóvel é")
        st.markdown(
            f"<div style='font-size:2.5em;font-weight:bold;color:#28a745'>{format_euro(value)}</div>",
            unsafe_allow_html=True,
        )

    st.info(DISCLAIMER)

    if result is not None and result.kind is not None:
        with st.expander("📊 Detalhe do cálculo", expanded=show_details):
            c1, c2 = st.columns(2)
            c1.metric("Preço médio €/m²", format_euro(result.price_per_m2))
            c2.metric("Valor base", format_euro(result.base_value))

            st.dataframe(breakdown_frame(result), hide_index=True, use_container_width=True)
            render_breakdown_chart(result)

    st.button("Nova Avaliação", type="primary", use_container_width=True, on_click=on_restart)
