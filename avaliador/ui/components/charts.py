"""Chart components for the valuation breakdown."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from avaliador.domain.calculator.valuation import ValuationBreakdown
from avaliador.ui.helpers import format_adjustment

ADJUSTMENT_LABELS = {
    "layout": "Tipologia",
    "age": "Idade",
    "condition": "Estado",
    "energy": "Classe energética",
    "floor": "Andar",
    "elevator": "Elevador",
    "garage": "Garagem",
    "balcony": "Varanda",
    "pool": "Piscina",
    "garden": "Jardim",
}


def breakdown_frame(result: ValuationBreakdown) -> pd.DataFrame:
    """Tabulate the adjustments of a valuation.

    Columns: Fator, Valor, Impacto (€) where the impact is the euro effect
    of the adjustment applied alone on the base value.
    """
    rows = []
    for name, value in result.adjustments.items():
        if result.is_additive:
            impact = result.base_value * value
        else:
            impact = result.base_value * (value - 1.0)
        rows.append({
            "Fator": ADJUSTMENT_LABELS.get(name, name),
            "Valor": format_adjustment(value, result.is_additive),
            "Impacto (€)": round(impact),
        })
    return pd.DataFrame(rows, columns=["Fator", "Valor", "Impacto (€)"])


def render_breakdown_chart(result: ValuationBreakdown, key: str = "breakdown") -> None:
    """Render a waterfall from the base value to the estimate.

    Args:
        result: Valuation breakdown
        key: Unique key for the chart element
    """
    df = breakdown_frame(result)
    df = df[df["Impacto (€)"] != 0]
    if df.empty:
        st.caption("Sem ajustamentos aplicados ao valor base.")
        return

    labels = list(df["Fator"])
    impacts = list(df["Impacto (€)"])
    # Multiplicative factors compound, so single impacts don't add up to the estimate
    residual = result.value - round(result.base_value) - sum(impacts)
    if abs(residual) >= 1:
        labels.append("Efeito combinado")
        impacts.append(residual)

    fig = go.Figure(go.Waterfall(
        x=["Base", *labels, "Estimativa"],
        measure=["absolute", *["relative"] * len(impacts), "total"],
        y=[round(result.base_value), *impacts, 0],
        connector=dict(line=dict(color="#888888")),
        increasing=dict(marker=dict(color="#28a745")),
        decreasing=dict(marker=dict(color="#dc3545")),
        totals=dict(marker=dict(color="#1f77b4")),
    ))
    fig.update_layout(
        title="Como chegámos a este valor",
        yaxis_title="Montante (€)",
        showlegend=False,
    )
    st.plotly_chart(fig, use_container_width=True, key=f"waterfall_{key}")
