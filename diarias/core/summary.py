# diarias/core/summary.py
from functools import lru_cache
from typing import Optional, Tuple

import pandas as pd

from diarias.core.models import Diaria, ResumoMilitar


# --- Filtros ---
@lru_cache(maxsize=32)
def filtrar_diarias(diarias: Tuple[Diaria, ...],
                    nome: str = "",
                    valor_min: Optional[float] = None,
                    valor_max: Optional[float] = None) -> Tuple[Diaria, ...]:
    """Mantém as diárias cujo nome contém `nome` (sem diferenciar maiúsculas)
    e cujo valor está entre `valor_min` e `valor_max`, quando informados."""
    nome_lower = (nome or "").lower()
    return tuple(
        d for d in diarias
        if nome_lower in d.militar_nome.lower()
        and (valor_min is None or d.valor >= valor_min)
        and (valor_max is None or d.valor <= valor_max)
    )


# --- Totais ---
def total_gasto(diarias: Tuple[Diaria, ...]) -> float:
    return float(sum(d.valor for d in diarias))


def saldo_disponivel(saldo_mensal: float, total: float) -> float:
    # Pode ficar negativo quando o gasto passa do saldo mensal
    return saldo_mensal - total


def percentual_gasto(total: float, saldo_mensal: float) -> float:
    """Largura da barra de consumo do saldo, limitada a 0-100%."""
    if saldo_mensal <= 0:
        return 100.0 if total > 0 else 0.0
    return max(0.0, min(total / saldo_mensal * 100, 100.0))


# --- Resumo por militar ---
@lru_cache(maxsize=32)
def resumo_por_militar(diarias: Tuple[Diaria, ...]) -> Tuple[ResumoMilitar, ...]:
    """Agrupa as diárias por militar (quantidade e total), do maior total para o menor.

    Empates mantêm a ordem em que o militar aparece primeiro na lista.
    """
    if not diarias:
        return ()

    df = pd.DataFrame(
        [{"militar_nome": d.militar_nome, "valor": d.valor} for d in diarias]
    )
    resumo = (
        df.groupby("militar_nome", sort=False)["valor"]
        .agg(quantidade="size", total="sum")
        .reset_index()
        .sort_values("total", ascending=False, kind="stable")
    )
    return tuple(
        ResumoMilitar(nome=row.militar_nome, quantidade=int(row.quantidade), total=float(row.total))
        for row in resumo.itertuples(index=False)
    )
