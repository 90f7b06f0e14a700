# painel_obras/application/services/relatorio_service.py
"""Relatorio financeiro por status e por regional. Funcao pura — zero IO."""
from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from painel_obras.domain.obra.entities import ObraAgregada
from painel_obras.domain.obra.enums import nome_status
from painel_obras.domain.obra.services import agrupar_por_numero_contrato

REGIONAL_NAO_INFORMADA = "Nao informado"
_CENTAVOS = Decimal("0.01")


@dataclass(frozen=True)
class LinhaFinanceira:
    chave: Hashable
    rotulo: str
    total_obras: int
    obras_com_valor: int
    valor_total: Decimal


@dataclass(frozen=True)
class TotaisGerais:
    total_obras: int
    obras_com_valor: int
    obras_sem_valor: int
    valor_total: Decimal
    valor_medio: Decimal


@dataclass(frozen=True)
class RelatorioFinanceiro:
    por_status: list[LinhaFinanceira]
    por_regional: list[LinhaFinanceira]
    totais: TotaisGerais


def montar_relatorio_financeiro(obras: list[ObraAgregada]) -> RelatorioFinanceiro:
    """Agrupa por numero de contrato (maior id) antes de somar. So valores positivos contam."""
    agrupadas = agrupar_por_numero_contrato(obras)
    return RelatorioFinanceiro(
        por_status=_linhas(agrupadas, lambda o: o.obra.status_id, nome_status),
        por_regional=_linhas(
            agrupadas,
            lambda o: o.regional_nome or REGIONAL_NAO_INFORMADA,
            str,
        ),
        totais=_totais(agrupadas),
    )


def _valor(obra: ObraAgregada) -> Decimal | None:
    valor = obra.valor_contrato
    return valor.valor if valor is not None and valor.valor > 0 else None


@dataclass
class _Acumulador:
    total_obras: int = 0
    obras_com_valor: int = 0
    valor_total: Decimal = Decimal("0")


def _linhas(
    obras: list[ObraAgregada],
    chave: Callable[[ObraAgregada], Hashable],
    rotulo: Callable[..., str],
) -> list[LinhaFinanceira]:
    acumulado: dict[Hashable, _Acumulador] = {}
    for obra in obras:
        acc = acumulado.setdefault(chave(obra), _Acumulador())
        acc.total_obras += 1
        valor = _valor(obra)
        if valor is not None:
            acc.obras_com_valor += 1
            acc.valor_total += valor

    linhas = [
        LinhaFinanceira(
            chave=k,
            rotulo=rotulo(k),
            total_obras=acc.total_obras,
            obras_com_valor=acc.obras_com_valor,
            valor_total=acc.valor_total,
        )
        for k, acc in acumulado.items()
    ]
    return sorted(linhas, key=lambda linha: linha.valor_total, reverse=True)


def _totais(obras: list[ObraAgregada]) -> TotaisGerais:
    valores = [v for v in (_valor(o) for o in obras) if v is not None]
    valor_total = sum(valores, Decimal("0"))
    valor_medio = (
        (valor_total / len(valores)).quantize(_CENTAVOS, rounding=ROUND_HALF_UP)
        if valores
        else Decimal("0")
    )
    return TotaisGerais(
        total_obras=len(obras),
        obras_com_valor=len(valores),
        obras_sem_valor=len(obras) - len(valores),
        valor_total=valor_total,
        valor_medio=valor_medio,
    )
