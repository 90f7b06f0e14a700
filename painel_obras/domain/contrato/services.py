# painel_obras/domain/contrato/services.py
"""Resolucao de contratos. Funcao pura — zero IO.

A mescla e assimetrica: numero e objeto ficam com o primeiro valor visto
(tabela principal), valor/instrumento/area vem sempre do historico.
"""
from __future__ import annotations

from .entities import (
    SEM_INSTRUMENTO,
    ConsultaPrincipal,
    ContratoHistorico,
    ContratoResolvido,
)


def resolver_contratos(
    principal: ConsultaPrincipal,
    historicos: list[ContratoHistorico],
) -> dict[int, ContratoResolvido]:
    """Mapa contrato_id -> contrato mesclado. Ids ausentes das duas fontes ficam fora do mapa."""
    mapa: dict[int, ContratoResolvido] = {}

    if principal.disponivel:
        for c in principal.contratos:
            mapa[c.id] = ContratoResolvido(
                numero_contrato=c.numero_contrato,
                objeto=c.objeto,
                valor=c.valor,
            )

    for h in historicos:
        existente = mapa.get(h.id, ContratoResolvido())
        mapa[h.id] = ContratoResolvido(
            numero_contrato=existente.numero_contrato or h.numero_contrato,
            objeto=existente.objeto or h.objeto,
            valor=h.valor,
            instrumento_nome=h.instrumento_nome or SEM_INSTRUMENTO,
            nome_area=h.nome_area or None,
        )
    return mapa


def ids_de_contrato(contrato_ids: list[int | None]) -> list[int]:
    """Ids distintos, positivos e nao-nulos, na ordem de primeira ocorrencia."""
    vistos: dict[int, None] = {}
    for cid in contrato_ids:
        if cid is not None and cid > 0:
            vistos.setdefault(cid, None)
    return list(vistos)
