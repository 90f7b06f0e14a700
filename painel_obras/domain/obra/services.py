# painel_obras/domain/obra/services.py
from __future__ import annotations

from painel_obras.domain.contrato.value_objects import extrair_ano_contrato

from .entities import ObraAgregada


def ordenar_por_ano_contrato(obras: list[ObraAgregada]) -> list[ObraAgregada]:
    """Ano do contrato decrescente. Sem ano vai para o fim; empates mantem a ordem de entrada."""
    return sorted(obras, key=lambda o: extrair_ano_contrato(o.numero_contrato), reverse=True)


def agrupar_por_numero_contrato(obras: list[ObraAgregada]) -> list[ObraAgregada]:
    """Uma obra por numero_contrato resolvido (maior id). Obras sem numero nunca se agrupam."""
    grupos: dict[str, ObraAgregada] = {}
    for agregada in obras:
        chave = agregada.numero_contrato or f"sem-contrato-{agregada.obra.id}"
        atual = grupos.get(chave)
        if atual is None or agregada.obra.id > atual.obra.id:
            grupos[chave] = agregada
    return list(grupos.values())
