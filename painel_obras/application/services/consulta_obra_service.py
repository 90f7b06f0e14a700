# painel_obras/application/services/consulta_obra_service.py
from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from painel_obras.domain.contrato.entities import ContratoResolvido
from painel_obras.domain.contrato.repository import ContratoRepository
from painel_obras.domain.contrato.services import ids_de_contrato, resolver_contratos
from painel_obras.domain.obra.entities import ObraAgregada, Regional, StatusCount
from painel_obras.domain.obra.filtro import FiltroObras
from painel_obras.domain.obra.repository import ObraRepository
from painel_obras.domain.obra.services import ordenar_por_ano_contrato
from painel_obras.infrastructure.log import log

from .arquivo_service import AgregadorArquivos
from .relatorio_service import RelatorioFinanceiro, montar_relatorio_financeiro


@dataclass(frozen=True)
class Repositorios:
    obra: ObraRepository
    contrato: ContratoRepository


AbrirRepositorios = Callable[[], AbstractContextManager[Repositorios]]


@dataclass(frozen=True)
class ResultadoConsulta:
    obras: list[ObraAgregada]
    status_count: list[StatusCount]
    regionais: list[Regional]


class ConsultaObraService:
    """Imperative Shell: abre os dois bancos por requisicao, orquestra repos e funcoes puras."""

    def __init__(
        self,
        abrir_repositorios: AbrirRepositorios,
        url_base_obra: str,
        url_base_contrato: str,
        max_workers: int = 8,
    ) -> None:
        self._abrir_repositorios = abrir_repositorios
        self._url_base_obra = url_base_obra
        self._url_base_contrato = url_base_contrato
        self._max_workers = max_workers

    def consultar(self, filtro: FiltroObras) -> ResultadoConsulta:
        # Conexoes liberadas pelo context manager em qualquer saida, inclusive erro.
        with self._abrir_repositorios() as repos:
            obras = repos.obra.listar_deduplicadas(filtro)
            log(f"Total de obras encontradas: {len(obras)}")
            com_contrato = sum(1 for o in obras if o.tem_contrato_valido)
            log(f"Obras com contrato_id valido: {com_contrato} de {len(obras)}")

            contratos = self._resolver_contratos(
                repos.contrato,
                ids_de_contrato([o.contrato_id for o in obras]),
            )

            agregador = AgregadorArquivos(
                repos.obra,
                repos.contrato,
                self._url_base_obra,
                self._url_base_contrato,
                self._max_workers,
            )
            agregadas = agregador.agregar(obras, contratos)

            status_count = repos.obra.contar_por_status(filtro)
            log(f"Total de status diferentes: {len(status_count)}")

            regionais = repos.contrato.listar_areas_ativas() or repos.obra.listar_regionais()

        return ResultadoConsulta(
            obras=ordenar_por_ano_contrato(agregadas),
            status_count=status_count,
            regionais=regionais,
        )

    def relatorio_financeiro(self, filtro: FiltroObras) -> RelatorioFinanceiro:
        return montar_relatorio_financeiro(self.consultar(filtro).obras)

    def _resolver_contratos(
        self,
        contrato_repo: ContratoRepository,
        ids: list[int],
    ) -> dict[int, ContratoResolvido]:
        log(f"IDs unicos de contratos a buscar: {len(ids)}")
        if not ids:
            return {}
        # historico e consultado sempre, mesmo quando `contratos` respondeu
        principal = contrato_repo.buscar_principais(ids)
        historicos = contrato_repo.buscar_historicos(ids)
        return resolver_contratos(principal, historicos)
