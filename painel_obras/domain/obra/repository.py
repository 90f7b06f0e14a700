# painel_obras/domain/obra/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import ArquivoObra, Obra, ObraRelacionada, Regional, StatusCount
from .filtro import FiltroObras


class ObraRepository(Protocol):
    def listar_deduplicadas(self, filtro: FiltroObras) -> list[Obra]: ...

    def contar_por_status(self, filtro: FiltroObras) -> list[StatusCount]: ...

    def listar_regionais(self) -> list[Regional]: ...

    def listar_arquivos(self, obra_id: int) -> list[ArquivoObra]: ...

    def listar_arquivos_pdf(self, obra_id: int) -> list[ArquivoObra]: ...

    def listar_relacionadas(self, contrato_numero: str, obra_id: int) -> list[ObraRelacionada]: ...

    def listar_arquivos_de_obras(self, obra_ids: list[int]) -> list[ArquivoObra]: ...
