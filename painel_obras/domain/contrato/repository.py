# painel_obras/domain/contrato/repository.py
from __future__ import annotations

from typing import Protocol

from painel_obras.domain.obra.entities import ArquivoContratoBase, Regional

from .entities import ConsultaPrincipal, ContratoHistorico


class ContratoRepository(Protocol):
    def buscar_principais(self, ids: list[int]) -> ConsultaPrincipal: ...

    def buscar_historicos(self, ids: list[int]) -> list[ContratoHistorico]: ...

    def listar_arquivos_base(self, contrato_numero: str) -> list[ArquivoContratoBase]: ...

    def listar_areas_ativas(self) -> list[Regional]: ...
