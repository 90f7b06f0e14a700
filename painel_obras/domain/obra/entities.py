# painel_obras/domain/obra/entities.py
from __future__ import annotations

from dataclasses import dataclass, field

from painel_obras.domain.contrato.entities import ContratoResolvido
from painel_obras.domain.contrato.value_objects import ValorContrato


@dataclass(frozen=True)
class Obra:
    """Linha deduplicada de `obra` (rn = 1 por contrato_numero)."""

    id: int
    status_id: int | None
    contrato_id: int | None = None
    contrato_numero: str | None = None
    unidade_id: int | None = None
    regional_nome: str | None = None

    @property
    def tem_contrato_valido(self) -> bool:
        return self.contrato_id is not None and self.contrato_id > 0


@dataclass(frozen=True)
class ObraRelacionada:
    """Outra obra com o mesmo contrato_numero."""

    id: int
    contrato_id: int | None = None


@dataclass(frozen=True)
class ArquivoObra:
    id: int
    obra_id: int
    tipo: str | None = None
    nome_arquivo: str | None = None
    path_servidor: str | None = None


@dataclass(frozen=True)
class ArquivoContratoBase:
    historico_id: int
    nome_arquivo: str | None = None
    path_servidor: str | None = None
    valor: ValorContrato | None = None


@dataclass(frozen=True)
class AnexoObra:
    """Arquivo de obra pronto para exibicao (url absoluta, nome e tipo com default)."""

    id: int
    tipo: str
    nome: str
    url: str
    obra_id: int


@dataclass(frozen=True)
class AnexoContrato:
    nome: str
    url: str
    historico_id: int
    valor: ValorContrato | None = None


@dataclass(frozen=True)
class ObraContratoInfo:
    """Procedencia de um arquivo listado no agregado do contrato."""

    contrato_numero: str
    instrumento_nome: str
    label: str


@dataclass(frozen=True)
class StatusCount:
    status_id: int | None
    total: int


@dataclass(frozen=True)
class Regional:
    id: int
    nome: str


@dataclass(frozen=True)
class ObraAgregada:
    obra: Obra
    contrato: ContratoResolvido | None = None
    arquivos: list[AnexoObra] = field(default_factory=list)
    arquivos_contrato: list[AnexoObra] = field(default_factory=list)
    arquivos_contrato_base: list[AnexoContrato] = field(default_factory=list)
    obras_contrato_info: dict[int, ObraContratoInfo] = field(default_factory=dict)

    @property
    def numero_contrato(self) -> str | None:
        return self.contrato.numero_contrato if self.contrato else None

    @property
    def valor_contrato(self) -> ValorContrato | None:
        return self.contrato.valor if self.contrato else None

    @property
    def regional_nome(self) -> str | None:
        # area do contrato tem precedencia sobre a regional da obra
        if self.contrato and self.contrato.nome_area:
            return self.contrato.nome_area
        return self.obra.regional_nome
