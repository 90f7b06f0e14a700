# painel_obras/domain/contrato/entities.py
from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import ValorContrato

SEM_INSTRUMENTO = "Sem instrumento"


@dataclass(frozen=True)
class ContratoPrincipal:
    """Linha da tabela `contratos` (pode nao existir no banco)."""

    id: int
    numero_contrato: str | None = None
    objeto: str | None = None
    valor: ValorContrato | None = None


@dataclass(frozen=True)
class ContratoHistorico:
    """Linha de `historico` com instrumento e area ja resolvidos."""

    id: int
    numero_contrato: str | None = None
    objeto: str | None = None
    valor: ValorContrato | None = None
    instrumento_nome: str | None = None
    nome_area: str | None = None


@dataclass(frozen=True)
class ConsultaPrincipal:
    """Resultado da busca em `contratos`. disponivel=False quando a tabela falhou."""

    disponivel: bool
    contratos: list[ContratoPrincipal] = field(default_factory=list)


@dataclass(frozen=True)
class ContratoResolvido:
    numero_contrato: str | None = None
    objeto: str | None = None
    valor: ValorContrato | None = None
    instrumento_nome: str | None = None
    nome_area: str | None = None

    @property
    def label(self) -> str:
        return f"{self.numero_contrato or 'N/A'} - {self.instrumento_nome or SEM_INSTRUMENTO}"
