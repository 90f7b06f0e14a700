# painel_obras/application/dtos/relatorio_dto.py
from __future__ import annotations

from pydantic import BaseModel

from painel_obras.application.services.relatorio_service import (
    LinhaFinanceira,
    RelatorioFinanceiro,
)


class FinanceiroStatusDTO(BaseModel):
    status_id: int | None
    status_nome: str
    total_obras: int
    obras_com_valor: int
    valor_total: str  # Decimal serializado como string


class FinanceiroRegionalDTO(BaseModel):
    regional_nome: str
    total_obras: int
    obras_com_valor: int
    valor_total: str


class TotaisGeraisDTO(BaseModel):
    total_obras: int
    obras_com_valor: int
    obras_sem_valor: int
    valor_total: str
    valor_medio: str


class RelatorioFinanceiroDTO(BaseModel):
    success: bool = True
    por_status: list[FinanceiroStatusDTO]
    por_regional: list[FinanceiroRegionalDTO]
    totais: TotaisGeraisDTO

    @classmethod
    def from_domain(cls, relatorio: RelatorioFinanceiro) -> RelatorioFinanceiroDTO:
        return cls(
            por_status=[_status(linha) for linha in relatorio.por_status],
            por_regional=[
                FinanceiroRegionalDTO(
                    regional_nome=linha.rotulo,
                    total_obras=linha.total_obras,
                    obras_com_valor=linha.obras_com_valor,
                    valor_total=str(linha.valor_total),
                )
                for linha in relatorio.por_regional
            ],
            totais=TotaisGeraisDTO(
                total_obras=relatorio.totais.total_obras,
                obras_com_valor=relatorio.totais.obras_com_valor,
                obras_sem_valor=relatorio.totais.obras_sem_valor,
                valor_total=str(relatorio.totais.valor_total),
                valor_medio=str(relatorio.totais.valor_medio),
            ),
        )


def _status(linha: LinhaFinanceira) -> FinanceiroStatusDTO:
    return FinanceiroStatusDTO(
        status_id=linha.chave,  # type: ignore[arg-type]
        status_nome=linha.rotulo,
        total_obras=linha.total_obras,
        obras_com_valor=linha.obras_com_valor,
        valor_total=str(linha.valor_total),
    )
