# painel_obras/application/dtos/obra_dto.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from painel_obras.application.services.consulta_obra_service import ResultadoConsulta
from painel_obras.domain.obra.entities import (
    AnexoContrato,
    AnexoObra,
    ObraAgregada,
    Regional,
    StatusCount,
)
from painel_obras.domain.obra.enums import nome_status, rotulo_tipo_arquivo


class ArquivoObraDTO(BaseModel):
    id: int
    tipo: str
    tipo_label: str
    nome: str
    url: str
    obra_id: int

    @classmethod
    def from_domain(cls, anexo: AnexoObra) -> ArquivoObraDTO:
        return cls(
            id=anexo.id,
            tipo=anexo.tipo,
            tipo_label=rotulo_tipo_arquivo(anexo.tipo),
            nome=anexo.nome,
            url=anexo.url,
            obra_id=anexo.obra_id,
        )


class ArquivoContratoBaseDTO(BaseModel):
    nome: str
    url: str
    historico_id: int
    valor: str | None  # Decimal serializado como string

    @classmethod
    def from_domain(cls, anexo: AnexoContrato) -> ArquivoContratoBaseDTO:
        return cls(
            nome=anexo.nome,
            url=anexo.url,
            historico_id=anexo.historico_id,
            valor=str(anexo.valor.valor) if anexo.valor else None,
        )


class ObraContratoInfoDTO(BaseModel):
    contrato_numero: str
    instrumento_nome: str
    label: str


class ObraDTO(BaseModel):
    id: int
    contrato_id: int | None
    contrato_numero: str | None
    status_id: int | None
    status_nome: str
    unidade_id: int | None
    regional_nome: str | None
    numero_contrato: str | None
    objeto_contrato: str | None
    valor_contrato: str | None  # Decimal serializado como string
    instrumento_nome: str | None
    arquivos: list[ArquivoObraDTO]
    arquivos_contrato: list[ArquivoObraDTO]
    arquivos_contrato_base: list[ArquivoContratoBaseDTO]
    obras_contrato_info: dict[int, ObraContratoInfoDTO]

    @classmethod
    def from_domain(cls, agregada: ObraAgregada) -> ObraDTO:
        obra = agregada.obra
        contrato = agregada.contrato
        valor = agregada.valor_contrato
        return cls(
            id=obra.id,
            contrato_id=obra.contrato_id,
            contrato_numero=obra.contrato_numero,
            status_id=obra.status_id,
            status_nome=nome_status(obra.status_id),
            unidade_id=obra.unidade_id,
            regional_nome=agregada.regional_nome,
            numero_contrato=agregada.numero_contrato,
            objeto_contrato=contrato.objeto if contrato else None,
            valor_contrato=str(valor.valor) if valor else None,
            instrumento_nome=contrato.instrumento_nome if contrato else None,
            arquivos=[ArquivoObraDTO.from_domain(a) for a in agregada.arquivos],
            arquivos_contrato=[ArquivoObraDTO.from_domain(a) for a in agregada.arquivos_contrato],
            arquivos_contrato_base=[
                ArquivoContratoBaseDTO.from_domain(a) for a in agregada.arquivos_contrato_base
            ],
            obras_contrato_info={
                obra_id: ObraContratoInfoDTO(
                    contrato_numero=info.contrato_numero,
                    instrumento_nome=info.instrumento_nome,
                    label=info.label,
                )
                for obra_id, info in agregada.obras_contrato_info.items()
            },
        )


class StatusCountDTO(BaseModel):
    status_id: int | None
    status_nome: str
    total: int

    @classmethod
    def from_domain(cls, sc: StatusCount) -> StatusCountDTO:
        return cls(status_id=sc.status_id, status_nome=nome_status(sc.status_id), total=sc.total)


class RegionalDTO(BaseModel):
    id: int
    nome: str

    @classmethod
    def from_domain(cls, regional: Regional) -> RegionalDTO:
        return cls(id=regional.id, nome=regional.nome)


class ConsultaObraDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    obras: list[ObraDTO]
    status_count: list[StatusCountDTO] = Field(alias="statusCount")
    regionais: list[RegionalDTO]

    @classmethod
    def from_domain(cls, resultado: ResultadoConsulta) -> ConsultaObraDTO:
        return cls(
            obras=[ObraDTO.from_domain(o) for o in resultado.obras],
            status_count=[StatusCountDTO.from_domain(s) for s in resultado.status_count],
            regionais=[RegionalDTO.from_domain(r) for r in resultado.regionais],
        )


class ErroConsultaDTO(BaseModel):
    success: bool = False
    error: str
    details: str
