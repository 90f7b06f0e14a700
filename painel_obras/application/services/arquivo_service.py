# painel_obras/application/services/arquivo_service.py
"""Agregacao de arquivos por obra.

Cada obra e processada em uma thread do pool. Falha em uma obra degrada
so aquela obra para listas vazias; as demais seguem normalmente.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from painel_obras.domain.contrato.entities import SEM_INSTRUMENTO, ContratoResolvido
from painel_obras.domain.contrato.repository import ContratoRepository
from painel_obras.domain.obra.entities import (
    AnexoContrato,
    AnexoObra,
    ArquivoContratoBase,
    ArquivoObra,
    Obra,
    ObraAgregada,
    ObraContratoInfo,
    ObraRelacionada,
)
from painel_obras.domain.obra.repository import ObraRepository
from painel_obras.infrastructure.log import log

_SEM_NOME = "Arquivo sem nome"


class AgregadorArquivos:
    def __init__(
        self,
        obra_repo: ObraRepository,
        contrato_repo: ContratoRepository,
        url_base_obra: str,
        url_base_contrato: str,
        max_workers: int = 8,
    ) -> None:
        self._obra_repo = obra_repo
        self._contrato_repo = contrato_repo
        self._url_base_obra = url_base_obra
        self._url_base_contrato = url_base_contrato
        self._max_workers = max(1, max_workers)

    def agregar(
        self,
        obras: list[Obra],
        contratos: dict[int, ContratoResolvido],
    ) -> list[ObraAgregada]:
        """Resultado na mesma ordem de `obras`, apos todas as buscas terminarem."""
        if not obras:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            return list(pool.map(lambda obra: self._agregar_obra(obra, contratos), obras))

    def _agregar_obra(
        self,
        obra: Obra,
        contratos: dict[int, ContratoResolvido],
    ) -> ObraAgregada:
        if not obra.tem_contrato_valido:
            return self._agregar_sem_contrato(obra)

        contrato = contratos.get(int(obra.contrato_id))  # type: ignore[arg-type]
        if contrato is None:
            log(f"Contrato {obra.contrato_id} nao encontrado para obra {obra.id}")

        try:
            arquivos = self._obra_repo.listar_arquivos(obra.id)
            if not (contrato and contrato.numero_contrato and obra.contrato_numero):
                return ObraAgregada(
                    obra=obra,
                    contrato=contrato,
                    arquivos=[self._anexo(a, "Arquivo") for a in arquivos],
                )

            relacionadas = self._obra_repo.listar_relacionadas(obra.contrato_numero, obra.id)
            arquivos_contrato = self._obra_repo.listar_arquivos_de_obras([r.id for r in relacionadas])
            arquivos_base = self._arquivos_base(obra.contrato_numero)
        except Exception as err:  # noqa: BLE001
            log(f"Erro ao buscar arquivos da obra {obra.id}: {err!r}")
            return ObraAgregada(obra=obra, contrato=contrato)

        return ObraAgregada(
            obra=obra,
            contrato=contrato,
            arquivos=[self._anexo(a, "Arquivo") for a in arquivos],
            arquivos_contrato=[self._anexo(a, "Arquivo") for a in arquivos_contrato],
            arquivos_contrato_base=[self._anexo_contrato(a) for a in arquivos_base],
            obras_contrato_info=_procedencia(obra, contrato, relacionadas, contratos),
        )

    def _agregar_sem_contrato(self, obra: Obra) -> ObraAgregada:
        try:
            arquivos = self._obra_repo.listar_arquivos_pdf(obra.id)
        except Exception as err:  # noqa: BLE001
            log(f"Erro ao buscar arquivos da obra {obra.id}: {err!r}")
            arquivos = []
        return ObraAgregada(obra=obra, arquivos=[self._anexo(a, "PDF") for a in arquivos])

    def _arquivos_base(self, contrato_numero: str) -> list[ArquivoContratoBase]:
        """Falha na base de contratos zera so esta lista."""
        try:
            return self._contrato_repo.listar_arquivos_base(contrato_numero)
        except Exception as err:  # noqa: BLE001
            log(f"Erro ao buscar arquivos da base contratos para {contrato_numero}: {err!r}")
            return []

    def _anexo(self, arquivo: ArquivoObra, tipo_padrao: str) -> AnexoObra:
        return AnexoObra(
            id=arquivo.id,
            tipo=arquivo.tipo or tipo_padrao,
            nome=arquivo.nome_arquivo or _SEM_NOME,
            url=f"{self._url_base_obra}{arquivo.path_servidor or ''}",
            obra_id=arquivo.obra_id,
        )

    def _anexo_contrato(self, arquivo: ArquivoContratoBase) -> AnexoContrato:
        return AnexoContrato(
            nome=arquivo.nome_arquivo or _SEM_NOME,
            url=f"{self._url_base_contrato}{arquivo.path_servidor or ''}",
            historico_id=arquivo.historico_id,
            valor=arquivo.valor,
        )


def _procedencia(
    obra: Obra,
    contrato: ContratoResolvido,
    relacionadas: list[ObraRelacionada],
    contratos: dict[int, ContratoResolvido],
) -> dict[int, ObraContratoInfo]:
    """obra_id -> de qual contrato/instrumento vem cada arquivo da lista agregada."""
    info = {obra.id: _info_contrato(contrato)}
    for rel in relacionadas:
        contrato_rel = contratos.get(rel.contrato_id) if rel.contrato_id is not None else None
        if contrato_rel is not None:
            info[rel.id] = _info_contrato(contrato_rel)
        else:
            info[rel.id] = ObraContratoInfo(
                contrato_numero=obra.contrato_numero or "N/A",
                instrumento_nome="Sem contrato",
                label=f"Obra #{rel.id} - Sem contrato",
            )
    return info


def _info_contrato(contrato: ContratoResolvido) -> ObraContratoInfo:
    return ObraContratoInfo(
        contrato_numero=contrato.numero_contrato or "N/A",
        instrumento_nome=contrato.instrumento_nome or SEM_INSTRUMENTO,
        label=contrato.label,
    )
