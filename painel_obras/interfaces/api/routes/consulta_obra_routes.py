# painel_obras/interfaces/api/routes/consulta_obra_routes.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from painel_obras.application.dtos.obra_dto import ConsultaObraDTO, ErroConsultaDTO
from painel_obras.application.dtos.relatorio_dto import RelatorioFinanceiroDTO
from painel_obras.application.services.consulta_obra_service import ConsultaObraService
from painel_obras.domain.obra.filtro import FiltroObras
from painel_obras.infrastructure.erros import classificar_erro
from painel_obras.infrastructure.log import log
from painel_obras.interfaces.api.dependencies import get_consulta_obra_service

router = APIRouter()

_RESPOSTAS_ERRO = {500: {"model": ErroConsultaDTO}}


def _resposta_erro(err: Exception) -> JSONResponse:
    log(f"Erro detalhado ao buscar obras: {err!r}")
    erro = classificar_erro(err)
    return JSONResponse(
        status_code=500,
        content=ErroConsultaDTO(error=erro.mensagem, details=erro.detalhes).model_dump(),
    )


@router.get("/consulta-obra", response_model=ConsultaObraDTO, responses=_RESPOSTAS_ERRO)
def get_consulta_obra(
    status_id: str | None = None,
    unidade_id: str | None = None,
    service: ConsultaObraService = Depends(get_consulta_obra_service),  # noqa: B008
) -> ConsultaObraDTO | JSONResponse:
    filtro = FiltroObras.from_query(status_id, unidade_id)
    try:
        resultado = service.consultar(filtro)
    except Exception as err:  # noqa: BLE001
        return _resposta_erro(err)
    return ConsultaObraDTO.from_domain(resultado)


@router.get(
    "/consulta-obra/relatorio-financeiro",
    response_model=RelatorioFinanceiroDTO,
    responses=_RESPOSTAS_ERRO,
)
def get_relatorio_financeiro(
    status_id: str | None = None,
    unidade_id: str | None = None,
    service: ConsultaObraService = Depends(get_consulta_obra_service),  # noqa: B008
) -> RelatorioFinanceiroDTO | JSONResponse:
    filtro = FiltroObras.from_query(status_id, unidade_id)
    try:
        relatorio = service.relatorio_financeiro(filtro)
    except Exception as err:  # noqa: BLE001
        return _resposta_erro(err)
    return RelatorioFinanceiroDTO.from_domain(relatorio)
