# painel_obras/domain/obra/enums.py
from __future__ import annotations

from enum import IntEnum


class StatusObra(IntEnum):
    SEM_PAGAMENTO = 1
    NAO_INICIADO = 2
    EM_ANDAMENTO = 3
    INICIO_DE_PARALISACAO = 4
    PARALISADO = 5
    CONCLUIDO = 6
    ELABORACAO_DE_PROJETOS = 7

    @property
    def nome(self) -> str:
        return _NOMES_STATUS[self]


_NOMES_STATUS: dict[StatusObra, str] = {
    StatusObra.SEM_PAGAMENTO: "Sem Pagamento",
    StatusObra.NAO_INICIADO: "Nao Iniciado",
    StatusObra.EM_ANDAMENTO: "Em Andamento",
    StatusObra.INICIO_DE_PARALISACAO: "Inicio de Paralisacao",
    StatusObra.PARALISADO: "Paralisado",
    StatusObra.CONCLUIDO: "Concluido",
    StatusObra.ELABORACAO_DE_PROJETOS: "Elaboracao de Projetos",
}

# Tipos gravados em arquivoobra.tipo -> rotulo exibido. Tipos desconhecidos passam inalterados.
_ROTULOS_TIPO_ARQUIVO: dict[str, str] = {
    "Relatorio": "Relatorio de Acompanhamento",
    "Fiscal": "Nota Fiscal",
    "Cronograma": "Cronograma de Acompanhamento",
    "Medicaopdf": "Medicao",
    "Aditivo": "Aditivo da Obra",
    "projeto_aditivado": "Projeto Aditivado",
}


def nome_status(status_id: int | None) -> str:
    try:
        return StatusObra(status_id).nome
    except ValueError:
        return f"Status {status_id}"


def rotulo_tipo_arquivo(tipo: str) -> str:
    return _ROTULOS_TIPO_ARQUIVO.get(tipo, tipo)
