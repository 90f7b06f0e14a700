# painel_obras/infrastructure/erros.py
"""Classificacao de erros para o payload de falha da API."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

import duckdb

_TABELA_RE = re.compile(r"Table with name \"?([\w.]+)\"? does not exist", re.IGNORECASE)
_CATALOGO_RE = re.compile(r"Catalog (with name )?\S+ does not exist", re.IGNORECASE)

MENSAGEM_GENERICA = "Erro ao buscar obras do banco de dados"


class TipoErro(Enum):
    CONEXAO_RECUSADA = "CONEXAO_RECUSADA"
    TABELA_INEXISTENTE = "TABELA_INEXISTENTE"
    BANCO_INEXISTENTE = "BANCO_INEXISTENTE"
    ERRO_SQL = "ERRO_SQL"
    GENERICO = "GENERICO"


@dataclass(frozen=True)
class ErroClassificado:
    tipo: TipoErro
    mensagem: str
    detalhes: str


def classificar_erro(err: BaseException) -> ErroClassificado:
    detalhes = str(err) or repr(err)

    if isinstance(err, (duckdb.ConnectionException, ConnectionRefusedError)):
        return ErroClassificado(
            TipoErro.CONEXAO_RECUSADA,
            "Nao foi possivel conectar ao banco de dados. Verifique se o banco esta disponivel.",
            detalhes,
        )
    if isinstance(err, duckdb.IOException):
        return ErroClassificado(TipoErro.BANCO_INEXISTENTE, "Banco de dados nao encontrado.", detalhes)
    if isinstance(err, duckdb.CatalogException):
        tabela = _TABELA_RE.search(detalhes)
        if tabela:
            return ErroClassificado(
                TipoErro.TABELA_INEXISTENTE,
                f"Tabela '{tabela.group(1)}' nao encontrada no banco de dados.",
                detalhes,
            )
        if _CATALOGO_RE.search(detalhes):
            return ErroClassificado(TipoErro.BANCO_INEXISTENTE, "Banco de dados nao encontrado.", detalhes)
    if isinstance(err, duckdb.Error):
        return ErroClassificado(TipoErro.ERRO_SQL, f"Erro SQL: {detalhes}", detalhes)
    return ErroClassificado(TipoErro.GENERICO, MENSAGEM_GENERICA, detalhes)
