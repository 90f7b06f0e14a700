# painel_obras/infrastructure/duckdb_connection.py
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import duckdb

from .config import get_settings
from .log import log

OBRAS = "obras"
CONTRATOS = "contratos"

_connections: dict[str, duckdb.DuckDBPyConnection] = {}


def _path_do_store(store: str) -> str:
    settings = get_settings()
    if store == OBRAS:
        return settings.duckdb_obras_path
    if store == CONTRATOS:
        return settings.duckdb_contratos_path
    raise ValueError(f"Store desconhecido: {store}")


def get_connection(store: str) -> duckdb.DuckDBPyConnection:
    """Conexao de processo do store (o "pool"). Requisicoes usam cursores derivados dela."""
    if store not in _connections:
        path = _path_do_store(store)
        read_only = path != ":memory:"
        _connections[store] = duckdb.connect(path, read_only=read_only)
    return _connections[store]


def set_connection(store: str, conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    _path_do_store(store)
    _connections[store] = conn


@dataclass(frozen=True)
class ConexoesRequisicao:
    obras: duckdb.DuckDBPyConnection
    contratos: duckdb.DuckDBPyConnection


@contextmanager
def abrir_conexoes() -> Iterator[ConexoesRequisicao]:
    """Uma conexao por store, liberadas exatamente uma vez em qualquer saida.

    Store que falhou ao abrir nao e fechado.
    """
    conn_obras: duckdb.DuckDBPyConnection | None = None
    conn_contratos: duckdb.DuckDBPyConnection | None = None
    try:
        conn_obras = get_connection(OBRAS).cursor()
        log("Conexao com banco de obras estabelecida")
        conn_contratos = get_connection(CONTRATOS).cursor()
        log("Conexao com banco de contratos estabelecida")
        yield ConexoesRequisicao(obras=conn_obras, contratos=conn_contratos)
    finally:
        if conn_obras is not None:
            conn_obras.close()
        if conn_contratos is not None:
            conn_contratos.close()
