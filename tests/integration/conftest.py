# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def client(
    obras_db: duckdb.DuckDBPyConnection,
    contratos_db: duckdb.DuckDBPyConnection,
) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com os dois bancos DuckDB in-memory injetados."""
    from painel_obras.infrastructure import duckdb_connection
    duckdb_connection.set_connection(duckdb_connection.OBRAS, obras_db)
    duckdb_connection.set_connection(duckdb_connection.CONTRATOS, contratos_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from painel_obras.infrastructure.config import get_settings
    get_settings.cache_clear()

    from painel_obras.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def trocar_banco_contratos(
    client: TestClient,
    contratos_db: duckdb.DuckDBPyConnection,
) -> Generator[object, None, None]:
    """Substitui o banco de contratos durante um teste e restaura o original depois."""
    from painel_obras.infrastructure import duckdb_connection

    def _trocar(conn: duckdb.DuckDBPyConnection) -> None:
        duckdb_connection.set_connection(duckdb_connection.CONTRATOS, conn)

    yield _trocar
    duckdb_connection.set_connection(duckdb_connection.CONTRATOS, contratos_db)
