# painel_obras/interfaces/api/dependencies.py
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from painel_obras.application.services.consulta_obra_service import (
    ConsultaObraService,
    Repositorios,
)
from painel_obras.infrastructure.config import get_settings
from painel_obras.infrastructure.duckdb_connection import abrir_conexoes
from painel_obras.infrastructure.repositories.duckdb_contrato_repo import DuckDBContratoRepo
from painel_obras.infrastructure.repositories.duckdb_obra_repo import DuckDBObraRepo


@contextmanager
def abrir_repositorios() -> Iterator[Repositorios]:
    with abrir_conexoes() as conexoes:
        yield Repositorios(
            obra=DuckDBObraRepo(conexoes.obras),
            contrato=DuckDBContratoRepo(conexoes.contratos),
        )


def get_consulta_obra_service() -> ConsultaObraService:
    settings = get_settings()
    return ConsultaObraService(
        abrir_repositorios=abrir_repositorios,
        url_base_obra=settings.arquivo_obra_base_url,
        url_base_contrato=settings.arquivo_contrato_base_url,
        max_workers=settings.max_workers_arquivos,
    )
