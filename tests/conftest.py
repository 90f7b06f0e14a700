# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import duckdb
import pytest

SCHEMA_DIR = Path(__file__).parent.parent / "painel_obras" / "infrastructure" / "schema"


def criar_banco_obras() -> duckdb.DuckDBPyConnection:
    """Banco de obras in-memory com dados deterministicos.

    - 2021/045: obras 1 e 2 (2 e a mais recente), contrato 10
    - 2023/010: obra 3, contrato 20 (so na tabela `contratos`)
    - obras 4 e 5 sem contrato
    - 2022/007: obra 6, contrato 30 (so no `historico`)
    - 2020/001: obra 7, contrato 99 (inexistente nas duas fontes)
    """
    conn = duckdb.connect(":memory:")
    conn.execute((SCHEMA_DIR / "obras.sql").read_text(encoding="utf-8"))

    conn.execute("""
        INSERT INTO regional VALUES
        (1, 'Regional Sul'),
        (2, 'Regional Norte')
    """)

    conn.execute("""
        INSERT INTO obra VALUES
        (1, 10, '2021/045', 3, 1),
        (2, 10, '2021/045', 3, 1),
        (3, 20, '2023/010', 6, 2),
        (4, NULL, NULL, 3, 2),
        (5, NULL, NULL, 1, 1),
        (6, 30, '2022/007', 3, 2),
        (7, 99, '2020/001', 5, 1)
    """)

    conn.execute("""
        INSERT INTO arquivoobra VALUES
        (1, 1, 'Relatorio', 'relatorio_antigo.pdf', 'uploads/1/relatorio.pdf', 'pdf'),
        (2, 2, 'Fiscal', 'nota.pdf', 'uploads/2/nota.pdf', 'pdf'),
        (3, 2, 'Medicaopdf', NULL, 'uploads/2/medicao.pdf', 'pdf'),
        (4, 4, 'Relatorio', 'r4.pdf', 'uploads/4/r4.pdf', 'pdf'),
        (5, 4, 'Contrato', 'c4.pdf', 'uploads/4/c4.pdf', 'pdf'),
        (6, 4, 'Foto', 'f4.jpg', 'uploads/4/f4.jpg', 'jpg'),
        (7, 3, 'Cronograma', 'cronograma.pdf', 'uploads/3/cronograma.pdf', 'pdf')
    """)
    return conn


def criar_banco_contratos(com_tabela_principal: bool = True) -> duckdb.DuckDBPyConnection:
    conn = duckdb.connect(":memory:")
    conn.execute((SCHEMA_DIR / "contratos.sql").read_text(encoding="utf-8"))

    if com_tabela_principal:
        conn.execute("""
            INSERT INTO contratos VALUES
            (10, '2021/045', 'Reforma do laboratorio', 100000.00),
            (20, '2023/010', 'Construcao de galpao', 50000.00)
        """)
    else:
        conn.execute("DROP TABLE contratos")

    conn.execute("""
        INSERT INTO instrumento VALUES
        (1, 'Contrato'),
        (2, 'Convenio')
    """)

    conn.execute("""
        INSERT INTO area VALUES
        (1, 'Area Sul', 'Ativo'),
        (2, 'Area Norte', 'Ativo'),
        (3, 'Area Extinta', 'Inativo')
    """)

    conn.execute("""
        INSERT INTO historico VALUES
        (10, '2021/045', 'Reforma do laboratorio (historico)', NULL, 120000.00, 1, 1),
        (30, '2022/007', 'Pavimentacao', NULL, 80000.00, 2, 2)
    """)

    conn.execute("""
        INSERT INTO arquivo VALUES
        (1, 'contrato_assinado.pdf', 'docs/10/contrato.pdf', 10),
        (2, 'aditivo.pdf', 'docs/30/aditivo.pdf', 30)
    """)
    return conn


@pytest.fixture(scope="session")
def obras_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    conn = criar_banco_obras()
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def contratos_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    conn = criar_banco_contratos()
    yield conn
    conn.close()


@pytest.fixture()
def contratos_db_sem_principal() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Instalacao antiga: sem a tabela `contratos`, so `historico`."""
    conn = criar_banco_contratos(com_tabela_principal=False)
    yield conn
    conn.close()
