# painel_obras/infrastructure/repositories/duckdb_contrato_repo.py
from __future__ import annotations

import duckdb

from painel_obras.domain.contrato.entities import (
    ConsultaPrincipal,
    ContratoHistorico,
    ContratoPrincipal,
)
from painel_obras.domain.contrato.value_objects import ValorContrato
from painel_obras.domain.obra.entities import ArquivoContratoBase, Regional
from painel_obras.infrastructure.log import log


def _placeholders(n: int) -> str:
    return ", ".join("?" for _ in range(n))


class DuckDBContratoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def _fetchall(self, sql: str, params: list[object] | None = None) -> list[tuple]:  # type: ignore[type-arg]
        # Cursor por chamada: o agregador de arquivos consulta a partir de varias threads.
        with self._conn.cursor() as cur:
            return cur.execute(sql, params or []).fetchall()

    def buscar_principais(self, ids: list[int]) -> ConsultaPrincipal:
        """Tabela `contratos` pode nao existir: falha vira disponivel=False, nunca excecao."""
        if not ids:
            return ConsultaPrincipal(disponivel=True)
        try:
            rows = self._fetchall(f"""
                SELECT id, numero_contrato, objeto, valor
                FROM contratos
                WHERE id IN ({_placeholders(len(ids))})
            """, list(ids))  # noqa: S608
        except duckdb.Error as err:
            log(f"Tabela `contratos` nao disponivel ({err}), usando `historico` como fallback")
            return ConsultaPrincipal(disponivel=False)

        log(f"Contratos encontrados na tabela contratos: {len(rows)}")
        return ConsultaPrincipal(
            disponivel=True,
            contratos=[
                ContratoPrincipal(
                    id=int(r[0]),
                    numero_contrato=str(r[1]) if r[1] else None,
                    objeto=str(r[2]) if r[2] else None,
                    valor=ValorContrato.de_coluna(r[3]),
                )
                for r in rows
            ],
        )

    def buscar_historicos(self, ids: list[int]) -> list[ContratoHistorico]:
        if not ids:
            return []
        rows = self._fetchall(f"""
            SELECT h.id, h.numero_contratoh, h.objetoh, h.valorh, i.nome_instrumento, a.nome_area
            FROM historico h
            LEFT JOIN instrumento i ON i.id = h.instrumento_id
            LEFT JOIN area a ON a.id = h.area_idh
            WHERE h.id IN ({_placeholders(len(ids))})
            ORDER BY TRY_CAST(split_part(h.numero_contratoh, '/', 1) AS INTEGER) DESC NULLS LAST,
                     h.id DESC
        """, list(ids))  # noqa: S608
        log(f"Contratos encontrados no historico: {len(rows)}")
        return [
            ContratoHistorico(
                id=int(r[0]),
                numero_contrato=str(r[1]) if r[1] else None,
                objeto=str(r[2]) if r[2] else None,
                valor=ValorContrato.de_coluna(r[3]),
                instrumento_nome=str(r[4]) if r[4] else None,
                nome_area=str(r[5]) if r[5] else None,
            )
            for r in rows
        ]

    def listar_arquivos_base(self, contrato_numero: str) -> list[ArquivoContratoBase]:
        """Arquivos de todos os registros de `historico` com o mesmo numero de contrato."""
        rows = self._fetchall("""
            SELECT a.historico_id, a.nome_arquivo, a.path_servidor, h.valorh
            FROM arquivo a
            INNER JOIN historico h ON a.historico_id = h.id
            WHERE h.numero_contratoh = ?
            ORDER BY a.historico_id ASC, a.id ASC
        """, [contrato_numero])
        return [
            ArquivoContratoBase(
                historico_id=int(r[0]),
                nome_arquivo=str(r[1]) if r[1] else None,
                path_servidor=str(r[2]) if r[2] else None,
                valor=ValorContrato.de_coluna(r[3]),
            )
            for r in rows
        ]

    def listar_areas_ativas(self) -> list[Regional]:
        """Lista vazia quando `area` falha: o chamador cai para `regional` do banco de obras."""
        try:
            rows = self._fetchall("""
                SELECT id, nome_area AS nome
                FROM area
                WHERE situacao_area = 'Ativo'
                ORDER BY nome_area ASC
            """)
        except duckdb.Error as err:
            log(f"Nao foi possivel listar `area` ({err}), usando `regional` como fallback")
            return []
        return [Regional(id=int(r[0]), nome=str(r[1])) for r in rows]
