# painel_obras/infrastructure/repositories/duckdb_obra_repo.py
from __future__ import annotations

import duckdb

from painel_obras.domain.obra.entities import (
    ArquivoObra,
    Obra,
    ObraRelacionada,
    Regional,
    StatusCount,
)
from painel_obras.domain.obra.filtro import FiltroObras

# rn = 1 por contrato_numero; obras sem numero nunca sao deduplicadas entre si.
_OBRAS_RANQUEADAS = """
    SELECT *,
           ROW_NUMBER() OVER (PARTITION BY contrato_numero ORDER BY id DESC) AS rn
    FROM obra
"""
_SOMENTE_MAIS_RECENTE = "(o.rn = 1 OR o.contrato_numero IS NULL)"


def _where(filtro: FiltroObras) -> tuple[str, list[object]]:
    conditions, params = filtro.predicado("o")
    return "WHERE " + " AND ".join([_SOMENTE_MAIS_RECENTE, *conditions]), params


def _placeholders(n: int) -> str:
    return ", ".join("?" for _ in range(n))


class DuckDBObraRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def _fetchall(self, sql: str, params: list[object] | None = None) -> list[tuple]:  # type: ignore[type-arg]
        # Cursor por chamada: o agregador de arquivos consulta a partir de varias threads.
        with self._conn.cursor() as cur:
            return cur.execute(sql, params or []).fetchall()

    def listar_deduplicadas(self, filtro: FiltroObras) -> list[Obra]:
        where, params = _where(filtro)
        rows = self._fetchall(f"""
            SELECT o.id, o.contrato_id, o.contrato_numero, o.status_id, o.unidade_id,
                   r.nome AS regional_nome
            FROM ({_OBRAS_RANQUEADAS}) o
            LEFT JOIN regional r ON o.unidade_id = r.id
            {where}
            ORDER BY o.contrato_id DESC NULLS LAST, o.id DESC
        """, params)  # noqa: S608
        return [self._hidratar(r) for r in rows]

    def contar_por_status(self, filtro: FiltroObras) -> list[StatusCount]:
        """Mesma visao deduplicada e mesmo filtro da listagem."""
        where, params = _where(filtro)
        rows = self._fetchall(f"""
            SELECT o.status_id, count(*) AS total
            FROM ({_OBRAS_RANQUEADAS}) o
            {where}
            GROUP BY o.status_id
            ORDER BY o.status_id ASC NULLS LAST
        """, params)  # noqa: S608
        return [StatusCount(status_id=r[0], total=int(r[1])) for r in rows]

    def listar_regionais(self) -> list[Regional]:
        rows = self._fetchall("SELECT id, nome FROM regional ORDER BY nome ASC")
        return [Regional(id=int(r[0]), nome=str(r[1])) for r in rows]

    def listar_arquivos(self, obra_id: int) -> list[ArquivoObra]:
        rows = self._fetchall("""
            SELECT id, obra_id, tipo, nome_arquivo, path_servidor
            FROM arquivoobra
            WHERE obra_id = ?
            ORDER BY tipo ASC, id ASC
        """, [obra_id])
        return [self._hidratar_arquivo(r) for r in rows]

    def listar_arquivos_pdf(self, obra_id: int) -> list[ArquivoObra]:
        """Obras sem contrato: so PDFs, exceto o proprio contrato."""
        rows = self._fetchall("""
            SELECT id, obra_id, tipo, nome_arquivo, path_servidor
            FROM arquivoobra
            WHERE obra_id = ? AND extensao = 'pdf' AND tipo != 'Contrato'
            ORDER BY id ASC
        """, [obra_id])
        return [self._hidratar_arquivo(r) for r in rows]

    def listar_relacionadas(self, contrato_numero: str, obra_id: int) -> list[ObraRelacionada]:
        rows = self._fetchall("""
            SELECT id, contrato_id
            FROM obra
            WHERE contrato_numero = ? AND id != ?
            ORDER BY id ASC
        """, [contrato_numero, obra_id])
        return [ObraRelacionada(id=int(r[0]), contrato_id=r[1]) for r in rows]

    def listar_arquivos_de_obras(self, obra_ids: list[int]) -> list[ArquivoObra]:
        if not obra_ids:
            return []
        rows = self._fetchall(f"""
            SELECT id, obra_id, tipo, nome_arquivo, path_servidor
            FROM arquivoobra
            WHERE obra_id IN ({_placeholders(len(obra_ids))})
            ORDER BY obra_id ASC, tipo ASC, id ASC
        """, list(obra_ids))  # noqa: S608
        return [self._hidratar_arquivo(r) for r in rows]

    def _hidratar(self, row: tuple) -> Obra:  # type: ignore[type-arg]
        return Obra(
            id=int(row[0]),
            contrato_id=row[1],
            contrato_numero=str(row[2]) if row[2] is not None else None,
            status_id=row[3],
            unidade_id=row[4],
            regional_nome=str(row[5]) if row[5] else None,
        )

    def _hidratar_arquivo(self, row: tuple) -> ArquivoObra:  # type: ignore[type-arg]
        return ArquivoObra(
            id=int(row[0]),
            obra_id=int(row[1]),
            tipo=str(row[2]) if row[2] else None,
            nome_arquivo=str(row[3]) if row[3] else None,
            path_servidor=str(row[4]) if row[4] else None,
        )
