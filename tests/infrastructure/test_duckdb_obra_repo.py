import duckdb

from painel_obras.domain.obra.filtro import FiltroObras
from painel_obras.infrastructure.repositories.duckdb_obra_repo import DuckDBObraRepo


def test_deduplica_por_numero_mantendo_maior_id(obras_db: duckdb.DuckDBPyConnection):
    obras = DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras())

    ids = [o.id for o in obras]
    assert 2 in ids
    assert 1 not in ids
    numeros = [o.contrato_numero for o in obras if o.contrato_numero is not None]
    assert len(numeros) == len(set(numeros))


def test_obras_sem_numero_nao_sao_deduplicadas(obras_db: duckdb.DuckDBPyConnection):
    obras = DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras())
    assert {o.id for o in obras if o.contrato_numero is None} == {4, 5}


def test_ordem_por_contrato_id_e_id_desc(obras_db: duckdb.DuckDBPyConnection):
    obras = DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras())
    assert [o.id for o in obras] == [7, 6, 3, 2, 5, 4]


def test_regional_nome_via_left_join(obras_db: duckdb.DuckDBPyConnection):
    obras = {o.id: o for o in DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras())}
    assert obras[2].regional_nome == "Regional Sul"
    assert obras[3].regional_nome == "Regional Norte"


def test_filtro_por_status(obras_db: duckdb.DuckDBPyConnection):
    obras = DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras(status_id=3))
    assert sorted(o.id for o in obras) == [2, 4, 6]


def test_filtro_por_status_e_unidade(obras_db: duckdb.DuckDBPyConnection):
    obras = DuckDBObraRepo(obras_db).listar_deduplicadas(FiltroObras(status_id=3, unidade_id=2))
    assert sorted(o.id for o in obras) == [4, 6]


def test_contagem_por_status_soma_igual_listagem(obras_db: duckdb.DuckDBPyConnection):
    repo = DuckDBObraRepo(obras_db)
    for filtro in [
        FiltroObras(),
        FiltroObras(status_id=3),
        FiltroObras(unidade_id=1),
        FiltroObras(status_id=3, unidade_id=2),
        FiltroObras(status_id=42),
    ]:
        total = sum(sc.total for sc in repo.contar_por_status(filtro))
        assert total == len(repo.listar_deduplicadas(filtro))


def test_contagem_por_status_ordenada(obras_db: duckdb.DuckDBPyConnection):
    contagem = DuckDBObraRepo(obras_db).contar_por_status(FiltroObras())
    assert [(sc.status_id, sc.total) for sc in contagem] == [(1, 1), (3, 3), (5, 1), (6, 1)]


def test_arquivos_da_obra(obras_db: duckdb.DuckDBPyConnection):
    arquivos = DuckDBObraRepo(obras_db).listar_arquivos(2)
    assert [a.id for a in arquivos] == [2, 3]
    assert arquivos[1].nome_arquivo is None


def test_arquivos_pdf_excluem_contrato_e_outras_extensoes(obras_db: duckdb.DuckDBPyConnection):
    arquivos = DuckDBObraRepo(obras_db).listar_arquivos_pdf(4)
    assert [a.id for a in arquivos] == [4]


def test_obras_relacionadas_excluem_a_propria(obras_db: duckdb.DuckDBPyConnection):
    relacionadas = DuckDBObraRepo(obras_db).listar_relacionadas("2021/045", 2)
    assert [(r.id, r.contrato_id) for r in relacionadas] == [(1, 10)]


def test_arquivos_de_varias_obras(obras_db: duckdb.DuckDBPyConnection):
    repo = DuckDBObraRepo(obras_db)
    assert [a.id for a in repo.listar_arquivos_de_obras([1, 3])] == [1, 7]
    assert repo.listar_arquivos_de_obras([]) == []


def test_regionais_por_nome(obras_db: duckdb.DuckDBPyConnection):
    regionais = DuckDBObraRepo(obras_db).listar_regionais()
    assert [r.nome for r in regionais] == ["Regional Norte", "Regional Sul"]
