from decimal import Decimal

from painel_obras.domain.contrato.entities import (
    ConsultaPrincipal,
    ContratoHistorico,
    ContratoPrincipal,
)
from painel_obras.domain.contrato.services import ids_de_contrato, resolver_contratos
from painel_obras.domain.contrato.value_objects import ValorContrato


def _valor(v: str) -> ValorContrato:
    return ValorContrato(Decimal(v))


def test_valor_do_historico_sempre_prevalece():
    principal = ConsultaPrincipal(
        disponivel=True,
        contratos=[ContratoPrincipal(id=10, numero_contrato="2021/045", objeto="Reforma", valor=_valor("100"))],
    )
    historicos = [ContratoHistorico(id=10, numero_contrato="2021/045-H", objeto="Reforma H", valor=_valor("120"))]

    mapa = resolver_contratos(principal, historicos)

    assert mapa[10].valor == _valor("120")


def test_numero_e_objeto_ficam_com_a_tabela_principal():
    principal = ConsultaPrincipal(
        disponivel=True,
        contratos=[ContratoPrincipal(id=10, numero_contrato="2021/045", objeto="Reforma")],
    )
    historicos = [ContratoHistorico(id=10, numero_contrato="OUTRO", objeto="Outro objeto", instrumento_nome="Convenio")]

    contrato = resolver_contratos(principal, historicos)[10]

    assert contrato.numero_contrato == "2021/045"
    assert contrato.objeto == "Reforma"
    assert contrato.instrumento_nome == "Convenio"


def test_historico_preenche_numero_ausente_na_principal():
    principal = ConsultaPrincipal(disponivel=True, contratos=[ContratoPrincipal(id=10, objeto="Reforma")])
    historicos = [ContratoHistorico(id=10, numero_contrato="2021/045")]

    contrato = resolver_contratos(principal, historicos)[10]

    assert contrato.numero_contrato == "2021/045"
    assert contrato.objeto == "Reforma"


def test_historico_sem_valor_apaga_valor_da_principal():
    # assimetria observada no sistema legado: valor vem sempre do historico
    principal = ConsultaPrincipal(disponivel=True, contratos=[ContratoPrincipal(id=10, valor=_valor("100"))])
    historicos = [ContratoHistorico(id=10, valor=None)]

    assert resolver_contratos(principal, historicos)[10].valor is None


def test_principal_indisponivel_usa_so_historico():
    historicos = [
        ContratoHistorico(
            id=30,
            numero_contrato="2022/007",
            objeto="Pavimentacao",
            valor=_valor("80000"),
            instrumento_nome="Convenio",
            nome_area="Area Norte",
        )
    ]

    mapa = resolver_contratos(ConsultaPrincipal(disponivel=False), historicos)

    assert mapa[30].numero_contrato == "2022/007"
    assert mapa[30].valor == _valor("80000")
    assert mapa[30].nome_area == "Area Norte"


def test_so_na_principal_fica_sem_instrumento():
    principal = ConsultaPrincipal(disponivel=True, contratos=[ContratoPrincipal(id=20, numero_contrato="2023/010")])

    contrato = resolver_contratos(principal, [])[20]

    assert contrato.instrumento_nome is None
    assert contrato.label == "2023/010 - Sem instrumento"


def test_historico_sem_instrumento_recebe_padrao():
    contrato = resolver_contratos(ConsultaPrincipal(disponivel=True), [ContratoHistorico(id=1)])[1]
    assert contrato.instrumento_nome == "Sem instrumento"
    assert contrato.nome_area is None


def test_id_ausente_das_duas_fontes_fica_fora_do_mapa():
    mapa = resolver_contratos(ConsultaPrincipal(disponivel=True), [ContratoHistorico(id=1)])
    assert 99 not in mapa


def test_ids_de_contrato_distintos_positivos():
    assert ids_de_contrato([10, None, 10, 0, -3, 20, 30, 20]) == [10, 20, 30]
