# tests/test_gerador_calendario.py

from datetime import date

import pytest

from rh_beneficios.calendario.gerador import (
    calcular_emendas,
    calcular_pascoa,
    gerar_feriados,
    novos_feriados,
)
from rh_beneficios.data_validation import FeriadoOuEmenda, TipoFeriado


def criar_feriado(data: date, descricao: str = "Feriado Teste", tipo=TipoFeriado.FERIADO):
    return FeriadoOuEmenda(data=data, tipo=tipo, descricao=descricao)


@pytest.mark.parametrize(
    "ano, pascoa_esperada",
    [
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2026, date(2026, 4, 5)),
        (2019, date(2019, 4, 21)),
        (2008, date(2008, 3, 23)),
    ],
)
def test_pascoa_bate_com_datas_publicadas(ano, pascoa_esperada):
    assert calcular_pascoa(ano) == pascoa_esperada


@pytest.mark.parametrize("ano", [1999, 2024, 2025, 2038])
def test_ano_tem_nove_fixos_e_tres_moveis(ano):
    # Act
    feriados = [f for f in gerar_feriados(ano) if f.tipo == TipoFeriado.FERIADO]
    # Assert
    assert len(feriados) == 12
    descricoes = {f.descricao for f in feriados}
    assert {"Carnaval", "Sexta-feira Santa", "Corpus Christi"} <= descricoes
    assert all(f.data.year == ano for f in feriados)


def test_feriados_moveis_derivados_da_pascoa_2025():
    # Arrange
    por_descricao = {f.descricao: f.data for f in gerar_feriados(2025)}
    # Assert: Páscoa em 20/04/2025
    assert por_descricao["Carnaval"] == date(2025, 3, 4)
    assert por_descricao["Sexta-feira Santa"] == date(2025, 4, 18)
    assert por_descricao["Corpus Christi"] == date(2025, 6, 19)


def test_carnaval_em_fevereiro_quando_pascoa_e_cedo():
    # Páscoa 2024 em 31/03 -> Carnaval em 13/02 (terça)
    por_descricao = {f.descricao: f.data for f in gerar_feriados(2024)}
    assert por_descricao["Carnaval"] == date(2024, 2, 13)
    assert por_descricao["Emenda Carnaval"] == date(2024, 2, 12)


def test_emendas_de_2025():
    # Act
    emendas = [f for f in gerar_feriados(2025) if f.tipo == TipoFeriado.EMENDA]
    # Assert
    assert [(e.data, e.descricao) for e in emendas] == [
        (date(2025, 3, 3), "Emenda Carnaval"),
        (date(2025, 5, 2), "Emenda Dia do Trabalho"),
        (date(2025, 6, 20), "Emenda Corpus Christi"),
        (date(2025, 11, 21), "Emenda Consciência Negra"),
        (date(2025, 12, 26), "Emenda Natal"),
    ]


def test_lista_gerada_ordenada_por_data():
    feriados = gerar_feriados(2025)
    datas = [f.data for f in feriados]
    assert datas == sorted(datas)
    assert len(feriados) == 17


def test_feriado_na_quinta_gera_emenda_na_sexta():
    # Arrange: 01/05/2025 é quinta-feira
    feriado = criar_feriado(date(2025, 5, 1), "Dia do Trabalho")
    # Act
    emendas = calcular_emendas([feriado])
    # Assert
    assert len(emendas) == 1
    assert emendas[0].data == date(2025, 5, 2)
    assert emendas[0].tipo == TipoFeriado.EMENDA
    assert emendas[0].descricao == "Emenda Dia do Trabalho"


def test_feriado_na_terca_gera_emenda_na_segunda():
    # Arrange: 04/03/2025 é terça-feira
    feriado = criar_feriado(date(2025, 3, 4), "Carnaval")
    # Act
    emendas = calcular_emendas([feriado])
    # Assert
    assert [e.data for e in emendas] == [date(2025, 3, 3)]


@pytest.mark.parametrize(
    "data_feriado",
    [
        date(2025, 4, 21),  # segunda
        date(2025, 1, 1),  # quarta
        date(2025, 4, 18),  # sexta
        date(2025, 11, 15),  # sábado
        date(2025, 9, 7),  # domingo
    ],
)
def test_feriado_em_outros_dias_nao_gera_emenda(data_feriado):
    assert calcular_emendas([criar_feriado(data_feriado)]) == []


def test_emendas_repetidas_nao_sao_removidas():
    # Arrange: dois feriados na mesma terça
    feriados = [
        criar_feriado(date(2025, 3, 4), "Carnaval"),
        criar_feriado(date(2025, 3, 4), "Feriado Municipal"),
    ]
    # Act
    emendas = calcular_emendas(feriados)
    # Assert
    assert [e.data for e in emendas] == [date(2025, 3, 3), date(2025, 3, 3)]


def test_geracao_e_pura():
    assert gerar_feriados(2025) == gerar_feriados(2025)


def test_novos_feriados_ignora_datas_ja_cadastradas():
    # Arrange
    existentes = [
        FeriadoOuEmenda(id="f1", data=date(2025, 1, 1), tipo=TipoFeriado.FERIADO, descricao="Ano Novo"),
        FeriadoOuEmenda(id="f2", data=date(2025, 6, 20), tipo=TipoFeriado.FERIADO, descricao="Aniversário da Cidade"),
    ]
    # Act
    novos = novos_feriados(existentes, gerar_feriados(2025))
    # Assert
    datas_novas = {f.data for f in novos}
    assert date(2025, 1, 1) not in datas_novas
    assert date(2025, 6, 20) not in datas_novas
    assert len(novos) == 15
