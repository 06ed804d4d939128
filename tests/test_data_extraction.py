# tests/test_data_extraction.py

from datetime import date
from decimal import Decimal

import pytest

from rh_beneficios import data_extraction
from rh_beneficios.data_validation import TipoFeriado, TipoTransporte
from rh_beneficios.shared.errors import ErroDeValidacao


def test_carregar_cadastro_completo(data_dir):
    # Act
    dados = data_extraction.carregar_cadastro(str(data_dir))
    # Assert
    assert [f.id for f in dados.funcionarios] == ["f1", "f2", "f3", "f4"]
    assert [s.valor_flash_diario for s in dados.setores] == [
        Decimal("38.26"), Decimal("35.00"), Decimal("19.13"),
    ]
    assert [f.tipo for f in dados.feriados] == [TipoFeriado.FERIADO, TipoFeriado.FERIADO]
    assert dados.faltas[0].faltas == 1
    assert dados.coparticipacoes[0].valor == Decimal("150.00")


def test_funcionarios_lidos_com_virgula_decimal_e_colunas_vazias(data_dir):
    # Act
    ana, bruno, carla, davi = data_extraction.fetch_funcionarios(str(data_dir))
    # Assert
    assert ana.valor_passagem_bhbus == Decimal("4.50")
    assert ana.aniversario == date(1990, 5, 10)
    assert ana.dias_home_office_no_mes == 2
    assert bruno.id_flash is None
    assert bruno.tipo_transporte == TipoTransporte.BHBUS
    assert carla.tipo_transporte == TipoTransporte.NENHUM
    assert carla.ativo is True
    assert davi.ativo is False


def test_arquivos_de_lancamento_sao_opcionais(data_dir):
    # Arrange
    for nome in ("feriados.csv", "faltas.csv", "coparticipacoes.csv"):
        (data_dir / nome).unlink()
    # Act
    dados = data_extraction.carregar_cadastro(str(data_dir))
    # Assert
    assert dados.feriados == []
    assert dados.faltas == []
    assert dados.coparticipacoes == []
    assert len(dados.funcionarios) == 4


@pytest.mark.parametrize("arquivo", ["funcionarios.csv", "setores.csv"])
def test_cadastro_obrigatorio_ausente(data_dir, arquivo):
    (data_dir / arquivo).unlink()
    with pytest.raises(FileNotFoundError, match=arquivo):
        data_extraction.carregar_cadastro(str(data_dir))


def test_linha_invalida_interrompe_a_carga(data_dir):
    # Arrange: setor sem valor diário
    (data_dir / "setores.csv").write_text(
        "id;nome;valor_flash_diario\ns1;Técnico;38,26\ns2;Administrativo;\n", encoding="utf-8"
    )
    # Act / Assert
    with pytest.raises(ErroDeValidacao, match="s2"):
        data_extraction.fetch_setores(str(data_dir))


def test_usa_diretorio_da_configuracao(data_dir, monkeypatch):
    monkeypatch.setattr(data_extraction.settings, "DATA_DIR", str(data_dir))
    dados = data_extraction.carregar_cadastro()
    assert len(dados.setores) == 3


def test_arquivo_vazio_e_tratado_como_sem_registros(data_dir):
    # Arrange: arquivo existe mas tem 0 bytes
    (data_dir / "faltas.csv").write_bytes(b"")
    # Act
    dados = data_extraction.carregar_cadastro(str(data_dir))
    # Assert
    assert dados.faltas == []
    assert len(dados.funcionarios) == 4
