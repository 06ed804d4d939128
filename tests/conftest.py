# tests/conftest.py

from datetime import date
from pathlib import Path

import pytest

from rh_beneficios.data_validation import (
    FeriadoOuEmenda,
    Funcionario,
    LancamentoCoparticipacao,
    LancamentoFalta,
    Setor,
    TipoFeriado,
)

# Abril/2025: 30 dias, 8 de fim de semana, Sexta-feira Santa (18) e Tiradentes (21) -> 20 dias úteis
MES_TESTE = "2025-04"


@pytest.fixture
def setores():
    return [
        Setor(id="s1", nome="Técnico", valor_flash_diario="38.26"),
        Setor(id="s2", nome="Administrativo", valor_flash_diario="35.00"),
        Setor(id="s3", nome="Estagiário", valor_flash_diario="19.13"),
    ]


@pytest.fixture
def funcionarios():
    return [
        Funcionario(
            id="f1", nome="Ana Flash", cpf="111.111.111-11", setor="s1", salario_base="3000.00",
            id_flash="FL-001", tipo_transporte="Flash", dias_home_office_no_mes=2,
            valor_passagem_bhbus="4.50",
        ),
        Funcionario(
            id="f2", nome="Bruno BHBus", cpf="222.222.222-22", setor="s2", salario_base="4200.00",
            tipo_transporte="BHBus", valor_passagem_bhbus="5.75",
        ),
        Funcionario(
            id="f3", nome="Carla Estágio", cpf="333.333.333-33", setor="s3", salario_base="1500.00",
        ),
        Funcionario(
            id="f4", nome="Davi Desligado", cpf="444.444.444-44", setor="s9", salario_base="2500.00",
            ativo=False,
        ),
    ]


@pytest.fixture
def feriados():
    return [
        FeriadoOuEmenda(id="h1", data=date(2025, 4, 18), tipo=TipoFeriado.FERIADO, descricao="Sexta-feira Santa"),
        FeriadoOuEmenda(id="h2", data=date(2025, 4, 21), tipo=TipoFeriado.FERIADO, descricao="Tiradentes"),
        FeriadoOuEmenda(id="h3", data=date(2025, 5, 1), tipo=TipoFeriado.FERIADO, descricao="Dia do Trabalho"),
    ]


@pytest.fixture
def faltas():
    return [
        LancamentoFalta(funcionario_id="f2", mes=MES_TESTE, faltas=1),
        LancamentoFalta(funcionario_id="f2", mes="2025-03", faltas=5),
    ]


@pytest.fixture
def coparticipacoes():
    return [LancamentoCoparticipacao(funcionario_id="f3", mes=MES_TESTE, valor="150.00")]


def _gravar(caminho: Path, linhas):
    caminho.write_text("\n".join(linhas) + "\n", encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    """Diretório de dados no padrão das planilhas do RH (';' e vírgula decimal)."""
    _gravar(tmp_path / "setores.csv", [
        "id;nome;valor_flash_diario",
        "s1;Técnico;38,26",
        "s2;Administrativo;35,00",
        "s3;Estagiário;19,13",
    ])
    _gravar(tmp_path / "funcionarios.csv", [
        "id;nome;cpf;setor;salario_base;id_flash;tipo_transporte;dias_home_office_no_mes;valor_passagem_bhbus;ativo;aniversario",
        "f1;Ana Flash;111.111.111-11;s1;3000,00;FL-001;Flash;2;4,50;true;1990-05-10",
        "f2;Bruno BHBus;222.222.222-22;s2;4200,00;;BHBus;;5,75;true;",
        "f3;Carla Estágio;333.333.333-33;s3;1500,00;;;;;;",
        "f4;Davi Desligado;444.444.444-44;s9;2500,00;;Nenhum;0;;false;",
    ])
    _gravar(tmp_path / "feriados.csv", [
        "id;data;tipo;descricao",
        "h1;2025-04-18;feriado;Sexta-feira Santa",
        "h2;2025-04-21;feriado;Tiradentes",
    ])
    _gravar(tmp_path / "faltas.csv", [
        "funcionario_id;mes;faltas",
        "f2;2025-04;1",
    ])
    _gravar(tmp_path / "coparticipacoes.csv", [
        "funcionario_id;mes;valor",
        "f3;2025-04;150,00",
    ])
    return tmp_path
