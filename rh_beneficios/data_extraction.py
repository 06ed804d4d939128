# rh_beneficios/data_extraction.py
"""
Leitura dos snapshots de cadastro (funcionários, setores, feriados e
lançamentos do mês) a partir de arquivos CSV no diretório de dados.

Os arquivos seguem o padrão das planilhas do RH: separador ';' e vírgula
decimal. Toda coluna é lida como texto e a conversão de tipos fica com os
moldes de data_validation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pandas as pd

from rh_beneficios.config import settings
from rh_beneficios.data_validation import (
    FeriadoOuEmenda,
    Funcionario,
    LancamentoCoparticipacao,
    LancamentoFalta,
    Setor,
    validar_registros,
)
from rh_beneficios.logging_config import log

ARQUIVO_FUNCIONARIOS = "funcionarios.csv"
ARQUIVO_SETORES = "setores.csv"
ARQUIVO_FERIADOS = "feriados.csv"
ARQUIVO_FALTAS = "faltas.csv"
ARQUIVO_COPARTICIPACOES = "coparticipacoes.csv"


@dataclass(frozen=True)
class DadosCadastro:
    funcionarios: List[Funcionario]
    setores: List[Setor]
    feriados: List[FeriadoOuEmenda]
    faltas: List[LancamentoFalta]
    coparticipacoes: List[LancamentoCoparticipacao]


def _ler_csv(caminho: Path, obrigatorio: bool) -> pd.DataFrame:
    if not caminho.exists():
        if obrigatorio:
            raise FileNotFoundError(f"Arquivo de cadastro não encontrado: {caminho}")
        log.warning(f"Arquivo {caminho.name} não encontrado; considerando vazio.")
        return pd.DataFrame()
    try:
        return pd.read_csv(caminho, sep=";", dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        log.warning(f"Arquivo {caminho.name} está vazio; considerando sem registros.")
        return pd.DataFrame()


def _registros(df: pd.DataFrame) -> List[dict]:
    return df.to_dict(orient="records")


def fetch_funcionarios(data_dir: str) -> List[Funcionario]:
    df = _ler_csv(Path(data_dir) / ARQUIVO_FUNCIONARIOS, obrigatorio=True)
    return validar_registros(Funcionario, _registros(df))


def fetch_setores(data_dir: str) -> List[Setor]:
    df = _ler_csv(Path(data_dir) / ARQUIVO_SETORES, obrigatorio=True)
    return validar_registros(Setor, _registros(df))


def fetch_feriados(data_dir: str) -> List[FeriadoOuEmenda]:
    df = _ler_csv(Path(data_dir) / ARQUIVO_FERIADOS, obrigatorio=False)
    return validar_registros(FeriadoOuEmenda, _registros(df))


def fetch_faltas(data_dir: str) -> List[LancamentoFalta]:
    df = _ler_csv(Path(data_dir) / ARQUIVO_FALTAS, obrigatorio=False)
    return validar_registros(LancamentoFalta, _registros(df))


def fetch_coparticipacoes(data_dir: str) -> List[LancamentoCoparticipacao]:
    df = _ler_csv(Path(data_dir) / ARQUIVO_COPARTICIPACOES, obrigatorio=False)
    return validar_registros(LancamentoCoparticipacao, _registros(df))


def carregar_cadastro(data_dir: Optional[str] = None) -> DadosCadastro:
    """Lê todos os arquivos de uma vez, no início do cálculo."""
    data_dir = data_dir or settings.DATA_DIR
    log.info(f"Carregando cadastro de {data_dir}...")
    dados = DadosCadastro(
        funcionarios=fetch_funcionarios(data_dir),
        setores=fetch_setores(data_dir),
        feriados=fetch_feriados(data_dir),
        faltas=fetch_faltas(data_dir),
        coparticipacoes=fetch_coparticipacoes(data_dir),
    )
    log.info(
        f"Cadastro carregado: {len(dados.funcionarios)} funcionários, "
        f"{len(dados.setores)} setores, {len(dados.feriados)} feriados/emendas."
    )
    return dados
