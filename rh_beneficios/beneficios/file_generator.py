# rh_beneficios/beneficios/file_generator.py
"""
Saídas do cálculo mensal: DataFrame dos cálculos, resumo de totais e os
arquivos CSV enviados ao Flash (remessa), à BHTrans (solicitação de VT) e à
folha de pagamento.
"""

from dataclasses import asdict, dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from rh_beneficios.beneficios.runner import ResultadoMensal
from rh_beneficios.data_validation import TipoTransporte
from rh_beneficios.logging_config import log

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class ResumoMensal:
    mes: str
    dias_uteis_do_mes: int
    total_funcionarios: int
    total_salario_base: Decimal
    total_salario_final: Decimal
    total_recarga_flash: Decimal
    total_vale_transporte: Decimal
    total_coparticipacao: Decimal


def resultado_para_dataframe(resultado: ResultadoMensal) -> pd.DataFrame:
    colunas = [
        "id", "nome", "cpf", "setor_id", "setor", "salario_base", "tipo_transporte",
        "id_flash", "dias_trabalhados_no_mes", "dias_presenciais", "dias_home_office",
        "faltas", "valor_flash", "valor_vale_transporte", "recarga_flash_total",
        "valor_coparticipacao", "salario_final",
    ]
    df = pd.DataFrame([asdict(c) for c in resultado.calculos], columns=colunas)
    df["tipo_transporte"] = df["tipo_transporte"].map(
        lambda t: t.value if isinstance(t, TipoTransporte) else t
    )
    return df


def gerar_resumo(resultado: ResultadoMensal) -> ResumoMensal:
    calculos = resultado.calculos
    return ResumoMensal(
        mes=str(resultado.mes),
        dias_uteis_do_mes=resultado.dias_uteis_do_mes,
        total_funcionarios=len(calculos),
        total_salario_base=sum((c.salario_base for c in calculos), ZERO),
        total_salario_final=sum((c.salario_final for c in calculos), ZERO),
        # Só quem recebe o VT pelo cartão entra no total da remessa Flash
        total_recarga_flash=sum(
            (c.recarga_flash_total for c in calculos if c.tipo_transporte == TipoTransporte.FLASH),
            ZERO,
        ),
        total_vale_transporte=sum((c.valor_vale_transporte for c in calculos), ZERO),
        total_coparticipacao=sum((c.valor_coparticipacao for c in calculos), ZERO),
    )


def _formatar_decimais(df: pd.DataFrame, colunas) -> pd.DataFrame:
    for col in colunas:
        df[col] = df[col].map(lambda v: f"{v:.2f}")
    return df


def montar_remessa_flash(resultado: ResultadoMensal) -> pd.DataFrame:
    df = resultado_para_dataframe(resultado)
    mask = (df["tipo_transporte"] == TipoTransporte.FLASH.value) & (
        df["recarga_flash_total"] > ZERO
    )
    colunas_finais = {
        "id_flash": "ID Flash",
        "nome": "Nome",
        "cpf": "CPF",
        "setor": "Setor",
        "recarga_flash_total": "Total Recarga",
    }
    df_remessa = df.loc[mask, list(colunas_finais)].rename(columns=colunas_finais)
    df_remessa["ID Flash"] = df_remessa["ID Flash"].fillna("")
    return _formatar_decimais(df_remessa, ["Total Recarga"])


def montar_solicitacao_bhbus(resultado: ResultadoMensal) -> pd.DataFrame:
    df = resultado_para_dataframe(resultado)
    mask = df["valor_vale_transporte"] > ZERO
    colunas_finais = {
        "nome": "Nome",
        "cpf": "CPF",
        "setor": "Setor",
        "dias_presenciais": "Dias Presenciais",
        "valor_vale_transporte": "Valor VT",
    }
    df_bhbus = df.loc[mask, list(colunas_finais)].rename(columns=colunas_finais)
    return _formatar_decimais(df_bhbus, ["Valor VT"])


def montar_folha_pagamento(resultado: ResultadoMensal) -> pd.DataFrame:
    df = resultado_para_dataframe(resultado)
    colunas_finais = {
        "cpf": "CPF",
        "salario_base": "Salário Base",
        "salario_final": "Salário Final",
    }
    df_folha = df[list(colunas_finais)].rename(columns=colunas_finais)
    return _formatar_decimais(df_folha, ["Salário Base", "Salário Final"])


EXPORTACOES: Dict[str, tuple] = {
    "flash": ("flash-remessa-{mes}.csv", montar_remessa_flash),
    "bhbus": ("bhtrans-solicitacao-{mes}.csv", montar_solicitacao_bhbus),
    "folha": ("folha-pagamento-{mes}.csv", montar_folha_pagamento),
}


def montar_exportacao(resultado: ResultadoMensal, tipo: str) -> pd.DataFrame:
    if tipo not in EXPORTACOES:
        raise ValueError(f"Tipo de exportação desconhecido: {tipo}")
    _, montar = EXPORTACOES[tipo]
    return montar(resultado)


def exportacao_para_csv(df: pd.DataFrame) -> str:
    return df.to_csv(index=False, sep=",")


def gerar_arquivo(
    resultado: ResultadoMensal, tipo: str, output_path: str
) -> Optional[str]:
    """
    Grava o CSV do tipo pedido (flash, bhbus ou folha) em output_path.
    Retorna o caminho gravado, ou None quando não há registros a exportar.
    """
    df = montar_exportacao(resultado, tipo)
    if df.empty:
        log.warning(f"Nenhum registro para exportar ({tipo}) na competência {resultado.mes}.")
        return None

    Path(output_path).mkdir(parents=True, exist_ok=True)
    nome_arquivo, _ = EXPORTACOES[tipo]
    caminho = Path(output_path) / nome_arquivo.format(mes=resultado.mes)
    df.to_csv(caminho, index=False, sep=",")

    log.success(f"Arquivo {tipo} gerado com {len(df)} registros em: {caminho}")
    return str(caminho)


def gerar_todos_arquivos(resultado: ResultadoMensal, output_path: str) -> Dict[str, Optional[str]]:
    return {tipo: gerar_arquivo(resultado, tipo, output_path) for tipo in EXPORTACOES}
