# rh_beneficios/main.py
"""
Execução do cálculo mensal pela linha de comando:

    python -m rh_beneficios.main 2025-03 --exportar

Lê o cadastro do diretório de dados, calcula a competência, mostra o resumo
e, com --exportar, grava os arquivos de remessa Flash, BHBus e folha.
"""

import argparse
import sys
from typing import Optional

from rh_beneficios.beneficios.file_generator import gerar_resumo, gerar_todos_arquivos
from rh_beneficios.beneficios.runner import ResultadoMensal, executar_calculo_mensal
from rh_beneficios.config import settings
from rh_beneficios.data_extraction import carregar_cadastro
from rh_beneficios.logging_config import log
from rh_beneficios.shared.errors import ErroDeConfiguracao, ErroDeValidacao
from rh_beneficios.shared.utils import formatar_valor


def run(mes: str, data_dir: Optional[str] = None, export_dir: Optional[str] = None) -> ResultadoMensal:
    dados = carregar_cadastro(data_dir)
    resultado = executar_calculo_mensal(
        mes,
        funcionarios=dados.funcionarios,
        setores=dados.setores,
        feriados=dados.feriados,
        faltas=dados.faltas,
        coparticipacoes=dados.coparticipacoes,
    )

    resumo = gerar_resumo(resultado)
    log.info(
        f"Resumo {resumo.mes}: {resumo.total_funcionarios} funcionários | "
        f"{resumo.dias_uteis_do_mes} dias úteis | "
        f"Recarga Flash R$ {formatar_valor(resumo.total_recarga_flash)} | "
        f"VT BHBus R$ {formatar_valor(resumo.total_vale_transporte)} | "
        f"Coparticipação R$ {formatar_valor(resumo.total_coparticipacao)} | "
        f"Folha final R$ {formatar_valor(resumo.total_salario_final)}"
    )

    if export_dir:
        gerar_todos_arquivos(resultado, export_dir)
    return resultado


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Cálculo mensal de benefícios (VA/VR, VT e coparticipação).")
    parser.add_argument("mes", help="Competência no formato YYYY-MM")
    parser.add_argument("--data-dir", default=settings.DATA_DIR, help="Diretório com os CSVs de cadastro")
    parser.add_argument("--exportar", action="store_true", help="Gera os arquivos CSV de remessa")
    parser.add_argument("--export-dir", default=settings.EXPORT_DIR, help="Destino dos arquivos exportados")
    args = parser.parse_args(argv)

    try:
        run(args.mes, data_dir=args.data_dir, export_dir=args.export_dir if args.exportar else None)
    except (ErroDeConfiguracao, ErroDeValidacao, FileNotFoundError, ValueError) as e:
        log.error(f"Falha no cálculo de {args.mes}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
