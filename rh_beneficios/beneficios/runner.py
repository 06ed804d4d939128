# rh_beneficios/beneficios/runner.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from rh_beneficios.beneficios.business_logic import (
    CalculoFuncionario,
    calcular_beneficio_funcionario,
    resolver_setor,
)
from rh_beneficios.calendario.dias_uteis import contar_dias_uteis, feriados_do_mes
from rh_beneficios.data_validation import (
    Competencia,
    FeriadoOuEmenda,
    Funcionario,
    LancamentoCoparticipacao,
    LancamentoFalta,
    Setor,
)
from rh_beneficios.logging_config import log
from rh_beneficios.shared.errors import ErroDeConfiguracao


@dataclass(frozen=True)
class ResultadoMensal:
    mes: Competencia
    feriados_e_emendas_do_mes: List[FeriadoOuEmenda]
    dias_uteis_do_mes: int
    calculos: List[CalculoFuncionario]


def _indexar_faltas(lancamentos: Iterable[LancamentoFalta]) -> Dict[Tuple[str, str], int]:
    # O último lançamento de (funcionário, mês) prevalece
    return {(l.funcionario_id, l.mes): l.faltas for l in lancamentos}


def _indexar_coparticipacoes(
    lancamentos: Iterable[LancamentoCoparticipacao],
) -> Dict[Tuple[str, str], Decimal]:
    return {(l.funcionario_id, l.mes): l.valor for l in lancamentos}


def _resolver_setores(
    funcionarios: Sequence[Funcionario], setores: Iterable[Setor]
) -> List[Setor]:
    setores_por_id = {s.id: s for s in setores}
    resolvidos = []
    erros = []
    for funcionario in funcionarios:
        try:
            resolvidos.append(resolver_setor(funcionario, setores_por_id))
        except ErroDeConfiguracao as e:
            erros.append(str(e))

    if erros:
        log.error(f"Cálculo abortado: {len(erros)} funcionário(s) sem setor válido.")
        raise ErroDeConfiguracao("; ".join(erros))
    return resolvidos


def executar_calculo_mensal(
    competencia: Union[Competencia, str],
    funcionarios: Iterable[Funcionario],
    setores: Iterable[Setor],
    feriados: Iterable[FeriadoOuEmenda],
    faltas: Iterable[LancamentoFalta] = (),
    coparticipacoes: Iterable[LancamentoCoparticipacao] = (),
) -> ResultadoMensal:
    if not isinstance(competencia, Competencia):
        competencia = Competencia.de_texto(competencia)
    mes = str(competencia)

    log.info(f"Iniciando cálculo de benefícios da competência {mes}...")

    ativos = [f for f in funcionarios if f.ativo]
    setores_dos_ativos = _resolver_setores(ativos, setores)

    feriados_mes = feriados_do_mes(feriados, competencia.ano, competencia.mes)
    dias_uteis = contar_dias_uteis(competencia.ano, competencia.mes, feriados_mes)
    log.info(
        f"Competência {mes}: {dias_uteis} dias úteis "
        f"({len(feriados_mes)} feriados/emendas lançados no mês)."
    )

    faltas_por_chave = _indexar_faltas(faltas)
    copart_por_chave = _indexar_coparticipacoes(coparticipacoes)

    calculos = [
        calcular_beneficio_funcionario(
            funcionario,
            setor,
            dias_uteis,
            faltas=faltas_por_chave.get((funcionario.id, mes), 0),
            coparticipacao=copart_por_chave.get((funcionario.id, mes), Decimal("0.00")),
        )
        for funcionario, setor in zip(ativos, setores_dos_ativos)
    ]

    log.success(f"Cálculo da competência {mes} concluído: {len(calculos)} funcionários.")
    return ResultadoMensal(
        mes=competencia,
        feriados_e_emendas_do_mes=feriados_mes,
        dias_uteis_do_mes=dias_uteis,
        calculos=calculos,
    )
