# rh_beneficios/calendario/dias_uteis.py

import calendar
from datetime import date
from typing import Iterable, List

from rh_beneficios.data_validation import FeriadoOuEmenda

SABADO = 5


def dias_no_mes(ano: int, mes: int) -> int:
    return calendar.monthrange(ano, mes)[1]


def _eh_fim_de_semana(dia: date) -> bool:
    return dia.weekday() >= SABADO


def contar_fins_de_semana(ano: int, mes: int) -> int:
    return sum(
        1
        for dia in range(1, dias_no_mes(ano, mes) + 1)
        if _eh_fim_de_semana(date(ano, mes, dia))
    )


def feriados_do_mes(
    feriados: Iterable[FeriadoOuEmenda], ano: int, mes: int
) -> List[FeriadoOuEmenda]:
    """Mantém a ordem recebida e eventuais datas repetidas (feriado + emenda)."""
    return [f for f in feriados if f.data.year == ano and f.data.month == mes]


def contar_dias_uteis(ano: int, mes: int, feriados: Iterable[FeriadoOuEmenda]) -> int:
    """
    Dias úteis = dias do mês - sábados/domingos - feriados em dia de semana.

    Os feriados são contados por data distinta: duas emendas (ou um feriado e
    uma emenda) na mesma data descontam um único dia. Feriados em fim de
    semana não descontam nada, o dia já saiu da conta.
    """
    datas_feriado_em_dia_util = {
        f.data for f in feriados_do_mes(feriados, ano, mes) if not _eh_fim_de_semana(f.data)
    }
    return (
        dias_no_mes(ano, mes)
        - contar_fins_de_semana(ano, mes)
        - len(datas_feriado_em_dia_util)
    )
