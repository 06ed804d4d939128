# rh_beneficios/calendario/gerador.py

"""
Gerador do calendário de feriados nacionais e emendas.

Para um ano qualquer devolve:
- os 9 feriados nacionais de data fixa;
- os 3 feriados móveis derivados da Páscoa (Carnaval, Sexta-feira Santa e
  Corpus Christi);
- as emendas: segunda-feira antes de feriado na terça e sexta-feira depois
  de feriado na quinta.
"""

from datetime import date, timedelta
from typing import Iterable, List

from rh_beneficios.data_validation import FeriadoOuEmenda, TipoFeriado

# --- FERIADOS NACIONAIS DE DATA FIXA (mês, dia, descrição) ---
FERIADOS_FIXOS = [
    (1, 1, "Ano Novo"),
    (4, 21, "Tiradentes"),
    (5, 1, "Dia do Trabalho"),
    (9, 7, "Independência do Brasil"),
    (10, 12, "Nossa Senhora Aparecida"),
    (11, 2, "Finados"),
    (11, 15, "Proclamação da República"),
    (11, 20, "Consciência Negra"),
    (12, 25, "Natal"),
]

# --- FERIADOS MÓVEIS (deslocamento em dias a partir da Páscoa) ---
FERIADOS_MOVEIS = [
    (-47, "Carnaval"),
    (-2, "Sexta-feira Santa"),
    (60, "Corpus Christi"),
]

TERCA = 1
QUINTA = 3


def calcular_pascoa(ano: int) -> date:
    """Domingo de Páscoa no calendário gregoriano (algoritmo de Meeus/Jones/Butcher)."""
    a = ano % 19
    b = ano // 100
    c = ano % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    mes = (h + l - 7 * m + 114) // 31
    dia = ((h + l - 7 * m + 114) % 31) + 1
    return date(ano, mes, dia)


def _feriado(data: date, descricao: str) -> FeriadoOuEmenda:
    return FeriadoOuEmenda(data=data, tipo=TipoFeriado.FERIADO, descricao=descricao)


def calcular_emendas(feriados: Iterable[FeriadoOuEmenda]) -> List[FeriadoOuEmenda]:
    emendas = []
    for feriado in feriados:
        dia_semana = feriado.data.weekday()

        # Feriado na quinta: sexta vira emenda
        if dia_semana == QUINTA:
            data_emenda = feriado.data + timedelta(days=1)
        # Feriado na terça: segunda vira emenda
        elif dia_semana == TERCA:
            data_emenda = feriado.data - timedelta(days=1)
        else:
            continue

        emendas.append(
            FeriadoOuEmenda(
                data=data_emenda,
                tipo=TipoFeriado.EMENDA,
                descricao=f"Emenda {feriado.descricao}",
            )
        )
    return emendas


def gerar_feriados(ano: int) -> List[FeriadoOuEmenda]:
    feriados = [_feriado(date(ano, mes, dia), descricao) for mes, dia, descricao in FERIADOS_FIXOS]

    pascoa = calcular_pascoa(ano)
    for deslocamento, descricao in FERIADOS_MOVEIS:
        feriados.append(_feriado(pascoa + timedelta(days=deslocamento), descricao))

    # Emendas entram depois dos feriados; datas repetidas não são removidas aqui.
    feriados_com_emendas = feriados + calcular_emendas(feriados)
    return sorted(feriados_com_emendas, key=lambda f: f.data)


def novos_feriados(
    existentes: Iterable[FeriadoOuEmenda], gerados: Iterable[FeriadoOuEmenda]
) -> List[FeriadoOuEmenda]:
    """Feriados gerados cuja data ainda não consta no calendário cadastrado."""
    datas_cadastradas = {f.data for f in existentes}
    return [f for f in gerados if f.data not in datas_cadastradas]
