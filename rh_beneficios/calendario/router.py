from fastapi import APIRouter, HTTPException

from rh_beneficios.calendario.dias_uteis import (
    contar_dias_uteis,
    contar_fins_de_semana,
    dias_no_mes,
    feriados_do_mes,
)
from rh_beneficios.calendario.gerador import calcular_pascoa, gerar_feriados

router = APIRouter(prefix="/calendario", tags=["Calendário"])

ANO_MINIMO = 1583  # primeiro ano completo do calendário gregoriano
ANO_MAXIMO = 9999


def _validar_ano(ano: int) -> None:
    if not ANO_MINIMO <= ano <= ANO_MAXIMO:
        raise HTTPException(
            status_code=400,
            detail=f"Ano fora do intervalo suportado ({ANO_MINIMO}-{ANO_MAXIMO}): {ano}",
        )


@router.get("/{ano}")
def get_feriados_do_ano(ano: int):
    """
    Gera os feriados nacionais (fixos e móveis) e as emendas do ano.
    """
    _validar_ano(ano)
    return {
        "ano": ano,
        "pascoa": calcular_pascoa(ano),
        "feriados": gerar_feriados(ano),
    }


@router.get("/{ano}/{mes}/dias-uteis")
def get_dias_uteis(ano: int, mes: int):
    _validar_ano(ano)
    if not 1 <= mes <= 12:
        raise HTTPException(status_code=400, detail=f"Mês inválido: {mes}")

    feriados_mes = feriados_do_mes(gerar_feriados(ano), ano, mes)
    return {
        "ano": ano,
        "mes": mes,
        "dias_no_mes": dias_no_mes(ano, mes),
        "fins_de_semana": contar_fins_de_semana(ano, mes),
        "feriados_e_emendas": feriados_mes,
        "dias_uteis": contar_dias_uteis(ano, mes, feriados_mes),
    }
