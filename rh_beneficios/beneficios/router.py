from dataclasses import asdict
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from rh_beneficios.beneficios import file_generator
from rh_beneficios.beneficios.runner import ResultadoMensal, executar_calculo_mensal
from rh_beneficios.data_extraction import carregar_cadastro
from rh_beneficios.data_validation import (
    FeriadoOuEmenda,
    Funcionario,
    LancamentoCoparticipacao,
    LancamentoFalta,
    Setor,
)
from rh_beneficios.logging_config import log
from rh_beneficios.shared.errors import ErroDeConfiguracao, ErroDeValidacao

router = APIRouter(prefix="/beneficios", tags=["Benefícios"])


# --- MODELOS PYDANTIC ---
class CalculoRequest(BaseModel):
    mes: str  # YYYY-MM
    funcionarios: List[Funcionario]
    setores: List[Setor]
    feriados: List[FeriadoOuEmenda] = []
    faltas: List[LancamentoFalta] = []
    coparticipacoes: List[LancamentoCoparticipacao] = []


def _serializar_resultado(resultado: ResultadoMensal) -> dict:
    return {
        "mes": str(resultado.mes),
        "feriados_e_emendas_do_mes": resultado.feriados_e_emendas_do_mes,
        "dias_uteis_do_mes": resultado.dias_uteis_do_mes,
        "calculos": [asdict(c) for c in resultado.calculos],
    }


def _executar(mes: str, **dados) -> ResultadoMensal:
    """Roda o cálculo traduzindo os erros de domínio para HTTP."""
    try:
        return executar_calculo_mensal(mes, **dados)
    except ErroDeConfiguracao as e:
        log.error(f"Erro de configuração no cálculo de {mes}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _executar_do_cadastro(mes: str) -> ResultadoMensal:
    try:
        dados = carregar_cadastro()
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ErroDeValidacao as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _executar(
        mes,
        funcionarios=dados.funcionarios,
        setores=dados.setores,
        feriados=dados.feriados,
        faltas=dados.faltas,
        coparticipacoes=dados.coparticipacoes,
    )


# --- ENDPOINTS ---


@router.post("/calcular")
def calcular_beneficios(request: CalculoRequest):
    """
    Calcula os benefícios do mês com os dados enviados no corpo da requisição.
    """
    resultado = _executar(
        request.mes,
        funcionarios=request.funcionarios,
        setores=request.setores,
        feriados=request.feriados,
        faltas=request.faltas,
        coparticipacoes=request.coparticipacoes,
    )
    return _serializar_resultado(resultado)


@router.get("/{mes}")
def calcular_beneficios_do_cadastro(mes: str):
    """
    Calcula os benefícios do mês a partir dos arquivos do diretório de dados.
    """
    return _serializar_resultado(_executar_do_cadastro(mes))


@router.get("/{mes}/resumo")
def get_resumo(mes: str):
    resultado = _executar_do_cadastro(mes)
    return asdict(file_generator.gerar_resumo(resultado))


@router.get("/{mes}/export/{tipo}", response_class=PlainTextResponse)
def exportar(mes: str, tipo: str):
    if tipo not in file_generator.EXPORTACOES:
        raise HTTPException(
            status_code=400,
            detail=f"Tipo de exportação inválido: {tipo}. Use: {', '.join(file_generator.EXPORTACOES)}",
        )

    resultado = _executar_do_cadastro(mes)
    df = file_generator.montar_exportacao(resultado, tipo)
    if df.empty:
        raise HTTPException(
            status_code=404, detail=f"Nenhum registro para exportar ({tipo}) em {mes}."
        )

    nome_arquivo, _ = file_generator.EXPORTACOES[tipo]
    return PlainTextResponse(
        file_generator.exportacao_para_csv(df),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{nome_arquivo.format(mes=resultado.mes)}"'
        },
    )
