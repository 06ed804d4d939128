# rh_beneficios/data_validation.py
#
# Moldes (pydantic) dos registros que o motor consome. Os dados chegam de
# CSV ou JSON; cada linha é validada aqui, na fronteira, para que o cálculo
# trabalhe sempre com tipos corretos.

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional, Type, TypeVar

import pandas as pd
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from rh_beneficios.logging_config import log
from rh_beneficios.shared.errors import ErroDeValidacao
from rh_beneficios.shared.utils import safe_decimal


class TipoTransporte(str, Enum):
    FLASH = "Flash"
    BHBUS = "BHBus"
    NENHUM = "Nenhum"


class TipoFeriado(str, Enum):
    FERIADO = "feriado"
    EMENDA = "emenda"


def _vazio_para_none(v: Any):
    """Converte 'nan' (float) e strings em branco em None."""
    if isinstance(v, float) and pd.isna(v):
        return None
    if isinstance(v, str) and not v.strip():
        return None
    return v


class _Registro(BaseModel):
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def limpar_vazios(cls, dados: Any):
        if isinstance(dados, dict):
            return {chave: _vazio_para_none(valor) for chave, valor in dados.items()}
        return dados


class Setor(_Registro):
    id: str
    nome: str
    valor_flash_diario: Decimal

    @field_validator("valor_flash_diario", mode="before")
    @classmethod
    def converter_valor(cls, v: Any):
        if v is None:
            raise ValueError("Valor diário do Flash é obrigatório")
        return safe_decimal(v)


class Funcionario(_Registro):
    id: str
    nome: str
    cpf: str
    setor: str
    salario_base: Decimal
    id_flash: Optional[str] = None
    tipo_transporte: TipoTransporte = TipoTransporte.NENHUM
    dias_home_office_no_mes: int = 0
    valor_passagem_bhbus: Optional[Decimal] = None
    ativo: bool = True
    aniversario: Optional[date] = None

    @field_validator("salario_base", mode="before")
    @classmethod
    def converter_salario(cls, v: Any):
        if v is None:
            raise ValueError("Salário base é obrigatório")
        return safe_decimal(v)

    @field_validator("valor_passagem_bhbus", mode="before")
    @classmethod
    def converter_passagem(cls, v: Any):
        return None if v is None else safe_decimal(v)

    @field_validator("dias_home_office_no_mes", mode="before")
    @classmethod
    def home_office_padrao(cls, v: Any):
        return 0 if v is None else v

    @field_validator("tipo_transporte", mode="before")
    @classmethod
    def transporte_padrao(cls, v: Any):
        return TipoTransporte.NENHUM if v is None else v

    @field_validator("ativo", mode="before")
    @classmethod
    def ativo_padrao(cls, v: Any):
        return True if v is None else v


class FeriadoOuEmenda(_Registro):
    id: Optional[str] = None
    data: date
    tipo: TipoFeriado
    descricao: str


@dataclass(frozen=True)
class Competencia:
    """Mês de referência do cálculo (ano + mês), no formato YYYY-MM."""

    ano: int
    mes: int

    def __post_init__(self):
        if not 1 <= self.mes <= 12:
            raise ValueError(f"Mês de competência inválido: {self.mes}")

    @classmethod
    def de_texto(cls, texto: str) -> "Competencia":
        partes = str(texto).strip().split("-")
        if len(partes) != 2 or not all(p.isdigit() for p in partes):
            raise ValueError(f"Competência deve estar no formato YYYY-MM: {texto!r}")
        return cls(int(partes[0]), int(partes[1]))

    def __str__(self) -> str:
        return f"{self.ano:04d}-{self.mes:02d}"


class _Lancamento(_Registro):
    funcionario_id: str
    mes: str

    @field_validator("mes")
    @classmethod
    def validar_mes(cls, v: str):
        return str(Competencia.de_texto(v))


class LancamentoFalta(_Lancamento):
    faltas: int = Field(0, ge=0)

    @field_validator("faltas", mode="before")
    @classmethod
    def faltas_padrao(cls, v: Any):
        return 0 if v is None else v


class LancamentoCoparticipacao(_Lancamento):
    valor: Decimal = Decimal("0.00")

    @field_validator("valor", mode="before")
    @classmethod
    def converter_valor(cls, v: Any):
        return safe_decimal(v)


Modelo = TypeVar("Modelo", bound=BaseModel)


def validar_registros(modelo: Type[Modelo], linhas: Iterable[dict]) -> List[Modelo]:
    """
    Valida cada linha contra o molde. Uma linha inválida interrompe a carga
    com ErroDeValidacao (nenhum registro é descartado em silêncio).
    """
    registros = []
    for indice, linha in enumerate(linhas):
        try:
            registros.append(modelo(**linha))
        except ValidationError as e:
            identificador = linha.get("id") or linha.get("funcionario_id") or indice
            log.error(f"Erro de validação em {modelo.__name__} ({identificador}): {e}")
            raise ErroDeValidacao(
                f"{modelo.__name__} inválido ({identificador}): {e}"
            ) from e
    return registros
