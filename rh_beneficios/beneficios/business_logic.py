# rh_beneficios/beneficios/business_logic.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from rh_beneficios.data_validation import Funcionario, Setor, TipoTransporte
from rh_beneficios.logging_config import log
from rh_beneficios.shared.errors import ErroDeConfiguracao
from rh_beneficios.shared.utils import arredondar_centavos

VIAGENS_POR_DIA = 2  # ida e volta


@dataclass(frozen=True)
class CalculoFuncionario:
    id: str
    nome: str
    cpf: str
    setor_id: str
    setor: str
    salario_base: Decimal
    tipo_transporte: TipoTransporte
    id_flash: Optional[str]
    dias_trabalhados_no_mes: int
    dias_presenciais: int
    dias_home_office: int
    faltas: int
    valor_flash: Decimal
    valor_vale_transporte: Decimal
    recarga_flash_total: Decimal
    valor_coparticipacao: Decimal
    salario_final: Decimal


def resolver_setor(funcionario: Funcionario, setores_por_id: Mapping[str, Setor]) -> Setor:
    setor = setores_por_id.get(funcionario.setor)
    if setor is None:
        raise ErroDeConfiguracao(
            f"Setor '{funcionario.setor}' não encontrado para funcionário {funcionario.nome}"
        )
    return setor


def calcular_vale_transporte(funcionario: Funcionario, dias_presenciais: int) -> Decimal:
    if (
        funcionario.tipo_transporte == TipoTransporte.NENHUM
        or not funcionario.valor_passagem_bhbus
    ):
        return Decimal("0.00")
    return dias_presenciais * VIAGENS_POR_DIA * funcionario.valor_passagem_bhbus


def calcular_beneficio_funcionario(
    funcionario: Funcionario,
    setor: Setor,
    dias_uteis: int,
    faltas: int = 0,
    coparticipacao: Decimal = Decimal("0.00"),
) -> CalculoFuncionario:
    """
    Calcula VA/VR (Flash), VT e salário final de um funcionário no mês.

    - Dias trabalhados = dias úteis - faltas (sem piso; faltas acima dos dias
      úteis produzem valor negativo).
    - Dias presenciais = dias trabalhados - home office, com piso em zero.
    - VA/VR = dias trabalhados x valor diário do setor.
    - VT = dias presenciais x 2 x passagem, só para quem tem transporte e
      passagem cadastrada.
    - Flash: recebe VA/VR + VT; BHBus: VT informado à parte; Nenhum: sem VT.
    - Salário final = salário base - coparticipação (sem piso).
    """
    if setor.id != funcionario.setor:
        raise ErroDeConfiguracao(
            f"Setor '{setor.id}' não corresponde ao cadastro de {funcionario.nome} "
            f"(setor '{funcionario.setor}')"
        )

    dias_home_office = funcionario.dias_home_office_no_mes or 0
    dias_trabalhados = dias_uteis - faltas
    dias_presenciais = max(0, dias_trabalhados - dias_home_office)

    valor_flash = arredondar_centavos(dias_trabalhados * setor.valor_flash_diario)
    valor_vale_transporte = arredondar_centavos(
        calcular_vale_transporte(funcionario, dias_presenciais)
    )

    if funcionario.tipo_transporte == TipoTransporte.FLASH:
        recarga_flash_total = valor_flash + valor_vale_transporte
    else:
        recarga_flash_total = valor_flash

    coparticipacao = arredondar_centavos(Decimal(coparticipacao))
    salario_final = funcionario.salario_base - coparticipacao

    log.debug(
        f"{funcionario.nome}: {dias_trabalhados} dias trabalhados, "
        f"{dias_presenciais} presenciais, Flash R$ {recarga_flash_total}"
    )

    return CalculoFuncionario(
        id=funcionario.id,
        nome=funcionario.nome,
        cpf=funcionario.cpf,
        setor_id=setor.id,
        setor=setor.nome,
        salario_base=funcionario.salario_base,
        tipo_transporte=funcionario.tipo_transporte,
        id_flash=funcionario.id_flash,
        dias_trabalhados_no_mes=dias_trabalhados,
        dias_presenciais=dias_presenciais,
        dias_home_office=dias_home_office,
        faltas=faltas,
        valor_flash=valor_flash,
        # VT só é informado à parte para BHBus; no Flash ele já está na recarga
        valor_vale_transporte=(
            valor_vale_transporte
            if funcionario.tipo_transporte == TipoTransporte.BHBUS
            else Decimal("0.00")
        ),
        recarga_flash_total=recarga_flash_total,
        valor_coparticipacao=coparticipacao,
        salario_final=salario_final,
    )
