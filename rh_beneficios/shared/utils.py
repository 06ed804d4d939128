from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any

import pandas as pd

CENTAVOS = Decimal("0.01")


def safe_decimal(value: Any) -> Decimal:
    """Converte qualquer entrada (CSV, JSON, planilha) para Decimal com 2 casas.
    Aceita vírgula como separador decimal."""
    if value is None:
        return Decimal("0.00")
    if isinstance(value, Decimal):
        return value.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    if isinstance(value, float) and pd.isna(value):
        return Decimal("0.00")
    if isinstance(value, (float, int)):
        return Decimal(str(value)).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    if isinstance(value, str):
        cleaned = value.strip()
        # "3.000,00": com vírgula decimal, o ponto é separador de milhar
        if "," in cleaned:
            cleaned = cleaned.replace(".", "").replace(",", ".")
        if not cleaned:
            return Decimal("0.00")
        try:
            return Decimal(cleaned).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError(f"Valor monetário inválido: {value!r}")
    raise ValueError(f"Valor monetário inválido: {value!r}")


def arredondar_centavos(valor: Decimal) -> Decimal:
    return (valor or Decimal("0")).quantize(CENTAVOS, rounding=ROUND_HALF_UP)


def formatar_valor(valor: Decimal) -> str:
    """Formata valor monetário no padrão brasileiro (1.234,56)."""
    return f"{valor:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
