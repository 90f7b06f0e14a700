# painel_obras/domain/contrato/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

_ANO_RE = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ValorContrato:
    """Valor em Decimal. Nunca float. Nunca negativo."""

    valor: Decimal

    def __post_init__(self) -> None:
        if self.valor < Decimal("0"):
            raise ValueError("Valor de contrato nao pode ser negativo")

    @classmethod
    def de_coluna(cls, raw: object) -> ValorContrato | None:
        """Converte a coluna monetaria do banco. NULL, zero, negativo ou lixo -> None.

        Negativo na coluna (estorno, lancamento errado) e descartado, nao repassado:
        contrato sem valor positivo aparece sem valor e fica fora das somas do relatorio.
        """
        if raw is None:
            return None
        try:
            valor = Decimal(str(raw))
        except InvalidOperation:
            return None
        if not valor.is_finite() or valor <= Decimal("0"):
            return None
        return cls(valor)


def extrair_ano_contrato(numero_contrato: str | None) -> int:
    """Token numerico antes da primeira '/' ("2023/010" -> 2023). Sem numero ou ilegivel -> 0."""
    if not numero_contrato:
        return 0
    match = _ANO_RE.match(numero_contrato.split("/", 1)[0])
    return int(match.group(1)) if match else 0
