# painel_obras/domain/obra/filtro.py
from __future__ import annotations

from dataclasses import dataclass

_SEM_FILTRO = "all"
# status_id/unidade_id sao INTEGER nos dois bancos
_MAX_CODIGO = 2**31 - 1


def _codigo(raw: str | None) -> int | None:
    """'all', vazio, nao-numerico ou fora da faixa INTEGER -> None (sem filtro). Nunca levanta."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw or raw.lower() == _SEM_FILTRO:
        return None
    # isdigit() sozinho aceita digitos de outros alfabetos ("٣")
    if not (raw.isascii() and raw.isdigit()):
        return None
    codigo = int(raw)
    return codigo if codigo <= _MAX_CODIGO else None


@dataclass(frozen=True)
class FiltroObras:
    status_id: int | None = None
    unidade_id: int | None = None

    @classmethod
    def from_query(cls, status_id: str | None, unidade_id: str | None) -> FiltroObras:
        return cls(status_id=_codigo(status_id), unidade_id=_codigo(unidade_id))

    def predicado(self, alias: str = "o") -> tuple[list[str], list[object]]:
        """Condicoes conjuntivas + parametros na mesma ordem. Prepared statements."""
        conditions: list[str] = []
        params: list[object] = []

        if self.status_id is not None:
            conditions.append(f"{alias}.status_id = ?")
            params.append(self.status_id)
        if self.unidade_id is not None:
            conditions.append(f"{alias}.unidade_id = ?")
            params.append(self.unidade_id)

        return conditions, params
