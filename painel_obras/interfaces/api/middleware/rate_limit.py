# painel_obras/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import math
import time
from collections import deque
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from painel_obras.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0


class JanelaPorCliente:
    """Horarios das requisicoes de cada cliente dentro da janela.

    Cliente sem requisicao na janela sai do mapa: ao ser consultado, ou na
    varredura feita no maximo uma vez por janela.
    """

    def __init__(
        self,
        janela: float = JANELA_SEGUNDOS,
        relogio: Callable[[], float] = time.monotonic,
    ) -> None:
        self._janela = janela
        self._relogio = relogio
        self._clientes: dict[str, deque[float]] = {}
        self._ultima_varredura = relogio()

    def __len__(self) -> int:
        return len(self._clientes)

    def registrar(self, cliente: str, limite: int) -> float | None:
        """Conta a requisicao e devolve None; acima do limite devolve os segundos ate liberar."""
        agora = self._relogio()
        self._varrer(agora)

        horarios = self._clientes.get(cliente)
        if horarios is not None:
            while horarios and agora - horarios[0] >= self._janela:
                horarios.popleft()
            if len(horarios) >= limite:
                return self._janela - (agora - horarios[0])
        else:
            horarios = self._clientes[cliente] = deque()

        horarios.append(agora)
        return None

    def _varrer(self, agora: float) -> None:
        if agora - self._ultima_varredura < self._janela:
            return
        self._ultima_varredura = agora
        expirados = [c for c, h in self._clientes.items() if not h or agora - h[-1] >= self._janela]
        for cliente in expirados:
            del self._clientes[cliente]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limite por IP na janela de 60s. Header X-API-Key ignora o limite; limite 0 desliga."""

    def __init__(self, app: object, janela: JanelaPorCliente | None = None) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self.janela = janela or JanelaPorCliente()

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        limite = get_settings().rate_limit_per_minute
        if limite <= 0 or request.headers.get("X-API-Key"):
            return await call_next(request)

        cliente = request.client.host if request.client else "unknown"
        espera = self.janela.registrar(cliente, limite)
        if espera is not None:
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit excedido. Tente novamente em instantes."},
                headers={"Retry-After": str(max(1, math.ceil(espera)))},
            )
        return await call_next(request)
