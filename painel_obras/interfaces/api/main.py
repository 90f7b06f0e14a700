# painel_obras/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import duckdb
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from painel_obras.infrastructure.config import get_settings
from painel_obras.infrastructure.log import log
from painel_obras.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from painel_obras.infrastructure.duckdb_connection import CONTRATOS, OBRAS, get_connection

    # Banco indisponivel nao impede o startup: cada requisicao tenta abrir de novo
    # e a rota responde com o erro classificado.
    for store in (OBRAS, CONTRATOS):
        try:
            get_connection(store)
        except duckdb.Error as err:
            log(f"Banco de {store} indisponivel no startup: {err}")
    yield


app = FastAPI(
    title="Painel de Obras API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

from painel_obras.interfaces.api.routes.consulta_obra_routes import router as consulta_obra_router  # noqa: E402

app.include_router(consulta_obra_router, prefix="/api")


def run() -> None:
    """Entry point `painel-obras`: sobe a API com uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "painel_obras.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
