# painel_obras/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_obras_path: str
    duckdb_contratos_path: str
    arquivo_obra_base_url: str
    arquivo_contrato_base_url: str
    max_workers_arquivos: int
    rate_limit_per_minute: int
    debug: bool
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_obras_path=os.environ.get("DUCKDB_OBRAS_PATH", ":memory:"),
        duckdb_contratos_path=os.environ.get("DUCKDB_CONTRATOS_PATH", ":memory:"),
        arquivo_obra_base_url=os.environ.get(
            "ARQUIVO_OBRA_BASE_URL", "https://epamigsistema.com/obras/web/"
        ),
        arquivo_contrato_base_url=os.environ.get(
            "ARQUIVO_CONTRATO_BASE_URL", "https://epamig.tech/contratos/web/"
        ),
        max_workers_arquivos=int(os.environ.get("API_MAX_WORKERS_ARQUIVOS", "8")),
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        host=os.environ.get("API_HOST", "127.0.0.1"),
        port=int(os.environ.get("API_PORT", "8000")),
    )
