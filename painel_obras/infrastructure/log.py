# painel_obras/infrastructure/log.py
#
# Shared API logger.
#
# Design decisions:
#   - Single log() function used by repositories, services and routes.
#   - Wall-clock time instead of elapsed time: the API is long-running and
#     requests are correlated with access logs by time of day.
#   - Plain stdout with flush; a single sys.stdout.write is atomic in CPython,
#     so worker threads of the attachment pool can log without a lock.
from __future__ import annotations

import sys
from datetime import datetime


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    agora = datetime.now().strftime("%H:%M:%S")
    sys.stdout.write(f"[api {agora}] {message}\n")
    sys.stdout.flush()
