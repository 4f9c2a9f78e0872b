# === services/log.py ===
from __future__ import annotations
import sys
import time

_start = time.monotonic()

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")

def _fmt(value) -> str:
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(sorted(str(v) for v in value))
    return str(value)

def log(message: str, level: str = "INFO", **context) -> None:
    """
    Uma linha no stdout: [cadastro mm:ss] NIVEL mensagem chave=valor...
    Coleções no contexto saem ordenadas e separadas por vírgula.
    """
    level = level.upper()
    if level not in LEVELS:
        raise ValueError(f"nível de log desconhecido: {level!r}")
    minutes, seconds = divmod(int(time.monotonic() - _start), 60)
    extra = "".join(f" {k}={_fmt(v)}" for k, v in context.items())
    stream = sys.stderr if level == "ERROR" else sys.stdout
    stream.write(f"[cadastro {minutes:02d}:{seconds:02d}] {level} {message}{extra}\n")
    stream.flush()
