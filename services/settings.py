# === services/settings.py ===
from __future__ import annotations
import os
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

APP_TITLE = os.environ.get("APP_TITLE", "Cadastro de Passageiro")

def minimal_mode() -> bool:
    return os.environ.get("APP_MINIMAL") == "1"

def web_port() -> int:
    # 0 = o sistema escolhe uma porta livre
    return int(os.environ.get("PORT", "0"))

def timezone() -> Optional[ZoneInfo]:
    """
    Fuso usado para decidir o que é "hoje" na validação da data de nascimento.
    CADASTRO_TZ vazio/ausente -> horário local da máquina.
    """
    name = (os.environ.get("CADASTRO_TZ") or "").strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise ValueError(f"CADASTRO_TZ inválido: {name!r}") from ex

def today() -> date:
    return datetime.now(timezone()).date()
