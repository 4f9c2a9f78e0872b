# run_web.py — boot com diagnóstico (navegador)
from __future__ import annotations
import os, sys, traceback, threading, time
from pathlib import Path
import flet as ft

from services import settings
from services.log import log as _log

BOOT_MARKS = []

def log(msg: str):
    BOOT_MARKS.append(msg)
    _log(f"[BOOT] {msg}")

def _feed_marks(page: ft.Page, details: ft.Column, done: threading.Event, interval: float = 0.3):
    """Espelha BOOT_MARKS na tela até `done`; sessão caída encerra o laço."""
    last_len = 0
    while not done.is_set():
        time.sleep(interval)
        if len(BOOT_MARKS) != last_len:
            details.controls = [ft.Text(m, size=12) for m in BOOT_MARKS]
            last_len = len(BOOT_MARKS)
            try: page.update()
            except Exception: break

def _diagnose_target(app_main):
    def target(page: ft.Page):
        status = ft.Text("Iniciando cadastro...", size=14, weight=ft.FontWeight.W_600)
        details = ft.Column(spacing=4)
        boot_view = ft.Container(
            padding=20,
            content=ft.Column(spacing=10, controls=[
                ft.Text("Diagnóstico de inicialização", size=16, weight=ft.FontWeight.W_700),
                status,
                ft.Divider(),
                ft.Text("Marcos de boot:", size=12),
                details,
            ])
        )
        page.add(boot_view)
        page.update()

        done = threading.Event()

        threading.Thread(target=_feed_marks, args=(page, details, done), daemon=True).start()

        try:
            log("Chamando main(page)...")
            page.controls.remove(boot_view)
            app_main.main(page)
            log("main(page) retornou.")
        except Exception:
            err = traceback.format_exc()
            log("EXCEÇÃO no main(page)")
            page.controls[:] = [boot_view]
            details.controls.append(ft.Text(err, size=12, color="#B00020", selectable=True))
            page.update()
            raise
        finally:
            done.set()
    return target

def _boot():
    port = settings.web_port()
    root = Path(__file__).resolve().parent
    os.environ.setdefault("PYTHONUNBUFFERED", "1")

    log(f"Starting Flet app on port {port} | CWD={os.getcwd()} | assets={root}")

    try:
        import main as app_main
        log("Import main OK")
    except Exception:
        print("[BOOT][FATAL] Failed to import main:", file=sys.stderr, flush=True)
        traceback.print_exc()
        raise

    try:
        ft.app(
            target=_diagnose_target(app_main),
            view=ft.AppView.WEB_BROWSER,
            assets_dir=str(root),
            port=port,
        )
    except Exception:
        print("[BOOT][FATAL] ft.app crashed:", file=sys.stderr, flush=True)
        traceback.print_exc()
        raise

if __name__ == "__main__":
    _boot()
