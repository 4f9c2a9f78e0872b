# run_native.py — abre o cadastro em janela nativa (desktop)
from __future__ import annotations
import flet as ft

from main import main as app_main

if __name__ == "__main__":
    # AppView.FLET_APP abre janela nativa; WEB_BROWSER abre no navegador
    ft.app(
        target=app_main,
        view=ft.AppView.FLET_APP,
        assets_dir=".",
    )
