import logging

import flet as ft

from gradecalc.config.settings import settings
from gradecalc.state.calculator_state import CalculatorState
from gradecalc.ui.views.calculator_view import build_calculator_view


logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(page: ft.Page) -> None:
    page.title = settings.app_title
    state = CalculatorState()
    page.views.clear()
    page.views.append(build_calculator_view(page, state, title=settings.app_title))
    page.update()
    logger.info("Calculator session started")


def run() -> None:
    configure_logging()
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
