import flet as ft
import structlog

from cadastro.config.logging import configure_logging
from cadastro.config.settings import settings
from cadastro.services.auth_service import AuthServiceError
from cadastro.services.firestore_service import FirestoreServiceError
from cadastro.state.app_state import AppState
from cadastro.ui.app import CadastroApp


logger = structlog.get_logger(__name__)


def main(page: ft.Page) -> None:
    try:
        app_state = AppState.from_settings()
    except (AuthServiceError, FirestoreServiceError) as exc:
        logger.error("Configuration error", error=str(exc))
        page.add(ft.Text(f"Erro de configuração: {exc}", color=ft.Colors.RED_400))
        return
    CadastroApp(page, app_state).run()


def run() -> None:
    configure_logging(settings.log_level, settings.log_json)
    logger.info("Starting Cadastro de Clientes", web_mode=settings.web_mode, port=settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
