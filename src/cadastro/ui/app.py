from typing import Optional

import flet as ft
import structlog

from cadastro.core import routes
from cadastro.state.app_state import AppState
from cadastro.state.session_state import SessionState
from cadastro.ui.toast import Toaster
from cadastro.ui.views.clients_view import build_clients_view
from cadastro.ui.views.login_view import build_login_view
from cadastro.ui.views.register_view import build_register_view


logger = structlog.get_logger(__name__)

VIEW_BUILDERS = {
    routes.LOGIN: build_login_view,
    routes.REGISTER: build_register_view,
    routes.CLIENTS: build_clients_view,
}


class CadastroApp:
    def __init__(self, page: ft.Page, app_state: AppState) -> None:
        self.page = page
        self.app_state = app_state
        self.toaster = Toaster(page)
        self.page.title = "Cadastro de Clientes"
        self.page.theme_mode = ft.ThemeMode.LIGHT
        self.page.on_route_change = self.route_change
        self.page.on_view_pop = self.view_pop
        self.app_state.auth.subscribe(self.on_auth_changed)

    def run(self) -> None:
        self.route_change()
        self.page.run_thread(self.app_state.auth.initialize)

    def navigate(self, route: str) -> None:
        self.page.go(route)

    def on_auth_changed(self, user: Optional[SessionState]) -> None:
        # login/register navigate on their own; only react to sign-out and session restore
        current = routes.normalize(self.page.route)
        if user is None or current in routes.PROTECTED_ROUTES:
            self.route_change()

    def route_change(self, _=None) -> None:
        auth = self.app_state.auth
        current = routes.normalize(self.page.route)

        if auth.loading and current in routes.PROTECTED_ROUTES:
            self._show(self._loading_view(current))
            return

        target = routes.resolve_route(current, auth.is_authenticated)
        if target != self.page.route:
            logger.debug("Redirecting", requested=self.page.route, target=target)
            self.navigate(target)
            return

        builder = VIEW_BUILDERS[target]
        self._show(builder(self.page, self.app_state, self.toaster, self.navigate))

    def view_pop(self, _) -> None:
        self.navigate(routes.LOGIN if not self.app_state.auth.is_authenticated else routes.CLIENTS)

    def _show(self, view: ft.View) -> None:
        self.page.views.clear()
        self.page.views.append(view)
        self.page.update()

    @staticmethod
    def _loading_view(route: str) -> ft.View:
        return ft.View(
            route=route,
            controls=[
                ft.Container(
                    alignment=ft.Alignment.CENTER,
                    expand=True,
                    content=ft.ProgressRing(),
                )
            ],
        )
