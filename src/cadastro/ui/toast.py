import flet as ft


class Toaster:
    """Snackbar notifications for success and error messages."""

    def __init__(self, page: ft.Page, duration_ms: int = 4000) -> None:
        self.page = page
        self.duration_ms = duration_ms

    def success(self, message: str) -> None:
        self._show(message, ft.Colors.GREEN_600)

    def error(self, message: str) -> None:
        self._show(message, ft.Colors.RED_600)

    def _show(self, message: str, color: str) -> None:
        self.page.show_dialog(
            ft.SnackBar(
                content=ft.Text(message, color=ft.Colors.WHITE),
                bgcolor=color,
                duration=self.duration_ms,
            )
        )
