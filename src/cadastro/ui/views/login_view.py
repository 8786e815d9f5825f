import flet as ft

from cadastro.core import routes
from cadastro.state.app_state import AppState
from cadastro.state.auth_forms import LoginForm
from cadastro.state.notifier import Navigate, Notifier


def build_login_view(
    page: ft.Page,
    app_state: AppState,
    notify: Notifier,
    navigate: Navigate,
) -> ft.View:
    form = LoginForm()
    email = ft.TextField(label="E-mail", width=350, keyboard_type=ft.KeyboardType.EMAIL, autofocus=True)
    password = ft.TextField(label="Senha", password=True, can_reveal_password=True, width=350)
    submit_button = ft.Button("Entrar", width=350)
    progress = ft.ProgressRing(width=20, height=20, visible=False)

    def on_submit(_):
        form.email = email.value or ""
        form.password = password.value or ""
        submit_button.disabled = True
        progress.visible = True
        page.update()
        try:
            form.submit(app_state.auth, notify, navigate)
        finally:
            submit_button.disabled = False
            progress.visible = False
            page.update()

    submit_button.on_click = on_submit
    password.on_submit = on_submit

    return ft.View(
        route=routes.LOGIN,
        controls=[
            ft.Container(
                alignment=ft.Alignment.CENTER,
                padding=20,
                expand=True,
                content=ft.Column(
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    alignment=ft.MainAxisAlignment.CENTER,
                    controls=[
                        ft.Icon(ft.Icons.PEOPLE, size=48, color=ft.Colors.INDIGO_400),
                        ft.Text("Bem-vindo de volta", size=30, weight=ft.FontWeight.BOLD),
                        ft.Text("Entre com sua conta para gerenciar seus clientes."),
                        email,
                        password,
                        ft.Row(alignment=ft.MainAxisAlignment.CENTER, controls=[submit_button, progress]),
                        ft.Row(
                            alignment=ft.MainAxisAlignment.CENTER,
                            controls=[
                                ft.Text("Não tem uma conta?"),
                                ft.TextButton("Cadastre-se", on_click=lambda _: navigate(routes.REGISTER)),
                            ],
                        ),
                    ],
                ),
            ),
        ],
    )
