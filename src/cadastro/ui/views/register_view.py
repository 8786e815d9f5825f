import flet as ft

from cadastro.core import routes
from cadastro.state.app_state import AppState
from cadastro.state.auth_forms import RegisterForm
from cadastro.state.notifier import Navigate, Notifier


def build_register_view(
    page: ft.Page,
    app_state: AppState,
    notify: Notifier,
    navigate: Navigate,
) -> ft.View:
    form = RegisterForm()
    email = ft.TextField(label="E-mail", width=350, keyboard_type=ft.KeyboardType.EMAIL, autofocus=True)
    password = ft.TextField(label="Senha", password=True, can_reveal_password=True, width=350)
    confirm = ft.TextField(label="Confirmar senha", password=True, can_reveal_password=True, width=350)
    submit_button = ft.Button("Criar conta", width=350)

    def on_submit(_):
        form.email = email.value or ""
        form.password = password.value or ""
        form.confirm_password = confirm.value or ""
        submit_button.disabled = True
        page.update()
        try:
            form.submit(app_state.auth, notify, navigate)
        finally:
            submit_button.disabled = False
            page.update()

    submit_button.on_click = on_submit
    confirm.on_submit = on_submit

    return ft.View(
        route=routes.REGISTER,
        controls=[
            ft.Container(
                alignment=ft.Alignment.CENTER,
                padding=20,
                expand=True,
                content=ft.Column(
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    alignment=ft.MainAxisAlignment.CENTER,
                    controls=[
                        ft.Icon(ft.Icons.PERSON_ADD, size=48, color=ft.Colors.INDIGO_400),
                        ft.Text("Criar conta", size=30, weight=ft.FontWeight.BOLD),
                        ft.Text("Cadastre-se para começar a gerenciar seus clientes."),
                        email,
                        password,
                        confirm,
                        submit_button,
                        ft.Row(
                            alignment=ft.MainAxisAlignment.CENTER,
                            controls=[
                                ft.Text("Já tem uma conta?"),
                                ft.TextButton("Entrar", on_click=lambda _: navigate(routes.LOGIN)),
                            ],
                        ),
                    ],
                ),
            ),
        ],
    )
