import flet as ft

from cadastro.core import messages, routes
from cadastro.core.clients import CLIENT_FIELDS, FIELD_LABELS, Client
from cadastro.state.app_state import AppState
from cadastro.state.clients_state import ClientsState
from cadastro.state.notifier import Navigate, Notifier


FIELD_ICONS = {
    "email": ft.Icons.MAIL_OUTLINE,
    "telefone": ft.Icons.PHONE_OUTLINED,
    "endereco": ft.Icons.PLACE_OUTLINED,
}

FIELD_KEYBOARDS = {
    "email": ft.KeyboardType.EMAIL,
    "telefone": ft.KeyboardType.PHONE,
}


def build_clients_view(
    page: ft.Page,
    app_state: AppState,
    notify: Notifier,
    navigate: Navigate,
) -> ft.View:
    state = ClientsState(app_state.clients, notify)

    search = ft.TextField(
        hint_text="Buscar clientes...",
        prefix_icon=ft.Icons.SEARCH,
        width=380,
    )
    grid = ft.Row(wrap=True, spacing=16, run_spacing=16)
    spinner = ft.Container(
        alignment=ft.Alignment.CENTER,
        padding=40,
        content=ft.ProgressRing(),
    )

    inputs = {}

    def render() -> None:
        spinner.visible = state.loading
        grid.visible = not state.loading
        grid.controls.clear()
        rows = state.filtered_clients
        if not rows and not state.loading:
            grid.controls.append(ft.Text("Nenhum cliente encontrado."))
        for client in rows:
            grid.controls.append(client_card(client))
        page.update()

    def client_card(client: Client) -> ft.Control:
        details = [
            ft.Row(
                vertical_alignment=ft.CrossAxisAlignment.START,
                controls=[
                    ft.Icon(FIELD_ICONS[name], size=16, color=ft.Colors.GREY_600),
                    ft.Text(getattr(client, name), size=13, color=ft.Colors.GREY_700, expand=True),
                ],
            )
            for name in ("email", "telefone", "endereco")
        ]
        return ft.Card(
            width=340,
            content=ft.Container(
                padding=16,
                content=ft.Column(
                    spacing=10,
                    controls=[
                        ft.Row(
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            controls=[
                                ft.Text(client.nome, size=17, weight=ft.FontWeight.BOLD, expand=True),
                                ft.IconButton(
                                    icon=ft.Icons.EDIT_OUTLINED,
                                    tooltip="Editar",
                                    on_click=lambda _, c=client: open_edit(c),
                                ),
                                ft.IconButton(
                                    icon=ft.Icons.DELETE_OUTLINE,
                                    icon_color=ft.Colors.RED_400,
                                    tooltip="Excluir",
                                    on_click=lambda _, cid=client.id: ask_delete(cid),
                                ),
                            ],
                        ),
                        *details,
                    ],
                ),
            ),
        )

    def build_inputs() -> None:
        # fresh controls for every dialog instance
        for name in CLIENT_FIELDS:
            inputs[name] = ft.TextField(
                label=FIELD_LABELS[name],
                value=getattr(state.form, name),
                keyboard_type=FIELD_KEYBOARDS.get(name, ft.KeyboardType.TEXT),
            )

    def sync_form_from_inputs() -> None:
        for name in CLIENT_FIELDS:
            setattr(state.form, name, inputs[name].value or "")

    dialogs = {}

    def show_modal() -> None:
        build_inputs()
        dialogs["form"] = ft.AlertDialog(
            modal=True,
            title=ft.Text(state.modal_title, weight=ft.FontWeight.BOLD),
            content=ft.Column(tight=True, width=420, controls=[inputs[name] for name in CLIENT_FIELDS]),
            actions=[
                ft.TextButton("Cancelar", on_click=on_cancel),
                ft.Button(state.submit_label, on_click=on_submit),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        page.show_dialog(dialogs["form"])

    def close_dialog(key: str) -> None:
        dialog = dialogs.pop(key, None)
        if dialog is not None:
            dialog.open = False
            page.update()

    def hide_modal() -> None:
        close_dialog("form")

    def open_new(_=None) -> None:
        state.open_new()
        show_modal()

    def open_edit(client: Client) -> None:
        state.open_edit(client)
        show_modal()

    def on_cancel(_) -> None:
        state.close_modal()
        hide_modal()

    def on_submit(_) -> None:
        sync_form_from_inputs()
        if state.submit():
            hide_modal()
            render()

    def ask_delete(client_id: str) -> None:
        state.request_delete(client_id)
        dialogs["confirm"] = ft.AlertDialog(
            modal=True,
            title=ft.Text("Excluir cliente"),
            content=ft.Text(messages.CLIENT_DELETE_CONFIRM),
            actions=[
                ft.TextButton("Cancelar", on_click=on_cancel_delete),
                ft.TextButton("Excluir", on_click=on_confirm_delete),
            ],
            actions_alignment=ft.MainAxisAlignment.END,
        )
        page.show_dialog(dialogs["confirm"])

    def on_confirm_delete(_) -> None:
        close_dialog("confirm")
        if state.confirm_delete():
            render()

    def on_cancel_delete(_) -> None:
        state.cancel_delete()
        close_dialog("confirm")

    def on_search(e) -> None:
        state.search_term = e.control.value or ""
        render()

    def on_logout(_) -> None:
        state.logout(app_state.auth, navigate)

    def load() -> None:
        state.fetch()
        render()

    search.on_change = on_search

    grid.visible = False
    page.run_thread(load)

    return ft.View(
        route=routes.CLIENTS,
        appbar=ft.AppBar(
            leading=ft.Icon(ft.Icons.PEOPLE),
            title=ft.Text("Gerenciamento de Clientes"),
            actions=[
                ft.TextButton("Sair", icon=ft.Icons.LOGOUT, on_click=on_logout),
            ],
        ),
        controls=[
            ft.Container(
                padding=20,
                content=ft.Column(
                    scroll=ft.ScrollMode.AUTO,
                    controls=[
                        ft.Row(
                            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                            wrap=True,
                            controls=[
                                search,
                                ft.Button("Novo Cliente", icon=ft.Icons.ADD, on_click=open_new),
                            ],
                        ),
                        spinner,
                        grid,
                    ],
                ),
            ),
        ],
    )
