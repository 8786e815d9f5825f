ROOT = "/"
LOGIN = "/login"
REGISTER = "/registro"
CLIENTS = "/clientes"

PUBLIC_ROUTES = (LOGIN, REGISTER)
PROTECTED_ROUTES = (CLIENTS,)


def normalize(route: str) -> str:
    path = (route or ROOT).split("?", maxsplit=1)[0].split("#", maxsplit=1)[0]
    path = path.rstrip("/")
    return path or ROOT


def resolve_route(route: str, is_authenticated: bool) -> str:
    """Return the route to render, redirecting to the login page when needed."""
    path = normalize(route)
    if path in PUBLIC_ROUTES:
        return path
    if path in PROTECTED_ROUTES:
        return path if is_authenticated else LOGIN
    return LOGIN
