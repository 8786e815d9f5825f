from typing import Callable, Protocol


Navigate = Callable[[str], None]


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...
