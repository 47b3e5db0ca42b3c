# Bad
from abc import ABC, abstractmethod


class Notifier(ABC):
    @abstractmethod
    def notify(self) -> None:
        ...

    @abstractmethod
    def attach_file(self, path: str) -> None:
        ...


class EmailNotifier(Notifier):
    def notify(self) -> None:
        ...

    def attach_file(self, path: str) -> None:
        ...


class SMSNotifier(Notifier):
    def notify(self) -> None:
        ...

    def attach_file(self, path: str) -> None:
        raise NotImplementedError("Unsupported operation")
