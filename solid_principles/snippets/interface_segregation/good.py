# Good
from abc import ABC, abstractmethod


class Notifier(ABC):
    @abstractmethod
    def notify(self) -> None:
        ...


class Attacher(ABC):
    @abstractmethod
    def attach_file(self, path: str) -> None:
        ...


class EmailNotifier(Notifier, Attacher):
    def notify(self) -> None:
        ...

    def attach_file(self, path: str) -> None:
        ...


class SMSNotifier(Notifier):
    def notify(self) -> None:
        ...
