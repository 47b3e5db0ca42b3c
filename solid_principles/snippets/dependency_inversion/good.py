# Good
from abc import ABC, abstractmethod


class DBConnection(ABC):
    @abstractmethod
    def connect(self) -> None:
        ...


class MySQLConnection(DBConnection):
    def connect(self) -> None:
        ...


class AppInit:
    def __init__(self, connection: DBConnection) -> None:
        self.connection = connection

    def start(self) -> None:
        self.connection.connect()
