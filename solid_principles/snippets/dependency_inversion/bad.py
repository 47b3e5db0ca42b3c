# Bad
class DBConnection:
    def connect(self) -> None:
        ...


class AppInit:
    def __init__(self) -> None:
        self.connection = DBConnection()

    def start(self) -> None:
        self.connection.connect()
