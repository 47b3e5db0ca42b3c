# Good
from abc import ABC, abstractmethod
from typing import List, Optional


class Notifier(ABC):
    @abstractmethod
    def notify(self) -> None:
        ...


class EmailNotifier(Notifier):
    def notify(self) -> None:
        ...


class SMSNotifier(Notifier):
    def notify(self) -> None:
        ...


class Employee:
    selected_notify_channel: Optional[str] = None

    # An EmployeeEntity reads the preferences from the database and builds
    # the Employee with the notifier matching selected_notify_channel.
    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    def send_notification(self) -> None:
        self._notifier.notify()


class NotifyManager:
    def notify_all(self, employees: List[Employee]) -> None:
        for employee in employees:
            employee.send_notification()
