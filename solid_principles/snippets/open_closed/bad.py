# Bad
from typing import List, Optional


class Employee:
    selected_notify_channel: Optional[str] = None

    def send_email_notification(self) -> None:
        ...

    def send_sms_notification(self) -> None:
        ...


class NotifyManager:
    def notify_all(self, employees: List[Employee]) -> None:
        for employee in employees:
            if employee.selected_notify_channel == "SMS":
                employee.send_sms_notification()
            elif employee.selected_notify_channel == "Email":
                employee.send_email_notification()
            else:
                raise ValueError("Unknown Channel")
