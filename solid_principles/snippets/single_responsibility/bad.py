# Bad
class Salary:
    def calculate_salary(self) -> None:
        ...

    def print_paycheck(self) -> None:
        ...

    def save_data(self) -> None:
        ...
