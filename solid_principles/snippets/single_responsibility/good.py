# Good
class SalaryCalculate:
    def calculate(self) -> None:
        ...


class SalaryPaycheck:
    def print(self) -> None:
        ...


class SalaryPersistence:
    def save(self) -> None:
        ...
