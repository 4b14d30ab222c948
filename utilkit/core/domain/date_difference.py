"""
DateDifference — разница между двумя датами

Immutable Pydantic модель. Все три поля имеют знак дельты в днях:
- weeks = days / 7, усечение к нулю
- years = days / 365, усечение к нулю (аппроксимация, високосные годы НЕ учитываются)
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator

from utilkit.config import DAYS_PER_WEEK, DAYS_PER_YEAR_APPROX
from utilkit.core.contracts import validate_contract
from utilkit.core.math.integer_safeguards import truncating_div


class DateDifference(BaseModel):
    """
    Разница date2 - date1.

    Создаётся через DateDifference.from_days(); прямой конструктор проверяет,
    что weeks и years согласованы с days.
    """

    days: int = Field(..., description="Знаковая разница в днях")
    weeks: int = Field(..., description="days / 7 с усечением к нулю")
    years: int = Field(..., description="days / 365 с усечением к нулю (приближённо)")

    contract_name: ClassVar[str] = "date_difference"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_derived_fields(self) -> "DateDifference":
        """Проверка, что weeks/years выведены из days."""
        expected_weeks = truncating_div(self.days, DAYS_PER_WEEK)
        if self.weeks != expected_weeks:
            raise ValueError(f"weeks {self.weeks} must be {expected_weeks} for days {self.days}")

        expected_years = truncating_div(self.days, DAYS_PER_YEAR_APPROX)
        if self.years != expected_years:
            raise ValueError(f"years {self.years} must be {expected_years} for days {self.days}")
        return self

    @classmethod
    def from_days(cls, days: int) -> "DateDifference":
        """Построение из знаковой разницы в днях."""
        return cls(
            days=days,
            weeks=truncating_div(days, DAYS_PER_WEEK),
            years=truncating_div(days, DAYS_PER_YEAR_APPROX),
        )

    def to_contract(self) -> dict[str, Any]:
        """Сериализация с проверкой по контракту date_difference."""
        return validate_contract(self.contract_name, self.model_dump())
