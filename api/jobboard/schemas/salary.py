from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

SalaryType = Literal["FIXED", "RANGE", "FIXED_INCENTIVE", "UNPAID"]
SalaryPeriod = Literal["MONTH", "YEAR", "HOUR", "WEEK"]

SALARY_AMOUNT_FIELDS = ("fixed_amount", "min_amount", "max_amount", "incentive_details")

Amount = Annotated[Decimal, Field(ge=0, max_digits=12, decimal_places=2)]


class _SalaryBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    is_salary_hidden: bool = False
    is_negotiable: bool = False
    currency: str = Field(default="INR", pattern=r"^[A-Z]{3}$")
    salary_period: SalaryPeriod = "MONTH"


class FixedSalary(_SalaryBase):
    salary_type: Literal["FIXED"] = "FIXED"
    fixed_amount: Amount


class RangeSalary(_SalaryBase):
    salary_type: Literal["RANGE"] = "RANGE"
    min_amount: Amount
    max_amount: Amount

    @model_validator(mode="after")
    def _check_bounds(self) -> "RangeSalary":
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must be less than or equal to max_amount")
        return self


class FixedIncentiveSalary(_SalaryBase):
    salary_type: Literal["FIXED_INCENTIVE"] = "FIXED_INCENTIVE"
    fixed_amount: Amount
    incentive_details: str = Field(min_length=1)


class UnpaidSalary(_SalaryBase):
    salary_type: Literal["UNPAID"] = "UNPAID"


SalaryDetail = Annotated[
    Union[FixedSalary, RangeSalary, FixedIncentiveSalary, UnpaidSalary],
    Field(discriminator="salary_type"),
]


class SalaryOut(BaseModel):
    salary_type: SalaryType
    fixed_amount: Decimal | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None
    incentive_details: str | None = None
    is_salary_hidden: bool = False
    is_negotiable: bool = False
    currency: str = "INR"
    salary_period: SalaryPeriod = "MONTH"
