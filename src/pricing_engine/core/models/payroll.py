"""Payroll withholding result models."""

from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from pricing_engine.core.models.enums import BaseIR


class TaxBaseResult(BaseModel):
    """Income tax computed on one of the two permitted bases."""

    kind: BaseIR = Field(..., description="Legal deductions or simplified discount")
    base: Decimal = Field(..., description="Taxable base")
    tax: Decimal = Field(..., description="Tax due on this base")

    model_config = {"frozen": True}


class PayrollResult(BaseModel):
    """Gross-to-net conversion of a monthly payment."""

    gross: Decimal = Field(default=Decimal("0"))
    dependents: int = Field(default=0, ge=0)
    contribution: Decimal = Field(default=Decimal("0"), description="INSS")
    income_tax: Decimal = Field(default=Decimal("0"), description="IRRF")
    chosen_base: BaseIR = Field(default=BaseIR.LEGAL)
    base_legal: TaxBaseResult = Field(
        default_factory=lambda: TaxBaseResult(
            kind=BaseIR.LEGAL, base=Decimal("0"), tax=Decimal("0")
        )
    )
    base_simplified: TaxBaseResult = Field(
        default_factory=lambda: TaxBaseResult(
            kind=BaseIR.SIMPLIFIED, base=Decimal("0"), tax=Decimal("0")
        )
    )
    net: Decimal = Field(default=Decimal("0"))

    @computed_field
    @property
    def total_withheld(self) -> Decimal:
        """INSS + IRRF."""
        return self.contribution + self.income_tax

    model_config = {"frozen": True}


class ExtraIncomeResult(BaseModel):
    """Tax attributable to an extra amount paid on top of a base salary."""

    base_salary: Decimal = Field(default=Decimal("0"))
    extra: Decimal = Field(default=Decimal("0"))
    tax_on_extra: Decimal = Field(default=Decimal("0"))
    net_extra: Decimal = Field(default=Decimal("0"))

    model_config = {"frozen": True}
