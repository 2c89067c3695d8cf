"""Payroll withholding: gross-to-net with INSS and IRRF.

Income tax is computed on two bases and the lower tax wins:

- legal deductions: gross - INSS - dependents * DEDUCAO_DEPENDENTE
- simplified discount: gross - DESCONTO_SIMPLIFICADO (INSS not subtracted)
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from loguru import logger

from pricing_engine.core.models.enums import BaseIR
from pricing_engine.core.models.payroll import ExtraIncomeResult, PayrollResult, TaxBaseResult
from pricing_engine.core.rules.tax_constants import (
    DEDUCAO_DEPENDENTE,
    DESCONTO_SIMPLIFICADO,
    arredondar,
    calcular_inss,
    calcular_irrf,
)
from pricing_engine.shared.exceptions import ValidationError

ZERO = Decimal("0")

Valor = Union[Decimal, int, str]


def _to_decimal(valor: Valor) -> Decimal:
    """Convert to Decimal rounded to cents."""
    try:
        valor = valor if isinstance(valor, Decimal) else Decimal(str(valor))
    except InvalidOperation as e:
        raise ValidationError(f"Valor inválido: {valor!r}") from e
    if not valor.is_finite():
        raise ValidationError(f"Valor inválido: {valor}")
    return arredondar(valor)


class PayrollTaxCalculator:
    """Computes monthly INSS and IRRF withholding."""

    def tax_bases(
        self, gross: Decimal, contribution: Decimal, dependents: int
    ) -> tuple[TaxBaseResult, TaxBaseResult]:
        """Income tax on the legal and the simplified base."""
        base_legal = arredondar(gross - contribution - dependents * DEDUCAO_DEPENDENTE)
        base_simplificada = arredondar(gross - DESCONTO_SIMPLIFICADO)

        return (
            TaxBaseResult(kind=BaseIR.LEGAL, base=base_legal, tax=calcular_irrf(base_legal)),
            TaxBaseResult(
                kind=BaseIR.SIMPLIFIED,
                base=base_simplificada,
                tax=calcular_irrf(base_simplificada),
            ),
        )

    def withholding(self, gross: Valor, dependents: int = 0) -> PayrollResult:
        """Gross-to-net conversion of a monthly payment.

        Args:
            gross: Monthly gross amount
            dependents: Number of dependents (negative values count as 0)

        Returns:
            PayrollResult with contribution, income tax, chosen base and net
        """
        gross = _to_decimal(gross)
        dependents = max(dependents, 0)

        if gross <= 0:
            return PayrollResult(gross=gross, dependents=dependents)

        contribution = calcular_inss(gross)
        legal, simplified = self.tax_bases(gross, contribution, dependents)

        # Ties keep the legal base
        chosen = simplified if simplified.tax < legal.tax else legal
        income_tax = chosen.tax

        logger.debug(
            "Bruto {}: INSS {}, IR legal {} / simplificado {} -> {}",
            gross,
            contribution,
            legal.tax,
            simplified.tax,
            chosen.kind.value,
        )

        return PayrollResult(
            gross=gross,
            dependents=dependents,
            contribution=contribution,
            income_tax=income_tax,
            chosen_base=chosen.kind,
            base_legal=legal,
            base_simplified=simplified,
            net=gross - contribution - income_tax,
        )

    def marginal_extra(
        self, base_salary: Valor, extra: Valor, dependents: int = 0
    ) -> ExtraIncomeResult:
        """Net value of an extra amount paid on top of a base salary.

        The tax attributed to the extra is the difference in total
        withholding with and without it, so bracket changes caused by the
        extra are charged to the extra.
        """
        base_salary = _to_decimal(base_salary)
        extra = _to_decimal(extra)

        if extra <= 0:
            return ExtraIncomeResult(base_salary=base_salary, extra=extra)

        sem_extra = self.withholding(base_salary, dependents)
        com_extra = self.withholding(base_salary + extra, dependents)
        tax_on_extra = com_extra.total_withheld - sem_extra.total_withheld

        return ExtraIncomeResult(
            base_salary=base_salary,
            extra=extra,
            tax_on_extra=tax_on_extra,
            net_extra=max(extra - tax_on_extra, ZERO),
        )


def calculate_withholding(gross: Valor, dependents: int = 0) -> PayrollResult:
    """Convenience function to compute withholding on a gross amount."""
    return PayrollTaxCalculator().withholding(gross, dependents)


def calculate_net_extra(base_salary: Valor, extra: Valor, dependents: int = 0) -> ExtraIncomeResult:
    """Convenience function to net out an extra amount."""
    return PayrollTaxCalculator().marginal_extra(base_salary, extra, dependents)
