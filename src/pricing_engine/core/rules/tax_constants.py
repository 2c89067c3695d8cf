"""Monthly payroll withholding tables (INSS and IRRF).

Values follow the 2025 tables published by the Brazilian government.
Sources:
- https://www.gov.br/inss/pt-br/direitos-e-deveres/inscricao-e-contribuicao/tabela-de-contribuicao-mensal
- https://www.gov.br/receitafederal/pt-br/assuntos/meu-imposto-de-renda/tabelas/2025

Both tables use the "parcela a deduzir" form: inside a band the amount is
``valor * aliquota - deducao``, which equals the cumulative marginal sum.
"""

from decimal import ROUND_HALF_UP, Decimal

CENTAVO = Decimal("0.01")
ZERO = Decimal("0")

# === INSS (employee contribution, monthly) ===
# Format: (teto_da_faixa, aliquota, deducao_parcela)

FAIXAS_INSS = [
    (Decimal("1518.00"), Decimal("0.075"), Decimal("0")),       # 7.5%
    (Decimal("2793.88"), Decimal("0.09"), Decimal("22.77")),    # 9%
    (Decimal("4190.83"), Decimal("0.12"), Decimal("106.59")),   # 12%
    (Decimal("8157.41"), Decimal("0.14"), Decimal("190.40")),   # 14%
]

# Contribution above the last band is a fixed value
TETO_CONTRIBUICAO_INSS = Decimal("951.63")

# === IRRF (income tax withheld, monthly) ===

# Bases up to this value are exempt
LIMITE_ISENCAO_IRRF = Decimal("2428.80")

# Format: (teto_da_faixa, aliquota, deducao_parcela); None = no ceiling
FAIXAS_IRRF = [
    (Decimal("2826.65"), Decimal("0.075"), Decimal("182.16")),  # 7.5%
    (Decimal("3751.05"), Decimal("0.15"), Decimal("394.16")),   # 15%
    (Decimal("4664.68"), Decimal("0.225"), Decimal("675.49")),  # 22.5%
    (None, Decimal("0.275"), Decimal("908.73")),                # 27.5%
]

# Deduction per dependent
DEDUCAO_DEPENDENTE = Decimal("189.59")

# Simplified monthly discount (replaces INSS + dependents in the base)
DESCONTO_SIMPLIFICADO = Decimal("607.20")


def arredondar(valor: Decimal) -> Decimal:
    """Round a money value to cents (half up)."""
    return valor.quantize(CENTAVO, rounding=ROUND_HALF_UP)


def calcular_inss(salario_bruto: Decimal) -> Decimal:
    """Calculate the monthly INSS contribution.

    Exactly one band applies; above the last band the contribution is
    capped at TETO_CONTRIBUICAO_INSS.

    Args:
        salario_bruto: Monthly gross amount

    Returns:
        Contribution rounded to cents
    """
    if salario_bruto <= 0:
        return ZERO

    for teto, aliquota, deducao in FAIXAS_INSS:
        if salario_bruto <= teto:
            # Never above the ceiling: 8157.41 rounds to 951.64
            contribuicao = arredondar(max(salario_bruto * aliquota - deducao, ZERO))
            return min(contribuicao, TETO_CONTRIBUICAO_INSS)

    return TETO_CONTRIBUICAO_INSS


def calcular_irrf(base_calculo: Decimal) -> Decimal:
    """Calculate monthly income tax for a taxable base.

    Args:
        base_calculo: Monthly taxable base (after deductions)

    Returns:
        Tax rounded to cents, never negative
    """
    if base_calculo <= LIMITE_ISENCAO_IRRF:
        return ZERO

    for teto, aliquota, deducao in FAIXAS_IRRF:
        if teto is None or base_calculo <= teto:
            return arredondar(max(base_calculo * aliquota - deducao, ZERO))

    return ZERO

