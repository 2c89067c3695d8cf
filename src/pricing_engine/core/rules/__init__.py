"""Price tables and tax brackets."""

from pricing_engine.core.rules.plan_prices import (
    DATA_INICIO_PADRAO,
    MESES_JANELA_PROJECAO,
    PLAN_PRICES,
    ROTULO_PRIMEIRO_MES,
)
from pricing_engine.core.rules.tax_constants import (
    DEDUCAO_DEPENDENTE,
    DESCONTO_SIMPLIFICADO,
    FAIXAS_INSS,
    FAIXAS_IRRF,
    LIMITE_ISENCAO_IRRF,
    TETO_CONTRIBUICAO_INSS,
    arredondar,
    calcular_inss,
    calcular_irrf,
)

__all__ = [
    "DATA_INICIO_PADRAO",
    "MESES_JANELA_PROJECAO",
    "PLAN_PRICES",
    "ROTULO_PRIMEIRO_MES",
    "DEDUCAO_DEPENDENTE",
    "DESCONTO_SIMPLIFICADO",
    "FAIXAS_INSS",
    "FAIXAS_IRRF",
    "LIMITE_ISENCAO_IRRF",
    "TETO_CONTRIBUICAO_INSS",
    "arredondar",
    "calcular_inss",
    "calcular_irrf",
]
