"""Plan price table and projection defaults.

Annual prices are stored as the total charged per year; the projection
spreads them over 12 months.
"""

from datetime import date
from decimal import Decimal

from pricing_engine.core.models.enums import CicloCobranca, Plano

# === Plan prices (BRL) ===
# Format: (plano, ciclo) -> price charged per cycle

PLAN_PRICES: dict[tuple[Plano, CicloCobranca], Decimal] = {
    (Plano.STARTER, CicloCobranca.MONTHLY): Decimal("0"),
    (Plano.STARTER, CicloCobranca.ANNUAL): Decimal("0"),
    (Plano.PRO, CicloCobranca.MONTHLY): Decimal("35.90"),
    (Plano.PRO, CicloCobranca.ANNUAL): Decimal("399.00"),
    (Plano.FAMILY, CicloCobranca.MONTHLY): Decimal("59.90"),
    (Plano.FAMILY, CicloCobranca.ANNUAL): Decimal("599.90"),
}

MESES_POR_ANO = 12

# Subscriptions without start date or account creation date are treated
# as active since this date, so they show up in every projection.
DATA_INICIO_PADRAO = date(1970, 1, 1)

# Label used when the first month price was fixed manually
ROTULO_PRIMEIRO_MES = "first-month override"

# Months shown by the revenue projection: December of the previous year
# through December of the current year
MESES_JANELA_PROJECAO = 13
