"""Shared utilities for Pricing Engine."""

from pricing_engine.shared.formatters import (
    format_currency,
    format_month_label,
    format_percentage,
)
from pricing_engine.shared.validators import (
    format_card_number,
    format_cnpj,
    format_cpf,
    mask_card_number,
    mask_cpf,
    validar_cartao,
    validar_cnpj,
    validar_cpf,
    validate_card_number,
    validate_cnpj,
    validate_cpf,
    validate_cpf_cnpj,
    validate_cvv,
    validate_expiry,
)

__all__ = [
    # Formatters
    "format_currency",
    "format_month_label",
    "format_percentage",
    # Validators
    "format_card_number",
    "format_cnpj",
    "format_cpf",
    "mask_card_number",
    "mask_cpf",
    "validar_cartao",
    "validar_cnpj",
    "validar_cpf",
    "validate_card_number",
    "validate_cnpj",
    "validate_cpf",
    "validate_cpf_cnpj",
    "validate_cvv",
    "validate_expiry",
]
