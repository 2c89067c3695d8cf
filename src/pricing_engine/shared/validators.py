"""Payment instrument validators for Pricing Engine.

Every predicate here is total: malformed input (None, non-strings,
non-numeric text) yields False, never an exception.
"""

import re
from datetime import date
from typing import Optional, Union

from pricing_engine.core.models.payment import CreditCardInput

CARD_MIN_LENGTH = 13
CARD_MAX_LENGTH = 19


def _only_digits(value: object) -> Optional[str]:
    """Strip formatting characters, or None if value is not a string."""
    if not isinstance(value, str):
        return None
    return re.sub(r"\D", "", value)


def validate_card_number(number: str) -> bool:
    """
    Validate a card number with the Luhn checksum.

    Args:
        number: Card number (spaces allowed between groups)

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(number, str):
        return False

    digits = re.sub(r"\s", "", number)

    if not digits.isdigit() or not digits.isascii():
        return False

    if not CARD_MIN_LENGTH <= len(digits) <= CARD_MAX_LENGTH:
        return False

    if digits == digits[0] * len(digits):
        return False

    total = 0
    # Double every second digit counting from the rightmost one
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit

    return total % 10 == 0


def validate_cpf(cpf: str) -> bool:
    """
    Validate Brazilian CPF number.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    cpf = _only_digits(cpf)
    if cpf is None:
        return False

    if len(cpf) != 11:
        return False

    # Check for known invalid patterns (all same digits)
    if cpf == cpf[0] * 11:
        return False

    # Calculate first check digit
    sum1 = sum(int(cpf[i]) * (10 - i) for i in range(9))
    digit1 = (sum1 * 10 % 11) % 10

    if digit1 != int(cpf[9]):
        return False

    # Calculate second check digit
    sum2 = sum(int(cpf[i]) * (11 - i) for i in range(10))
    digit2 = (sum2 * 10 % 11) % 10

    return digit2 == int(cpf[10])


def validate_cnpj(cnpj: str) -> bool:
    """
    Validate Brazilian CNPJ number.

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    return validar_cnpj(cnpj)[0]


def validate_cpf_cnpj(document: str) -> bool:
    """Validate the card holder document, CPF (11 digits) or CNPJ (14 digits)."""
    digits = _only_digits(document)
    if digits is None:
        return False
    if len(digits) == 14:
        return validate_cnpj(digits)
    return validate_cpf(digits)


def _parse_int(value: Union[int, str, None]) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit() and value.strip().isascii():
        return int(value.strip())
    return None


def validate_expiry(
    month: Union[int, str],
    year: Union[int, str],
    today: Optional[date] = None,
) -> bool:
    """
    Validate card expiry month/year.

    Two-digit years are read as 20YY. A card expiring in the current
    month is still valid.

    Args:
        month: Expiry month (1-12), int or digit string
        year: Expiry year, int or digit string
        today: Reference date (default: date.today())

    Returns:
        True if the card has not expired, False otherwise
    """
    mes = _parse_int(month)
    ano = _parse_int(year)
    if mes is None or ano is None:
        return False

    if not 1 <= mes <= 12:
        return False

    if ano < 100:
        ano += 2000

    today = today or date.today()
    if ano < today.year:
        return False
    if ano == today.year and mes < today.month:
        return False

    return True


def validate_cvv(cvv: str) -> bool:
    """Validate card security code (exactly 3 or 4 digits)."""
    if not isinstance(cvv, str):
        return False
    return re.fullmatch(r"[0-9]{3,4}", cvv) is not None


def format_cpf(cpf: str) -> str:
    """Format CPF as XXX.XXX.XXX-XX."""
    cpf = re.sub(r"\D", "", cpf)
    if len(cpf) != 11:
        return cpf
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"


def format_cnpj(cnpj: str) -> str:
    """Format CNPJ as XX.XXX.XXX/XXXX-XX."""
    cnpj = re.sub(r"\D", "", cnpj)
    if len(cnpj) != 14:
        return cnpj
    return f"{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}"


def mask_cpf(cpf: str) -> str:
    """Mask CPF for display as ***.***.**X-XX."""
    cpf = re.sub(r"\D", "", cpf)
    if len(cpf) != 11:
        return "***.***.***-**"
    return f"***.***.**{cpf[8]}-{cpf[9:]}"


def format_card_number(number: str) -> str:
    """Group card digits in blocks of four: "4532 0151 1283 0366"."""
    digits = re.sub(r"\W", "", number)
    return re.sub(r"(.{4})", r"\1 ", digits).strip()


def mask_card_number(number: str) -> str:
    """Mask card number keeping only the last four digits."""
    digits = re.sub(r"\D", "", number)
    if len(digits) < 4:
        return "**** **** **** ****"
    return f"**** **** **** {digits[-4:]}"


# === Extended validation functions with error messages ===


def validar_cpf(cpf: str) -> tuple[bool, str]:
    """Validate CPF and return reason if invalid.

    Uses módulo 11 algorithm for check digit calculation.
    100% local - no external API calls.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    cpf = _only_digits(cpf)
    if cpf is None:
        return False, "CPF não informado"

    if len(cpf) != 11:
        return False, f"CPF deve ter 11 dígitos, tem {len(cpf)}"

    # Reject CPFs with all same digits
    if cpf == cpf[0] * 11:
        return False, "CPF com todos dígitos iguais é inválido"

    # Calculate first check digit
    soma = sum(int(cpf[i]) * (10 - i) for i in range(9))
    resto = soma % 11
    digito1 = 0 if resto < 2 else 11 - resto

    if int(cpf[9]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    # Calculate second check digit
    soma = sum(int(cpf[i]) * (11 - i) for i in range(10))
    resto = soma % 11
    digito2 = 0 if resto < 2 else 11 - resto

    if int(cpf[10]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""


def validar_cnpj(cnpj: str) -> tuple[bool, str]:
    """Validate CNPJ and return reason if invalid.

    Multipliers:
    - 1st digit: 5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-11)
    - 2nd digit: 6,5,4,3,2,9,8,7,6,5,4,3,2 (positions 0-12)

    Args:
        cnpj: CNPJ string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    cnpj = _only_digits(cnpj)
    if cnpj is None:
        return False, "CNPJ não informado"

    if len(cnpj) != 14:
        return False, f"CNPJ deve ter 14 dígitos, tem {len(cnpj)}"

    if cnpj == cnpj[0] * 14:
        return False, "CNPJ com todos dígitos iguais é inválido"

    mult1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(cnpj[i]) * mult1[i] for i in range(12))
    resto = soma % 11
    digito1 = 0 if resto < 2 else 11 - resto

    if int(cnpj[12]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    mult2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    soma = sum(int(cnpj[i]) * mult2[i] for i in range(13))
    resto = soma % 11
    digito2 = 0 if resto < 2 else 11 - resto

    if int(cnpj[13]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""


def validar_cartao(
    cartao: CreditCardInput,
    documento_titular: Optional[str] = None,
    today: Optional[date] = None,
) -> tuple[bool, str]:
    """Run every checkout check on a card and report the first failure.

    Args:
        cartao: Card data as typed in the checkout form
        documento_titular: Holder CPF/CNPJ, checked when given
        today: Reference date for the expiry check

    Returns:
        (True, "") if every check passes
        (False, "reason") for the first failing check
    """
    if not isinstance(cartao.holder_name, str) or not cartao.holder_name.strip():
        return False, "Nome do titular não informado"

    if not validate_card_number(cartao.number):
        return False, "Número do cartão inválido"

    if not validate_expiry(cartao.expiry_month, cartao.expiry_year, today):
        return False, "Validade do cartão inválida ou expirada"

    if not validate_cvv(cartao.ccv):
        return False, "CVV deve ter 3 ou 4 dígitos"

    if documento_titular is not None and not validate_cpf_cnpj(documento_titular):
        return False, "CPF/CNPJ do titular inválido"

    return True, ""
