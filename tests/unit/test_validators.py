"""Tests for payment instrument validators."""

from datetime import date

import pytest

from pricing_engine.core.models import CreditCardInput
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

VALID_CARD = "4532015112830366"
VALID_CPF = "52998224725"


class TestCardNumberValidation:
    """Tests for Luhn card number validation."""

    def test_valid_card_numbers(self):
        """Known valid test card numbers."""
        assert validate_card_number(VALID_CARD) is True
        assert validate_card_number("4111111111111111") is True
        assert validate_card_number("5555555555554444") is True
        assert validate_card_number("378282246310005") is True  # 15-digit Amex

    def test_whitespace_is_ignored(self):
        """Spaces between groups are stripped before checking."""
        assert validate_card_number("4532 0151 1283 0366") is True
        assert validate_card_number(" 4532015112830366\n") is True

    def test_every_single_digit_change_is_detected(self):
        """Luhn catches any single-digit substitution."""
        for position, digit in enumerate(VALID_CARD):
            for replacement in "0123456789":
                if replacement == digit:
                    continue
                mutated = VALID_CARD[:position] + replacement + VALID_CARD[position + 1:]
                assert validate_card_number(mutated) is False, mutated

    def test_rejects_non_digits(self):
        """Dashes, letters and other characters are rejected."""
        assert validate_card_number("4532-0151-1283-0366") is False
        assert validate_card_number("4532O15112830366") is False
        assert validate_card_number("") is False

    def test_rejects_wrong_length(self):
        """Only 13 to 19 digits are accepted."""
        assert validate_card_number("424242424242") is False
        assert validate_card_number("4" * 20) is False

    def test_rejects_all_identical_digits(self):
        """All-zero numbers pass Luhn but are rejected anyway."""
        assert validate_card_number("0000000000000") is False
        assert validate_card_number("0000000000000000") is False

    def test_non_string_input_returns_false(self):
        """Validators never raise."""
        assert validate_card_number(None) is False
        assert validate_card_number(4532015112830366) is False


class TestCPFValidation:
    """Tests for CPF validation."""

    def test_valid_cpf(self):
        """Test valid CPF numbers."""
        assert validate_cpf(VALID_CPF) is True
        assert validate_cpf("529.982.247-25") is True
        assert validate_cpf("111.444.777-35") is True

    def test_invalid_cpf_all_same_digits(self):
        """Test that CPFs with all same digits are invalid."""
        assert validate_cpf("11111111111") is False
        assert validate_cpf("00000000000") is False
        assert validate_cpf("99999999999") is False

    def test_invalid_cpf_wrong_length(self):
        """Test CPFs with wrong length."""
        assert validate_cpf("1234567890") is False
        assert validate_cpf("123456789012") is False
        assert validate_cpf("") is False

    def test_invalid_cpf_wrong_check_digits(self):
        """Test CPFs with wrong check digits."""
        assert validate_cpf("52998224726") is False
        assert validate_cpf("52998224724") is False

    def test_adjacent_transpositions_fail(self):
        """Swapping any two different adjacent digits breaks the check digits."""
        for i in range(len(VALID_CPF) - 1):
            a, b = VALID_CPF[i], VALID_CPF[i + 1]
            if a == b:
                continue
            swapped = VALID_CPF[:i] + b + a + VALID_CPF[i + 2:]
            assert validate_cpf(swapped) is False, swapped

    def test_malformed_input_returns_false(self):
        """Non-numeric text and non-strings are simply invalid."""
        assert validate_cpf("abc.def.ghi-jk") is False
        assert validate_cpf(None) is False
        assert validate_cpf(52998224725) is False


class TestCNPJValidation:
    """Tests for CNPJ validation."""

    def test_valid_cnpj(self):
        """Test valid CNPJ numbers."""
        assert validate_cnpj("11222333000181") is True
        assert validate_cnpj("11.222.333/0001-81") is True

    def test_invalid_cnpj(self):
        """Test invalid CNPJs."""
        assert validate_cnpj("11111111111111") is False
        assert validate_cnpj("1122233300018") is False
        assert validate_cnpj("11222333000191") is False
        assert validate_cnpj(None) is False

    def test_cpf_cnpj_dispatch(self):
        """Holder document accepts either CPF or CNPJ."""
        assert validate_cpf_cnpj("529.982.247-25") is True
        assert validate_cpf_cnpj("11.222.333/0001-81") is True
        assert validate_cpf_cnpj("123") is False
        assert validate_cpf_cnpj(None) is False


class TestExpiryValidation:
    """Tests for card expiry validation."""

    TODAY = date(2026, 10, 18)

    def test_current_month_is_valid(self):
        """A card expiring this month still works."""
        assert validate_expiry(10, 2026, self.TODAY) is True

    def test_past_month_is_invalid(self):
        """Last month or last year is expired."""
        assert validate_expiry(9, 2026, self.TODAY) is False
        assert validate_expiry(12, 2025, self.TODAY) is False

    def test_future_dates_are_valid(self):
        """Later months and years are fine."""
        assert validate_expiry(1, 2027, self.TODAY) is True
        assert validate_expiry(11, 2026, self.TODAY) is True

    def test_string_inputs_and_two_digit_year(self):
        """Form values arrive as strings; "27" means 2027."""
        assert validate_expiry("12", "2027", self.TODAY) is True
        assert validate_expiry("05", "27", self.TODAY) is True
        assert validate_expiry("05", "25", self.TODAY) is False

    def test_month_out_of_range(self):
        """Month must be 1-12."""
        assert validate_expiry(0, 2030, self.TODAY) is False
        assert validate_expiry(13, 2030, self.TODAY) is False

    def test_malformed_input_returns_false(self):
        """Garbage never raises."""
        assert validate_expiry("ab", "2027", self.TODAY) is False
        assert validate_expiry(None, None, self.TODAY) is False
        assert validate_expiry(True, 2030, self.TODAY) is False


class TestCVVValidation:
    """Tests for security code validation."""

    def test_valid_cvv(self):
        assert validate_cvv("123") is True
        assert validate_cvv("0123") is True

    def test_invalid_cvv(self):
        assert validate_cvv("12") is False
        assert validate_cvv("12345") is False
        assert validate_cvv("12a") is False
        assert validate_cvv("") is False
        assert validate_cvv(123) is False
        assert validate_cvv(None) is False


class TestFormatters:
    """Tests for formatting functions."""

    def test_format_cpf(self):
        """Test CPF formatting."""
        assert format_cpf(VALID_CPF) == "529.982.247-25"
        assert format_cpf("529.982.247-25") == "529.982.247-25"

    def test_format_cnpj(self):
        """Test CNPJ formatting."""
        assert format_cnpj("11222333000181") == "11.222.333/0001-81"

    def test_mask_cpf(self):
        """Test CPF masking (shows one extra digit for identification)."""
        assert mask_cpf(VALID_CPF) == "***.***.**7-25"

    def test_format_card_number(self):
        """Card digits are grouped by four."""
        assert format_card_number(VALID_CARD) == "4532 0151 1283 0366"
        assert format_card_number("378282246310005") == "3782 8224 6310 005"

    def test_mask_card_number(self):
        """Only the last four digits stay visible."""
        assert mask_card_number("4532 0151 1283 0366") == "**** **** **** 0366"
        assert mask_card_number("12") == "**** **** **** ****"


class TestValidarCPF:
    """Tests for validar_cpf function (returns tuple with reason)."""

    def test_valid_cpf_returns_true(self):
        """Valid CPF should return (True, '')."""
        valido, motivo = validar_cpf(VALID_CPF)
        assert valido is True
        assert motivo == ""

    def test_invalid_cpf_wrong_length(self):
        """CPF with wrong length should return reason."""
        valido, motivo = validar_cpf("123")
        assert valido is False
        assert "11 dígitos" in motivo

    def test_invalid_cpf_first_digit_wrong(self):
        """CPF with wrong first check digit should return reason."""
        valido, motivo = validar_cpf("52998224715")
        assert valido is False
        assert "Primeiro dígito verificador" in motivo

    def test_invalid_cpf_second_digit_wrong(self):
        """CPF with wrong second check digit should return reason."""
        valido, motivo = validar_cpf("52998224720")
        assert valido is False
        assert "Segundo dígito verificador" in motivo

    def test_validar_cnpj_reason(self):
        """CNPJ reasons follow the same pattern."""
        assert validar_cnpj("11222333000181") == (True, "")
        valido, motivo = validar_cnpj("11111111111111")
        assert valido is False
        assert "todos dígitos iguais" in motivo


class TestValidarCartao:
    """Tests for the composed checkout validation."""

    TODAY = date(2026, 10, 18)

    @pytest.fixture
    def cartao(self) -> CreditCardInput:
        return CreditCardInput(
            number="4532 0151 1283 0366",
            holder_name="Maria Souza",
            expiry_month="12",
            expiry_year="2030",
            ccv="123",
        )

    def test_valid_card(self, cartao):
        """Everything valid returns (True, '')."""
        assert validar_cartao(cartao, VALID_CPF, self.TODAY) == (True, "")

    def test_document_is_optional(self, cartao):
        """Holder document is only checked when given."""
        assert validar_cartao(cartao, today=self.TODAY) == (True, "")

    def test_reports_first_failure(self, cartao):
        """Each failing field produces its own reason."""
        sem_nome = cartao.model_copy(update={"holder_name": "  "})
        assert "titular" in validar_cartao(sem_nome, today=self.TODAY)[1]

        numero_errado = cartao.model_copy(update={"number": "4532015112830367"})
        assert "Número do cartão" in validar_cartao(numero_errado, today=self.TODAY)[1]

        vencido = cartao.model_copy(update={"expiry_year": "2025"})
        assert "Validade" in validar_cartao(vencido, today=self.TODAY)[1]

        cvv_curto = cartao.model_copy(update={"ccv": "12"})
        assert "CVV" in validar_cartao(cvv_curto, today=self.TODAY)[1]

        valido, motivo = validar_cartao(cartao, "12345678900", self.TODAY)
        assert valido is False
        assert "CPF/CNPJ" in motivo

    def test_accepts_camel_case_form_payload(self):
        """Checkout form keys (holderName, expiryMonth...) are accepted."""
        cartao = CreditCardInput.model_validate(
            {
                "number": VALID_CARD,
                "holderName": "Maria",
                "expiryMonth": "01",
                "expiryYear": "2031",
                "ccv": "999",
            }
        )
        assert validar_cartao(cartao, today=self.TODAY) == (True, "")
