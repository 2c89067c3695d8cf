"""Main Typer application for Pricing Engine."""

import json
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from pricing_engine import __version__
from pricing_engine.cli.console import console, print_error, print_success
from pricing_engine.core.models import CreditCardInput, FleetProjection, PayrollResult
from pricing_engine.core.services import PayrollTaxCalculator, ProjectionEngine
from pricing_engine.infrastructure.parsers import parse_fleet_file
from pricing_engine.shared.exceptions import PricingEngineError
from pricing_engine.shared.formatters import format_currency
from pricing_engine.shared.logging import configure_logging
from pricing_engine.shared.validators import (
    mask_card_number,
    validar_cartao,
    validar_cnpj,
    validar_cpf,
)

app = typer.Typer(
    name="pricing-engine",
    help="Cálculo de preços de assinaturas, MRR, salário líquido e validação de cartões",
    add_completion=True,
    no_args_is_help=True,
)

ArquivoFrota = Annotated[
    Path,
    typer.Argument(
        help="Arquivo .json com assinaturas e cupons",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

DataReferencia = Annotated[
    Optional[datetime],
    typer.Option("--hoje", help="Data de referência (AAAA-MM-DD)", formats=["%Y-%m-%d"]),
]

FormatoSaida = Annotated[
    str,
    typer.Option("--output", "-o", help="Formato de saída: table, json"),
]

# Dots as thousands separators only, e.g. "5.000" or "1.234.567"
_MILHAR_RE = re.compile(r"\d{1,3}(\.\d{3})+")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Pricing Engine v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """Pricing Engine - preços, MRR, folha e validação de pagamento."""
    configure_logging("DEBUG" if verbose else "WARNING")


def _reference_date(hoje: Optional[datetime]) -> date:
    return hoje.date() if hoje else date.today()


def _parse_money(texto: str) -> Decimal:
    """Accept "5000", "5000.50", "5.000" or "5.000,50"."""
    normalizado = texto.strip()
    if "," in normalizado:
        normalizado = normalizado.replace(".", "").replace(",", ".")
    elif _MILHAR_RE.fullmatch(normalizado):
        normalizado = normalizado.replace(".", "")
    try:
        valor = Decimal(normalizado)
    except InvalidOperation:
        raise typer.BadParameter(f"Valor inválido: {texto}")
    if not valor.is_finite():
        raise typer.BadParameter(f"Valor inválido: {texto}")
    return valor


def _print_json(data: dict) -> None:
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


@app.command()
def projecao(
    arquivo: ArquivoFrota,
    hoje: DataReferencia = None,
    output: FormatoSaida = "table",
) -> None:
    """Projeção de 13 meses (dezembro anterior a dezembro atual) por assinante."""
    try:
        snapshot = parse_fleet_file(arquivo)
        engine = ProjectionEngine()
        result = engine.project_fleet(
            snapshot.subscriptions, snapshot.coupons, _reference_date(hoje)
        )

        if output == "json":
            _print_json(result.model_dump())
            return

        _display_projection(result)

    except PricingEngineError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _display_projection(result: FleetProjection) -> None:
    table = Table(show_header=True, header_style="bold", title="Projeção de Receita")
    table.add_column("Assinante", style="cyan", no_wrap=True)
    for month in result.months:
        table.add_column(month.label, justify="right")

    for projection in result.subscribers:
        sub = projection.subscription
        cells = []
        for row in projection.rows:
            if row.value is None:
                cells.append("[muted]-[/muted]")
            elif row.price_unavailable:
                cells.append("[error]s/ preço[/error]")
            elif row.value == 0:
                cells.append("[success]GRÁTIS[/success]")
            elif row.discount_label:
                cells.append(f"[discount]{format_currency(row.value)}[/discount]")
            else:
                cells.append(format_currency(row.value))
        nome = sub.nome or sub.id or "-"
        table.add_row(f"{nome} ({sub.plan.value}/{sub.billing_cycle.value})", *cells)

    table.add_row(
        "[bold]Total[/bold]",
        *[f"[bold]{format_currency(v)}[/bold]" for v in result.totals_by_month],
    )

    console.print()
    console.print(table)
    console.print(f"[bold]Total no período: {format_currency(result.total)}[/bold]")


@app.command()
def mrr(
    arquivo: ArquivoFrota,
    hoje: DataReferencia = None,
) -> None:
    """Receita recorrente mensal (MRR) das assinaturas ativas no mês atual."""
    try:
        snapshot = parse_fleet_file(arquivo)
        referencia = _reference_date(hoje)
        valor = ProjectionEngine().current_month_mrr(
            snapshot.subscriptions, snapshot.coupons, referencia
        )
        ativas = sum(1 for s in snapshot.subscriptions if s.is_active)

        console.print()
        console.print(
            Panel.fit(
                f"[header]Mês:[/header] {referencia.strftime('%m/%Y')}\n"
                f"[header]Assinaturas ativas:[/header] {ativas} de {len(snapshot.subscriptions)}\n"
                f"[header]MRR:[/header] [currency]{format_currency(valor)}[/currency]",
                title="MRR Estimado",
                border_style="blue",
            )
        )

    except PricingEngineError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def salario(
    bruto: Annotated[str, typer.Argument(help="Salário bruto mensal (ex: 5000 ou 5.000,00)")],
    dependentes: Annotated[int, typer.Option("--dependentes", "-d", help="Número de dependentes")] = 0,
    output: FormatoSaida = "table",
) -> None:
    """Calcula INSS, IRRF e salário líquido."""
    result = PayrollTaxCalculator().withholding(_parse_money(bruto), dependentes)

    if output == "json":
        _print_json(result.model_dump())
        return

    _display_payroll(result)


def _display_payroll(result: PayrollResult) -> None:
    bases = Table(show_header=True, header_style="bold", title="Base de cálculo do IRRF")
    bases.add_column("Base")
    bases.add_column("Valor", justify="right")
    bases.add_column("Imposto", justify="right")
    for base in (result.base_legal, result.base_simplified):
        marca = " [success]✓[/success]" if base.kind == result.chosen_base else ""
        nome = "Deduções legais" if base.kind.value == "legal" else "Desconto simplificado"
        bases.add_row(f"{nome}{marca}", format_currency(base.base), format_currency(base.tax))

    console.print()
    console.print(
        Panel.fit(
            f"[header]Bruto:[/header] {format_currency(result.gross)}\n"
            f"[header]Dependentes:[/header] {result.dependents}\n"
            f"[header]INSS:[/header] [currency_negative]{format_currency(result.contribution)}[/currency_negative]\n"
            f"[header]IRRF:[/header] [currency_negative]{format_currency(result.income_tax)}[/currency_negative]\n"
            f"[header]Líquido:[/header] [currency]{format_currency(result.net)}[/currency]",
            title="Salário Líquido",
            border_style="blue",
        )
    )
    console.print(bases)


@app.command()
def extra(
    base: Annotated[str, typer.Argument(help="Salário base mensal")],
    valor_extra: Annotated[str, typer.Argument(help="Valor extra (bônus, horas extras)")],
    dependentes: Annotated[int, typer.Option("--dependentes", "-d", help="Número de dependentes")] = 0,
) -> None:
    """Calcula o imposto marginal e o valor líquido de um pagamento extra."""
    result = PayrollTaxCalculator().marginal_extra(
        _parse_money(base), _parse_money(valor_extra), dependentes
    )

    console.print()
    console.print(
        Panel.fit(
            f"[header]Salário base:[/header] {format_currency(result.base_salary)}\n"
            f"[header]Extra bruto:[/header] {format_currency(result.extra)}\n"
            f"[header]Impostos sobre o extra:[/header] [currency_negative]{format_currency(result.tax_on_extra)}[/currency_negative]\n"
            f"[header]Extra líquido:[/header] [currency]{format_currency(result.net_extra)}[/currency]",
            title="Pagamento Extra",
            border_style="blue",
        )
    )


@app.command(name="validar-cartao")
def validar_cartao_cmd(
    numero: Annotated[str, typer.Option("--numero", "-n", help="Número do cartão")],
    mes: Annotated[str, typer.Option("--mes", help="Mês de validade (MM)")],
    ano: Annotated[str, typer.Option("--ano", help="Ano de validade (AAAA)")],
    cvv: Annotated[str, typer.Option("--cvv", help="Código de segurança")],
    titular: Annotated[str, typer.Option("--titular", help="Nome do titular")] = "TITULAR",
    documento: Annotated[
        Optional[str], typer.Option("--documento", help="CPF/CNPJ do titular")
    ] = None,
) -> None:
    """Valida os dados do cartão antes do envio ao gateway de pagamento."""
    cartao = CreditCardInput(
        number=numero,
        holder_name=titular,
        expiry_month=mes,
        expiry_year=ano,
        ccv=cvv,
    )
    valido, motivo = validar_cartao(cartao, documento)

    if not valido:
        print_error(f"{motivo} ({mask_card_number(numero)})")
        raise typer.Exit(1)

    print_success(f"Cartão {mask_card_number(numero)} válido")


@app.command(name="validar-cpf")
def validar_cpf_cmd(
    documento: Annotated[str, typer.Argument(help="CPF ou CNPJ (com ou sem formatação)")],
) -> None:
    """Valida um CPF ou CNPJ pelos dígitos verificadores."""
    digitos = "".join(filter(str.isdigit, documento))
    if len(digitos) == 14:
        valido, motivo = validar_cnpj(digitos)
        tipo = "CNPJ"
    else:
        valido, motivo = validar_cpf(digitos)
        tipo = "CPF"

    if not valido:
        print_error(f"{tipo} inválido: {motivo}")
        raise typer.Exit(1)

    print_success(f"{tipo} válido")


if __name__ == "__main__":
    app()
