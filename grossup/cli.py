"""Typer CLI interface for GrossUp."""

import logging
from decimal import Decimal
from pathlib import Path

import typer

from grossup.exceptions import TaxComputationError
from grossup.models.enums import FilingStatus
from grossup.models.rates import TaxRateTable
from grossup.models.results import CalculationResult
from grossup.models.scenario import NO_CITY, ScenarioInputs

app = typer.Typer(
    name="grossup",
    help="GrossUp — find the gross salary behind a take-home pay target.",
)

_FS_MAP: dict[str, FilingStatus] = {
    "SINGLE": FilingStatus.SINGLE,
    "MFJ": FilingStatus.MFJ,
    "MFS": FilingStatus.MFS,
    "HOH": FilingStatus.HOH,
}


def _filing_status_to_enum(value: str) -> FilingStatus:
    """Convert 'single'/'MFJ'/... (or an enum value like 'marriedJointly') to FilingStatus."""
    key = value.upper()
    if key in _FS_MAP:
        return _FS_MAP[key]
    return FilingStatus(value)


def _parse_scenario_spec(spec: str) -> ScenarioInputs:
    """Parse WORK:RESIDENCE[:CITY] into a ScenarioInputs."""
    parts = [p.strip() for p in spec.split(":")]
    if len(parts) not in (2, 3) or not all(parts[:2]):
        raise ValueError(f"Invalid scenario '{spec}'. Expected WORK:RESIDENCE[:CITY]")
    city = parts[2] if len(parts) == 3 and parts[2] else NO_CITY
    return ScenarioInputs(
        work_state=parts[0].upper(),
        residence_state=parts[1].upper(),
        work_city=city,
    )


def _resolve_filing_status(filing_status: str) -> FilingStatus:
    try:
        return _filing_status_to_enum(filing_status)
    except ValueError:
        valid = ", ".join(k.lower() for k in _FS_MAP)
        typer.echo(f"Error: Invalid filing status '{filing_status}'. Valid: {valid}", err=True)
        raise typer.Exit(1)


def _load_rates(year: int, rates: Path | None) -> TaxRateTable:
    from grossup.ratetables import load_rate_table, load_rate_table_file

    try:
        if rates is not None:
            return load_rate_table_file(rates)
        return load_rate_table(year)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


def _fmt(value: Decimal) -> str:
    return f"${value:,.2f}"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log solver iterations"),
) -> None:
    """GrossUp — find the gross salary behind a take-home pay target."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command()
def solve(
    target: float = typer.Argument(..., help="Desired annual take-home (net) income"),
    work_state: str = typer.Option("", "--work-state", "-w", help="Two-letter work state code"),
    residence_state: str = typer.Option(
        "", "--residence-state", "-r", help="Two-letter residence state code"
    ),
    city: str = typer.Option(NO_CITY, "--city", "-c", help="Work city (e.g. NYC), N/A for none"),
    filing_status: str = typer.Option(
        "single",
        "--filing-status",
        "-s",
        help="Filing status: single, mfj, mfs, hoh",
    ),
    health: float = typer.Option(0.0, "--health", help="Pre-tax health insurance premiums"),
    dental_vision: float = typer.Option(0.0, "--dental-vision", help="Pre-tax dental/vision premiums"),
    hsa: float = typer.Option(0.0, "--hsa", help="HSA contributions"),
    fsa: float = typer.Option(0.0, "--fsa", help="FSA contributions"),
    retirement: float = typer.Option(0.0, "--retirement", help="Pre-tax 401(k)/403(b) contributions"),
    other_pretax: float = typer.Option(0.0, "--other-pretax", help="Other pre-tax deductions"),
    year: int = typer.Option(2025, "--year", "-y", help="Tax year of the bundled rate table"),
    rates: Path | None = typer.Option(
        None,
        "--rates",
        envvar="GROSSUP_RATES_FILE",
        help="JSON rate table to use instead of the bundled one",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Solve for the gross income needed to take home TARGET."""
    from grossup.engines.solver import GrossIncomeSolver

    fs = _resolve_filing_status(filing_status)
    table = _load_rates(year, rates)

    try:
        scenario = ScenarioInputs(
            work_state=work_state.strip().upper(),
            residence_state=residence_state.strip().upper(),
            work_city=city.strip() or NO_CITY,
            health_insurance=Decimal(str(health)),
            dental_vision=Decimal(str(dental_vision)),
            hsa=Decimal(str(hsa)),
            fsa=Decimal(str(fsa)),
            retirement_401k=Decimal(str(retirement)),
            other_pretax=Decimal(str(other_pretax)),
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    solver = GrossIncomeSolver()
    try:
        result = solver.solve(Decimal(str(target)), scenario, fs, table)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        for w in solver.warnings:
            typer.echo(f"Warning: {w}", err=True)
        return

    _print_result(result, table.year)

    if solver.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in solver.warnings:
            typer.echo(f"  - {w}")


def _print_result(result: CalculationResult, year: int) -> None:
    location = f"{result.work_state} -> {result.residence_state}"
    if result.work_city and result.work_city != NO_CITY:
        location += f" ({result.work_city})"

    typer.echo("")
    typer.echo(f"=== Gross-Up: {year} {result.filing_status.value} | {location} ===")
    typer.echo("")
    typer.echo(f"  Target Net Income:     {_fmt(result.target_net_income):>14}")
    typer.echo(f"  GROSS INCOME:          {_fmt(result.gross_income):>14}")
    typer.echo("")
    typer.echo("INCOME TAX")
    typer.echo(f"  Federal:               {_fmt(result.federal_tax):>14}")
    typer.echo(f"  State (work):          {_fmt(result.state_tax_work):>14}")
    if result.residence_state != result.work_state:
        typer.echo(f"  State (residence):     {_fmt(result.state_tax_residence):>14}")
    if result.city_tax > 0:
        typer.echo(f"  City:                  {_fmt(result.city_tax):>14}")
    typer.echo("")
    typer.echo("PAYROLL")
    typer.echo(f"  Social Security:       {_fmt(result.social_security_tax):>14}")
    typer.echo(f"  Medicare:              {_fmt(result.medicare_tax):>14}")
    if result.sdi_tax > 0:
        typer.echo(f"  SDI/PFML:              {_fmt(result.sdi_tax):>14}")
    typer.echo("  ──────────────────────────────────────")
    typer.echo(f"  Total Tax:             {_fmt(result.total_tax):>14}")
    typer.echo(f"  Pre-tax Benefits:      {_fmt(result.total_benefits):>14}")
    typer.echo(f"  Effective Tax Rate:    {result.effective_tax_rate:>13.1%}")
    typer.echo("  ══════════════════════════════════════")
    typer.echo(f"  NET INCOME:            {_fmt(result.net_income):>14}")


@app.command()
def compare(
    target: float = typer.Argument(..., help="Desired annual take-home (net) income"),
    preset: str | None = typer.Option(None, "--preset", "-p", help="Named preset (see `grossup presets`)"),
    scenario: list[str] | None = typer.Option(
        None,
        "--scenario",
        help="WORK:RESIDENCE[:CITY], repeatable",
    ),
    filing_status: str = typer.Option(
        "single",
        "--filing-status",
        "-s",
        help="Filing status: single, mfj, mfs, hoh",
    ),
    year: int = typer.Option(2025, "--year", "-y", help="Tax year of the bundled rate table"),
    rates: Path | None = typer.Option(
        None,
        "--rates",
        envvar="GROSSUP_RATES_FILE",
        help="JSON rate table to use instead of the bundled one",
    ),
) -> None:
    """Compare the gross income needed for TARGET across several scenarios."""
    from rich.console import Console
    from rich.table import Table

    from grossup.engines.solver import solve_scenarios
    from grossup.presets import get_preset

    fs = _resolve_filing_status(filing_status)

    scenarios: list[ScenarioInputs] = []
    if preset is not None:
        try:
            scenarios.extend(get_preset(preset))
        except KeyError:
            typer.echo(f"Error: Unknown preset '{preset}'. See `grossup presets`.", err=True)
            raise typer.Exit(1)
    for spec in scenario or []:
        try:
            scenarios.append(_parse_scenario_spec(spec))
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1)
    if not scenarios:
        typer.echo("Error: Provide --preset or at least one --scenario.", err=True)
        raise typer.Exit(1)

    table_data = _load_rates(year, rates)
    batch = solve_scenarios(Decimal(str(target)), scenarios, fs, table_data)

    console = Console()
    table = Table(title=f"Gross income for {_fmt(Decimal(str(target)))} net ({table_data.year}, {fs.value})")
    table.add_column("Scenario")
    table.add_column("Gross", justify="right")
    table.add_column("Federal", justify="right")
    table.add_column("State", justify="right")
    table.add_column("City", justify="right")
    table.add_column("FICA", justify="right")
    table.add_column("SDI", justify="right")
    table.add_column("Eff. Rate", justify="right")

    labels = {s.id: s.label for s in scenarios}
    for r in batch.results:
        table.add_row(
            labels[r.scenario_id],
            _fmt(r.gross_income),
            _fmt(r.federal_tax),
            _fmt(r.state_tax_work + r.state_tax_residence),
            _fmt(r.city_tax),
            _fmt(r.social_security_tax + r.medicare_tax),
            _fmt(r.sdi_tax),
            f"{r.effective_tax_rate:.1%}",
        )
    if batch.results:
        console.print(table)

    for err in batch.errors:
        typer.echo(f"Error: Scenario {err.index}: {err.message}", err=True)
    if batch.warnings:
        typer.echo("")
        typer.echo("WARNINGS:")
        for w in batch.warnings:
            typer.echo(f"  - {w}")

    if batch.all_failed:
        raise typer.Exit(1)


@app.command(name="presets")
def list_presets() -> None:
    """List the named scenario presets."""
    from grossup.presets import PRESETS

    for preset in PRESETS.values():
        typer.echo(f"{preset.name:<22} {preset.description}")
        for s in preset.build():
            typer.echo(f"    {s.label}")


if __name__ == "__main__":
    app()
