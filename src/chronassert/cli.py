from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="chronassert", help="Check time distances between timestamps")

EXAMPLE_CHECKS = """\
checks:
  - name: deploy-follows-build
    subject: "2024-05-01T12:00:05"
    target: "2024-05-01T12:00:00"
    condition: within
    tolerance: 10
    direction: after
    reason: "deploys start right after the build"

  - name: backup-window
    subject: "2024-05-01T01:00:00"
    target: "2024-05-01T03:00:00"
    condition: at_least
    tolerance: PT1H
    direction: before
"""


@app.command()
def check(
    config: str = typer.Argument(help="Path to checks YAML file"),
    junit: str | None = typer.Option(None, help="Write a JUnit XML report to this path"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(None, help="Append debug output to this file"),
):
    """Evaluate every check in a YAML file."""
    import yaml
    from pydantic import ValidationError

    from chronassert.config import load_config
    from chronassert.runner import run_checks
    from chronassert.verbose import setup_logger

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        check_config = load_config(config_path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
        logger_name="chronassert.cli",
    )
    results = run_checks(check_config, logger)

    for result in results:
        status = "PASS" if result.passed else "FAIL"
        typer.echo(f"{status} {result.name}")
        if not result.passed:
            typer.echo(f"     {result.message}")

    if junit:
        from chronassert.reporting.junit import write_junit

        junit_path = write_junit(Path(junit), results, suite_name=config_path.stem)
        typer.echo(f"JUnit report: {junit_path}")

    failed = sum(1 for r in results if not r.passed)
    typer.echo(f"{len(results) - failed} passed, {failed} failed")
    if failed:
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to write checks.yaml into"),
):
    """Write an example checks.yaml."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    example = project_dir / "checks.yaml"
    if example.exists():
        typer.echo(f"checks.yaml already exists in {dir}, skipping.")
        return

    example.write_text(EXAMPLE_CHECKS)
    typer.echo(f"Wrote example checks: {example}")


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/chronassert.schema.json", help="Output path for JSON Schema"
    ),
):
    """Generate JSON Schema for the checks YAML format."""
    from chronassert.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
