from __future__ import annotations

import sys
import json
import logging
import pathlib
from typing import List, Optional

import click
import typer
import yaml
import structlog
from rich.console import Console
from rich.markup import escape

from .config import load_config, NinCheckConfig
from .engine.classifier import Classifier

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="nincheck — Norwegian identity number validator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"nincheck {__version__}")
        raise typer.Exit()


def _configure_logging(cfg: NinCheckConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.logging.level)
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.logging.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    # Library modules log through the standard library.
    logging.getLogger("nincheck").setLevel(level)
    if verbose:
        logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s", force=True)


def _collect(nins: Optional[List[str]], file: Optional[pathlib.Path]) -> List[str]:
    """Identifiers from the command line followed by those in FILE."""
    items = list(nins or [])
    if file:
        try:
            lines = file.read_text().splitlines()
        except OSError as e:
            raise typer.BadParameter(f"cannot read {file}: {e}", param_hint="--file")
        for line in lines:
            line = line.strip()
            if line and not line.startswith("#"):
                items.append(line)
    if not items:
        raise typer.BadParameter("give at least one identifier or --file")
    return items


def _classifier() -> Classifier:
    cfg: NinCheckConfig = click.get_current_context().obj["config"]
    return Classifier(policy=cfg.policy)


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .nincheck.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    try:
        cfg = load_config(config) if config else NinCheckConfig()
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise typer.BadParameter(f"cannot load {config}: {e}", param_hint="--config")
    _configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled", production=cfg.policy.production)


@app.command()
def check(
    nins: Optional[List[str]] = typer.Argument(None, help="Identifiers to validate"),
    file: Optional[pathlib.Path] = typer.Option(None, "--file", "-f", help="File with one identifier per line"),
    production: Optional[bool] = typer.Option(
        None, "--production/--test",
        help="Reject synthetic test numbers (default from config)",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per identifier"),
):
    """Validate identifiers; exits 1 if any is invalid."""
    classifier = _classifier()
    items = _collect(nins, file)
    invalid = 0
    for nin in items:
        outcome = classifier.validate(nin, production=production)
        label = classifier.classify(nin).label
        if not outcome.is_valid:
            invalid += 1
        if as_json:
            typer.echo(json.dumps({
                "nin": nin,
                "valid": outcome.is_valid,
                "category": outcome.category.value,
                "label": label,
                "failed_step": outcome.failed_step,
            }, ensure_ascii=False))
        elif outcome.is_valid:
            console.print(f"{escape(nin)}  [green]valid[/green]  {label}", highlight=False, soft_wrap=True)
        else:
            console.print(f"{escape(nin)}  [red]invalid[/red]  {label}  ({escape(outcome.failed_step)})", highlight=False, soft_wrap=True)
    log.info("checked", count=len(items), invalid=invalid)
    if invalid:
        raise typer.Exit(code=1)


@app.command()
def classify(
    nins: Optional[List[str]] = typer.Argument(None, help="Identifiers to classify"),
    file: Optional[pathlib.Path] = typer.Option(None, "--file", "-f", help="File with one identifier per line"),
):
    """Print the category label of each identifier."""
    classifier = _classifier()
    for nin in _collect(nins, file):
        console.print(f"{escape(nin)}  {classifier.classify(nin).label}", highlight=False, soft_wrap=True)


@app.command()
def birthdate(nin: str = typer.Argument(..., help="F, D or H number")):
    """Print the birth date encoded in an identifier."""
    born = _classifier().birthdate(nin)
    if born is None:
        console.print(f"[red]No birth date in {escape(nin)}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)
    console.print(born.isoformat(), highlight=False)
