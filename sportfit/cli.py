"""
sportfit — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (score, list, report).
  5. Report result to stdout.

Install and run::

    pip install -e .
    sportfit --help
    sportfit validate-config
    sportfit list-sports
    sportfit list-metrics
    sportfit recommend --stats-file data/athlete_42.json
    sportfit recommend --athlete-id 42 --top-n 5
    sportfit tracking-metrics --sport "Swimming"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="sportfit",
    help="Sport recommendation engine for athlete physical metrics.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from sportfit.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from sportfit.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_profiles_or_exit(config):
    """Return the configured sport catalogue (built-in unless overridden)."""
    from sportfit.taxonomy.sport_catalogue import SPORT_CATALOGUE, load_catalogue_file

    if not config.scoring.catalogue_file:
        return SPORT_CATALOGUE
    try:
        return load_catalogue_file(Path(config.scoring.catalogue_file))
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Top N:              {config.scoring.top_n}")
    typer.echo(f"  Missing list limit: {config.scoring.missing_list_limit}")
    typer.echo(f"  Catalogue file:     {config.scoring.catalogue_file or '(built-in)'}")
    typer.echo(f"  API base URL:       {config.api.base_url}")
    typer.echo(f"  Output dir:         {config.output.recommendation_dir}")
    typer.echo(f"  Log level:          {config.logging.level}")
    typer.echo(f"  Debug mode:         {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config is valid.")


@app.command("list-sports")
def list_sports(
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Print the sport catalogue with every profile's criteria."""
    from sportfit.reporting.formatters import format_sport_catalogue

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    typer.echo(format_sport_catalogue(_load_profiles_or_exit(config)))


@app.command("list-metrics")
def list_metrics() -> None:
    """Print the athlete metric definitions, marking the required ones."""
    from sportfit.reporting.formatters import format_metric_table

    typer.echo(format_metric_table())


@app.command("recommend")
def recommend(
    stats_file: Optional[str] = typer.Option(
        None,
        "--stats-file",
        help="JSON file holding a stat table row or a metric snapshot.",
    ),
    athlete_id: Optional[str] = typer.Option(
        None,
        "--athlete-id",
        help="Fetch stats for this athlete from the stat store API.",
    ),
    top_n: Optional[int] = typer.Option(
        None,
        "--top-n",
        help="Number of sports to recommend (default: [scoring] top_n).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Report directory (default: [output] recommendation_dir).",
    ),
    no_write: bool = typer.Option(
        False,
        "--no-write",
        help="Print recommendations without writing JSON/CSV reports.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Score an athlete against every sport and print the best matches.

    Exactly one of --stats-file or --athlete-id is required. Exits with code 1
    when required metrics are missing or stats cannot be loaded.
    """
    from sportfit.ingestion.stat_records import (
        load_stat_file,
        snapshot_from_records,
        statuses_from_records,
    )
    from sportfit.recommendations.explainer import build_summary, describe_top_metrics
    from sportfit.recommendations.ranker import rank_sports
    from sportfit.recommendations.reporter import (
        write_recommendation_csv,
        write_recommendation_json,
    )
    from sportfit.recommendations.sufficiency import (
        DataInsufficientError,
        assert_data_sufficient,
    )
    from sportfit.reporting.formatters import format_recommendations

    if (stats_file is None) == (athlete_id is None):
        typer.echo("[ERROR] Provide exactly one of --stats-file or --athlete-id.", err=True)
        raise typer.Exit(code=1)

    if top_n is not None and top_n < 0:
        typer.echo(f"[ERROR] --top-n must be >= 0, got {top_n}.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profiles = _load_profiles_or_exit(config)

    if stats_file is not None:
        try:
            records = load_stat_file(Path(stats_file))
        except (FileNotFoundError, ValueError) as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)
        label = Path(stats_file).stem
        athlete_name = label
    else:
        import httpx

        from sportfit.ingestion.stats_client import StatsApiClient

        client = StatsApiClient(config.api.base_url, config.api.timeout_seconds)
        try:
            records = client.fetch_stat_records(athlete_id)
            athlete_name = client.fetch_athlete_name(athlete_id)
        except httpx.HTTPError as exc:
            typer.echo(f"[ERROR] Stat store request failed: {exc}", err=True)
            raise typer.Exit(code=1)
        except ValueError as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)
        label = athlete_id

    snapshot = snapshot_from_records(records)
    statuses = statuses_from_records(records)

    try:
        assert_data_sufficient(
            snapshot, statuses, config.scoring.missing_list_limit,
        )
    except DataInsufficientError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    n = config.scoring.top_n if top_n is None else top_n
    ranked = rank_sports(snapshot, profiles, top_n=n)
    summary = build_summary(describe_top_metrics(snapshot, statuses))

    typer.echo(format_recommendations(ranked, athlete_name, summary))

    if no_write:
        return

    out_dir = Path(output_dir or config.output.recommendation_dir)
    json_path = write_recommendation_json(ranked, out_dir, label)
    csv_path = write_recommendation_csv(ranked, out_dir, label)
    typer.echo("")
    typer.echo(f"  JSON: {json_path}")
    typer.echo(f"  CSV:  {csv_path}")
    typer.echo("[OK] Recommendations written.")


@app.command("tracking-metrics")
def tracking_metrics(
    sport: str = typer.Option(..., "--sport", help="Sport name, e.g. 'Swimming'."),
) -> None:
    """Print the training metrics logged for a sport."""
    from sportfit.reporting.formatters import format_tracking_metrics
    from sportfit.taxonomy.tracking_metrics import TRACKING_METRICS, metrics_for_sport

    if sport not in TRACKING_METRICS:
        typer.echo(f"No sport-specific metrics for '{sport}'; showing defaults.")
    typer.echo(format_tracking_metrics(sport, metrics_for_sport(sport)))


if __name__ == "__main__":
    app()
