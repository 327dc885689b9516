"""CLI interface for dialogsynth."""

from __future__ import annotations

import json
import logging
import random
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .config import SEED_ENV_VAR
from .generator import generate_fake_dialog
from .models import DialogData

logger = logging.getLogger(__name__)

seed_option = click.option(
    "--seed",
    type=int,
    envvar=SEED_ENV_VAR,
    default=None,
    help=f"Seed for reproducible output (or set {SEED_ENV_VAR})",
)


def _load_or_generate(path: str | None, seed: int | None) -> DialogData:
    """Read a dialog JSON file, or generate a fresh dialog when no file is given."""
    if path is None:
        logger.debug("Generating dialog with seed %s", seed)
        return generate_fake_dialog(random.Random(seed))

    if seed is not None:
        logger.debug("Reading %s, ignoring seed %s", path, seed)

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Could not read {path}: {e}")

    try:
        return DialogData.from_json(raw)
    except ValidationError as e:
        raise click.ClickException(
            f"{path} is not a dialog file ({e.error_count()} validation errors). "
            "Produce one with: dialogsynth generate > dialog.json"
        )


@click.group()
@click.version_option(version=__version__, prog_name="dialogsynth")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """dialogsynth: fake two-speaker dialogs for charting and demos.

    Generates dialogs with a volume series, alternating utterances and
    per-utterance valence series, and derives colored speaker segments.
    """
    # Logging to stderr only, stdout carries JSON
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@seed_option
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
def generate(seed: int | None, indent: int):
    """Print a generated dialog as JSON.

    Example:
        dialogsynth generate --seed 7 > dialog.json
    """
    dialog = generate_fake_dialog(random.Random(seed))
    click.echo(dialog.to_json(indent=indent or None))


@cli.command()
@click.argument("dialog_file", required=False, type=click.Path(dir_okay=False))
@seed_option
def segments(dialog_file: str | None, seed: int | None):
    """Print the speaker segments of a dialog as JSON.

    Reads DIALOG_FILE if given, otherwise generates a dialog.

    The seed is ignored when a file is given.
    """
    dialog = _load_or_generate(dialog_file, seed)
    click.echo(json.dumps([s.model_dump() for s in dialog.make_segments()], indent=2))


@cli.command()
@click.argument("dialog_file", required=False, type=click.Path(dir_okay=False))
@seed_option
def stats(dialog_file: str | None, seed: int | None):
    """Show a summary of a dialog.

    Reads DIALOG_FILE if given, otherwise generates a dialog.

    The seed is ignored when a file is given.
    """
    dialog = _load_or_generate(dialog_file, seed)

    talk_time: dict[int, float] = {}
    for u in dialog.utterances:
        talk_time[u.speaker_idx] = talk_time.get(u.speaker_idx, 0.0) + (u.end_time - u.start_time)

    click.echo()
    click.echo(click.style("Dialog Statistics", bold=True))
    click.echo(f"  Duration:       {dialog.duration:g}s")
    click.echo(f"  Utterances:     {len(dialog.utterances)}")
    click.echo(f"  Volume points:  {len(dialog.general_metrics.volume.points):,}")
    if talk_time:
        click.echo("  Talk time:")
        for speaker, seconds in sorted(talk_time.items()):
            click.echo(f"    Speaker {speaker}: {seconds:g}s")
    if dialog.utterances and dialog.utterances[-1].end_time > dialog.duration:
        click.echo(
            click.style(
                f"  Note: last utterance ends at {dialog.utterances[-1].end_time:g}s, "
                "past the dialog duration",
                fg="yellow",
            )
        )
    click.echo()
