"""CLI entry point for the scene architect."""

import logging
import typer
from pathlib import Path
from typing import Optional
from enum import Enum

from . import __version__
from .architecture import lookup, supported_durations
from .config import Provider, config
from .errors import SceneGenerationError
from .models import GeneratedScene, SceneConfig, SceneType, load_scene_file
from .timecode import format_timecode

app = typer.Typer(
    name="veoscene",
    help="Veo-3 cinematic scene architect",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"veoscene version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose logging"
    ),
) -> None:
    """Veo Scene Architect - Turn scene parameters into cinematic Veo-3 briefs."""
    setup_logging(verbose)


class PromptPart(str, Enum):
    """Which prompt text to print."""
    SYSTEM = "system"
    USER = "user"
    BOTH = "both"


def _build_config(
    duration: int,
    scene_type: SceneType,
    mood: str,
    location: str,
    brand: Optional[str],
) -> SceneConfig:
    try:
        return SceneConfig(
            duration=duration,
            scene_type=scene_type,
            visual_mood=mood,
            location=location,
            brand_references=brand,
        )
    except SceneGenerationError as e:
        typer.echo(f"❌ Configuration error: {e.message}")
        raise typer.Exit(1)


def _print_summary(scene: GeneratedScene) -> None:
    """Show a short overview of a scene."""
    overview = scene.overview if isinstance(scene.overview, dict) else {}
    typer.echo(f"🎞️  {overview.get('title', 'Untitled scene')}")
    for key in ("duration", "type", "mood", "location"):
        if overview.get(key):
            typer.echo(f"   {key.capitalize()}: {overview[key]}")
    if overview.get("logline"):
        typer.echo(f"   Logline: {overview['logline']}")

    try:
        breakdown = scene.breakdown()
    except SceneGenerationError:
        typer.echo("   ⚠️  Nested structure incomplete, skipping act breakdown")
        return

    arch = breakdown.architecture
    typer.echo(
        f"\n📐 Architecture: {arch.act_count} acts, {arch.total_shots} shots, "
        f"{arch.total_duration}s ({format_timecode(arch.total_duration)})"
    )
    for act in arch.acts:
        typer.echo(
            f"   Act {act.act_number} [{act.start_time}-{act.end_time}] "
            f"{act.title}: {len(act.shots)} shots"
        )
        typer.echo(f"      → {act.emotional_arc}")


@app.command()
def architecture(
    duration: Optional[int] = typer.Option(
        None,
        "--duration",
        "-d",
        help="Scene length in minutes (3, 5, 10 or 20); all when omitted"
    )
) -> None:
    """Show the act and shot structure for scene durations."""
    durations = [duration] if duration is not None else supported_durations()

    for minutes in durations:
        try:
            spec = lookup(minutes)
        except SceneGenerationError as e:
            typer.echo(f"❌ {e.message}")
            raise typer.Exit(1)

        typer.echo(f"⏱️  {minutes} minutes ({spec.total_seconds(minutes)}s)")
        typer.echo(f"   Acts: {spec.act_count}")
        typer.echo(f"   Shots per act: {', '.join(str(s) for s in spec.shots_per_act)}")
        typer.echo(f"   Total shots: {spec.total_shots}")
        typer.echo(f"   Average shot: ~{spec.avg_shot_duration_seconds}s")


@app.command()
def prompt(
    duration: int = typer.Option(
        5,
        "--duration",
        "-d",
        help="Scene length in minutes (3, 5, 10 or 20)"
    ),
    scene_type: SceneType = typer.Option(
        SceneType.CINEMATIC_BRAND,
        "--type",
        "-t",
        help="Scene style"
    ),
    mood: str = typer.Option(
        ...,
        "--mood",
        "-m",
        help="Visual mood (e.g., 'Warm intimacy meeting cold precision')"
    ),
    location: str = typer.Option(
        ...,
        "--location",
        "-l",
        help="Location or environment"
    ),
    brand: Optional[str] = typer.Option(
        None,
        "--brand",
        "-b",
        help="Brand references"
    ),
    part: PromptPart = typer.Option(
        PromptPart.BOTH,
        "--part",
        "-p",
        help="Which prompt text to print"
    ),
) -> None:
    """Print the composed system and user prompts without calling any API."""
    from .prompts import compose

    composed = compose(_build_config(duration, scene_type, mood, location, brand))

    if part in (PromptPart.SYSTEM, PromptPart.BOTH):
        if part is PromptPart.BOTH:
            typer.echo("=== SYSTEM ===")
        typer.echo(composed.system_text)
    if part in (PromptPart.USER, PromptPart.BOTH):
        if part is PromptPart.BOTH:
            typer.echo("\n=== USER ===")
        typer.echo(composed.user_text)


@app.command()
def generate(
    duration: int = typer.Option(
        5,
        "--duration",
        "-d",
        help="Scene length in minutes (3, 5, 10 or 20)"
    ),
    scene_type: SceneType = typer.Option(
        SceneType.CINEMATIC_BRAND,
        "--type",
        "-t",
        help="Scene style"
    ),
    mood: str = typer.Option(
        ...,
        "--mood",
        "-m",
        help="Visual mood (e.g., 'Warm intimacy meeting cold precision')"
    ),
    location: str = typer.Option(
        ...,
        "--location",
        "-l",
        help="Location or environment"
    ),
    brand: Optional[str] = typer.Option(
        None,
        "--brand",
        "-b",
        help="Brand references"
    ),
    provider: Optional[Provider] = typer.Option(
        None,
        "--provider",
        help="Generation service (defaults to VEOSCENE_PROVIDER)"
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        help="Model override"
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Reject replies whose timing or shot counts are inconsistent"
    ),
    output: Path = typer.Option(
        Path("scene.json"),
        "--output",
        "-o",
        help="Where to save the scene (.json or .yaml)"
    ),
) -> None:
    """Generate a complete scene package with the external model."""
    from .generator import SceneGenerator
    from .services import create_client

    scene_config = _build_config(duration, scene_type, mood, location, brand)
    chosen = provider or config.provider

    typer.echo(f"🎬 Generating: {scene_type.label}, {duration} minutes")
    typer.echo(f"   Mood: {mood}")
    typer.echo(f"   Location: {location}")
    if brand:
        typer.echo(f"   Brand references: {brand}")

    try:
        api_key = config.read_api_key(chosen)
    except ValueError:
        api_key = typer.prompt(f"{chosen.value} API key", hide_input=True)

    generator = SceneGenerator(client=create_client(chosen, model), strict=strict)
    typer.echo(f"   Using model: {generator.client.model}")

    try:
        scene = generator.generate(api_key, scene_config)
    except SceneGenerationError as e:
        typer.echo(f"❌ {e.kind.value.capitalize()} error: {e.message}")
        raise typer.Exit(1)
    finally:
        api_key = None

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        scene.to_file(output)
        typer.echo(f"\n✅ Scene saved: {output}")
    except OSError as e:
        typer.echo(f"❌ Error saving scene: {e}")
        raise typer.Exit(1)

    typer.echo("")
    _print_summary(scene)


@app.command()
def sample(
    output: Path = typer.Option(
        Path("sample_scene.json"),
        "--output",
        "-o",
        help="Where to save the sample scene (.json or .yaml)"
    )
) -> None:
    """Write the bundled 5-minute luxury sample scene."""
    from .sample import sample_scene

    scene = sample_scene()
    output.parent.mkdir(parents=True, exist_ok=True)
    scene.to_file(output)
    typer.echo(f"✅ Sample saved: {output}")


@app.command()
def validate(
    scene_file: Path = typer.Argument(
        ...,
        help="Scene file to check (.json or .yaml)",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Also check nested structure, timing and shot counts"
    ),
    duration: Optional[int] = typer.Option(
        None,
        "--duration",
        "-d",
        help="With --strict, require the shot distribution for this duration"
    ),
) -> None:
    """Check a saved scene payload."""
    from .validation import validate as validate_payload

    try:
        expected = lookup(duration) if duration is not None else None
        validate_payload(load_scene_file(scene_file), strict=strict, expected=expected)
    except SceneGenerationError as e:
        typer.echo(f"❌ {e.kind.value.capitalize()} error: {e.message}")
        for problem in getattr(e, "problems", []):
            typer.echo(f"   - {problem}")
        raise typer.Exit(1)

    typer.echo(f"✅ {scene_file} is a valid scene{' (strict)' if strict else ''}")


@app.command()
def status(
    scene_file: Path = typer.Option(
        Path("scene.json"),
        "--scene",
        "-s",
        help="Path to a saved scene file",
        exists=False,
        file_okay=True,
        dir_okay=False
    )
) -> None:
    """Show a summary of a saved scene."""
    from .validation import validate as validate_payload

    if not scene_file.exists():
        typer.echo(f"❌ No scene found at {scene_file}")
        typer.echo("   Run 'veoscene generate' or 'veoscene sample' to create one")
        raise typer.Exit(1)

    try:
        scene = validate_payload(load_scene_file(scene_file))
    except SceneGenerationError as e:
        typer.echo(f"❌ Error loading scene: {e.message}")
        raise typer.Exit(1)

    _print_summary(scene)


if __name__ == "__main__":
    app()
