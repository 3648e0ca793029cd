import logging
import webbrowser
import typer
from pathlib import Path
from typing import Optional, Tuple

from badge_print.injector import HtmlDocumentHost, PrintStyleController
from badge_print.layout import calculate_grid
from badge_print.models import BadgeDimensions, Margins, PaperSizeConfiguration, PaperSizeType
from badge_print.paper import get_badge_dimensions, get_paper_dimensions, get_printable_area
from badge_print.generator import PrintStyleGenerator
from badge_print.utils import CONFIG_DIR, get_profile, load_print_profiles
from badge_print.validation import (
    has_small_margins,
    validate_badge_fits_on_paper,
    validate_custom_dimensions,
    validate_margins,
)

app = typer.Typer()

PROFILES_PATH = CONFIG_DIR / "print_profiles.yaml"

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """
    Badge print layout tools.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

def resolve_job(
    profile: str,
    size: Optional[PaperSizeType],
    orientation: Optional[str],
    margin: Optional[float],
    custom_width: Optional[float],
    custom_height: Optional[float],
    badge_width: Optional[float],
    badge_height: Optional[float],
    profiles_path: Path = PROFILES_PATH,
) -> Tuple[PaperSizeConfiguration, BadgeDimensions]:
    """Starts from a named profile and applies any command line overrides."""
    base = get_profile(profile, profiles_path)
    config = base.configuration.model_copy(deep=True)
    badge = base.badge or get_badge_dimensions()

    updates = {}
    if size is not None:
        updates["size_type"] = size
    if custom_width is not None:
        updates["custom_width"] = custom_width
    if custom_height is not None:
        updates["custom_height"] = custom_height
    if margin is not None:
        updates["margins"] = Margins(top=margin, right=margin, bottom=margin, left=margin)
    if orientation is not None:
        updates["orientation"] = orientation
    # re-validate so a bad --orientation is rejected
    config = PaperSizeConfiguration.model_validate({**config.model_dump(), **updates})

    badge = BadgeDimensions(
        width=badge_width if badge_width is not None else badge.width,
        height=badge_height if badge_height is not None else badge.height,
    )
    return config, badge

ProfileOption = typer.Option("default_a4", help="Print profile to use (defined in config/print_profiles.yaml)")
SizeOption = typer.Option(None, "--size", help="Override paper size")
OrientationOption = typer.Option(None, "--orientation", help="portrait or landscape")
MarginOption = typer.Option(None, "--margin", help="Margin in mm applied to all four sides")
CustomWidthOption = typer.Option(None, "--custom-width", help="Custom paper width in mm")
CustomHeightOption = typer.Option(None, "--custom-height", help="Custom paper height in mm")
BadgeWidthOption = typer.Option(None, "--badge-width", help="Badge width in mm")
BadgeHeightOption = typer.Option(None, "--badge-height", help="Badge height in mm")

def _fail(e: Exception):
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)

@app.command()
def geometry(
    profile: str = ProfileOption,
    size: Optional[PaperSizeType] = SizeOption,
    orientation: Optional[str] = OrientationOption,
    margin: Optional[float] = MarginOption,
    custom_width: Optional[float] = CustomWidthOption,
    custom_height: Optional[float] = CustomHeightOption,
    badge_width: Optional[float] = BadgeWidthOption,
    badge_height: Optional[float] = BadgeHeightOption,
):
    """Show paper size, printable area and badges per page."""
    try:
        config, badge = resolve_job(profile, size, orientation, margin, custom_width, custom_height, badge_width, badge_height)
    except Exception as e:
        _fail(e)

    paper = get_paper_dimensions(config)
    area = get_printable_area(config)
    grid = calculate_grid(badge.width, badge.height, config)
    typer.echo(f"Paper: {config.size_type.value} {config.orientation} ({paper.width:.1f}mm × {paper.height:.1f}mm)")
    typer.echo(f"Printable: {area.width:.1f}mm × {area.height:.1f}mm")
    typer.echo(f"Badge: {badge.width:.1f}mm × {badge.height:.1f}mm")
    typer.echo(f"Badges per page: {grid.count} ({grid.per_row} × {grid.per_column} layout)")
    if has_small_margins(config.margins):
        typer.echo("Warning: Margins < 5mm may cause printing issues.")

@app.command()
def validate(
    profile: str = ProfileOption,
    size: Optional[PaperSizeType] = SizeOption,
    orientation: Optional[str] = OrientationOption,
    margin: Optional[float] = MarginOption,
    custom_width: Optional[float] = CustomWidthOption,
    custom_height: Optional[float] = CustomHeightOption,
    badge_width: Optional[float] = BadgeWidthOption,
    badge_height: Optional[float] = BadgeHeightOption,
):
    """Validate custom dimensions, margins and badge fit."""
    try:
        config, badge = resolve_job(profile, size, orientation, margin, custom_width, custom_height, badge_width, badge_height)
    except Exception as e:
        _fail(e)

    results = [validate_margins(config.margins), validate_badge_fits_on_paper(badge.width, badge.height, config)]
    if config.size_type == PaperSizeType.CUSTOM:
        paper = get_paper_dimensions(config)
        results.insert(0, validate_custom_dimensions(paper.width, paper.height))

    errors = [result.error for result in results if not result.valid]
    if errors:
        for error in errors:
            typer.echo(f"❌ {error}")
        raise typer.Exit(code=1)
    typer.echo("✅ Configuration valid!")

@app.command()
def stylesheet(
    profile: str = ProfileOption,
    size: Optional[PaperSizeType] = SizeOption,
    orientation: Optional[str] = OrientationOption,
    margin: Optional[float] = MarginOption,
    custom_width: Optional[float] = CustomWidthOption,
    custom_height: Optional[float] = CustomHeightOption,
    badge_width: Optional[float] = BadgeWidthOption,
    badge_height: Optional[float] = BadgeHeightOption,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the CSS to this file"),
):
    """Print the generated print stylesheet."""
    try:
        config, badge = resolve_job(profile, size, orientation, margin, custom_width, custom_height, badge_width, badge_height)
    except Exception as e:
        _fail(e)

    css = PrintStyleGenerator().generate_stylesheet(config, badge.width, badge.height)
    if output is None:
        typer.echo(css)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css + "\n", encoding="utf-8")
    typer.echo(f"Wrote {output}")

@app.command("print-sheet")
def print_sheet(
    profile: str = ProfileOption,
    size: Optional[PaperSizeType] = SizeOption,
    orientation: Optional[str] = OrientationOption,
    margin: Optional[float] = MarginOption,
    custom_width: Optional[float] = CustomWidthOption,
    custom_height: Optional[float] = CustomHeightOption,
    badge_width: Optional[float] = BadgeWidthOption,
    badge_height: Optional[float] = BadgeHeightOption,
    badges: int = typer.Option(1, help="Number of badge cells in the document"),
    output: Path = typer.Option(Path("output") / "badges.html", "--output", "-o", help="HTML document to write"),
    open_browser: bool = typer.Option(False, "--open", help="Open the document in the browser"),
):
    """Write a print-ready HTML badge document."""
    try:
        config, badge = resolve_job(profile, size, orientation, margin, custom_width, custom_height, badge_width, badge_height)
    except Exception as e:
        _fail(e)

    def write_document(host: HtmlDocumentHost):
        path = host.write_html(output)
        typer.echo(f"Wrote {path}")
        if open_browser:
            webbrowser.open(path.resolve().as_uri())

    host = HtmlDocumentHost(print_action=write_document)
    if badges > 0:
        host.add_badge_container(badges)

    controller = PrintStyleController(host)
    result = controller.print_with_configuration(config, badge.width, badge.height)
    if not result.success:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)

@app.command()
def verify_config(profiles: Path = typer.Option(PROFILES_PATH, help="Print profiles file")):
    """Load and validate configuration files without printing."""
    try:
        p = load_print_profiles(profiles)
        typer.echo("✅ Configuration valid!")
        typer.echo(f"Found {len(p.profiles)} print profiles.")
    except Exception as e:
        typer.echo(f"❌ Configuration invalid: {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
