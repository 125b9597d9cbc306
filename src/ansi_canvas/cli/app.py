"""Typer CLI application."""

import json
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from ansi_canvas.core.canvas import Canvas, CanvasOptions
from ansi_canvas.core.color import Color, ColorParseError


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install ansi-canvas[cli]")

    app = typer.Typer(
        name="ansi-canvas",
        help="Inspect colors and draw styled text with diff-based terminal rendering.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def color(
        value: Annotated[str, typer.Argument(help="Color name, rgb(r, g, b) or #RRGGBB")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Parse a color and show its canonical forms."""
        try:
            parsed = Color.parse(value)
        except ColorParseError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        rgb = parsed.to_rgb()
        if json_output:
            print(json.dumps({"hex": parsed.to_hex(), "r": rgb.r, "g": rgb.g, "b": rgb.b}))
            return

        console.print(f"[bold]Input:[/] {value}")
        console.print(f"[bold]Hex:[/]   {parsed.to_hex()}")
        console.print(f"[bold]RGB:[/]   rgb({rgb.r}, {rgb.g}, {rgb.b})")
        console.print(f"[bold]Swatch:[/] [on {parsed.to_hex()}]        [/]")

    @app.command()
    def draw(
        text: Annotated[str, typer.Argument(help="Text to draw")],
        x: Annotated[int, typer.Option("--x", "-x", help="Column (0-indexed)")] = 0,
        y: Annotated[int, typer.Option("--y", "-y", help="Row (0-indexed)")] = 0,
        fg: Annotated[Optional[str], typer.Option("--fg", help="Foreground color")] = None,
        bg: Annotated[Optional[str], typer.Option("--bg", help="Background color")] = None,
        bold: Annotated[bool, typer.Option("--bold", help="Bold")] = False,
        width: Annotated[Optional[int], typer.Option("--width", help="Canvas width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", help="Canvas height (default: terminal)")] = None,
    ) -> None:
        """Draw text at a position through a Canvas and flush it to stdout."""
        canvas = Canvas(CanvasOptions(width=width, height=height))
        try:
            canvas.foreground(fg).background(bg)
        except ColorParseError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

        canvas.bold(bold).move_to(x, y).write(text).flush()

    return app
