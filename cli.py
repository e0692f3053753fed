#!/usr/bin/env python3
"""
Wheel of Life - Main CLI Entry Point

Rate the areas of your life, see where to focus, and compare against
saved snapshots.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt, IntPrompt, Confirm
from rich import box

from config import LOG_LEVEL, MAX_SCORE, MIN_CATEGORIES, MIN_SCORE, WEB_PORT, WEB_URL
from models import score_badge
from lifewheel import WheelSession

console = Console()

BADGE_STYLES = {"priority": "red", "strength": "green"}


def setup_logging(level=LOG_LEVEL):
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def show_wheel(session):
    """Table of areas with current score and badge"""
    comparison = session.snapshots.comparison_snapshot()

    table = Table(title="Your Wheel", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Area", style="cyan")
    table.add_column("Score", justify="right")
    if comparison:
        table.add_column(comparison.name, justify="right", style="dim")
    table.add_column("")

    for i, category in enumerate(session.categories, 1):
        score = session.scores.get(category.label)
        badge = score_badge(score) if score is not None else ""
        row = [str(i), category.label, f"{score}/10"]
        if comparison:
            previous = comparison.scores.get(category.label)
            row.append("-" if previous is None else f"{previous}/10")
        style = BADGE_STYLES.get(badge)
        row.append(f"[{style}]{badge.title()}[/{style}]" if style else "")
        table.add_row(*row)

    console.print(table)


def show_insights(session):
    """Summary, focus areas and suggested actions"""
    result = session.insights()
    lines = [f"[bold]{result.summary}[/bold]"]
    if result.highlights:
        lines.append("\n[bold]Focus areas:[/bold]")
        lines.extend(f"  - {h}" for h in result.highlights)
    if result.actions:
        lines.append("\n[bold]This week:[/bold]")
        lines.extend(f"  {i}. {a}" for i, a in enumerate(result.actions, 1))
    console.print(Panel.fit("\n".join(lines), title="Insights"))


def list_history(session):
    """List saved snapshots, newest first"""
    snapshots = session.list_snapshots()

    if not snapshots:
        console.print("[dim]No snapshots yet. Save one from the menu.[/dim]")
        return []

    active_id = session.snapshots.active_comparison_id
    table = Table(title="Snapshot History", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Areas", justify="right")
    table.add_column("Average", justify="right", style="green")
    table.add_column("Saved", style="dim")
    table.add_column("")

    for i, snapshot in enumerate(snapshots, 1):
        values = list(snapshot.scores.values())
        average = f"{sum(values) / len(values):.1f}" if values else "-"
        table.add_row(
            str(i),
            snapshot.name,
            str(len(snapshot.categories)),
            average,
            snapshot.created_at.astimezone().strftime("%Y-%m-%d %H:%M"),
            "[bold]comparing[/bold]" if snapshot.id == active_id else "",
        )

    console.print(table)
    return snapshots


def pick_category(session, prompt):
    categories = session.categories
    choices = [str(i) for i in range(1, len(categories) + 1)]
    index = Prompt.ask(prompt, choices=choices + ["b"], default="b")
    if index == "b":
        return None
    return categories[int(index) - 1]


def rate_areas(session):
    """Walk every area and ask for a score"""
    for category in session.categories:
        current = session.scores.get(category.label)
        if category.description:
            console.print(f"[dim]{category.description}[/dim]")
        value = IntPrompt.ask(
            f"{category.label} ({MIN_SCORE}-{MAX_SCORE})", default=current
        )
        session.set_score(category.label, value)


def add_area(session):
    label = Prompt.ask("New area name")
    description = Prompt.ask("Short description (or Enter to skip)", default="")
    category = session.add_category(label, description)
    if category:
        console.print(f"[green]Added {category.label}.[/green]")
    else:
        console.print("[yellow]Nothing added: name is empty or already on the wheel.[/yellow]")


def remove_area(session):
    if not session.can_remove_category():
        console.print(f"[yellow]Keep at least {MIN_CATEGORIES} areas on the wheel.[/yellow]")
        return
    category = pick_category(session, "Area to remove")
    if category and Confirm.ask(f"Remove {category.label}?"):
        session.remove_category(category.id)
        console.print(f"[green]Removed {category.label}.[/green]")


def save_snapshot(session):
    name = Prompt.ask("Snapshot name (or Enter for default)", default="")
    snapshot = session.save_snapshot(name)
    if session.snapshots.last_save_ok:
        console.print(f"[green]Saved '{snapshot.name}'.[/green] Now comparing against it.")
    else:
        console.print(f"[yellow]'{snapshot.name}' kept for this session only (could not write history).[/yellow]")


def toggle_comparison(session):
    snapshots = list_history(session)
    if not snapshots:
        return
    choices = [str(i) for i in range(1, len(snapshots) + 1)]
    index = Prompt.ask("Snapshot to compare (again to clear)", choices=choices + ["b"], default="b")
    if index == "b":
        return
    active = session.select_for_comparison(snapshots[int(index) - 1].id)
    console.print("[dim]Comparison cleared.[/dim]" if active is None else "[dim]Comparison set.[/dim]")


def export_chart(session, user_name=None, path="wheel-of-life.png"):
    """Render the chart and write a PNG. Returns the path or None."""
    session.render_chart(user_name=user_name)
    image = session.export_chart("png")
    if image is None:
        console.print("[yellow]Image export unavailable (is kaleido installed?).[/yellow]")
        return None
    out = Path(path)
    out.write_bytes(image)
    console.print(f"[green]Chart saved to:[/green] {out.absolute()}")
    return out


def main_menu(session):
    """Main interactive menu"""
    while True:
        console.clear()
        console.print(Panel.fit(
            "[bold cyan]Wheel of Life[/bold cyan]\n"
            "[dim]Rate each area 0-10, find your focus, track change over time[/dim]",
            title="Wheel of Life"
        ))
        show_wheel(session)

        console.print("\n[bold]What would you like to do?[/bold]\n")
        console.print("  [cyan]1[/cyan] - Rate areas")
        console.print("  [cyan]2[/cyan] - Add an area")
        console.print("  [cyan]3[/cyan] - Remove an area")
        console.print("  [cyan]4[/cyan] - View insights")
        console.print("  [cyan]5[/cyan] - Save snapshot")
        console.print("  [cyan]6[/cyan] - Snapshot history")
        console.print("  [cyan]7[/cyan] - Compare with a snapshot")
        console.print("  [cyan]8[/cyan] - Clear comparison")
        console.print("  [cyan]9[/cyan] - Export chart PNG")
        console.print("  [cyan]q[/cyan] - Quit")

        choice = Prompt.ask(
            "\nChoice",
            choices=["1", "2", "3", "4", "5", "6", "7", "8", "9", "q"],
            default="1",
        )

        if choice == "q":
            break
        elif choice == "1":
            rate_areas(session)
        elif choice == "2":
            add_area(session)
        elif choice == "3":
            remove_area(session)
        elif choice == "4":
            show_insights(session)
        elif choice == "5":
            save_snapshot(session)
        elif choice == "6":
            list_history(session)
        elif choice == "7":
            toggle_comparison(session)
        elif choice == "8":
            session.clear_comparison()
            console.print("[dim]Comparison cleared.[/dim]")
        elif choice == "9":
            name = Prompt.ask("Your name for the caption (or Enter to skip)", default="")
            export_chart(session, user_name=name)
        Prompt.ask("\nPress Enter to continue", default="")


def cli():
    """Main CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Wheel of Life - rate, reflect, compare",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lifewheel            # Interactive menu
  lifewheel --list     # List saved snapshots
  lifewheel --web      # Run the web API
        """
    )
    parser.add_argument("--list", "-l", action="store_true", help="List saved snapshots")
    parser.add_argument("--web", action="store_true", help="Run the web API")

    args = parser.parse_args()
    setup_logging()

    session = WheelSession()

    if args.list:
        list_history(session)
    elif args.web:
        from app import create_app
        console.print(f"[dim]Starting web API at {WEB_URL}...[/dim]")
        create_app(session).run(port=WEB_PORT)
    else:
        main_menu(session)


if __name__ == "__main__":
    cli()
