"""
Command-line interface for civdraft.

Replays a recorded list of wire events against a preset and shows which
were accepted, which rule rejected the others, and the final picks,
bans and snipes per player. Also lists the built-in presets and shows
or edits the saved config.
"""

import argparse
import json
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import LOG_LEVELS, Config, get_config_path, load_config, update_config
from .models import (
    Player,
    PlayerEvent,
    SubmissionStatus,
    get_preset,
    list_presets,
)
from .models.civilisation import Civilisation
from .state import Draft
from .state.event_bus import EventBus
from .systems import DraftOrchestrator, redacted_events

logger = logging.getLogger(__name__)

STATUS_STYLES = {
    SubmissionStatus.ACCEPTED: "green",
    SubmissionStatus.REJECTED: "red",
    SubmissionStatus.UNCLASSIFIABLE: "magenta",
}


def _names(civilisations: list[Civilisation]) -> str:
    return ", ".join(c.name for c in civilisations) or "-"


def show_presets(console: Console) -> None:
    table = Table(title="Presets")
    table.add_column("Name")
    table.add_column("Turns", justify="right")
    table.add_column("Schedule", style="dim")
    for preset in list_presets():
        schedule = " ".join(
            f"{t.player.value[0]}:{t.action.value}" for t in preset.turns
        )
        table.add_row(preset.name, str(len(preset.turns)), schedule)
    console.print(table)


def show_summary(console: Console, draft: Draft, viewer: Player) -> None:
    """Final derived views for both players."""
    table = Table(title=f"Draft state ({draft.next_action}/{len(draft.preset.turns)} turns)")
    table.add_column("Player")
    table.add_column("Picks")
    table.add_column("Bans")
    table.add_column("Snipes")
    for player in (Player.HOST, Player.GUEST):
        table.add_row(
            player.value,
            _names(draft.get_picks(player)),
            _names(draft.get_bans_for_player(player)),
            _names(draft.get_snipes(player)),
        )
    console.print(table)
    console.print(f"Global bans: {_names(draft.get_global_bans())}")
    console.print(f"Global picks: {_names(draft.get_global_picks())}")

    visible = [
        e.civilisation for e in redacted_events(draft, viewer) if isinstance(e, PlayerEvent)
    ]
    console.print(f"Log as seen by {viewer.value}: {_names(visible)}")


def show_config(console: Console, config: Config, config_dir: str) -> None:
    table = Table(title=f"Config ({get_config_path(config_dir)})")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in config.items():
        table.add_row(key, str(value))
    console.print(table)


def configure(console: Console, config_dir: str, changes: dict) -> int:
    """Validate and save setting changes, then print the effective config."""
    if "default_preset" in changes:
        try:
            get_preset(changes["default_preset"])
        except KeyError as exc:
            console.print(Panel(str(exc.args[0]), border_style="red"))
            return 2
    if changes:
        try:
            config = update_config(config_dir, **changes)
        except (ValueError, OSError) as exc:
            console.print(Panel(escape(str(exc)), border_style="red"))
            return 2
        logger.info(f"Saved {', '.join(sorted(changes))} to {get_config_path(config_dir)}")
    else:
        config = load_config(config_dir)
    show_config(console, config, config_dir)
    return 0


def replay(
    console: Console,
    events_path: Path,
    preset_name: str,
    viewer: Player,
    turn_timer: int,
) -> int:
    """Submit every recorded event in order. Returns the exit status."""
    try:
        raw_events = json.loads(events_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        console.print(Panel(f"Cannot read {events_path}: {exc}", border_style="red"))
        return 2
    if not isinstance(raw_events, list):
        console.print(Panel(f"{events_path} must contain a JSON list", border_style="red"))
        return 2

    try:
        preset = get_preset(preset_name)
    except KeyError as exc:
        console.print(Panel(str(exc.args[0]), border_style="red"))
        return 2

    draft = Draft(preset=preset)
    orchestrator = DraftOrchestrator(
        draft,
        draft_id=events_path.stem,
        config={"turn_timer_seconds": turn_timer},
        bus=EventBus(),
    )
    orchestrator.join(Player.HOST, "Host")
    orchestrator.join(Player.GUEST, "Guest")

    table = Table(title=f"Replay of {events_path.name} on '{preset.name}'")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Expected")
    table.add_column("Result")
    table.add_column("Detail")

    all_accepted = True
    for position, raw in enumerate(raw_events):
        expected = draft.get_expected_action()
        expected_text = (
            f"{expected.player.value} {expected.action.value}" if expected else "-"
        )
        result = orchestrator.submit(raw)
        if not result.accepted:
            all_accepted = False
        verdict = result.status.value
        if result.validation_id is not None:
            verdict = f"{verdict} {result.validation_id.value}"
        table.add_row(
            str(position),
            expected_text,
            f"[{STATUS_STYLES[result.status]}]{verdict}[/]",
            escape(result.summary),
        )

    console.print(table)
    show_summary(console, draft, viewer)
    return 0 if all_accepted else 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="civdraft - draft validation engine")
    parser.add_argument(
        "--config-dir",
        default=".",
        help="Directory holding .civdraft_config.json (default: current directory)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every rule evaluation",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("presets", help="List built-in presets")

    replay_parser = subparsers.add_parser("replay", help="Replay recorded events")
    replay_parser.add_argument("events", type=Path, help="JSON file with a list of events")
    replay_parser.add_argument("--preset", help="Built-in preset name")
    replay_parser.add_argument(
        "--viewer",
        default="NONE",
        choices=[p.value for p in Player],
        help="Whose view of hidden turns to print (default: NONE)",
    )

    config_parser = subparsers.add_parser("config", help="Show or change saved settings")
    config_parser.add_argument("--default-preset", help="Preset used when replay gets no --preset")
    config_parser.add_argument("--turn-timer", type=int, help="Turn countdown in seconds")
    config_parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level when --verbose is not given",
    )

    args = parser.parse_args(argv)
    config = load_config(args.config_dir)

    level = "DEBUG" if args.verbose else config["log_level"]
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s [%(levelname)s] %(message)s',
    )

    console = Console()
    if args.command == "presets":
        show_presets(console)
        return 0
    if args.command == "config":
        changes = {
            key: value
            for key, value in (
                ("default_preset", args.default_preset),
                ("turn_timer_seconds", args.turn_timer),
                ("log_level", args.log_level),
            )
            if value is not None
        }
        return configure(console, args.config_dir, changes)

    preset_name = args.preset or config["default_preset"]
    logger.debug(f"Replaying {args.events} on preset {preset_name}")
    return replay(
        console,
        args.events,
        preset_name,
        Player(args.viewer),
        config["turn_timer_seconds"],
    )
