"""Console-driven inspection loop for character stat sheets."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence, Tuple

from aipe.core.types import STAT_NAMES
from aipe.data.errors import DataError
from aipe.data.json_loader import dump_json, load_json
from aipe.data.repositories import ClassesRepository, RacesRepository, TemplatesRepository
from aipe.data.snapshot_codec import decode_snapshot, encode_snapshot
from aipe.domain.entities import CharacterStatsSnapshot
from aipe.domain.errors import InvalidStatInputError
from aipe.domain.stat_formula import FormulaOptions
from aipe.presentation.cli import config as cli_config
from aipe.presentation.cli.render import (
    format_breakdown,
    format_stat_sheet,
    render_bullet_lines,
    render_heading,
    render_lines,
    render_menu,
)
from aipe.services import FactoryError, ProgressionService, StatsService
from aipe.services.factories import create_snapshot_for_new_character, create_snapshot_from_template

logger = logging.getLogger(__name__)

MenuEntry = Tuple[str, str]


@dataclass
class CliSession:
    """Mutable state for one console session."""

    config: Dict[str, Any]
    snapshot: CharacterStatsSnapshot | None = None
    config_path: Path | None = None
    classes_repo: ClassesRepository = field(default_factory=ClassesRepository)
    races_repo: RacesRepository = field(default_factory=RacesRepository)
    templates_repo: TemplatesRepository | None = None
    progression: ProgressionService = field(default_factory=ProgressionService)

    def __post_init__(self) -> None:
        if self.templates_repo is None:
            self.templates_repo = TemplatesRepository(
                classes_repo=self.classes_repo,
                races_repo=self.races_repo,
            )

    def stats_service(self) -> StatsService:
        options = FormulaOptions(soft_cap_enabled=bool(self.config.get("soft_cap_enabled")))
        return StatsService(options=options)

    @property
    def decimal_places(self) -> int:
        return int(self.config.get("decimal_places", 1))


def configure_logging() -> None:
    level_name = os.getenv("AIPE_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> None:
    """Start the interactive CLI session."""
    configure_logging()
    session = CliSession(config=cli_config.load_config())
    print("=== AIPE Stat Inspector ===")
    run_session(session)
    print("Goodbye!")


def _main_menu_options(session: CliSession) -> List[MenuEntry]:
    options: List[MenuEntry] = [
        ("Load Template", "template"),
        ("Create Character", "create"),
        ("Load Snapshot File", "load"),
    ]
    if session.snapshot is not None:
        options.extend(
            [
                ("Show Stat Sheet", "sheet"),
                ("Show Formula Breakdown", "breakdown"),
                ("Progression", "progression"),
                ("Save Snapshot File", "save"),
            ]
        )
    options.append(("Options", "options"))
    options.append(("Quit", "quit"))
    return options


def run_session(session: CliSession) -> None:
    handlers: Dict[str, Callable[[CliSession], None]] = {
        "template": _handle_load_template,
        "create": _handle_create_character,
        "load": _handle_load_file,
        "sheet": _handle_show_sheet,
        "breakdown": _handle_show_breakdown,
        "progression": _handle_progression,
        "save": _handle_save_file,
        "options": _handle_options,
    }
    while True:
        options = _main_menu_options(session)
        action = _prompt_menu("Main Menu", options)
        if action == "quit":
            return
        try:
            handlers[action](session)
        except (DataError, FactoryError, InvalidStatInputError) as exc:
            logger.debug("Action %s failed", action, exc_info=True)
            print(f"Error: {exc}")


def _prompt_menu(title: str, options: Sequence[MenuEntry]) -> str:
    labels = [label for label, _ in options]
    while True:
        render_menu(title, labels)
        raw_value = input("Select an option: ").strip()
        if raw_value.isdigit() and 1 <= int(raw_value) <= len(options):
            return options[int(raw_value) - 1][1]
        print(f"Invalid selection. Please enter 1-{len(options)}.")


def _prompt_int(prompt: str, *, minimum: int | None = None) -> int:
    while True:
        raw_value = input(prompt).strip()
        try:
            value = int(raw_value)
        except ValueError:
            print("Please enter a whole number.")
            continue
        if minimum is not None and value < minimum:
            print(f"Please enter a number >= {minimum}.")
            continue
        return value


def _prompt_stat() -> str:
    entries = [(stat.capitalize(), stat) for stat in STAT_NAMES]
    return _prompt_menu("Stat", entries)


def _handle_load_template(session: CliSession) -> None:
    assert session.templates_repo is not None
    templates = session.templates_repo.all()
    entries = [(template.name, template.id) for template in templates]
    template_id = _prompt_menu("Templates", entries)
    session.snapshot = create_snapshot_from_template(template_id, session.templates_repo)
    print(f"Loaded template '{template_id}'.")


def _handle_create_character(session: CliSession) -> None:
    name = input("Enter character name (default Adventurer): ").strip() or "Adventurer"
    class_id = _prompt_menu(
        "Class",
        [(class_def.name, class_def.id) for class_def in session.classes_repo.all()],
    )
    race_id = _prompt_menu(
        "Race",
        [(race_def.name, race_def.id) for race_def in session.races_repo.all()],
    )
    session.snapshot = create_snapshot_for_new_character(
        name,
        class_id,
        race_id,
        classes_repo=session.classes_repo,
        races_repo=session.races_repo,
    )
    print(f"Created {name}.")


def _handle_load_file(session: CliSession) -> None:
    raw_path = input("Snapshot file path: ").strip()
    if not raw_path:
        print("No path entered.")
        return
    session.snapshot = decode_snapshot(load_json(Path(raw_path)), raw_path)
    print(f"Loaded {session.snapshot.name}.")


def _handle_save_file(session: CliSession) -> None:
    assert session.snapshot is not None
    raw_path = input("Save to path: ").strip()
    if not raw_path:
        print("No path entered.")
        return
    dump_json(Path(raw_path), encode_snapshot(session.snapshot))
    print(f"Saved {session.snapshot.name} to {raw_path}.")


def _handle_show_sheet(session: CliSession) -> None:
    assert session.snapshot is not None
    sheet = session.stats_service().build_stat_sheet(session.snapshot)
    render_heading("Stat Sheet")
    render_lines(format_stat_sheet(sheet, decimal_places=session.decimal_places))


def _handle_show_breakdown(session: CliSession) -> None:
    assert session.snapshot is not None
    stat = _prompt_stat()
    breakdown = session.stats_service().get_stat_breakdown(session.snapshot, stat)  # type: ignore[arg-type]
    render_heading(f"{stat.capitalize()} Breakdown")
    render_lines(format_breakdown(stat, breakdown, decimal_places=session.decimal_places))


def _handle_progression(session: CliSession) -> None:
    assert session.snapshot is not None
    snapshot = session.snapshot
    service = session.progression
    action = _prompt_menu(
        "Progression",
        [
            ("Gain Levels", "levels"),
            ("Allocate Base Points", "allocate"),
            ("Adjust Gear Bonus", "gear"),
            ("Grant Paragon Points", "grant"),
            ("Distribute Paragon Points", "distribute"),
            ("Prestige", "prestige"),
            ("Back", "back"),
        ],
    )
    if action == "back":
        return
    if action == "levels":
        result = service.gain_levels(snapshot, _prompt_int("Levels to gain: ", minimum=1))
    elif action == "allocate":
        stat = _prompt_stat()
        result = service.allocate_base_points(snapshot, stat, _prompt_int("Points: ", minimum=1))
    elif action == "gear":
        stat = _prompt_stat()
        result = service.adjust_gear_bonus(snapshot, stat, _prompt_int("Bonus change (+/-): "))
    elif action == "grant":
        result = service.grant_paragon_points(snapshot, _prompt_int("Paragon points: ", minimum=1))
    elif action == "distribute":
        stat = _prompt_stat()
        result = service.distribute_paragon_points(snapshot, stat, _prompt_int("Points: ", minimum=1))
    else:
        result = service.prestige(snapshot)
    print(result.message)
    summary = result.summary
    render_bullet_lines(
        [
            f"Level {summary.level}, prestige {summary.prestige_level}",
            f"Paragon points available: {summary.paragon_points_available}",
        ]
    )


def _handle_options(session: CliSession) -> None:
    soft_cap_label = "on" if session.config.get("soft_cap_enabled") else "off"
    action = _prompt_menu(
        "Options",
        [
            (f"Toggle Effective Soft Cap (currently {soft_cap_label})", "soft_cap"),
            (f"Decimal Places (currently {session.decimal_places})", "decimals"),
            ("Back", "back"),
        ],
    )
    if action == "back":
        return
    if action == "soft_cap":
        session.config["soft_cap_enabled"] = not session.config.get("soft_cap_enabled")
    else:
        session.config["decimal_places"] = _prompt_int("Decimal places (0-4): ", minimum=0)
    cli_config.save_config(session.config, session.config_path)
    session.config = cli_config.load_config(session.config_path)
    print("Options saved.")
