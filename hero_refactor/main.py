"""Main orchestration module for hero-refactor."""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .classifier import skill_from_path, skin_from_path
from .config import Config
from .errors import HeroRefactorError
from .indexer import build_hero_skills, build_hero_spine, classify_paths
from .organizer import HeroOrganizer, write_json, write_lines
from .skill_names import load_skill_names
from .walker import get_all_paths


logger = logging.getLogger(__name__)


def setup_logging(config: Config, verbose: bool = False) -> logging.Logger:
    """Set up logging configuration.

    Args:
        config: Configuration object
        verbose: Enable debug logging

    Returns:
        Configured logger
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_dir = config.log_dir
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / "hero_refactor.log"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    return logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Counts collected during one run."""

    heroes: int = 0
    skills: int = 0
    skins: int = 0
    unknown_skill_paths: int = 0
    unknown_skin_paths: int = 0
    copied_files: int = 0
    copy_failures: int = 0
    spine_entries: int = 0
    wrong_synchronized: int = 0


class HeroRefactor:
    """Rebuild the hero asset tree and its lookup tables."""

    def __init__(self, config: Config):
        """Initialize the driver.

        Args:
            config: Configuration object
        """
        self.config = config
        self.organizer = HeroOrganizer(config.hero_dir)

    def run(self, skill_dir: str, skin_dir: str, skill_csv: str) -> RunSummary:
        """Run the three phases: refactor the tree, build the spine, check skills.

        Args:
            skill_dir: Root of the skill icon tree
            skin_dir: Root of the skin asset tree
            skill_csv: Skill name registry CSV

        Returns:
            Summary of the run

        Raises:
            HeroRefactorError: a fatal condition stopped the run
        """
        summary = RunSummary()

        logger.info("Refactoring directory...")

        skill_paths = get_all_paths(skill_dir)
        skill_index, unknown_skill_paths = classify_paths(skill_paths, skill_from_path)

        skin_paths = get_all_paths(skin_dir)
        skin_index, unknown_skin_paths = classify_paths(skin_paths, skin_from_path)

        logger.info(
            f"Classified {len(skill_paths)} skill files and {len(skin_paths)} skin files "
            f"({len(unknown_skill_paths)} + {len(unknown_skin_paths)} unknown)"
        )

        self.organizer.reset()
        self.organizer.place_skills(skill_index)
        self.organizer.place_skins(skin_index)

        write_lines(self.config.deleted_skill_report, unknown_skill_paths)
        write_lines(self.config.deleted_skin_report, unknown_skin_paths)

        logger.info("Refactoring directory... OK!")

        logger.info("Generating hero spine...")

        hero_spine = build_hero_spine(skin_index)
        write_json(self.config.hero_spine_file, hero_spine)

        logger.info("Generating hero spine... OK!")

        logger.info("Generating hero skill and check wrong synchronized data...")

        skill_names = load_skill_names(skill_csv)
        hero_skills, wrong_synchronized = build_hero_skills(
            skill_index, skill_names, self.config.skills_per_hero
        )
        write_json(self.config.hero_skill_file, hero_skills)
        write_lines(self.config.wrong_sync_report, wrong_synchronized)

        if wrong_synchronized:
            logger.warning(
                f"{len(wrong_synchronized)} skill slots disagree between icons and names, "
                f"see {self.config.wrong_sync_report}"
            )
        logger.info("Generating hero skill and check wrong synchronized data... OK!")

        summary.heroes = len(set(skill_index) | set(skin_index))
        summary.skills = sum(len(skills) for skills in skill_index.values())
        summary.skins = sum(len(skins) for skins in skin_index.values())
        summary.unknown_skill_paths = len(unknown_skill_paths)
        summary.unknown_skin_paths = len(unknown_skin_paths)
        summary.copied_files = self.organizer.copied
        summary.copy_failures = self.organizer.failed
        summary.spine_entries = len(hero_spine)
        summary.wrong_synchronized = len(wrong_synchronized)
        return summary


def print_summary(summary: RunSummary, console: Optional[Console] = None) -> None:
    """Print the run summary as a table."""
    console = console or Console()

    table = Table(title="Hero refactor summary", show_header=True, header_style="bold magenta")
    table.add_column("Item", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Heroes", str(summary.heroes))
    table.add_row("Skill icons", str(summary.skills))
    table.add_row("Skin files", str(summary.skins))
    table.add_row("Unknown skill paths", str(summary.unknown_skill_paths))
    table.add_row("Unknown skin paths", str(summary.unknown_skin_paths))
    table.add_row("Files copied", str(summary.copied_files))
    table.add_row("Copy failures", str(summary.copy_failures))
    table.add_row("Spine entries", str(summary.spine_entries))
    table.add_row("Wrong synchronized slots", str(summary.wrong_synchronized))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hero-refactor",
        description="Rebuild hero skill icons and skins into a per-hero folder layout",
        epilog=(
            'E.g. hero-refactor "C:\\folder\\skill\\hero" "C:\\folder\\skin\\hero" '
            '"C:\\folder\\skill\\skillInfo.csv"'
        ),
    )
    parser.add_argument("skill_path", help="Path to the hero skill icon folder")
    parser.add_argument("skin_path", help="Path to the hero skin folder")
    parser.add_argument("skill_csv", help="Path to the skill name CSV")
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
        setup_logging(config, args.verbose)

        summary = HeroRefactor(config).run(args.skill_path, args.skin_path, args.skill_csv)
    except HeroRefactorError as e:
        logging.error(f"Fatal error: {e}")
        return 1

    print_summary(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
