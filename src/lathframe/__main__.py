"""
Command-line interface.

Usage:
    $ python -m lathframe --preset seat
    $ python -m lathframe --lath-width 60 --export blueprints.pdf
    $ python -m lathframe --gui

Exit codes: 0 on success, 2 when the arguments are invalid, no silhouette
exists for the chosen preset or the thickness does not fit the knee arc.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from lathframe import __version__
from lathframe.config import DEFAULT_LATH_GAP, DEFAULT_LATH_WIDTH, DEFAULT_LINTEL_THICKNESS, LayoutConfig
from lathframe.controller.design import compute_design
from lathframe.errors import InvalidConfigurationError, SilhouetteError
from lathframe.logging_config import LOG_LEVELS, parse_log_level, setup_logging
from lathframe.model.presets import DesignPreset, get_preset

logger = logging.getLogger(__name__)

EXIT_REJECTED = 2

SUMMARY_LABELS = {
    "leg_tangent_length": "Leg tangent [mm]",
    "middle_tangent_length": "Middle tangent [mm]",
    "back_tangent_length": "Back tangent [mm]",
    "leg_angle": "Leg angle [deg]",
    "leg_arc_length": "Leg arc length [mm]",
    "leg_arc_chord_length": "Leg arc chord [mm]",
    "leg_arc_thickness": "Leg arc thickness [mm]",
    "back_angle": "Back angle [deg]",
    "back_arc_length": "Back arc length [mm]",
    "back_arc_chord_length": "Back arc chord [mm]",
    "back_arc_thickness": "Back arc thickness [mm]",
    "lath_count": "Laths",
    "remaining_length": "Remaining length [mm]",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lathframe",
        description="Lath frame designer: silhouette, lath layout and blueprints.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--preset", choices=[preset.value for preset in DesignPreset], default=DesignPreset.DEFAULT.value,
        help="Control primitive placement to start from",
    )
    parser.add_argument("--lath-width", type=float, default=DEFAULT_LATH_WIDTH, help="Lath width in mm")
    parser.add_argument("--lath-gap", type=float, default=DEFAULT_LATH_GAP, help="Gap between laths in mm")
    parser.add_argument(
        "--thickness", type=float, default=DEFAULT_LINTEL_THICKNESS, help="Frame piece thickness in mm"
    )
    parser.add_argument("--export", metavar="PATH", help="Write the blueprint sheet to a .pdf, .svg or .png file")
    parser.add_argument(
        "--log-level", type=str.upper, default="WARNING", choices=LOG_LEVELS, help="Logging verbosity"
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write the log to this file")
    parser.add_argument("--gui", action="store_true", help="Open the desktop application")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    log_level = parse_log_level(args.log_level)

    config = LayoutConfig(lath_width=args.lath_width, lath_gap=args.lath_gap, lintel_thickness=args.thickness)
    try:
        config.validate()
    except InvalidConfigurationError as exc:
        parser.error(str(exc))

    controls = get_preset(args.preset)

    if args.gui:
        from lathframe.main import main as gui_main
        return gui_main(controls=controls, config=config, log_level=log_level, log_file=args.log_file)

    setup_logging(level=log_level, log_file=args.log_file)

    try:
        design = compute_design(controls, config)
    except (SilhouetteError, InvalidConfigurationError) as exc:
        logger.error(f"Design rejected: {exc}")
        return EXIT_REJECTED

    summary = design.summary()
    width = max(len(label) for label in SUMMARY_LABELS.values())
    for key, label in SUMMARY_LABELS.items():
        print(f"{label:<{width}}  {summary[key]}")

    if args.export:
        from lathframe.controller.export import export_blueprints
        try:
            export_blueprints(design, args.export)
        except ValueError as exc:
            parser.error(str(exc))
        print(f"Blueprints written to {args.export}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
