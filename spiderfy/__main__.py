import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from spiderfy import (
    ParameterError,
    compute_layout,
    generate_tikz_document,
    parameters_from_mapping,
    summarize,
)

logger = logging.getLogger(__name__)

_NUMERIC_OPTIONS = (
    "circle_foot_separation",
    "circle_spiral_switchover",
    "spiral_foot_separation",
    "spiral_length_start",
    "spiral_length_factor",
    "animation_speed",
    "anchor_offset_x",
    "anchor_offset_y",
)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _overrides(args: argparse.Namespace) -> Dict[str, object]:
    overrides: Dict[str, object] = {
        name: getattr(args, name) for name in _NUMERIC_OPTIONS if getattr(args, name) is not None
    }
    if args.no_animate:
        overrides["animate"] = False
    if args.force_legs:
        overrides["force_legs_when_single"] = True
    return overrides


def _fmt(value: float) -> str:
    return "inf" if math.isinf(value) else f"{value:.3f}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out markers exploded around a shared point")
    parser.add_argument("count", type=int, help="Number of markers sharing the anchor")
    parser.add_argument("--circle-foot-separation", help="Arc length between circle markers (default: 90)")
    parser.add_argument(
        "--circle-spiral-switchover",
        help="Marker count from which the spiral is used; 0 = always, inf = never (default: 9)",
    )
    parser.add_argument("--spiral-foot-separation", help="Spiral tightness (default: 80)")
    parser.add_argument("--spiral-length-start", help="Initial spiral radius (default: 60)")
    parser.add_argument("--spiral-length-factor", help="Spiral growth rate (default: 5)")
    parser.add_argument("--animation-speed", help="Animation length in ms (default: 500)")
    parser.add_argument("--no-animate", action="store_true", help="Disable staged animation")
    parser.add_argument("--anchor-offset-x", help="Horizontal anchor offset (default: 0)")
    parser.add_argument("--anchor-offset-y", help="Vertical anchor offset (default: 0)")
    parser.add_argument(
        "--force-legs",
        action="store_true",
        help="Draw a leg even when only one marker is exploded",
    )
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument("--tikz-output-path", help="Write a standalone TikZ preview to the given path")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.count < 0:
        logger.error("Marker count must be non-negative, got %d", args.count)
        raise SystemExit(1)

    try:
        params = parameters_from_mapping(_overrides(args))
    except ParameterError as exc:
        logger.error("Invalid layout parameters: %s", exc)
        raise SystemExit(1)

    records = compute_layout(args.count, params)
    summary = summarize(records)
    logger.info("Computed %d record(s)", summary.count)

    if args.json:
        print(json.dumps([record.to_dict() for record in records], indent=2))
    else:
        print(f"Mode: {summary.mode.value if summary.mode else '(none)'}")
        print("Records:")
        if not records:
            print("  (none)")
        for record in records:
            stack = "-" if record.stack_order is None else str(record.stack_order)
            print(
                f"  [{record.index}] angle={record.angle:.4f} leg={record.leg_length:.3f} "
                f"x={record.x:.3f} y={record.y:.3f} delay={record.transition_delay:.3f}s "
                f"leg_shown={record.should_render_leg} stack={stack}"
            )
        print(f"Leg length range: {summary.min_leg_length:.3f} .. {summary.max_leg_length:.3f}")
        print(f"Min separation: {_fmt(summary.min_separation)}")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        document = generate_tikz_document(records, title=f"{args.count} marker(s)")
        output_path.write_text(document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
