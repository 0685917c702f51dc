#!/usr/bin/env python3
"""Generate a star system for a hex, or survey feature frequencies."""

from __future__ import annotations

import argparse
import json
import logging

from orrery import config
from orrery.generator import StarSystemGenerator
from orrery.util.survey import survey_systems


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--hex",
        default=config.RANDOM_SEED,
        help=f"Hex id used as the seed (default: {config.RANDOM_SEED})",
    )
    parser.add_argument(
        "--type",
        dest="stellar_type",
        default=config.DEFAULT_STELLAR_TYPE,
        help=f"Primary stellar type (default: {config.DEFAULT_STELLAR_TYPE})",
    )
    parser.add_argument(
        "--main-world",
        action="store_true",
        help="Keep generated planets out of the habitable zone",
    )
    parser.add_argument("--hz-inner", type=float, help="Habitable zone inner edge (AU)")
    parser.add_argument("--hz-outer", type=float, help="Habitable zone outer edge (AU)")
    parser.add_argument(
        "--survey",
        type=int,
        metavar="N",
        help="Survey N systems seeded from --hex instead of printing one",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.survey:
        result = survey_systems(args.stellar_type, args.survey, seed_prefix=args.hex)
        print(result.summary())
        return

    existing_data: dict[str, object] = {"mainWorld": args.main_world}
    if args.hz_inner is not None:
        existing_data["habitableZoneInnerAU"] = args.hz_inner
    if args.hz_outer is not None:
        existing_data["habitableZoneOuterAU"] = args.hz_outer

    system = StarSystemGenerator().generate_for_hex(
        args.hex, args.stellar_type, existing_data
    )
    print(json.dumps(system.to_dict(), indent=2))


if __name__ == "__main__":
    main()
