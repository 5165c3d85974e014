"""
Command-line entry point: build a briefing and print it as JSON.

Exit codes: 0 on success, 1 on bad input, 2 when the community cannot be
found, 3 when the community or origin is ambiguous.
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

from fastapi.encoders import jsonable_encoder

from sps_briefing.config import Settings
from sps_briefing.data_models import Coordinate, Disambiguation
from sps_briefing.errors import LocationNotFound
from sps_briefing.services.orchestrator import BriefingOrchestrator

EXIT_BAD_INPUT = 1
EXIT_NOT_FOUND = 2
EXIT_AMBIGUOUS = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sps-briefing',
        description='Wildfire dispatch briefing for a BC community',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  sps-briefing Pemberton --fire-number K71234 --origin "Kamloops"
  sps-briefing "Fort Nelson" --origin-lat 49.28 --origin-lng -123.12
        """
    )
    parser.add_argument(
        'community',
        type=str,
        help='Destination community (e.g., "Pemberton", "Fort Nelson")'
    )
    parser.add_argument(
        '--fire-number',
        type=str,
        default=None,
        help='Incident number to single out (e.g., K71234)'
    )

    origin = parser.add_mutually_exclusive_group()
    origin.add_argument(
        '--origin',
        type=str,
        default=None,
        help='Departure point as a place name'
    )
    origin.add_argument(
        '--origin-lat',
        type=float,
        default=None,
        help='Departure latitude (requires --origin-lng)'
    )
    parser.add_argument(
        '--origin-lng',
        type=float,
        default=None,
        help='Departure longitude (requires --origin-lat)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Per-request provider timeout in seconds (default: SPS_PROVIDER_TIMEOUT or 5)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Debug logging'
    )
    return parser


def main(argv: Optional[List[str]] = None, orchestrator: Optional[BriefingOrchestrator] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if (args.origin_lat is None) != (args.origin_lng is None):
        print("Error: --origin-lat and --origin-lng must be given together", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        origin = args.origin
        if args.origin_lat is not None:
            origin = Coordinate(args.origin_lat, args.origin_lng)

        if orchestrator is None:
            settings = Settings.from_env()
            if args.timeout is not None:
                if args.timeout <= 0:
                    raise ValueError("--timeout must be positive")
                settings = dataclasses.replace(settings, provider_timeout=args.timeout)
            orchestrator = BriefingOrchestrator(settings=settings)

        result = orchestrator.build_briefing(args.community, fire_number=args.fire_number, origin=origin)
    except LocationNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if isinstance(result, Disambiguation):
        print(f"'{result.query}' ({result.target}) matches several places; be more specific:", file=sys.stderr)
        for candidate in result.candidates:
            print(f"  - {candidate.display_name}", file=sys.stderr)
        print(json.dumps(jsonable_encoder(result), indent=2))
        return EXIT_AMBIGUOUS

    print(json.dumps(jsonable_encoder(result), indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
