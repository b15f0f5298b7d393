"""Entry point for running workshopcal as a module.

Usage: python -m workshopcal --activity canvas --date 05/03 --time 14:30
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from workshopcal.config.settings import load_settings
from workshopcal.core.booking_model import BookingRecord
from workshopcal.core.delivery import DirectorySaver, open_in_browser
from workshopcal.core.device import is_mobile_user_agent
from workshopcal.core.encoder import EventEncoder
from workshopcal.error_messages import get_user_friendly_error
from workshopcal.exceptions.errors import DeliveryFailed, InvalidInput

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DELIVERY_FAILED = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workshopcal",
        description="Add an art-workshop booking to a calendar.",
    )
    parser.add_argument("--activity", required=True, help="activity type, e.g. canvas")
    parser.add_argument("--date", required=True, help="booking date as DD/MM")
    parser.add_argument("--time", required=True, help="start time as HH:MM (IST)")
    parser.add_argument("--host", help="host details")
    parser.add_argument("--participants", help="number of participants")
    parser.add_argument("--charge", help="per person charge")
    parser.add_argument("--venue", help="workshop venue")
    parser.add_argument("--notes", help="additional notes")

    device = parser.add_mutually_exclusive_group()
    device.add_argument("--user-agent", help="classify the device from a user agent string")
    device.add_argument("--mobile", action="store_true", help="treat the device as mobile")

    parser.add_argument("--output-dir", type=Path, help="where mobile .ics files are saved")
    parser.add_argument(
        "--print", dest="print_only", action="store_true",
        help="print the link or file to stdout instead of delivering it",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    settings = load_settings()
    encoder = EventEncoder(settings)
    is_mobile_like = args.mobile or is_mobile_user_agent(args.user_agent)

    try:
        record = BookingRecord.from_dict({
            "activity_type": args.activity,
            "event_date": args.date,
            "event_time": args.time,
            "host_details": args.host,
            "participants_count": args.participants,
            "per_person_charge": args.charge,
            "venue": args.venue,
            "additional_notes": args.notes,
        })

        if args.print_only:
            if is_mobile_like:
                sys.stdout.write(encoder.build_file_artifact(record))
            else:
                print(encoder.build_service_link(record))
            return EXIT_OK

        output_dir = args.output_dir or settings.download_dir or Path.cwd()
        encoder.dispatch(
            record,
            is_mobile_like=is_mobile_like,
            save_file=DirectorySaver(output_dir),
            open_url=open_in_browser,
        )
    except InvalidInput as e:
        logger.debug("Rejected booking: %s", e)
        print(get_user_friendly_error(e), file=sys.stderr)
        return EXIT_INVALID_INPUT
    except DeliveryFailed as e:
        print(get_user_friendly_error(e), file=sys.stderr)
        return EXIT_DELIVERY_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
