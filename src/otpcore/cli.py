"""Command-line interface for otpcore."""

import argparse
import logging
import sys
import time
from typing import List, Optional

from otpcore import config
from otpcore.errors import OTPError
from otpcore.hotp import check_hotp, generate_hotp_string
from otpcore.log import get_logger
from otpcore.totp import check_totp, generate_totp_string


logger = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for integers that must not be negative."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    try:
        for counter in range(args.counter, args.counter + args.count):
            print(generate_hotp_string(counter, args.secret, args.digits))
        return 0
    except OTPError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    try:
        if args.watch is None:
            print(generate_totp_string(args.secret, args.period, args.digits))
            return 0

        # One line per second
        for i in range(args.watch + 1):
            code = generate_totp_string(args.secret, args.period, args.digits)
            print(f"{code} ({i})", flush=True)
            if i < args.watch:
                time.sleep(1)
        return 0
    except OTPError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def check_command(args: argparse.Namespace) -> int:
    """Handle the check command."""
    try:
        if args.kind == "hotp":
            offset = config.DEFAULT_HOTP_OFFSET if args.offset is None else args.offset
            valid = check_hotp(args.counter, args.secret, offset, args.code, args.digits)
        else:
            offset = config.DEFAULT_TOTP_OFFSET if args.offset is None else args.offset
            valid = check_totp(args.secret, offset, args.code, args.period, args.digits)
    except OTPError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    logger.debug("%s check with offset %d: %s", args.kind, offset, valid)
    print("valid" if valid else "invalid")
    return 0 if valid else 1


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--secret",
        "-s",
        default=None,
        help=f"Base-32 secret (default: ${config.SECRET_ENV})",
    )
    parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=config.DEFAULT_DIGITS,
        choices=[6, 7, 8],
        help=f"Number of digits in the code (default: {config.DEFAULT_DIGITS})",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="otpcore",
        description="HOTP/TOTP code generator and checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        aliases=["h"],
        help="Print HOTP codes for a range of counters",
    )
    _add_common_arguments(hotp_parser)
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        default=0,
        help="First counter value (default: 0)",
    )
    hotp_parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=1,
        help="Number of consecutive codes to print (default: 1)",
    )

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        aliases=["t"],
        help="Print the current TOTP code",
    )
    _add_common_arguments(totp_parser)
    totp_parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=config.DEFAULT_PERIOD,
        help=f"Seconds each code is valid for (default: {config.DEFAULT_PERIOD})",
    )
    totp_parser.add_argument(
        "--watch",
        "-w",
        type=non_negative_int,
        default=None,
        metavar="SECONDS",
        help="Keep printing the code once a second for SECONDS seconds",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        aliases=["verify"],
        help="Check a HOTP or TOTP code",
    )
    check_parser.add_argument("kind", choices=["hotp", "totp"], help="Code type")
    check_parser.add_argument("code", help="The code to check")
    _add_common_arguments(check_parser)
    check_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        default=0,
        help="Expected HOTP counter (default: 0)",
    )
    check_parser.add_argument(
        "--offset",
        "-o",
        type=int,
        default=None,
        help=(
            "Accepted drift: counters for hotp "
            f"(default: {config.DEFAULT_HOTP_OFFSET}), "
            f"steps for totp (default: {config.DEFAULT_TOTP_OFFSET})"
        ),
    )
    check_parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=config.DEFAULT_PERIOD,
        help=f"TOTP step in seconds (default: {config.DEFAULT_PERIOD})",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    get_logger("otpcore", logging.DEBUG if args.verbose else None)

    args.secret = args.secret or config.getenv(config.SECRET_ENV)
    if not args.secret:
        parser.error(f"a secret is required (use --secret or set {config.SECRET_ENV})")

    if args.command in ("hotp", "h"):
        return hotp_command(args)
    elif args.command in ("totp", "t"):
        return totp_command(args)
    elif args.command in ("check", "verify"):
        return check_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
