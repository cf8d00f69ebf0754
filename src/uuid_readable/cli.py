"""Command line entrypoint (console-script: ``uuid-readable``)."""

import argparse
import logging
import sys
import uuid

from . import __version__
from .errors import ReadableError
from .profile import get_profile, list_profiles
from .readable import decode, encode

log = logging.getLogger(__name__)


def _uuid_arg(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid UUID: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="uuid-readable",
        description="Turn UUIDs into easy to remember sentences and back.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--strict",
        action="store_true",
        help="Also check connective words when decoding",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print a sentence for a UUID (random if omitted)")
    gen.add_argument("uuid", nargs="?", type=_uuid_arg)
    gen.add_argument("--profile", choices=list_profiles(), default="normal")

    sh = sub.add_parser("short", help="Print a short, lossy sentence (same as --profile short)")
    sh.add_argument("uuid", nargs="?", type=_uuid_arg)

    inv = sub.add_parser("inverse", help="Print the UUID a long sentence was derived from")
    inv.add_argument("sentence", nargs="+", help="The sentence, quoted or as separate words")

    sub.add_parser("profiles", help="List profiles and their sentence templates")

    return p


def _print_profiles() -> None:
    for name in list_profiles():
        profile = get_profile(name)
        kind = "reversible" if profile.invertible else "lossy"
        print(f"{name}\t{profile.bit_length} bits\t{kind}\t{profile.describe()}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.command in ("generate", "short"):
            profile = "short" if args.command == "short" else args.profile
            token = args.uuid if args.uuid is not None else uuid.uuid4()
            print(encode(token, profile))
        elif args.command == "inverse":
            sentence = " ".join(args.sentence)
            print(decode(sentence, strict=True if args.strict else None))
        elif args.command == "profiles":
            _print_profiles()
    except ReadableError as e:
        if args.verbose:
            log.exception("command failed")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
