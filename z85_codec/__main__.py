import logging
import os
import sys

from .codec import Z85Exception, decode, encode

LOGGER = logging.getLogger(__name__)


def read_input(args) -> bytes:
    if args:
        with open(args[0], "rb") as fh:
            return fh.read()
    return sys.stdin.buffer.read()


def run_encode(args) -> int:
    plain = read_input(args)
    encoded = encode(plain)
    LOGGER.debug("encoded %d bytes to %d symbols", len(plain), len(encoded))
    sys.stdout.buffer.write(encoded + b"\n")
    sys.stdout.flush()
    return 0


def run_decode(args) -> int:
    encoded = read_input(args).strip()
    try:
        plain = decode(encoded)
    except Z85Exception as ex:
        print(ex, file=sys.stderr)
        return 1
    LOGGER.debug("decoded %d symbols to %d bytes", len(encoded), len(plain))
    sys.stdout.buffer.write(plain)
    sys.stdout.flush()
    return 0


ACTIONS = {"encode": run_encode, "decode": run_decode}


def log_level() -> int:
    name = os.environ.get("Z85_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise SystemExit(f"Unsupported log level {name}")
    return level


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=log_level())
    if not argv:
        raise SystemExit("Missing required arguments (action)")
    action = argv[0]
    if action not in ACTIONS:
        raise SystemExit(f"Unsupported action {action}")
    if len(argv) > 2:
        raise SystemExit(f"Unexpected arguments for {action} (path)")
    return ACTIONS[action](argv[1:])


if __name__ == "__main__":
    sys.exit(main())
