"""Entry point for `python -m cobsframe`.

Encodes stdin into one COBS frame, or decodes a stream of frames from stdin
into one hex line per packet.
"""

import sys

import structlog

from cobsframe.cobs import CobsDecodeError, decode, encode
from cobsframe.config import Settings
from cobsframe.logging_config import configure_logging

logger = structlog.get_logger()

USAGE = "Usage: python -m cobsframe [encode|decode]"


def run_encode(settings: Settings) -> int:
    data = sys.stdin.buffer.read()
    frame = encode(data)
    logger.info("frame encoded", payload_size=len(data), frame_size=len(frame))

    if settings.IO_FORMAT == "hex":
        sys.stdout.write(frame.hex() + "\n")
        sys.stdout.flush()
    else:
        sys.stdout.buffer.write(frame)
        sys.stdout.buffer.flush()
    return 0


def run_decode(settings: Settings) -> int:
    stream = sys.stdin.buffer.read()

    if settings.IO_FORMAT == "hex":
        try:
            stream = bytes.fromhex(stream.decode("ascii"))
        except ValueError as exc:
            # UnicodeDecodeError is a ValueError too
            logger.error("invalid hex input", error=str(exc))
            return 2

    try:
        packets = decode(stream, strict=settings.STRICT_DECODE)
    except CobsDecodeError as exc:
        logger.error("decode failed", error=str(exc), stream_size=len(stream))
        return 2

    for packet in packets:
        sys.stdout.write(packet.hex() + "\n")
    sys.stdout.flush()

    logger.info("stream decoded", stream_size=len(stream), packets=len(packets))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    command = argv[0] if argv else None

    settings = Settings()
    configure_logging(settings.SERVICE_NAME, settings.LOG_LEVEL, stream=sys.stderr)

    if command == "encode":
        return run_encode(settings)
    elif command == "decode":
        return run_decode(settings)

    if command is None:
        print("Missing command.", file=sys.stderr)
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
    print(USAGE, file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
