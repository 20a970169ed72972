"""COBS (Consistent Overhead Byte Stuffing) encoder/decoder.

Groups carry at most 253 data bytes. A group header of 254 marks a group
closed by that cap: the decoder restores no zero after it. Any smaller header
means the group ended on a zero, which is restored unless it is the last
group of the frame. Implementations using the 254-byte / 0xFF convention do
not interoperate with this one.
"""

import logging

logger = logging.getLogger(__name__)

DELIMITER = 0x00
MAX_GROUP_LENGTH = 253
FULL_GROUP_CODE = MAX_GROUP_LENGTH + 1


class CobsDecodeError(ValueError):
    pass


def encode(data: bytes) -> bytes:
    """Encode data using COBS and append the 0x00 frame delimiter.

    Algorithm:
    - Walk the input, collecting runs of non-zero bytes, with a sentinel zero
      implied after the last byte.
    - Each run is preceded by a code byte: code = len(run) + 1.
    - If the run ends because a zero was found, that zero is implicit
      (reconstructed during decode) and consumed.
    - If the run reaches 253 bytes without hitting a zero, emit code 254
      followed by the 253 bytes, and continue WITHOUT consuming a zero.
    """
    output = bytearray()
    idx = 0
    length = len(data)

    while True:
        run_start = idx
        while idx < length and data[idx] != 0 and (idx - run_start) < MAX_GROUP_LENGTH:
            idx += 1

        run_length = idx - run_start
        output.append(run_length + 1)
        output.extend(data[run_start:idx])

        if run_length == MAX_GROUP_LENGTH:
            # Full group, the next group starts right here
            continue
        if idx >= length:
            # Group closed by the sentinel zero
            break
        idx += 1  # skip the zero

    output.append(DELIMITER)
    return bytes(output)


def max_encoded_length(length: int) -> int:
    """Worst-case size of ``encode()`` output for a payload of ``length`` bytes."""
    if length < 0:
        raise ValueError(f"Payload length must be non-negative, got {length}")
    return length + length // MAX_GROUP_LENGTH + 2


def decode_frame(frame: bytes, strict: bool = False) -> bytes:
    """Decode a single COBS frame. Input should NOT include the 0x00 delimiter.

    Walks the chain of group headers and copies the bytes between them into a
    new buffer, restoring a zero after every group whose code is below 254.

    Raises CobsDecodeError on empty frames and embedded zeros. A header that
    points past the end of the frame raises in strict mode; otherwise the
    walk stops there and the remaining bytes are copied as-is.
    """
    if not frame:
        raise CobsDecodeError("Empty COBS frame")

    output = bytearray()
    idx = 0
    length = len(frame)

    while idx < length:
        code = frame[idx]
        if code == 0:
            raise CobsDecodeError(f"Unexpected zero byte at offset {idx}")

        end = idx + code
        if end > length:
            if strict:
                raise CobsDecodeError(
                    f"COBS frame truncated: code {code} at offset {idx} "
                    f"needs {end} bytes, frame has {length}"
                )
            logger.warning(
                "Truncated COBS frame: code %d at offset %d overruns %d-byte frame",
                code, idx, length,
            )
            output.extend(frame[idx + 1:])
            break

        output.extend(frame[idx + 1:end])
        idx = end

        # Restore the zero this group ended on, unless it was the last group
        if code < FULL_GROUP_CODE and idx < length:
            output.append(0)

    return bytes(output)


def decode(stream: bytes, strict: bool = False) -> list[bytes]:
    """Decode a stream of one or more zero-delimited COBS frames.

    Returns one payload per frame, in stream order. Empty segments between
    delimiters are skipped. Bytes after the last delimiter are decoded as a
    final packet unless ``strict`` is set, in which case they raise
    CobsDecodeError.
    """
    segments = bytes(stream).split(bytes([DELIMITER]))
    # split() always yields the segment after the last delimiter
    tail = segments.pop()
    if tail:
        if strict:
            raise CobsDecodeError(
                f"Unterminated COBS frame: {len(tail)} trailing bytes without delimiter"
            )
        logger.warning("Decoding %d trailing bytes without delimiter", len(tail))
        segments.append(tail)

    return [decode_frame(segment, strict=strict) for segment in segments if segment]
