"""
Hex dump formatting

Produces rows of the form

    00000000  76 61 6c 75 65 76 61 6c 75 65 76 61 6c 75 65 76   valuevaluevaluev

with 16 bytes per row. Bytes can be grouped (group_size), in which case
hex digits of a group are written together and the ASCII column is split
the same way.
"""

from typing import List, Union

from hierlog.core.severity import Severity

BYTES_PER_ROW = 16
INDENT_UNIT = "  "
NON_PRINTABLE = "."
HEXDUMP_LEVEL = Severity.DEBUG

BufferLike = Union[bytes, bytearray, memoryview, str]


def _printable(byte: int) -> str:
    if 0x20 <= byte <= 0x7E:
        return chr(byte)
    return NON_PRINTABLE


def _format_row(row: bytes, offset: int, prefix: str, group_size: int) -> str:
    hex_field = []
    ascii_field = []
    for i in range(BYTES_PER_ROW):
        if i < len(row):
            hex_field.append(f"{row[i]:02x}")
            ascii_field.append(_printable(row[i]))
        else:
            # keep short rows aligned with full ones
            hex_field.append("  ")
            ascii_field.append(" ")

        if (i + 1) % group_size == 0:
            hex_field.append(" ")
            if group_size > 1:
                ascii_field.append(" ")

    return f"{prefix}{offset:08x}  {''.join(hex_field)}  {''.join(ascii_field)}"


def format_hexdump(
    data: BufferLike,
    length: int,
    indent: int = 0,
    group_size: int = 1
) -> List[str]:
    """
    Format a hex dump of ``data``.

    Args:
        data: Buffer to dump (str is UTF-8 encoded first)
        length: Number of group_size-byte elements to dump
        indent: Indentation level, two spaces per level
        group_size: Bytes per hex group

    Returns:
        List of rows, empty when there is nothing to dump

    Raises:
        ValueError: If group_size < 1 or length/indent is negative
    """
    if group_size < 1:
        raise ValueError("group_size must be at least 1")
    if length < 0:
        raise ValueError("length cannot be negative")
    if indent < 0:
        raise ValueError("indent cannot be negative")

    if isinstance(data, str):
        data = data.encode("utf-8")
    chunk = bytes(data[:length * group_size])

    prefix = INDENT_UNIT * indent
    return [
        _format_row(chunk[offset:offset + BYTES_PER_ROW], offset, prefix, group_size)
        for offset in range(0, len(chunk), BYTES_PER_ROW)
    ]


def log_hexdump_func(
    logger,
    log_id: int,
    data: BufferLike,
    length: int,
    indent: int = 0,
    group_size: int = 1
) -> None:
    """
    Log a hex dump of ``data`` through ``logger`` as a single message.

    Nothing is logged when the dump is empty.
    """
    if not logger.need_log(HEXDUMP_LEVEL):
        return

    rows = format_hexdump(data, length, indent, group_size)
    if not rows:
        return
    logger.log(HEXDUMP_LEVEL, log_id, "".join(rows))
