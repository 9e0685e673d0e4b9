"""Tell whether a Windows executable is built for 32 or 64 bit machines."""

from __future__ import annotations

import sys
from enum import Enum
from os import PathLike
from typing import BinaryIO

_PE_POINTER_OFFSET = 0x3C
_READ_SIZE = 6


class ExecutableKind(Enum):
    BIT32 = "32 bit executable"
    BIT64 = "64 bit executable"
    UNKNOWN = "unknown executable type"
    INVALID = "not a valid windows executable"


_MACHINES = {
    b"\x4c\x01": ExecutableKind.BIT32,
    b"\x64\x86": ExecutableKind.BIT64,
}


def identify(stream: BinaryIO) -> ExecutableKind:
    """Inspect the MZ and PE headers of a seekable binary stream."""
    if stream.read(_READ_SIZE)[:2] != b"MZ":
        return ExecutableKind.INVALID
    stream.seek(_PE_POINTER_OFFSET)
    pointer = stream.read(_READ_SIZE)
    if len(pointer) < 4:
        return ExecutableKind.INVALID
    stream.seek(int.from_bytes(pointer[:4], "little"))
    header = stream.read(_READ_SIZE)
    if header[:4] != b"PE\x00\x00":
        return ExecutableKind.INVALID
    return _MACHINES.get(header[4:6], ExecutableKind.UNKNOWN)


def identify_file(path: str | PathLike[str]) -> ExecutableKind:
    """Open ``path`` and identify it; OSError propagates if it cannot be opened."""
    with open(path, "rb") as stream:
        return identify(stream)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: peid [executable file name]")
        return 0
    try:
        kind = identify_file(args[0])
    except OSError:
        print(f"unable to load {args[0]}")
        return 0
    print(kind.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())