"""Report the byte order of the running machine."""

from __future__ import annotations

import struct


def byte_order() -> str:
    """Return "little" or "big" according to how a native int is laid out."""
    return "little" if struct.pack("=i", 1)[0] == 1 else "big"


def main(argv: list[str] | None = None) -> int:
    print(f"Your system uses {byte_order()} endian byte order!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())