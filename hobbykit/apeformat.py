"""Parsing of the tags found at the end of MP3 files: APE, Lyrics3 v2 and ID3v1."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass, replace
from typing import BinaryIO

FOOTER_SIZE = 32
ID3V1_SIZE = 128
APE_PREAMBLE = b"APETAGEX"
FLAG_HAS_HEADER = 1 << 31
FLAG_IS_HEADER = 1 << 29
MAX_FIELD_SIZE = 1024 * 1024

_ID3V1_MARKER = b"TAG"
_LYRICS3_FOOTER_SIZE = 15
_LYRICS3_ID = b"LYRICS200"
_LYRICS3_BEGIN = b"LYRICSBEGIN"
_SUPPORTED_VERSIONS = (1000, 2000)

_FOOTER = struct.Struct("<8sIIII8s")
_FIELD_HEAD = struct.Struct("<II")

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class TagError(Exception):
    """Raised when tag data is structurally impossible to use."""


@dataclass
class GainTagInfo:
    """Gain values stored in an APE tag; ``None`` marks a value that is absent."""

    track_gain: float | None = None
    track_peak: float | None = None
    album_gain: float | None = None
    album_peak: float | None = None
    undo: tuple[int, int, bool] | None = None
    min_max_gain: tuple[int, int] | None = None
    album_min_max_gain: tuple[int, int] | None = None
    dirty: bool = False
    recalc: bool = False

    def has_gain_data(self) -> bool:
        """True when any gain related value is present."""
        return any(
            value is not None
            for value in (
                self.track_gain,
                self.track_peak,
                self.album_gain,
                self.album_peak,
                self.undo,
                self.min_max_gain,
                self.album_min_max_gain,
            )
        )

    def clear(self) -> None:
        """Drop every gain related value; the dirty and recalc flags stay."""
        self.track_gain = None
        self.track_peak = None
        self.album_gain = None
        self.album_peak = None
        self.undo = None
        self.min_max_gain = None
        self.album_min_max_gain = None


@dataclass(frozen=True)
class ApeTagFooter:
    """The 32 byte block that closes, and optionally opens, an APE tag."""

    version: int = 2000
    length: int = FOOTER_SIZE
    tag_count: int = 0
    flags: int = 0
    ident: bytes = APE_PREAMBLE
    reserved: bytes = bytes(8)

    @classmethod
    def parse(cls, data: bytes) -> ApeTagFooter:
        if len(data) != FOOTER_SIZE:
            raise TagError(f"APE footer needs {FOOTER_SIZE} bytes, got {len(data)}")
        ident, version, length, tag_count, flags, reserved = _FOOTER.unpack(data)
        return cls(version, length, tag_count, flags, ident, reserved)

    def pack(self) -> bytes:
        return _FOOTER.pack(
            self.ident, self.version, self.length, self.tag_count, self.flags, self.reserved
        )

    @property
    def has_header(self) -> bool:
        return bool(self.flags & FLAG_HAS_HEADER)


@dataclass
class ApeTag:
    """An APE tag with its gain fields removed; ``other_fields`` keeps the rest raw."""

    footer: ApeTagFooter
    header: ApeTagFooter | None = None
    other_fields: bytes = b""
    original_size: int = 0


@dataclass
class FileTags:
    """Tags found at the end of a file, and where the audio data ends."""

    tag_offset: int = 0
    ape_tag: ApeTag | None = None
    lyrics3_tag: bytes | None = None
    id3v1_tag: bytes | None = None


def _read_at(stream: BinaryIO, position: int, size: int) -> bytes | None:
    """Read exactly ``size`` bytes at ``position``, or None if that is impossible."""
    if position < 0 or size < 0:
        return None
    stream.seek(position)
    data = stream.read(size)
    return data if len(data) == size else None


def _c_text(value: bytes) -> str:
    return value.split(b"\0", 1)[0].decode("latin-1")


def _atof(value: bytes) -> float:
    match = _FLOAT_PREFIX.match(_c_text(value))
    return float(match.group(1)) if match else 0.0


def _atoi(value: bytes) -> int:
    match = _INT_PREFIX.match(_c_text(value))
    return int(match.group(1)) if match else 0


def _lyrics3_number(digits: bytes) -> int:
    return sum((byte - 0x30) * 10 ** (len(digits) - 1 - i) for i, byte in enumerate(digits))


def read_id3v1_tag(stream: BinaryIO, offset: int) -> tuple[bytes, int] | None:
    """Look for a 128 byte ID3v1 tag ending at ``offset``.

    Returns the tag and the offset where it starts, or None.
    """
    if offset < ID3V1_SIZE:
        return None
    data = _read_at(stream, offset - ID3V1_SIZE, ID3V1_SIZE)
    if data is None or not data.startswith(_ID3V1_MARKER):
        return None
    return data, offset - ID3V1_SIZE


def read_lyrics3v2_tag(
    stream: BinaryIO, offset: int
) -> tuple[bytes | None, bytes | None, int]:
    """Look for a Lyrics3 v2 tag followed by an ID3v1 tag ending at ``offset``.

    Returns (lyrics block including the ID3v1 tag, ID3v1 tag, new offset).
    The ID3v1 tag is reported even when no Lyrics3 tag precedes it; the
    offset only moves when the Lyrics3 tag is found.
    """
    if offset < ID3V1_SIZE:
        return None, None, offset
    id3 = _read_at(stream, offset - ID3V1_SIZE, ID3V1_SIZE)
    if id3 is None or not id3.startswith(_ID3V1_MARKER):
        return None, None, offset
    footer = _read_at(stream, offset - ID3V1_SIZE - _LYRICS3_FOOTER_SIZE, _LYRICS3_FOOTER_SIZE)
    if footer is None or footer[6:] != _LYRICS3_ID:
        return None, id3, offset
    size = _lyrics3_number(footer[:6])
    begin = _read_at(
        stream, offset - ID3V1_SIZE - _LYRICS3_FOOTER_SIZE - size, len(_LYRICS3_BEGIN)
    )
    if begin != _LYRICS3_BEGIN:
        return None, id3, offset
    total = ID3V1_SIZE + size + _LYRICS3_FOOTER_SIZE
    start = offset - total
    stream.seek(start)
    return stream.read(total), id3, start


def _apply_field(info: GainTagInfo, name: bytes, value: bytes) -> bool:
    """Store a gain field in ``info``; False when the field is not a gain field."""
    key = name.decode("latin-1").upper()
    if key == "REPLAYGAIN_TRACK_GAIN":
        info.track_gain = _atof(value)
    elif key == "REPLAYGAIN_TRACK_PEAK":
        info.track_peak = _atof(value)
    elif key == "REPLAYGAIN_ALBUM_GAIN":
        info.album_gain = _atof(value)
    elif key == "REPLAYGAIN_ALBUM_PEAK":
        info.album_peak = _atof(value)
    elif key == "MP3GAIN_UNDO":
        # value looks like "+003,+003,W"
        info.undo = (_atoi(value[0:4]), _atoi(value[5:9]), value[10:11] in (b"w", b"W"))
    elif key == "MP3GAIN_MINMAX":
        # value looks like "001,153"
        info.min_max_gain = (_atoi(value[0:3]) & 0xFF, _atoi(value[4:7]) & 0xFF)
    elif key == "MP3GAIN_ALBUM_MINMAX":
        info.album_min_max_gain = (_atoi(value[0:3]) & 0xFF, _atoi(value[4:7]) & 0xFF)
    else:
        return False
    return True


def read_ape_tag(
    stream: BinaryIO, offset: int, info: GainTagInfo
) -> tuple[ApeTag, int] | None:
    """Look for an APE v1/v2 tag ending at ``offset``.

    Gain fields are stored in ``info``; all other fields are kept raw in the
    returned tag, whose footer and header are rewritten to describe only
    those. Returns the tag and the offset where it starts, or None.
    """
    if offset < FOOTER_SIZE:
        return None
    raw = _read_at(stream, offset - FOOTER_SIZE, FOOTER_SIZE)
    if raw is None:
        return None
    footer = ApeTagFooter.parse(raw)
    if footer.ident != APE_PREAMBLE or footer.version not in _SUPPORTED_VERSIONS:
        return None
    if footer.length < FOOTER_SIZE:
        return None
    body = _read_at(stream, offset - footer.length, footer.length - FOOTER_SIZE)
    if body is None:
        return None

    other = bytearray()
    other_count = 0
    remaining_count = footer.tag_count
    position = 0
    end = len(body)
    while position < end and remaining_count > 0:
        remaining_count -= 1
        if end - position < _FIELD_HEAD.size:
            break
        value_size, _ = _FIELD_HEAD.unpack_from(body, position)
        field_start = position
        position += _FIELD_HEAD.size
        remaining = end - position
        nul = body.find(b"\0", position, end)
        name_size = remaining if nul < 0 else nul - position
        if (
            name_size >= remaining
            or value_size > MAX_FIELD_SIZE
            or name_size + 1 + value_size > remaining
        ):
            break
        name = body[position:position + name_size]
        value_start = position + name_size + 1
        value = body[value_start:value_start + value_size]
        field_end = value_start + value_size
        if not _apply_field(info, name, value):
            other += body[field_start:field_end]
            other_count += 1
        position = field_end

    new_offset = offset - footer.length
    original_size = footer.length
    header = None
    if footer.has_header:
        new_offset -= FOOTER_SIZE
        header_raw = _read_at(stream, new_offset, FOOTER_SIZE)
        if header_raw is None:
            raise TagError("APE tag announces a header that is not there")
        header = ApeTagFooter.parse(header_raw)
        original_size += FOOTER_SIZE

    if other_count != footer.tag_count:
        length = FOOTER_SIZE + len(other)
        footer = replace(footer, length=length, tag_count=other_count)
        if header is not None:
            header = replace(header, length=length, tag_count=other_count)

    tag = ApeTag(footer=footer, header=header, other_fields=bytes(other),
                 original_size=original_size)
    return tag, new_offset