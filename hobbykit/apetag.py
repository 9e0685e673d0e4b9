"""Reading, writing and removing gain information kept in an APE tag of an MP3 file."""

from __future__ import annotations

import os
from dataclasses import replace
from os import PathLike

from hobbykit.apeformat import (
    FLAG_HAS_HEADER,
    FLAG_IS_HEADER,
    FOOTER_SIZE,
    ApeTagFooter,
    FileTags,
    GainTagInfo,
    read_ape_tag,
    read_id3v1_tag,
    read_lyrics3v2_tag,
)

Path = str | PathLike[str]

_FIELD_FLAGS = 0


def read_gain_tags(path: Path) -> tuple[GainTagInfo, FileTags]:
    """Read the tags at the end of ``path``.

    Gain values from an APE tag go into the returned info; the APE tag's other
    fields and any ID3v1 or Lyrics3 v2 tags are kept, unprocessed, in the
    returned file tags. OSError propagates if the file cannot be opened.
    """
    info = GainTagInfo()
    tags = FileTags()
    with open(path, "rb") as stream:
        offset = stream.seek(0, os.SEEK_END)
        while True:
            previous = offset
            found_ape = read_ape_tag(stream, offset, info)
            if found_ape is not None:
                tags.ape_tag, offset = found_ape
            lyrics, id3, offset = read_lyrics3v2_tag(stream, offset)
            if id3 is not None:
                tags.id3v1_tag = id3
            if lyrics is not None:
                tags.lyrics3_tag = lyrics
            found_id3 = read_id3v1_tag(stream, offset)
            if found_id3 is not None:
                tags.id3v1_tag, offset = found_id3
            if offset == previous:
                break
    tags.tag_offset = offset
    return info, tags


def _field(name: str, value: str) -> bytes:
    data = value.encode("ascii")
    return (
        len(data).to_bytes(4, "little")
        + _FIELD_FLAGS.to_bytes(4, "little")
        + name.encode("ascii")
        + b"\0"
        + data
    )


def _gain_fields(info: GainTagInfo) -> list[bytes]:
    """Encode the gain values present in ``info`` in the fixed field layout."""
    fields = []
    if info.min_max_gain is not None:
        low, high = (v & 0xFF for v in info.min_max_gain)
        fields.append(_field("MP3GAIN_MINMAX", f"{low:03d}"[:3] + "," + f"{high:03d}"[:3]))
    if info.album_min_max_gain is not None:
        low, high = (v & 0xFF for v in info.album_min_max_gain)
        fields.append(
            _field("MP3GAIN_ALBUM_MINMAX", f"{low:03d}"[:3] + "," + f"{high:03d}"[:3])
        )
    if info.undo is not None:
        left, right, wrap = info.undo
        fields.append(
            _field(
                "MP3GAIN_UNDO",
                f"{left:+04d}"[:4] + "," + f"{right:+04d}"[:4] + "," + ("W" if wrap else "N"),
            )
        )
    if info.track_gain is not None:
        fields.append(_field("REPLAYGAIN_TRACK_GAIN", f"{info.track_gain:<+9.6f}"[:9] + " dB"))
    if info.track_peak is not None:
        fields.append(_field("REPLAYGAIN_TRACK_PEAK", f"{info.track_peak:<8.6f}"[:8]))
    if info.album_gain is not None:
        fields.append(_field("REPLAYGAIN_ALBUM_GAIN", f"{info.album_gain:<+9.6f}"[:9] + " dB"))
    if info.album_peak is not None:
        fields.append(_field("REPLAYGAIN_ALBUM_PEAK", f"{info.album_peak:<8.6f}"[:8]))
    return fields


def write_gain_tags(
    path: Path, info: GainTagInfo, file_tags: FileTags, preserve_timestamp: bool = False
) -> None:
    """Rewrite the APE tag of ``path`` with the gain values in ``info``.

    ``file_tags`` must come from :func:`read_gain_tags` on the same file. The
    new tag always carries a header; non-gain fields of the old tag are kept,
    and Lyrics3 or ID3v1 tags are written back after it.
    """
    stamp = os.stat(path) if preserve_timestamp else None

    gain_fields = _gain_fields(info)
    tag_count = len(gain_fields)
    ape = file_tags.ape_tag
    other = ape.other_fields if ape is not None else b""
    if ape is not None:
        tag_count += ape.footer.tag_count
    field_data = other + b"".join(gain_fields)
    new_length = 2 * FOOTER_SIZE + len(field_data)
    body_length = new_length - FOOTER_SIZE

    if ape is not None:
        if ape.original_size > new_length:
            os.truncate(path, file_tags.tag_offset)
        footer = replace(ape.footer, length=body_length, tag_count=tag_count)
        if ape.header is not None:
            header = replace(ape.header, length=body_length, tag_count=tag_count)
        else:
            header = ApeTagFooter(
                version=2000,
                length=body_length,
                tag_count=tag_count,
                flags=FLAG_HAS_HEADER | FLAG_IS_HEADER,
            )
            footer = replace(footer, flags=footer.flags | FLAG_HAS_HEADER)
    else:
        header = ApeTagFooter(
            version=2000,
            length=body_length,
            tag_count=tag_count,
            flags=FLAG_HAS_HEADER | FLAG_IS_HEADER,
        )
        footer = ApeTagFooter(
            version=2000, length=body_length, tag_count=tag_count, flags=FLAG_HAS_HEADER
        )

    with open(path, "r+b") as stream:
        stream.seek(file_tags.tag_offset)
        if tag_count > 0:
            stream.write(header.pack())
            stream.write(field_data)
            stream.write(footer.pack())
        # a Lyrics3 block already contains the ID3v1 tag
        if file_tags.lyrics3_tag:
            stream.write(file_tags.lyrics3_tag)
        elif file_tags.id3v1_tag:
            stream.write(file_tags.id3v1_tag)

    if stamp is not None:
        os.utime(path, ns=(stamp.st_atime_ns, stamp.st_mtime_ns))


def remove_gain_tags(path: Path, preserve_timestamp: bool = False) -> bool:
    """Strip all gain values from the APE tag of ``path``.

    Returns True when the file held gain values and was rewritten.
    """
    info, file_tags = read_gain_tags(path)
    if info.has_gain_data():
        info.dirty = True
    info.clear()
    if info.dirty:
        write_gain_tags(path, info, file_tags, preserve_timestamp)
    return info.dirty