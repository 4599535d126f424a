"""Reading RIFF/WAVE audio files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from pathlib import Path
from typing import BinaryIO, ClassVar, Iterator, Union


class AudioChannel(IntEnum):
    MONO = 1
    STEREO = 2


class AudioSampleRate(IntEnum):
    SR_8000 = 8000
    SR_11025 = 11025
    SR_22050 = 22050
    SR_44100 = 44100
    SR_48000 = 48000


class AudioSampleFormat(IntEnum):
    PCM_8 = 8
    PCM_16 = 16
    PCM_32 = 32


class WaveFormatTag(IntEnum):
    PCM = 0x1
    ADPCM = 0x2
    IEEE_FLOAT = 0x3
    ALAW = 0x6
    MULAW = 0x7
    DVI_ADPCM = 0x11
    EXTENSIBLE = 0xFFFE


class ChunkType(Enum):
    RIFF = auto()
    FMT = auto()
    DATA = auto()
    UNKNOWN = auto()


class WaveFormatError(ValueError):
    """Raised when a file is not a WAVE file this reader accepts."""


@dataclass(frozen=True)
class ChunkHeader:
    """Four-character chunk id and the size of the chunk body."""

    id: bytes
    size: int


@dataclass
class WavFmt:
    """Contents of the ``fmt `` chunk."""

    BASE_SIZE: ClassVar[int] = 16
    STANDARD_EXTENDED_SIZE: ClassVar[int] = 22
    FULL_SIZE: ClassVar[int] = 40

    format_tag: int = 0
    channels: int = 0
    sample_rate: int = 0
    avg_bytes_per_sec: int = 0
    block_align: int = 0
    bits_per_sample: int = 0
    extended_size: int = 0
    valid_bits_per_sample: int = 0
    channel_mask: int = 0
    sub_format: bytes = bytes(16)


_RIFF_HEADER = struct.Struct("<4sI4s")
_CHUNK_HEADER = struct.Struct("<4sI")
_FMT_BASE = struct.Struct("<HHIIHH")
_FMT_EXTENSION = struct.Struct("<HHI16s")

_CHUNK_TYPES = {
    b"RIFF": ChunkType.RIFF,
    b"fmt ": ChunkType.FMT,
    b"data": ChunkType.DATA,
}


def get_chunk_type(chunk_id: bytes) -> ChunkType:
    """Classify a four-byte chunk id."""
    return _CHUNK_TYPES.get(bytes(chunk_id), ChunkType.UNKNOWN)


def remaining_size(stream: BinaryIO) -> int:
    """Number of bytes between the current position and the end of ``stream``."""
    pos = stream.tell()
    end = stream.seek(0, os.SEEK_END)
    stream.seek(pos)
    return end - pos


def _read_riff(stream: BinaryIO) -> None:
    raw = stream.read(_RIFF_HEADER.size)
    if len(raw) < _RIFF_HEADER.size:
        raise WaveFormatError("file too short for a RIFF header")
    riff_id, size, form = _RIFF_HEADER.unpack(raw)
    if riff_id != b"RIFF":
        raise WaveFormatError("missing RIFF signature")
    if form != b"WAVE":
        raise WaveFormatError("RIFF form is not WAVE")
    if remaining_size(stream) + len(form) != size:
        raise WaveFormatError("RIFF size does not match file length")


def _chunks(stream: BinaryIO) -> Iterator[ChunkHeader]:
    """Yield chunk headers until the data runs out or a chunk is truncated."""
    while True:
        raw = stream.read(_CHUNK_HEADER.size)
        if len(raw) < _CHUNK_HEADER.size:
            return
        header = ChunkHeader(*_CHUNK_HEADER.unpack(raw))
        if remaining_size(stream) < header.size:
            return
        yield header


def _read_fmt(stream: BinaryIO, header: ChunkHeader) -> WavFmt:
    if header.size not in (WavFmt.BASE_SIZE, WavFmt.FULL_SIZE):
        raise WaveFormatError(f"unsupported fmt chunk size {header.size}")
    raw = stream.read(WavFmt.BASE_SIZE)
    if len(raw) < WavFmt.BASE_SIZE:
        raise WaveFormatError("truncated fmt chunk")
    fmt = WavFmt(*_FMT_BASE.unpack(raw))
    if header.size == WavFmt.FULL_SIZE:
        if fmt.format_tag != WaveFormatTag.PCM:
            raise WaveFormatError("extended fmt chunk must use the PCM tag")
        raw = stream.read(_FMT_EXTENSION.size)
        if len(raw) < _FMT_EXTENSION.size:
            raise WaveFormatError("truncated fmt extension")
        (
            fmt.extended_size,
            fmt.valid_bits_per_sample,
            fmt.channel_mask,
            fmt.sub_format,
        ) = _FMT_EXTENSION.unpack(raw)
        if fmt.extended_size != WavFmt.STANDARD_EXTENDED_SIZE:
            raise WaveFormatError(f"unexpected extension size {fmt.extended_size}")
    return fmt


class WaveReader:
    """Loads the format description and raw sample bytes of a WAVE file."""

    def __init__(self) -> None:
        self.fmt = WavFmt()
        self.raw_data = b""

    def load(self, path: Union[str, os.PathLike]) -> None:
        """Read ``path``; unknown chunks are skipped."""
        with Path(path).open("rb") as stream:
            _read_riff(stream)
            for header in _chunks(stream):
                kind = get_chunk_type(header.id)
                if kind is ChunkType.FMT:
                    self.fmt = _read_fmt(stream, header)
                elif kind is ChunkType.DATA:
                    self.raw_data = stream.read(header.size)
                else:
                    stream.seek(header.size, os.SEEK_CUR)