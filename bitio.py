"""
File collaborators for the Huffman codec.

Bit file layout: data bits packed MSB-first into bytes, the last byte padded
with zeros, then one trailer byte holding how many bits of the last data byte
are real (0 for an empty stream).
"""

from pathlib import Path
from typing import Iterable, List


def load_text(path, encoding: str = "utf-8") -> str:
    """
    Reads a text file line by line, putting a newline before every line
    (including the first) and dropping the line terminators
    """
    parts: List[str] = []
    with open(path, "r", encoding=encoding) as f:
        for line in f:
            parts.append("\n")
            parts.append(line.rstrip("\r\n"))
    return "".join(parts)


class BitWriter:
    def __init__(self, path):
        self.path = Path(path)
        self._file = self.path.open("wb")
        self._acc = 0
        self._acc_bits = 0
        self._last_bits = 0 # valid bits in the last byte written

    def write_bit(self, bit) -> None:
        self._acc = (self._acc << 1) | (1 if bit else 0)
        self._acc_bits += 1
        if self._acc_bits == 8:
            self._file.write(bytes((self._acc,)))
            self._acc = 0
            self._acc_bits = 0
            self._last_bits = 8

    def close(self) -> None:
        if self._file.closed:
            return
        try:
            if self._acc_bits != 0:
                pad_bits = 8 - self._acc_bits
                self._file.write(bytes(((self._acc << pad_bits) & 0xFF,)))
                self._last_bits = self._acc_bits
            self._file.write(bytes((self._last_bits,)))
            self._file.flush()
        finally:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class BitReader:
    def __init__(self, path):
        self.path = Path(path)
        with self.path.open("rb") as f:
            raw = f.read()

        if not raw:
            raise ValueError(f"{self.path}: missing bit-count trailer")
        last_bits = raw[-1]
        self._data = raw[:-1]
        if not self._data and last_bits != 0:
            raise ValueError(f"{self.path}: trailer claims {last_bits} bits but there is no data")
        if self._data and not 1 <= last_bits <= 8:
            raise ValueError(f"{self.path}: invalid bit-count trailer {last_bits}")

        self._total_bits = (len(self._data) - 1) * 8 + last_bits if self._data else 0
        self._bit_index = 0

    def has_next(self) -> bool:
        return self._bit_index < self._total_bits

    def read_bit(self) -> bool:
        if not self.has_next():
            raise EOFError(f"{self.path}: no more bits")
        byte = self._data[self._bit_index // 8]
        bit = (byte >> (7 - self._bit_index % 8)) & 1
        self._bit_index += 1
        return bit == 1

    def close(self) -> None:
        # the whole file is read in __init__; dropping the buffer is all there is to do
        self._data = b""
        self._total_bits = self._bit_index

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def write_bits_to_file(bits: Iterable[bool], path) -> None:
    with BitWriter(path) as writer:
        for bit in bits:
            writer.write_bit(bit)

def read_bits_from_file(path) -> List[bool]:
    bits: List[bool] = []
    with BitReader(path) as reader:
        while reader.has_next():
            bits.append(reader.read_bit())
    return bits
