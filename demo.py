"""
Huffman text codec walkthrough

For each input file: load it, build the tree, encode, write <file>.enc, read the
bits back and decode them. Then the single-symbol and empty-text cases.

How to run:
  python demo.py samples/simple.txt --show-tree
  python demo.py big.txt --preview 200
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

import huffman as huff
from bitio import load_text, read_bits_from_file, write_bits_to_file


def run_file(path: Path, show_tree: bool, preview: int) -> bool:
    text = load_text(path)
    if not text:
        print(f"{path}: empty, nothing to encode")
        return True

    codec = huff.HuffmanCodec().fit(text)
    if show_tree:
        print(codec.tree)

    # encode text and write to file
    encoded = codec.encode(text)
    enc_path = path.with_name(path.name + ".enc")
    write_bits_to_file(encoded, enc_path)
    print(f"{path}: encoding done, {len(encoded)} bits ({len(codec.codes)} symbols) -> {enc_path}")

    # read the encoded representation back and decode it
    decoded = codec.decode(read_bits_from_file(enc_path))
    print(decoded[:preview] if preview > 0 else decoded)
    return decoded == text


def run_builtin() -> bool:
    ok = True

    # single repeated character; encode builds the tree on first use
    codec = huff.HuffmanCodec()
    bits = codec.encode("aaaaaaaaa")
    decoded = codec.decode(bits)
    print(f"single symbol: {len(bits)} bits -> {decoded!r}")
    ok &= decoded == "aaaaaaaaa"

    # empty text
    codec = huff.HuffmanCodec()
    decoded = codec.decode(codec.encode(""))
    print(f"empty text: {decoded!r}")
    ok &= decoded == ""
    return ok


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Encode text files with a Huffman code and decode them back")
    ap.add_argument("files", nargs="*", help="Text files to round-trip through <file>.enc")
    ap.add_argument("--show-tree", action="store_true", help="Print the tree as an S-expression")
    ap.add_argument("--preview", type=int, default=200, help="Characters of decoded text to print (0 = all)")
    args = ap.parse_args(argv)

    failures: List[str] = []
    for name in args.files:
        if not run_file(Path(name), args.show_tree, args.preview):
            failures.append(name)
        print("\n---")

    if not run_builtin():
        failures.append("<builtin>")

    for name in failures:
        print(f"[ERROR] round trip mismatch: {name}", file=sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
