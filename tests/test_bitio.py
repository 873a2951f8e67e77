import pytest

from bitio import BitReader, BitWriter, load_text, read_bits_from_file, write_bits_to_file
from huffman import HuffmanCodec


def test_load_text_prepends_newline_to_every_line(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("one\ntwo\n\nfour\n", encoding="utf-8")
    assert load_text(path) == "\none\ntwo\n\nfour"


def test_load_text_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_text(path) == ""


def test_load_text_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text(tmp_path / "nope.txt")


def test_bit_file_layout(tmp_path):
    path = tmp_path / "bits.enc"
    write_bits_to_file([True, False, True], path)
    assert path.read_bytes() == b"\xa0\x03"


def test_bit_file_full_last_byte(tmp_path):
    path = tmp_path / "bits.enc"
    write_bits_to_file([True] * 8, path)
    assert path.read_bytes() == b"\xff\x08"


def test_empty_bit_file(tmp_path):
    path = tmp_path / "bits.enc"
    write_bits_to_file([], path)
    assert path.read_bytes() == b"\x00"
    assert read_bits_from_file(path) == []


@pytest.mark.parametrize("count", [1, 7, 8, 9, 16, 23])
def test_bits_survive_file_round_trip(tmp_path, count):
    bits = [(i * 7) % 3 == 0 for i in range(count)]
    path = tmp_path / "bits.enc"
    write_bits_to_file(bits, path)
    assert read_bits_from_file(path) == bits


def test_writer_context_manager_persists_on_exit(tmp_path):
    path = tmp_path / "bits.enc"
    with BitWriter(path) as writer:
        writer.write_bit(False)
        writer.write_bit(True)
    assert path.read_bytes() == b"\x40\x02"


def test_reader_is_sequential_and_raises_at_end(tmp_path):
    path = tmp_path / "bits.enc"
    write_bits_to_file([True, False], path)
    with BitReader(path) as reader:
        assert reader.has_next()
        assert reader.read_bit() is True
        assert reader.read_bit() is False
        assert not reader.has_next()
        with pytest.raises(EOFError):
            reader.read_bit()


@pytest.mark.parametrize("raw", [b"", b"\x05", b"\xff\x00", b"\xff\x09"])
def test_reader_rejects_bad_trailer(tmp_path, raw):
    path = tmp_path / "bad.enc"
    path.write_bytes(raw)
    with pytest.raises(ValueError):
        BitReader(path)


def test_reader_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_bits_from_file(tmp_path / "missing.enc")


def test_text_file_through_codec_and_bit_file(tmp_path):
    src = tmp_path / "simple.txt"
    src.write_text("Hello Huffman.\nThis is a small text file.\n", encoding="utf-8")
    text = load_text(src)

    codec = HuffmanCodec()
    enc = tmp_path / "simple.txt.enc"
    write_bits_to_file(codec.encode(text), enc)

    assert codec.decode(read_bits_from_file(enc)) == text
