import pytest

from caesar_toolkit.utils.textio import read_input, write_output

def test_read_input_from_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes("Hello\n123\n!@#".encode('utf-8'))
    assert read_input(str(path)) == "Hello\n123\n!@#"

def test_read_input_keeps_carriage_returns(tmp_path):
    path = tmp_path / "cipher.txt"
    path.write_bytes(b"khoor\rzruog\r\n")
    assert read_input(str(path)) == "khoor\rzruog\r\n"

def test_read_input_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_input(str(tmp_path / "nonexistent.txt"))

def test_write_output_to_file(tmp_path):
    path = tmp_path / "output.txt"
    content = "Hello\x01\x02\x03!@#\r"
    write_output(str(path), content)
    assert path.read_bytes() == content.encode('utf-8')

def test_write_output_truncates_existing_file(tmp_path):
    path = tmp_path / "output.txt"
    path.write_text("a much longer previous content")
    write_output(str(path), "short")
    assert path.read_text() == "short"

def test_write_output_to_invalid_path(tmp_path):
    with pytest.raises(OSError):
        write_output(str(tmp_path / "no" / "such" / "dir" / "file.txt"), "Test content")

def test_write_output_to_stdout(capsysbinary):
    write_output(None, "to stdout")
    assert capsysbinary.readouterr().out == b"to stdout"
