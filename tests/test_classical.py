import pytest

from caesar_toolkit.crypto.classical import ASCII_ALPHABET_LEN, break_caesar, caesar_cipher, shift_char

SAMPLE = "Hello, World!\n\tTabs\r\nand\x00control\x7f"

def test_shift_wraps_around_code_space():
    assert shift_char('\x7f', 1) == '\x00'
    assert shift_char('\x00', -1) == '\x7f'
    assert caesar_cipher("ABC", 3) == "DEF"
    assert caesar_cipher("Hello!", 3) == "Khoor$"

@pytest.mark.parametrize("key", [0, 1, 3, 127, 128, 300, -1, -3, -129, -1000])
def test_applying_negated_key_restores_text(key):
    assert caesar_cipher(caesar_cipher(SAMPLE, key), -key) == SAMPLE

def test_decrypt_flag_negates_shift():
    encrypted = caesar_cipher(SAMPLE, 42)
    assert caesar_cipher(encrypted, 42, decrypt=True) == SAMPLE

@pytest.mark.parametrize("key", [-300, -128, -5, 130, 256, 1000])
def test_shift_is_periodic(key):
    assert caesar_cipher(SAMPLE, key) == caesar_cipher(SAMPLE, key % ASCII_ALPHABET_LEN)

@pytest.mark.parametrize("key", [1, 64, 127, -7])
def test_non_ascii_characters_are_unchanged(key):
    shifted = caesar_cipher("a世界é\u0080b", key)
    assert shifted[1:5] == "世界é\u0080"
    assert shifted[0] != 'a'

def test_empty_text():
    assert caesar_cipher("", 5) == ""

def test_break_caesar_lists_every_shift():
    results = break_caesar("ifmmp")
    assert len(results) == ASCII_ALPHABET_LEN
    assert [shift for shift, _ in results] == list(range(ASCII_ALPHABET_LEN))
    assert results[127] == (127, "hello")
