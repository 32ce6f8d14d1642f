from typing import List, Tuple

ASCII_ALPHABET_LEN = 128  # Number of ASCII code points, and so of distinct shifts

def shift_char(char: str, shift: int) -> str:
    """Shift a single ASCII character, leaving anything else untouched"""
    code = ord(char)
    if code >= ASCII_ALPHABET_LEN:
        return char
    return chr((code + shift) % ASCII_ALPHABET_LEN)

def caesar_cipher(text: str, shift: int, decrypt: bool = False) -> str:
    """
    Implement Caesar cipher encryption/decryption over the full ASCII range.

    Every character with a code point in [0, 127] moves by ``shift`` positions,
    wrapping around at 128. Non-ASCII characters pass through unchanged, so
    applying ``-shift`` always restores ASCII text.
    """
    if decrypt:
        shift = -shift

    return ''.join(shift_char(char, shift) for char in text)

def break_caesar(text: str) -> List[Tuple[int, str]]:
    """
    Try every possible shift and return (shift, candidate) pairs in shift order
    """
    results = []
    for shift in range(ASCII_ALPHABET_LEN):
        results.append((shift, caesar_cipher(text, shift)))
    return results
