"""Demonstrations of shift and Vigenère cipher attacks on a book text."""

from __future__ import annotations

import argparse
import os
import string
import sys

from cipherlab.alphabet import get_english_alphabet
from cipherlab.shift import ShiftAttack
from cipherlab.vigenere import VigenereAttack, random_vigenere_key

DEFAULT_BOOK = "book.txt"


def fix_repeated_key(key: str) -> str:
    """Reduce a key made of a repeated block, such as 'abab', to that block."""
    size = len(key)
    for t in range(1, size // 2 + 1):
        if size % t == 0 and key == key[:t] * (size // t):
            return key[:t]
    return key


def shift_attack_demo(
    book_path: str | os.PathLike[str] = DEFAULT_BOOK,
) -> list[tuple[str, str | None]]:
    """Encrypt the book with every shift key, attack it and report the results."""
    results = []
    for test_key in string.ascii_lowercase:
        attack = ShiftAttack(get_english_alphabet())
        attack.read_plain_text_file(book_path)
        attack.encrypt(test_key)
        key = attack.key
        found = attack.attack()
        if key == found:
            print(f"Key '{key}' discovered!")
        else:
            print(f"Original key '{key}' differs from computed one '{found}'!")
        results.append((key, found))
    return results


def _report_key(key: str) -> None:
    print(f"Encrypted with key '{key}' (length: {len(key)}).")


def vigenere_key_length_demo(
    book_path: str | os.PathLike[str] = DEFAULT_BOOK, rounds: int = 100
) -> list[tuple[str, int | None]]:
    """Encrypt the book with random keys and check the detected key lengths."""
    attack = VigenereAttack(get_english_alphabet())
    attack.read_plain_text_file(book_path)
    results: list[tuple[str, int | None]] = []
    for _ in range(rounds):
        key = fix_repeated_key(random_vigenere_key())
        attack.encrypt(key)
        try:
            length, diff = attack.find_key_length()
        except Exception as exc:
            _report_key(key)
            print(f"Error: {exc}", file=sys.stderr)
            results.append((key, None))
            continue
        if length != len(key):
            _report_key(key)
            print(
                f"Original key length '{len(key)}' differs from computed one '{length}'!"
            )
            print(f"Distance from 0.065: {diff}")
            if length * 2 == len(key):
                half = len(key) // 2
                print("Are left and right parts of key similar?")
                print(key[:half])
                print(key[half:])
        results.append((key, length))
    return results


def vigenere_attack_demo(
    book_path: str | os.PathLike[str] = DEFAULT_BOOK, rounds: int = 10
) -> list[tuple[str, str | None]]:
    """Encrypt the book with random keys, attack it and report the results."""
    attack = VigenereAttack(get_english_alphabet())
    attack.read_plain_text_file(book_path)
    results: list[tuple[str, str | None]] = []
    for _ in range(rounds):
        key = fix_repeated_key(random_vigenere_key())
        attack.encrypt(key)
        try:
            found = attack.attack()
        except Exception as exc:
            _report_key(key)
            print(f"Error: {exc}", file=sys.stderr)
            results.append((key, None))
            continue
        if found == key:
            print(f"Key '{found}' discovered!")
        else:
            _report_key(key)
            print(f"Differs from key '{found}' (length: {len(found)}).")
        results.append((key, found))
    return results


def main(argv: list[str] | None = None) -> int:
    """Run the Vigenère attack demonstration."""
    parser = argparse.ArgumentParser(description="Attack Vigenère-encrypted book text.")
    parser.add_argument("--book", default=DEFAULT_BOOK, help="plain text file")
    parser.add_argument("--rounds", type=int, default=10, help="number of random keys")
    args = parser.parse_args(argv)
    vigenere_attack_demo(args.book, args.rounds)
    return 0