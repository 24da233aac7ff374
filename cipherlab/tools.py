"""Frequency analysis helpers for classical ciphers."""

from __future__ import annotations

import math
import re
import string
from collections import Counter
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Protocol

_ALPHABET_SIZE = 26


class _LetterModel(Protocol):
    def letter_prob_dict(self) -> Mapping[str, float]: ...

    def sorted_probabilities_labeled(self) -> Sequence[tuple[float, str]]: ...


def print_found_pattern(s: str, pattern: str = "t.e") -> list[str]:
    """Print every match of ``pattern`` in ``s`` and return the matches."""
    found = [match.group(0) for match in re.finditer(pattern, s)]
    for word in found:
        print(f"Found: {word}")
    return found


def most_frequent_sequences(
    s: str, sequence_size: int, min_freq_cutoff: int, top_most_count: int
) -> list[tuple[str, int]]:
    """Return the most frequent substrings of length ``sequence_size``.

    Results are ordered by count, descending. Non-positive ``top_most_count``
    or ``min_freq_cutoff`` disable the respective limit.
    """
    counts = Counter(
        s[i : i + sequence_size] for i in range(len(s) - sequence_size + 1)
    )
    result: list[tuple[str, int]] = []
    for sequence, count in counts.most_common():
        if top_most_count > 0 and len(result) >= top_most_count:
            break
        if min_freq_cutoff > 0 and count < min_freq_cutoff:
            break
        result.append((sequence, count))
    return result


def square_sum(probabilities: Iterable[float]) -> float:
    """Return the sum of the squares of ``probabilities``."""
    return sum(p * p for p in probabilities)


def probability_pairs_to_dict(
    prob_pairs: Iterable[tuple[float, str]],
) -> dict[str, float]:
    """Map each letter of ``(probability, letter)`` pairs to its probability."""
    return {letter: prob for prob, letter in prob_pairs}


def probabilities_to_sorted_labeled(
    probabilities: Sequence[float], low_chars: bool
) -> list[tuple[float, str]]:
    """Label 26 probabilities with letters a..z (or A..Z), sorted descending."""
    if len(probabilities) != _ALPHABET_SIZE:
        raise ValueError("probabilities shall be given for the letters a to z.")
    letters = string.ascii_lowercase if low_chars else string.ascii_uppercase
    return sorted(zip(probabilities, letters), reverse=True)


def shift_string(cipher_text: str, shift: int) -> str:
    """Shift every letter of an upper-case text by ``shift`` positions."""
    if any(ch not in string.ascii_uppercase for ch in cipher_text):
        raise ValueError("cipher_text is expected to be upper case.")
    base = ord("A")
    return "".join(
        chr((ord(ch) - base + shift) % _ALPHABET_SIZE + base) for ch in cipher_text
    )


def calculate_letter_probabilities(text: str) -> list[float]:
    """Return the relative frequency of each letter a..z in ``text``.

    The letter case is taken from the first character; an empty or
    letter-free text yields NaN for every letter.
    """
    counts = [0] * _ALPHABET_SIZE
    if text:
        base = ord("A") if text[0].isupper() else ord("a")
        for ch in text:
            if ch in string.ascii_letters:
                index = ord(ch) - base
                if not 0 <= index < _ALPHABET_SIZE:
                    raise ValueError("text must use a single letter case.")
                counts[index] += 1
    total = sum(counts)
    if total == 0:
        return [math.nan] * _ALPHABET_SIZE
    return [count / total for count in counts]


def sum_square_distance(
    cipher_text: str,
    alphabet: _LetterModel,
    full_cipher_text: str,
    mapping: Mapping[str, str],
) -> float:
    """Sum of squared differences between cipher and mapped plain letter probabilities."""
    full_probs = probability_pairs_to_dict(
        probabilities_to_sorted_labeled(
            calculate_letter_probabilities(full_cipher_text), False
        )
    )
    alphabet_probs = alphabet.letter_prob_dict()
    total = 0.0
    for letter in cipher_text:
        target = mapping[letter]
        diff = full_probs.get(letter.upper(), 0.0) - alphabet_probs.get(target, 0.0)
        total += diff * diff
    return total


def attack_mono_alpha_cipher(
    alphabet: _LetterModel,
    cipher_text: str,
    known: Mapping[str, str] | None = None,
    debug: bool = False,
) -> str:
    """Decrypt the letters of ``cipher_text`` that ``known`` maps; others become '_'.

    With ``debug`` the known mappings and the frequency-ranked guesses for
    the remaining letters are printed.
    """
    known = dict(known or {})
    cipher_sorted = probabilities_to_sorted_labeled(
        calculate_letter_probabilities(cipher_text), False
    )
    cipher_probs = probability_pairs_to_dict(cipher_sorted)
    alphabet_probs = alphabet.letter_prob_dict()

    mapping = dict(known)
    used_plain = set(known.values())
    for key, value in known.items():
        cp = cipher_probs.get(key, 0.0)
        ep = alphabet_probs[value]
        if debug:
            print(f"{key} ({cp:.3f}) <--> {value} ({ep:.3f})")
    if debug:
        print("- - - -")

    plain_ranked = iter(
        (ep, ec)
        for ep, ec in alphabet.sorted_probabilities_labeled()
        if ec not in used_plain
    )
    for cp, cc in cipher_sorted:
        if cc in mapping:
            continue
        guess = next(plain_ranked, None)
        if guess is None:
            break
        ep, ec = guess
        mapping[cc] = ec
        used_plain.add(ec)
        if debug:
            print(f"{cc} ({cp:.3f}) <--> {ec} ({ep:.3f})")

    pieces = []
    for ch in cipher_text:
        if ch in string.ascii_letters:
            prob = cipher_probs.get(ch, 0.0)
            pieces.append(known[ch] if prob >= 0.0 and ch in known else "_")
        else:
            pieces.append(ch)
    return "".join(pieces)


def find_words_by_pattern(
    words_count: Sequence[tuple[str, int]],
    pattern: str,
    predicate: Callable[[str], bool] | None = None,
    max_matches: int = 5,
) -> list[tuple[int, int, str]]:
    """Return ``(index, count, word)`` for words matching ``pattern`` and ``predicate``.

    A non-positive ``max_matches`` returns every match.
    """
    regex = re.compile(pattern)
    result: list[tuple[int, int, str]] = []
    for index, (word, count) in enumerate(words_count):
        if regex.search(word) and (predicate is None or predicate(word)):
            result.append((index, count, word))
            if max_matches > 0 and len(result) == max_matches:
                break
    return result