"""Step-by-step frequency attack on a mono-alphabetic substitution cipher."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from cipherlab.alphabet import Alphabet, EnglishAlphabet, get_english_alphabet
from cipherlab.tools import (
    attack_mono_alpha_cipher,
    find_words_by_pattern,
    most_frequent_sequences,
    shift_string,
    sum_square_distance,
)

CIPHER_TEXT = (
    "JGRMQOYGHMVBJWRWQFPWHGFFDQGFPFZRKBEEBJIZQQOCIBZKLFAFGQVFZFWWEOGWOPFGFHWOL"
    "PHLRLOLFDMFGQWBLWBWQOLKFWBYLBLYLFSFLJGRMQBOLWJVFPFWQVHQWFFPQOQVFPQOCFPOGF"
    "WFJIGFQVHLHLROQVFGWJVFPFOLFHGQVQVFILEOGQILHQFQGIQVVOSFAFGBWQVHQWIJVWJVFPF"
    "WHGFIWIHZZRQGBABHZQOCGFHX"
)

STEPS: tuple[str, ...] = (
    "01_1",
    "01_2",
    "01_3",
    "02_1",
    "02_2",
    "03_1",
    "03_2",
    "04_1",
    "04_2",
    "05_1",
    "05_2",
    "06_1",
    "07_1",
    "08_1",
    "09_1",
    "10_1",
    "11_1",
    "11_2",
    "full",
)


def print_wrapped(text: str, width: int = 62) -> list[str]:
    """Print ``text`` in lines of ``width`` characters, then a blank line."""
    if width < 1:
        raise ValueError("width must be at least 1.")
    lines = [text[i : i + width] for i in range(0, len(text), width)]
    for line in lines:
        print(line)
    print()
    return lines


def brute_force_shift(cipher_text: str) -> list[str]:
    """Print and return the upper-case ``cipher_text`` under every shift 0..25."""
    shifted = [shift_string(cipher_text, i) for i in range(26)]
    for i, text in enumerate(shifted):
        print(f"{i:2}: {text}")
    return shifted


def find_words(
    alphabet: Alphabet,
    pattern: str,
    predicate: Callable[[str], bool] | None = None,
    max_matches: int = 5,
) -> list[tuple[int, int, str]]:
    """Print and return the alphabet's words matching ``pattern`` and ``predicate``."""
    words = alphabet.find_words(pattern, predicate, max_matches)
    for index, count, word in words:
        print(f"{index}: ({count}) - {word}")
    return words


def _attack(alphabet: Alphabet, cipher_text: str, known: dict[str, str]) -> str:
    plain_text = attack_mono_alpha_cipher(alphabet, cipher_text, known, True)
    print_wrapped(cipher_text)
    print_wrapped(plain_text)
    return plain_text


def _print_sequences(sequences: list[tuple[str, int]]) -> None:
    for word, quantity in sequences:
        print(f"{word} - {quantity}")


def _print_matches(words: list[tuple[int, int, str]], count_width: int, word_width: int) -> None:
    for index, count, word in words:
        print(f"{index:>6}: {count:>{count_width}} - {word:>{word_width}}")


def _earth_filter(s: str) -> bool:
    blacklist = "thea"
    if len(s) >= 6 and s[-6] in blacklist:
        return False
    if len(s) >= 7 and s[-7] in blacklist:
        return False
    if len(s) >= 8 and s[-6] != "e":
        return False
    return True


def _break_filter(s: str) -> bool:
    blacklist = "thear"
    start = s.find("rea")
    if start > 0 and s[start - 1] in blacklist:
        return False
    after = start + len("rea")
    if after < len(s) and s[after] in blacklist:
        return False
    return True


def _trivial_filter(s: str) -> bool:
    blacklist = "thearobk"
    if len(s) >= 11 and s[-11] != "a":
        return False
    after = s.find("tr") + len("tr")
    return not any(ch in blacklist for ch in s[after : after + 3])


def tutorial(step: str = "full", alphabet: Alphabet | None = None) -> str | None:
    """Run the attack up to ``step``; return the decrypted text when the step ends in one."""
    if step not in STEPS:
        raise ValueError(f"Unknown step '{step}'.")
    if alphabet is None:
        alphabet = get_english_alphabet()
    cipher_text = CIPHER_TEXT
    known: dict[str, str] = {}

    if step == "01_1":
        _print_sequences(most_frequent_sequences(cipher_text, 3, 4, -1))
        return None
    if step == "01_2":
        attack_mono_alpha_cipher(alphabet, cipher_text, known, True)
        qvf = sum_square_distance(
            "QVF", alphabet, cipher_text, {"Q": "t", "V": "h", "F": "e"}
        )
        vfp = sum_square_distance(
            "VFP", alphabet, cipher_text, {"V": "t", "F": "h", "P": "e"}
        )
        print("Sum square distance probabilites mapping to 'the':")
        print(f"QVF -> ({qvf:.6f})")
        print(f"VFP -> ({vfp:.6f})")
        return None

    # QVF -> the
    known.update(Q="t", V="h", F="e")

    if step == "01_3":
        _attack(alphabet, cipher_text, known)

    if step == "02_1":
        plain_text = attack_mono_alpha_cipher(alphabet, cipher_text, known, False)
        merged = "".join(
            c if p == "_" else p for c, p in zip(cipher_text, plain_text)
        )
        _print_sequences(most_frequent_sequences(merged, 4, 2, -1))
        return None

    known["H"] = "a"
    if step == "02_2":
        return _attack(alphabet, cipher_text, known)

    if step == "03_1":
        words = find_words_by_pattern(
            alphabet.words_count(), "(^a.th$|.*ea.th$)", _earth_filter, 15
        )
        _print_matches(words, 8, 7)
        return None

    # FHGQV -> earth
    known["G"] = "r"
    if step == "03_2":
        return _attack(alphabet, cipher_text, known)

    if step == "04_1":
        words = find_words_by_pattern(
            alphabet.words_count(), ".*rea.$", _break_filter, 15
        )
        _print_matches(words, 9, 10)
        return None

    # QO CGFHX -> to break
    known.update(O="o", C="b", X="k")
    if step == "04_2":
        return _attack(alphabet, cipher_text, known)

    if step == "05_1":
        words = find_words_by_pattern(
            alphabet.words_count(), ".*tr...a.$", _trivial_filter, 15
        )
        _print_matches(words, 9, 13)
        return None

    # QGBABHZ -> trivial
    known.update(B="i", A="v", Z="l")
    if step == "05_2":
        return _attack(alphabet, cipher_text, known)

    # VOSFAFG -> however
    known["S"] = "w"
    if step == "06_1":
        return _attack(alphabet, cipher_text, known)

    # BW -> is, ZFWW -> less
    known["W"] = "s"
    if step == "07_1":
        return _attack(alphabet, cipher_text, known)

    # LFAFGQVFZFWW -> nevertheless
    known["L"] = "n"
    if step == "08_1":
        return _attack(alphabet, cipher_text, known)

    # EOG WOPF GFHWOL -> for some reason
    known.update(E="f", P="m")
    if step == "09_1":
        return _attack(alphabet, cipher_text, known)

    # PHLR -> many
    known["R"] = "y"
    if step == "10_1":
        return _attack(alphabet, cipher_text, known)

    # FDQGFPFZR -> extremely
    known["D"] = "x"
    if step == "11_1":
        words = find_words_by_pattern(alphabet.words_count(), "^.s.ally$", None, 15)
        _print_matches(words, 9, 13)
        return None

    # IWIHZZR -> usually
    known["I"] = "u"
    if step == "11_2":
        return _attack(alphabet, cipher_text, known)

    # KBEEBJIZQ -> difficult, CIBZK -> build, FDMFGQW -> experts, KFWBYLBLY -> designing
    known.update(K="d", J="c", M="p", Y="g")
    return _attack(alphabet, cipher_text, known)


def main(argv: list[str] | None = None) -> int:
    """Run the substitution cipher tutorial."""
    parser = argparse.ArgumentParser(
        description="Break a substitution cipher step by step."
    )
    parser.add_argument("--step", choices=STEPS, default="full", help="tutorial step")
    parser.add_argument("--words", default=None, help="word frequency list file")
    args = parser.parse_args(argv)
    alphabet = EnglishAlphabet(args.words) if args.words else get_english_alphabet()
    tutorial(args.step, alphabet)
    return 0