import random
import string

import pytest

from cipherlab.alphabet import get_english_alphabet
from cipherlab.vigenere import (
    CHARS_PER_STREAM_TO_ATTACK,
    KEY_LENGTH_THRESHOLD,
    VigenereAttack,
    encrypt_text,
    find_key_length,
    random_vigenere_key,
    split_into,
)


def _english_like(length, seed=7):
    rng = random.Random(seed)
    weights = list(get_english_alphabet().probabilities())
    return "".join(rng.choices(string.ascii_lowercase, weights=weights, k=length))


def test_encrypt_single_letter_key():
    assert encrypt_text("b", "abc") == "BCD"


def test_encrypt_repeats_key():
    assert encrypt_text("ab", "aaaa") == "ABAB"


def test_encrypt_with_key_a_is_identity_upper():
    text = "attackatdawn"
    assert encrypt_text("aaa", text) == text.upper()


@pytest.mark.parametrize("key", ["", "Ab", "a1", "k y"])
def test_encrypt_invalid_key(key):
    with pytest.raises(ValueError):
        encrypt_text(key, "abc")


@pytest.mark.parametrize("text", ["ab c", "aBc", "a1"])
def test_encrypt_invalid_text(text):
    with pytest.raises(ValueError):
        encrypt_text("key", text)


def test_split_into_streams():
    assert split_into("abcdefg", 3) == ["adg", "be", "cf"]


def test_split_into_preserves_length():
    s = "thequickbrownfox"
    parts = split_into(s, 5)
    assert len(parts) == 5
    assert sum(len(p) for p in parts) == len(s)
    assert split_into(s, 1) == [s]


def test_random_key_bounds():
    random.seed(3)
    for _ in range(50):
        key = random_vigenere_key(8)
        assert 1 <= len(key) <= 8
        assert set(key) <= set(string.ascii_lowercase)
    assert len(random_vigenere_key(1)) == 1


def test_find_key_length_short_text():
    with pytest.raises(ValueError):
        find_key_length("A" * (CHARS_PER_STREAM_TO_ATTACK - 1), get_english_alphabet())


def test_find_key_length_lower_case_rejected():
    with pytest.raises(ValueError):
        find_key_length("a" * CHARS_PER_STREAM_TO_ATTACK, get_english_alphabet())


@pytest.mark.parametrize("key", ["q", "lemon"])
def test_find_key_length_detects(key):
    text = _english_like(3000 * len(key))
    length, diff = find_key_length(encrypt_text(key, text), get_english_alphabet())
    assert length == len(key)
    assert 0.0 <= diff <= KEY_LENGTH_THRESHOLD


def test_attack_recovers_key():
    attack = VigenereAttack(get_english_alphabet())
    attack.load_plain_text(_english_like(15000))
    attack.encrypt("lemon")
    assert attack.attack() == "lemon"
    assert attack.key == "lemon"


def test_load_plain_text_and_random_encrypt():
    attack = VigenereAttack(get_english_alphabet())
    attack.load_plain_text("Hello, World! 42")
    assert attack.text == "helloworld"
    assert attack.cipher_text == ""
    random.seed(11)
    attack.encrypt()
    assert attack.cipher_text == encrypt_text(attack.key, attack.text)


def test_read_plain_text_file(tmp_path):
    path = tmp_path / "plain.txt"
    path.write_text("Some Text, here.")
    attack = VigenereAttack(get_english_alphabet())
    attack.read_plain_text_file(path, 6)
    assert attack.text == "somete"


def test_attack_on_short_text_raises_and_clears_key():
    attack = VigenereAttack(get_english_alphabet())
    attack.load_plain_text("short text")
    attack.encrypt("key")
    with pytest.raises(ValueError):
        attack.attack()
    assert attack.key == ""