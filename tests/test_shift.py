import string

import pytest

from cipherlab.alphabet import EnglishAlphabet
from cipherlab.shift import ShiftAttack, Strategy, encrypt_text, random_key

SAMPLE = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season of "
    "Darkness, it was the spring of hope, it was the winter of despair, we had "
    "everything before us, we had nothing before us, we were all going direct "
    "to Heaven, we were all going direct the other way. In short, the period "
    "was so far like the present period, that some of its noisiest authorities "
    "insisted on its being received, for good or for evil, in the superlative "
    "degree of comparison only."
)


@pytest.fixture
def attacker():
    attack = ShiftAttack(EnglishAlphabet())
    attack.load_plain_text(SAMPLE)
    return attack


def test_random_key_is_lowercase_letter():
    for _ in range(50):
        assert random_key() in string.ascii_lowercase


def test_encrypt_text_identity_key():
    assert encrypt_text("a", "hello") == "HELLO"


def test_encrypt_text_wraps_around():
    assert encrypt_text("b", "xyz") == "YZA"


@pytest.mark.parametrize("key", ["A", "", "ab", "1"])
def test_encrypt_text_invalid_key(key):
    with pytest.raises(ValueError):
        encrypt_text(key, "abc")


@pytest.mark.parametrize("text", ["Abc", "ab c", "ab1"])
def test_encrypt_text_invalid_text(text):
    with pytest.raises(ValueError):
        encrypt_text("c", text)


def test_load_plain_text_filters(attacker):
    assert attacker.text == "".join(c for c in SAMPLE if c.isalpha()).lower()


def test_encrypt_sets_key_and_cipher(attacker):
    attacker.encrypt("d")
    assert attacker.key == "d"
    assert attacker.cipher_text == encrypt_text("d", attacker.text)


def test_encrypt_random_key(attacker):
    attacker.encrypt()
    assert attacker.cipher_text == encrypt_text(attacker.key, attacker.text)


@pytest.mark.parametrize("key", list(string.ascii_lowercase))
def test_diff_square_sum_recovers_key(attacker, key):
    attacker.encrypt(key)
    assert attacker.attack() == key
    assert attacker.key == key


def test_sum_squares_is_shift_equivariant(attacker):
    attacker.encrypt("a")
    base = attacker.attack(Strategy.SUM_SQUARES)
    assert base in string.ascii_lowercase
    for shift, key in enumerate(string.ascii_lowercase):
        attacker.encrypt(key)
        found = attacker.attack(Strategy.SUM_SQUARES)
        expected = chr((ord(base) - ord("a") + shift) % 26 + ord("a"))
        assert found == expected


def test_load_cipher_text_resets_key(attacker):
    attacker.encrypt("k")
    attacker.load_cipher_text(encrypt_text("k", attacker.text))
    assert attacker.key is None
    assert attacker.attack() == "k"


def test_attack_rejects_lowercase_cipher(attacker):
    attacker.load_cipher_text("abc")
    with pytest.raises(ValueError):
        attacker.attack()


def test_attack_rejects_non_letters(attacker):
    attacker.load_cipher_text("AB C")
    with pytest.raises(ValueError):
        attacker.attack()


def test_attack_rejects_empty_cipher(attacker):
    attacker.load_cipher_text("")
    with pytest.raises(ValueError):
        attacker.attack()


def test_read_plain_text_file(tmp_path):
    path = tmp_path / "book.txt"
    path.write_text("Hello, World! 123")
    attack = ShiftAttack(EnglishAlphabet())
    attack.read_plain_text_file(path, 7)
    assert attack.text == "hellowo"
    assert attack.cipher_text == ""