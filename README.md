# cipherlab

A small toolkit for experimenting with classical ciphers and the frequency
analysis that breaks them.

- **Shift cipher** (`cipherlab.shift`): encrypt lower-case text with a
  one-letter key and recover the key by comparing letter frequencies with
  English. Two scoring strategies are available through `Strategy`:
  `DIFF_SQUARE_SUM` (the default) and `SUM_SQUARES`.
- **Vigenère cipher** (`cipherlab.vigenere`): encrypt with a word key, detect
  the key length from the sum of squared letter frequencies of the cipher
  streams, then break each stream as a shift cipher.
- **Mono-alphabetic substitution** (`cipherlab.tools`, `cipherlab.exercise01`):
  letter-frequency ranking, n-gram counting, shifting, and regular-expression
  search in a word-frequency list, used to solve a substitution cipher step
  by step.
- **Letter statistics** (`cipherlab.alphabet`): the abstract `Alphabet` and
  `EnglishAlphabet`, with English letter probabilities; `get_english_alphabet()`
  returns a shared instance.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from cipherlab.alphabet import get_english_alphabet
from cipherlab.shift import ShiftAttack, Strategy
from cipherlab.vigenere import VigenereAttack

english = get_english_alphabet()

shift = ShiftAttack(english)
shift.load_plain_text("Attack at dawn, the river is low.")
shift.encrypt("k")
print(shift.cipher_text)
print(shift.attack(Strategy.SUM_SQUARES))   # the recovered key, also in shift.key

vigenere = VigenereAttack(english)
vigenere.read_plain_text_file("book.txt")
vigenere.encrypt("lemon")
print(vigenere.find_key_length())           # (length, distance)
print(vigenere.attack())                    # the recovered key, also in vigenere.key
```

Plain text is normalised to lower-case ASCII letters only (`read_file`,
`load_plain_text` in `cipherlab.helper`); cipher text is upper case. Invalid
keys or text raise `ValueError`. Detecting a Vigenère key length needs at
least 600 cipher letters per possible key letter (`CHARS_PER_STREAM_TO_ATTACK`),
so short texts raise `ValueError`. A shift attack on short text may return
the wrong key.

Word search (`Alphabet.find_words`, `cipherlab.tools.find_words_by_pattern`)
reads a word-frequency list of whitespace-separated `word count` pairs, most
frequent first. `EnglishAlphabet(words_path)` takes its location; the default
is `/tmp/count_1w.txt`, and a missing file raises `FileNotFoundError` when the
words are first needed.

`cipherlab.exercise05` also offers `shift_attack_demo(book_path)` and
`vigenere_key_length_demo(book_path, rounds)`, which print and return their
results, and `fix_repeated_key(key)`, which reduces keys such as `abab` to
`ab`.

## Commands

```
cipherlab [01|05] [options]
cipherlab-vigenere [--book FILE] [--rounds N]
cipherlab-substitution [--step STEP] [--words FILE]
```

- `cipherlab` runs exercise `05` unless the first argument is `01`; the
  remaining arguments go to that exercise.
- `cipherlab-vigenere` encrypts the book file (default `book.txt`) with
  `--rounds` random keys (default 10), attacks each and reports whether the
  key was found.
- `cipherlab-substitution` walks through the built-in substitution cipher up
  to `--step` (`01_1` … `11_2`, or `full`, the default), printing frequency
  guesses and the partly decrypted text. Steps `03_1`, `04_1`, `05_1` and
  `11_1` search the word list given by `--words`.

Run any of them with `--help` to see their options.

## What it does not do

- There is no decryption function: the shift and Vigenère attacks recover
  the key only.
- The substitution attack fills in only the letters you supply; the
  frequency-ranked guesses for the rest are printed, not applied.
- No book text or word-frequency list is included; supply your own files.