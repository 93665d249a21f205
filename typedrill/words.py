import random
import sys
from collections import defaultdict

from wordfreq import top_n_list

from typedrill.config import TARGET_PATTERNS, WORD_COUNT
from typedrill.errors import ValidationError


def read_lines(filename):
    try:
        if filename == "-":
            data = sys.stdin.read()
        else:
            with open(filename, "r", encoding="utf-8") as f:
                data = f.read()
    except OSError as e:
        raise ValidationError(f"Cannot read {filename}: {e}") from e
    return data.splitlines()


def load_words(filename = None):
    if filename is None:
        words = top_n_list("en", WORD_COUNT)
        words = [w for w in words if w.isalpha() and len(w) >= 3]
    else:
        words = [w.strip() for w in read_lines(filename)]
        words = [w for w in words if w]
    if not words:
        raise ValidationError(f"No words loaded from {filename or 'wordfreq'}")
    return words


def random_words(words, n, rng = None):
    if n < 1:
        raise ValidationError("Need at least one word to start exercise")
    if rng is None:
        rng = random.Random()
    return " ".join(rng.choice(words) for _ in range(n))


def trigram_words(words):
    pattern_words = defaultdict(list)
    for word in words:
        for i in range(len(word) - 2):
            trigram = word[i:i + 3]
            if not pattern_words[trigram] or pattern_words[trigram][-1] != word:
                pattern_words[trigram].append(word)
    return pattern_words


def weak_words(trigrams, words, n, rng = None):
    if n < 1:
        raise ValidationError("Need at least one word to start exercise")
    if rng is None:
        rng = random.Random()
    pattern_words = trigram_words(words)
    candidates = set()
    for ts in trigrams[:TARGET_PATTERNS]:
        candidates.update(pattern_words.get(ts.trigram, []))

    if not candidates:
        candidates = set(words)

    return " ".join(rng.sample(sorted(candidates), min(n, len(candidates))))


def from_file(filename, offset = 0, min_length = 0):
    lines = read_lines(filename)
    skipped = sum(len(line) + 1 for line in lines[:offset])
    lines = lines[offset:]
    if not lines:
        raise ValidationError(f"{filename} contains no usable data at offset {offset}")

    res = []
    total = 0
    for line in lines:
        line = line.strip()
        res.append(line)
        total += len(line) + 1
        if min_length > 0 and total >= min_length:
            break
    return "\n".join(res), skipped
