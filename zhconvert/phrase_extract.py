"""Statistical extraction of phrases from raw text.

Candidate words are n-grams of the text. Each candidate is scored by
frequency, cohesion (minimum pointwise mutual information over its
splits) and the entropy of the characters on its left and right.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby

PUNCTUATIONS: tuple[str, ...] = (
    " ", "\n", "\r", "\t", "-", ",", ".", "?", "!", "*", "　",
    "，", "。", "、", "；", "：", "？", "！", "…", "“", "”", "「",
    "」", "—", "－", "（", "）", "《", "》", "．", "／", "＼",
)

WordFilter = Callable[["PhraseExtract", str], bool]


@dataclass
class Signals:
    """Statistics gathered for one candidate word."""

    frequency: int = 0
    cohesion: float = 0.0
    suffix_entropy: float = 0.0
    prefix_entropy: float = 0.0


def contains_punctuation(word: str) -> bool:
    """Return True if ``word`` contains any punctuation or whitespace mark."""
    return any(mark in word for mark in PUNCTUATIONS)


def default_pre_calculation_filter(extractor: PhraseExtract, word: str) -> bool:
    """Reject only words that were never counted, so every candidate passes."""
    return word not in extractor._signals


def default_post_calculation_filter(extractor: PhraseExtract, word: str) -> bool:
    """Reject words whose cohesion and entropy scores are too low."""
    signals = extractor.signal(word)
    log_probability = extractor.log_probability(word)
    cohesion_score = signals.cohesion - log_probability * 0.5
    entropy_score = (
        math.sqrt(signals.prefix_entropy * (signals.suffix_entropy + 1))
        - log_probability * 0.85
    )
    accept = (
        cohesion_score > 9
        and entropy_score > 11
        and signals.prefix_entropy > 0.5
        and signals.suffix_entropy > 0
        and signals.prefix_entropy + signals.suffix_entropy > 3
    )
    return not accept


def _entropy(choices: Counter[str]) -> float:
    total = sum(choices.values())
    entropy = 0.0
    for count in choices.values():
        probability = count / total
        entropy += probability * math.log(probability)
    return -entropy if entropy != 0 else 0.0


def _reversed(text: str) -> str:
    return text[::-1]


class PhraseExtract:
    """Extracts likely phrases from a text by n-gram statistics."""

    def __init__(
        self,
        word_min_length: int = 2,
        word_max_length: int = 2,
        prefix_set_length: int = 1,
        suffix_set_length: int = 1,
    ) -> None:
        self.word_min_length = word_min_length
        self.word_max_length = word_max_length
        self.prefix_set_length = prefix_set_length
        self.suffix_set_length = suffix_set_length
        self.reset()

    def reset(self) -> None:
        """Forget the text, all results and any custom filters."""
        self._prefixes_extracted = False
        self._suffixes_extracted = False
        self._frequencies_calculated = False
        self._word_candidates_extracted = False
        self._cohesions_calculated = False
        self._prefix_entropies_calculated = False
        self._suffix_entropies_calculated = False
        self.words_selected = False
        self.total_occurrence = 0
        self._log_total_occurrence = 0.0
        self.prefixes: list[str] = []
        self.suffixes: list[str] = []
        self.word_candidates: list[str] = []
        self.words: list[str] = []
        self._signals: dict[str, Signals] = {}
        self.full_text = ""
        self.pre_calculation_filter: WordFilter = default_pre_calculation_filter
        self.post_calculation_filter: WordFilter = default_post_calculation_filter

    def set_full_text(self, text: str) -> None:
        """Set the text to extract phrases from."""
        self.full_text = text

    def extract(self, text: str) -> list[str]:
        """Run the whole pipeline on ``text`` and return the selected words."""
        self.set_full_text(text)
        self.extract_suffixes()
        self.calculate_frequency()
        self.calculate_suffix_entropy()
        self.release_suffixes()
        self.extract_prefixes()
        self.calculate_prefix_entropy()
        self.release_prefixes()
        self.extract_word_candidates()
        self.calculate_cohesions()
        self.select_words()
        return self.words

    def release_suffixes(self) -> None:
        self.suffixes = []

    def release_prefixes(self) -> None:
        self.prefixes = []

    def extract_suffixes(self) -> None:
        """Collect the bounded-length suffixes of the text, sorted."""
        window = self.word_max_length + self.suffix_set_length
        text = self.full_text
        self.suffixes = sorted(text[start:start + window] for start in range(len(text)))
        self._suffixes_extracted = True

    def extract_prefixes(self) -> None:
        """Collect the bounded-length prefixes of the text, sorted from the end."""
        window = self.prefix_set_length + self.word_max_length
        text = self.full_text
        self.prefixes = sorted(
            (text[max(0, end - window):end] for end in range(len(text), 0, -1)),
            key=_reversed,
        )
        self._prefixes_extracted = True

    def calculate_frequency(self) -> None:
        """Count every n-gram up to the maximum word length."""
        if not self._suffixes_extracted:
            self.extract_suffixes()
        for suffix in self.suffixes:
            for length in range(1, min(len(suffix), self.word_max_length) + 1):
                self._signals.setdefault(suffix[:length], Signals()).frequency += 1
                self.total_occurrence += 1
        self._log_total_occurrence = (
            math.log(self.total_occurrence) if self.total_occurrence else -math.inf
        )
        self._signals = dict(sorted(self._signals.items()))
        self._frequencies_calculated = True

    def extract_word_candidates(self) -> None:
        """Select candidate words, ordered by frequency then text."""
        if not self._frequencies_calculated:
            self.calculate_frequency()
        candidates = [
            word
            for word in self._signals
            if len(word) >= self.word_min_length
            and not contains_punctuation(word)
            and not self.pre_calculation_filter(self, word)
        ]
        candidates.sort(key=lambda word: (-self._signals[word].frequency, word))
        self.word_candidates.extend(candidates)
        self._word_candidates_extracted = True

    def calculate_suffix_entropy(self) -> None:
        """Compute the entropy of the characters following each word."""
        if not self._suffixes_extracted:
            self.extract_suffixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, entropy in self._adjacent_entropies(
            self.suffixes, self.suffix_set_length, following=True
        ):
            self._signal(word).suffix_entropy = entropy
        self._suffix_entropies_calculated = True

    def calculate_prefix_entropy(self) -> None:
        """Compute the entropy of the characters preceding each word."""
        if not self._prefixes_extracted:
            self.extract_prefixes()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word, entropy in self._adjacent_entropies(
            self.prefixes, self.prefix_set_length, following=False
        ):
            self._signal(word).prefix_entropy = entropy
        self._prefix_entropies_calculated = True

    def calculate_cohesions(self) -> None:
        """Compute the cohesion of every word candidate."""
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._frequencies_calculated:
            self.calculate_frequency()
        for word in self.word_candidates:
            self._signal(word).cohesion = self._calculate_cohesion(word)
        self._cohesions_calculated = True

    def select_words(self) -> None:
        """Keep the candidates that the post-calculation filter accepts."""
        if not self._word_candidates_extracted:
            self.extract_word_candidates()
        if not self._cohesions_calculated:
            self.calculate_cohesions()
        if not self._prefix_entropies_calculated:
            self.calculate_prefix_entropy()
        if not self._suffix_entropies_calculated:
            self.calculate_suffix_entropy()
        self.words.extend(
            word for word in self.word_candidates
            if not self.post_calculation_filter(self, word)
        )
        self.words_selected = True

    def signal(self, word: str) -> Signals:
        """Return the statistics of ``word``; KeyError if it was never counted."""
        return self._signal(word)

    def cohesion(self, word: str) -> float:
        return self._signal(word).cohesion

    def entropy(self, word: str) -> float:
        return self.suffix_entropy(word) + self.prefix_entropy(word)

    def suffix_entropy(self, word: str) -> float:
        return self._signal(word).suffix_entropy

    def prefix_entropy(self, word: str) -> float:
        return self._signal(word).prefix_entropy

    def frequency(self, word: str) -> int:
        return self._signal(word).frequency

    def probability(self, word: str) -> float:
        return self.frequency(word) / self.total_occurrence

    def log_probability(self, word: str) -> float:
        return math.log(self.frequency(word)) - self._log_total_occurrence

    def _signal(self, word: str) -> Signals:
        try:
            return self._signals[word]
        except KeyError:
            raise KeyError(f"unknown word: {word!r}") from None

    def _pmi(self, word: str, left: str, right: str) -> float:
        return (
            self.log_probability(word)
            - self.log_probability(left)
            - self.log_probability(right)
        )

    def _calculate_cohesion(self, word: str) -> float:
        return min(
            (self._pmi(word, word[:split], word[split:]) for split in range(1, len(word))),
            default=math.inf,
        )

    def _adjacent_entropies(
        self, presuffixes: Iterable[str], set_length: int, following: bool
    ) -> Iterator[tuple[str, float]]:
        presuffixes = list(presuffixes)
        for length in range(max(self.word_min_length, 1), self.word_max_length + 1):
            if following:
                def word_of(text: str, n: int = length) -> str:
                    return text[:n]

                def adjacent_of(text: str, n: int = length) -> str:
                    return text[n:n + set_length]
            else:
                def word_of(text: str, n: int = length) -> str:
                    return text[-n:]

                def adjacent_of(text: str, n: int = length) -> str:
                    end = len(text) - n
                    return text[end - set_length:end]

            long_enough = (text for text in presuffixes if len(text) >= length)
            for word, group in groupby(long_enough, key=word_of):
                choices = Counter(
                    adjacent_of(text) for text in group if length + set_length <= len(text)
                )
                yield word, _entropy(choices)