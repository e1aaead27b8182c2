"""
Personal Name Case Normalisation Module

This module detects and repairs the capitalisation and spacing of personal names written in
mixed or inconsistent case, following the HURIDOCS manual on recording names of persons
(https://www.huridocs.org/resource/how-to-record-names-of-persons/).

## Overview

The core functionality is provided by the `NameNormaliser` class, which makes two decisions:

1. **Detection**: Is the name already correctly cased? (`is_normalised`)
2. **Rewriting**: If not, produce the canonical form. (`normalise`)

Names that already look well formed are returned with their spacing cleaned but their case
untouched, so deliberate capitalisation such as "Anne Maclaren" survives.

## Conventions

- **Title case**: every word starts with an upper-case letter ("John O'Farrell", "Arron James-Smith")
- **Particles**: nobiliary and patronymic particles stay lower-case ("Hendrik van der Post",
  "Sergio de la Peña", "Ernst aus'm Weerth")
- **Arabic articles**: "al-" and "el-" stay lower-case ("Mitchel el-Howie")
- **Gaelic prefixes**: the letter after "Mac"/"Mc" is capitalised ("Martin MacBride")
- **Whitespace**: runs collapse to one space, ends are trimmed

## Detection

A correctly cased name has one upper-case initial per word, except for particle words, and no
redundant whitespace. The detector checks this with a single identity:

    word_count + extra_whitespace - title_case_word_count - exception_word_count == 0

Any name with two or more consecutive capitals ("MCBRIDE") is never considered normalised.
`analyse()` returns the four counts so a caller can see which term broke the identity.

## Rewriting

Four rules run in a fixed order, each on the previous output:

1. **title_case**: lower-case everything, upper-case each word-initial letter
2. **lower_case_particles**: force listed particles back to lower case
3. **lower_case_prefixes**: force "al"/"el" before a hyphen to lower case
4. **capitalise_after_mac**: upper-case the letter after "Mac"/"Mc"

Apostrophes break words, so "o'farrell" becomes "O'Farrell". The detector accepts a lower-case
"d'" prefix but the rewriter has no rule for it: "BARBEY D'AUREVILLY" becomes
"Barbey D'Aurevilly", while "Barbey d'Aurevilly" is left alone.

## Usage Examples

```python
from namecase import normalise, is_normalised

normalise("HENDRIK VAN DER  POST")
# Returns: "Hendrik van der Post"

normalise(" s. du toit")
# Returns: "S. du Toit"

is_normalised("Martin MacBride")
# Returns: True

normalise("-$+ @$)(*&^^@*")
# Returns: ""

# Extra particles with a dedicated normaliser instance
from namecase.names import NameCaseConfig, NameNormaliser

normaliser = NameNormaliser(NameCaseConfig.create_default().with_extra_particles(["da", "dos"]))
normaliser.normalise("MARIA DOS SANTOS")
# Returns: "Maria dos Santos"
```

## Error Handling

Every public function is total over `str` and `None`. Absent, blank and punctuation-only input
yields `""` from `normalise` and `False` from `is_normalised`; nothing raises.

## Thread Safety

Configuration and rule tables are frozen dataclasses holding precompiled patterns. All working
state is local to a call, so a single normaliser can be shared between threads.
"""

from __future__ import annotations
import re
import string
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from namecase.names_data import (
    LOWER_CASE_PARTICLES,
    LOWER_CASE_PREFIXES,
    DETECTOR_PREFIXES,
    CAPITALISE_AFTER_PREFIXES,
    COMBINING_MARK_RANGES,
)


# ════════════════════════════════════════════════════════════════════════════════
# PATTERN COMPONENTS
# ════════════════════════════════════════════════════════════════════════════════

# Letters, digits, underscore and combining diacritics
_WORD_CHARS = r"\w" + "".join(f"\\u{ord(start):04x}-\\u{ord(end):04x}" for start, end in COMBINING_MARK_RANGES)
_WORD_PATTERN = f"[{_WORD_CHARS}]+"

# Zero-width: not preceded by a word character
_WORD_START = f"(?<![{_WORD_CHARS}])"

_PUNCTUATION = frozenset(string.punctuation)


def _alternation(fragments: Iterable[str]) -> str:
    return "|".join(fragments)


def _particle_fragment(particle: str) -> str:
    """Turn a plain particle such as "de los" into a regex fragment."""
    return r"\s".join(re.escape(part) for part in particle.split())


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CaseAnalysis:
    """Breakdown of the detector's arithmetic for a single name."""

    word_count: int = 0
    extra_whitespace: int = 0
    title_case_word_count: int = 0
    exception_word_count: int = 0
    sequential_caps: bool = False
    skipped: bool = False  # blank or punctuation-only input

    @classmethod
    def not_applicable(cls) -> "CaseAnalysis":
        return cls(skipped=True)

    @classmethod
    def with_sequential_caps(cls) -> "CaseAnalysis":
        return cls(sequential_caps=True)

    @property
    def residual(self) -> int:
        return self.word_count + self.extra_whitespace - self.title_case_word_count - self.exception_word_count

    @property
    def is_normalised(self) -> bool:
        if self.skipped or self.sequential_caps:
            return False
        return self.residual == 0


@dataclass(frozen=True)
class RewriteRule:
    """A single rewrite step: optional whole-string preparation, then a pattern substitution."""

    name: str
    pattern: re.Pattern[str]
    replace: Callable[[re.Match[str]], str]
    prepare: Optional[Callable[[str], str]] = None

    def apply(self, text: str) -> str:
        if self.prepare is not None:
            text = self.prepare(text)
        return self.pattern.sub(self.replace, text)


def _upper(match: re.Match[str]) -> str:
    return match.group().upper()


def _lower(match: re.Match[str]) -> str:
    return match.group().lower()


def _upper_last(match: re.Match[str]) -> str:
    text = match.group()
    return text[:-1] + text[-1].upper()


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NameCaseConfig:
    """Immutable rule table: the particle list and every precompiled pattern."""

    particles: Tuple[str, ...]

    # Counting patterns (detector)
    word_pattern: re.Pattern[str]
    title_case_word_pattern: re.Pattern[str]
    sequential_caps_pattern: re.Pattern[str]
    unnecessary_whitespace_pattern: re.Pattern[str]
    rule_exceptions_pattern: re.Pattern[str]

    # Whitespace collapsing
    whitespace_pattern: re.Pattern[str]

    # Ordered rewrite rules (normaliser)
    rewrite_rules: Tuple[RewriteRule, ...]

    @classmethod
    def create_default(cls) -> "NameCaseConfig":
        """Factory method for the standard HURIDOCS rule table."""
        return cls.from_particles(LOWER_CASE_PARTICLES)

    @classmethod
    def from_particles(cls, particles: Tuple[str, ...]) -> "NameCaseConfig":
        """Compile every pattern for the given particle fragments (order is alternation order)."""
        particle_alternation = _alternation(particles)
        prefix_alternation = _alternation(LOWER_CASE_PREFIXES)
        detector_prefix_alternation = _alternation(re.escape(prefix) for prefix in DETECTOR_PREFIXES)
        mac_alternation = _alternation(CAPITALISE_AFTER_PREFIXES)

        rewrite_rules = (
            RewriteRule(
                name="title_case",
                pattern=re.compile(_WORD_START + "[a-z]"),
                replace=_upper,
                prepare=str.lower,
            ),
            RewriteRule(
                name="lower_case_particles",
                pattern=re.compile(rf"(?<!\S)(?:{particle_alternation})(?!\S)", re.IGNORECASE),
                replace=_lower,
            ),
            RewriteRule(
                name="lower_case_prefixes",
                pattern=re.compile(rf"(?<=\s)(?:{prefix_alternation})(?=-[a-z])", re.IGNORECASE),
                replace=_lower,
            ),
            RewriteRule(
                name="capitalise_after_mac",
                pattern=re.compile(rf"(?:{mac_alternation})[a-z]", re.IGNORECASE),
                replace=_upper_last,
            ),
        )

        return cls(
            particles=tuple(particles),
            word_pattern=re.compile(_WORD_PATTERN),
            title_case_word_pattern=re.compile(_WORD_START + "[A-Z]"),
            sequential_caps_pattern=re.compile(r"[A-Z]{2,}"),
            unnecessary_whitespace_pattern=re.compile(r"(?<=\s)\s|^\s|\s$"),
            # Case-sensitive: only lower-case particles and prefixes count as exceptions
            rule_exceptions_pattern=re.compile(
                rf"(?<=\s)(?:{particle_alternation})(?=\s)|(?<=\s)(?:{detector_prefix_alternation})(?=[A-Za-z])"
            ),
            whitespace_pattern=re.compile(r"\s+"),
            rewrite_rules=rewrite_rules,
        )

    def with_particles(self, particles: Iterable[str]) -> "NameCaseConfig":
        """Immutable update: replace the particle list with plain particles (e.g. "de los").

        Multi-word particles are placed before shorter ones whatever order they are given in.
        """
        return NameCaseConfig.from_particles(self._accept_particles(particles, existing=()))

    def with_extra_particles(self, particles: Iterable[str]) -> "NameCaseConfig":
        """
        Immutable update: add plain particles ahead of the current ones.

        Multi-word particles are placed before shorter ones so "de los" wins over "de".
        """
        extras = self._accept_particles(particles, existing=self.particles)
        if not extras:
            return self
        return NameCaseConfig.from_particles(extras + self.particles)

    def rule(self, name: str) -> RewriteRule:
        for rewrite_rule in self.rewrite_rules:
            if rewrite_rule.name == name:
                return rewrite_rule
        raise KeyError(f"No rewrite rule named '{name}'")

    def _accept_particles(self, particles: Iterable[str], existing: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = {fragment.lower() for fragment in existing}
        accepted: List[str] = []
        for particle in particles:
            if not particle or not particle.strip():
                logging.warning(f"Ignoring blank particle {particle!r}")
                continue
            fragment = _particle_fragment(particle.lower())
            if fragment in seen:
                logging.warning(f"Ignoring duplicate particle '{particle}'")
                continue
            seen.add(fragment)
            accepted.append(fragment)
        # Multi-word particles first, so "de los" is tried before "de"
        return tuple(sorted(accepted, key=lambda fragment: fragment.count(r"\s"), reverse=True))


# ════════════════════════════════════════════════════════════════════════════════
# GUARDS
# ════════════════════════════════════════════════════════════════════════════════


def is_blank(text: Optional[str]) -> bool:
    """True for None or a string that is empty after stripping."""
    return text is None or not text.strip()


def is_all_punctuation(text: Optional[str]) -> bool:
    """True for None or a string made only of ASCII punctuation and whitespace."""
    if text is None:
        return True
    return all(char in _PUNCTUATION or char.isspace() for char in text)


# ════════════════════════════════════════════════════════════════════════════════
# NORMALISER
# ════════════════════════════════════════════════════════════════════════════════


class NameNormaliser:
    """Capitalisation detector and rewriter for personal names."""

    def __init__(self, config: Optional[NameCaseConfig] = None):
        self._config = config or NameCaseConfig.create_default()

    @property
    def config(self) -> NameCaseConfig:
        return self._config

    def normalise_whitespace_to_empty(self, text: Optional[str]) -> str:
        """Collapse whitespace runs to a single space and trim. None gives ""."""
        if text is None:
            return ""
        return self._config.whitespace_pattern.sub(" ", text).strip()

    def normalise(self, name: Optional[str]) -> str:
        """
        Fix the spacing of a name and normalise its capitalisation.

        Whitespace is always collapsed. Case rules are applied only when the cleaned name is not
        already normalised, so well-formed names keep any stylised capitalisation.

        Args:
            name: The name with mixed case and additional white space

        Returns:
            The normalised name, or "" for None, blank or punctuation-only input
        """
        if is_blank(name) or is_all_punctuation(name):
            return ""

        name = self.normalise_whitespace_to_empty(name)

        if self.is_normalised(name):
            logging.debug("Name already normalised: '%s'", name)
            return name

        return self.rewrite(name)

    def rewrite(self, name: str) -> str:
        """Apply every rewrite rule in order, regardless of the detector."""
        for rewrite_rule in self._config.rewrite_rules:
            name = rewrite_rule.apply(name)
        logging.debug("Rewrote name to '%s'", name)
        return name

    def is_normalised(self, name: Optional[str]) -> bool:
        """Determine if a name is already in the correct case and has no redundant spacing."""
        return self.analyse(name).is_normalised

    def analyse(self, name: Optional[str]) -> CaseAnalysis:
        """
        Run the detector and return its counts.

        Counting is done on the untrimmed input, so leading, trailing and repeated whitespace
        each add to `extra_whitespace`.
        """
        # The None check narrows the type; is_blank also covers it
        if name is None or is_blank(name) or is_all_punctuation(name):
            return CaseAnalysis.not_applicable()

        config = self._config
        if config.sequential_caps_pattern.search(name):
            return CaseAnalysis.with_sequential_caps()

        exception_word_count = sum(
            self._count(config.word_pattern, match.group()) for match in config.rule_exceptions_pattern.finditer(name)
        )
        return CaseAnalysis(
            word_count=self._count(config.word_pattern, name),
            extra_whitespace=self._count(config.unnecessary_whitespace_pattern, name),
            title_case_word_count=self._count(config.title_case_word_pattern, name),
            exception_word_count=exception_word_count,
        )

    @staticmethod
    def _count(pattern: re.Pattern[str], text: str) -> int:
        return sum(1 for _ in pattern.finditer(text))


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TEST
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test(count: int = 20000, seed: int = 13) -> None:
    """Print throughput of normalise and is_normalised over a generated corpus."""
    import time
    import random

    normaliser = get_default_normaliser()
    rng = random.Random(seed)

    given_names = ["john", "anne", "niccolò", "sergio", "hendrik", "ernst", "maria", "cedric", "lana", "s."]
    surnames = ["o'farrell", "maclaren", "mcbride", "peña", "post", "weerth", "rosa", "beer", "el-howie", "toit"]
    particles = ["van", "van der", "de la", "du", "aus'm", "bin", "del"]

    def random_case(text: str) -> str:
        style = rng.choice((str.lower, str.upper, str.title, lambda s: s))
        return style(text)

    def generate_test_names(size: int) -> List[str]:
        names = []
        for _ in range(size):
            parts = [rng.choice(given_names)]
            if rng.random() < 0.4:
                parts.append(rng.choice(particles))
            parts.append(rng.choice(surnames))
            padding = " " * rng.randint(1, 3)
            names.append(padding.join(random_case(part) for part in parts))
        return names

    names = generate_test_names(count)
    print(f"Generated {len(names)} names")

    for label, operation in (("normalise", normaliser.normalise), ("is_normalised", normaliser.is_normalised)):
        start = time.perf_counter()
        for name in names:
            operation(name)
        elapsed = time.perf_counter() - start
        rate = len(names) / elapsed if elapsed else float("inf")
        print(f"{label}: {len(names)} names in {elapsed:.3f}s ({rate:.0f} names/second)")

    # Idempotence over the generated corpus
    once = [normaliser.normalise(name) for name in names]
    unstable = [name for name in once if normaliser.normalise(name) != name]
    print(f"Unstable names: {len(unstable)}")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global normaliser instance for module-level functions
_default_normaliser: Optional[NameNormaliser] = None


def get_default_normaliser() -> NameNormaliser:
    """Get or create the global normaliser with the default rule table."""
    global _default_normaliser
    if _default_normaliser is None:
        _default_normaliser = NameNormaliser()
    return _default_normaliser


def normalise(name: Optional[str]) -> str:
    """Normalise a name's spacing and capitalisation; "" for None, blank or punctuation-only input."""
    return get_default_normaliser().normalise(name)


def is_normalised(name: Optional[str]) -> bool:
    """True if the name already follows the capitalisation conventions."""
    return get_default_normaliser().is_normalised(name)


def analyse(name: Optional[str]) -> CaseAnalysis:
    """Detector breakdown for a name."""
    return get_default_normaliser().analyse(name)


def normalise_whitespace_to_empty(text: Optional[str]) -> str:
    """Collapse whitespace runs and trim; "" for None."""
    return get_default_normaliser().normalise_whitespace_to_empty(text)


# CLI entry point
if __name__ == "__main__":
    run_performance_test()
