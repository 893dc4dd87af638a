"""Compile global and collection-specific patterns into one ordered rule set.

Rules are evaluated in declaration order and the last matching rule wins,
so a negated rule re-includes whatever an earlier, broader rule excluded.
The compiled matcher is built from the same rendered lines that are written
to the indexer's ignore file, keeping both views of the rules identical.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Final, cast

from pathspec import GitIgnoreSpec

from refrepo.rules.defaults import GLOBAL_IGNORE_PATTERNS
from refrepo.rules.overrides import CollectionIgnores, lookup_collection_ignores
from refrepo.rules.paths import normalize_relative_path

SOURCE_GLOBAL: Final = "global"
SOURCE_COLLECTION: Final = "collection"
SOURCE_CUSTOM: Final = "custom"

SECTION_RULE: Final = "# ==========================================="
FILE_HEADER: Final[tuple[str, ...]] = (
    SECTION_RULE,
    "# AUTO-GENERATED by refrepo ignore build",
    "# Do not edit manually - changes will be overwritten",
    SECTION_RULE,
)


@dataclass(slots=True, frozen=True)
class IgnoreRule:
    """One gitignore-style line with its polarity and provenance."""

    pattern: str
    negated: bool
    source: str
    recursive: bool

    @classmethod
    def parse(cls, line: str, source: str, recursive: bool) -> IgnoreRule:
        """Split a leading negation marker off a raw pattern line."""
        if line.startswith("!"):
            return cls(pattern=line[1:], negated=True, source=source, recursive=recursive)
        return cls(pattern=line, negated=False, source=source, recursive=recursive)

    @property
    def directory_only(self) -> bool:
        """Return True when the rule only matches directories and their contents."""
        return self.pattern.endswith("/")

    def render(self) -> str:
        """Render the rule as a gitignore line; '!' is always the first character."""
        body = f"**/{self.pattern}" if self.recursive else self.pattern
        if self.negated:
            return f"!{body}"
        return body


@dataclass(slots=True, frozen=True)
class RuleSet:
    """Immutable, ordered rule set for one collection."""

    collection_id: str
    rules: tuple[IgnoreRule, ...]
    collection_label: str | None
    spec: GitIgnoreSpec = field(repr=False, compare=False)

    @property
    def rule_count(self) -> int:
        """Return the number of pattern rules, ignoring comments."""
        return len(self.rules)

    def is_excluded(self, relative_path: str, is_dir: bool = False) -> bool:
        """Return True when the rules exclude a collection-relative path."""
        normalized = normalize_relative_path(relative_path)
        is_dir = is_dir or normalized.endswith("/")
        normalized = normalized.rstrip("/")
        if not normalized:
            return False
        if self.spec.match_file(normalized):
            return True
        if is_dir:
            return bool(self.spec.match_file(f"{normalized}/"))
        return False

    def explain(self, relative_path: str, is_dir: bool = False) -> IgnoreRule | None:
        """Return the rule that decided a path's verdict, or None when nothing matched."""
        normalized = normalize_relative_path(relative_path)
        is_dir = is_dir or normalized.endswith("/")
        normalized = normalized.rstrip("/")
        if not normalized:
            return None
        candidates = [normalized]
        if is_dir:
            candidates.insert(0, f"{normalized}/")
        for candidate in candidates:
            result = self.spec.check_file(candidate)
            if result.include is not None and result.index is not None:
                return self.rules[result.index]
        return None

    def lines(self) -> tuple[str, ...]:
        """Return the rendered ignore file as individual lines."""
        output: list[str] = [*FILE_HEADER, "", "# Global ignore rules"]
        output.extend(rule.render() for rule in self.rules if rule.source == SOURCE_GLOBAL)
        collection_rules = [rule for rule in self.rules if rule.source == SOURCE_COLLECTION]
        if collection_rules:
            output.extend(
                ["", SECTION_RULE, f"# Repo-specific: {self.collection_label}", SECTION_RULE]
            )
            output.extend(rule.render() for rule in collection_rules)
        custom_rules = [rule for rule in self.rules if rule.source == SOURCE_CUSTOM]
        if custom_rules:
            output.extend(["", SECTION_RULE, "# Custom ignores", SECTION_RULE])
            output.extend(rule.render() for rule in custom_rules)
        output.append("")
        return tuple(output)

    def to_text(self) -> str:
        """Return the rendered ignore file text, terminated by a newline."""
        return "\n".join(self.lines())


def compile_rule_set(
    collection_id: str,
    *,
    overrides: Mapping[str, CollectionIgnores] | None = None,
    custom_patterns: Sequence[str] = (),
    global_patterns: Sequence[str] = GLOBAL_IGNORE_PATTERNS,
) -> RuleSet:
    """Compile the ordered rule set for a collection.

    An unknown ``collection_id`` is not an error: the result then holds the
    global rules (and any custom patterns) only.
    """
    check_negation_order(global_patterns)
    rules: list[IgnoreRule] = [
        IgnoreRule.parse(line, source=SOURCE_GLOBAL, recursive=True)
        for line in _pattern_lines(global_patterns)
    ]
    entry = lookup_collection_ignores(collection_id, overrides)
    label: str | None = None
    if entry is not None and entry.drop_paths:
        label = entry.label
        rules.extend(
            IgnoreRule.parse(line, source=SOURCE_COLLECTION, recursive=False)
            for line in _pattern_lines(entry.drop_paths)
        )
    rules.extend(
        IgnoreRule.parse(line, source=SOURCE_CUSTOM, recursive=False)
        for line in _pattern_lines(custom_patterns)
    )
    frozen_rules = tuple(rules)
    from_lines = cast("Callable[[Iterable[str]], GitIgnoreSpec]", GitIgnoreSpec.from_lines)
    spec = from_lines([rule.render() for rule in frozen_rules])
    return RuleSet(
        collection_id=collection_id,
        rules=frozen_rules,
        collection_label=label,
        spec=spec,
    )


def check_negation_order(patterns: Sequence[str]) -> None:
    """Raise ValueError when a negation precedes every rule it could override."""
    seen_exclude = False
    for line in _pattern_lines(patterns):
        if not line.startswith("!"):
            seen_exclude = True
            continue
        if not seen_exclude:
            raise ValueError(
                f"Negated pattern '{line}' must follow the broader rule it overrides."
            )


def _pattern_lines(patterns: Iterable[str]) -> list[str]:
    output: list[str] = []
    for raw in patterns:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        output.append(line)
    return output
