"""Ignore rule tables and the rule-set compiler."""

from .compiler import (
    SOURCE_COLLECTION,
    SOURCE_CUSTOM,
    SOURCE_GLOBAL,
    IgnoreRule,
    RuleSet,
    check_negation_order,
    compile_rule_set,
)
from .defaults import GLOBAL_IGNORE_PATTERNS
from .overrides import (
    BUILTIN_COLLECTION_IGNORES,
    DEFAULT_OVERRIDE_TABLE,
    CollectionIgnores,
    build_override_table,
    lookup_collection_ignores,
)
from .paths import is_hidden_path, normalize_relative_path, to_posix_path

__all__ = [
    "BUILTIN_COLLECTION_IGNORES",
    "CollectionIgnores",
    "DEFAULT_OVERRIDE_TABLE",
    "GLOBAL_IGNORE_PATTERNS",
    "IgnoreRule",
    "RuleSet",
    "SOURCE_COLLECTION",
    "SOURCE_CUSTOM",
    "SOURCE_GLOBAL",
    "build_override_table",
    "check_negation_order",
    "compile_rule_set",
    "is_hidden_path",
    "lookup_collection_ignores",
    "normalize_relative_path",
    "to_posix_path",
]
