"""Keyword based classification of developer prompts.

Matching is plain substring search on the lower-cased prompt with no
word boundaries, so "java" also matches "javascript" and "go" matches
"good".  The classifier only decides which canned answer is shown, so
this coarseness is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..models.enums import TopicCategory

DEV_KEYWORDS: Tuple[str, ...] = (
    # General programming
    "code", "function", "class", "method", "algorithm", "debug", "error", "bug",
    "programming", "develop", "build", "create", "implement", "syntax", "compile",
    # Languages
    "javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "rust",
    "typescript", "swift", "kotlin", "scala", "html", "css", "sql",
    # Frameworks & libraries
    "react", "angular", "vue", "node", "express", "django", "flask", "spring",
    "laravel", "rails", "nextjs", "nuxt", "svelte", "jquery",
    # Concepts
    "api", "rest", "graphql", "database", "mongodb", "array", "object",
    "loop", "variable", "async", "await", "promise", "callback", "recursion",
    "component", "state", "props",
    # Data structures and algorithms
    "tree", "graph", "linked list", "stack", "queue", "hash", "sorting",
    "search", "binary", "heap", "quicksort", "quick sort", "bst",
    # Tools & practices
    "git", "docker", "test", "deploy", "npm", "yarn", "webpack", "optimization",
    "refactor", "package", "module", "import", "export",
)


@dataclass(frozen=True)
class TopicRule:
    """A category that matches when every keyword group has a hit.

    Each group is a disjunction of substrings; the groups themselves are
    combined with AND.
    """

    category: TopicCategory
    groups: Tuple[Tuple[str, ...], ...]

    def matches(self, text: str) -> bool:
        return all(any(keyword in text for keyword in group) for group in self.groups)


# Checked top to bottom; the first matching rule wins.
TOPIC_RULES: Tuple[TopicRule, ...] = (
    TopicRule(TopicCategory.BINARY_SEARCH_TREE, (("binary search tree", "bst"),)),
    TopicRule(TopicCategory.SORTING_ALGORITHM, (("quicksort", "quick sort"),)),
    TopicRule(
        TopicCategory.UI_COMPONENT_WITH_STATE,
        (("react",), ("component", "hook", "usestate", "useeffect")),
    ),
    TopicRule(TopicCategory.REST_API_CRUD, (("rest", "api"), ("node", "express"))),
)


def is_development_related(prompt: str) -> bool:
    """Return True when the prompt mentions any software development keyword."""
    lower = prompt.lower()
    return any(keyword in lower for keyword in DEV_KEYWORDS)


def classify_topic(prompt: str) -> TopicCategory:
    """Return the first topic whose rule matches the prompt, else ``GENERIC``."""
    lower = prompt.lower()
    for rule in TOPIC_RULES:
        if rule.matches(lower):
            return rule.category
    return TopicCategory.GENERIC
