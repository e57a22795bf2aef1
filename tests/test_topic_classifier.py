from __future__ import annotations

import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from codelogics.models.enums import TopicCategory
from codelogics.services.topic_classifier import classify_topic, is_development_related


@pytest.mark.parametrize(
    "prompt",
    [
        "How do I reverse a linked list?",
        "Explain quicksort",
        "Write a Python script",
        "Fix this BUG please",
        "Set up Docker for my app",
    ],
)
def test_development_prompts_are_recognised(prompt: str) -> None:
    assert is_development_related(prompt) is True


@pytest.mark.parametrize(
    "prompt",
    ["what's the weather today", "Tell me a joke", "Who won the match?"],
)
def test_other_prompts_are_not_development(prompt: str) -> None:
    assert is_development_related(prompt) is False


def test_substring_matching_is_deliberately_coarse() -> None:
    # "go" inside "good" and "java" inside "javascript" both count.
    assert is_development_related("a good morning") is True
    assert is_development_related("JAVASCRIPT") is True


@pytest.mark.parametrize(
    ("prompt", "category"),
    [
        ("Implement a Binary Search Tree", TopicCategory.BINARY_SEARCH_TREE),
        ("bst insert", TopicCategory.BINARY_SEARCH_TREE),
        ("Explain quicksort", TopicCategory.SORTING_ALGORITHM),
        ("quick sort in place", TopicCategory.SORTING_ALGORITHM),
        ("React component with useState", TopicCategory.UI_COMPONENT_WITH_STATE),
        ("react useEffect loop", TopicCategory.UI_COMPONENT_WITH_STATE),
        ("REST API with Express", TopicCategory.REST_API_CRUD),
        ("node api for users", TopicCategory.REST_API_CRUD),
        ("help me with css grid", TopicCategory.GENERIC),
    ],
)
def test_classify_topic(prompt: str, category: TopicCategory) -> None:
    assert classify_topic(prompt) is category


def test_react_alone_is_not_a_component_question() -> None:
    assert classify_topic("what is react") is TopicCategory.GENERIC


def test_rest_without_server_framework_is_generic() -> None:
    assert classify_topic("design a rest api") is TopicCategory.GENERIC


def test_earlier_rules_win_when_topics_overlap() -> None:
    prompt = "quicksort a bst from my react component via an express api"

    assert classify_topic(prompt) is TopicCategory.BINARY_SEARCH_TREE
    assert classify_topic(prompt) is classify_topic(prompt)
