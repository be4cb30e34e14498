"""Tests for netabako/topics/base.py — Topic, normalize_title, TopicSource."""

import dataclasses

import pytest

from netabako.topics.base import (
    SOURCE_FEED,
    FormatError,
    SourceError,
    StructureChangedError,
    Topic,
    TopicSource,
    TransportError,
    normalize_title,
)


class TestTopic:
    def test_creation(self):
        t = Topic(title="Test", source=SOURCE_FEED)
        assert t.title == "Test"
        assert t.note == ""
        assert t.rank == 0

    def test_immutable(self):
        t = Topic(title="Test", source=SOURCE_FEED, rank=1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.rank = 2

    def test_key(self):
        assert Topic(title="  Hello World ", source=SOURCE_FEED).key == "hello world"


class TestNormalizeTitle:
    def test_case_and_whitespace(self):
        assert normalize_title("Foo ") == normalize_title("foo")

    def test_blank(self):
        assert normalize_title(" \t\n") == ""

    def test_japanese_unchanged(self):
        assert normalize_title(" 大谷翔平 ") == "大谷翔平"


class TestErrors:
    def test_hierarchy(self):
        for cls in (TransportError, FormatError, StructureChangedError):
            assert issubclass(cls, SourceError)


class TestTopicSourceABC:
    def test_cannot_instantiate_abc(self):
        with pytest.raises(TypeError):
            TopicSource()

    def test_concrete_class(self):
        class TestSource(TopicSource):
            name = "test"

            def fetch_topics(self, limit=10, deadline=None):
                return [Topic(title="T", source="test", rank=1)]

        assert len(TestSource().fetch_topics()) == 1
