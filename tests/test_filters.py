"""Unit tests for the filters module."""

from __future__ import annotations

from envlayer.core.filters import flatten, iter_hierarchical, normalize_key


class TestIterHierarchical:
    """Test suite for iter_hierarchical."""

    def test_flat(self):
        """Test a flat dictionary passes through."""
        assert list(iter_hierarchical({"a": 1, "b": "x"})) == [("a", 1), ("b", "x")]

    def test_nested(self):
        """Test nested dictionaries use dot keys."""
        data = {"db": {"host": "h", "pool": {"size": 5}}}
        assert dict(iter_hierarchical(data)) == {"db.host": "h", "db.pool.size": 5}

    def test_lists_use_index_keys(self):
        """Test list items are keyed by index."""
        data = {"hosts": ["a", {"name": "b"}]}
        assert dict(iter_hierarchical(data)) == {"hosts.0": "a", "hosts.1.name": "b"}

    def test_empty_containers_produce_nothing(self):
        """Test empty dicts and lists contribute no keys."""
        assert dict(iter_hierarchical({"a": {}, "b": [], "c": None})) == {"c": None}

    def test_depth_limit(self):
        """Test depth stops flattening."""
        data = {"a": {"b": {"c": 1}}}
        assert dict(iter_hierarchical(data, depth=1)) == {"a.b": {"c": 1}}
        assert dict(iter_hierarchical(data, depth=0)) == {"a": {"b": {"c": 1}}}

    def test_negative_depth(self):
        """Test negative depth yields nothing."""
        assert list(iter_hierarchical({"a": 1}, depth=-1)) == []

    def test_parent_prefix(self):
        """Test an explicit parent prefix."""
        assert dict(iter_hierarchical({"a": 1}, parent="root")) == {"root.a": 1}


class TestFlatten:
    def test_flatten(self):
        assert flatten({"a": {"b": [1, 2]}}) == {"a.b.0": 1, "a.b.1": 2}


class TestNormalizeKey:
    """Test suite for normalize_key."""

    def test_double_underscore(self):
        assert normalize_key("Logging__LogLevel__Default") == "Logging.LogLevel.Default"

    def test_colon(self):
        assert normalize_key("Logging:LogLevel") == "Logging.LogLevel"

    def test_plain(self):
        assert normalize_key("PATH") == "PATH"
        assert normalize_key("a.b") == "a.b"
