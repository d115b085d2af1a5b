"""Tests for the scalar registry."""

import pytest

from gql_jddf.core.scalars import BUILTIN_SCALARS, ScalarRegistry, parse_scalar_mapping


class TestScalarRegistry:
    """Tests for ScalarRegistry."""

    def test_default_mappings_registered(self):
        registry = ScalarRegistry()
        for name, jddf_type in BUILTIN_SCALARS.items():
            assert registry.get(name) == jddf_type

    def test_get_nonexistent(self):
        registry = ScalarRegistry()
        assert registry.get("DateTime") is None
        assert not registry.has("DateTime")

    def test_register_custom(self):
        registry = ScalarRegistry()
        registry.register("Long", "uint32")
        assert registry.has("Long")
        assert registry.get("Long") == "uint32"

    def test_override_builtin(self):
        registry = ScalarRegistry()
        registry.register("ID", "uint32")
        assert registry.get("ID") == "uint32"

    def test_rejects_unknown_type(self):
        registry = ScalarRegistry()
        with pytest.raises(ValueError, match="Unknown JDDF type"):
            registry.register("Money", "decimal")

    def test_registries_are_independent(self):
        first = ScalarRegistry()
        first.register("DateTime", "timestamp")
        assert not ScalarRegistry().has("DateTime")


class TestParseScalarMapping:
    """Tests for NAME=TYPE parsing."""

    def test_valid(self):
        assert parse_scalar_mapping("DateTime=timestamp") == ("DateTime", "timestamp")

    def test_strips_whitespace(self):
        assert parse_scalar_mapping(" Date = string ") == ("Date", "string")

    @pytest.mark.parametrize("text", ["DateTime", "=string", "DateTime="])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_scalar_mapping(text)
