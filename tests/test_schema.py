"""Unit tests for argument specs and the schema sanitizer."""

import pytest

from argline.core.parsers.schema import flag_names, sanitize_schema
from argline.domain.types import ArgType, ArgumentSpec


class TestArgumentSpec:
    """Tests for ArgumentSpec."""

    def test_defaults(self):
        """Test that a bare spec is a required, unnamed string."""
        spec = ArgumentSpec()
        assert spec.name is None
        assert spec.type == ArgType.STRING
        assert spec.is_optional is False

    def test_is_flag(self):
        """Test that only optional booleans are flags."""
        assert ArgumentSpec(name="v", type=ArgType.BOOLEAN, is_optional=True).is_flag
        assert not ArgumentSpec(name="v", type=ArgType.BOOLEAN).is_flag
        assert not ArgumentSpec(name="v", type=ArgType.STRING, is_optional=True).is_flag

    def test_from_declaration(self):
        """Test parsing textual declarations."""
        assert ArgumentSpec.from_declaration("count:integer") == ArgumentSpec(name="count", type=ArgType.INTEGER)
        assert ArgumentSpec.from_declaration("verbose:bool*") == ArgumentSpec(
            name="verbose", type=ArgType.BOOLEAN, is_optional=True
        )
        assert ArgumentSpec.from_declaration("path") == ArgumentSpec(name="path")
        assert ArgumentSpec.from_declaration(":int") == ArgumentSpec(type=ArgType.INTEGER)
        assert ArgumentSpec.from_declaration("items:list*").type == ArgType.STRING_LIST

    def test_from_declaration_rejects_unknown_type(self):
        """Test that an unknown type tag is a ValueError."""
        with pytest.raises(ValueError, match="Unknown argument type"):
            ArgumentSpec.from_declaration("size:huge")

    def test_from_declaration_rejects_empty(self):
        """Test that an empty declaration is a ValueError."""
        with pytest.raises(ValueError):
            ArgumentSpec.from_declaration("*")

    def test_str_round_trips_declaration(self):
        """Test that str() renders the declaration form."""
        spec = ArgumentSpec(name="verbose", type=ArgType.BOOLEAN, is_optional=True)
        assert str(spec) == "verbose:boolean*"
        assert ArgumentSpec.from_declaration(str(spec)) == spec

    def test_type_alias_in_model_validate(self):
        """Test that dict specs may use short type aliases."""
        spec = ArgumentSpec.model_validate({"name": "n", "type": "int"})
        assert spec.type == ArgType.INTEGER

    def test_spec_is_frozen(self):
        """Test that specs cannot be mutated."""
        spec = ArgumentSpec(name="a")
        with pytest.raises(Exception):
            spec.name = "b"


class TestSanitizeSchema:
    """Tests for sanitize_schema()."""

    def test_none_is_empty_schema(self):
        """Test that a missing schema gives an empty list."""
        assert sanitize_schema(None) == []

    def test_unnamed_specs_are_numbered(self):
        """Test that unnamed specs get "0", "1", ... in declaration order."""
        schema = sanitize_schema(
            [
                ArgumentSpec(type=ArgType.INTEGER),
                ArgumentSpec(name="named"),
                ArgumentSpec(is_optional=True),
            ]
        )
        assert [spec.name for spec in schema] == ["0", "named", "1"]
        assert schema[0].type == ArgType.INTEGER
        assert schema[2].is_optional is True

    def test_input_is_not_mutated(self):
        """Test that the caller's specs are left untouched."""
        specs = [ArgumentSpec(type=ArgType.INTEGER)]
        sanitize_schema(specs)
        assert specs[0].name is None

    def test_accepts_declarations_and_dicts(self):
        """Test that textual and dict specs are normalized."""
        schema = sanitize_schema(["src", {"name": "n", "type": "integer", "is_optional": True}])
        assert schema == [
            ArgumentSpec(name="src"),
            ArgumentSpec(name="n", type=ArgType.INTEGER, is_optional=True),
        ]

    def test_duplicate_names_rejected(self):
        """Test that duplicate names are a ValueError."""
        with pytest.raises(ValueError, match="Duplicate"):
            sanitize_schema(["a", "a:int*"])

    def test_unsupported_spec_type(self):
        """Test that arbitrary objects are rejected."""
        with pytest.raises(TypeError):
            sanitize_schema([42])

    def test_flag_names(self):
        """Test that only optional booleans are reported as flags."""
        schema = sanitize_schema(["path", "v:bool*", "strict:bool", "n:int*"])
        assert flag_names(schema) == frozenset({"v"})
