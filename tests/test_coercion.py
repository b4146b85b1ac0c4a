"""Unit tests for TypeCoercer."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from argline.config import ParserConfig
from argline.core.coercion import COERCION_TABLE, TypeCoercer
from argline.domain.types import ArgType


@pytest.fixture
def coercer():
    return TypeCoercer()


class TestTypeCoercer:
    """Tests for TypeCoercer."""

    def test_every_type_has_an_entry(self):
        """Test that the coercion table covers the whole enumeration."""
        assert set(COERCION_TABLE) == set(ArgType)

    @pytest.mark.parametrize(
        "arg_type,raw,expected",
        [
            (ArgType.STRING, "hello", "hello"),
            (ArgType.BOOLEAN, "true", True),
            (ArgType.BOOLEAN, "False", False),
            (ArgType.BOOLEAN, "yes", True),
            (ArgType.BOOLEAN, "0", False),
            (ArgType.INTEGER, "42", 42),
            (ArgType.INTEGER, "-7", -7),
            (ArgType.DECIMAL, "10.25", Decimal("10.25")),
            (ArgType.FLOAT, "0.5", 0.5),
            (ArgType.DATETIME, "2024-05-01T10:30:00", datetime(2024, 5, 1, 10, 30)),
            (ArgType.TIMESPAN, "PT1H30M", timedelta(hours=1, minutes=30)),
            (ArgType.STRING_LIST, '"a,b",c', ["a,b", "c"]),
        ],
    )
    def test_convert_success(self, coercer, arg_type, raw, expected):
        """Test successful conversions for each type."""
        conversion = coercer.convert(raw, arg_type)
        assert conversion.ok
        assert conversion.value == expected
        assert conversion.error is None

    @pytest.mark.parametrize(
        "arg_type,raw",
        [
            (ArgType.BOOLEAN, "path"),
            (ArgType.INTEGER, "abc"),
            (ArgType.INTEGER, "1.5"),
            (ArgType.DECIMAL, "ten"),
            (ArgType.FLOAT, "x"),
            (ArgType.DATETIME, "yesterday"),
            (ArgType.TIMESPAN, "soon"),
        ],
    )
    def test_convert_failure(self, coercer, arg_type, raw):
        """Test that bad input is a tagged failure, not an exception."""
        conversion = coercer.convert(raw, arg_type)
        assert not conversion.ok
        assert conversion.value is None
        assert conversion.error

    def test_can_convert(self, coercer):
        """Test can_convert agrees with convert."""
        assert coercer.can_convert("true", ArgType.BOOLEAN)
        assert not coercer.can_convert("maybe", ArgType.BOOLEAN)

    def test_list_uses_configured_separator(self):
        """Test that list coercion follows the parser configuration."""
        coercer = TypeCoercer(ParserConfig(list_separator=";"))
        assert coercer.convert("a;b", ArgType.STRING_LIST).value == ["a", "b"]
