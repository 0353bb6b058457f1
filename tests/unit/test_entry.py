"""Unit tests for the builder entry points and the raw escape hatch."""

import logging
import warnings

import pytest
from cel_builder import builder, raw
from cel_builder.chain import LeftInitializer
from cel_builder.values import Expression


class TestBuilderSingleton:
    """The shared starting state."""

    def test_is_left_initializer(self) -> None:
        assert type(builder) is LeftInitializer

    def test_starts_empty(self) -> None:
        assert builder.literals == ("",)
        assert builder.arity == 0

    def test_same_object_everywhere(self) -> None:
        from cel_builder import entry

        assert entry.builder is builder


class TestRaw:
    """raw() wraps text verbatim and is deprecated."""

    @pytest.mark.parametrize("text", ["foo == bar", "", 'a == "b" && c', "size(x) > 0"])
    def test_round_trip(self, text: str) -> None:
        with pytest.deprecated_call():
            expr = raw(text)
        assert isinstance(expr, Expression)
        assert str(expr) == text

    def test_warning_can_be_disabled(self, override_settings) -> None:
        override_settings(warn_on_raw=False)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert str(raw("x")) == "x"

    def test_logs_usage(self, override_settings, caplog: pytest.LogCaptureFixture) -> None:
        override_settings(warn_on_raw=False)
        with caplog.at_level(logging.DEBUG, logger="cel_builder"):
            raw("x > 1")
        assert "Creating raw expression: x > 1" in caplog.text

    def test_raw_as_operand(self, override_settings) -> None:
        override_settings(warn_on_raw=False)
        chain = builder.a(raw("size(items)")).is_greater.a()
        assert str(chain.build(0)) == "size(items) > 0"
