"""Tests for the error taxonomy and failure reporting."""

from __future__ import annotations

import logging

import pytest

from assertkit.errors import (
    AssertKitError,
    ErrorTypeDefect,
    InvalidArgumentError,
    UnknownAssertionError,
    build_error,
    report_failure,
)
from tests.conftest import CustomError, NotAnError


class TestTaxonomy:
    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, AssertKitError)

    def test_defect_is_type_error(self) -> None:
        assert issubclass(ErrorTypeDefect, TypeError)
        assert not issubclass(ErrorTypeDefect, InvalidArgumentError)

    def test_unknown_assertion_message(self) -> None:
        error = UnknownAssertionError("foo")
        assert str(error) == "No such method: foo"
        assert error.name == "foo"
        assert isinstance(error, AttributeError)


class TestBuildError:
    def test_exception_class(self) -> None:
        error = build_error("boom", CustomError)
        assert isinstance(error, CustomError)
        assert str(error) == "boom"

    def test_factory(self) -> None:
        error = build_error("boom", lambda msg: RuntimeError(f"wrapped: {msg}"))
        assert isinstance(error, RuntimeError)
        assert str(error) == "wrapped: boom"

    def test_non_exception_class_is_defect(self) -> None:
        with pytest.raises(ErrorTypeDefect, match="Expected an instance of Exception"):
            build_error("boom", NotAnError)  # type: ignore[arg-type]

    def test_non_callable_is_defect(self) -> None:
        with pytest.raises(ErrorTypeDefect):
            build_error("boom", "ValueError")  # type: ignore[arg-type]

    def test_class_that_rejects_message_is_defect(self) -> None:
        class NeedsTwo(Exception):
            def __init__(self, first: str, second: str) -> None:
                super().__init__(first, second)

        with pytest.raises(ErrorTypeDefect, match="cannot be built from a message"):
            build_error("boom", NeedsTwo)

    def test_factory_returning_non_exception_is_defect(self) -> None:
        with pytest.raises(ErrorTypeDefect):
            build_error("boom", lambda msg: msg)  # type: ignore[arg-type,return-value]


class TestReportFailure:
    def test_raises_default_type(self) -> None:
        with pytest.raises(InvalidArgumentError, match="^bad value$"):
            report_failure("bad value")

    def test_raises_requested_type(self) -> None:
        with pytest.raises(CustomError, match="bad value"):
            report_failure("bad value", CustomError)

    def test_logs_failure_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="assertkit"):
            with pytest.raises(InvalidArgumentError):
                report_failure("bad value")
        records = [r for r in caplog.records if r.name == "assertkit.errors"]
        assert records
        assert records[0].error_type == "InvalidArgumentError"
