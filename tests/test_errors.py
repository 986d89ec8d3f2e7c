"""Tests for custom exceptions."""

from __future__ import annotations

from pathlib import Path

import pytest

from kepler_syssim.errors import CatalogReadError, InvariantViolationError


class TestCatalogReadError:
    """Tests for CatalogReadError exception."""

    def test_basic(self) -> None:
        exc = CatalogReadError("data/koi.csv", "bad header")
        assert exc.path == Path("data/koi.csv")
        assert exc.reason == "bad header"
        assert "koi.csv" in str(exc)
        assert "bad header" in str(exc)

    def test_raise_and_catch(self) -> None:
        with pytest.raises(CatalogReadError) as exc_info:
            raise CatalogReadError("koi.pkl", "truncated")
        assert exc_info.value.reason == "truncated"


class TestInvariantViolationError:
    def test_is_assertion_error(self) -> None:
        exc = InvariantViolationError("buffer too small", buffer_size=2, num_targets=3)
        assert isinstance(exc, AssertionError)
        assert exc.context == {"buffer_size": 2, "num_targets": 3}
        assert str(exc) == "buffer too small"
