"""Tests for babel_compat module - centralized Babel dependency handling."""

from __future__ import annotations

import pytest

from polexengine.core import babel_compat
from polexengine.core.babel_compat import BabelImportError, is_babel_available, require_babel


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_returns_bool(self) -> None:
        """is_babel_available returns a boolean."""
        assert isinstance(is_babel_available(), bool)

    def test_babel_is_available_in_test_environment(self) -> None:
        """Babel is installed through the test extra."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise_when_available(self) -> None:
        """require_babel passes silently when Babel is installed."""
        require_babel("test_feature")


class TestBabelMissing:
    """Behavior when Babel cannot be imported."""

    def test_require_babel_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing Babel raises BabelImportError naming the feature."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)

        with pytest.raises(BabelImportError, match="to_babel_message") as exc_info:
            require_babel("to_babel_message")

        assert exc_info.value.feature == "to_babel_message"
        assert "pip install polexengine[babel]" in str(exc_info.value)

    def test_babel_import_error_is_import_error(self) -> None:
        """Callers can catch it as ImportError."""
        assert issubclass(BabelImportError, ImportError)
