"""Tests for resolution result and context models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from resloc.core.models import ResolutionContext, ResolutionResult
from resloc.core.types import UNKNOWN_SOURCE

# ============================================================================
# ResolutionResult Tests
# ============================================================================


class TestResolutionResult:
    """Tests for the ResolutionResult model."""

    def test_solved(self):
        """Solved results carry the handle and source."""
        result = ResolutionResult.solved("/tmp/x.nfo", "file:///tmp/x.nfo", "LocalLoader")
        assert result.resolved is True
        assert result.handle == "file:///tmp/x.nfo"
        assert result.source_entity == "LocalLoader"
        assert result.search_path == "/tmp/x.nfo"

    def test_unresolved(self):
        """Unresolved results have no handle and an unknown source."""
        result = ResolutionResult.unresolved("/tmp/x.nfo")
        assert result.resolved is False
        assert result.handle is None
        assert result.source_entity == UNKNOWN_SOURCE

    def test_from_handle(self):
        """from_handle picks solved or unresolved from the handle."""
        assert ResolutionResult.from_handle("x", "file:///x", "LocalLoader").resolved is True
        missing = ResolutionResult.from_handle("x", None, "LocalLoader")
        assert missing.resolved is False
        assert missing.source_entity == UNKNOWN_SOURCE

    def test_resolved_without_handle_rejected(self):
        """A resolved result must have a handle."""
        with pytest.raises(ValidationError):
            ResolutionResult(search_path="x", resolved=True)

    def test_handle_without_resolved_rejected(self):
        """A handle implies a resolved result."""
        with pytest.raises(ValidationError):
            ResolutionResult(search_path="x", handle="file:///x")

    def test_unresolved_with_source_rejected(self):
        """Unresolved results always use the unknown source."""
        with pytest.raises(ValidationError):
            ResolutionResult(search_path="x", source_entity="LocalLoader")

    def test_frozen(self):
        """Results are immutable."""
        result = ResolutionResult.unresolved("x")
        with pytest.raises(ValidationError):
            result.handle = "file:///x"

    def test_equality(self):
        """Results with equal fields compare equal."""
        assert ResolutionResult.unresolved("x") == ResolutionResult.unresolved("x")


# ============================================================================
# ResolutionContext Tests
# ============================================================================


class TestResolutionContext:
    """Tests for the ResolutionContext dataclass."""

    def test_defaults(self):
        """New contexts are empty and unresolved."""
        context = ResolutionContext()
        assert context.resolved is False
        assert context.handle is None
        assert context.source_entity == UNKNOWN_SOURCE
        assert context.properties == {}

    def test_properties(self):
        """Properties can be set and read back."""
        context = ResolutionContext()
        context.set_property("key", "value")
        assert context.get_property("key") == "value"
        assert context.get_property("missing", "default") == "default"

    def test_update(self):
        """update copies the outcome of a result."""
        context = ResolutionContext()
        context.update(ResolutionResult.solved("x", "file:///x", "LocalLoader"))
        assert context.resolved is True
        assert context.handle == "file:///x"
        assert context.source_entity == "LocalLoader"

    def test_clear(self):
        """clear resets properties and outcome."""
        context = ResolutionContext()
        context.set_property("key", "value")
        context.update(ResolutionResult.solved("x", "file:///x", "LocalLoader"))

        context.clear()

        assert context == ResolutionContext()

    def test_to_result(self):
        """to_result builds an equivalent immutable result."""
        context = ResolutionContext()
        context.update(ResolutionResult.solved("x", "file:///x", "LocalLoader"))
        assert context.to_result("x") == ResolutionResult.solved("x", "file:///x", "LocalLoader")
