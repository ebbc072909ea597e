"""Tests for tsdef.options module."""

import pytest
from pydantic import ValidationError

from tsdef.options import DEFAULT_HEADER, DEFAULT_ROOT_NAMESPACE, DefinitionFileOptions


class TestDefaults:
    """Test default option values."""

    def test_default_header(self):
        """Test the auto-generation notice header."""
        options = DefinitionFileOptions()
        assert options.header == DEFAULT_HEADER
        assert options.header == "// AUTO-GENERATED by tsdef\n"

    def test_default_root_namespace(self):
        """Test the conventional root namespace."""
        assert DefinitionFileOptions().root_namespace == DEFAULT_ROOT_NAMESPACE == "types"

    def test_equal_defaults(self):
        """Test that option values compare by value."""
        assert DefinitionFileOptions() == DefinitionFileOptions()


class TestValidation:
    """Test option validation."""

    @pytest.mark.parametrize("name", ["types", "Api", "_root", "$ns", "v2"])
    def test_valid_root_namespace(self, name):
        """Test identifiers accepted as root namespace."""
        assert DefinitionFileOptions(root_namespace=name).root_namespace == name

    @pytest.mark.parametrize("name", ["", "2fast", "a.b", "my-types", "has space"])
    def test_invalid_root_namespace(self, name):
        """Test identifiers rejected as root namespace."""
        with pytest.raises(ValidationError):
            DefinitionFileOptions(root_namespace=name)

    def test_header_none(self):
        """Test that the header can be switched off."""
        assert DefinitionFileOptions(header=None).header is None

    def test_unknown_option(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValidationError):
            DefinitionFileOptions(namespace="types")

    def test_frozen(self):
        """Test that options are immutable."""
        options = DefinitionFileOptions()
        with pytest.raises(ValidationError):
            options.root_namespace = "other"
