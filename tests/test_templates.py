"""Tests for CodeTemplate."""
import pytest
from app.core.errors import TemplateParameterError
from app.generators.app_gen.templates import CodeTemplate


GREETING = CodeTemplate(
    name="greeting.ts",
    params=("name",),
    skeleton="const msg = `Hello ${user}`; // @@name {{ ok }} @@@@\n",
)


def test_render_substitutes_only_declared_markers():
    """Test that JS template literals and braces pass through untouched."""
    assert GREETING.render(name="World") == "const msg = `Hello ${user}`; // World {{ ok }} @@\n"


def test_render_rejects_missing_parameter():
    with pytest.raises(TemplateParameterError) as exc_info:
        GREETING.render()
    assert "missing=['name']" in str(exc_info.value)


def test_render_rejects_unexpected_parameter():
    with pytest.raises(TemplateParameterError) as exc_info:
        GREETING.render(name="x", extra="y")
    assert "unexpected=['extra']" in str(exc_info.value)


def test_undeclared_marker_in_skeleton_is_reported():
    broken = CodeTemplate(name="broken", params=("a",), skeleton="@@a @@b")
    with pytest.raises(TemplateParameterError):
        broken.render(a="1")


def test_values_are_not_reparsed():
    assert GREETING.render(name="@@name") == "const msg = `Hello ${user}`; // @@name {{ ok }} @@\n"
