"""Tests for placeholder substitution and rendering."""

import pytest
from pydantic import ValidationError

from printk.colors import Color
from printk.icons import IconRegistry, default_registry
from printk.renderer import Renderer, RendererConfig, placeholders


def test_substitute_known_keys(renderer):
    """Test known placeholders become glyphs."""
    assert renderer.substitute("{success} done, {error} failed") == "✔ done, ✘ failed"


def test_substitute_every_occurrence(renderer):
    """Test repeated placeholders are all replaced."""
    assert renderer.substitute("{heart}{heart} {heart}") == "♥♥ ♥"


def test_substitute_single_key_yields_glyph(renderer, small_registry):
    """Test each bracketed key maps to exactly its glyph."""
    for key, glyph in small_registry.list():
        assert renderer.substitute(f"{{{key}}}") == glyph


def test_substitute_builtin_table():
    """Test each built-in key maps to exactly its glyph."""
    renderer = Renderer()
    for key, glyph in default_registry().list():
        assert renderer.substitute("{" + key + "}") == glyph


def test_substitute_leaves_unknown_keys(renderer):
    """Test unknown placeholders are kept verbatim with braces."""
    assert renderer.substitute("literal {notakey} text") == "literal {notakey} text"
    assert renderer.substitute("{unknown-key}") == "{unknown-key}"


def test_substitute_identity_without_placeholders(renderer):
    """Test text without placeholder tokens is unchanged."""
    for message in ["", "plain text", "{ success }", "{}", "{success", "json {'a': 1}"]:
        assert renderer.substitute(message) == message


def test_substitute_mixed_known_and_unknown(renderer):
    """Test known and unknown placeholders in one message."""
    assert renderer.substitute("{success} {nope} {error}") == "✔ {nope} ✘"


def test_substitute_disabled_is_identity(renderer):
    """Test disabled icons return the message unchanged."""
    plain = renderer.with_icons(False)
    for message in ["{success} done", "{error}", "no tokens", "{notakey}"]:
        assert plain.substitute(message) == message


def test_substitute_does_not_resubstitute_glyphs():
    """Test a glyph is never scanned for placeholders again."""
    registry = IconRegistry.from_pairs([("a", "b"), ("b", "c")])
    renderer = Renderer(registry=registry)
    assert renderer.substitute("{a} {b}") == "b c"


def test_render_applies_color(small_registry):
    """Test a red renderer wraps the glyph in red set/reset codes."""
    renderer = Renderer(
        RendererConfig(active_color=Color.RED, icons_enabled=True),
        registry=small_registry,
    )
    assert renderer.render("{heart}") == "\x1b[31m♥\x1b[0m"


def test_render_without_color(renderer):
    """Test rendering without a color only substitutes."""
    assert renderer.render("{heart} love") == "♥ love"


def test_render_color_with_icons_disabled(renderer):
    """Test color still applies when icons are disabled."""
    styled = renderer.with_icons(False).with_color(Color.GREEN)
    assert styled.render("{heart}") == "\x1b[32m{heart}\x1b[0m"


def test_builder_returns_new_instances(renderer):
    """Test with_* methods leave the original renderer untouched."""
    red = renderer.with_color(Color.RED)
    assert red is not renderer
    assert red.config.active_color == Color.RED
    assert renderer.config.active_color is None
    assert red.registry is renderer.registry

    plain = red.with_icons(False)
    assert plain.config.icons_enabled is False
    assert plain.config.active_color == Color.RED
    assert red.config.icons_enabled is True


def test_renderer_config_is_frozen():
    """Test renderer settings cannot be mutated in place."""
    config = RendererConfig()
    with pytest.raises(ValidationError):
        config.icons_enabled = False
    assert config.icons_enabled is True


def test_get_icon(renderer):
    """Test get_icon with icons enabled and disabled."""
    assert renderer.get_icon("success") == "✔"
    assert renderer.get_icon("missing") is None
    assert renderer.with_icons(False).get_icon("success") == "{success}"
    assert renderer.with_icons(False).get_icon("missing") == "{missing}"


def test_list_icons(renderer, small_registry):
    """Test list_icons matches the registry listing."""
    assert renderer.list_icons() == small_registry.list()


def test_placeholders():
    """Test placeholder tokens are found in order."""
    assert placeholders("{a} x {b-c} {d_e} {a}") == ["a", "b-c", "d_e", "a"]
    assert placeholders("{ a } {} {a.b}") == []


def test_unknown_placeholders(renderer):
    """Test only keys missing from the registry are reported."""
    assert renderer.unknown_placeholders("{success} {foo} {bar}") == ["foo", "bar"]
