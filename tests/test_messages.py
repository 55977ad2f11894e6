import pytest

from whocares.messages import MessageLoadError, Messages, MessageSet, Variant

DEFAULT_YAML = "primary:\n  - Alpha\n  - Beta\nsecondary:\n  - Gamma\nfootnote:\n  - Delta\n"


@pytest.fixture
def message_dir(tmp_path):
    (tmp_path / "default.yaml").write_text(DEFAULT_YAML)
    return tmp_path


def test_load_default(message_dir):
    result = Messages(message_dir).load_variant(Variant.DEFAULT)
    assert result == MessageSet(["Alpha", "Beta"], ["Gamma"], ["Delta"])


def test_missing_variant_falls_back_to_default(message_dir):
    result = Messages(message_dir).load_variant(Variant.CORPO)
    assert result.primary == ["Alpha", "Beta"]


def test_present_variant_is_used(message_dir):
    (message_dir / "corpo.yaml").write_text("primary: [Synergy]\nsecondary: [Align]\nfootnote: [Leverage]\n")
    result = Messages(message_dir).load_variant("corpo")
    assert result == MessageSet(["Synergy"], ["Align"], ["Leverage"])


def test_yml_preferred_over_yaml(message_dir):
    (message_dir / "default.yml").write_text("primary: [Yml]\nsecondary: [S]\nfootnote: [F]\n")
    assert Messages(message_dir).load_variant().primary == ["Yml"]


def test_missing_default_raises(tmp_path):
    with pytest.raises(MessageLoadError):
        Messages(tmp_path).load_variant(Variant.SARCASTIC)


def test_empty_section_is_invalid(tmp_path):
    (tmp_path / "default.yaml").write_text("primary: [A]\nsecondary: [B]\nfootnote: []\n")
    with pytest.raises(MessageLoadError, match="invalid message set"):
        Messages(tmp_path).load_variant()


def test_invalid_existing_variant_does_not_fall_back(message_dir):
    (message_dir / "wholesome.yaml").write_text("primary: [Kind]\n")
    with pytest.raises(MessageLoadError, match="wholesome"):
        Messages(message_dir).load_variant(Variant.WHOLESOME)


def test_malformed_yaml_raises(tmp_path):
    (tmp_path / "default.yaml").write_text("primary: [unclosed\n")
    with pytest.raises(MessageLoadError, match="failed to parse"):
        Messages(tmp_path).load_variant()


def test_fallback_directory_used(tmp_path, message_dir):
    empty = tmp_path / "empty"
    empty.mkdir()
    result = Messages(empty, fallback_dir=message_dir).load_variant()
    assert result.secondary == ["Gamma"]


def test_render_escapes_html(tmp_path):
    assert Messages(tmp_path).render_message("Hi {{name}}", {"name": "<b>"}) == "Hi &lt;b&gt;"


def test_render_escapes_quotes(tmp_path):
    assert Messages(tmp_path).render_message("{{q}}", {"q": "'\""}) == "&#39;&#34;"


def test_render_leaves_unknown_placeholders(tmp_path):
    assert Messages(tmp_path).render_message("{{x}} {{y}}", {"x": "1"}) == "1 {{y}}"


def test_render_replaces_every_occurrence(tmp_path):
    result = Messages(tmp_path).render_message("{{a}}-{{a}}", {"a": "z"})
    assert result.count("z") == 2
    assert "{{" not in result