"""Tests for the template catalog."""

import dataclasses

import pytest

from create_simple_express.scaffold import catalog
from create_simple_express.scaffold.catalog import (
    TEMPLATES,
    Template,
    get_template,
    is_known,
    list_templates,
    template_ids,
    template_root,
)
from create_simple_express.scaffold.errors import TemplateNotFoundError, UnknownTemplateError


class TestCatalog:
    def test_display_order(self):
        assert template_ids() == ("basic", "api")
        assert [template.id for template in list_templates()] == ["basic", "api"]

    def test_labels_and_accents(self):
        assert get_template("basic") == Template("basic", "Great for absolute beginners", "green")
        assert get_template("api") == Template("api", "For building real-world APIs", "yellow")

    @pytest.mark.parametrize(
        "template_id, known",
        [("basic", True), ("api", True), ("bogus", False), ("", False), (None, False)],
    )
    def test_is_known(self, template_id, known):
        assert is_known(template_id) is known

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError, match="Available templates: basic, api"):
            get_template("bogus")

    def test_templates_are_immutable(self):
        assert isinstance(TEMPLATES, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            TEMPLATES[0].label = "changed"


class TestTemplateRoot:
    """Test locating bundled payloads."""

    @pytest.mark.parametrize("template_id", ["basic", "api"])
    def test_every_template_has_a_payload(self, template_id):
        root = template_root(template_id)

        assert root.is_dir()
        assert root.name == template_id
        assert (root / "package.json").is_file()

    def test_missing_payload_raises(self, tmp_path, monkeypatch):
        monkeypatch.setattr(catalog, "_get_payload_root", lambda: tmp_path)

        with pytest.raises(TemplateNotFoundError, match="basic"):
            template_root("basic")

    def test_unknown_id_raises(self):
        with pytest.raises(UnknownTemplateError):
            template_root("bogus")
