"""Tests for YamlDefaultsLoader — built-in, user, and file defaults."""

from __future__ import annotations

import pytest

from contact_templates.l3_interface_adapters.gateways import yaml_defaults_loader
from contact_templates.l3_interface_adapters.gateways.yaml_defaults_loader import YamlDefaultsLoader, builtin_names


@pytest.fixture(autouse=True)
def _isolated_user_dir(tmp_path, monkeypatch):
    user_dir = tmp_path / 'user_defaults'
    monkeypatch.setattr(yaml_defaults_loader, 'USER_DEFAULTS_DIR', user_dir)
    return user_dir


class TestBuiltins:
    def test_builtin_names(self):
        assert {'default_ja', 'default_en'} <= builtin_names()

    @pytest.mark.parametrize('name', ['default_ja', 'default_en'])
    def test_builtin_defaults_are_consistent(self, name):
        content = YamlDefaultsLoader().load(name)

        assert content.metadata.key == name
        assert content.template_body
        assert set(content.group_vars) == set(content.signature_keys)
        assert not set(content.template_vars) & set(content.signature_keys)

    def test_english_content(self):
        content = YamlDefaultsLoader().load('default_en')
        assert content.copy_suffix == ' (copy)'
        assert '{{recipient}}' in content.template_body


class TestUserAndFile:
    def test_explicit_file_path(self, tmp_path):
        path = tmp_path / 'mine.yaml'
        path.write_text('template_title: Mine\ntemplate_body: "Hi {{who}}"\n', encoding='utf-8')

        content = YamlDefaultsLoader().load(str(path))

        assert content.template_title == 'Mine'
        assert content.signature_keys == []

    def test_user_defaults_override_builtin(self, _isolated_user_dir):
        _isolated_user_dir.mkdir()
        (_isolated_user_dir / 'default_en.yaml').write_text(
            'metadata:\n  name: Custom\ntemplate_title: Custom title\n',
            encoding='utf-8',
        )

        content = YamlDefaultsLoader().load('default_en')

        assert content.template_title == 'Custom title'
        assert content.metadata.key == 'default_en'

    def test_unknown_name_lists_available(self):
        with pytest.raises(FileNotFoundError, match='default_ja'):
            YamlDefaultsLoader().load('nope')

    def test_list_defaults(self, _isolated_user_dir):
        _isolated_user_dir.mkdir()
        (_isolated_user_dir / 'work.yaml').write_text('metadata:\n  name: Work\n', encoding='utf-8')

        listed = YamlDefaultsLoader().list_defaults()

        keys = [meta.key for meta in listed]
        assert keys == sorted(keys)
        assert {'default_en', 'default_ja', 'work'} <= set(keys)
        assert next(m for m in listed if m.key == 'work').name == 'Work'
