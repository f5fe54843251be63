"""Tests for KeyMigrationUseCase — reclassify, add, remove."""

from __future__ import annotations

import pytest

from contact_templates.l1_entities.errors import DuplicateVariableError, EmptyNameError
from contact_templates.l1_entities.workspace import ReclassifyResult, Template
from contact_templates.l2_use_cases.key_migration_use_case import KeyMigrationUseCase
from tests.conftest import make_workspace


@pytest.fixture
def migrate() -> KeyMigrationUseCase:
    return KeyMigrationUseCase()


class TestReclassify:
    def test_moves_value_to_signature(self, migrate):
        ws = make_workspace(body='{{日付}}', template_vars={'日付': '2024-01-01'})

        result = migrate.reclassify(ws, '日付', to_signature=True)

        assert result is ReclassifyResult.MOVED
        assert ws.active_group.vars == {'日付': '2024-01-01'}
        assert '日付' not in ws.active_template.vars
        assert '日付' in ws.signature_keys

    def test_round_trip_restores_value_and_membership(self, migrate):
        ws = make_workspace(template_vars={'k': 'v'}, signature_keys=['phone'])

        migrate.reclassify(ws, 'k', to_signature=True)
        migrate.reclassify(ws, 'k', to_signature=False)

        assert ws.active_template.vars == {'k': 'v'}
        assert 'k' not in ws.active_group.vars
        assert ws.signature_keys == ['phone']

    def test_already_classified_is_unchanged(self, migrate):
        ws = make_workspace(group_vars={'phone': '03'}, signature_keys=['phone'])
        before = ws.model_dump()

        assert migrate.reclassify(ws, 'phone', to_signature=True) is ReclassifyResult.UNCHANGED
        assert ws.model_dump() == before

    def test_unknown_key_is_not_found(self, migrate):
        ws = make_workspace(body='{{a}}', template_vars={'a': ''})
        before = ws.model_dump()

        assert migrate.reclassify(ws, 'ghost', to_signature=True) is ReclassifyResult.NOT_FOUND
        assert ws.model_dump() == before

    def test_key_only_in_body_moves_with_empty_value(self, migrate):
        ws = make_workspace(body='{{fresh}}')

        assert migrate.reclassify(ws, 'fresh', to_signature=True) is ReclassifyResult.MOVED
        assert ws.active_group.vars == {'fresh': ''}

    def test_registry_key_missing_from_group_moves_with_empty_value(self, migrate):
        ws = make_workspace(signature_keys=['phone'])

        assert migrate.reclassify(ws, 'phone', to_signature=False) is ReclassifyResult.MOVED
        assert ws.active_template.vars == {'phone': ''}
        assert ws.signature_keys == []

    def test_signature_value_wins_when_both_stores_hold_key(self, migrate):
        ws = make_workspace(template_vars={'k': 'local'}, group_vars={'k': 'shared'})

        migrate.reclassify(ws, 'k', to_signature=True)

        assert ws.active_group.vars == {'k': 'shared'}
        assert 'k' not in ws.active_template.vars

    def test_to_signature_clears_key_from_every_template(self, migrate):
        ws = make_workspace(template_vars={'k': 'active'})
        ws.templates.append(Template(id='t_2', title='Other', vars={'k': 'other', 'x': '1'}))

        migrate.reclassify(ws, 'k', to_signature=True)

        assert all('k' not in t.vars for t in ws.templates)
        assert ws.templates[1].vars == {'x': '1'}

    def test_to_template_clears_key_from_every_group(self, migrate):
        from contact_templates.l1_entities.workspace import SignatureGroup

        ws = make_workspace(group_vars={'phone': '03'}, signature_keys=['phone'])
        ws.groups.append(SignatureGroup(id='p_2', title='Work', vars={'phone': '06'}))

        migrate.reclassify(ws, 'phone', to_signature=False)

        assert ws.active_template.vars == {'phone': '03'}
        assert all('phone' not in g.vars for g in ws.groups)


class TestAdd:
    def test_adds_empty_local_variable(self, migrate):
        ws = make_workspace(body='unchanged')
        assert migrate.add(ws, '  venue ') == 'venue'
        assert ws.active_template.vars == {'venue': ''}
        assert ws.active_template.body == 'unchanged'

    @pytest.mark.parametrize('name', ['', '   ', '\t\n'])
    def test_blank_name_rejected(self, migrate, name):
        ws = make_workspace()
        with pytest.raises(EmptyNameError):
            migrate.add(ws, name)
        assert ws.active_template.vars == {}

    @pytest.mark.parametrize(
        ('template_vars', 'group_vars', 'signature_keys'),
        [
            ({'k': ''}, {}, []),
            ({}, {'k': ''}, ['k']),
            ({}, {}, ['k']),
        ],
    )
    def test_duplicate_rejected(self, migrate, template_vars, group_vars, signature_keys):
        ws = make_workspace(template_vars=template_vars, group_vars=group_vars, signature_keys=signature_keys)
        before = ws.model_dump()
        with pytest.raises(DuplicateVariableError):
            migrate.add(ws, 'k')
        assert ws.model_dump() == before


class TestRemove:
    def test_removes_everywhere(self, migrate):
        ws = make_workspace(body='{{k}}', group_vars={'k': 'v'}, signature_keys=['k', 'other'])

        migrate.remove(ws, 'k')

        assert 'k' not in ws.active_group.vars
        assert ws.signature_keys == ['other']
        assert ws.active_template.body == '{{k}}'

    def test_strip_body(self, migrate):
        ws = make_workspace(body='A {{会場}} B {{ 会場 }} C', template_vars={'会場': 'hall'})

        migrate.remove(ws, '会場', strip_body=True)

        assert ws.active_template.body == 'A  B  C'
        assert ws.active_template.vars == {}
