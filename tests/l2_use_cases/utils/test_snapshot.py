"""Tests for snapshot conversion, per-field fallback, and normalization."""

from __future__ import annotations

import pytest

from contact_templates.l2_use_cases.utils.snapshot import normalize, workspace_from_snapshot, workspace_to_snapshot
from tests.conftest import make_workspace


@pytest.fixture
def fallback():
    ws = make_workspace(body='fallback {{x}}', template_vars={'x': ''}, signature_keys=['phone'])
    ws.active_template.id = 't_fb'
    ws.active_template_id = 't_fb'
    ws.active_group.id = 'p_fb'
    ws.active_group_id = 'p_fb'
    return ws


class TestRoundTrip:
    def test_snapshot_round_trip(self, fallback):
        ws = make_workspace(
            body='Hi {{a}} {{phone}}',
            template_vars={'a': '1'},
            group_vars={'phone': '03'},
            signature_keys=['phone'],
        )

        restored = workspace_from_snapshot(workspace_to_snapshot(ws), fallback)

        assert restored == ws

    def test_snapshot_is_plain_data(self):
        snap = workspace_to_snapshot(make_workspace(template_vars={'a': '1'}))
        assert snap['templates'][0] == {'id': 't_1', 'title': 'Template', 'body': '', 'vars': {'a': '1'}}
        assert snap['active_group_id'] == 'p_1'


class TestFallback:
    @pytest.mark.parametrize('raw', [None, 'text', 42, ['list']])
    def test_non_mapping_uses_fallback(self, raw, fallback):
        restored = workspace_from_snapshot(raw, fallback)
        assert restored == fallback
        assert restored is not fallback

    def test_malformed_templates_fall_back_alone(self, fallback):
        raw = workspace_to_snapshot(make_workspace(group_vars={'phone': '03'}, signature_keys=['phone']))
        raw['templates'] = [{'title': 'no id'}]

        restored = workspace_from_snapshot(raw, fallback)

        assert [t.id for t in restored.templates] == ['t_fb']
        assert restored.active_template_id == 't_fb'
        assert restored.active_group.vars == {'phone': '03'}

    def test_empty_group_list_falls_back(self, fallback):
        raw = workspace_to_snapshot(make_workspace())
        raw['groups'] = []
        restored = workspace_from_snapshot(raw, fallback)
        assert [g.id for g in restored.groups] == ['p_fb']

    def test_unknown_active_id_selects_first(self, fallback):
        raw = workspace_to_snapshot(make_workspace())
        raw['active_template_id'] = 'gone'
        raw['active_group_id'] = 7

        restored = workspace_from_snapshot(raw, fallback)

        assert restored.active_template_id == 't_1'
        assert restored.active_group_id == 'p_1'

    def test_missing_registry_uses_fallback(self, fallback):
        raw = workspace_to_snapshot(make_workspace())
        del raw['signature_keys']
        assert workspace_from_snapshot(raw, fallback).signature_keys == ['phone']


class TestNormalize:
    def test_trims_and_deduplicates_registry(self):
        ws = make_workspace(signature_keys=[' phone ', 'phone', '', 'email'])
        normalize(ws)
        assert ws.signature_keys == ['phone', 'email']

    def test_moves_nothing_but_drops_misplaced_keys(self):
        ws = make_workspace(
            template_vars={'phone': 'stale', 'a': '1'},
            group_vars={'phone': '03', 'loose': 'x'},
            signature_keys=['phone'],
        )

        normalize(ws)

        assert ws.active_template.vars == {'a': '1'}
        assert ws.active_group.vars == {'phone': '03'}
