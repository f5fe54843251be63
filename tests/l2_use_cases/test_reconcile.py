"""Tests for the reconcile use case."""

from __future__ import annotations

from contact_templates.l2_use_cases.reconcile_use_case import reconcile
from tests.conftest import make_workspace


class TestReconcile:
    def test_routes_new_keys_by_classification(self):
        ws = make_workspace(body='{{a}} {{phone}}', signature_keys=['phone'])
        assert reconcile(ws) is True
        assert ws.active_template.vars == {'a': ''}
        assert ws.active_group.vars == {'phone': ''}

    def test_never_overwrites(self):
        ws = make_workspace(
            body='{{a}} {{phone}}',
            template_vars={'a': 'kept'},
            group_vars={'phone': '03'},
            signature_keys=['phone'],
        )
        assert reconcile(ws) is False
        assert ws.active_template.vars == {'a': 'kept'}
        assert ws.active_group.vars == {'phone': '03'}

    def test_stale_entries_survive_body_edits(self):
        ws = make_workspace(body='{{a}}', template_vars={'a': '1', 'old': 'value'})
        ws.active_template.body = 'nothing here'
        reconcile(ws)
        assert ws.active_template.vars == {'a': '1', 'old': 'value'}

    def test_signature_key_not_added_to_template(self):
        ws = make_workspace(body='{{phone}}', signature_keys=['phone'])
        reconcile(ws)
        assert 'phone' not in ws.active_template.vars

    def test_idempotent(self):
        ws = make_workspace(body='{{a}} {{b}}')
        reconcile(ws)
        snapshot = ws.model_dump()
        assert reconcile(ws) is False
        assert ws.model_dump() == snapshot
