"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import itertools

import pytest

from contact_templates.l1_entities.defaults import DefaultContent
from contact_templates.l1_entities.workspace import SignatureGroup, Template, Workspace
from contact_templates.l3_interface_adapters.controllers.workspace_controller import WorkspaceController
from contact_templates.l3_interface_adapters.gateways.yaml_defaults_loader import YamlDefaultsLoader

# --- Protocol-conforming Fakes ---


class FakeSnapshotStore:
    """In-memory snapshot store; can be told to fail on any call."""

    def __init__(self, snapshot: dict | None = None) -> None:
        self.snapshot = snapshot
        self.save_calls: list[dict] = []
        self.clear_calls = 0
        self.fail_load = False
        self.fail_save = False
        self.fail_clear = False

    def load(self) -> dict | None:
        if self.fail_load:
            raise OSError('store unavailable')
        return self.snapshot

    def save(self, snapshot: dict) -> None:
        if self.fail_save:
            raise OSError('write rejected')
        self.save_calls.append(snapshot)
        self.snapshot = snapshot

    def clear(self) -> None:
        if self.fail_clear:
            raise OSError('store unavailable')
        self.clear_calls += 1
        self.snapshot = None


class FakePrompter:
    """Scripted prompter: answers are consumed in order; runs out → decline/cancel."""

    def __init__(self, confirms: list[bool] | None = None, texts: list[str | None] | None = None) -> None:
        self.confirm_answers = list(confirms or [])
        self.text_answers = list(texts or [])
        self.confirm_calls: list[str] = []
        self.ask_calls: list[tuple[str, str]] = []

    def confirm(self, message: str) -> bool:
        self.confirm_calls.append(message)
        return self.confirm_answers.pop(0) if self.confirm_answers else False

    def ask_text(self, message: str, default: str = '') -> str | None:
        self.ask_calls.append((message, default))
        return self.text_answers.pop(0) if self.text_answers else None


class FakeClipboard:
    def __init__(self) -> None:
        self.copies: list[str] = []

    def copy(self, text: str) -> None:
        self.copies.append(text)


def counter_ids():
    """Deterministic id factory: t_1, p_2, t_3, ..."""
    counter = itertools.count(1)
    return lambda prefix: f'{prefix}{next(counter)}'


def make_workspace(
    body: str = '',
    template_vars: dict[str, str] | None = None,
    group_vars: dict[str, str] | None = None,
    signature_keys: list[str] | None = None,
) -> Workspace:
    template = Template(id='t_1', title='Template', body=body, vars=dict(template_vars or {}))
    group = SignatureGroup(id='p_1', title='Me', vars=dict(group_vars or {}))
    return Workspace(
        templates=[template],
        active_template_id=template.id,
        groups=[group],
        active_group_id=group.id,
        signature_keys=list(signature_keys or []),
    )


# --- Standard Fixtures ---


@pytest.fixture
def default_content() -> DefaultContent:
    return YamlDefaultsLoader().load('default_ja')


@pytest.fixture
def fake_store() -> FakeSnapshotStore:
    return FakeSnapshotStore()


@pytest.fixture
def fake_prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def controller(default_content, fake_store, fake_prompter) -> WorkspaceController:
    return WorkspaceController(
        defaults=default_content,
        store=fake_store,
        prompter=fake_prompter,
        id_factory=counter_ids(),
        sort_key=str,
    )
