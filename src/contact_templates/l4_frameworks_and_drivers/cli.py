"""CLI entry point for contact-templates."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from contact_templates import __version__


def _echo_listing(controller) -> None:
    workspace = controller.workspace
    click.echo('Templates:')
    for tmpl in workspace.templates:
        marker = '*' if tmpl.id == workspace.active_template_id else ' '
        click.echo(f'{marker} {tmpl.id}  {tmpl.title}')
    click.echo('Signature groups:')
    for group in workspace.groups:
        marker = '*' if group.id == workspace.active_group_id else ' '
        click.echo(f'{marker} {group.id}  {group.title}')
    click.echo(f'Signature keys: {", ".join(workspace.signature_keys) or "(none)"}')


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '--snapshot',
    'snapshot_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Snapshot file holding templates and signature groups.',
)
@click.option(
    '--defaults',
    'defaults_ref',
    default=None,
    help="Built-in defaults name (e.g. 'default_en') or path to a defaults YAML.",
)
@click.option('-t', '--template', 'template_ref', default=None, help='Activate a template by title or id.')
@click.option('-g', '--group', 'group_ref', default=None, help='Activate a signature group by title or id.')
@click.option('-p', '--print', 'print_only', is_flag=True, help='Print the rendered template and exit (no TUI).')
@click.option('--copy', 'copy_only', is_flag=True, help='Copy the rendered template to the clipboard (no TUI).')
@click.option('--list', 'list_only', is_flag=True, help='List templates and signature groups (no TUI).')
@click.option('--reset-all', is_flag=True, help='Discard saved data and restore the defaults (no TUI).')
@click.option('--list-defaults', is_flag=True, help='List available defaults content and exit.')
@click.version_option(version=__version__)
def cli(
    config_path,
    snapshot_path,
    defaults_ref,
    template_ref,
    group_ref,
    print_only,
    copy_only,
    list_only,
    reset_all,
    list_defaults,
):
    """contact-templates -- reusable message templates with shared signature values."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not loaded on --help

    from contact_templates.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not loaded on --help
        WorkspaceError,
    )
    from contact_templates.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from contact_templates.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )
    from contact_templates.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: wiring not needed for --help
        DependencyContainer,
    )
    from contact_templates.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )
    from contact_templates.l4_frameworks_and_drivers.prompters import (  # noqa: PLC0415 -- deferred: not needed for --help
        ClickPrompter,
    )

    if list_defaults:
        from contact_templates.l3_interface_adapters.gateways.yaml_defaults_loader import (  # noqa: PLC0415 -- deferred: only for --list-defaults
            YamlDefaultsLoader,
        )

        for meta in YamlDefaultsLoader().list_defaults():
            click.echo(f'{meta.key:<20} {meta.name} [{meta.locale}]')
        return

    interactive = not (print_only or copy_only or list_only or reset_all)

    try:
        overrides: dict = {}
        if snapshot_path:
            overrides['storage'] = {'path': snapshot_path}
        if defaults_ref:
            overrides['content'] = {'defaults': defaults_ref}
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        setup_file_logging(Path(config.storage.path).parent)
        container = DependencyContainer(config, prompter=None if interactive else ClickPrompter())
    except (FileNotFoundError, ValidationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    controller = container.controller
    try:
        if template_ref:
            controller.select_template(controller.find_template(template_ref).id)
        if group_ref:
            controller.select_group(controller.find_group(group_ref).id)
    except WorkspaceError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if not interactive:
        _run_non_interactive(container, print_only, copy_only, list_only, reset_all)
        return

    from contact_templates.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for non-interactive flags
        EditorApp,
    )

    app = EditorApp(
        controller=controller,
        clipboard=container.clipboard,
        prompter=container.prompter,
        log_dir=container.log_dir,
    )
    app.run()


def _run_non_interactive(container, print_only: bool, copy_only: bool, list_only: bool, reset_all: bool) -> None:
    import pyperclip  # noqa: PLC0415 -- deferred: clipboard stack only for --copy

    controller = container.controller
    if reset_all:
        if controller.reset_all():
            click.echo('Workspace reset to defaults.')
        return
    if list_only:
        _echo_listing(controller)
        return
    if print_only:
        click.echo(controller.preview)
    if copy_only:
        try:
            text = controller.copy_preview(container.clipboard)
        except pyperclip.PyperclipException as e:
            click.echo(f'Error: clipboard unavailable ({e})', err=True)
            sys.exit(1)
        click.echo(f'Copied {len(text)} characters.', err=True)
