"""
Command-line interface for the workflow replicator.
"""

import click
import json
import sys
from dataclasses import replace
from typing import List, Optional
from pathlib import Path

from . import __version__
from .config import get_config_manager, AppConfig
from .error_handling import ReplicationError
from .logging import setup_logging, LoggerConfig
from .models import FilterCriteria
from .orchestrator import ReplicationPlanner
from .replication import (
    get_branch_name, copy_changed_files, repositories_to_replicate
)

VERBOSITY_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--config', '-c',
    type=click.Path(exists=True, path_type=Path),
    help='Path to configuration file'
)
@click.option(
    '--verbose', '-v',
    count=True,
    help='Increase verbosity (use -v or -vv)'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """
    Workflow Replicator - copy workflow files across an organization's repositories.

    Option defaults are read from the configuration file and from the
    INPUT_* environment variables a GitHub Actions runner exports.
    """
    ctx.ensure_object(dict)

    try:
        app_config = get_config_manager(config).get_config()
    except ReplicationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger_config = LoggerConfig.from_app_config(app_config.logging)
    level = VERBOSITY_LEVELS.get(verbose, "DEBUG")
    if level:
        logger_config.level = level
    setup_logging(logger_config)

    ctx.obj['config'] = app_config
    ctx.obj['verbose'] = verbose


def _planner(ctx: click.Context) -> ReplicationPlanner:
    return ReplicationPlanner(config=ctx.obj['config'])


def _fail(ctx: click.Context, error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    if ctx.obj.get('verbose', 0) > 1:
        import traceback
        traceback.print_exc()
    sys.exit(1)


@cli.command()
@click.option(
    '--trigger-event', '-e',
    required=True,
    help='Event that triggered the workflow (push or workflow_dispatch)'
)
@click.option('--commit-id', help='Commit to inspect for push events')
@click.option('--owner', help='Organization or user owning the repository')
@click.option('--repo', help='Repository the commit belongs to')
@click.option(
    '--workspace', '-w',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory to scan for workflow_dispatch events (defaults to the current directory)'
)
@click.option('--files-to-ignore', help='Comma-separated file names to skip')
@click.option('--files-to-include', help='Comma-separated paths to replicate besides workflows')
@click.pass_context
def files(
    ctx: click.Context,
    trigger_event: str,
    commit_id: Optional[str],
    owner: Optional[str],
    repo: Optional[str],
    workspace: Optional[Path],
    files_to_ignore: Optional[str],
    files_to_include: Optional[str]
) -> None:
    """
    Print the files that qualify for replication, one per line.

    Examples:

        workflow-replicator files -e workflow_dispatch -w .

        workflow-replicator files -e push --owner org --repo repo --commit-id abc123
    """
    app_config: AppConfig = ctx.obj['config']
    overrides = {}
    if files_to_ignore is not None:
        overrides['files_to_ignore'] = files_to_ignore
    if files_to_include is not None:
        overrides['files_to_include'] = files_to_include
    app_config = replace(app_config, replication=replace(app_config.replication, **overrides))

    try:
        selected = ReplicationPlanner(config=app_config).files_to_replicate(
            trigger_event,
            commit_id=commit_id,
            owner=owner,
            repo=repo,
            workspace=workspace
        )
    except (ReplicationError, ValueError) as e:
        _fail(ctx, e)

    for path in selected:
        click.echo(path)


@cli.command()
@click.option('--org', required=True, help='Organization whose repositories are listed')
@click.option('--self-repo', required=True, help='Repository the workflow runs in')
@click.option('--repos-to-ignore', help='Comma-separated repository names to skip')
@click.option('--topics-to-include', help='Comma-separated topics; repositories need at least one')
@click.option('--exclude-forked/--include-forked', default=None, help='Skip forked repositories')
@click.option('--exclude-private/--include-private', default=None, help='Skip private repositories')
@click.pass_context
def repos(
    ctx: click.Context,
    org: str,
    self_repo: str,
    repos_to_ignore: Optional[str],
    topics_to_include: Optional[str],
    exclude_forked: Optional[bool],
    exclude_private: Optional[bool]
) -> None:
    """Print the repositories that should receive replicated files."""
    settings = ctx.obj['config'].replication
    criteria = FilterCriteria.from_inputs(
        repos_to_ignore=repos_to_ignore if repos_to_ignore is not None else settings.repos_to_ignore,
        topics_to_include=topics_to_include if topics_to_include is not None else settings.topics_to_include,
        exclude_forked=settings.exclude_forked if exclude_forked is None else exclude_forked,
        exclude_private=settings.exclude_private if exclude_private is None else exclude_private
    )

    try:
        planner = _planner(ctx)
        repositories = planner.github_client.list_organization_repositories(org)
    except ReplicationError as e:
        _fail(ctx, e)

    for repository in repositories_to_replicate(self_repo, repositories, criteria):
        click.echo(repository.name)


@cli.command('branch-name')
@click.option('--commit-id', help='Commit that triggered the run; omit for manual runs')
def branch_name(commit_id: Optional[str]) -> None:
    """Print the branch name for the replicated changes."""
    click.echo(get_branch_name(commit_id))


@cli.command()
@click.argument('destination', type=click.Path(file_okay=False, path_type=Path))
@click.argument('paths', nargs=-1, required=True)
@click.option(
    '--workspace', '-w',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory the paths are relative to (defaults to the current directory)'
)
@click.pass_context
def copy(ctx: click.Context, destination: Path, paths: List[str], workspace: Optional[Path]) -> None:
    """Copy PATHS from the workspace into DESTINATION, keeping their relative layout."""
    try:
        copy_changed_files(list(paths), destination, source_root=workspace)
    except ReplicationError as e:
        _fail(ctx, e)

    click.echo(f"Copied {len(paths)} files to {destination}")


@cli.command()
@click.option('--org', required=True, help='Organization owning the repositories')
@click.option('--self-repo', required=True, help='Repository the workflow runs in')
@click.option('--trigger-event', '-e', required=True, help='push or workflow_dispatch')
@click.option('--commit-id', help='Commit that triggered a push run')
@click.option(
    '--workspace', '-w',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Checked-out source repository (defaults to the current directory)'
)
@click.option('--json', 'as_json', is_flag=True, help='Print the plan as JSON')
@click.pass_context
def plan(
    ctx: click.Context,
    org: str,
    self_repo: str,
    trigger_event: str,
    commit_id: Optional[str],
    workspace: Optional[Path],
    as_json: bool
) -> None:
    """
    Print the replication plan: branch name, files and target repositories.

    Remote URLs embed the access token and are never printed.
    """
    try:
        result = _planner(ctx).plan(
            org,
            self_repo,
            trigger_event,
            commit_id=commit_id,
            workspace=workspace
        )
    except (ReplicationError, ValueError) as e:
        _fail(ctx, e)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.echo(f"Branch: {result.branch_name}")
    click.echo(f"Files ({len(result.files)}):")
    for path in result.files:
        click.echo(f"  - {path}")
    click.echo(f"Repositories ({len(result.targets)}):")
    for target in result.targets:
        click.echo(f"  - {target.repository.name}")


@cli.command()
@click.option(
    '--format', '-f', 'output_format',
    type=click.Choice(['table', 'json', 'yaml'], case_sensitive=False),
    default='table',
    help='Output format for configuration display'
)
@click.pass_context
def config(ctx: click.Context, output_format: str) -> None:
    """Display current configuration settings with secrets masked."""
    config_dict = ctx.obj['config'].to_dict()

    if output_format == 'json':
        click.echo(json.dumps(config_dict, indent=2, default=str))
    elif output_format == 'yaml':
        import yaml
        click.echo(yaml.safe_dump(config_dict, default_flow_style=False))
    else:
        click.echo("\nCurrent Configuration:")
        click.echo("-" * 50)
        for section_name, values in config_dict.items():
            click.echo(f"\n[{section_name}]")
            for key, value in values.items():
                click.echo(f"  {key}: {value}")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
