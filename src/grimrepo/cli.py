"""Command-line interface for GrimRepo."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
import yaml

from grimrepo import __version__
from grimrepo.audit import AuditScorer, generate_audit_report, generate_json_report
from grimrepo.config import GrimRepoConfig, get_default_config
from grimrepo.hosting import get_repository_context
from grimrepo.registry import STANDARD_DIRECTORIES
from grimrepo.scoring import normalize_dir_path
from grimrepo.structure import generate_directory_template
from grimrepo.types import CheckItem, Priority

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    'help_option_names': ['-h', '--help'],
    'max_content_width': 120
}

# Directories whose files count as community files of the repository root
_NESTED_FILE_DIRS = ('.well-known',)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose: bool):
    """GrimRepo: audit repositories for structure and community standards."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output config file path')
@click.option('--overwrite', is_flag=True, help='Replace an existing output file')
def config(output: Optional[str], overwrite: bool):
    """Generate a configuration file with default settings."""
    cfg = get_default_config()

    if output:
        output_path = Path(output)
        if output_path.exists() and not overwrite:
            raise click.ClickException(f"{output_path} already exists. Use --overwrite to replace it.")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        cfg.to_yaml(output_path)
        click.echo(f"Configuration saved to {output_path}")
    else:
        click.echo(yaml.safe_dump(cfg.to_dict(), default_flow_style=False, sort_keys=False), nl=False)


@cli.command()
@click.argument('root', required=False, type=click.Path(exists=True, file_okay=False))
@click.option('--dir', 'dirs', multiple=True, help='Directory present in the repository (repeatable)')
@click.option('--file', 'files', multiple=True, help='File present in the repository (repeatable)')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--format', 'fmt', type=click.Choice(['markdown', 'json']), default='markdown',
              help='Report format')
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Write the report to a file')
def audit(
    root: Optional[str],
    dirs: Tuple[str, ...],
    files: Tuple[str, ...],
    config_path: Optional[str],
    fmt: str,
    output: Optional[str]
):
    """Audit a repository directory and/or explicit --dir/--file listings.

    Without ROOT and without listings the current directory is audited.
    """
    try:
        cfg = GrimRepoConfig.from_yaml(config_path) if config_path else get_default_config()
        scorer = AuditScorer(cfg)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    if not cfg.enabled:
        click.echo("GrimRepo is disabled by configuration")
        return

    paths: List[str] = list(dirs)
    names: List[str] = list(files)
    if root is not None or not (dirs or files):
        found_dirs, found_files = collect_listing(Path(root or '.'))
        paths += found_dirs
        names += found_files

    result = scorer.audit(paths, names)
    report = generate_json_report(result) if fmt == 'json' else generate_audit_report(result)

    if output:
        Path(output).write_text(report, encoding='utf-8')
        click.echo(f"Report saved to {output}")
    else:
        click.echo(report, nl=False)


@cli.command()
@click.argument('path')
@click.option('--purpose', default='Project directory', show_default=True,
              help='Description used when PATH is not a standard directory')
def template(path: str, purpose: str):
    """Print the scaffold README for a directory."""
    wanted = normalize_dir_path(path)
    check = next(
        (c for c in STANDARD_DIRECTORIES if normalize_dir_path(c.path) == wanted),
        None,
    )
    if check is None:
        check = CheckItem(path=path, purpose=purpose, priority=Priority.OPTIONAL)
    click.echo(generate_directory_template(check))


@cli.command()
@click.argument('url')
def context(url: str):
    """Show the platform, owner and repository a URL points at."""
    ctx = get_repository_context(url)
    if ctx is None:
        raise click.ClickException(f"Not a supported repository URL: {url}")
    click.echo(json.dumps(ctx.to_dict(), indent=2))


def collect_listing(root: Path) -> Tuple[List[str], List[str]]:
    """List a repository's top-level directories and community files.

    Returns:
        ``(directories, files)`` where directories end in ``/`` and files are
        relative POSIX paths. Files inside ``.well-known/`` are included.
    """
    directories: List[str] = []
    files: List[str] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            directories.append(f"{entry.name}/")
            if entry.name in _NESTED_FILE_DIRS:
                files.extend(
                    f"{entry.name}/{child.name}"
                    for child in sorted(entry.iterdir()) if child.is_file()
                )
        elif entry.is_file():
            files.append(entry.name)
    logger.debug("Collected %d directories and %d files from %s", len(directories), len(files), root)
    return directories, files


if __name__ == '__main__':
    cli()
