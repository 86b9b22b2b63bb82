#!/usr/bin/env python3

import logging

import click

from bevypatch import __version__
from bevypatch.api import generate, local, remote
from bevypatch.cli_utils import standard_command, add_common_options
from bevypatch.config import load_config, configure_logging
from bevypatch.render import format_patch_block

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bevy-patch")
@add_common_options('verbose')
@click.pass_context
def cli(ctx, verbose):
    """bevy-patch - Generate [patch.crates-io] entries for bevy.

    Points bevy and every crate in its crates/ directory at one source,
    either a local checkout or a git repository at a branch, tag or rev.
    Paste the output into your Cargo.toml.
    """
    config = load_config()
    log_config = config.get('logging', {})
    configure_logging(
        level=logging.DEBUG if verbose else log_config.get('level'),
        fmt=log_config.get('format'),
    )
    ctx.obj = config


@cli.command('path')
@click.argument('path')
@click.pass_obj
@standard_command
def path_cmd(config, path):
    """Patch to a local checkout at PATH.

    \b
    Example:
        bevy-patch path ../bevy
    """
    return format_patch_block(generate(local(path), config))


@cli.command('git')
@click.option('--repo', default=None,
              help='Repository: owner, owner/repo, github.com/owner/repo or a full URL '
                   '(default: https://github.com/bevyengine/bevy)')
@click.option('--branch', default=None, help='Branch to patch to (default: main)')
@click.option('--tag', default=None, help='Tag to patch to (takes precedence over --branch and --rev)')
@click.option('--rev', default=None, help='Revision to patch to')
@click.pass_obj
@standard_command
def git_cmd(config, repo, branch, tag, rev):
    """Patch to a git repository at a branch, tag or revision.

    \b
    Examples:
        bevy-patch git
        bevy-patch git --repo aceeri --branch my-feature
        bevy-patch git --tag v0.14.0
    """
    defaults = config['defaults']
    target = remote(
        repo or defaults['repository'],
        branch=branch,
        tag=tag,
        rev=rev,
        default_branch=defaults['branch'],
        umbrella=defaults['umbrella'],
    )
    logger.debug(f"Patching to {target.repository} ({target.ref.specifier()})")
    return format_patch_block(generate(target, config))


def main():
    cli()


if __name__ == "__main__":
    main()
