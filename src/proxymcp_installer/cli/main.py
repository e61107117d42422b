#!/usr/bin/env python3
"""Proxy MCP installer CLI - Main entry point"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from proxymcp_installer import __version__
from proxymcp_installer.config.manager import DEFAULT_CONFIG_PATH, ConfigManager
from proxymcp_installer.installer.bootstrap import InstallContext, full_install
from proxymcp_installer.installer.shell import Shell
from proxymcp_installer.logging_config import setup_logging

console = Console()


@click.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
@click.option("--config", type=click.Path(dir_okay=False, path_type=Path), help="Installer config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--non-interactive", is_flag=True, help="Skip the interactive configuration step")
@click.version_option(__version__, prog_name="proxy-mcp-install")
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def cli(config, verbose, non_interactive, tokens):
    """Install Proxy MCP on this host and register it with Konrado.

    \b
    Required:
      --api-key=<konrado_api_key>
      --callback-url=<https://app.konrado.ai/api/integrations/servers/install>
    Optional:
      --server-url=<http://your-public-ip:8001>   override auto-detected URL
      --port=<8001>                                override default proxy port
    """
    setup_logging(verbose=verbose, console=Console(stderr=True))

    config_path = config if config else DEFAULT_CONFIG_PATH
    try:
        settings = ConfigManager(config_path).load()
    except (OSError, ValueError) as e:
        console.print(f"[red]✗ Could not load configuration from {config_path}: {escape(str(e))}[/red]")
        sys.exit(1)

    ctx = InstallContext(
        tokens=tokens,
        settings=settings,
        shell=Shell(extra_path=settings.extra_search_path),
        console=console,
        interactive=not non_interactive,
    )
    result = full_install(ctx)
    sys.exit(result.exit_code)


if __name__ == "__main__":
    cli()
