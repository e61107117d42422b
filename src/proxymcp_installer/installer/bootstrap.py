"""Automated installation orchestrator for Proxy MCP."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import httpx
from rich.console import Console
from rich.markup import escape

from ..config.envfile import read_env_file
from ..config.settings import InstallerSettings
from .configure import PORT_KEY, apply_port_override, auto_configure, interactive_configure
from .environment import build_environment
from .errors import InstallerError, InvalidArgumentsError
from .identity import SystemIdentity, ensure_identity
from .package import install_package, unpack_data
from .params import InstallParameters, parse_parameters
from .platform import PlatformKind, detect_platform
from .preflight import check_required_tools
from .registrar import register_backend
from .runtime import RuntimeCandidate, locate_runtime
from .service import install_service, service_status
from .shell import Shell
from .summary import print_summary

logger = logging.getLogger(__name__)


@dataclass
class InstallContext:
    """State threaded through the pipeline; each stage fills in its own field"""

    tokens: Sequence[str]
    settings: InstallerSettings
    shell: Shell
    console: Console
    root: Path = Path("/")
    interactive: bool = True
    transport: Optional[httpx.BaseTransport] = None

    params: Optional[InstallParameters] = None
    platform: Optional[PlatformKind] = None
    identity: Optional[SystemIdentity] = None
    runtime: Optional[RuntimeCandidate] = None
    service_status: Optional[str] = None


@dataclass(frozen=True)
class Stage:
    name: str
    action: Callable[[InstallContext], None]


@dataclass
class PipelineResult:
    completed: List[str] = field(default_factory=list)
    failed_stage: Optional[str] = None
    error: Optional[InstallerError] = None

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.exit_code


def _preflight(ctx: InstallContext) -> None:
    check_required_tools(ctx.shell, ctx.settings.required_tools)


def _resolve_arguments(ctx: InstallContext) -> None:
    ctx.params = parse_parameters(ctx.tokens)


def _detect_platform(ctx: InstallContext) -> None:
    ctx.platform = detect_platform(ctx.root)
    ctx.console.print(f"Detected platform: [bold]{ctx.platform.value}[/bold]")


def _provision_identity(ctx: InstallContext) -> None:
    settings = ctx.settings
    ctx.identity = ensure_identity(
        ctx.shell,
        SystemIdentity(settings.user_name, settings.group_name, settings.install_dir),
        ctx.console,
        login_shell=settings.login_shell,
    )


def _locate_runtime(ctx: InstallContext) -> None:
    ctx.runtime = locate_runtime(
        ctx.shell, ctx.settings.runtime_candidates, ctx.settings.min_runtime
    )
    ctx.console.print(f"Using Python: {ctx.runtime.executable_path} ({ctx.runtime.version_string})")


def _build_environment(ctx: InstallContext) -> None:
    settings = ctx.settings
    build_environment(ctx.shell, ctx.runtime, settings.install_dir, settings.venv_dir, ctx.identity)


def _install_package(ctx: InstallContext) -> None:
    settings = ctx.settings
    install_package(
        ctx.shell,
        settings.venv_bin,
        settings.package_name,
        settings.index_url,
        settings.trusted_host,
    )
    unpack_data(ctx.shell, settings.venv_bin, settings.install_dir)


def _materialize_config(ctx: InstallContext) -> None:
    settings = ctx.settings
    auto_configure(ctx.shell, settings.venv_bin, settings.install_dir)
    apply_port_override(settings.env_file, ctx.params.port, ctx.console)
    if ctx.interactive:
        interactive_configure(ctx.shell, settings.venv_bin, settings.install_dir, ctx.console)


def _install_service(ctx: InstallContext) -> None:
    install_service(ctx.shell, ctx.settings.service_script)


def _register_backend(ctx: InstallContext) -> None:
    register_backend(
        ctx.params, timeout=ctx.settings.request_timeout, transport=ctx.transport
    )
    ctx.console.print(f"Registered with {ctx.params.callback_url}")


def _configured_port(settings: InstallerSettings) -> str:
    try:
        port = read_env_file(settings.env_file).get(PORT_KEY, "").strip()
    except (OSError, ValueError):
        return ""
    return port if port.isdigit() else ""


def _report_summary(ctx: InstallContext) -> None:
    ctx.service_status = service_status(ctx.shell, ctx.settings.service_name)
    print_summary(
        ctx.console,
        platform=ctx.platform.value,
        service_name=ctx.settings.service_name,
        status=ctx.service_status,
        runtime=ctx.runtime.executable_path,
        port=_configured_port(ctx.settings),
    )


STAGES = (
    Stage("Preflight", _preflight),
    Stage("Arguments", _resolve_arguments),
    Stage("Platform", _detect_platform),
    Stage("Identity", _provision_identity),
    Stage("Runtime", _locate_runtime),
    Stage("Environment", _build_environment),
    Stage("Package", _install_package),
    Stage("Configuration", _materialize_config),
    Stage("Service", _install_service),
    Stage("Registration", _register_backend),
    Stage("Summary", _report_summary),
)


def run_pipeline(ctx: InstallContext, stages: Sequence[Stage] = STAGES) -> PipelineResult:
    """Run stages in order, stopping at the first failure"""
    result = PipelineResult()

    for stage in stages:
        logger.info("Stage %s", stage.name)
        try:
            stage.action(ctx)
        except InstallerError as e:
            logger.debug("Stage %s failed", stage.name, exc_info=True)
            result.failed_stage = stage.name
            result.error = e
            return result
        result.completed.append(stage.name)

    return result


def full_install(ctx: InstallContext) -> PipelineResult:
    """Run full installation process."""
    console = ctx.console
    result = run_pipeline(ctx)

    if not result.success:
        console.print(f"\n[red]✗ Installation failed at: {result.failed_stage}[/red]")
        console.print(f"[red]{escape(str(result.error))}[/red]")
        if isinstance(result.error, InvalidArgumentsError) and result.error.usage:
            console.print()
            console.print(result.error.usage, markup=False, highlight=False)

    return result
