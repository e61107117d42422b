"""Command-line parameter resolution"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from .errors import InvalidArgumentsError

USAGE = """\
Usage:
  proxy-mcp-install \\
      --api-key=<konrado_api_key> \\
      --callback-url=<https://app.konrado.ai/api/integrations/servers/install>

Optional:
  --server-url=<http://your-public-ip:8001>   override auto-detected URL
  --port=<8001>                                override default proxy port"""

# token prefix -> InstallParameters field
KNOWN_OPTIONS = {
    "--api-key": "api_key",
    "--callback-url": "callback_url",
    "--server-url": "server_url",
    "--port": "port",
}


@dataclass(frozen=True)
class InstallParameters:
    """Operator-supplied install parameters"""

    api_key: str
    callback_url: str
    server_url: Optional[str] = None
    port: Optional[int] = None


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise InvalidArgumentsError(f"Error: --port must be an integer, got {raw!r}.", USAGE)
    if not 1 <= port <= 65535:
        raise InvalidArgumentsError(f"Error: --port must be between 1 and 65535, got {port}.", USAGE)
    return port


def parse_parameters(tokens: Sequence[str]) -> InstallParameters:
    """Parse ``--key=value`` tokens into validated parameters.

    Unrecognised tokens are ignored and a repeated option keeps its last value.
    """
    raw: Dict[str, str] = {}
    for token in tokens:
        name, sep, value = token.partition("=")
        if sep and name in KNOWN_OPTIONS:
            raw[KNOWN_OPTIONS[name]] = value

    api_key = raw.get("api_key", "").strip()
    callback_url = raw.get("callback_url", "").strip()
    if not api_key or not callback_url:
        raise InvalidArgumentsError("Error: --api-key and --callback-url are required.", USAGE)

    port_raw = raw.get("port", "").strip()
    return InstallParameters(
        api_key=api_key,
        callback_url=callback_url,
        server_url=raw.get("server_url", "").strip() or None,
        port=_parse_port(port_raw) if port_raw else None,
    )
