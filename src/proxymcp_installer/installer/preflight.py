"""Required tool checks"""

import logging
from typing import Iterable, Tuple

from .errors import MissingDependencyError
from .shell import Shell

logger = logging.getLogger(__name__)


def check_required_tools(shell: Shell, tools: Iterable[Tuple[str, str]]) -> None:
    """Raise for the first tool that does not resolve on the search path"""
    for command, package in tools:
        path = shell.which(command)
        if not path:
            raise MissingDependencyError(command, package)
        logger.debug("Found %s at %s", command, path)
