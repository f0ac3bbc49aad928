"""Operating-system context for path encoding.

Windows drive-letter handling depends on the host OS family. Rather than
reading ambient state inside the codec, callers pass a PathContext; when they
don't, a process-wide default resolved once from configuration is used.
"""

import sys
from dataclasses import dataclass
from enum import Enum


class OsFamily(Enum):
    """Host operating system families relevant to path encoding."""

    WINDOWS = "windows"
    POSIX = "posix"


@dataclass(frozen=True)
class PathContext:
    """Immutable settings consulted by the encoder and normalizer.

    Attributes:
        os_family: Whether Windows drive-letter conventions apply
    """

    os_family: OsFamily

    @property
    def is_windows(self) -> bool:
        return self.os_family is OsFamily.WINDOWS

    @classmethod
    def windows(cls) -> "PathContext":
        return cls(OsFamily.WINDOWS)

    @classmethod
    def posix(cls) -> "PathContext":
        return cls(OsFamily.POSIX)


_default_context: PathContext | None = None


def detect_os_family() -> OsFamily:
    """Detect the OS family of the running interpreter."""
    if sys.platform == "win32":
        return OsFamily.WINDOWS
    return OsFamily.POSIX


def get_default_context() -> PathContext:
    """
    Get the process-wide default context.

    Resolves URLPATH_MCP_OS_FAMILY through the config on first call and caches
    the result; "auto" falls back to detect_os_family().

    Returns:
        PathContext shared by all calls that don't pass one explicitly
    """
    global _default_context
    if _default_context is None:
        from ..config import get_config

        os_family = get_config().os_family
        if os_family == "auto":
            _default_context = PathContext(detect_os_family())
        else:
            _default_context = PathContext(OsFamily(os_family))
    return _default_context


def reset_default_context() -> None:
    """
    Reset cached default context (for testing only).

    The next get_default_context() call re-reads the configuration.
    """
    global _default_context
    _default_context = None
