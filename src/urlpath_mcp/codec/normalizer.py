"""Normalization of classpath element paths into URL strings.

Accepts plain filesystem paths, partially qualified "file:"/"jar:" paths,
Windows drive paths and nested-archive paths using "!" separators, and
produces one of:

- jrt:...
- http://... or https://...
- file:/...
- jar:file:/...!/...

The result is percent-encoded and suitable for a URL constructor.
"""

from .context import PathContext, get_default_context
from .encoder import encode_path

# Already well-formed, only need encoding
_PASSTHROUGH_PREFIXES = ("jrt:", "http://", "https://")


def split_drive(path: str) -> tuple[str, str]:
    """Split a Windows drive token off the front of path.

    Recognizes "C:..." and "/C:...".

    Args:
        path: Path with any "jar:"/"file:" prefix already removed

    Returns:
        Tuple of (drive, rest) where drive is e.g. "C:" or "" if none

    Example:
        >>> split_drive("/C:/Users/x")
        ('C:', '/Users/x')
        >>> split_drive("/usr/lib")
        ('', '/usr/lib')
    """
    if len(path) >= 2 and path[0].isalpha() and path[1] == ":":
        return path[:2], path[2:]
    if len(path) >= 3 and path[0] == "/" and path[1].isalpha() and path[2] == ":":
        return path[1:3], path[3:]
    return "", path


def normalize_archive_separators(path: str) -> str:
    """Make every "!" archive separator be followed by exactly one "/".

    Example:
        >>> normalize_archive_separators("/a/b.jar/!c.class")
        '/a/b.jar!/c.class'
    """
    return path.replace("/!", "!").replace("!/", "!").replace("!", "!/")


def normalize_url_path(value: str, context: PathContext | None = None) -> str:
    """Normalize a path or URL into an encoded, scheme-qualified URL string.

    Args:
        value: Filesystem path, URL, or partially qualified path
        context: OS context; defaults to the process-wide context

    Returns:
        Percent-encoded URL string. Never raises.

    Example:
        >>> normalize_url_path("/a/b.jar!c/d.class", PathContext.posix())
        'jar:file:/a/b.jar!/c/d.class'
        >>> normalize_url_path("C:/x.jar", PathContext.windows())
        'file:/C:/x.jar'
    """
    if context is None:
        context = get_default_context()

    if value.startswith(_PASSTHROUGH_PREFIXES):
        return encode_path(value, context)

    path = value
    # Only one of each, "jar:" first
    if path.startswith("jar:"):
        path = path[len("jar:") :]
    if path.startswith("file:"):
        path = path[len("file:") :]

    drive = ""
    if context.is_windows:
        drive, path = split_drive(path)

    path = normalize_archive_separators(path)

    if not path.startswith("/"):
        path = "/" + path
    if drive:
        url = "file:/" + drive + path
    else:
        url = "file:" + path

    if "!" in url and not url.startswith("jar:"):
        url = "jar:" + url

    return encode_path(url, context)
