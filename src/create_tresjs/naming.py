"""
create_tresjs.naming - Project Name Validation
==============================================

The project name is used twice: as the ``name`` field of the generated
``package.json`` and as the name of the directory the project is created
in. A valid name therefore has to satisfy npm's rules for new packages
*and* be a plain directory name.

Rules
-----
- Non-empty, no leading or trailing whitespace
- At most 214 characters
- No uppercase letters
- Must not start with ``.`` or ``_``
- No path separators (scoped ``@scope/name`` packages are not supported)
- URL-safe, without the special characters ``~'!()*``
- Not a blacklisted name or a Node.js core module

Example
-------
>>> is_valid_name("demo-app")
True
>>> is_valid_name("Demo")
False
>>> name_problems("../evil")
['name cannot start with a period', 'name cannot contain path separators', 'name can only contain URL-friendly characters']
"""

from __future__ import annotations

import re
from urllib.parse import quote


MAX_NAME_LENGTH = 214

BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})

# Node.js core modules (``require("module").builtinModules``)
NODE_BUILTINS = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

# Characters encodeURIComponent leaves untouched besides letters and digits
_URL_SAFE = "-_.!~*'()"
_SPECIAL_CHARS = re.compile(r"[~'!()*]")
_PATH_SEPARATORS = ("/", "\\")


def name_problems(candidate: str) -> list[str]:
    """
    Collect every rule the candidate name violates.

    Parameters
    ----------
    candidate : str
        Proposed project name.

    Returns
    -------
    list[str]
        Human-readable problems; empty when the name is valid.
    """
    if not isinstance(candidate, str):
        return ["name must be a string"]
    if not candidate.strip():
        return ["name length must be greater than zero"]

    problems: list[str] = []

    if candidate != candidate.strip():
        problems.append("name cannot contain leading or trailing spaces")
    if candidate.startswith("."):
        problems.append("name cannot start with a period")
    if candidate.startswith("_"):
        problems.append("name cannot start with an underscore")
    if any(sep in candidate for sep in _PATH_SEPARATORS):
        problems.append("name cannot contain path separators")
    if candidate.lower() in BLACKLISTED_NAMES:
        problems.append(f"{candidate} is a blacklisted name")
    if candidate in NODE_BUILTINS:
        problems.append(f"{candidate} is a core module name")
    if len(candidate) > MAX_NAME_LENGTH:
        problems.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if candidate.lower() != candidate:
        problems.append("name can no longer contain capital letters")
    if _SPECIAL_CHARS.search(candidate):
        problems.append("name can no longer contain special characters (\"~'!()*\")")
    if quote(candidate, safe=_URL_SAFE) != candidate:
        problems.append("name can only contain URL-friendly characters")

    return problems


def is_valid_name(candidate: str) -> bool:
    """Return True if ``candidate`` can be used as a new project name."""
    return not name_problems(candidate)
