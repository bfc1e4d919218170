"""Optional symlink resolution.

Only this module touches the filesystem. A path that doesn't exist, or
that can't be resolved, is reported as None so the caller keeps the
lexical result.
"""

from __future__ import annotations

import os
from pathlib import Path

from pathcanon.canon.roots import ParsedPath, render
from pathcanon.families import FamilyRules, get_family


def host_form(parsed: ParsedPath, rules: FamilyRules) -> str:
    """Render a parsed path the way the host OS spells it."""
    if os.name == "nt":
        return render(parsed, get_family("windows"))
    if rules.separator != "/":
        rules = get_family("mingw64")
    return render(parsed, rules)


def follow_links(host_path: str) -> str | None:
    """Resolve symlinks in an existing path; None if it is missing or unresolvable."""
    path = Path(host_path)
    try:
        if not path.exists():
            return None
        return str(path.resolve(strict=True))
    except (OSError, RuntimeError):
        return None
