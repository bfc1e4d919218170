"""Env CLI command."""

import argparse
import json

from pathcanon.cli.canon import load_context
from pathcanon.errors import PathError
from pathcanon.families import MOUNT


def cmd_env(args: argparse.Namespace) -> int:
    ctx = load_context(args)
    if ctx is None:
        return 1

    try:
        rules = ctx.rules
    except PathError as e:
        print(f"ERROR: {e}")
        return 1

    if args.json:
        print(json.dumps({**ctx.to_dict(), "rules": rules.to_dict()}, indent=2))
        return 0

    print(f"\n  Family:          {ctx.family} ({rules.description or 'custom'})")
    print(f"  Home:            {ctx.home or '(unset)'}")
    print(f"  Separator:       {rules.separator}")
    print(f"  Drive style:     {rules.drive_style}")
    if rules.drive_style == MOUNT:
        print(f"  Mount prefix:    {rules.mount_prefix or '/'}")
    print(f"  Strict escapes:  {ctx.strict_escapes}")
    print(f"  Caret escapes:   {ctx.caret_escapes}")
    print(f"  Resolve links:   {ctx.resolve_links}")
    for point, target in sorted(ctx.mounts.items()):
        print(f"  Mount:           {point} -> {target}")
    print()
    return 0
