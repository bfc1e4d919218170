"""Families CLI command."""

import argparse

from pathcanon.cli.canon import load_context
from pathcanon.families import family_names, get_family


def cmd_families(args: argparse.Namespace) -> int:
    # loading the config registers any families it declares
    if load_context(args) is None:
        return 1

    print(f"\n  {'Name':<12} {'Sep':<5} {'Drives':<8} {'Prefix':<12} Description")
    print(f"  {'─' * 72}")
    for name in family_names():
        rules = get_family(name)
        print(
            f"  {rules.name:<12} {rules.separator:<5} {rules.drive_style:<8} "
            f"{rules.mount_prefix or '/':<12} {rules.description}"
        )
    print(f"\n  {len(family_names())} family(ies)")
    return 0
