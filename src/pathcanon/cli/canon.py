"""Canonicalize CLI command and shared context construction."""

import argparse
import json

import yaml

from pathcanon.canon import canonicalize_many
from pathcanon.config import load_config
from pathcanon.context import EnvironmentContext
from pathcanon.errors import ConfigError


def build_context(args: argparse.Namespace) -> EnvironmentContext:
    """Environment detection, then config file, then command-line flags."""
    ctx = EnvironmentContext.from_environ(config=load_config(args.config))

    overrides: dict = {}
    if getattr(args, "family", None):
        overrides["family"] = args.family
    if getattr(args, "home", None):
        overrides["home"] = args.home
    if getattr(args, "strict", False):
        overrides["strict_escapes"] = True
    if getattr(args, "caret_escapes", False):
        overrides["caret_escapes"] = True
    if getattr(args, "resolve_links", False):
        overrides["resolve_links"] = True
    return ctx.replace(**overrides) if overrides else ctx


def load_context(args: argparse.Namespace) -> EnvironmentContext | None:
    """``build_context`` that prints config problems instead of raising."""
    try:
        return build_context(args)
    except (ConfigError, FileNotFoundError, yaml.YAMLError) as e:
        print(f"ERROR: Could not load config: {e}")
        return None


def cmd_canonicalize(args: argparse.Namespace) -> int:
    ctx = load_context(args)
    if ctx is None:
        return 1

    results = canonicalize_many(args.paths, ctx)
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for result in results:
            print(result.summary())
    return 0 if all(r.ok for r in results) else 1
