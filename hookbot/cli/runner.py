from __future__ import annotations

import asyncio
import inspect
import json
import sys
from typing import Any

from hookbot.commands.registry import command_definitions
from hookbot.config.context import ModuleConfig
from hookbot.config.env_loader import load_env_file
from hookbot.modules.interactions.main import DEFAULT_PORT, InteractionsModule
from hookbot.services.bundle import BotServices
from hookbot.services.lifecycle.lifecycle_manager import LifecycleManager
from hookbot.services.logger.factory import LoggerFactory
from hookbot.services.registry import DEFAULTS, resolve_implementation
from hookbot.services.secrets.env_secrets import EnvSecrets
from hookbot.services.secrets.interface import SecretsInterface

USAGE = "Usage: python -m hookbot {serve [flags] [--port N] | commands}"

# Consumed before module args: implementation selectors (--log falls back to
# LOG_IMPL) and the two configuration sources.
_GLOBAL_FLAGS = frozenset({*DEFAULTS, "log", "env", "env-file"})

_SERVE_ARGS: list[dict[str, Any]] = [
    {
        "name": "port",
        "type": "integer",
        "default": DEFAULT_PORT,
        "description": "TCP port for the interactions webhook",
    },
]


def parse_module_args(arg_defs: list[dict[str, Any]], raw_args: list[str]) -> dict[str, Any]:
    """Parse ``--name value`` pairs against *arg_defs*, applying defaults.

    A flag followed by another flag (or by nothing) is read as ``"true"``.
    """
    given: dict[str, str] = {}
    tokens = list(raw_args)
    while tokens:
        token = tokens.pop(0)
        if not token.startswith("--"):
            raise ValueError(f"Unexpected argument: {token}")
        given[token[2:]] = tokens.pop(0) if tokens and not tokens[0].startswith("--") else "true"

    defs = {d["name"]: d for d in arg_defs}
    unknown = sorted(given.keys() - defs.keys())
    if unknown:
        raise ValueError(f"Unknown argument(s): {', '.join('--' + u for u in unknown)}")

    parsed = {
        name: arg_def["default"]
        for name, arg_def in defs.items()
        if "default" in arg_def
    }
    for name, raw in given.items():
        parsed[name] = _cast_value(name, raw, defs[name].get("type", "string"))
    return parsed


def _cast_value(name: str, value: str, type_name: str) -> Any:
    if type_name != "integer":
        return value
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"--{name} must be an integer, got '{value}'") from None


def _parse_env_overrides(raw: str) -> dict[str, str]:
    data = json.loads(raw)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError("--env must be a JSON object of string keys to string values")
    return data


def _extract_global_flags(
    remaining: list[str],
) -> tuple[dict[str, str], dict[str, str], list[str]]:
    """Split *remaining* into (impl_flags, env_overrides, module_args).

    Values from ``--env`` win over values read from ``--env-file``.
    """
    impl_flags = dict(DEFAULTS)
    flag_env: dict[str, str] = {}
    env_file = None
    module_args: list[str] = []

    tokens = iter(remaining)
    for token in tokens:
        name = token[2:] if token.startswith("--") else None
        if name not in _GLOBAL_FLAGS:
            module_args.append(token)
            continue
        value = next(tokens, None)
        if value is None:
            raise ValueError(f"--{name} needs a value")
        if name == "env":
            flag_env.update(_parse_env_overrides(value))
        elif name == "env-file":
            env_file = value
        else:
            impl_flags[name] = value

    env_overrides = load_env_file(env_file) if env_file else {}
    env_overrides.update(flag_env)
    return impl_flags, env_overrides, module_args


def _instantiate(flag_name: str, impl_name: str, secrets: SecretsInterface) -> Any:
    impl_cls = resolve_implementation(flag_name, impl_name)
    if "secrets" in inspect.signature(impl_cls).parameters:
        return impl_cls(secrets=secrets)
    return impl_cls()


def build_services(impl_flags: dict[str, str], env_overrides: dict[str, str]) -> BotServices:
    """Wire the selected implementations into one ``BotServices``."""
    secrets = EnvSecrets(overrides=env_overrides)
    log_impl = impl_flags.get("log") or secrets.get_or_default("LOG_IMPL", "pretty")
    log_level = secrets.get_or_default("LOG_LEVEL", "INFO")
    return BotServices(
        kv=_instantiate("kv", impl_flags["kv"], secrets),
        http=_instantiate("http", impl_flags["http"], secrets),
        secrets=secrets,
        log=LoggerFactory(impl=log_impl, level=log_level).create(),
        metrics=_instantiate("metrics", impl_flags["metrics"], secrets),
    )


async def _serve(module: InteractionsModule, lifecycle: LifecycleManager) -> int:
    lifecycle.install_signal_handlers(asyncio.get_running_loop())
    return await module.run()


def run_module(argv: list[str]) -> tuple[int, InteractionsModule | None]:
    """Testable entry point: returns (exit_code, module or None)."""
    if not argv:
        raise ValueError(USAGE)

    command, rest = argv[0], argv[1:]
    if command == "commands":
        print(json.dumps(command_definitions(), indent=2))
        return 0, None
    if command != "serve":
        raise ValueError(USAGE)

    impl_flags, env_overrides, raw_args = _extract_global_flags(rest)
    config = ModuleConfig(parse_module_args(_SERVE_ARGS, raw_args))
    services = build_services(impl_flags, env_overrides)
    lifecycle = LifecycleManager(services.log)
    module = InteractionsModule(config, services, lifecycle)
    return asyncio.run(_serve(module, lifecycle)), module


def run_cli(argv: list[str] | None = None) -> None:
    args = argv if argv is not None else sys.argv[1:]
    try:
        exit_code, _ = run_module(args)
        sys.exit(exit_code)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
