"""Running external commands and logging what happened."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = [
    "first_few_bytes",
    "cmd_fields",
    "error_fields",
    "log_cmd_combined_output",
    "log_cmd_output",
    "log_cmd_run",
]

_FEW = 64


def first_few_bytes(data: bytes) -> bytes:
    """Return the first few bytes of data, marking truncation with '...'."""
    if len(data) > _FEW:
        return data[:_FEW] + b"..."
    return data


def cmd_fields(
    args: Sequence[str],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Describe a command as structured log fields."""
    fields: dict[str, Any] = {}
    if args:
        fields["path"] = shutil.which(args[0]) or args[0]
        fields["args"] = list(args)
    if cwd:
        fields["dir"] = os.fspath(cwd)
    if env is not None:
        fields["env"] = [f"{key}={value}" for key, value in env.items()]
    return fields


def error_fields(error: BaseException | None) -> dict[str, Any]:
    """Describe a failed process as structured log fields."""
    if not isinstance(error, subprocess.CalledProcessError):
        return {}
    fields: dict[str, Any] = {}
    if error.returncode < 0:
        fields["signal"] = -error.returncode
    elif error.returncode != 0:
        fields["exitCode"] = error.returncode
    if error.stderr is not None:
        fields["stderr"] = error.stderr
    return fields


def _run(
    logger: logging.Logger,
    message: str,
    args: Sequence[str],
    cwd: str | os.PathLike[str] | None,
    env: Mapping[str, str] | None,
    capture: dict[str, Any],
    output_key: str | None,
) -> bytes | None:
    fields = cmd_fields(args, cwd, env)
    try:
        result = subprocess.run(
            list(args),
            cwd=cwd,
            env=None if env is None else dict(env),
            check=True,
            **capture,
        )
    except subprocess.CalledProcessError as exc:
        failure = {**fields, "error": str(exc), **error_fields(exc)}
        if output_key is not None:
            failure[output_key] = exc.output
        logger.error(message, extra={"fields": failure})
        raise
    except OSError as exc:
        logger.error(message, extra={"fields": {**fields, "error": str(exc)}})
        raise
    if output_key is not None:
        fields[output_key] = first_few_bytes(result.stdout)
    logger.debug(message, extra={"fields": fields})
    return result.stdout


def log_cmd_combined_output(
    logger: logging.Logger,
    args: Sequence[str],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> bytes:
    """Run a command, log it, and return its interleaved stdout and stderr."""
    return _run(
        logger,
        "CombinedOutput",
        args,
        cwd,
        env,
        {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT},
        "combinedOutput",
    )


def log_cmd_output(
    logger: logging.Logger,
    args: Sequence[str],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> bytes:
    """Run a command, log it, and return its stdout."""
    return _run(
        logger,
        "Output",
        args,
        cwd,
        env,
        {"stdout": subprocess.PIPE, "stderr": subprocess.PIPE},
        "output",
    )


def log_cmd_run(
    logger: logging.Logger,
    args: Sequence[str],
    cwd: str | os.PathLike[str] | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Run a command and log it."""
    _run(logger, "Run", args, cwd, env, {}, None)