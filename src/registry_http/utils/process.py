"""Run external processes, reporting failures as internal errors"""

import logging
import shlex
import subprocess

from typing import Any, Sequence, Union

from registry_http.exceptions import InternalError, internal_error

logger = logging.getLogger(__name__)

Command = Union[str, bytes, Sequence[Any]]


def _describe(args: Command) -> str:
    if isinstance(args, (str, bytes)):
        return args if isinstance(args, str) else args.decode(errors="replace")
    return shlex.join(str(arg) for arg in args)


def _text(stream: Union[str, bytes]) -> str:
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def _detail(stdout, stderr) -> str:
    detail = ""
    if stdout:
        detail += "--- stdout\n"
        detail += _text(stdout)
    if stderr:
        detail += "--- stderr\n"
        detail += _text(stderr)
    return detail


def exec_command(args: Command, **kwargs: Any) -> subprocess.CompletedProcess:
    """Run ``args`` to completion and return the ``CompletedProcess``.

    Blocks the calling thread for as long as the process runs, so only call it
    from administrative code paths. Extra keyword arguments go to
    :func:`subprocess.run`; output is always captured, so ``capture_output``,
    ``stdout`` and ``stderr`` are not accepted.

    :raises InternalError: if the process cannot be started, times out or
        exits with a non-zero status. ``detail`` holds the captured output, a
        ``--- stdout`` section followed by a ``--- stderr`` section, each
        present only when that stream is not empty.
    """
    description = f"failed to run command `{_describe(args)}`"

    captured = {"capture_output", "stdout", "stderr"} & kwargs.keys()
    if captured:
        raise ValueError(
            f"exec_command always captures output, drop {', '.join(sorted(captured))}"
        )

    try:
        output = subprocess.run(args, capture_output=True, **kwargs)
    except subprocess.TimeoutExpired as exc:
        logger.warning(f"{description} (timed out after {exc.timeout} seconds)")
        detail = _detail(exc.stdout, exc.stderr)
        raise InternalError(description, detail=detail) from exc
    except (OSError, subprocess.SubprocessError) as exc:
        raise InternalError(description) from exc

    if output.returncode != 0:
        logger.warning(f"{description} (exit status {output.returncode})")
        raise internal_error(description, _detail(output.stdout, output.stderr))

    return output
