"""Run git log with the record format the scanner understands."""

import subprocess
from pathlib import Path

from common.constants import LOG_FORMAT
from common.env import env
from common.logger import get_logger

from .models import LogMode

logger = get_logger(__name__)

# Non-ASCII paths would otherwise be printed octal-escaped and quoted
GIT_CONFIG_ARGS = ["-c", "core.quotePath=false"]


class GitCommandError(RuntimeError):
    """Raised when a git invocation fails, times out or cannot be started."""

    def __init__(self, args: list[str], returncode: int | None, stderr: str):
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(args)} failed ({returncode}): {stderr.strip()}")


def build_log_args(
    mode: LogMode,
    file_name: str | None = None,
    max_count: int | None = None,
) -> list[str]:
    """
    Build the git log argument list for a history query.

    Args:
        mode: FILE follows a single path across renames, REPO lists every path
        file_name: Path to follow, required in FILE mode
        max_count: Optional limit on the number of commits

    Returns:
        Arguments to pass after the git executable
    """
    args = [*GIT_CONFIG_ARGS, "log", "--no-merges", "--name-status", f"--format={LOG_FORMAT}"]
    if max_count is not None:
        args.append(f"-n{max_count}")

    if mode is LogMode.FILE:
        if not file_name:
            raise ValueError("A file name is required for a single-path history")
        args.extend(["--follow", "--", file_name])
    return args


def run_git_log(
    mode: LogMode,
    target: Path,
    max_count: int | None = None,
) -> str:
    """
    Capture git log output for a file or a whole repository.

    Uses: git -c core.quotePath=false log --no-merges --name-status
    --format=<LOG_FORMAT> [--follow -- file]

    Args:
        mode: FILE when target is a file, REPO when target is the repository root
        target: Absolute path of the file or repository root
        max_count: Optional commit limit (defaults to GIT_LOG_MAX_COUNT)

    Returns:
        Raw stdout of git log

    Raises:
        GitCommandError: If git exits with a non-zero status, exceeds
            GIT_LOG_TIMEOUT, or the git binary cannot be run
    """
    if max_count is None:
        max_count = env.git_log_max_count()

    if mode is LogMode.FILE:
        cwd = target.parent
        args = build_log_args(mode, target.name, max_count)
    else:
        cwd = target
        args = build_log_args(mode, max_count=max_count)

    command = [env.git_binary(), *args]
    timeout = env.git_log_timeout()
    logger.debug(f"Running {' '.join(command)} in {cwd}")

    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as e:
        raise GitCommandError(command, e.returncode, e.stderr or "") from e
    except subprocess.TimeoutExpired as e:
        raise GitCommandError(command, None, f"timed out after {timeout} seconds") from e
    except OSError as e:
        raise GitCommandError(command, None, str(e)) from e

    return result.stdout
