import asyncio
import os
import signal
from pathlib import Path

from loguru import logger

from moz60check.domain.ports.tool_runner_port import ToolLaunchError, ToolRunnerPort
from moz60check.domain.value_objects.check_target import CheckTarget

SOURCE_SUFFIX = ".js"
MOZ60TOOL_URL = "https://gitlab.gnome.org/ptomato/moz60tool/tree/master"


def find_sources(root: Path) -> list[Path]:
    """Find JavaScript files below root, depth first in sorted order.

    Directory symlinks below root are not followed.
    """
    sources: list[Path] = []

    def _on_error(error: OSError) -> None:
        logger.warning("Cannot scan {}: {}", error.filename, error.strerror)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(SOURCE_SUFFIX):
                sources.append(Path(dirpath) / filename)

    return sources


class Moz60ToolRunner(ToolRunnerPort):
    """Run moz60tool once per JavaScript file of a target."""

    def __init__(self, tool_path: str = "moz60tool", timeout_s: int = 120) -> None:
        self.tool_path = tool_path
        self.timeout_s = timeout_s

    async def run(self, target: CheckTarget) -> str:
        # moz60tool fails on symlinked roots, always scan the real path
        root = target.path.resolve()
        if not root.is_dir():
            raise ToolLaunchError(target.uuid, f"not a directory: {root}")

        sources = find_sources(root)
        logger.debug("Scanning {} source file(s) of {} in {}", len(sources), target.uuid, root)

        chunks: list[str] = []
        for source in sources:
            chunks.append(await self._run_one(target, source))
        return "".join(chunks)

    async def _run_one(self, target: CheckTarget, source: Path) -> str:
        try:
            proc = await asyncio.create_subprocess_exec(
                self.tool_path,
                str(source),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            raise ToolLaunchError(target.uuid, str(e)) from e

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout_s)
        except TimeoutError as e:
            try:
                os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
            except (ProcessLookupError, OSError):
                proc.kill()
            await proc.wait()
            raise ToolLaunchError(
                target.uuid, f"timed out after {self.timeout_s}s on {source}"
            ) from e
        except OSError as e:
            raise ToolLaunchError(target.uuid, str(e)) from e

        if stderr:
            logger.debug("moz60tool stderr for {}: {}", source, stderr.decode(errors="replace"))
        if proc.returncode:
            # A non-zero exit only means problems were found
            logger.debug("moz60tool exited with {} for {}", proc.returncode, source)

        return stdout.decode(errors="replace")
