"""Run a dump client as a subprocess."""

import asyncio
import logging
import os

logger = logging.getLogger(__name__)


async def run_dump_command(
    command: list[str],
    env: dict[str, str] | None = None,
) -> bool:
    """Run ``command`` and report whether it exited with status 0.

    ``env`` entries are added on top of the current environment.  The
    client's stderr is logged when the command fails.
    """
    logger.debug("$ %s", " ".join(command))

    try:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
            env={**os.environ, **(env or {})},
        )
    except FileNotFoundError:
        logger.error("Dump client not found: %s", command[0])
        return False

    _, stderr = await process.communicate()

    if process.returncode != 0:
        logger.error(
            "%s exited with status %s: %s",
            command[0],
            process.returncode,
            stderr.decode(errors="replace").strip(),
        )
        return False

    return True
