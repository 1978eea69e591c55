"""Assemble the minimized Java runtime bundled with the installer."""

import logging
from pathlib import Path

from nativepack.core.layout import discard_incomplete_output, is_stage_complete, mark_stage_complete
from nativepack.gateway.runtime_trimmer.abc import RuntimeTrimmer

logger = logging.getLogger(__name__)


def assemble_runtime(
    trimmer: RuntimeTrimmer,
    output_dir: Path,
    *,
    modules: list[str],
    timeout: float | None,
) -> bool:
    """Produce the trimmed runtime in output_dir unless a previous run completed it.

    Returns:
        True if the trimmer ran, False if the stage was skipped

    Raises:
        ToolInvocationError: If the trimmer fails
    """
    if is_stage_complete(output_dir):
        logger.info("Custom runtime already assembled at %s, skipping", output_dir)
        return False

    discard_incomplete_output(output_dir)
    output_dir.parent.mkdir(parents=True, exist_ok=True)
    trimmer.trim(output_dir=output_dir, modules=modules, timeout=timeout)
    mark_stage_complete(output_dir)
    return True
