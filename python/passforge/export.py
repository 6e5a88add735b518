"""
Export generated passwords to a plain text file.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import GeneratorConfig
from .exceptions import ExportError
from .utils.strength import evaluate_strength

logger = logging.getLogger(__name__)


def default_filename(now: Optional[datetime] = None) -> str:
    """Timestamped file name, e.g. ``passwords_20240131_235959.txt``."""
    now = now or datetime.now()
    return f"passwords_{now.strftime('%Y%m%d_%H%M%S')}.txt"


def format_export(passwords: Iterable[str], config: GeneratorConfig,
                  now: Optional[datetime] = None) -> str:
    """
    Render the export file contents.

    Args:
        passwords: Passwords in output order
        config: Settings the passwords were generated with
        now: Timestamp for the header (current time by default)

    Returns:
        File text: a comment header followed by one numbered line per password
    """
    now = now or datetime.now()
    lines = [
        "# Generated passwords",
        f"# Date: {now.strftime('%Y-%m-%d %H:%M:%S')}",
        f"# Settings: length={config.length}, types={', '.join(config.enabled_types())}",
        "#" + "=" * 50,
        "",
    ]

    for index, password in enumerate(passwords, start=1):
        evaluation = evaluate_strength(password)
        lines.append(f"{index}. {password} ({evaluation.strength.label})")

    return "\n".join(lines) + "\n"


def export_passwords(passwords: Iterable[str], config: GeneratorConfig,
                     path: Optional[Union[str, Path]] = None,
                     now: Optional[datetime] = None) -> Path:
    """
    Write passwords to a text file.

    Args:
        passwords: Passwords to write
        config: Settings the passwords were generated with
        path: Destination; a timestamped name in the working directory by default
        now: Timestamp for the header and default name

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    now = now or datetime.now()
    target = Path(path) if path is not None else Path(default_filename(now))
    passwords = list(passwords)

    try:
        target.write_text(format_export(passwords, config, now), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write export file {target}: {e}")
        raise ExportError(f"Could not write {target}: {e}") from e

    logger.debug(f"Exported {len(passwords)} passwords to {target}")
    return target
