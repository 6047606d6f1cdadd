"""Env-file materializer.

Creates the stack's local env file from the checked-in template the first
time it is needed. The env file's presence means "already configured": it is
never regenerated, overwritten or merged with the template.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gakumu.interfaces.envfile import EnvFileAccessError, TemplateNotFoundError

logger = logging.getLogger(__name__)


class EnvFileMaterializer:
    """Copy a template to the env file location unless the env file exists."""

    def __init__(self, env_path: Path, template_path: Path) -> None:
        self._env_path = Path(env_path)
        self._template_path = Path(template_path)

    @property
    def env_path(self) -> Path:
        """Location of the env file."""
        return self._env_path

    @property
    def template_path(self) -> Path:
        """Location of the template."""
        return self._template_path

    def exists(self) -> bool:
        """Return True if the env file is already present."""
        return self._env_path.exists()

    def ensure(self) -> bool:
        """Create the env file from the template if it is missing.

        The copy is byte-for-byte. The env file is opened in exclusive-create
        mode, so a file that appears concurrently is left alone.

        Returns:
            bool: True if the env file was created, False if it already existed.

        Raises:
            TemplateNotFoundError: If the env file is missing and so is the template.
            EnvFileAccessError: If the template cannot be read or the env file
                cannot be written.
        """
        if self.exists():
            logger.debug("Env file %s present; leaving it untouched", self._env_path)
            return False

        try:
            content = self._template_path.read_bytes()
        except FileNotFoundError:
            raise TemplateNotFoundError(self._template_path) from None
        except OSError as e:
            raise EnvFileAccessError(self._template_path, "read", e.strerror or str(e)) from e

        try:
            with self._env_path.open("xb") as f:
                f.write(content)
        except FileExistsError:
            logger.debug("Env file %s appeared concurrently; keeping it", self._env_path)
            return False
        except OSError as e:
            raise EnvFileAccessError(self._env_path, "write", e.strerror or str(e)) from e

        logger.info(
            "Created %s from %s (%d bytes)",
            self._env_path,
            self._template_path,
            len(content),
        )
        return True
