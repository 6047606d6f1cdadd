"""Exceptions for env-file handling."""

from pathlib import Path


class EnvFileError(Exception):
    """Base class for env-file errors."""


class TemplateNotFoundError(EnvFileError):
    """The env template to copy from does not exist.

    Attributes:
        template (Path): Expected location of the template.
    """

    def __init__(self, template: Path):
        super().__init__(f"Env template '{template}' not found.")
        self.template = template


class EnvFileAccessError(EnvFileError):
    """An env file (or its template) could not be read or written.

    Attributes:
        path (Path): The file involved.
        reason (str): What went wrong.
    """

    def __init__(self, path: Path, action: str, reason: str):
        super().__init__(f"Cannot {action} '{path}': {reason}.")
        self.path = path
        self.reason = reason
