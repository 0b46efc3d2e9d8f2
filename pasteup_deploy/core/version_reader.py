"""Version document reader"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..api.exceptions import ParseError, VersionFileError

logger = logging.getLogger(__name__)


class VersionReader:
    """Reads the version document ``{"versions": [...]}``

    The last entry of ``versions`` is the current release. The file is
    re-read on every call.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def versions(self) -> List[str]:
        """Return every known version, oldest first

        Raises:
            VersionFileError: If the file cannot be read
            ParseError: If the document is malformed or lists no versions
        """
        try:
            content = self.path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise ParseError(str(self.path), str(e)) from e
        except OSError as e:
            raise VersionFileError(str(self.path), e.strerror or str(e)) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(str(self.path), str(e)) from e

        if not isinstance(data, dict) or 'versions' not in data:
            raise ParseError(str(self.path), "missing 'versions' list")

        versions = data['versions']
        if not isinstance(versions, list):
            raise ParseError(str(self.path), "'versions' must be a list")
        if not versions:
            raise ParseError(str(self.path), "'versions' is empty")

        for entry in versions:
            if not isinstance(entry, str) or not entry.strip():
                raise ParseError(str(self.path), f"invalid version entry: {entry!r}")

        return versions

    def current_version(self) -> str:
        """Return the most recently appended version"""
        version = self.versions()[-1]
        logger.debug(f"Current version from {self.path}: {version}")
        return version
