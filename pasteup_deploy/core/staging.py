"""Staging directory assembly"""

import logging
from pathlib import Path
from typing import Union

from ..api.exceptions import StagingError
from ..constants import (
    STAGED_CSS_DIR,
    STAGED_JS_DIR,
    STAGED_DOCS_DIR,
    DOCS_EXCLUDED_DIRS,
)
from ..utils.file_utils import copy_tree, remove_tree, is_within

logger = logging.getLogger(__name__)


class StagingAssembler:
    """Builds the local tree that gets synced to the bucket

    Layout::

        <dest>/
        ├── css/    copy of the css source
        ├── js/     copy of the js source
        └── docs/   copy of the docs source, minus build/ and static/
    """

    def __init__(self,
                 css_source: Union[str, Path],
                 js_source: Union[str, Path],
                 docs_source: Union[str, Path]):
        self.css_source = Path(css_source)
        self.js_source = Path(js_source)
        self.docs_source = Path(docs_source)

    def assemble(self, dest: Union[str, Path]) -> Path:
        """Create ``dest`` and copy the source trees into it

        Args:
            dest: Staging directory; must not exist yet

        Returns:
            The staging directory

        Raises:
            StagingError: If the directory exists or a copy fails
        """
        dest = Path(dest)

        try:
            dest.mkdir()
        except FileExistsError:
            raise StagingError(
                f"Staging directory already exists: {dest}. "
                f"Remove it or choose another staging path."
            )
        except OSError as e:
            raise StagingError(f"Cannot create staging directory {dest}: {e}") from e

        logger.info(f"Staging assets in {dest}")

        self._copy(self.css_source, dest / STAGED_CSS_DIR)
        self._copy(self.js_source, dest / STAGED_JS_DIR)

        # The staging directory may itself live in the docs tree
        exclude = [dest] if is_within(dest, self.docs_source) else None
        docs = self._copy(self.docs_source, dest / STAGED_DOCS_DIR, exclude)

        for name in DOCS_EXCLUDED_DIRS:
            try:
                if remove_tree(docs / name):
                    logger.debug(f"Dropped {docs / name} from staging")
            except OSError as e:
                raise StagingError(f"Cannot remove {docs / name}: {e}") from e

        return dest

    def _copy(self, src: Path, dst: Path, exclude=None) -> Path:
        if not src.is_dir():
            raise StagingError(f"Source directory not found: {src}")
        try:
            copy_tree(src, dst, exclude=exclude)
        except OSError as e:
            raise StagingError(f"Failed to copy {src} to {dst}: {e}") from e
        logger.debug(f"Copied {src} -> {dst}")
        return dst

    @staticmethod
    def remove(dest: Union[str, Path]) -> None:
        """Delete the staging directory if it exists"""
        dest = Path(dest)
        try:
            if remove_tree(dest):
                logger.info(f"Removed staging directory {dest}")
        except OSError as e:
            raise StagingError(f"Failed to remove staging directory {dest}: {e}") from e
