"""
Module Path Resolution

Maps a logical module name to '<search path>/<name>.rs', trying search
paths in registration order. First hit wins.

Rust Pattern: rustc_session::search_paths::SearchPath
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ...shared.errors import ModuleNotFoundError
from ...utils.config import DEFAULT_SEARCH_PATH, MODULE_FILE_EXTENSION
from ...utils.io_utils import path_exists

logger = logging.getLogger(__name__)


class PathResolver:
    """
    Ordered search-path resolution for Rust module files.

    The current working directory ('.') is always the first search path.
    Paths are not validated or deduplicated when added; a directory that
    does not exist simply never matches.
    """

    def __init__(self, search_paths: Optional[Iterable[Union[Path, str]]] = None):
        """
        Args:
            search_paths: Extra directories searched after '.', in order
        """
        self.search_paths: List[Path] = [Path(DEFAULT_SEARCH_PATH)]
        for directory in search_paths or ():
            self.add_search_path(directory)

    def add_search_path(self, directory: Union[Path, str]) -> None:
        """Append a directory to the end of the search order"""
        if not isinstance(directory, Path):
            directory = Path(directory)
        self.search_paths.append(directory)
        logger.debug(f"PathResolver: Added search path {directory}")

    def candidates(self, name: str) -> List[Path]:
        """Every path resolve() would try for name, in order"""
        file_name = f"{name}{MODULE_FILE_EXTENSION}"
        return [directory / file_name for directory in self.search_paths]

    def resolve(self, name: str) -> Path:
        """
        Resolve a module name to a file path.

        Returns:
            The first existing '<search path>/<name>.rs'

        Raises:
            ModuleNotFoundError: No search path contains the file
        """
        candidates = self.candidates(name)
        for candidate in candidates:
            if path_exists(candidate):
                logger.debug(f"PathResolver: Resolved '{name}' to {candidate}")
                return candidate
        logger.debug(f"PathResolver: '{name}' not found in {len(candidates)} search paths")
        raise ModuleNotFoundError(name, candidates)
