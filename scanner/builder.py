"""Graph builder that walks package directories by following their imports."""

import logging
import posixpath
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, Set, Tuple, Union

from graph.model import DependencyGraph
from .discovery import list_source_files
from .parser import parse_file


logger = logging.getLogger(__name__)

# Directory name used for the module root package
ROOT_DIR = "."


def normalize_dir(path: str) -> str:
    """
    Normalize a module-relative directory to POSIX form.

    ``"./cmd/"`` becomes ``"cmd"`` and an empty path becomes ``"."``.
    """
    return posixpath.normpath(path.replace("\\", "/"))


def resolve_import(import_path: str, module_prefix: str) -> Optional[str]:
    """
    Map an import path to a module-relative directory.

    Args:
        import_path: Import path as written in the source file.
        module_prefix: Module name from go.mod, e.g. ``github.com/acme/app``.

    Returns:
        The directory of the imported package, or None if the import
        belongs to another module or climbs out of the module root.
    """
    if import_path == module_prefix:
        return ROOT_DIR
    if not import_path.startswith(module_prefix + "/"):
        return None
    target = normalize_dir(import_path[len(module_prefix):].lstrip("/"))
    if target == ".." or target.startswith("../"):
        logger.warning("Ignoring import %s outside the module root", import_path)
        return None
    return target


class GraphBuilder:
    """
    Depth-first traversal from an entry directory through internal imports.

    The builder owns the edge set and the set of visited directories.
    A directory is added to the visited set as soon as its scan begins,
    which stops import cycles from re-entering it and keeps any
    directory from being listed twice.
    """

    def __init__(
        self,
        module_prefix: str,
        root: Union[str, Path] = ".",
        list_dir: Callable[[Path], Iterable[Path]] = list_source_files,
        extract: Callable[[Path], List[str]] = parse_file,
    ):
        module_prefix = module_prefix.rstrip("/")
        if not module_prefix:
            raise ValueError("module prefix must not be empty")
        self.module_prefix = module_prefix
        self.root = Path(root)
        self.graph = DependencyGraph()
        self.visited: Set[str] = set()
        self._list_dir = list_dir
        self._extract = extract

    def build(self, entry_dir: str = ROOT_DIR) -> DependencyGraph:
        """
        Scan from ``entry_dir`` and return the accumulated graph.

        Raises:
            SourceAccessError: If a directory or file cannot be read.
            ParseError: If a source file has malformed import clauses.
        """
        directory = normalize_dir(entry_dir)
        if directory not in self.visited:
            self._visit(directory)
        logger.info(
            "Found %d dependencies across %d directories", len(self.graph), len(self.visited)
        )
        return self.graph

    def _visit(self, entry: str) -> None:
        # Each frame holds a directory and the imports it has left to follow.
        stack = [self._enter(entry)]

        while stack:
            directory, pending = stack[-1]
            for file_path, import_path in pending:
                target = resolve_import(import_path, self.module_prefix)
                if target is None or target == directory:
                    continue

                if self.graph.add_edge(directory, target):
                    logger.debug("%s -> %s (from %s)", directory, target, file_path)

                if target in self.visited:
                    logger.debug("Skipping %s, already visited", target)
                else:
                    stack.append(self._enter(target))
                    break
            else:
                stack.pop()

    def _enter(self, directory: str) -> Tuple[str, Iterator[Tuple[Any, str]]]:
        """Mark ``directory`` visited, list its files and return its frame."""
        self.visited.add(directory)
        logger.debug("Scanning directory %s", directory)
        files = self._list_dir(self.root / directory)
        return directory, self._iter_imports(files)

    def _iter_imports(self, files: Iterable[Any]) -> Iterator[Tuple[Any, str]]:
        for file_path in files:
            for import_path in self._extract(file_path):
                yield file_path, import_path


def build_graph(
    entry_dir: str,
    module_prefix: str,
    root: Union[str, Path] = ".",
) -> DependencyGraph:
    """
    Scan a Go module and build its directory dependency graph.

    Args:
        entry_dir: Module-relative directory to start from, e.g. ``cmd/app``.
        module_prefix: Module name; only imports under it are followed.
        root: Module root on disk that ``entry_dir`` is relative to.

    Returns:
        DependencyGraph containing every internal dependency reachable
        from the entry directory.
    """
    return GraphBuilder(module_prefix, root=root).build(entry_dir)
