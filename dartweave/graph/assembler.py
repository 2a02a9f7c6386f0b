"""Import injection for generated artifacts.

The assembler turns each artifact's resolvable dependencies into import
directives and splices them into the artifact's content right after its
header, i.e. the leading run of single-line comments.  Unresolved
dependencies never produce an import line; they are reported by
:meth:`Assembler.find_missing_dependencies` instead.
"""

from __future__ import annotations

import structlog

from dartweave.config import settings
from dartweave.errors import NotFoundError
from dartweave.graph.paths import relative_path
from dartweave.graph.store import GraphStore
from dartweave.models.artifact import MissingDependency

logger = structlog.get_logger(__name__)


def split_header(content: str, comment_prefix: str = "//") -> tuple[int, int]:
    """Locate the header of *content* with a line-by-line scan.

    The header is a maximal leading run of lines starting with
    *comment_prefix*, followed by at most one blank line.  Both ``\\n``
    and ``\\r\\n`` line endings are recognised.

    Args:
        content: Artifact source text.
        comment_prefix: Marker of a single-line comment.

    Returns:
        ``(comment_end, header_end)``: offsets just past the comment
        lines and just past the optional blank line.  Both are ``0`` when
        the content does not start with a comment; a leading blank line
        alone is not a header.
    """
    pos = 0
    size = len(content)

    while pos < size and content.startswith(comment_prefix, pos):
        newline = content.find("\n", pos)
        pos = size if newline == -1 else newline + 1

    comment_end = pos
    if comment_end == 0:
        return 0, 0
    if content.startswith("\r\n", pos):
        pos += 2
    elif content.startswith("\n", pos):
        pos += 1

    return comment_end, pos


def header_length(content: str, comment_prefix: str = "//") -> int:
    """Return the length of the header of *content* (0 if there is none)."""
    return split_header(content, comment_prefix)[1]


class Assembler:
    """Builds import-augmented source text from a :class:`GraphStore`.

    Args:
        store: The populated graph store.  Only read, never modified.
        import_template: Format string for one import line; ``{path}`` is
            the relative path.  Defaults to
            :pyattr:`dartweave.config.Settings.import_template`.
        comment_prefix: Single-line comment marker used for header
            detection.  Defaults to
            :pyattr:`dartweave.config.Settings.comment_prefix`.
    """

    def __init__(
        self,
        store: GraphStore,
        import_template: str | None = None,
        comment_prefix: str | None = None,
    ) -> None:
        self.store = store
        self.import_template = import_template or settings.import_template
        self.comment_prefix = comment_prefix or settings.comment_prefix

    def generate_import_block(self, path: str, newline: str = "\n") -> str:
        """Return one import line per resolvable dependency of *path*.

        Lines are sorted by target path.  An unknown *path* or one without
        resolvable dependencies gives an empty string.
        """
        node = self.store.get_node(path)
        if node is None:
            return ""

        lines = [
            self.import_template.format(path=relative_path(path, dep))
            for dep in sorted(node.depends_on)
            if dep in self.store
        ]
        return newline.join(lines)

    def find_missing_dependencies(self) -> list[MissingDependency]:
        """Report every declared dependency that has no node.

        Safe to call at any point of a run; the store is not modified and
        repeated calls return equal lists.
        """
        missing = self.store.unresolved_dependencies()
        if missing:
            logger.warning(
                "missing_dependencies_found",
                count=len(missing),
                artifacts=sorted({m.artifact_path for m in missing}),
            )
        return missing

    def assemble(self, path: str) -> str:
        """Return the content of *path* with its imports spliced in.

        Raises:
            NotFoundError: If *path* was never ingested.
        """
        artifact = self.store.get_artifact(path)
        if artifact is None:
            raise NotFoundError(path)

        content = artifact.content
        newline = "\r\n" if "\r\n" in content else "\n"

        block = self.generate_import_block(path, newline=newline)
        if not block:
            return content

        comment_end, header_end = split_header(content, self.comment_prefix)
        comments = content[:comment_end]
        if comments and not comments.endswith("\n"):
            comments += newline

        logger.debug(
            "artifact_assembled",
            path=path,
            imports=block.count(newline) + 1,
            header_chars=header_end,
        )
        return comments + block + newline * 2 + content[header_end:]
