"""EditService — apply one tag transform to every note in a directory.

Pipeline per file: READ → TRANSFORM → COMPARE → WRITE.
A file is written only when the transform returned different text.
One bad file is recorded and skipped; it never aborts the batch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fme.config.logging import note_context
from fme.domain.frontmatter import FrontmatterError
from fme.domain.tags import TRANSFORMS
from fme.infrastructure.filesystem import find_markdown_files, read_document, write_document
from fme.services.base import BaseService
from fme.services.result import ServiceResult

logger = logging.getLogger(__name__)


class EditService(BaseService):
    """Runs the tag transforms over the notes of a directory."""

    def apply(
        self,
        op: str,
        directory: Path,
        *,
        recursive: bool = False,
        **params: Any,
    ) -> ServiceResult:
        """Apply transform *op* to every note under *directory*.

        *params* are forwarded to the transform (``tags`` for add/remove,
        ``from_tag``/``to_tag`` for replace).
        """
        transform = TRANSFORMS.get(op)
        if transform is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_OP",
                f"Unknown operation: {op!r}",
                known=sorted(TRANSFORMS),
            )

        if not directory.is_dir():
            return ServiceResult.failure(
                op,
                "DIR_NOT_FOUND",
                f"Not a directory: {directory}",
                dir=str(directory),
            )

        files_cfg = self._settings.files
        dry_run = self._settings.dry_run
        paths = find_markdown_files(
            directory,
            recursive=recursive,
            extensions=files_cfg.extensions,
            skip_dirs=files_cfg.skip_dirs,
        )

        updated: list[str] = []
        errors: list[dict[str, str]] = []
        unchanged = 0

        for path in paths:
            with note_context(op, path):
                try:
                    content = read_document(path)
                    new_content = transform(content, **params)
                    if new_content == content:
                        unchanged += 1
                        continue
                    if not dry_run:
                        write_document(path, new_content)
                except (FrontmatterError, OSError, UnicodeDecodeError) as exc:
                    logger.debug("Error processing %s", path, exc_info=True)
                    errors.append({"path": str(path), "error": str(exc)})
                    continue

                logger.debug("%s %s", "Would update" if dry_run else "Updated", path)
                updated.append(str(path))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "dir": str(directory),
                "recursive": recursive,
                "dry_run": dry_run,
                "scanned": len(paths),
                "updated": updated,
                "unchanged": unchanged,
                "errors": errors,
            },
        )
