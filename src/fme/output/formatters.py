"""Pick the output mode for a ServiceResult.

``--json`` wins over ``--quiet``, which wins over the Rich human report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from fme.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        from fme.output.renderers import render_quiet

        return render_quiet(result)

    from fme.output.renderers import render_result

    return render_result(result, verbose=settings.verbose)
