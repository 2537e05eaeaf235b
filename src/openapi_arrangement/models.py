"""Pydantic models for openapi-arrangement configuration.

The project file ``./openapi-arrangement.json`` is validated into
:class:`ArrangementConfig`; environment variables and CLI flags are layered
on top by :func:`~openapi_arrangement.config.resolve_config`.

Ordering results themselves are plain dataclasses, see
:mod:`openapi_arrangement.ordering.orderer`.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from openapi_arrangement.ordering.orderer import GREEDY_REQUIRED_FIRST


class ArrangementConfig(BaseModel):
    """Effective configuration for an ordering run.

    Output format is not part of it: ``--json`` and ``--plain`` apply to
    the whole CLI invocation, before any project file is read.

    Example::

        ArrangementConfig(path="#/$defs/", strategy="alphabetical")
    """

    model_config = ConfigDict(extra="forbid")

    path: Optional[str] = Field(
        default=None,
        description="Schema container path; None tries #/components/schemas then #/$defs",
    )
    strategy: str = Field(
        default=GREEDY_REQUIRED_FIRST,
        description="greedy_required_first, alphabetical, or a registered sort key",
    )
