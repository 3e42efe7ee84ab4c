"""
Pydantic schemas for article endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from core.params import INT4_MAX, INT4_MIN


class ArticleVoteUpdate(BaseModel):
    """
    PATCH body for an article. Unknown keys are ignored.

    `StrictInt` rejects strings, floats and booleans; the bounds match the
    `votes` integer column.
    """

    model_config = ConfigDict(extra="ignore")

    inc_votes: StrictInt = Field(..., ge=INT4_MIN, le=INT4_MAX)
