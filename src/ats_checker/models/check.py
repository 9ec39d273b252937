"""Models for heuristic resume checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel

CheckStatus = Literal["ok", "warn", "danger"]


class Check(BaseModel):
    status: CheckStatus
    message: str

    model_config = {"frozen": True}


@dataclass(frozen=True)
class CheckReport:
    """Ordered checks plus the raw signals computed alongside them."""

    checks: list[Check] = field(default_factory=list)
    section_hits: int = 0
    email_ok: bool = False
    phone_ok: bool = False
    linkedin_ok: bool = False
    word_count: int = 0
    length_ok: bool = False
    file_score: float = 0.0  # 0.0, 0.5 or 1.0
    has_tables: bool = False
    has_image_hint: bool = False
    action_verb_count: int = 0
    number_count: int = 0
