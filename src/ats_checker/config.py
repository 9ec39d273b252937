"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "ATS_CHECKER_CONFIG"


@dataclass(frozen=True)
class AnalysisConfig:
    min_words: int = 350
    max_words: int = 1200
    frequency_keywords: int = 30
    max_keywords: int = 40
    missing_keywords_listed: int = 12
    action_verb_target: int = 8
    number_target: int = 8

    def __post_init__(self) -> None:
        if self.min_words < 0:
            raise ValueError(f"min_words must be >= 0, got {self.min_words}")
        if self.max_words < self.min_words:
            raise ValueError(
                f"max_words ({self.max_words}) must be >= min_words ({self.min_words})"
            )
        if not 1 <= self.frequency_keywords <= self.max_keywords:
            raise ValueError(
                f"frequency_keywords must be between 1 and max_keywords, got {self.frequency_keywords}"
            )
        if self.missing_keywords_listed < 1:
            raise ValueError(
                f"missing_keywords_listed must be >= 1, got {self.missing_keywords_listed}"
            )


@dataclass(frozen=True)
class ScoringWeights:
    keyword_coverage: float = 0.40
    section_coverage: float = 0.15
    formatting: float = 0.10
    action_verbs: float = 0.10
    contact: float = 0.10
    length: float = 0.05
    impact: float = 0.05
    file_name: float = 0.05

    def __post_init__(self) -> None:
        values = (
            self.keyword_coverage,
            self.section_coverage,
            self.formatting,
            self.action_verbs,
            self.contact,
            self.length,
            self.impact,
            self.file_name,
        )
        if any(v < 0 for v in values):
            raise ValueError("weights must be non-negative")
        if abs(sum(values) - 1.0) > 1e-6:
            raise ValueError(f"weights must sum to 1.0, got {sum(values):.3f}")


@dataclass(frozen=True)
class ReportConfig:
    output_dir: str = "./output"
    json_indent: int = 2

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown logging level: {self.level}")


@dataclass(frozen=True)
class AppConfig:
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        candidates = [Path(env_path)] if env_path else []
        candidates.append(Path.cwd() / "config.yaml")
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            try:
                raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"invalid YAML in {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError("config must be a mapping of sections")

    return AppConfig(
        analysis=_load_section(AnalysisConfig, raw, "analysis"),
        weights=_load_section(ScoringWeights, raw, "weights"),
        report=_load_section(ReportConfig, raw, "report"),
        logging=_load_section(LoggingConfig, raw, "logging"),
    )


def _load_section(cls, raw: dict, name: str):
    # An empty section ("analysis:" with nothing under it) loads as None
    values = raw.get(name) or {}
    if not isinstance(values, dict):
        raise ValueError(f"config section '{name}' must be a mapping")
    unknown = sorted(set(values) - {f.name for f in fields(cls)})
    if unknown:
        raise ValueError(f"unknown key(s) in '{name}': {', '.join(unknown)}")
    return cls(**values)
