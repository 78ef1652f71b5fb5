"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

PROVIDERS = ("gemini", "anthropic")


@dataclass(frozen=True)
class LLMConfig:
    provider: str = "gemini"
    model: str = "gemini-flash-latest"
    anthropic_model: str = "claude-haiku-4-5-20251001"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: int = 60
    temperature: float = 0.7
    max_tokens: int = 1024

    def __post_init__(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"provider must be one of {PROVIDERS}, got {self.provider!r}")
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"timeout must be between 1 and 600 seconds, got {self.timeout}")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError(f"temperature must be between 0 and 2, got {self.temperature}")
        if self.max_tokens < 1:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")

    @property
    def active_model(self) -> str:
        return self.anthropic_model if self.provider == "anthropic" else self.model


@dataclass(frozen=True)
class HistoryConfig:
    db_path: str = "~/.say-better/history.db"
    list_limit: int = 100

    def __post_init__(self) -> None:
        if self.list_limit < 1:
            raise ValueError(f"list_limit must be positive, got {self.list_limit}")

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class MailConfig:
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    subject_prefix: str = "[SayBetter Support]"

    def __post_init__(self) -> None:
        if not 1 <= self.smtp_port <= 65535:
            raise ValueError(f"smtp_port must be between 1 and 65535, got {self.smtp_port}")


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    mail: MailConfig = field(default_factory=MailConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        history=HistoryConfig(**raw.get("history", {})),
        mail=MailConfig(**raw.get("mail", {})),
    )
