from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ResumeFile:
    name: str
    content: bytes
    mime_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass
class SkillScore:
    name: str
    score: int  # placeholder chart value, 1-10


@dataclass
class Profile:
    filename: str
    skills: list[str] = field(default_factory=list)
    text_length: int = 0
    skills_count: int = 0
    processing_time: datetime = field(default_factory=_utcnow)
    skill_scores: list[SkillScore] | None = None

    @classmethod
    def from_analysis(cls, data: dict, fallback_filename: str, skills: list[str]) -> Profile:
        """Build a profile from an /analyze_resume body and its normalized skills."""
        return cls(
            filename=data.get("filename") or fallback_filename,
            skills=skills,
            text_length=_as_count(data.get("text_length")),
            skills_count=_as_count(data.get("skills_count")) or len(skills),
        )

    @property
    def has_skills(self) -> bool:
        return bool(self.skills)

    @property
    def display_time(self) -> str:
        return self.processing_time.astimezone().strftime("%H:%M:%S")


def _as_count(value) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0
