from __future__ import annotations

from dataclasses import dataclass, field

STRONG_THRESHOLD = 80
FAIR_THRESHOLD = 60


@dataclass
class AssessmentResult:
    skill: str
    score: int  # 0-100, from the assessment view
    results: dict = field(default_factory=dict)

    @classmethod
    def from_event(cls, event: dict) -> AssessmentResult:
        results = event.get("results") or {}
        return cls(
            skill=event["skill"],
            score=int(event.get("score") or 0),
            results=dict(results),
        )

    @property
    def weak_skills(self) -> list[str]:
        return list(self.results.get("weak_skills") or [])

    @property
    def band(self) -> str:
        if self.score >= STRONG_THRESHOLD:
            return "strong"
        if self.score >= FAIR_THRESHOLD:
            return "fair"
        return "weak"

    @property
    def summary(self) -> str:
        weak = self.weak_skills
        if weak:
            return f"{len(weak)} areas to improve"
        return "Strong performance"

    def to_dict(self) -> dict:
        return {"skill": self.skill, "score": self.score, "results": self.results}
