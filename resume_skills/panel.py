from __future__ import annotations

import random

from resume_skills.models.assessment import AssessmentResult
from resume_skills.models.profile import Profile, ResumeFile, SkillScore
from resume_skills.skills.normalizer import normalize_skills, unique_skills
from resume_skills.utils.http_client import BackendClient, BackendError
from resume_skills.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DIFFICULTY = "intermediate"
UPLOAD_FALLBACK_ERROR = "Upload failed, check the logs"


class ResumeSkillPanel:
    """UI state for the resume upload and skill assessment page.

    Holds everything the page renders: selected files, extracted profiles,
    the busy flags, the single error line, the assessment view selection and
    the accumulated assessment results. Every backend failure is turned into
    ``error`` here; nothing raised by the client reaches the page.
    """

    def __init__(
        self,
        client: BackendClient,
        difficulty: str = DEFAULT_DIFFICULTY,
        rng: random.Random | None = None,
    ):
        self.client = client
        self.difficulty = difficulty
        self.rng = rng or random.Random()

        self.files: list[ResumeFile] = []
        self.profiles: list[Profile] = []
        self.loading = False
        self.error = ""

        self.show_assessment = False
        self.selected_skill = ""
        self.assessment_results: dict[str, AssessmentResult] = {}
        self.generating_assessment = False

    # -- upload -------------------------------------------------------------

    def select_files(self, files: list[ResumeFile]) -> None:
        self.files = list(files)
        self.error = ""

    def upload(self) -> bool:
        if not self.files:
            self.error = "Please select files first!"
            return False

        self.loading = True
        self.error = ""
        try:
            uploaded: list[Profile] = []
            for resume in self.files:
                data = self.client.analyze_resume(resume.name, resume.content, resume.mime_type)
                skills = normalize_skills(data.get("skills"))
                logger.info("Extracted %d skills from %s", len(skills), resume.name)
                uploaded.append(Profile.from_analysis(data, resume.name, skills))
            self.profiles = uploaded
            return True
        except BackendError as e:
            self.error = str(e) or UPLOAD_FALLBACK_ERROR
            logger.error("Error uploading resume: %s", self.error)
            return False
        finally:
            self.loading = False

    # -- placeholder chart scores -------------------------------------------

    def generate_skill_scores(self, index: int) -> list[SkillScore]:
        if not 0 <= index < len(self.profiles):
            raise IndexError(f"No profile at index {index}")
        profile = self.profiles[index]
        profile.skill_scores = [
            SkillScore(name=skill, score=self.rng.randint(1, 10)) for skill in profile.skills
        ]
        return profile.skill_scores

    def clear_results(self) -> None:
        # The assessment view keeps its state; only results and inputs reset.
        self.profiles = []
        self.files = []
        self.error = ""
        self.assessment_results = {}

    # -- assessment view ----------------------------------------------------

    @property
    def assessment_open(self) -> bool:
        return self.show_assessment and bool(self.selected_skill)

    def start_skill_assessment(self, skill: str) -> None:
        self.selected_skill = skill
        self.show_assessment = True

    def close_assessment(self) -> None:
        self.show_assessment = False
        self.selected_skill = ""

    def handle_assessment_complete(self, event: dict) -> AssessmentResult:
        result = AssessmentResult.from_event(event)
        self.assessment_results[result.skill] = result
        self.close_assessment()
        return result

    def assessment_for(self, skill: str) -> AssessmentResult | None:
        return self.assessment_results.get(skill)

    # -- assessment generation ----------------------------------------------

    def all_skills(self) -> list[str]:
        return unique_skills(p.skills for p in self.profiles)

    def generate_assessment_for_all_skills(self) -> bool:
        if not self.profiles:
            self.error = "Please extract skills from a resume first!"
            return False

        skills = self.all_skills()
        if not skills:
            self.error = "No skills found to assess!"
            return False

        self.generating_assessment = True
        self.error = ""
        try:
            data = self.client.generate_all_skill_assessments(skills, self.difficulty)
            assessments = data.get("assessments")
            if not data.get("success") or not isinstance(assessments, list):
                raise BackendError("Failed to generate assessments")

            for item in assessments:
                if isinstance(item, dict) and item.get("assessment_id"):
                    logger.info(
                        "Assessment generated for %s: %s", item.get("skill"), item["assessment_id"]
                    )

            self.start_skill_assessment(skills[0])
            return True
        except BackendError as e:
            self.error = f"Failed to generate assessments: {e}"
            logger.error("Error generating assessments: %s", e)
            return False
        finally:
            self.generating_assessment = False

    def generate_individual_skill_assessment(self, skill: str) -> bool:
        self.generating_assessment = True
        self.error = ""
        try:
            data = self.client.generate_skill_assessment([skill], self.difficulty)
            if not data.get("success") or data.get("assessment") is None:
                raise BackendError("Failed to generate assessment")

            self.start_skill_assessment(skill)
            return True
        except BackendError as e:
            self.error = f"Failed to generate assessment for {skill}: {e}"
            logger.error("Error generating assessment for %s: %s", skill, e)
            return False
        finally:
            self.generating_assessment = False

    def start_profile_assessment(self, index: int) -> bool:
        if not 0 <= index < len(self.profiles):
            raise IndexError(f"No profile at index {index}")
        profile = self.profiles[index]
        if not profile.skills:
            return False
        return self.generate_individual_skill_assessment(profile.skills[0])
