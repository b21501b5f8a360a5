from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.assessment.questions import QUESTIONS, AssessmentQuestion, Profile, classify

SESSION_KEY = "assessment"


class AssessmentStep(IntEnum):
    INTRO = 0
    QUESTION_1 = 1
    QUESTION_2 = 2
    QUESTION_3 = 3
    QUESTION_4 = 4
    QUESTION_5 = 5
    EMAIL_CAPTURE = 6
    RESULTS = 7


class InvalidAssessmentTransition(ValueError):
    def __init__(self, step: AssessmentStep, action: str) -> None:
        self.step = step
        self.action = action
        super().__init__(f"Cannot {action} at step {step.name}")


class AssessmentState(BaseModel):
    """Where a respondent has got to in the assessment.

    Progress only ever moves forward: intro, each question in turn, email capture, results.
    """

    model_config = ConfigDict(validate_assignment=True)

    step: AssessmentStep = AssessmentStep.INTRO
    answers: list[int] = Field(default_factory=list)

    @property
    def question_number(self) -> int | None:
        if AssessmentStep.QUESTION_1 <= self.step <= AssessmentStep.QUESTION_5:
            return int(self.step)
        return None

    @property
    def question(self) -> AssessmentQuestion | None:
        number = self.question_number
        return QUESTIONS[number - 1] if number else None

    @property
    def profile(self) -> Profile:
        if self.step != AssessmentStep.RESULTS:
            raise InvalidAssessmentTransition(self.step, "show results")
        return classify(self.answers)

    def start(self) -> None:
        if self.step != AssessmentStep.INTRO:
            raise InvalidAssessmentTransition(self.step, "start")
        self.step = AssessmentStep.QUESTION_1

    def answer(self, option_index: int) -> None:
        question = self.question
        if question is None:
            raise InvalidAssessmentTransition(self.step, "answer a question")
        if not 0 <= option_index < len(question.options):
            raise ValueError(f"Option {option_index} is not one of the {len(question.options)} choices")

        self.answers = [*self.answers, option_index]
        self.step = AssessmentStep(self.step + 1)

    def complete(self) -> None:
        if self.step != AssessmentStep.EMAIL_CAPTURE:
            raise InvalidAssessmentTransition(self.step, "capture an email")
        self.step = AssessmentStep.RESULTS

    def to_session_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_session(cls, session_data: dict[str, Any] | None) -> "AssessmentState":
        if not session_data:
            return cls()

        try:
            return cls.model_validate(session_data)
        except ValidationError:
            # Left over from an older deployment or tampered with; start again.
            return cls()
