"""Pydantic models for students, assignments, submissions and grading results."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _new_id() -> str:
    return str(uuid.uuid4())


class Student(BaseModel):
    """A student enrolled in the course."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Opaque unique identifier")
    name: str = Field(min_length=1, description="Display name")
    email: str = Field(description="Contact email (not validated)")


class Assignment(BaseModel):
    """An assignment that submissions are graded against."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Opaque unique identifier")
    title: str = Field(description="Short assignment title")
    description: str = Field(description="What the students are asked to do")
    # Checked by the grader, not here, so a bad value surfaces as a configuration error.
    max_score: float = Field(description="Scale the grader normalizes scores to")
    due_date: datetime = Field(description="Due date (informational only)")


class ComponentScores(BaseModel):
    """The three normalized sub-scores behind a grade, each in [0, 1]."""
    model_config = ConfigDict(frozen=True)

    length: float = Field(description="Answer length relative to the saturation point")
    keyword: float = Field(description="Share of technical keywords present")
    grammar: float = Field(description="Closeness of sentence length to the ideal")


class GradingResult(BaseModel):
    """Score and feedback produced by the grader for one submission."""
    model_config = ConfigDict(frozen=True)

    score: float = Field(description="Points earned, between 0 and the assignment's max score")
    feedback: str = Field(min_length=1, description="Feedback text, one bullet per line")
    components: Optional[ComponentScores] = Field(
        default=None,
        description="Sub-scores the score and feedback were derived from"
    )

    def to_yaml_dict(self) -> dict:
        """Convert to dictionary suitable for YAML serialization."""
        result = {
            'score': self.score,
            'feedback': self.feedback,
        }
        if self.components is not None:
            result['components'] = {
                'length': self.components.length,
                'keyword': self.components.keyword,
                'grammar': self.components.grammar,
            }
        return result


class Submission(BaseModel):
    """A student's text answer to an assignment.

    Submissions are immutable. Grading produces a copy with the same ``id``
    and the score and feedback filled in (see :meth:`with_grade`); the data
    manager swaps that copy into its store.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Opaque unique identifier")
    student_id: str = Field(description="Id of the submitting student")
    assignment_id: str = Field(description="Id of the assignment answered")
    content: str = Field(description="Free-text answer; the only input the grader reads")
    submission_date: datetime = Field(default_factory=datetime.now)
    score: Optional[float] = Field(default=None, description="Score, None until graded")
    feedback: Optional[str] = Field(default=None, description="Feedback, None until graded")

    @model_validator(mode="after")
    def _score_and_feedback_together(self) -> "Submission":
        if (self.score is None) != (self.feedback is None):
            raise ValueError("score and feedback must be set together")
        return self

    @property
    def is_graded(self) -> bool:
        return self.score is not None and self.feedback is not None

    def with_grade(self, result: GradingResult) -> "Submission":
        """Return a graded copy of this submission, keeping its identity."""
        return self.model_copy(update={
            'score': result.score,
            'feedback': result.feedback,
        })
