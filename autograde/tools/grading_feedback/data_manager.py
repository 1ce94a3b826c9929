"""In-memory store of students, assignments and submissions, plus grading orchestration."""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from tqdm import tqdm

from .errors import DanglingReferenceError, GradingError, SubmissionNotFoundError
from .grader import HeuristicGrader
from .models import Assignment, GradingResult, Student, Submission

LOG = logging.getLogger(__name__)

SubmissionKey = Union[int, str]


@dataclass
class GradingOutcome:
    """Result of grading one submission during :meth:`GradingDataManager.grade_all`."""
    submission_id: str
    student_id: str
    success: bool
    score: Optional[float] = None
    error_message: Optional[str] = None
    grading_result: Optional[GradingResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        data = {
            'submission_id': self.submission_id,
            'student_id': self.student_id,
            'success': self.success,
            'score': self.score,
        }
        if self.error_message:
            data['error_message'] = self.error_message
        if self.grading_result:
            result_data = self.grading_result.to_yaml_dict()
            data['feedback'] = result_data['feedback']
            if 'components' in result_data:
                data['components'] = result_data['components']
        return data


class GradingDataManager:
    """Owns the submission store and grades submissions in place.

    Submissions are immutable; grading swaps a graded copy into the same
    slot of the store. All reads and writes of the store go through a
    re-entrant lock so that concurrent ``grade_one`` calls cannot lose updates.
    """

    def __init__(self, grader: Optional[HeuristicGrader] = None):
        self.grader = grader or HeuristicGrader()
        self._students: List[Student] = []
        self._assignments: List[Assignment] = []
        self._submissions: List[Submission] = []
        self._lock = threading.RLock()

    @property
    def students(self) -> Tuple[Student, ...]:
        with self._lock:
            return tuple(self._students)

    @property
    def assignments(self) -> Tuple[Assignment, ...]:
        with self._lock:
            return tuple(self._assignments)

    @property
    def submissions(self) -> Tuple[Submission, ...]:
        with self._lock:
            return tuple(self._submissions)

    def add_student(self, student: Student) -> None:
        with self._lock:
            self._students.append(student)

    def add_assignment(self, assignment: Assignment) -> None:
        with self._lock:
            self._assignments.append(assignment)

    def add_submission(self, submission: Submission) -> None:
        with self._lock:
            self._submissions.append(submission)

    def find_student(self, student_id: str) -> Optional[Student]:
        with self._lock:
            return next((s for s in self._students if s.id == student_id), None)

    def find_assignment(self, assignment_id: str) -> Optional[Assignment]:
        with self._lock:
            return next((a for a in self._assignments if a.id == assignment_id), None)

    def find_submission(self, key: SubmissionKey) -> Optional[Submission]:
        with self._lock:
            index = self._index_of(key)
            return None if index is None else self._submissions[index]

    def _index_of(self, key: SubmissionKey) -> Optional[int]:
        """Resolve a store index or a submission id to a store index."""
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            return key if 0 <= key < len(self._submissions) else None
        for i, submission in enumerate(self._submissions):
            if submission.id == key:
                return i
        return None

    def grade_one(self, key: SubmissionKey) -> None:
        """
        Grade one submission and store the graded copy in its slot.

        Args:
            key: Store index or submission id

        Raises:
            SubmissionNotFoundError: If no submission matches ``key``
            DanglingReferenceError: If the submission's assignment is not in the store
            InvalidConfigurationError: If the assignment's max score is invalid
        """
        self._grade(key)

    def _grade(self, key: SubmissionKey) -> Tuple[Submission, GradingResult]:
        """Grade and store one submission, returning the graded copy and the full result."""
        with self._lock:
            index = self._index_of(key)
            if index is None:
                raise SubmissionNotFoundError(key)
            submission = self._submissions[index]

            assignment = self.find_assignment(submission.assignment_id)
            if assignment is None:
                raise DanglingReferenceError(submission.id, submission.assignment_id)

            result = self.grader.grade_submission(submission, assignment)
            graded = submission.with_grade(result)
            self._submissions[index] = graded

        LOG.debug(f"Graded submission {submission.id}: {result.score:.2f}/{assignment.max_score}")
        return graded, result

    def grade_all(self, show_progress: bool = False) -> List[GradingOutcome]:
        """
        Grade every submission in store order.

        A failure on one submission is logged and recorded in its outcome;
        the remaining submissions are still graded.

        Args:
            show_progress: Display a progress bar while grading

        Returns:
            One GradingOutcome per submission, in store order, carrying the
            grading result (score, feedback, component sub-scores) on success
        """
        outcomes: List[GradingOutcome] = []
        for submission in tqdm(self.submissions, desc="Grading", disable=not show_progress):
            try:
                graded, result = self._grade(submission.id)
            except GradingError as e:
                LOG.error(f"Error grading submission {submission.id}: {e}")
                outcomes.append(GradingOutcome(
                    submission_id=submission.id,
                    student_id=submission.student_id,
                    success=False,
                    error_message=str(e)
                ))
                continue

            outcomes.append(GradingOutcome(
                submission_id=submission.id,
                student_id=submission.student_id,
                success=True,
                score=graded.score,
                grading_result=result
            ))

        failed = sum(1 for o in outcomes if not o.success)
        LOG.info(f"Graded {len(outcomes) - failed}/{len(outcomes)} submissions")
        return outcomes
