"""Exceptions raised while grading submissions."""


class GradingError(Exception):
    """Base class for grading failures that concern a single submission."""


class SubmissionNotFoundError(GradingError, LookupError):
    """No submission exists at the requested index or id."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Submission not found: {key!r}")


class DanglingReferenceError(GradingError, LookupError):
    """A submission refers to an assignment that is not in the store."""

    def __init__(self, submission_id: str, assignment_id: str):
        self.submission_id = submission_id
        self.assignment_id = assignment_id
        super().__init__(
            f"Submission {submission_id} references unknown assignment {assignment_id}"
        )


class InvalidConfigurationError(GradingError, ValueError):
    """Grading settings (max score, heuristic policy) cannot produce a valid score."""
