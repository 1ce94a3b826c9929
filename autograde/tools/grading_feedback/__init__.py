"""Grading feedback tool: heuristic scoring of text submissions."""

from .data_manager import GradingDataManager, GradingOutcome
from .errors import (
    DanglingReferenceError,
    GradingError,
    InvalidConfigurationError,
    SubmissionNotFoundError,
)
from .grader import HeuristicGrader, HeuristicPolicy
from .models import Assignment, ComponentScores, GradingResult, Student, Submission
from .sample_data import load_sample_data

__all__ = [
    'Assignment',
    'ComponentScores',
    'DanglingReferenceError',
    'GradingDataManager',
    'GradingError',
    'GradingOutcome',
    'GradingResult',
    'HeuristicGrader',
    'HeuristicPolicy',
    'InvalidConfigurationError',
    'Student',
    'Submission',
    'SubmissionNotFoundError',
    'load_sample_data',
]
