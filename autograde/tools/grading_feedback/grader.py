"""Heuristic grader that scores free-text submissions without any model."""

import logging
import math
import re
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Tuple

from autograde.libs.config_loader import ConfigType, get_config
from .errors import InvalidConfigurationError
from .models import Assignment, ComponentScores, GradingResult, Submission

LOG = logging.getLogger(__name__)

DEFAULT_KEYWORDS = (
    "algorithm", "function", "variable", "loop", "condition",
    "array", "object", "class", "method", "return",
)

SENTENCE_SPLIT_RE = re.compile(r"[.!?]")

BULLET = "•"
LENGTH_ADVICE = "Consider expanding your answer with more details."
KEYWORD_ADVICE = "Try to include more relevant technical terms."
GRAMMAR_ADVICE = "Review sentence structure and grammar."
EXCELLENT_REMARK = "Excellent work! Well-structured and comprehensive answer."
NEUTRAL_REMARK = "Submission received. No specific issues found."


@dataclass(frozen=True)
class HeuristicPolicy:
    """Weights, vocabulary and thresholds used by :class:`HeuristicGrader`."""

    length_weight: float = 0.3
    keyword_weight: float = 0.4
    grammar_weight: float = 0.3
    length_saturation: int = 500
    ideal_words_per_sentence: float = 15.0
    keywords: Tuple[str, ...] = DEFAULT_KEYWORDS
    length_threshold: float = 0.5
    keyword_threshold: float = 0.5
    grammar_threshold: float = 0.7
    excellence_threshold: float = 0.8

    def __post_init__(self):
        for f in fields(self):
            if f.name == "keywords":
                continue
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidConfigurationError(f"{f.name} must be a finite number, got {value!r}")
        for name in ("length_weight", "keyword_weight", "grammar_weight"):
            if getattr(self, name) < 0:
                raise InvalidConfigurationError(f"{name} must be non-negative")
        if self.length_saturation <= 0:
            raise InvalidConfigurationError("length_saturation must be positive")
        if self.ideal_words_per_sentence <= 0:
            raise InvalidConfigurationError("ideal_words_per_sentence must be positive")
        if not isinstance(self.keywords, tuple):
            raise InvalidConfigurationError("keywords must be a tuple of strings")
        if not self.keywords:
            raise InvalidConfigurationError("keywords must not be empty")
        if not all(isinstance(k, str) and k.strip() for k in self.keywords):
            raise InvalidConfigurationError("keywords must be non-blank strings")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HeuristicPolicy":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigurationError(f"Unknown heuristic settings: {', '.join(unknown)}")
        values = dict(data)
        if "keywords" in values:
            keywords = values["keywords"]
            # A bare string would otherwise be split into single letters.
            if not isinstance(keywords, (list, tuple)):
                raise InvalidConfigurationError(
                    f"keywords must be a list of strings, got {type(keywords).__name__}"
                )
            if not all(isinstance(k, str) for k in keywords):
                raise InvalidConfigurationError("keywords must be a list of strings")
            values["keywords"] = tuple(k.lower() for k in keywords)
        return cls(**values)

    @classmethod
    def from_config(cls, configs: ConfigType) -> "HeuristicPolicy":
        overrides = get_config("grading.heuristic", configs, default={}) or {}
        if not isinstance(overrides, dict):
            raise InvalidConfigurationError("grading.heuristic must be a mapping")
        return cls.from_dict(overrides)


def count_sentences(text: str) -> int:
    """Count the non-blank segments between '.', '!' and '?'."""
    return sum(1 for segment in SENTENCE_SPLIT_RE.split(text) if segment.strip())


def count_words(text: str) -> int:
    return len(text.split())


class HeuristicGrader:
    """Grade submissions on length, keyword coverage and sentence structure.

    The grader is stateless: the same content and max score always produce
    the same result. Create one and hand it to whatever needs to grade.
    """

    def __init__(self, policy: HeuristicPolicy = None):
        self.policy = policy or HeuristicPolicy()

    @classmethod
    def from_config(cls, configs: ConfigType) -> "HeuristicGrader":
        return cls(HeuristicPolicy.from_config(configs))

    def length_score(self, content: str) -> float:
        return min(len(content) / float(self.policy.length_saturation), 1.0)

    def keyword_score(self, content: str) -> float:
        # Presence only: a keyword repeated ten times still counts once.
        lowered = content.lower()
        matches = sum(1 for keyword in self.policy.keywords if keyword in lowered)
        return min(matches / float(len(self.policy.keywords)), 1.0)

    def grammar_score(self, content: str) -> float:
        """Triangular score peaking when sentences average the ideal word count.

        Returns 0 when the text has no sentences or no words, and falls to 0
        at an average of zero or twice the ideal.
        """
        sentences = count_sentences(content)
        words = count_words(content)
        if sentences == 0 or words == 0:
            return 0.0
        ideal = float(self.policy.ideal_words_per_sentence)
        average = words / sentences
        return max(0.0, 1.0 - abs(average - ideal) / ideal)

    def score_components(self, content: str) -> ComponentScores:
        return ComponentScores(
            length=self.length_score(content),
            keyword=self.keyword_score(content),
            grammar=self.grammar_score(content),
        )

    def grade_submission(self, submission: Submission, assignment: Assignment) -> GradingResult:
        """
        Grade a submission's content against an assignment's max score.

        Args:
            submission: Submission whose content is graded
            assignment: Assignment providing the max score

        Returns:
            GradingResult with the score, feedback and component sub-scores

        Raises:
            InvalidConfigurationError: If the assignment's max score is not a positive number
        """
        max_score = assignment.max_score
        if not math.isfinite(max_score) or max_score <= 0:
            raise InvalidConfigurationError(
                f"Assignment {assignment.id} has invalid max score {max_score!r}"
            )

        components = self.score_components(submission.content)
        policy = self.policy
        weighted = (
            policy.length_weight * components.length
            + policy.keyword_weight * components.keyword
            + policy.grammar_weight * components.grammar
        )
        # Default weights sum to 1, but overrides may not.
        score = min(max(weighted * max_score, 0.0), max_score)

        LOG.debug(
            "Submission %s: length=%.3f keyword=%.3f grammar=%.3f score=%.2f/%s",
            submission.id, components.length, components.keyword,
            components.grammar, score, max_score
        )

        return GradingResult(
            score=score,
            feedback=self.generate_feedback(components),
            components=components,
        )

    def generate_feedback(self, components: ComponentScores) -> str:
        """Build bullet-point feedback from the component sub-scores."""
        policy = self.policy
        lines: List[str] = []

        if components.length < policy.length_threshold:
            lines.append(LENGTH_ADVICE)
        if components.keyword < policy.keyword_threshold:
            lines.append(KEYWORD_ADVICE)
        if components.grammar < policy.grammar_threshold:
            lines.append(GRAMMAR_ADVICE)
        if (components.length > policy.excellence_threshold
                and components.keyword > policy.excellence_threshold
                and components.grammar > policy.excellence_threshold):
            lines.append(EXCELLENT_REMARK)

        if not lines:
            lines.append(NEUTRAL_REMARK)

        return "\n".join(f"{BULLET} {line}" for line in lines)
