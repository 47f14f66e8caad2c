"""
Compatibility scoring between two founder accounts.

Six categorical dimensions are each scored 0-100:

1. RISK TOLERANCE   conservative / moderate / aggressive
2. WORK STYLE       structured / flexible / hybrid
3. COMMUNICATION    direct / diplomatic / collaborative
4. SKILLS           Jaccard overlap of the two skill sets
5. EXPERIENCE       beginner / intermediate / expert distance
6. GOALS            startup stage distance

The overall score is the rounded mean of the dimensions that are defined
and non-zero. A missing or unknown attribute drops its dimension; the scorer
never raises.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

logger = logging.getLogger('matching.scoring')


RISK_LEVELS = ('conservative', 'moderate', 'aggressive')
WORK_STYLES = ('structured', 'flexible', 'hybrid')
COMMUNICATION_STYLES = ('direct', 'diplomatic', 'collaborative')

EXPERIENCE_RANK = {'beginner': 1, 'intermediate': 2, 'expert': 3}
STAGE_RANK = {'idea': 1, 'mvp': 2, 'users': 3, 'revenue': 4, 'scaling': 5}

# rank distance -> score
EXPERIENCE_DISTANCE_SCORES = {0: 100, 1: 70}
EXPERIENCE_FAR_SCORE = 40
STAGE_DISTANCE_SCORES = {0: 100, 1: 80, 2: 60}
STAGE_FAR_SCORE = 30

QUALITY_BANDS = (
    (85, 'excellent'),
    (70, 'good'),
    (50, 'fair'),
)

DIMENSION_REASONS = {
    'risk_tolerance': 'Similar risk tolerance',
    'work_style': 'Compatible work styles',
    'communication': 'Aligned communication styles',
    'skills': 'Strongly overlapping skills',
    'experience': 'Similar experience level',
    'goals': 'At a similar startup stage',
}


def round_half_up(value: float) -> int:
    """Round .5 away from zero (all scores here are non-negative)."""
    return int(math.floor(value + 0.5))


def quality_for(overall: int) -> str:
    for floor, label in QUALITY_BANDS:
        if overall >= floor:
            return label
    return 'poor'


def _known(value, allowed) -> Optional[str]:
    if isinstance(value, str):
        value = value.strip().lower()
        if value in allowed:
            return value
    return None


def _normalize_skills(skills) -> FrozenSet[str]:
    if not isinstance(skills, (list, tuple, set, frozenset)):
        return frozenset()
    return frozenset(
        skill.strip().lower()
        for skill in skills
        if isinstance(skill, str) and skill.strip()
    )


@dataclass(frozen=True)
class CompatibilityProfile:
    """The categorical inputs the scorer reads from an account."""
    risk_tolerance: Optional[str] = None
    work_style: Optional[str] = None
    communication_style: Optional[str] = None
    skills: FrozenSet[str] = frozenset()
    experience: Optional[str] = None
    stage: Optional[str] = None

    @classmethod
    def build(cls, risk_tolerance=None, work_style=None, communication_style=None,
              skills=None, experience=None, stage=None) -> 'CompatibilityProfile':
        """Normalize raw values; anything outside its enum becomes None."""
        return cls(
            risk_tolerance=_known(risk_tolerance, RISK_LEVELS),
            work_style=_known(work_style, WORK_STYLES),
            communication_style=_known(communication_style, COMMUNICATION_STYLES),
            skills=_normalize_skills(skills),
            experience=_known(experience, EXPERIENCE_RANK),
            stage=_known(stage, STAGE_RANK),
        )

    @classmethod
    def from_account(cls, account) -> 'CompatibilityProfile':
        return cls.build(
            risk_tolerance=getattr(account, 'risk_tolerance', None),
            work_style=getattr(account, 'work_style', None),
            communication_style=getattr(account, 'communication_style', None),
            skills=getattr(account, 'skills', None),
            experience=getattr(account, 'experience', None),
            stage=getattr(account, 'startup_stage', None),
        )


@dataclass
class CompatibilityBreakdown:
    """Per-dimension scores plus the derived overall score and quality."""
    risk_tolerance: Optional[int] = None
    work_style: Optional[int] = None
    communication: Optional[int] = None
    skills: Optional[int] = None
    experience: Optional[int] = None
    goals: Optional[int] = None
    overall: int = 0
    quality: str = 'poor'
    reasons: List[str] = field(default_factory=list)

    DIMENSIONS = ('risk_tolerance', 'work_style', 'communication', 'skills', 'experience', 'goals')

    def sub_scores(self) -> Dict[str, Optional[int]]:
        return {name: getattr(self, name) for name in self.DIMENSIONS}

    def to_dict(self) -> dict:
        return {
            **self.sub_scores(),
            'overall': self.overall,
            'quality': self.quality,
            'reasons': list(self.reasons),
        }


class CompatibilityScorer:
    """
    Scores two accounts against each other.

    Every rule is symmetric, so score(a, b) == score(b, a).
    """

    REASON_FLOOR = 80

    @staticmethod
    def score_risk(a: Optional[str], b: Optional[str]) -> Optional[int]:
        if a is None or b is None:
            return None
        if a == b:
            return 100
        if 'moderate' in (a, b):
            return 70
        return 40

    @staticmethod
    def score_work_style(a: Optional[str], b: Optional[str]) -> Optional[int]:
        if a is None or b is None:
            return None
        if a == b:
            return 100
        if 'hybrid' in (a, b):
            return 80
        return 50

    @staticmethod
    def score_communication(a: Optional[str], b: Optional[str]) -> Optional[int]:
        if a is None or b is None:
            return None
        if a == b:
            return 100
        if 'collaborative' in (a, b):
            return 75
        return 40

    @staticmethod
    def score_skills(a: FrozenSet[str], b: FrozenSet[str]) -> int:
        union = a | b
        if not union:
            return 0
        return round_half_up(len(a & b) / len(union) * 100)

    @staticmethod
    def score_experience(a: Optional[str], b: Optional[str]) -> Optional[int]:
        if a is None or b is None:
            return None
        distance = abs(EXPERIENCE_RANK[a] - EXPERIENCE_RANK[b])
        return EXPERIENCE_DISTANCE_SCORES.get(distance, EXPERIENCE_FAR_SCORE)

    @staticmethod
    def score_goals(a: Optional[str], b: Optional[str]) -> Optional[int]:
        if a is None or b is None:
            return None
        distance = abs(STAGE_RANK[a] - STAGE_RANK[b])
        return STAGE_DISTANCE_SCORES.get(distance, STAGE_FAR_SCORE)

    @classmethod
    def score(cls, a, b) -> CompatibilityBreakdown:
        """
        Score two accounts (or CompatibilityProfiles).

        Args:
            a: first account or profile
            b: second account or profile

        Returns:
            CompatibilityBreakdown with sub-scores, overall, quality and reasons
        """
        if not isinstance(a, CompatibilityProfile):
            a = CompatibilityProfile.from_account(a)
        if not isinstance(b, CompatibilityProfile):
            b = CompatibilityProfile.from_account(b)

        breakdown = CompatibilityBreakdown(
            risk_tolerance=cls.score_risk(a.risk_tolerance, b.risk_tolerance),
            work_style=cls.score_work_style(a.work_style, b.work_style),
            communication=cls.score_communication(a.communication_style, b.communication_style),
            skills=cls.score_skills(a.skills, b.skills),
            experience=cls.score_experience(a.experience, b.experience),
            goals=cls.score_goals(a.stage, b.stage),
        )

        counted = [value for value in breakdown.sub_scores().values() if value]
        breakdown.overall = round_half_up(sum(counted) / len(counted)) if counted else 0
        breakdown.quality = quality_for(breakdown.overall)
        breakdown.reasons = [
            DIMENSION_REASONS[name]
            for name, value in breakdown.sub_scores().items()
            if value is not None and value >= cls.REASON_FLOOR
        ]
        return breakdown
