"""Per-factor evaluators used by the match scorer."""

from .title import TitleEvaluator
from .location import LocationEvaluator
from .employment_type import EmploymentTypeEvaluator
from .skills import SkillsEvaluator
from .salary import SalaryEvaluator
from .experience import ExperienceEvaluator

__all__ = [
    "TitleEvaluator",
    "LocationEvaluator",
    "EmploymentTypeEvaluator",
    "SkillsEvaluator",
    "SalaryEvaluator",
    "ExperienceEvaluator",
]
