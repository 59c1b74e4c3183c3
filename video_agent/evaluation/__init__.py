"""
Evaluation module.

Critique of the generated hook with one alternative proposal.
"""

from video_agent.evaluation.advisor import advise_improvement
from video_agent.evaluation.models import AlternativeHook, Improvement

__all__ = [
    "advise_improvement",
    "AlternativeHook",
    "Improvement",
]
