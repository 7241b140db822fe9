"""Policies and match evaluation for Triclaim."""

from .match import EvaluationResult, evaluate_policies
from .policies import GreedyClusterPolicy, Policy, RandomPolicy, select_action

__all__ = [
    "EvaluationResult",
    "evaluate_policies",
    "Policy",
    "RandomPolicy",
    "GreedyClusterPolicy",
    "select_action",
]
