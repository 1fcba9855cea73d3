"""Policy definition, registry and builder for comply."""

from .model import Policy, define_policy, default_error_factory
from .registry import PolicySet
from .builder import define_policies
from .conditions import ConditionKind, classify_condition, not_null, match_schema

__all__ = [
    'Policy',
    'define_policy',
    'default_error_factory',
    'PolicySet',
    'define_policies',
    'ConditionKind',
    'classify_condition',
    'not_null',
    'match_schema',
]
