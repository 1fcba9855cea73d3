"""
comply - declarative policies and guards

Name boolean conditions, group them into policy sets, and evaluate them with
``check`` (returns a bool) or ``assert_`` (raises on rejection).

Main exports:
- define_policy / Policy: a named condition with an error factory
- define_policies / PolicySet: name-indexed policy sets, optionally scoped by context
- check / assert_ / check_all_settle: evaluation guards
- and_ / or_: short-circuiting combinators
- not_null / match_schema: ready-made conditions
"""

from .policy import (
    Policy,
    PolicySet,
    define_policy,
    define_policies,
    not_null,
    match_schema,
)
from .guards import check, assert_, check_all_settle
from .combinators import and_, or_
from .errors import (
    ComplyError,
    PolicyError,
    InvalidPolicyError,
    PolicyNotFoundError,
    PolicyRejection,
)
from .utils.sentinel import MISSING

__version__ = "0.4.0"

__all__ = [
    'Policy',
    'PolicySet',
    'define_policy',
    'define_policies',
    'check',
    'assert_',
    'check_all_settle',
    'and_',
    'or_',
    'not_null',
    'match_schema',
    'ComplyError',
    'PolicyError',
    'InvalidPolicyError',
    'PolicyNotFoundError',
    'PolicyRejection',
    'MISSING',
]
