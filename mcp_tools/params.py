"""
Typed tool arguments.

Field names are the snake_case form of the wire argument names
(user_id <-> userId). Fields without a default are required.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from netsapiens.api import DEFAULT_CDR_LIMIT, DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True)
class NoArgs:
    pass


@dataclass(frozen=True)
class DomainArgs:
    domain: str


@dataclass(frozen=True)
class UserArgs:
    user_id: str
    domain: str


@dataclass(frozen=True)
class SearchUsersArgs:
    query: str
    domain: Optional[str] = None
    limit: int = DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True)
class CdrArgs:
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    user: Optional[str] = None
    domain: Optional[str] = None
    limit: int = DEFAULT_CDR_LIMIT


@dataclass(frozen=True)
class PhoneNumbersArgs:
    domain: str
    limit: Optional[int] = None


@dataclass(frozen=True)
class PhoneNumberArgs:
    domain: str
    phone_number: str


@dataclass(frozen=True)
class QueueArgs:
    domain: str
    queue_id: str


@dataclass(frozen=True)
class QueueAgentArgs:
    domain: str
    queue_id: str
    agent_id: str


@dataclass(frozen=True)
class AnswerRuleArgs:
    user_id: str
    domain: str
    timeframe: str


@dataclass(frozen=True)
class AgentStatisticsArgs:
    domain: str
    agent_id: Optional[str] = None
