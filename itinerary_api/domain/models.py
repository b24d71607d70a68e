from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class CompletionSucceeded:
    payload: Dict[str, Any]


@dataclass(frozen=True)
class CredentialMissing:
    hint: str


@dataclass(frozen=True)
class UpstreamRejected:
    status: int
    message: str


@dataclass(frozen=True)
class UnparseableResponse:
    details: str


@dataclass(frozen=True)
class UnexpectedResponseShape:
    data: Any


@dataclass(frozen=True)
class UnclassifiedFault:
    message: str
    details: str


GenerationOutcome = Union[
    CompletionSucceeded,
    CredentialMissing,
    UpstreamRejected,
    UnparseableResponse,
    UnexpectedResponseShape,
    UnclassifiedFault,
]
