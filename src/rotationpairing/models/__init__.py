from rotationpairing.models.group_result import (
    GroupResult,
    PairResult,
    TripleResult,
    group_from_dict,
    total_score,
)
from rotationpairing.models.ledger import MeetingLedger, pair_key
from rotationpairing.models.person import Person
from rotationpairing.models.rotation_config import RotationConfig
from rotationpairing.models.round_record import RoundRecord

__all__ = [
    "Person",
    "MeetingLedger",
    "pair_key",
    "GroupResult",
    "PairResult",
    "TripleResult",
    "group_from_dict",
    "total_score",
    "RotationConfig",
    "RoundRecord",
]
