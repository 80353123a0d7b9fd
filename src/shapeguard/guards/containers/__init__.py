"""
Container guards - Structural classification plus element validation.

Each guard checks the container kind first, then probes its contents with
the optional value_guard / key_guard.
"""

from shapeguard.guards.containers.base import ContainerGuard
from shapeguard.guards.containers.mapping import MappingGuard, is_map
from shapeguard.guards.containers.record import RecordGuard, is_plain_structure
from shapeguard.guards.containers.sequence import SequenceGuard, is_sequence
from shapeguard.guards.containers.sets import SetGuard, is_set

__all__ = [
    "ContainerGuard",
    "SequenceGuard",
    "SetGuard",
    "MappingGuard",
    "RecordGuard",
    "is_sequence",
    "is_set",
    "is_map",
    "is_plain_structure",
]
