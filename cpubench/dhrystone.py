"""Types, shared state and the second half of the Dhrystone procedures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import MutableSequence, Optional, Sequence

from cpubench.common import BenchmarkError

__all__ = [
    "Enumeration",
    "Record",
    "DhrystoneState",
    "proc_6",
    "proc_7",
    "proc_8",
    "func_1",
    "func_2",
    "func_3",
]

ARRAY_SIZE = 50
SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"
FIRST_STRING = "DHRYSTONE PROGRAM, 1'ST STRING"
SECOND_STRING = "DHRYSTONE PROGRAM, 2'ND STRING"
THIRD_STRING = "DHRYSTONE PROGRAM, 3'RD STRING"


class Enumeration(IntEnum):
    """The five-valued enumeration used throughout the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record; only the first variant's components are used."""

    ptr_comp: Optional["Record"] = field(default=None, repr=False)
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""


def _array_2() -> list[list[int]]:
    return [[0] * ARRAY_SIZE for _ in range(ARRAY_SIZE)]


@dataclass
class DhrystoneState:
    """The global variables that the benchmark procedures share."""

    int_glob: int = 0
    bool_glob: bool = False
    ch_1_glob: str = "\0"
    ch_2_glob: str = "\0"
    arr_1_glob: list[int] = field(default_factory=lambda: [0] * ARRAY_SIZE)
    arr_2_glob: list[list[int]] = field(default_factory=_array_2)
    ptr_glob: Optional[Record] = None
    next_ptr_glob: Optional[Record] = None


def func_3(enum_val: Enumeration) -> bool:
    """Return True when the value is IDENT_3."""
    return enum_val == Enumeration.IDENT_3


def proc_6(state: DhrystoneState, enum_val: Enumeration) -> Enumeration:
    """Map an enumeration value to another one; the result replaces the reference."""
    enum_val = Enumeration(enum_val)
    result = enum_val
    if not func_3(enum_val):
        result = Enumeration.IDENT_4
    if enum_val == Enumeration.IDENT_1:
        result = Enumeration.IDENT_1
    elif enum_val == Enumeration.IDENT_2:
        result = Enumeration.IDENT_1 if state.int_glob > 100 else Enumeration.IDENT_4
    elif enum_val == Enumeration.IDENT_3:
        result = Enumeration.IDENT_2
    elif enum_val == Enumeration.IDENT_5:
        result = Enumeration.IDENT_3
    return result


def proc_7(int_1: int, int_2: int) -> int:
    """Return ``int_2 + int_1 + 2``."""
    int_loc = int_1 + 2
    return int_2 + int_loc


def proc_8(
    state: DhrystoneState,
    arr_1: MutableSequence[int],
    arr_2: Sequence[MutableSequence[int]],
    int_1: int,
    int_2: int,
) -> None:
    """Update the one- and two-dimensional arrays in place and set ``int_glob``."""
    int_loc = int_1 + 5
    if int_loc < 1 or int_loc + 30 >= len(arr_1) or int_loc + 20 >= len(arr_2):
        raise IndexError("array index out of range")
    if int_loc + 1 >= len(arr_2[int_loc]) or int_loc >= len(arr_2[int_loc + 20]):
        raise IndexError("array index out of range")
    arr_1[int_loc] = int_2
    arr_1[int_loc + 1] = arr_1[int_loc]
    arr_1[int_loc + 30] = int_loc
    for index in (int_loc, int_loc + 1):
        arr_2[int_loc][index] = int_loc
    arr_2[int_loc][int_loc - 1] += 1
    arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
    state.int_glob = 5


def func_1(state: DhrystoneState, ch_1: str, ch_2: str) -> Enumeration:
    """Compare two characters; on equality record the first in ``ch_1_glob``."""
    ch_1_loc = ch_1
    ch_2_loc = ch_1_loc
    if ch_2_loc != ch_2:
        return Enumeration.IDENT_1
    state.ch_1_glob = ch_1_loc
    return Enumeration.IDENT_2


def func_2(state: DhrystoneState, str_1: str, str_2: str) -> bool:
    """Compare two strings; True when the first sorts after the second.

    Raises BenchmarkError when character 2 of the first string equals
    character 3 of the second, for which the comparison never terminates.
    """
    int_loc = 2
    ch_loc = "\0"
    while int_loc <= 2:
        if func_1(state, str_1[int_loc], str_2[int_loc + 1]) != Enumeration.IDENT_1:
            raise BenchmarkError("Error in Func_2: comparison does not terminate")
        ch_loc = "A"
        int_loc += 1
    if "W" <= ch_loc < "Z":
        int_loc = 7
    if ch_loc == "R":
        return True
    if str_1 > str_2:
        int_loc += 7
        state.int_glob = int_loc
        return True
    return False