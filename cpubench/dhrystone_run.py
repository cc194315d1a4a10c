"""The Dhrystone main program: the first half of the procedures and the timed loop."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, fields
from typing import Optional, Sequence

from cpubench.common import BenchmarkError, to_float32
from cpubench.dhrystone import (
    FIRST_STRING,
    SECOND_STRING,
    SOME_STRING,
    THIRD_STRING,
    DhrystoneState,
    Enumeration,
    Record,
    func_1,
    func_2,
    proc_6,
    proc_7,
    proc_8,
)

__all__ = [
    "DhrystoneResult",
    "proc_1",
    "proc_2",
    "proc_3",
    "proc_4",
    "proc_5",
    "run_dhrystone",
    "format_report",
    "main",
]

HZ = 100
TOO_SMALL_TIME = 120
MICROSECONDS_PER_SECOND = 1000000.0


@dataclass(frozen=True)
class DhrystoneResult:
    """Final state of a Dhrystone run and its timing.

    ``microseconds`` and ``dhrystones_per_second`` are None when the measured
    time was too short to give a meaningful result.
    """

    runs: int
    state: DhrystoneState
    int_1_loc: int
    int_2_loc: int
    int_3_loc: int
    enum_loc: Enumeration
    str_1_loc: str
    str_2_loc: str
    user_time: float
    microseconds: Optional[float]
    dhrystones_per_second: Optional[float]


def _assign(dest: Record, src: Record) -> None:
    for item in fields(Record):
        setattr(dest, item.name, getattr(src, item.name))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def proc_3(state: DhrystoneState) -> Optional[Record]:
    """Update the global record's integer; return the record it points to."""
    if state.ptr_glob is None:
        raise BenchmarkError("Error in Proc_3: no global record")
    target = state.ptr_glob.ptr_comp
    state.ptr_glob.int_comp = proc_7(10, state.int_glob)
    return target


def proc_1(state: DhrystoneState, record: Record) -> None:
    """Copy the global record into the one ``record`` points to and update both."""
    next_record = record.ptr_comp
    if next_record is None or state.ptr_glob is None:
        raise BenchmarkError("Error in Proc_1: record has no successor")
    _assign(next_record, state.ptr_glob)
    record.int_comp = 5
    next_record.int_comp = record.int_comp
    next_record.ptr_comp = record.ptr_comp
    next_record.ptr_comp = proc_3(state)
    if next_record.discr == Enumeration.IDENT_1:
        next_record.int_comp = 6
        next_record.enum_comp = proc_6(state, record.enum_comp)
        next_record.ptr_comp = state.ptr_glob.ptr_comp
        next_record.int_comp = proc_7(next_record.int_comp, 10)
    else:
        _assign(record, record.ptr_comp)


def proc_2(state: DhrystoneState, value: int) -> int:
    """Return ``value + 9 - int_glob``; ``ch_1_glob`` must be 'A'."""
    int_loc = value + 10
    if state.ch_1_glob != "A":
        raise BenchmarkError("Error in Proc_2: loop does not terminate")
    int_loc -= 1
    return int_loc - state.int_glob


def proc_4(state: DhrystoneState) -> None:
    """Set ``bool_glob`` when ``ch_1_glob`` is 'A' and set ``ch_2_glob`` to 'B'."""
    bool_loc = state.ch_1_glob == "A"
    state.bool_glob = bool_loc or state.bool_glob
    state.ch_2_glob = "B"


def proc_5(state: DhrystoneState) -> None:
    """Set ``ch_1_glob`` to 'A' and clear ``bool_glob``."""
    state.ch_1_glob = "A"
    state.bool_glob = False


def _user_ticks() -> int:
    return int(os.times().user * HZ)


def run_dhrystone(runs: int) -> DhrystoneResult:
    """Run the benchmark loop ``runs`` times and return the final values."""
    if runs < 1:
        raise ValueError("number of runs must be at least 1")
    state = DhrystoneState()
    state.next_ptr_glob = Record()
    state.ptr_glob = Record(
        ptr_comp=state.next_ptr_glob,
        discr=Enumeration.IDENT_1,
        enum_comp=Enumeration.IDENT_3,
        int_comp=40,
        str_comp=SOME_STRING,
    )
    str_1_loc = FIRST_STRING
    state.arr_2_glob[8][7] = 10

    int_1_loc = int_2_loc = int_3_loc = 0
    enum_loc = Enumeration.IDENT_1
    str_2_loc = ""

    begin = _user_ticks()
    for run_index in range(1, runs + 1):
        proc_5(state)
        proc_4(state)
        int_1_loc = 2
        int_2_loc = 3
        str_2_loc = SECOND_STRING
        enum_loc = Enumeration.IDENT_2
        state.bool_glob = not func_2(state, str_1_loc, str_2_loc)
        while int_1_loc < int_2_loc:
            int_3_loc = 5 * int_1_loc - int_2_loc
            int_3_loc = proc_7(int_1_loc, int_2_loc)
            int_1_loc += 1
        proc_8(state, state.arr_1_glob, state.arr_2_glob, int_1_loc, int_3_loc)
        proc_1(state, state.ptr_glob)
        for code in range(ord("A"), ord(state.ch_2_glob) + 1):
            if enum_loc == func_1(state, chr(code), "C"):
                enum_loc = proc_6(state, Enumeration.IDENT_1)
                str_2_loc = THIRD_STRING
                int_2_loc = run_index
                state.int_glob = run_index
        int_2_loc = int_2_loc * int_1_loc
        int_1_loc = _trunc_div(int_2_loc, int_3_loc)
        int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
        int_1_loc = proc_2(state, int_1_loc)
    end = _user_ticks()

    user_ticks = end - begin
    microseconds: Optional[float] = None
    per_second: Optional[float] = None
    if user_ticks >= TOO_SMALL_TIME:
        microseconds = to_float32(
            user_ticks * MICROSECONDS_PER_SECOND / (HZ * float(runs))
        )
        per_second = to_float32(HZ * float(runs) / user_ticks)

    return DhrystoneResult(
        runs=runs,
        state=state,
        int_1_loc=int_1_loc,
        int_2_loc=int_2_loc,
        int_3_loc=int_3_loc,
        enum_loc=Enumeration(enum_loc),
        str_1_loc=str_1_loc,
        str_2_loc=str_2_loc,
        user_time=user_ticks / HZ,
        microseconds=microseconds,
        dhrystones_per_second=per_second,
    )


def _header() -> str:
    return (
        "\n"
        "Dhrystone Benchmark, Version 2.1\n"
        "\n"
        "Program compiled without 'register' attribute\n"
        "\n"
    )


def _body(result: DhrystoneResult) -> str:
    state = result.state
    ptr = state.ptr_glob
    nxt = state.next_ptr_glob
    lines = [
        f"Execution starts, {result.runs} runs through Dhrystone",
        "Execution ends",
        "",
        "Final values of the variables used in the benchmark:",
        "",
        f"Int_Glob:            {state.int_glob}",
        f"        should be:   {5}",
        f"Bool_Glob:           {int(state.bool_glob)}",
        f"        should be:   {1}",
        f"Ch_1_Glob:           {state.ch_1_glob}",
        "        should be:   A",
        f"Ch_2_Glob:           {state.ch_2_glob}",
        "        should be:   B",
        f"Arr_1_Glob[8]:       {state.arr_1_glob[8]}",
        f"        should be:   {7}",
        f"Arr_2_Glob[8][7]:    {state.arr_2_glob[8][7]}",
        "        should be:   Number_Of_Runs + 10",
        "Ptr_Glob->",
        f"  Ptr_Comp:          {id(ptr.ptr_comp)}",
        "        should be:   (implementation-dependent)",
        f"  Discr:             {int(ptr.discr)}",
        f"        should be:   {0}",
        f"  Enum_Comp:         {int(ptr.enum_comp)}",
        f"        should be:   {2}",
        f"  Int_Comp:          {ptr.int_comp}",
        f"        should be:   {17}",
        f"  Str_Comp:          {ptr.str_comp}",
        "        should be:   DHRYSTONE PROGRAM, SOME STRING",
        "Next_Ptr_Glob->",
        f"  Ptr_Comp:          {id(nxt.ptr_comp)}",
        "        should be:   (implementation-dependent), same as above",
        f"  Discr:             {int(nxt.discr)}",
        f"        should be:   {0}",
        f"  Enum_Comp:         {int(nxt.enum_comp)}",
        f"        should be:   {1}",
        f"  Int_Comp:          {nxt.int_comp}",
        f"        should be:   {18}",
        f"  Str_Comp:          {nxt.str_comp}",
        "        should be:   DHRYSTONE PROGRAM, SOME STRING",
        f"Int_1_Loc:           {result.int_1_loc}",
        f"        should be:   {5}",
        f"Int_2_Loc:           {result.int_2_loc}",
        f"        should be:   {13}",
        f"Int_3_Loc:           {result.int_3_loc}",
        f"        should be:   {7}",
        f"Enum_Loc:            {int(result.enum_loc)}",
        f"        should be:   {1}",
        f"Str_1_Loc:           {result.str_1_loc}",
        "        should be:   DHRYSTONE PROGRAM, 1'ST STRING",
        f"Str_2_Loc:           {result.str_2_loc}",
        "        should be:   DHRYSTONE PROGRAM, 2'ND STRING",
        "",
    ]
    if result.microseconds is None or result.dhrystones_per_second is None:
        lines += [
            "Measured time too small to obtain meaningful results",
            "Please increase number of runs",
            "",
        ]
    else:
        lines += [
            "Microseconds for one run through Dhrystone: %6.1f " % result.microseconds,
            "Dhrystones per Second:                      %6.1f "
            % result.dhrystones_per_second,
            "",
        ]
    return "".join(line + "\n" for line in lines)


def format_report(result: DhrystoneResult) -> str:
    """Return the full text report of a run."""
    return _header() + _body(result)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark; the number of runs comes from the argument or a prompt."""
    args = list(sys.argv[1:] if argv is None else argv)
    runs = 0
    if len(args) == 1 and _leading_int(args[0]) > 0:
        runs = _leading_int(args[0])

    sys.stdout.write(_header())
    if not runs:
        sys.stdout.write("Please give the number of runs through the benchmark: ")
        sys.stdout.flush()
        try:
            answer = sys.stdin.readline()
        except OSError:
            answer = ""
        match = re.match(r"\s*([+-]?\d+)", answer)
        sys.stdout.write("\n")
        if match is None:
            sys.stderr.write("dhrystone: a number of runs is required\n")
            return 1
        runs = int(match.group(1))
        if runs < 1:
            sys.stderr.write("dhrystone: number of runs must be at least 1\n")
            return 1

    result = run_dhrystone(runs)
    sys.stdout.write(_body(result))
    sys.stdout.flush()
    return 0