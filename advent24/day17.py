"""Day 17: run the three-bit computer and find a self-printing register value."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import IntEnum


class Opcode(IntEnum):
    """Instructions of the three-bit computer."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


def parse_program(text: str) -> tuple[int, int, int, list[int]]:
    """Return registers A, B, C and the program."""
    registers = []
    for name in "ABC":
        match = re.search(rf"Register {name}:\s*(\d+)", text)
        if match is None:
            raise ValueError(f"register {name} is missing")
        registers.append(int(match.group(1)))
    match = re.search(r"Program:\s*([\d,\s]*)", text)
    if match is None:
        raise ValueError("program is missing")
    program = [int(value) for value in match.group(1).split(",") if value.strip()]
    a, b, c = registers
    return a, b, c, program


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand {operand}")


def run_program(a: int, b: int, c: int, program: Sequence[int]) -> list[int]:
    """Execute the program from the given registers and return its output."""
    out: list[int] = []
    ip = 0
    while ip < len(program):
        if ip + 1 >= len(program):
            raise ValueError(f"instruction at {ip} has no operand")
        opcode = Opcode(program[ip])
        operand = program[ip + 1]
        if opcode is Opcode.ADV:
            a >>= _combo(operand, a, b, c)
        elif opcode is Opcode.BXL:
            b ^= operand
        elif opcode is Opcode.BST:
            b = _combo(operand, a, b, c) % 8
        elif opcode is Opcode.JNZ:
            if a != 0:
                ip = operand
                continue
        elif opcode is Opcode.BXC:
            b ^= c
        elif opcode is Opcode.OUT:
            out.append(_combo(operand, a, b, c) % 8)
        elif opcode is Opcode.BDV:
            b = a >> _combo(operand, a, b, c)
        else:
            c = a >> _combo(operand, a, b, c)
        ip += 2
    return out


def part_one(text: str) -> str:
    """The program's output, comma separated."""
    a, b, c, program = parse_program(text)
    return ",".join(str(value) for value in run_program(a, b, c, program))


def _is_tail(out: list[int], program: list[int]) -> bool:
    return len(out) <= len(program) and program[len(program) - len(out):] == out


def part_two(text: str) -> int:
    """Lowest value of register A for which the program prints itself."""
    _, _, _, program = parse_program(text)
    a = 1
    while True:
        out = run_program(a, 0, 0, program)
        if (out or not program) and _is_tail(out, program):
            if len(out) == len(program):
                return a
            a <<= 3
        else:
            while a % 8 == 7:
                a >>= 3
            if a == 0:
                raise ValueError("no value of register A makes the program print itself")
            a += 1