import pytest

from advent24.day17 import Opcode, parse_program, part_one, part_two, run_program

EXAMPLE = """\
Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE = """\
Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_parse_program():
    assert parse_program(EXAMPLE) == (729, 0, 0, [0, 1, 5, 4, 3, 0])


def test_parse_program_missing_register():
    with pytest.raises(ValueError):
        parse_program("Register A: 1\nProgram: 0,1")


def test_opcode_values_follow_instruction_numbers():
    assert Opcode(5) is Opcode.OUT
    assert Opcode.CDV == 7


def test_part_one_example():
    assert part_one(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_run_program_outputs_literals():
    assert run_program(10, 0, 0, [5, 0, 5, 1, 5, 4]) == [0, 1, 2]


def test_run_program_rejects_reserved_combo_operand():
    with pytest.raises(ValueError):
        run_program(0, 0, 0, [5, 7])


def test_run_program_rejects_unknown_opcode():
    with pytest.raises(ValueError):
        run_program(0, 0, 0, [8, 0])


def test_part_two_example():
    assert part_two(QUINE) == 117440


def test_part_two_result_reproduces_program():
    _, _, _, program = parse_program(QUINE)
    a = part_two(QUINE)
    assert run_program(a, 0, 0, program) == program
    assert all(run_program(smaller, 0, 0, program) != program for smaller in range(1, 64))