# wiki_sample.py
# The exact cover example from Wikipedia's "Knuth's Algorithm X" article:
#
#   U = {1, 2, 3, 4, 5, 6, 7}
#   A = {1, 4, 7}, B = {1, 4}, C = {4, 5, 7},
#   D = {3, 5, 6}, E = {2, 3, 6, 7}, F = {2, 7}
#
# The only exact cover is {B, D, F}.

from __future__ import annotations

from dlx import Matrix, search
from sinks import PrintSink
from text_format import load_problem

PROBLEM = """\
A 1001001
B 1001000
C 0001101
D 0010110
E 0110011
F 0100001
"""


def build_problem() -> Matrix:
    return load_problem(PROBLEM)


def main() -> int:
    result = search(build_problem(), PrintSink(sort=True))
    return result.solutions


if __name__ == "__main__":
    main()
