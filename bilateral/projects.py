"""
Bilateral projects: find the smallest set of employees to invite such that
every two-person team (one employee from Stockholm, one from London)
is represented by at least one of its members.

Input format: the number of teams followed by one pair of employee IDs
per team (Stockholm ID first), all separated by whitespace.
Output format: the number of invited employees, followed by their IDs,
one per line.
"""

import argparse
import sys
import warnings
from collections.abc import Sequence
from .bipartite_graph import SIDE_A, SIDE_B, BipartiteGraph
from .hopcroft_karp import prefer
from .vertex_cover import minimum_vertex_cover

__all__ = ['MAX_EMPLOYEES', 'MAX_TEAMS', 'MAX_ID', 'FRIEND_ID',
           'parse_teams', 'build_graph', 'invitation_list', 'format_invitation', 'main']


# maximum number of distinct employees
MAX_EMPLOYEES = 2000

# maximum number of teams
MAX_TEAMS = 10000

# employee IDs are smaller than this bound
# (Stockholm: 1000 - 1999, London: 2000 - 2999)
MAX_ID = 3000

# ID of friend who should be invited, if possible
FRIEND_ID = 1009


def parse_teams(text: str, max_id: int = MAX_ID, max_teams: int = MAX_TEAMS) -> list[tuple[int, int]]:
    """
    Parse the number of teams followed by the pairs of employee IDs.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError('missing number of teams')
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f'expecting integer tokens only: {exc}') from None
    num_teams = values[0]
    if num_teams < 0:
        raise ValueError(f'number of teams must be non-negative, received {num_teams}')
    if num_teams > max_teams:
        raise ValueError(f'number of teams {num_teams} exceeds maximum {max_teams}')
    ids = values[1:]
    if len(ids) < 2*num_teams:
        raise ValueError(f'expecting {num_teams} teams, but only {len(ids) // 2} complete pairs found')
    if len(ids) > 2*num_teams:
        raise ValueError(f'unexpected trailing input after {num_teams} teams')
    for i in ids:
        if not 0 < i < max_id:
            raise ValueError(f'employee ID {i} invalid; must be in the range 1, ..., {max_id - 1}')
    return list(zip(ids[0::2], ids[1::2]))


def build_graph(teams: Sequence[tuple[int, int]], max_id: int = MAX_ID,
                max_employees: int = MAX_EMPLOYEES) -> BipartiteGraph:
    """
    Construct the bipartite graph with the first member of each team in side A,
    the second member in side B and the teams as edges.
    """
    graph = BipartiteGraph(max_id, max_employees)
    for (a, b) in teams:
        for vid, side in ((a, SIDE_A), (b, SIDE_B)):
            if not graph.add_vertex(vid, side):
                if graph.side(vid) is None:
                    if len(graph) >= max_employees:
                        raise ValueError(f'number of employees exceeds maximum {max_employees}')
                    raise ValueError(f'employee ID {vid} invalid; must be in the range 1, ..., {max_id - 1}')
                if graph.side(vid) != side:
                    raise ValueError(f'employee {vid} appears at both locations')
        # duplicate teams are not an error
        graph.add_edge(a, b)
    return graph


def invitation_list(teams: Sequence[tuple[int, int]], friend: int = None,
                    max_id: int = MAX_ID, max_employees: int = MAX_EMPLOYEES) -> list[int]:
    """
    Minimum list of employees to invite, preferring to include 'friend'
    whenever several minimum lists exist.

    The preference is best effort: the cover is extracted starting from the
    location of 'friend', which favors that location without guaranteeing
    that 'friend' is invited.
    """
    graph = build_graph(teams, max_id, max_employees)
    key = None
    side = SIDE_A
    if friend is not None:
        if friend in graph:
            key = prefer(friend)
            side = graph.side(friend)
        else:
            warnings.warn(f'friend {friend} is not a member of any team', UserWarning)
    a_cover, b_cover = minimum_vertex_cover(graph, key, side)
    return sorted(a_cover + b_cover)


def format_invitation(invited: Sequence[int]) -> str:
    """
    Number of invited employees followed by their IDs, one per line.
    """
    return '\n'.join([str(len(invited))] + [str(i) for i in invited]) + '\n'


def main(argv: Sequence[str] = None) -> int:

    parser = argparse.ArgumentParser(
        prog='bilateral',
        description='Find the minimum number of employees to invite '
                    'such that every bilateral project team is represented.')
    parser.add_argument('input', nargs='?', default='-',
                        help='input file with the team list (default: standard input)')
    parser.add_argument('--friend', type=int, default=None,
                        help=f'employee to include if possible (default: {FRIEND_ID})')
    parser.add_argument('--no-friend', action='store_true',
                        help='do not prefer any employee')
    parser.add_argument('--max-id', type=int, default=MAX_ID,
                        help=f'exclusive upper bound of employee IDs (default: {MAX_ID})')
    parser.add_argument('--max-employees', type=int, default=MAX_EMPLOYEES,
                        help=f'maximum number of distinct employees (default: {MAX_EMPLOYEES})')
    args = parser.parse_args(argv)

    if args.no_friend:
        friend = None
    elif args.friend is None:
        friend = FRIEND_ID
    else:
        friend = args.friend
    try:
        if args.input == '-':
            text = sys.stdin.read()
        else:
            with open(args.input, 'r') as f:
                text = f.read()
        teams = parse_teams(text, args.max_id)
        with warnings.catch_warnings():
            # the default friend need not take part in any project
            if args.friend is None:
                warnings.simplefilter('ignore', UserWarning)
            invited = invitation_list(teams, friend, args.max_id, args.max_employees)
    except (OSError, ValueError) as exc:
        print(f'bilateral: error: {exc}', file=sys.stderr)
        return 1

    sys.stdout.write(format_invitation(invited))
    return 0
