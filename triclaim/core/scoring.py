from __future__ import annotations

from collections import deque
from typing import Dict, List, Set

import numpy as np

from .geometry import EDGES, NUM_ORIENTATIONS, OPPOSITE_EDGE, neighbour, same_cut
from .state import Board, PlayerId, RoundResult, Slot


def adjacent_triangles(board: Board, x: int, y: int, orientation: int, player: PlayerId) -> List[Slot]:
    """Triangles owned by ``player`` sharing an edge or the diagonal with the given one."""
    owner = int(player)
    adjacents: List[Slot] = []
    for edge in EDGES[orientation]:
        nx, ny = neighbour(x, y, edge, board.rows, board.cols)
        back = OPPOSITE_EDGE[edge]
        for other in range(NUM_ORIENTATIONS):
            if board.owners[ny, nx, other] == owner and back in EDGES[other]:
                adjacents.append((nx, ny, other))
    for other in range(NUM_ORIENTATIONS):
        if board.owners[y, x, other] == owner and same_cut(orientation, other):
            adjacents.append((x, y, other))
    return adjacents


def _flood_fill(board: Board, start: Slot, player: PlayerId, visited: Set[Slot]) -> int:
    queue = deque([start])
    visited.add(start)
    size = 0
    while queue:
        x, y, orientation = queue.popleft()
        size += 1
        for slot in adjacent_triangles(board, x, y, orientation, player):
            if slot not in visited:
                visited.add(slot)
                queue.append(slot)
    return size


def cluster_sizes(board: Board, player: PlayerId) -> List[int]:
    """Sizes of all of ``player``'s connected components, in scan order."""
    visited: Set[Slot] = set()
    sizes: List[int] = []
    for y, x, orientation in np.argwhere(board.owners == int(player)):
        slot = (int(x), int(y), int(orientation))
        if slot not in visited:
            sizes.append(_flood_fill(board, slot, player, visited))
    return sizes


def largest_cluster(board: Board, player: PlayerId) -> int:
    return max(cluster_sizes(board, player), default=0)


def cluster_scores(board: Board) -> Dict[PlayerId, int]:
    return {player: largest_cluster(board, player) for player in PlayerId}


def compare_clusters(board: Board) -> RoundResult:
    """Round outcome by largest cluster; meaningful once the board is full."""
    return result_from_scores(cluster_scores(board))


def result_from_scores(scores: Dict[PlayerId, int]) -> RoundResult:
    if scores[PlayerId.ONE] > scores[PlayerId.TWO]:
        return RoundResult.PLAYER_ONE_WIN
    if scores[PlayerId.TWO] > scores[PlayerId.ONE]:
        return RoundResult.PLAYER_TWO_WIN
    return RoundResult.DRAW
