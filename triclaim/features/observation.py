from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import torch

from triclaim.core import Board, PlayerId
from triclaim.core.geometry import NUM_ORIENTATIONS

BOARD_CHANNELS = 2 * NUM_ORIENTATIONS  # own / opponent per orientation
AUX_VECTOR_SIZE = 2 + 1 + NUM_ORIENTATIONS  # current player one-hot, extra-turn flag, selection one-hot


def build_board_tensor(board: Board) -> np.ndarray:
    """Return board tensor with shape (8, rows, cols) channel-first, relative to the player to move."""
    own = board.owners == int(board.current_player)
    opponent = board.owners == int(board.current_player.opponent)
    # (rows, cols, 4) -> (4, rows, cols)
    tensor = np.concatenate([own, opponent], axis=2).transpose(2, 0, 1)
    return tensor.astype(np.float32)


def build_aux_vector(board: Board) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(board.current_player) - 1] = 1.0
    aux[2] = 1.0 if board.pending_extra_turns > 0 else 0.0
    aux[3 + board.selected_orientation] = 1.0
    return aux


def build_flat_vector(board: Board, perspective: PlayerId) -> np.ndarray:
    """Flat move-suggestion input: four values per cell plus a to-move flag.

    Each cell contributes ``[owner, rotation]`` for up to two triangles, owner
    being 1 for ``perspective``, -1 for the opponent and 0 for none, rotation
    being ``orientation / 4`` or -1 when absent.
    """
    values = np.zeros((board.rows, board.cols, 4), dtype=np.float32)
    values[..., 1] = -1.0
    values[..., 3] = -1.0
    for x, y, cell in board.cells():
        for slot, triangle in enumerate(cell):
            values[y, x, 2 * slot] = 1.0 if triangle.owner == perspective else -1.0
            values[y, x, 2 * slot + 1] = triangle.orientation / 4.0
    to_move = 1.0 if board.current_player == perspective else -1.0
    return np.concatenate([values.reshape(-1), np.array([to_move], dtype=np.float32)])


def state_to_numpy(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(board), build_aux_vector(board)


def state_to_torch(
    board: Board,
    *,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> Tuple[torch.Tensor, torch.Tensor]:
    board_np, aux_np = state_to_numpy(board)
    tensor = torch.from_numpy(board_np).to(device=device, dtype=dtype)
    aux = torch.from_numpy(aux_np).to(device=device, dtype=dtype)
    return tensor, aux
