"""
Shape and broadcasting engine.

Pure functions over shapes (tuples of non-negative ints) and cell lists. Nothing
in this module holds state or allocates cells.

Broadcasting model
------------------
Shapes are paired from the trailing axis backward; a missing leading axis on
the shorter shape counts as size 1. Whenever one side has size 1 where the
other has size ``k``, that side is *expanded*: every contiguous run of
``block`` cells (``block`` = product of the already processed, inner axes of
that side) is repeated ``k`` times. Expansion reuses cell references, so an
expanded sequence still aliases the original cells.

Two alignment modes exist:

- ``lhs_expandable=True`` (binary arithmetic): either side may grow.
- ``lhs_expandable=False`` (assignment): only the right side may grow; the
  target shape is fixed and never silently resized.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

import numpy as np

from ...domain._errors import BroadcastError, ShapeMismatchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Shape = tuple[int, ...]
ExpandPlan = tuple[tuple[int, int], ...]
"""Ordered ``(block, repeat)`` expansion steps for one operand."""


def shape_size(shape: Sequence[int]) -> int:
    """
    Return the number of elements described by `shape`.

    Parameters
    ----------
    shape : Sequence[int]
        Per-axis sizes.

    Returns
    -------
    int
        Product of the entries; ``1`` for the empty (scalar) shape.

    Raises
    ------
    ShapeMismatchError
        If any entry is negative.
    """
    n = 1
    for d in shape:
        if d < 0:
            raise ShapeMismatchError(
                f"negative dimensions are not allowed, got shape {tuple(shape)}",
                shape=shape,
            )
        n *= d
    return n


def normalize_shape(shape) -> Shape:
    """
    Coerce an int (Python or NumPy) or a sequence of ints into a validated
    shape tuple.

    Raises
    ------
    ShapeMismatchError
        If an entry is negative.
    TypeError
        If an entry is not an integer.
    """
    if isinstance(shape, (bool, np.bool_)):
        raise TypeError(f"shape must be an integer or a sequence, got {shape!r}")
    if isinstance(shape, (int, np.integer)):
        shape = (shape,)
    out = []
    for d in shape:
        if isinstance(d, (bool, np.bool_)) or not hasattr(d, "__index__"):
            raise TypeError(f"shape entries must be integers, got {d!r}")
        out.append(d.__index__())
    out_t = tuple(out)
    shape_size(out_t)
    return out_t


def align(
    lshape: Sequence[int], rshape: Sequence[int], lhs_expandable: bool
) -> tuple[Optional[Shape], ExpandPlan, ExpandPlan]:
    """
    Align two shapes for broadcasting.

    Parameters
    ----------
    lshape, rshape : Sequence[int]
        Left and right operand shapes.
    lhs_expandable : bool
        Whether the left side may be expanded. False for assignment.

    Returns
    -------
    tuple
        ``(aligned_shape, left_plan, right_plan)``. ``aligned_shape`` is None
        when the shapes cannot be aligned, in which case both plans are empty.
    """
    out: list[int] = []
    lplan: list[tuple[int, int]] = []
    rplan: list[tuple[int, int]] = []
    lsize = rsize = 1

    rank = max(len(lshape), len(rshape))
    for k in range(1, rank + 1):
        ldim = lshape[-k] if k <= len(lshape) else 1
        rdim = rshape[-k] if k <= len(rshape) else 1
        if ldim != rdim:
            if rdim == 1:
                rplan.append((rsize, ldim))
                rdim = ldim
            elif lhs_expandable and ldim == 1:
                lplan.append((lsize, rdim))
                ldim = rdim
            else:
                return None, (), ()
        lsize *= ldim
        rsize *= rdim
        out.append(ldim)

    out.reverse()
    return tuple(out), tuple(lplan), tuple(rplan)


def expand_cells(cells: Sequence[T], block: int, repeat: int) -> list[T]:
    """
    Repeat each contiguous group of `block` items `repeat` times.

    ``expand_cells([a, b, c, d], 2, 3)`` gives
    ``[a, b, a, b, a, b, c, d, c, d, c, d]``.
    """
    out: list[T] = []
    if block <= 0:
        return out
    for start in range(0, len(cells), block):
        group = cells[start : start + block]
        for _ in range(repeat):
            out.extend(group)
    return out


def apply_plan(cells: Sequence[T], plan: ExpandPlan) -> list[T]:
    """Apply every ``(block, repeat)`` step of `plan` in order."""
    out = list(cells)
    for block, repeat in plan:
        out = expand_cells(out, block, repeat)
    return out


def broadcast_cells(
    lshape: Sequence[int],
    rshape: Sequence[int],
    lcells: Sequence[T],
    rcells: Sequence[T],
    lhs_expandable: bool,
) -> tuple[Shape, list[T], list[T]]:
    """
    Align two operands and expand their cell sequences to the aligned shape.

    Returns
    -------
    tuple
        ``(shape, left_cells, right_cells)`` where both cell lists have
        ``shape_size(shape)`` entries.

    Raises
    ------
    BroadcastError
        If the shapes cannot be aligned in the requested mode.
    """
    shape, lplan, rplan = align(lshape, rshape, lhs_expandable)
    if shape is None:
        if lhs_expandable:
            raise BroadcastError.for_operands(lshape, rshape)
        raise BroadcastError.for_assignment(lshape, rshape)

    if lplan or rplan:
        logger.debug(
            "broadcast %s with %s -> %s (left plan %s, right plan %s)",
            tuple(lshape),
            tuple(rshape),
            shape,
            lplan,
            rplan,
        )
    return shape, apply_plan(lcells, lplan), apply_plan(rcells, rplan)
