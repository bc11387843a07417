# region Imports
from typing import Iterator, Tuple
# endregion

# up, right, down, left
STEPS_4 = ((0, 1), (1, 0), (0, -1), (-1, 0))

# region Neighbor Generation
def neighbors_4(u: Tuple[int, int], size: int) -> Iterator[Tuple[int, int]]:
    x, y = u
    for dx, dy in STEPS_4:
        xx, yy = x + dx, y + dy
        if 0 <= xx < size and 0 <= yy < size:
            yield (xx, yy)


def neighbors_8(u: Tuple[int, int], size: int) -> Iterator[Tuple[int, int]]:
    x, y = u
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            xx, yy = x + dx, y + dy
            if 0 <= xx < size and 0 <= yy < size:
                yield (xx, yy)
# endregion

# region Index Helpers
def idx_to_xy(i: int, size: int) -> Tuple[int, int]:
    return (i % size, i // size)
# endregion
