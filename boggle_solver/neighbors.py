# Left, left-up, left-down, up, right, right-down, right-up, down.
DIRECTIONS = (
    (-1, 0),
    (-1, -1),
    (-1, 1),
    (0, -1),
    (1, 0),
    (1, 1),
    (1, -1),
    (0, 1),
)


def init_neighbors(w: int, h: int) -> list[list[tuple[tuple[int, int], ...]]]:
    """Neighbors of every cell on a w x h board, indexed as ns[y][x].

    Each entry lists the in-bounds (x, y) coordinates in DIRECTIONS order.
    """
    ns = []
    for y in range(0, h):
        row = []
        for x in range(0, w):
            n = []
            for dx, dy in DIRECTIONS:
                nx = x + dx
                ny = y + dy
                if nx < 0 or nx >= w or ny < 0 or ny >= h:
                    continue
                n.append((nx, ny))
            row.append(tuple(n))
        ns.append(row)
    return ns
