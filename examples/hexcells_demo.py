from hexcells import (
    Direction,
    GridSettings,
    Hex,
    average,
    field_of_view,
    line,
    ring,
)

settings = GridSettings(orientation="flat", radius=6)
layout = settings.layout()
bounds = settings.bounds()

start = Hex(0, 0)
goal = Hex(5, -2)
walls = {Hex(1, 0), Hex(2, -1), Hex(2, 0)}


def blocking(h: Hex) -> bool:
    return h in walls


if __name__ == "__main__":
    print("line:", line(start, goal))
    print("ring 2:", ring(start, 2))
    print("centroid of walls:", average(walls))
    print("neighbor top:", start.neighbor(Direction.TOP), "at", layout.hex_to_world_pos(start.neighbor(Direction.TOP)))
    print("wrapped:", bounds.wrap(Hex(7, 0)))
    print("visible:", len(field_of_view(start, 4, blocking)))
