"""A robotic arm that moves in 3D space and can hold an object."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field


@dataclass
class RoboticArm:
    """Position of the arm and whether it is holding something."""

    x: float
    y: float
    z: float
    holding: bool = field(default=False, init=False)

    def grab(self) -> None:
        """Close the gripper."""
        self.holding = True

    def release(self) -> None:
        """Open the gripper."""
        self.holding = False

    def move(self, dx: float, dy: float, dz: float) -> None:
        """Shift the arm by the given offsets."""
        self.x += dx
        self.y += dy
        self.z += dz


def main(argv=None) -> int:
    """Place an arm at the given coordinates, move it and grab an object."""
    parser = argparse.ArgumentParser(
        description="Move a robotic arm and make it grab an object."
    )
    parser.add_argument("coords", nargs="*", metavar="COORD", help="X Y Z")
    args = parser.parse_args(argv)

    tokens = args.coords or input("Coordinates X Y Z: ").split()
    if len(tokens) != 3:
        parser.error("expected three coordinates X Y Z")
    try:
        x, y, z = (float(token) for token in tokens)
    except ValueError:
        parser.error("coordinates must be numbers")

    arm = RoboticArm(x, y, z)
    arm.move(3.2, 2.4, 6.7)
    arm.grab()
    if arm.holding:
        print("The arm is holding an object")
    print(f"The arm is now at {arm.x:g} {arm.y:g} {arm.z:g}")
    return 0