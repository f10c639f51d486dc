"""Player ownership naming convention

Controls named ``"P<digits> <rest>"`` belong to that player, e.g. ``"P2 Button A"``.
Anything else is a system control (player 0).
"""
import re

PLAYER_PATTERN = re.compile(r"^P([0-9]+) ")


def player_number(control_name: str) -> int:
    match = PLAYER_PATTERN.match(control_name)
    return int(match.group(1)) if match else 0
