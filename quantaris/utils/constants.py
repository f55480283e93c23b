"""Game configuration constants from the Quantaris rules."""

# Board
BOARD_SIZE = 9  # Cells per side (0-8)

# Players
PLAYER_A = "A"
PLAYER_B = "B"
PLAYERS = (PLAYER_A, PLAYER_B)

# Entities
QUANTARS_PER_PLAYER = 3
QUANTAR_HP = 2
CORE_HP = 5

# Combat
PULSE_DAMAGE = 1
SHIELD_REDUCTION = 1

# Game length
MAX_TURNS = 50  # Reaching this turn number ends the game in a draw

# Initial layout
#
#       x: 0  1  2  3  4  5  6  7  8
# y=0    .  .  .  .  BC .  .  .  .
# y=2    .  .  .  B1 B2 B3 .  .  .
# y=6    .  .  .  A1 A2 A3 .  .  .
# y=8    .  .  .  .  AC .  .  .  .
CORE_POSITIONS = {
    PLAYER_A: (4, 8),
    PLAYER_B: (4, 0),
}
QUANTAR_POSITIONS = {
    PLAYER_A: ((3, 6), (4, 6), (5, 6)),
    PLAYER_B: ((3, 2), (4, 2), (5, 2)),
}
