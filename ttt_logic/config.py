"""
Game configuration for the TicTacToe match core.
All the tunable settings for marks, scoring, history and the UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to restyle the game or the front ends.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # Marks shown for each player (the human always moves first)
    HUMAN_MARK = "X"
    COMPUTER_MARK = "O"
    EMPTY_MARK = " "

    # ==================== ENGINE SETTINGS ====================
    # Terminal score before depth adjustment (win = 10 - depth)
    WIN_SCORE = 10

    # ==================== HISTORY SETTINGS ====================
    # Recent games shown by the front ends
    HISTORY_LIMIT = 5
    # Default page size when asking the recorder for history
    DEFAULT_HISTORY_LIMIT = 10

    # ==================== UI SETTINGS ====================
    # Delay before the computer's (already computed) move is shown
    THINKING_DELAY_MS = 500

    # ==================== LOGGING ====================
    LOG_LEVEL = "INFO"
