from npuzzle.io.boardfile import format_board, parse_board, read_board, write_board

__all__ = ["format_board", "parse_board", "read_board", "write_board"]
