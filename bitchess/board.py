"""Piece placement held as twelve bitboards plus occupancy."""

from dataclasses import dataclass, field

from .bitboard import sq_index
from .piece import Color, PieceType, board_index

_BACK_RANK = {
    PieceType.ROOK: "ah",
    PieceType.KNIGHT: "bg",
    PieceType.BISHOP: "cf",
    PieceType.QUEEN: "d",
    PieceType.KING: "e",
}

_HOME_RANKS = {Color.WHITE: ("1", "2"), Color.BLACK: ("8", "7")}


@dataclass
class Board:
    """Bitboards for each colour and piece kind, with derived occupancy."""

    bitboards: list[int] = field(default_factory=lambda: [0] * 12)
    both_occupancy: int = 0
    white_occupancy: int = 0
    black_occupancy: int = 0

    @classmethod
    def empty(cls) -> "Board":
        """A board with no pieces."""
        return cls()

    @classmethod
    def startpos(cls) -> "Board":
        """A board set up in the initial position."""
        board = cls()
        board.init_startpos()
        return board

    def init_startpos(self) -> None:
        """Reset to the initial position."""
        self.bitboards = [0] * 12
        for color, (back, pawn_rank) in _HOME_RANKS.items():
            for file in "abcdefgh":
                self.bitboards[board_index(color, PieceType.PAWN)] |= 1 << sq_index(file, pawn_rank)
            for piece_type, files in _BACK_RANK.items():
                for file in files:
                    self.bitboards[board_index(color, piece_type)] |= 1 << sq_index(file, back)
        self.recompute_occupancy()

    def place(self, color: Color, piece_type: PieceType, sq: int) -> None:
        """Put a piece on ``sq`` and refresh occupancy."""
        if not 0 <= sq < 64:
            raise ValueError(f"square out of range: {sq}")
        self.bitboards[board_index(color, piece_type)] |= 1 << sq
        self.recompute_occupancy()

    def pieces(self, color: Color, piece_type: PieceType) -> int:
        """Bitboard of the given colour's pieces of one kind."""
        return self.bitboards[board_index(color, piece_type)]

    def recompute_occupancy(self) -> None:
        """Rebuild the occupancy bitboards from the piece bitboards."""
        white = black = 0
        for pt in PieceType:
            if pt == PieceType.NO_PIECE:
                continue
            white |= self.bitboards[board_index(Color.WHITE, pt)]
            black |= self.bitboards[board_index(Color.BLACK, pt)]
        self.white_occupancy = white
        self.black_occupancy = black
        self.both_occupancy = white | black