from typing import Optional

from reversi.othello.board import BLACK, WHITE, Move
from reversi.othello.game import Game, MoveResult

INVALID_MOVE_MESSAGE = "Invalid move!"
STILL_YOUR_TURN_MESSAGE = "Still your turn!"


def winner_message(winner: Optional[int]) -> str:
    if winner == BLACK:
        return "Black Wins!"
    if winner == WHITE:
        return "White Wins!"
    return "It's a Tie!"


class BaseFrontend:
    """
    A front-end draws the game and turns user input into moves.
    It holds no rules: `run()` feeds its moves into a `Game` and reports the outcome back.
    """

    def render(self, game: Game) -> None:
        raise NotImplementedError

    def get_action(self, game: Game) -> Optional[Move]:
        """Returns the next move, or None when the user quits."""
        raise NotImplementedError

    def show_message(self, message: str) -> None:
        raise NotImplementedError

    def announce_winner(self, game: Game) -> None:
        self.show_message(winner_message(game.winner))

    def finish(self, game: Game) -> None:
        pass

    def run(self, game: Optional[Game] = None) -> Game:
        if game is None:
            game = Game()

        while not game.is_over:
            self.render(game)
            move = self.get_action(game)

            if move is None:
                return game

            result = game.play(move)

            if result == MoveResult.INVALID:
                self.show_message(INVALID_MOVE_MESSAGE)
            elif result == MoveResult.STILL_YOUR_TURN:
                self.show_message(STILL_YOUR_TURN_MESSAGE)

        self.render(game)
        self.announce_winner(game)
        self.finish(game)
        return game
