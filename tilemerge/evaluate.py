# -*- coding: utf-8 -*-
"""
Evaluate the engine by playing random games and counting the highest tile reached.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Dict

from numpy.random import default_rng
from tqdm import trange

from tilemerge.config import GameConfig
from tilemerge.envs import TwentyFortyEight

_logger = logging.getLogger(__name__)


def evaluate(length: int = 10, seed: int | None = None, max_moves: int = 10_000) -> Dict[int, int]:
    """
    Play random games until they finish.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of both the game and the player, for reproducible runs.
    max_moves : int, optional
        Safety cap on the number of moves of a single game (default is 10 000).

    Returns
    -------
    Dict[int, int]
        How many games ended with each highest tile value.
    """
    env = TwentyFortyEight(GameConfig(seed=seed))
    player = default_rng(seed)
    score = []

    with trange(length) as period:
        for num in period:
            env.reset()
            moves = 0

            # ##: Play a game.
            while not env.is_finished and moves < max_moves:
                legal = env.legal_directions()
                if not legal:
                    break
                env.step(legal[int(player.choice(len(legal)))])
                moves += 1

                # ##: Log.
                period.set_description(f'Evaluation: {num + 1}')
                period.set_postfix(moves=moves, max=env.board.max_value)

            _logger.debug('Game %d ended after %d moves, max tile %d', num + 1, moves, env.board.max_value)
            score.append(env.board.max_value)

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(description='Play random games and report the highest tiles reached')
    parser.add_argument('--length', type=int, default=10, help='Number of games to play')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    result = evaluate(length=args.length, seed=args.seed)
    print(f'Highest tiles over {args.length} games: {result}')


if __name__ == '__main__':
    main()
