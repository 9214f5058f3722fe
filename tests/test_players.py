import unittest

from termfour.errors import InvalidRoster
from termfour.game.players import PlayerRoster
from termfour.utils import Owner


class TestPlayerRoster(unittest.TestCase):

    def testDefaultOrder(self):
        roster = PlayerRoster()
        self.assertIs(roster.current, Owner.PLAYER_ONE)
        self.assertEqual(roster.advance(), Owner.PLAYER_TWO)
        self.assertEqual(roster.advance(), Owner.PLAYER_ONE)

    def testRotationIsFixedCycle(self):
        order = (Owner.PLAYER_TWO, Owner.COMPUTER, Owner.PLAYER_ONE)
        roster = PlayerRoster(order)
        for turns in range(1, 11):
            roster.advance()
            self.assertIs(roster.current, order[turns % len(order)])
        self.assertEqual(roster.order, order)

    def testSinglePlayerKeepsTurn(self):
        roster = PlayerRoster([Owner.PLAYER_ONE])
        self.assertIs(roster.advance(), Owner.PLAYER_ONE)
        self.assertEqual(len(roster), 1)

    def testRejectsBadRosters(self):
        for players in ([], [Owner.EMPTY], [Owner.PLAYER_ONE, Owner.EMPTY],
                        [Owner.PLAYER_ONE, Owner.PLAYER_ONE], ["X"]):
            with self.assertRaises(InvalidRoster):
                PlayerRoster(players)


if __name__ == '__main__':
    unittest.main()
