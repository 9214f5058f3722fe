import unittest

import numpy as np

from termfour.errors import (BoardError, ColumnFull, ContractViolation, InvalidColumn,
                             InvalidDimensions, InvalidOwner, OutOfBounds)
from termfour.game.board import Board
from termfour.utils import ROWS, COLS, Owner

from tests.boards import drawn_board


class TestBoardCreation(unittest.TestCase):

    def testDefaultDimensions(self):
        board = Board()
        self.assertEqual((board.width, board.height), (COLS, ROWS))
        self.assertEqual(board.grid.shape, (ROWS, COLS))

    def testStartsEmpty(self):
        board = Board(5, 4)
        for row in range(4):
            for col in range(5):
                self.assertIs(board.cell(row, col), Owner.EMPTY)
        self.assertEqual(board.move_count, 0)
        self.assertFalse(board.is_full())

    def testRejectsZeroDimensions(self):
        for width, height in [(0, 6), (7, 0), (0, 0), (-1, 6)]:
            with self.assertRaises(InvalidDimensions):
                Board(width, height)

    def testRejectsNonIntegerDimensions(self):
        with self.assertRaises(InvalidDimensions):
            Board(7.0, 6)
        with self.assertRaises(InvalidDimensions):
            Board(True, 6)

    def testContractViolationsAreBoardErrors(self):
        self.assertTrue(issubclass(InvalidDimensions, ContractViolation))
        self.assertTrue(issubclass(ContractViolation, BoardError))
        self.assertFalse(issubclass(ColumnFull, ContractViolation))


class TestGravity(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def testDropLandsOnBottomRow(self):
        row = self.board.place(3, Owner.PLAYER_ONE)
        self.assertEqual(row, 5)
        self.assertIs(self.board.cell(5, 3), Owner.PLAYER_ONE)

    def testLandingRowRisesWithEachDrop(self):
        previous = self.board.landing_row(2)
        owners = [Owner.PLAYER_ONE, Owner.PLAYER_TWO]
        for i in range(ROWS):
            self.board.place(2, owners[i % 2])
            if self.board.is_column_full(2):
                break
            current = self.board.landing_row(2)
            self.assertLess(current, previous)
            previous = current
        self.assertTrue(self.board.is_column_full(2))

    def testMarkersStackInDropOrder(self):
        self.board.place(0, Owner.PLAYER_ONE)
        self.board.place(0, Owner.PLAYER_TWO)
        self.board.place(0, Owner.COMPUTER)
        self.assertIs(self.board.cell(5, 0), Owner.PLAYER_ONE)
        self.assertIs(self.board.cell(4, 0), Owner.PLAYER_TWO)
        self.assertIs(self.board.cell(3, 0), Owner.COMPUTER)
        self.assertEqual(self.board.landing_row(0), 2)

    def testSeventhDropIntoColumnIsFull(self):
        owners = [Owner.PLAYER_ONE, Owner.PLAYER_TWO]
        for i in range(ROWS):
            self.assertEqual(self.board.place(3, owners[i % 2]), ROWS - 1 - i)

        with self.assertRaises(ColumnFull) as ctx:
            self.board.place(3, Owner.PLAYER_ONE)
        self.assertEqual(ctx.exception.column, 3)

        with self.assertRaises(ColumnFull):
            self.board.landing_row(3)

    def testFullColumnLeavesBoardUnchanged(self):
        for i in range(ROWS):
            self.board.place(1, Owner.PLAYER_TWO if i % 2 else Owner.PLAYER_ONE)
        before = self.board.get_state()

        with self.assertRaises(ColumnFull):
            self.board.place(1, Owner.PLAYER_ONE)

        np.testing.assert_array_equal(self.board.get_state(), before)
        self.assertEqual(self.board.move_count, ROWS)

    def testLandingRowUsesLowestEmptyCell(self):
        board = Board.from_rows([[0], [1], [0], [2]])
        self.assertEqual(board.landing_row(0), 2)


class TestContractViolations(unittest.TestCase):

    def setUp(self):
        self.board = Board()

    def testPlaceEmptyOwner(self):
        with self.assertRaises(InvalidOwner):
            self.board.place(0, Owner.EMPTY)
        self.assertEqual(self.board.move_count, 0)

    def testPlaceNonOwner(self):
        with self.assertRaises(InvalidOwner):
            self.board.place(0, 1)

    def testColumnOutOfRange(self):
        for column in (-1, COLS, 100):
            with self.assertRaises(InvalidColumn):
                self.board.landing_row(column)
            with self.assertRaises(InvalidColumn):
                self.board.place(column, Owner.PLAYER_ONE)
        self.assertEqual(self.board.move_count, 0)

    def testCellOutOfBounds(self):
        for row, col in [(-1, 0), (0, -1), (ROWS, 0), (0, COLS)]:
            with self.assertRaises(OutOfBounds):
                self.board.cell(row, col)

    def testCellNonIntegerCoordinates(self):
        for row, col in [(1.5, 0), (0, 1.5), ("1", 0), (True, 0), (None, 0)]:
            with self.assertRaises(OutOfBounds):
                self.board.cell(row, col)
        self.assertFalse(self.board.in_bounds(1.5, 0))

    def testCellAcceptsNumpyIntegers(self):
        self.assertIs(self.board.cell(np.int64(0), np.int64(0)), Owner.EMPTY)


class TestBoardQueries(unittest.TestCase):

    def testValidColumnsSkipFullOnes(self):
        board = Board(3, 2)
        board.place(1, Owner.PLAYER_ONE)
        board.place(1, Owner.PLAYER_TWO)
        self.assertEqual(board.valid_columns(), [0, 2])

    def testFullBoard(self):
        board = drawn_board()
        self.assertTrue(board.is_full())
        self.assertEqual(board.valid_columns(), [])
        self.assertEqual(board.move_count, ROWS * COLS)

    def testFromRowsValidates(self):
        with self.assertRaises(InvalidDimensions):
            Board.from_rows([])
        with self.assertRaises(InvalidDimensions):
            Board.from_rows([[0, 0], [0]])
        with self.assertRaises(InvalidOwner):
            Board.from_rows([[0, 9]])

    def testFromRowsAcceptsOwners(self):
        board = Board.from_rows([[Owner.EMPTY, Owner.PLAYER_TWO]])
        self.assertIs(board.cell(0, 1), Owner.PLAYER_TWO)

    def testCopyIsIndependent(self):
        board = Board()
        board.place(0, Owner.PLAYER_ONE)
        clone = board.copy()
        clone.place(0, Owner.PLAYER_TWO)
        self.assertEqual(board.move_count, 1)
        self.assertEqual(clone.move_count, 2)

    def testRowsSnapshot(self):
        board = Board(2, 2)
        board.place(1, Owner.PLAYER_ONE)
        self.assertEqual(board.rows(), ((Owner.EMPTY, Owner.EMPTY),
                                        (Owner.EMPTY, Owner.PLAYER_ONE)))

    def testRender(self):
        board = Board(3, 2)
        board.place(0, Owner.PLAYER_ONE)
        board.place(2, Owner.PLAYER_TWO)
        self.assertEqual(board.render(), "\n".join([
            "+-----+",
            "|     |",
            "|X   O|",
            "+-----+",
            " 0 1 2 ",
        ]))


if __name__ == '__main__':
    unittest.main()
