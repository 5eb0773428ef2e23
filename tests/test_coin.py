import unittest
from tomb.core.coin import SimpleCoin, CoinFacing
from tomb.core.die import InvalidFaceError


class TestSimpleCoin(unittest.TestCase):
    """
    Tests for `SimpleCoin`, the two-faced die:
      - heads()/tails() constructors and predicates.
      - swap (new coin) vs swap_mut (in place).
      - Rotation by odd amounts flips, by even amounts keeps the facing.
    """

    def test_heads_and_tails(self):
        self.assertTrue(SimpleCoin.heads().is_heads())
        self.assertTrue(SimpleCoin.tails().is_tails())
        self.assertTrue(SimpleCoin().is_heads())

    def test_next(self):
        tails = SimpleCoin.heads().next()
        self.assertTrue(tails.is_tails())
        self.assertTrue(tails.next().is_heads())

    def test_swap(self):
        coin = SimpleCoin.heads()
        tails = coin.swap()
        self.assertTrue(tails.is_tails())
        self.assertTrue(coin.is_heads())
        self.assertTrue(tails.swap().is_heads())

    def test_swap_mut(self):
        coin = SimpleCoin.heads()
        self.assertIs(coin.swap_mut(), CoinFacing.TAILS)
        self.assertTrue(coin.is_tails())

    def test_rotate(self):
        coin = SimpleCoin.heads()
        self.assertTrue(coin.rotated(1).is_tails())
        self.assertTrue(coin.rotated(-1).is_tails())
        self.assertTrue(coin.rotated(-5).is_tails())
        self.assertTrue(coin.rotated(4).is_heads())

    def test_rotate_mut(self):
        coin = SimpleCoin.heads()
        coin.rotate(3)
        self.assertTrue(coin.is_tails())

    def test_set_position(self):
        coin = SimpleCoin.heads()
        coin.set_position(1)
        self.assertTrue(coin.is_tails())
        self.assertIs(coin.value(), CoinFacing.TAILS)
        with self.assertRaises(InvalidFaceError):
            coin.set_position(2)

    def test_invalid_facing(self):
        with self.assertRaises(InvalidFaceError):
            SimpleCoin("heads")

    def test_eq(self):
        self.assertEqual(SimpleCoin.heads(), SimpleCoin())
        self.assertNotEqual(SimpleCoin.heads(), SimpleCoin.tails())


if __name__ == '__main__':
    unittest.main()
