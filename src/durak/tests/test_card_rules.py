import unittest
from durak.core.card import (
    Card, Suit, compare_rank, find, has_rank, parse_card, remove, same,
    same_rank, same_suit, to_long_string, to_long_strings, to_string,
    to_strings, value,
)
from durak.core.move_validator import beats


class TestCardEquality(unittest.TestCase):
    def test_same_is_reflexive_and_symmetric(self):
        a = Card(6, Suit.HEARTS)
        b = Card(6, Suit.HEARTS)
        c = Card(6, Suit.SPADES)
        self.assertTrue(same(a, a))
        self.assertTrue(same(a, b) and same(b, a))
        self.assertFalse(same(a, c) or same(c, a))

    def test_pairwise_predicates(self):
        a = Card(12, Suit.CLUBS)
        self.assertTrue(same_suit(a, Card(3, Suit.CLUBS)))
        self.assertFalse(same_suit(a, Card(12, Suit.HEARTS)))
        self.assertTrue(same_rank(a, Card(12, Suit.HEARTS)))
        self.assertFalse(same_rank(a, Card(13, Suit.CLUBS)))

    def test_compare_rank_ignores_suit(self):
        self.assertEqual(compare_rank(Card(5, Suit.HEARTS), Card(9, Suit.HEARTS)), -1)
        self.assertEqual(compare_rank(Card(9, Suit.CLUBS), Card(9, Suit.HEARTS)), 0)
        self.assertEqual(compare_rank(Card(14, Suit.SPADES), Card(2, Suit.SPADES)), 1)
        self.assertEqual(value(Card(14, Suit.SPADES)), 14)

    def test_invalid_cards_are_rejected(self):
        with self.assertRaises(ValueError):
            Card(1, Suit.HEARTS)
        with self.assertRaises(ValueError):
            Card(15, Suit.HEARTS)
        with self.assertRaises(ValueError):
            Card(6, "H")


class TestCardLists(unittest.TestCase):
    def setUp(self):
        self.cards = [Card(6, Suit.HEARTS), Card(13, Suit.CLUBS), Card(6, Suit.SPADES)]

    def test_has_rank_ignores_suit(self):
        self.assertTrue(has_rank(Card(13, Suit.DIAMONDS), self.cards))
        self.assertFalse(has_rank(Card(7, Suit.HEARTS), self.cards))
        self.assertFalse(has_rank(Card(7, Suit.HEARTS), []))

    def test_find_is_exact(self):
        self.assertEqual(find(Card(6, Suit.SPADES), self.cards), Card(6, Suit.SPADES))
        self.assertIsNone(find(Card(13, Suit.HEARTS), self.cards))

    def test_remove_present_card(self):
        out = remove(Card(13, Suit.CLUBS), self.cards)
        self.assertEqual(len(out), len(self.cards) - 1)
        self.assertIsNone(find(Card(13, Suit.CLUBS), out))
        self.assertEqual(len(self.cards), 3)

    def test_remove_absent_card_is_noop(self):
        self.assertEqual(remove(Card(2, Suit.DIAMONDS), self.cards), self.cards)

    def test_remove_only_first_duplicate(self):
        dup = [Card(6, Suit.HEARTS), Card(7, Suit.CLUBS), Card(6, Suit.HEARTS)]
        self.assertEqual(remove(Card(6, Suit.HEARTS), dup),
                         [Card(7, Suit.CLUBS), Card(6, Suit.HEARTS)])


class TestCardFormatting(unittest.TestCase):
    def test_short_codes(self):
        self.assertEqual(to_string(Card(6, Suit.HEARTS)), "6H")
        self.assertEqual(to_string(Card(11, Suit.HEARTS)), "JH")
        self.assertEqual(to_string(Card(10, Suit.SPADES)), "10S")
        self.assertEqual(str(Card(14, Suit.CLUBS)), "AC")

    def test_long_names(self):
        self.assertEqual(to_long_string(Card(6, Suit.HEARTS)), "6 of Hearts")
        self.assertEqual(to_long_string(Card(12, Suit.DIAMONDS)), "Queen of Diamonds")

    def test_joined(self):
        cards = [Card(13, Suit.SPADES), Card(2, Suit.DIAMONDS)]
        self.assertEqual(to_strings(cards), "KS 2D")
        self.assertEqual(to_long_strings(cards), "King of Spades, 2 of Diamonds")

    def test_parse_card(self):
        self.assertEqual(parse_card("10s"), Card(10, Suit.SPADES))
        self.assertEqual(parse_card("QD"), Card(12, Suit.DIAMONDS))
        for bad in ("", "X", "1H", "11H", "6X"):
            with self.assertRaises(ValueError):
                parse_card(bad)


class TestBeats(unittest.TestCase):
    def test_same_suit_beats_higher_rank(self):
        trump = Suit.SPADES
        a = Card(9, Suit.HEARTS)
        b = Card(11, Suit.HEARTS)
        self.assertTrue(beats(b, a, trump))
        self.assertFalse(beats(a, b, trump))
        self.assertFalse(beats(a, a, trump))

    def test_trump_beats_non_trump(self):
        trump = Suit.CLUBS
        a = Card(14, Suit.HEARTS)
        b = Card(6, Suit.CLUBS)
        self.assertTrue(beats(b, a, trump))
        self.assertFalse(beats(a, b, trump))

    def test_off_suit_never_beats(self):
        self.assertFalse(beats(Card(14, Suit.DIAMONDS), Card(2, Suit.HEARTS), Suit.SPADES))

    def test_any_trump_covers_a_trump_attack(self):
        trump = Suit.HEARTS
        self.assertTrue(beats(Card(6, Suit.HEARTS), Card(14, Suit.HEARTS), trump))
        self.assertTrue(beats(Card(14, Suit.HEARTS), Card(6, Suit.HEARTS), trump))


if __name__ == "__main__":
    unittest.main()
