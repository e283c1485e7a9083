"""Tests for round-robin fixture generation."""

from collections import Counter

import pytest

from roundrobin.fixtures import (
    BYE_ID,
    InvalidInput,
    Match,
    Participant,
    expected_match_count,
    generate_fixtures,
    round_count,
)


def make_players(count):
    return [Participant(id=i + 1, name=f"P{i + 1}") for i in range(count)]


class TestSingleRoundRobin:
    """Test single round-robin pairings."""

    def test_four_players_exact_fixtures(self):
        """Test the circle method output for four players."""
        matches = generate_fixtures(make_players(4))

        assert [(m.round, m.player1, m.player2) for m in matches] == [
            (1, 1, 2), (1, 3, 4),
            (2, 1, 3), (2, 4, 2),
            (3, 1, 4), (3, 2, 3),
        ]

    def test_four_players_rounds(self):
        """Test that 4 players give 3 rounds of 2 matches."""
        matches = generate_fixtures(make_players(4))

        per_round = Counter(m.round for m in matches)
        assert per_round == {1: 2, 2: 2, 3: 2}

    def test_five_players_one_bye_per_round(self):
        """Test that 5 players give 10 matches over 5 rounds, 2 per round."""
        matches = generate_fixtures(make_players(5))

        assert len(matches) == 10
        per_round = Counter(m.round for m in matches)
        assert per_round == {r: 2 for r in range(1, 6)}

        # Everyone sits out exactly one round
        for p in range(1, 6):
            rounds_played = {m.round for m in matches if m.involves(p)}
            assert len(rounds_played) == 4

    @pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 10, 13, 20])
    def test_every_pair_meets_once(self, count):
        """Test that each unordered pair appears exactly once."""
        matches = generate_fixtures(make_players(count))

        pairs = Counter(frozenset((m.player1, m.player2)) for m in matches)
        assert len(matches) == count * (count - 1) // 2
        assert len(pairs) == len(matches)
        assert all(n == 1 for n in pairs.values())

    @pytest.mark.parametrize("count", [3, 4, 9, 20])
    def test_no_player_twice_in_a_round(self, count):
        """Test that nobody is booked twice in the same round."""
        matches = generate_fixtures(make_players(count))

        for r in range(1, round_count(count) + 1):
            ids = [p for m in matches if m.round == r for p in (m.player1, m.player2)]
            assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("count", [2, 5, 8, 11])
    def test_no_self_or_bye_pairings(self, count):
        """Test that no match pairs a player with itself or the bye."""
        for m in generate_fixtures(make_players(count), double_round=True):
            assert m.player1 != m.player2
            assert BYE_ID not in (m.player1, m.player2)

    def test_two_players(self):
        """Test the smallest tournament."""
        matches = generate_fixtures(make_players(2))

        assert matches == [Match(round=1, player1=1, player2=2)]

    def test_match_key(self):
        """Test the identifier used when reordering matches."""
        match = Match(round=2, player1=4, player2=1)

        assert match.key == "match-2-4-1"

    def test_matches_have_no_date(self):
        """Test that generated matches are undated."""
        assert all(m.date is None for m in generate_fixtures(make_players(6)))

    def test_seeding_order_drives_pairings(self):
        """Test that ids are taken from the given order, not sorted."""
        players = [Participant(id=7), Participant(id=3), Participant(id=9), Participant(id=1)]
        matches = generate_fixtures(players)

        assert (matches[0].player1, matches[0].player2) == (7, 3)
        assert (matches[1].player1, matches[1].player2) == (9, 1)


class TestDoubleRoundRobin:
    """Test double round-robin generation."""

    @pytest.mark.parametrize("count", [2, 4, 5, 7])
    def test_doubles_match_count(self, count):
        """Test that the second leg doubles the match count."""
        single = generate_fixtures(make_players(count))
        double = generate_fixtures(make_players(count), double_round=True)

        assert len(double) == 2 * len(single)
        assert len(double) == expected_match_count(count, double_round=True)

    @pytest.mark.parametrize("count", [4, 5])
    def test_second_leg_reverses_home_and_away(self, count):
        """Test that (r, p1, p2) has a matching (r + rounds, p2, p1)."""
        rounds = round_count(count)
        single = generate_fixtures(make_players(count))
        double = generate_fixtures(make_players(count), double_round=True)

        assert double[:len(single)] == single
        for first, second in zip(single, double[len(single):]):
            assert second.round == first.round + rounds
            assert (second.player1, second.player2) == (first.player2, first.player1)

    def test_two_players_double(self):
        """Test two players meeting home and away."""
        matches = generate_fixtures(make_players(2), double_round=True)

        assert matches == [
            Match(round=1, player1=1, player2=2),
            Match(round=2, player1=2, player2=1),
        ]


class TestDeterminism:
    """Test that generation is a pure function of its input."""

    def test_identical_inputs_identical_output(self):
        """Test repeated calls produce equal lists."""
        players = make_players(9)

        assert generate_fixtures(players, True) == generate_fixtures(players, True)

    def test_input_list_not_modified(self):
        """Test that the bye is not appended to the caller's list."""
        players = make_players(5)
        generate_fixtures(players)

        assert len(players) == 5


class TestInvalidInput:
    """Test precondition violations."""

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_players(self, count):
        with pytest.raises(InvalidInput):
            generate_fixtures(make_players(count))

    def test_duplicate_ids(self):
        with pytest.raises(InvalidInput, match="Duplicate"):
            generate_fixtures([Participant(id=1), Participant(id=2), Participant(id=1)])

    def test_reserved_bye_id(self):
        with pytest.raises(InvalidInput):
            generate_fixtures([Participant(id=1), Participant(id=BYE_ID)])

    def test_invalid_input_is_value_error(self):
        """Test callers can catch InvalidInput as ValueError."""
        with pytest.raises(ValueError):
            generate_fixtures([])


class TestCounting:
    """Test the counting helpers."""

    @pytest.mark.parametrize("count,rounds", [(2, 1), (3, 3), (4, 3), (5, 5), (20, 19)])
    def test_round_count(self, count, rounds):
        assert round_count(count) == rounds

    def test_expected_match_count_twenty_players(self):
        assert expected_match_count(20) == 190
        assert expected_match_count(20, double_round=True) == 380
