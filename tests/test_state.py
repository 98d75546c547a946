# Area: Game Engine Tests
"""Tests for GameSession."""

import pytest
from bulls_and_cows._state import GameSession


class TestGameSessionReset:
    """Tests for session lifecycle."""

    def test_new_session_is_blank(self):
        """Test that a new session has no secret and a hidden mask."""
        session = GameSession()
        assert session.secret_number == ""
        assert session.reveal_mask == [None, None, None, None]
        assert session.guess_attempts == 0
        assert session.cheat_attempts == 0
        assert session.is_solved is False

    def test_reset_clears_counters_and_mask(self):
        """Test that reset() restores the fresh state."""
        session = GameSession()
        session.reset("1234")
        session.register_attempt()
        session.reveal(2)
        session.mark_solved()
        session.terminate()

        session.reset("5678")

        assert session.secret_number == "5678"
        assert session.reveal_mask == [None, None, None, None]
        assert session.guess_attempts == 0
        assert session.cheat_attempts == 0
        assert session.is_solved is False
        assert session.is_terminated is False

    def test_reset_keeps_player_name(self):
        """Test that the player name survives a reset."""
        session = GameSession(player_name="Ann")
        session.reset("1234")
        session.reset("4321")
        assert session.player_name == "Ann"

    @pytest.mark.parametrize("secret", ["123", "12345", "12a4", ""])
    def test_reset_rejects_bad_secret(self, secret):
        """Test that a secret must be exactly 4 digits."""
        with pytest.raises(ValueError):
            GameSession().reset(secret)

    def test_register_attempt_increments(self):
        """Test that attempts count up."""
        session = GameSession()
        session.reset("1234")
        assert session.register_attempt() == 1
        assert session.register_attempt() == 2

    def test_is_finished(self):
        """Test is_finished for solved and terminated sessions."""
        solved = GameSession()
        solved.mark_solved()
        terminated = GameSession()
        terminated.terminate()

        assert solved.is_finished is True
        assert terminated.is_finished is True
        assert GameSession().is_finished is False


class TestGameSessionReveal:
    """Tests for help reveal bookkeeping."""

    def create_session(self):
        session = GameSession()
        session.reset("5137")
        return session

    def test_reveal_copies_secret_digit(self):
        """Test that reveal exposes the secret digit at the position."""
        session = self.create_session()
        assert session.reveal(1) is True
        assert session.reveal_mask == [None, "1", None, None]
        assert session.cheat_attempts == 1

    def test_reveal_same_position_twice(self):
        """Test that an already revealed position is not counted again."""
        session = self.create_session()
        session.reveal(0)
        assert session.reveal(0) is False
        assert session.cheat_attempts == 1

    def test_hidden_positions(self):
        """Test that hidden_positions lists unrevealed indexes."""
        session = self.create_session()
        session.reveal(0)
        session.reveal(3)
        assert session.hidden_positions() == [1, 2]

    def test_helping_number(self):
        """Test the displayed mask."""
        session = self.create_session()
        assert session.helping_number() == "XXXX"
        session.reveal(2)
        assert session.helping_number() == "XX3X"

    def test_cheat_attempts_match_revealed_slots(self):
        """Test that cheat_attempts equals the number of revealed slots."""
        session = self.create_session()
        for position in (3, 1, 0, 2):
            session.reveal(position)
            revealed = sum(1 for d in session.reveal_mask if d is not None)
            assert session.cheat_attempts == revealed

        assert session.can_reveal is False
        assert session.helping_number() == "5137"
