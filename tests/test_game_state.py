import io
from pathlib import Path

import pytest

from wordduel.datasets import WordList
from wordduel.engine import Word
from wordduel.errors import EmptyList, ResourceUnavailable
from wordduel.game import ConsolePresenter, Difficulty, GameState, Language


class PickWord:
    """Stand-in rng whose choice() returns a fixed word."""

    def __init__(self, text: str):
        self.word = Word(text)

    def choice(self, seq):
        assert self.word in seq
        return self.word


def make_game(words, secret, difficulty=Difficulty.NORMAL, language=Language.ENGLISH):
    out = io.StringIO()
    wl = WordList.from_words(words, difficulty.word_length)
    game = GameState("Ana", "Bia", difficulty, language, wordlist=wl, rng=PickWord(secret),
                     presenter=ConsolePresenter(language, out=out, color=False))
    return game, out


WORDS_7 = ["gardens", "garnets", "kitchen", "library"]


def test_initial_state():
    game, _ = make_game(WORDS_7, "gardens")
    assert game.round == 1
    assert game.turn is True
    assert game.active_player.name == "Ana"
    assert game.secret_word == Word("GARDENS")
    assert game.secret_word in game.wordlist
    assert not game.is_over


def test_walkthrough_second_player_wins():
    game, out = make_game(WORDS_7, "gardens")

    r = game.submit("GARDENX")
    assert not r.accepted and r.reason == "not_in_list"
    assert game.turn is True and game.round == 1
    assert "GARDENX is an invalid word or is not present in wordlist." in out.getvalue()

    r = game.submit("garnets\n")
    assert r.accepted and r.pattern == "GGGYG-G"
    assert "G A R N E T S" in out.getvalue()
    assert game.turn is False and game.round == 1

    r = game.submit("gardens")
    assert r.accepted and r.game_over
    assert game.winner.name == "Bia"
    assert game.round == 1
    assert "Bia won the game after only one try!" in out.getvalue()


def test_round_increments_only_when_first_player_is_back():
    game, out = make_game(WORDS_7, "gardens")
    game.submit("garnets")      # Ana
    assert game.round == 1
    game.submit("kitchen")      # Bia
    assert game.round == 2 and game.turn is True
    game.submit("library")      # Ana
    assert game.round == 2 and game.turn is False
    game.submit("gardens")      # Bia wins
    assert game.winner.name == "Bia"
    assert "Bia won the game after 2 tries!" in out.getvalue()


def test_length_gate_rejects_without_recording():
    game, out = make_game(WORDS_7, "gardens")
    r = game.submit("garden")
    assert r.reason == "invalid_length"
    assert game.first_player.guessed_words == []
    assert game.turn is True
    assert "GARDEN is an invalid word. Only 7 letters long words are valid guesses." in out.getvalue()


def test_exact_secret_never_wins_with_wrong_length():
    game, _ = make_game(WORDS_7, "gardens")
    assert game.submit("gardenss").reason == "invalid_length"
    assert not game.is_over


def test_repeat_gate_blocks_either_player():
    game, out = make_game(WORDS_7, "gardens")
    game.submit("garnets")                                # Ana
    r = game.submit("GARNETS")                            # Bia repeats Ana's word
    assert r.reason == "repeat_not_allowed"
    assert game.active_player.name == "Bia"
    assert game.second_player.guessed_words == []
    assert "Repeat played words in not allowed." in out.getvalue()


def test_not_in_list_attempt_is_recorded_and_counts_as_played():
    game, _ = make_game(WORDS_7, "gardens")
    game.submit("zzzzzzz")
    assert game.first_player.guessed_words == [Word("ZZZZZZZ")]
    assert game.submit("zzzzzzz").reason == "repeat_not_allowed"


def test_history_goes_to_the_player_who_guessed():
    game, _ = make_game(WORDS_7, "gardens")
    game.submit("garnets")
    game.submit("kitchen")
    assert game.first_player.guessed_words == [Word("GARNETS")]
    assert game.second_player.guessed_words == [Word("KITCHEN")]


WORDS_8 = ["absolute", "airplane", "alphabet", "baseball"]


def test_hard_allows_repeats():
    game, _ = make_game(WORDS_8, "alphabet", difficulty=Difficulty.HARD)
    game.submit("airplane")                  # Ana
    r = game.submit("airplane")              # Bia, same word
    assert r.accepted and r.pattern == "G--YYY-Y"
    assert game.round == 2
    assert game.submit("alphabet").game_over
    assert game.winner.name == "Ana"


def test_first_guess_win_reports_single_try():
    game, out = make_game(WORDS_7, "gardens")
    r = game.submit("Gardens")
    assert r.game_over and game.winner.name == "Ana"
    text = out.getvalue()
    assert "GARDENS" in text
    assert "Ana won the game after only one try!" in text
    with pytest.raises(RuntimeError):
        game.submit("kitchen")


def test_accented_spelling_in_list_wins_by_tolerant_match():
    game, _ = make_game(["abóbora", "abobora", "amarelo"], "abóbora", language=Language.PORTUGUESE)
    r = game.submit("ABOBORA")
    assert r.game_over


def test_tolerant_match_not_in_list_does_not_win():
    game, out = make_game(["abóbora", "amarelo"], "abóbora", language=Language.PORTUGUESE)
    r = game.submit("abobora")
    assert r.reason == "not_in_list"
    assert not game.is_over
    assert "ABOBORA é uma palavra inválida ou não está presente na lista de palavras." in out.getvalue()


def test_play_loop_announces_turns_and_returns_winner():
    game, out = make_game(WORDS_7, "gardens")
    lines = iter(["garden", "garnets", "kitchen", "gardens"])
    seen_turns = []

    def next_guess(turn):
        seen_turns.append(turn)
        return next(lines)

    winner = game.play(next_guess)
    assert winner.name == "Ana"
    assert seen_turns == [True, True, False, True]
    text = out.getvalue()
    assert "Welcome to word guessing game!" in text
    assert "[First player: Ana] [Second player: Bia]" in text
    assert "A 7 letters long word was drawn." in text
    assert "Repeat words is not allowed." in text
    assert "1º round.\nIt's Ana's turn!" in text
    assert "1º round.\nIt's Bia's turn!" in text
    assert "2º round.\nIt's Ana's turn!" in text
    assert "Ana won the game after 2 tries!" in text


def test_play_loop_in_portuguese():
    game, out = make_game(WORDS_8, "baseball", difficulty=Difficulty.HARD, language=Language.PORTUGUESE)
    game.play(lambda turn: "baseball")
    text = out.getvalue()
    assert "Dificuldade: Difícil" in text
    assert "Repetir palavras é permitido." in text
    assert "1ª rodada.\nÉ a vez de Ana!" in text
    assert "Ana venceu o jogo após uma única tentativa!" in text


def test_connection_errors_propagate_from_play():
    game, _ = make_game(WORDS_7, "gardens")

    def next_guess(turn):
        if turn:
            return "garnets"
        raise ConnectionAbortedError("Connection closed")

    with pytest.raises(ConnectionAbortedError):
        game.play(next_guess)
    assert not game.is_over


def test_str_lists_players():
    game, _ = make_game(WORDS_7, "gardens", language=Language.PORTUGUESE)
    assert str(game) == "[Primeiro jogador: Ana] [Segundo jogador: Bia]"


def test_empty_wordlist_is_fatal():
    with pytest.raises(EmptyList):
        GameState("Ana", "Bia", wordlist=WordList.from_words([], 7))


def test_missing_resource_is_fatal(tmp_path: Path):
    with pytest.raises(ResourceUnavailable):
        GameState("Ana", "Bia", Difficulty.EASY, data_dir=tmp_path)


def test_loads_bundled_list_by_default():
    game = GameState("Ana", "Bia", Difficulty.EASY, Language.PORTUGUESE,
                     presenter=ConsolePresenter(Language.PORTUGUESE, out=io.StringIO()))
    assert game.secret_word.length() == 6
    assert game.secret_word in game.wordlist
