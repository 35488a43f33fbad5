"""
User-facing text, one template per (language, message id).

Adding a language means adding one more block to CATALOG; every block must
define the same ids (tests enforce it).
"""

from __future__ import annotations

from typing import Dict

from .settings import Language

CATALOG: Dict[Language, Dict[str, str]] = {
    Language.ENGLISH: {
        "welcome": (
            "Welcome to word guessing game!\n"
            "Language: English\n"
            "Difficulty: {difficulty}\n\n"
            "{players}\n\n"
            "Rules:\n"
            "A {length} letters long word was drawn.\n"
            "The first player to guess correctly win the game.\n"
            "{repeat_rule}"
        ),
        "difficulty_easy": "Easy",
        "difficulty_normal": "Normal",
        "difficulty_hard": "Hard",
        "repeats_allowed": "Repeat words is allowed.",
        "repeats_not_allowed": "Repeat words is not allowed.",
        "players": "[First player: {first}] [Second player: {second}]",
        "turn": "\n{round}º round.\nIt's {player}'s turn!",
        "invalid_length": "{guess} is an invalid word. Only {length} letters long words are valid guesses.",
        "repeat_not_allowed": "Repeat played words in not allowed.",
        "not_in_list": "{guess} is an invalid word or is not present in wordlist.",
        "won": "{player} won the game after {tries}!",
        "one_try": "only one try",
        "tries": "{round} tries",
        "waiting_for_host": "Connected. Waiting for the game to start...",
        "opponent_guess": "{player} played: {guess}",
        "connection_closed": "Connection closed by the other player.",
    },
    Language.PORTUGUESE: {
        "welcome": (
            "Bem-vindo ao word guessing game!\n"
            "Idioma: Português\n"
            "Dificuldade: {difficulty}\n\n"
            "{players}\n\n"
            "Regras:\n"
            "Uma palavra de {length} caracteres foi sorteada.\n"
            "O primeiro jogador a adivinhar corretamente vence o jogo.\n"
            "{repeat_rule}"
        ),
        "difficulty_easy": "Fácil",
        "difficulty_normal": "Normal",
        "difficulty_hard": "Difícil",
        "repeats_allowed": "Repetir palavras é permitido.",
        "repeats_not_allowed": "Repetir palavras não é permitido.",
        "players": "[Primeiro jogador: {first}] [Segundo jogador: {second}]",
        "turn": "\n{round}ª rodada.\nÉ a vez de {player}!",
        "invalid_length": "{guess} é uma palavra inválida. O seu guess deve ter {length} caracteres.",
        "repeat_not_allowed": "Repetir palavras já jogadas não é permitido.",
        "not_in_list": "{guess} é uma palavra inválida ou não está presente na lista de palavras.",
        "won": "{player} venceu o jogo após {tries}!",
        "one_try": "uma única tentativa",
        "tries": "{round} tentativas",
        "waiting_for_host": "Conectado. Aguardando o início do jogo...",
        "opponent_guess": "{player} jogou: {guess}",
        "connection_closed": "Conexão encerrada pelo outro jogador.",
    },
}


def message(language: Language, key: str, **params) -> str:
    """
    Look up and format one message.

    Raises KeyError for an unknown id, so a missing translation fails loudly.
    """
    template = CATALOG[language][key]
    return template.format(**params) if params else template


def tries_text(language: Language, rounds: int) -> str:
    """'only one try' for a first-round win, '<n> tries' otherwise."""
    if rounds == 1:
        return message(language, "one_try")
    return message(language, "tries", round=rounds)
