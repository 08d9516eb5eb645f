import logging
import math
import random
from typing import Optional
from wordcraze.game.models import (
    GameConfig,
    GameSession,
    PlayedRound,
    RecognitionState,
    RemainingCounts,
    RoundData,
    SubmissionResult,
    Vocabulary,
    VocabularyReport
)
from wordcraze.game.permutations import (
    generate_permutations,
    generate_permutations_using_dictionary
)
from wordcraze.game import rules
from wordcraze.words.bank import Dictionary, validate_vocabulary

logger = logging.getLogger(__name__)

class DictionaryNotBuiltError(RuntimeError):
    """Raised when a round operation runs before build_index()."""

class NoActiveRoundError(RuntimeError):
    pass

def skewed_index(rng: random.Random, size: int) -> int:
    """
    Index in [0, size - 1] drawn as round(random() * (size - 1)) with halves
    rounded up. Both ends get half the weight of an interior index.
    """
    if size < 1:
        raise ValueError("Cannot pick from an empty sequence")
    return math.floor(rng.random() * (size - 1) + 0.5)

class GameEngine:
    """
    Picks base words, builds the answer sets for a round and scores entries.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.dictionary: Optional[Dictionary] = None

    def build_index(self, vocabulary: Vocabulary) -> VocabularyReport:
        report = validate_vocabulary(vocabulary)
        self.dictionary = Dictionary.from_vocabulary(vocabulary)
        logger.info(f"Dictionary {self.config.dictionary_id} built with {len(self.dictionary)} words")
        return report

    def _require_dictionary(self) -> Dictionary:
        if self.dictionary is None:
            raise DictionaryNotBuiltError("build_index() must be called before playing a round")
        return self.dictionary

    def select_round(self) -> RoundData:
        dictionary = self._require_dictionary()
        candidates = dictionary.words_of_length(self.config.base_length)
        if not candidates:
            raise DictionaryNotBuiltError(
                f"Dictionary has no {self.config.base_length}-letter words to pick from"
            )
        base_word = candidates[skewed_index(self.rng, len(candidates))]
        return self.build_round(base_word)

    def build_round(self, base_word: str) -> RoundData:
        dictionary = self._require_dictionary()
        base_word = base_word.strip().lower()
        if len(base_word) != self.config.base_length:
            raise ValueError(
                f"Base word must have {self.config.base_length} letters, got '{base_word}'"
            )

        arrangements = generate_permutations(base_word)
        presented_word = arrangements[skewed_index(self.rng, len(arrangements))]

        answers = {}
        for length in self.config.answer_lengths:
            if self.config.strategy == "dictionary":
                candidates = generate_permutations_using_dictionary(base_word, dictionary, length)
            else:
                candidates = generate_permutations(base_word, length)
            answers[length] = frozenset(rules.classify(candidates, dictionary, length))

        round_data = RoundData(
            base_word=base_word,
            presented_word=presented_word,
            threes=answers.get(3, frozenset()),
            fours=answers.get(4, frozenset()),
            fives=answers.get(5, frozenset())
        )
        logger.debug(
            f"Round for '{base_word}' presented as '{presented_word}': "
            f"{len(round_data.threes)}/{len(round_data.fours)}/{len(round_data.fives)} answers"
        )
        return round_data

    def submit(
        self,
        round_data: RoundData,
        recognition: RecognitionState,
        word: str
    ) -> SubmissionResult:
        self._require_dictionary()
        return rules.submit(round_data, recognition, word, self.config.points)

    def remaining_counts(self, round_data: RoundData, recognition: RecognitionState) -> RemainingCounts:
        self._require_dictionary()
        return rules.remaining_counts(round_data, recognition)

    def new_round(self, session: GameSession) -> RoundData:
        """
        Archives the session's current round and starts a fresh one.
        """
        round_data = self.select_round()
        if session.current_round is not None:
            session.played.append(PlayedRound(
                round=session.current_round,
                recognition=session.recognition or RecognitionState.for_round(session.current_round)
            ))
        session.current_round = round_data
        session.recognition = RecognitionState.for_round(round_data)
        return round_data

    def play_word(self, session: GameSession, word: str) -> SubmissionResult:
        if session.current_round is None or session.recognition is None:
            raise NoActiveRoundError("No round in progress; call new_round() first")
        result = self.submit(session.current_round, session.recognition, word)
        session.score += result.delta
        return result
