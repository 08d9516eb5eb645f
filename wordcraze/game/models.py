from datetime import datetime
from enum import Enum
from typing import Any, Literal
from pydantic import BaseModel, ConfigDict, Field

class GameConfig(BaseModel):
    points: dict[int, int] = Field(default_factory=lambda: {3: 30, 4: 40, 5: 50})
    round_seconds: int = Field(90, gt=0)        # Host-side round timer
    base_length: int = Field(5, gt=0)           # Length of the base word
    answer_lengths: tuple[int, ...] = (5, 4, 3)
    strategy: Literal["dictionary", "exhaustive"] = "dictionary"
    dictionary_id: str = "en_v1"                # Which word bank version

class Vocabulary(BaseModel):
    # Entries are not type-checked here; the index builder skips bad ones
    threes: list[Any] = Field(default_factory=list)
    fours: list[Any] = Field(default_factory=list)
    fives: list[Any] = Field(default_factory=list)

    def categories(self) -> dict[int, list[Any]]:
        return {3: self.threes, 4: self.fours, 5: self.fives}

class VocabularyReport(BaseModel):
    duplicates: dict[int, list[str]] = Field(default_factory=dict)
    wrong_length: dict[int, list[str]] = Field(default_factory=dict)
    non_strings: dict[int, list[Any]] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not (self.duplicates or self.wrong_length or self.non_strings)

    def problem_count(self) -> int:
        groups = (self.duplicates, self.wrong_length, self.non_strings)
        return sum(len(entries) for group in groups for entries in group.values())

class RoundData(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_word: str                          # Word drawn from the vocabulary
    presented_word: str                     # Scrambled permutation shown to the player
    threes: frozenset[str] = frozenset()    # Correct 3-letter answers
    fours: frozenset[str] = frozenset()     # Correct 4-letter answers
    fives: frozenset[str] = frozenset()     # Correct 5-letter answers

    def answers_for(self, length: int) -> frozenset[str]:
        return {3: self.threes, 4: self.fours, 5: self.fives}.get(length, frozenset())

    @property
    def total_words(self) -> int:
        return len(self.threes) + len(self.fours) + len(self.fives)

class RecognitionState(BaseModel):
    recognized: dict[str, bool] = Field(default_factory=dict)  # answer -> entered?

    @classmethod
    def for_round(cls, round_data: RoundData) -> "RecognitionState":
        answers = round_data.threes | round_data.fours | round_data.fives
        return cls(recognized={word: False for word in answers})

    def is_recognized(self, word: str) -> bool:
        return self.recognized.get(word, False)

class SubmissionKind(str, Enum):
    SCORED = "scored"
    DUPLICATE = "duplicate"
    INVALID = "invalid"

class SubmissionResult(BaseModel):
    kind: SubmissionKind
    delta: int = 0
    word: str = ""

class RemainingCounts(BaseModel):
    threes: int = 0
    fours: int = 0
    fives: int = 0

    @property
    def all_zero(self) -> bool:
        return self.threes == 0 and self.fours == 0 and self.fives == 0

    @property
    def all_nonzero(self) -> bool:
        return self.threes > 0 and self.fours > 0 and self.fives > 0

class RoundOutcome(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"      # Every answer found
    PASSED = "passed"          # Timed out with at least one category finished
    GAME_OVER = "game_over"    # Timed out with no category finished

class PlayedRound(BaseModel):
    round: RoundData
    recognition: RecognitionState
    timestamp: datetime = Field(default_factory=datetime.now)

class GameSession(BaseModel):
    score: int = 0
    current_round: RoundData | None = None
    recognition: RecognitionState | None = None
    played: list[PlayedRound] = Field(default_factory=list)

    def reset(self):
        self.score = 0
        self.current_round = None
        self.recognition = None
        self.played = []
