from typing import Iterable, Mapping
from wordcraze.game.models import (
    RecognitionState,
    RemainingCounts,
    RoundData,
    RoundOutcome,
    SubmissionKind,
    SubmissionResult
)
from wordcraze.words.bank import Dictionary

DEFAULT_POINTS = {3: 30, 4: 40, 5: 50}

def classify(candidates: Iterable[str], dictionary: Dictionary, length: int) -> list[str]:
    """
    Keeps the candidates that are `length`-letter dictionary words, each once.
    """
    correct = []
    for candidate in candidates:
        if candidate in correct:
            continue
        if dictionary.contains_exact(candidate, length):
            correct.append(candidate)
    return correct

def submit(
    round_data: RoundData,
    recognition: RecognitionState,
    word: str,
    points: Mapping[int, int] = DEFAULT_POINTS
) -> SubmissionResult:
    """
    Scores a player's word against the round and marks it as recognized.
    """
    word = (word or "").strip().lower()
    answers = round_data.answers_for(len(word))

    if word not in answers:
        return SubmissionResult(kind=SubmissionKind.INVALID, word=word)
    if recognition.is_recognized(word):
        return SubmissionResult(kind=SubmissionKind.DUPLICATE, word=word)

    recognition.recognized[word] = True
    return SubmissionResult(
        kind=SubmissionKind.SCORED,
        delta=points.get(len(word), 0),
        word=word
    )

def remaining_counts(round_data: RoundData, recognition: RecognitionState) -> RemainingCounts:
    def unrecognized(answers):
        return sum(1 for w in answers if not recognition.is_recognized(w))

    return RemainingCounts(
        threes=unrecognized(round_data.threes),
        fours=unrecognized(round_data.fours),
        fives=unrecognized(round_data.fives)
    )

def round_outcome(counts: RemainingCounts, timed_out: bool = False) -> RoundOutcome:
    """
    A round ends when every answer is found or the timer runs out. Running out
    of time is only fatal when no category at all was finished.
    """
    if counts.all_zero:
        return RoundOutcome.COMPLETE
    if not timed_out:
        return RoundOutcome.IN_PROGRESS
    if counts.all_nonzero:
        return RoundOutcome.GAME_OVER
    return RoundOutcome.PASSED
