from pathlib import Path
import pytest
from wordcraze.game.models import Vocabulary
from wordcraze.words.bank import Dictionary, load_vocabulary

DATA_FILE = Path(__file__).parent.parent / "data" / "words_en.json"

@pytest.fixture(scope="session")
def vocabulary() -> Vocabulary:
    return load_vocabulary(str(DATA_FILE))

@pytest.fixture(scope="session")
def dictionary(vocabulary) -> Dictionary:
    return Dictionary.from_vocabulary(vocabulary)

@pytest.fixture
def small_vocabulary() -> Vocabulary:
    return Vocabulary(
        threes=["ale", "pea", "ape", "lap", "pal", "cat"],
        fours=["leap", "pale", "plea", "peal", "cake"],
        fives=["apple", "crane", "llama"]
    )
