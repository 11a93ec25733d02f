import pytest
import structlog

from caesar_breaker.dictionary import Dictionary

# Enough English to cover the test messages, plus three short words
# ("q", "um", "ug") that turn "I me my" into a decoy decryption.
WORDS = """
a and beasts bloody enemies fire fountains from ground hands hear ho i
issuing me men mine minus moved my myself not of on pain peace pernicious
prince profaners purple quench rage rebellious sentence steel subjects that
the they this those throw to torture veins weapons what will with you your
q um ug
""".split()

# An excerpt from Romeo and Juliet (59 words).
ROMEO = (
    "Prince. Rebellious subjects, enemies to peace,\n"
    "    Profaners of this neighbour-stained steel-\n"
    "    Will they not hear? What, ho! you men, you beasts,\n"
    "    That quench the fire of your pernicious rage\n"
    "    With purple fountains issuing from your veins!\n"
    "    On pain of torture, from those bloody hands\n"
    "    Throw your mistempered weapons to the ground\n"
    "    And hear the sentence of your moved prince."
)


@pytest.fixture(scope="session")
def dictionary_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("dictionary") / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def dictionary(dictionary_path):
    return Dictionary.load(dictionary_path)


@pytest.fixture
def romeo():
    return ROMEO


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.reset_defaults()
