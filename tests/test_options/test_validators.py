import pytest

from optkit import CallbackError, IntOption, StrOption
from optkit.validators import int_range_validator, non_empty_validator, words_validator


def test_int_range_validator_accepts_valid_numbers():
    validator = int_range_validator(1, 10)
    for valid in [1, 5, 10]:
        validator(valid)


@pytest.mark.parametrize("invalid", [0, 11, -1])
def test_int_range_validator_rejects_invalid(invalid):
    validator = int_range_validator(1, 10)
    with pytest.raises(ValueError, match="between 1 and 10"):
        validator(invalid)


def test_words_validator_is_case_insensitive():
    validator = words_validator(["run", "debug"])
    validator("RUN")
    validator("debug")
    with pytest.raises(ValueError, match="Choices"):
        validator("dump")


def test_words_validator_custom_message():
    validator = words_validator(["a"], error_message="nope")
    with pytest.raises(ValueError, match="nope"):
        validator("b")


def test_non_empty_validator():
    validator = non_empty_validator()
    validator("x")
    with pytest.raises(ValueError):
        validator("   ")


def test_validator_as_option_callback():
    jobs = IntOption("-j", "--jobs", default=1, callback=int_range_validator(1, 64))
    jobs.apply(True, "8")
    assert jobs.value == 8
    with pytest.raises(CallbackError, match="between 1 and 64"):
        jobs.apply(True, "65")

    mode = StrOption("--mode", callback=words_validator(["run"]))
    with pytest.raises(CallbackError):
        mode.apply(True, "walk")
