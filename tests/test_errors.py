import pytest

from argtree import (
    ConversionError,
    DefaultGenerationError,
    DuplicateOption,
    InternalLogicError,
    InternalLogicErrorKind,
    InvalidConfigKind,
    InvalidConfiguration,
    InvalidNumber,
    MissingOptionValue,
    NumberErrorReason,
    ParseFailure,
    RequiredOption,
    ShowHelp,
    UnknownError,
    UnknownOption,
    render_error,
)
from argtree.errors import (
    PARSE_ERROR_TYPES,
    is_configuration_error,
    is_parse_error,
    is_user_error,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (UnknownError(), "unknown error"),
        (UnknownOption("--foo"), "unknown option: arg='--foo'"),
        (DuplicateOption("--count"), "duplicate option: name='--count'"),
        (MissingOptionValue("--name"), "missing value for option: name='--name'"),
        (RequiredOption("--x"), "missing required option: name='--x'"),
        (
            ConversionError("--n", "abc"),
            "value parser failed: name='--n' arg='abc'",
        ),
        (
            ConversionError("--n", "abc", "not even"),
            "value parser failed: name='--n' arg='abc': not even",
        ),
        (
            InvalidNumber("--n", "1e999", NumberErrorReason.RESULT_OUT_OF_RANGE),
            "invalid number: option='--n' arg='1e999' reason='result_out_of_range'",
        ),
        (
            InvalidConfiguration("--v", InvalidConfigKind.EMPTY_DEFAULT),
            "invalid configuration: name='--v' kind='EmptyDefault'",
        ),
        (
            InternalLogicError("--v", InternalLogicErrorKind.INVALID_FUNCTION_RETURN_TYPE),
            "internal logic error: name='--v' kind='InvalidFunctionReturnType'",
        ),
        (
            DefaultGenerationError("--when"),
            "failed to generate default value: name='--when'",
        ),
        (ShowHelp("Usage: cmd [OPTIONS]\n"), "Usage: cmd [OPTIONS]\n"),
    ],
)
def test_render_error(error, message):
    assert render_error(error) == message
    assert str(error) == message


def test_render_error_rejects_foreign_values():
    with pytest.raises(TypeError):
        render_error(ValueError("nope"))
    with pytest.raises(TypeError):
        render_error("unknown option")


def test_every_variant_is_classified_once():
    samples = [
        UnknownError(),
        InternalLogicError("--a", InternalLogicErrorKind.INVALID_FUNCTION_RETURN_TYPE),
        UnknownOption("x"),
        ShowHelp(""),
        DuplicateOption("--a"),
        MissingOptionValue("--a"),
        ConversionError("--a", "x"),
        InvalidNumber("--a", "x", NumberErrorReason.INVALID_ARGUMENT),
        RequiredOption("--a"),
        InvalidConfiguration("--a", InvalidConfigKind.EMPTY_PARSER),
        DefaultGenerationError("--a"),
    ]
    assert {type(sample) for sample in samples} == set(PARSE_ERROR_TYPES)
    for sample in samples:
        assert is_parse_error(sample)
        assert not (is_user_error(sample) and is_configuration_error(sample))


def test_classification():
    assert is_user_error(UnknownOption("x"))
    assert is_user_error(RequiredOption("--x"))
    assert not is_user_error(ShowHelp(""))
    assert is_configuration_error(InvalidConfiguration("--a", InvalidConfigKind.EMPTY_PARSER))
    assert is_configuration_error(DefaultGenerationError("--a"))
    assert not is_configuration_error(UnknownError())
    assert not is_parse_error(None)


def test_errors_compare_by_value():
    assert DuplicateOption("--a") == DuplicateOption("--a")
    assert DuplicateOption("--a") != DuplicateOption("--b")
    assert DuplicateOption("--a") != RequiredOption("--a")
    assert len({UnknownOption("x"), UnknownOption("x")}) == 1


def test_parse_failure_carries_error():
    failure = ParseFailure(RequiredOption("--x"))
    assert failure.error == RequiredOption("--x")
    assert str(failure) == "missing required option: name='--x'"


def test_parse_failure_defaults_to_unknown_error():
    assert ParseFailure().error == UnknownError()
