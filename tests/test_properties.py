"""Property-based tests for the parser using Hypothesis.

Arbitrary token streams (including malformed ones) must always produce
either a line or a ParseError; well-formed streams must reconstruct the
exact field values they encode.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fresa import (
    MAX_ARGS,
    Argument,
    ArgumentKind,
    Command,
    CommandType,
    ParseConfig,
    Parser,
    ProgramNumber,
    Span,
    Token,
    TokenKind,
    parse_config_context,
)
from fresa.errors import ParseError
from fresa.utils.numbers import UNSIGNED_MAX

literals = st.floats(min_value=0, allow_nan=False, allow_infinity=False)
letter_kinds = [kind for kind in TokenKind if kind is not TokenKind.NUMBER]

tokens = st.one_of(
    st.sampled_from(letter_kinds).map(Token.of),
    literals.map(lambda v: Token.of(TokenKind.NUMBER, v)),
)
token_lists = st.lists(tokens, max_size=40)

PRODUCTIONS = [
    "parse",
    "program_number",
    "number",
    "command",
    "command_name",
    "command_type",
    "line_number",
    "arg_kind",
    "arg",
    "args",
]


def signed(value: float) -> list[Token]:
    """Tokens for a signed number."""
    if value < 0:
        return [Token.of(TokenKind.MINUS), Token.of(TokenKind.NUMBER, -value)]
    return [Token.of(TokenKind.NUMBER, value)]


def command_tokens(command: Command) -> list[Token]:
    """Encode a command as the token stream the lexer would produce."""
    stream: list[Token] = []
    if command.line_number is not None:
        stream += [Token.of(TokenKind.N), *signed(float(command.line_number))]
    stream += [Token.of(TokenKind[command.command_type.name])]
    stream += signed(float(command.command_number))
    for argument in command.args:
        stream += [Token.of(TokenKind[argument.kind.name]), *signed(argument.value)]
    return stream


def outcome(result: object) -> tuple[str, str]:
    return type(result).__name__, str(result)


codes = st.integers(min_value=0, max_value=UNSIGNED_MAX)
arguments = st.builds(
    Argument,
    kind=st.sampled_from(ArgumentKind),
    value=st.floats(allow_nan=False, allow_infinity=False),
)
commands = st.builds(
    Command,
    span=st.just(Span.unknown()),
    command_type=st.sampled_from(CommandType),
    command_number=codes,
    line_number=st.none() | codes,
    args=st.lists(arguments, max_size=MAX_ARGS).map(tuple),
)


class TestNeverCrashes:
    """Every production either returns or raises ParseError."""

    @pytest.mark.parametrize("production", PRODUCTIONS)
    @pytest.mark.parametrize("strict", [False, True])
    @given(stream=token_lists)
    @settings(max_examples=100)
    def test_production(self, production: str, strict: bool, stream: list[Token]) -> None:
        with parse_config_context(ParseConfig(strict=strict)):
            parser = Parser(stream)
        try:
            getattr(parser, production)()
        except ParseError:
            pass

    @given(stream=token_lists)
    @settings(max_examples=300)
    def test_results_terminate(self, stream: list[Token]) -> None:
        results = list(Parser(stream).results())
        # Every result makes progress through the stream
        assert len(results) <= len(stream)
        for result in results:
            assert isinstance(result, (Command, ProgramNumber, ParseError))


class TestDeterminism:
    """No hidden state between parser instances."""

    @given(stream=token_lists)
    @settings(max_examples=200)
    def test_same_tokens_same_results(self, stream: list[Token]) -> None:
        first = [outcome(r) for r in Parser(stream).results()]
        second = [outcome(r) for r in Parser(stream).results()]
        assert first == second


class TestNumberLaws:
    """The signed number production."""

    @given(literals)
    @settings(max_examples=200)
    def test_negation(self, value: float) -> None:
        plain = Parser([Token.of(TokenKind.NUMBER, value)]).number()
        negated = Parser([Token.of(TokenKind.MINUS), Token.of(TokenKind.NUMBER, value)]).number()
        assert negated == -plain

    @given(literals)
    @settings(max_examples=100)
    def test_literal_value_preserved(self, value: float) -> None:
        assert Parser([Token.of(TokenKind.NUMBER, value)]).number() == value


class TestReconstruction:
    """Well-formed token streams reconstruct their encoded values."""

    @given(commands)
    @settings(max_examples=300)
    def test_command(self, command: Command) -> None:
        assert Parser(command_tokens(command)).parse() == command

    @given(codes)
    @settings(max_examples=100)
    def test_program_number(self, number: int) -> None:
        stream = [Token.of(TokenKind.O), Token.of(TokenKind.NUMBER, float(number))]
        assert Parser(stream).parse() == ProgramNumber(span=Span.unknown(), number=number)

    @given(st.lists(commands, max_size=10))
    @settings(max_examples=100)
    def test_command_sequence(self, sequence: list[Command]) -> None:
        stream = [token for command in sequence for token in command_tokens(command)]
        assert list(Parser(stream)) == sequence
