import pytest

from medrefer.functional_types import (
    Error,
    Loading,
    Success,
    UnwrapError,
    error,
    loading,
    success,
)


def _explode(_value):
    raise AssertionError("must not be called")


@pytest.mark.parametrize("outcome", [success("v"), error("e"), loading()])
def test_exactly_one_variant_flag_is_set(outcome) -> None:
    flags = [outcome.is_success, outcome.is_error, outcome.is_loading]
    assert flags.count(True) == 1


def test_success_accessors() -> None:
    res = success("test data")
    assert isinstance(res, Success)
    assert res.value == "test data"
    assert res.error_message is None
    assert res.cause is None
    assert res.trace is None


def test_error_accessors_carry_diagnostics() -> None:
    cause = ValueError("boom")
    trace = object()
    res = error("error message", cause, trace)
    assert isinstance(res, Error)
    assert res.is_error
    assert res.value is None
    assert res.error_message == "error message"
    assert res.cause is cause
    assert res.trace is trace


def test_loading_accessors_are_empty() -> None:
    res = loading()
    assert isinstance(res, Loading)
    assert res.value is None
    assert res.error_message is None
    assert res.cause is None
    assert res.trace is None


def test_map_transforms_success() -> None:
    assert success(42).map(lambda x: x * 2) == success(84)


def test_map_skips_error_and_keeps_diagnostics() -> None:
    cause = KeyError("id")
    mapped = error("not found", cause).map(_explode)
    assert mapped.is_error
    assert mapped.error_message == "not found"
    assert mapped.cause is cause


def test_map_skips_loading() -> None:
    assert loading().map(_explode).is_loading


def test_passthrough_returns_the_same_instance() -> None:
    failed = error("not found")
    assert failed.map(_explode) is failed
    assert failed.and_then_sync(_explode) is failed
    assert loading().and_then_sync(_explode) is loading()


def test_map_propagates_exception_from_callback_on_success() -> None:
    with pytest.raises(ZeroDivisionError):
        success(1).map(lambda x: x / 0)


@pytest.mark.parametrize(
    ("outcome", "expected"),
    [(success(42), 84), (error("e"), 0), (loading(), 0)],
)
def test_map_or(outcome, expected) -> None:
    assert outcome.map_or(0, lambda x: x * 2) == expected


def test_map_or_else_computes_fallback_lazily() -> None:
    calls = []

    def fallback() -> int:
        calls.append(1)
        return 100

    assert success(42).map_or_else(fallback, lambda x: x * 2) == 84
    assert calls == []
    assert error("e").map_or_else(fallback, lambda x: x * 2) == 100
    assert loading().map_or_else(lambda: 200, lambda x: x * 2) == 200
    assert calls == [1]


def test_and_then_sync_chains_and_short_circuits() -> None:
    assert success(42).and_then_sync(lambda x: success(x * 2)) == success(84)
    assert success(42).and_then_sync(lambda _: error("nope")) == error("nope")
    assert error("error").and_then_sync(_explode).error_message == "error"
    assert loading().and_then_sync(_explode).is_loading


@pytest.mark.asyncio
async def test_and_then_chains_async_operations() -> None:
    async def double(x: int):
        return success(x * 2)

    assert await success(42).and_then(double) == success(84)


@pytest.mark.asyncio
async def test_and_then_short_circuits_without_calling_continuation() -> None:
    async def never(_):
        raise AssertionError("must not be awaited")

    chained = await error("error").and_then(never)
    assert chained.is_error
    assert chained.error_message == "error"
    assert (await loading().and_then(never)).is_loading


def test_unwrap_returns_success_value() -> None:
    assert success("v").unwrap() == "v"


def test_unwrap_raises_on_error_and_chains_cause() -> None:
    cause = ValueError("bad input")
    with pytest.raises(UnwrapError, match="bad input") as excinfo:
        error("bad input", cause).unwrap()
    assert excinfo.value.__cause__ is cause


def test_unwrap_raises_on_loading() -> None:
    with pytest.raises(UnwrapError, match="loading"):
        loading().unwrap()
    assert issubclass(UnwrapError, RuntimeError)


@pytest.mark.parametrize(
    ("outcome", "expected"),
    [(success("data"), "data"), (error("e"), "default"), (loading(), "default")],
)
def test_unwrap_or_and_unwrap_or_else(outcome, expected) -> None:
    assert outcome.unwrap_or("default") == expected
    assert outcome.unwrap_or_else(lambda: "default") == expected


def test_hooks_fire_only_for_matching_variant_and_return_self() -> None:
    seen = []
    for res in (success("test"), error("oops", "why"), loading()):
        returned = (
            res.on_success(lambda v: seen.append(("success", v)))
            .on_error(lambda msg, cause: seen.append(("error", msg, cause)))
            .on_loading(lambda: seen.append(("loading",)))
        )
        assert returned is res
    assert seen == [("success", "test"), ("error", "oops", "why"), ("loading",)]


def test_structural_equality_and_hashing() -> None:
    assert success("test") == success("test")
    assert hash(success("test")) == hash(success("test"))
    assert success("a") != success("b")
    assert error("e") == error("e")
    assert hash(error("e")) == hash(error("e"))
    assert error("e1") != error("e2")
    assert loading() == Loading()
    assert hash(loading()) == hash(Loading())


def test_equality_distinguishes_variants() -> None:
    assert success("e") != error("e")
    assert error("e") != loading()
    assert success(None) != loading()


def test_error_equality_ignores_diagnostics() -> None:
    assert error("e", ValueError("x")) == error("e", KeyError("y"), object())


def test_string_representation() -> None:
    assert str(success("x")) == "Success(x)"
    assert str(success([1, 2])) == "Success([1, 2])"
    assert str(error("e")) == "Error(e)"
    assert str(loading()) == "Loading()"


def test_variants_support_structural_pattern_matching() -> None:
    def describe(outcome) -> str:
        match outcome:
            case Success(value):
                return f"ok:{value}"
            case Error(message):
                return f"err:{message}"
            case Loading():
                return "pending"
        return "unreachable"

    assert describe(success(1)) == "ok:1"
    assert describe(error("bad")) == "err:bad"
    assert describe(loading()) == "pending"


def test_outcomes_are_immutable() -> None:
    res = success(1)
    with pytest.raises(AttributeError):
        res.value = 2  # type: ignore[misc]
