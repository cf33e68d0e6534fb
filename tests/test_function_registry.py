import pytest

from adapters.function_provider import FunctionProviderRegistry, MathFunctionProvider


class _Provider:
    def __init__(self, name, answers, kind="custom"):
        self.name = name
        self.kind = kind
        self._answers = answers

    def try_apply(self, name, value):
        return self._answers.get(name)


class _BrokenProvider:
    name = "broken"

    def try_apply(self, name, value):
        raise RuntimeError("plugin crashed")


def test_registry_queries_providers_in_registration_order():
    registry = FunctionProviderRegistry([
        _Provider("a", {"sin": 1.0}),
        _Provider("b", {"sin": 2.0, "cos": 3.0}),
    ])

    assert registry.apply("sin", 0.0) == 1.0
    assert registry.apply("cos", 0.0) == 3.0
    assert registry.apply("tg", 0.0) is None


def test_registry_skips_provider_that_raises():
    registry = FunctionProviderRegistry([_BrokenProvider(), _Provider("ok", {"ln": 0.0})])

    assert registry.apply("ln", 1.0) == 0.0


def test_registry_rejects_duplicate_names():
    registry = FunctionProviderRegistry([_Provider("a", {})])

    with pytest.raises(ValueError):
        registry.register(_Provider("a", {}))


def test_registry_unregister():
    registry = FunctionProviderRegistry([_Provider("a", {"sin": 1.0}), _Provider("b", {"sin": 2.0})])

    removed = registry.unregister("a")

    assert removed.name == "a"
    assert len(registry) == 1
    assert registry.apply("sin", 0.0) == 2.0
    with pytest.raises(KeyError):
        registry.unregister("a")


def test_registry_describe_lists_providers():
    registry = FunctionProviderRegistry([_Provider("custom", {}), MathFunctionProvider()])

    infos = registry.describe()

    assert [(i.name, i.kind) for i in infos] == [("custom", "custom"), ("math", "builtin")]
    assert [p.name for p in registry] == ["custom", "math"]


def test_registry_membership_is_by_provider_name():
    registry = FunctionProviderRegistry([_Provider("a", {})])

    assert "a" in registry
    assert "b" not in registry
