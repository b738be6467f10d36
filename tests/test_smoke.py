def test_imports():
    import langtour  # noqa: F401
    import langtour.cli as cli  # noqa: F401
    import langtour.core.registry as registry  # noqa: F401
    import langtour.core.runner as runner  # noqa: F401
    import langtour.experiments.run_from_config as rfc  # noqa: F401


def test_registry_order():
    from langtour.core import registry

    assert registry.names() == [
        "values",
        "variables",
        "constants",
        "for",
        "if-else",
        "switch",
        "arrays",
        "slices",
        "maps",
        "range",
        "functions",
        "variadic-functions",
        "closures",
        "recursion",
        "pointers",
        "structs",
    ]


def test_every_demo_runs_and_is_idempotent(capsys):
    from langtour.core import registry

    for name in registry.names():
        demo = registry.get(name)
        if name == "switch":
            continue  # reads the clock; covered in test_demos
        demo()
        first = capsys.readouterr().out
        demo()
        second = capsys.readouterr().out
        assert first
        assert first == second, name


def test_demos_are_order_independent(capsys):
    from datetime import datetime

    from langtour.core import registry
    from langtour.demos import flow

    def call(name):
        if name == "switch":
            flow.demo_switch(now=datetime(2025, 10, 18, 9, 30))
        else:
            registry.get(name)()
        return capsys.readouterr().out

    forward = {name: call(name) for name in registry.names()}
    backward = {name: call(name) for name in reversed(registry.names())}
    assert backward == forward
