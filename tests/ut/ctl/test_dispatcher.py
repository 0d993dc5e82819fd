import argparse

import pytest

from vaultctl.core.dispatcher import CommandDispatcher
from vaultctl.core.model import Message
from vaultctl.infra.format_renderer import JsonRenderer, YamlRenderer


@pytest.fixture
def dispatcher():
    return CommandDispatcher()


@pytest.mark.ut
def test_dispatch_calls_registered_command(dispatcher, config):
    @dispatcher.command("echo")
    def echo(config, namespace):
        return Message(type="ok", data={"value": namespace.value})

    msg = dispatcher.dispatch("echo", config=config, namespace=argparse.Namespace(value="x"))

    assert msg == Message(type="ok", data={"value": "x"})


@pytest.mark.ut
def test_dispatch_unknown_command(dispatcher, config):
    with pytest.raises(RuntimeError):
        dispatcher.dispatch("missing", config=config, namespace=argparse.Namespace())


@pytest.mark.ut
def test_command_registered_once(dispatcher):
    @dispatcher.command("echo")
    def first(config, namespace):
        return Message(type="ok", data={})

    with pytest.raises(RuntimeError):
        @dispatcher.command("echo")
        def second(config, namespace):
            return Message(type="ok", data={})


@pytest.mark.ut
def test_renderers():
    data = Message(type="ok", data={"value": "é"}).to_dict()

    assert JsonRenderer().render(data) == '{\n  "type": "ok",\n  "data": {\n    "value": "é"\n  }\n}'
    assert YamlRenderer().render(data) == "type: ok\ndata:\n  value: é\n"
