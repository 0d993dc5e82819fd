import math

import pytest

from vaultcodec.core.errors import EncodingError
from vaultcodec.core.marshal import marshal, unmarshal


@pytest.mark.ut
def test_marshal_is_compact_and_keeps_unicode():
    value = {"a": [1, 2.5, True, None, "é"], "b": {"c": "d"}}
    assert marshal(value) == '{"a":[1,2.5,true,null,"é"],"b":{"c":"d"}}'


@pytest.mark.ut
def test_unmarshal_parses_structured_value():
    assert unmarshal('{"a":[1,true,null],"b":"x"}') == {"a": [1, True, None], "b": "x"}


@pytest.mark.ut
@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_marshal_rejects_non_finite_numbers(value):
    with pytest.raises(EncodingError):
        marshal({"n": value})


@pytest.mark.ut
def test_marshal_rejects_cycles():
    value: dict = {}
    value["self"] = value
    with pytest.raises(EncodingError):
        marshal(value)


@pytest.mark.ut
def test_marshal_rejects_unrepresentable_types():
    with pytest.raises(EncodingError) as info:
        marshal({"raw": b"bytes"})
    assert isinstance(info.value.__cause__, TypeError)


@pytest.mark.ut
@pytest.mark.parametrize("text", ["{", "", "{'a': 1}", "NaN", '{"n": Infinity}'])
def test_unmarshal_rejects_malformed(text):
    with pytest.raises(EncodingError):
        unmarshal(text)


@pytest.mark.ut
def test_unmarshal_rejects_non_text():
    with pytest.raises(EncodingError):
        unmarshal(None)  # type: ignore[arg-type]
