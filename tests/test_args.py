import base64

import pytest

from dtail.args import Args, deserialize_options
from dtail.lcontext import LContext


def test_empty_options_serialize_to_empty_string():
    assert Args().serialize_options() == ""


def test_serialize_quiet_only():
    assert Args(quiet=True).serialize_options() == "quiet=true"


def test_round_trip():
    args = Args(
        quiet=True,
        plain=True,
        serverless=True,
        lcontext=LContext(after_context=3, before_context=2, max_count=5),
    )
    options, ltx = deserialize_options(args.serialize_options().split(":"))
    assert options == {"quiet": "true", "plain": "true", "serverless": "true"}
    assert ltx == args.lcontext


def test_base64_value_is_decoded():
    encoded = base64.b64encode(b"hello=world").decode()
    options, _ = deserialize_options([f"greeting=base64%{encoded}"])
    assert options == {"greeting": "hello=world"}


def test_value_may_contain_equals():
    options, _ = deserialize_options(["a=b=c"])
    assert options == {"a": "b=c"}


def test_missing_equals_raises():
    with pytest.raises(ValueError):
        deserialize_options(["novalue"])


def test_bad_integer_raises():
    with pytest.raises(ValueError):
        deserialize_options(["max=lots"])


def test_bad_base64_raises():
    with pytest.raises(ValueError):
        deserialize_options(["x=base64%!!!"])


def test_str_format():
    text = str(Args(quiet=True, what="file.log", arguments=["a", "b"]))
    assert text.startswith("Args(Arguments:[a b],ConfigFile:,")
    assert "Quiet:true" in text
    assert "NoColor:false" in text
    assert text.endswith("What:file.log)")