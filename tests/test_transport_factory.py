"""
Tests for the transport factory.

Validates:
- Each token maps to its transport and travel message
- Case-insensitive, exact-match key handling
- Explicit failure for unknown keys
- Fresh instances on every call
"""

import pytest

from factory_patterns.selection import UnknownSelectionKeyError
from factory_patterns.transport import (
    Boat,
    Car,
    Plane,
    Transport,
    TransportType,
    UnknownTransportError,
    available_transports,
    create_transport,
)


class TestCreateTransport:
    """Tests for create_transport."""

    @pytest.mark.parametrize(
        "key, cls, message",
        [
            ("CAR", Car, "Traveling by car!"),
            ("BOAT", Boat, "Traveling by boat!"),
            ("PLANE", Plane, "Traveling by plane!"),
        ],
    )
    def test_known_tokens(self, trace, key, cls, message):
        """Test each token builds its transport and emits its message."""
        transport = create_transport(key, trace=trace)

        assert isinstance(transport, cls)
        assert isinstance(transport, Transport)

        transport.travel()
        assert trace.messages == [message]

    def test_enum_member_key(self, trace):
        """Test enum members are accepted directly."""
        transport = create_transport(TransportType.BOAT, trace=trace)
        assert isinstance(transport, Boat)

    @pytest.mark.parametrize("key", ["car", "Car", "  plane ", "bOaT"])
    def test_case_insensitive(self, key):
        """Test tokens match regardless of case and surrounding whitespace."""
        assert isinstance(create_transport(key), Transport)

    @pytest.mark.parametrize("key", ["SUBMARINE", "", "ca", "cars", "bus"])
    def test_unknown_key_raises(self, key):
        """Test unknown tokens raise instead of returning an object."""
        with pytest.raises(UnknownTransportError) as excinfo:
            create_transport(key)

        assert excinfo.value.key == key
        assert excinfo.value.available == ("boat", "car", "plane")

    @pytest.mark.parametrize("key", [None, 0, TransportType])
    def test_non_string_key_raises(self, key):
        """Test keys that are neither strings nor members are rejected."""
        with pytest.raises(UnknownSelectionKeyError):
            create_transport(key)

    def test_error_message_lists_choices(self):
        """Test the error tells the caller what is accepted."""
        with pytest.raises(UnknownTransportError, match="boat, car, plane"):
            create_transport("SUBMARINE")

    def test_fresh_instance_each_call(self, trace):
        """Test the factory never hands out the same object twice."""
        first = create_transport("car", trace=trace)
        second = create_transport("car", trace=trace)

        assert first is not second
        first.travel()
        second.travel()
        assert trace.messages == ["Traveling by car!", "Traveling by car!"]

    def test_default_trace_writes_stdout(self, capsys):
        """Test output goes to stdout when no sink is given."""
        create_transport("plane").travel()
        assert capsys.readouterr().out == "Traveling by plane!\n"


def test_available_transports():
    """Test registered names are sorted lowercase tokens."""
    assert available_transports() == ("boat", "car", "plane")


def test_transport_contract_is_abstract(trace):
    """Test the contract provides no default behavior."""
    with pytest.raises(TypeError):
        Transport(trace)


@pytest.mark.parametrize("cls", [Car, Boat, Plane, TransportType])
def test_public_classes_documented(cls):
    """Test every public transport class carries a docstring."""
    assert cls.__doc__ and cls.__doc__.strip()
