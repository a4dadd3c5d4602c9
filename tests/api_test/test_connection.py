# tests/api_test/test_connection.py
"""
Tests for the Connection model (blockly_api/models/connection.py).

Covers:
    • Type compatibility (previous/next, input/output)
    • Type checks
    • Self / already-connected rejection
    • connect / disconnect bookkeeping
"""
import pytest

from blockly_api.exceptions import InvalidArgumentError
from blockly_api.models.block import Block
from blockly_api.models.connection import Connection, ConnectionType


def _statement_block(block_id: str) -> Block:
    return Block("stmt", block_id,
                 previous_connection=Connection(ConnectionType.PREVIOUS),
                 next_connection=Connection(ConnectionType.NEXT))


def _value_block(block_id: str, check=None) -> Block:
    return Block("value", block_id,
                 output_connection=Connection(ConnectionType.OUTPUT, check))


# ═════════════════════════════════════════════════════════════════
#  COMPATIBILITY
# ═════════════════════════════════════════════════════════════════

class TestCanConnect:

    def test_next_accepts_previous(self):
        a, b = _statement_block("a"), _statement_block("b")
        assert a.get_next_connection().can_connect(b.get_previous_connection())
        assert b.get_previous_connection().can_connect(a.get_next_connection())

    def test_input_accepts_output(self):
        target = Connection(ConnectionType.INPUT)
        value = _value_block("v")
        assert target.can_connect(value.get_output_connection())

    def test_same_role_rejected(self):
        a, b = _statement_block("a"), _statement_block("b")
        assert not a.get_next_connection().can_connect(b.get_next_connection())

    def test_mismatched_roles_rejected(self):
        a = _statement_block("a")
        value = _value_block("v")
        assert not a.get_next_connection().can_connect(value.get_output_connection())

    def test_none_rejected(self):
        assert not Connection(ConnectionType.NEXT).can_connect(None)

    def test_same_block_rejected(self):
        a = _statement_block("a")
        assert not a.get_next_connection().can_connect(a.get_previous_connection())

    def test_connected_connection_rejected(self):
        a, b, c = _statement_block("a"), _statement_block("b"), _statement_block("c")
        a.get_next_connection().connect(b.get_previous_connection())
        assert not c.get_next_connection().can_connect(b.get_previous_connection())

    def test_checks_must_overlap(self):
        number_input = Connection(ConnectionType.INPUT, ["Number"])
        assert number_input.can_connect(_value_block("n", ["Number"]).get_output_connection())
        assert not number_input.can_connect(_value_block("s", ["String"]).get_output_connection())

    def test_missing_check_accepts_anything(self):
        untyped_input = Connection(ConnectionType.INPUT)
        assert untyped_input.can_connect(_value_block("s", ["String"]).get_output_connection())


# ═════════════════════════════════════════════════════════════════
#  CONNECT / DISCONNECT
# ═════════════════════════════════════════════════════════════════

class TestConnect:

    def test_connect_pairs_both_sides(self):
        a, b = _statement_block("a"), _statement_block("b")
        a.get_next_connection().connect(b.get_previous_connection())
        assert a.get_next_connection().target_connection is b.get_previous_connection()
        assert b.get_previous_connection().target_connection is a.get_next_connection()
        assert a.get_next_block() is b
        assert b.get_previous_block() is a

    def test_connect_incompatible_raises(self):
        a, b = _statement_block("a"), _statement_block("b")
        with pytest.raises(InvalidArgumentError):
            a.get_next_connection().connect(b.get_next_connection())
        assert not a.get_next_connection().is_connected()

    def test_disconnect_returns_partner(self):
        a, b = _statement_block("a"), _statement_block("b")
        a.get_next_connection().connect(b.get_previous_connection())
        partner = a.get_next_connection().disconnect()
        assert partner is b.get_previous_connection()
        assert not a.get_next_connection().is_connected()
        assert b.get_previous_block() is None

    def test_disconnect_unconnected_is_noop(self):
        assert Connection(ConnectionType.NEXT).disconnect() is None

    def test_get_block_back_reference(self):
        a = _statement_block("a")
        assert a.get_previous_connection().get_block() is a
        assert a.get_previous_connection().get_type() == ConnectionType.PREVIOUS
