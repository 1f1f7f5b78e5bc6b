"""
Tests for Substitution.

The core claims:
    - Bindings are add-only: a variable is bound at most once
    - Copies are independent of the original
    - compose(s, t) applied to a term equals applying s then t
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fopl.core.errors import AlreadyBound, InvalidArgument, UnboundVariable
from fopl.core.substitution import Substitution
from fopl.core.terms import Variable, Constant, Function


X, Y, Z = Variable("X"), Variable("Y"), Variable("Z")
a, b = Constant("a"), Constant("b")


class TestBindings:
    def test_empty(self):
        sub = Substitution()
        assert len(sub) == 0
        assert not sub.is_bound(X)

    def test_add_and_lookup(self):
        sub = Substitution().add(X, a)
        assert sub.is_bound(X)
        assert X in sub
        assert sub.get_binding(X) == a

    def test_unbound_lookup_raises(self):
        with pytest.raises(UnboundVariable):
            Substitution().get_binding(X)

    def test_unbound_variable_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            Substitution().get_binding(X)

    def test_rebinding_raises(self):
        sub = Substitution().add(X, a)
        with pytest.raises(AlreadyBound):
            sub.add(X, b)
        assert sub.get_binding(X) == a

    def test_self_binding_rejected(self):
        with pytest.raises(InvalidArgument):
            Substitution().add(X, X)

    def test_indirect_cycle_rejected(self):
        sub = Substitution().add(X, Y)
        with pytest.raises(InvalidArgument):
            sub.add(Y, X)

    def test_only_variables_can_be_bound(self):
        with pytest.raises(InvalidArgument):
            Substitution().add(a, b)

    def test_only_terms_can_be_bound_to(self):
        sub = Substitution()
        with pytest.raises(InvalidArgument):
            sub.add(X, "alice")
        assert not sub.is_bound(X)

    def test_insertion_order_kept(self):
        sub = Substitution().add(Y, a).add(X, b)
        assert list(sub) == [Y, X]
        assert str(sub) == "{?Y -> a, ?X -> b}"


class TestCopy:
    def test_copy_is_independent(self):
        original = Substitution().add(X, a)
        copied = Substitution(original)
        copied.add(Y, b)
        assert not original.is_bound(Y)
        assert copied.get_binding(X) == a

    def test_copy_method(self):
        original = Substitution().add(X, a)
        assert original.copy() == original
        assert original.copy() is not original


class TestWalk:
    def test_walks_chain(self):
        sub = Substitution().add(X, Y).add(Y, Function("f", (Z,)))
        assert sub.walk(X) == Function("f", (Z,))

    def test_stops_at_unbound_variable(self):
        sub = Substitution().add(X, Y)
        assert sub.walk(X) == Y

    def test_non_variable_returned_as_is(self):
        assert Substitution().walk(a) == a


class TestCompose:
    def test_applies_second_to_first(self):
        s = Substitution().add(X, Function("f", (Y,)))
        t = Substitution().add(Y, a)
        composed = s.compose(t)
        assert composed.get_binding(X) == Function("f", (a,))
        assert composed.get_binding(Y) == a

    def test_first_binding_wins(self):
        s = Substitution().add(X, a)
        t = Substitution().add(X, b)
        assert s.compose(t).get_binding(X) == a

    def test_identity_bindings_dropped(self):
        s = Substitution().add(X, Y)
        t = Substitution().add(Y, X)
        composed = s.compose(t)
        assert not composed.is_bound(X)
        assert composed.get_binding(Y) == X

    @given(st.sampled_from([a, b, Y, Function("g", (Z,))]),
           st.sampled_from([a, b, Function("h", (Y,))]))
    def test_composition_matches_sequential_application(self, x_term, z_term):
        s = Substitution().add(X, x_term)
        t = Substitution().add(Z, z_term)
        term = Function("f", (X, Y, Z))
        assert s.compose(t).apply(term) == t.apply(s.apply(term))
