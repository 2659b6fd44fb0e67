"""Unit tests for the listing state machine."""
import pytest

from nft_marketplace.domain.enums.listing_state import ListingState
from nft_marketplace.domain.state_machine.listing_state_machine import (
    InvalidStateTransitionError,
    ListingStateMachine,
)


@pytest.fixture()
def sm() -> ListingStateMachine:
    return ListingStateMachine()


class TestTransitions:
    def test_active_to_sold(self, sm: ListingStateMachine) -> None:
        assert sm.can_transition(ListingState.ACTIVE, ListingState.SOLD) is True

    def test_active_to_active_invalid(self, sm: ListingStateMachine) -> None:
        assert sm.can_transition(ListingState.ACTIVE, ListingState.ACTIVE) is False

    def test_sold_is_terminal(self, sm: ListingStateMachine) -> None:
        assert ListingState.SOLD.is_terminal
        for state in ListingState:
            assert sm.can_transition(ListingState.SOLD, state) is False

    def test_active_is_not_terminal(self) -> None:
        assert not ListingState.ACTIVE.is_terminal


class TestValidateTransition:
    def test_valid_transition_does_not_raise(self, sm: ListingStateMachine) -> None:
        sm.validate_transition(ListingState.ACTIVE, ListingState.SOLD)  # no exception

    def test_sold_back_to_active_raises(self, sm: ListingStateMachine) -> None:
        with pytest.raises(InvalidStateTransitionError) as exc_info:
            sm.validate_transition(ListingState.SOLD, ListingState.ACTIVE)
        assert "SOLD" in str(exc_info.value)
        assert "ACTIVE" in str(exc_info.value)
        assert exc_info.value.from_state == ListingState.SOLD
