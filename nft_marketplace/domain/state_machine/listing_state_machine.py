from nft_marketplace.domain.enums.listing_state import ListingState


# Mapping of valid transitions: from_state -> set of allowed to_states
VALID_TRANSITIONS: dict[ListingState, frozenset[ListingState]] = {
    ListingState.ACTIVE: frozenset({ListingState.SOLD}),
    # Terminal
    ListingState.SOLD: frozenset(),
}


class InvalidStateTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: ListingState, to_state: ListingState) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid transition from {from_state.value} to {to_state.value}. "
            f"Allowed transitions: {[s.value for s in VALID_TRANSITIONS.get(from_state, frozenset())]}"
        )


class ListingStateMachine:
    """
    Validates state transitions for marketplace listings.

    Stateless: call can_transition() or validate_transition() with explicit states.
    """

    def can_transition(self, from_state: ListingState, to_state: ListingState) -> bool:
        """Return True if transitioning from_state → to_state is permitted."""
        if from_state.is_terminal:
            return False
        return to_state in VALID_TRANSITIONS.get(from_state, frozenset())

    def validate_transition(self, from_state: ListingState, to_state: ListingState) -> None:
        """Raise InvalidStateTransitionError if the transition is not permitted."""
        if not self.can_transition(from_state, to_state):
            raise InvalidStateTransitionError(from_state, to_state)
