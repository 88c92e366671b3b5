"""
Validation errors raised while building an Automaton.

Closed taxonomy of five kinds. Each error carries its offending values as
attributes; the message is derived from them and is only a presentation.
"""


class ValidationError(ValueError):
    """Base class for every structural defect in a Configuration."""

    _fields: tuple = ()

    def __init__(self, *args) -> None:
        if len(args) != len(self._fields):
            raise TypeError(
                f"{type(self).__name__} expects {len(self._fields)} arguments, got {len(args)}"
            )
        for name, value in zip(self._fields, args):
            setattr(self, name, value)
        super().__init__(self._format())

    @property
    def kind(self) -> str:
        return type(self).__name__

    def payload(self) -> dict:
        """Structured fields of the error, keyed by attribute name."""
        return {name: getattr(self, name) for name in self._fields}

    def _format(self) -> str:
        return "invalid automaton configuration"

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return type(self) is type(other) and self.payload() == other.payload()

    def __hash__(self):
        return hash((self.kind, tuple(self.payload().items())))

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={value!r}" for name, value in self.payload().items())
        return f"{self.kind}({args})"

    def __reduce__(self):
        return (type(self), tuple(self.payload().values()))


class InvalidStartState(ValidationError):
    """Start state is not a member of the state set."""

    _fields = ("state",)

    def _format(self) -> str:
        return f'Start state "{self.state}" is not in the set of states'


class InvalidAcceptingState(ValidationError):
    """An accepting state is not a member of the state set."""

    _fields = ("state",)

    def _format(self) -> str:
        return f'Accepting state "{self.state}" is not in the set of states'


class MissingStateTransitions(ValidationError):
    """A state has no transition row at all."""

    _fields = ("state",)

    def _format(self) -> str:
        return f'State "{self.state}" has no transitions defined'


class MissingTransition(ValidationError):
    """A (state, symbol) pair has no target."""

    _fields = ("state", "symbol")

    def _format(self) -> str:
        return f"Missing transition for state \"{self.state}\" on symbol '{self.symbol}'"


class InvalidTransitionTarget(ValidationError):
    """A transition leads to a state outside the state set."""

    _fields = ("from_state", "symbol", "to_state")

    def _format(self) -> str:
        return (
            f"Transition from \"{self.from_state}\" on '{self.symbol}' "
            f'leads to unknown state "{self.to_state}"'
        )
