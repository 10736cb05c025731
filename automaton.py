import logging
from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum
from itertools import product
from typing_extensions import *

from graphviz import Digraph

logger = logging.getLogger(__name__)

EPSILON = "ε"
EMPTY_SET = "∅"

Symbol = Hashable
State = int
Transition = Tuple[State, Optional[Symbol], State]


class AutomatonError(ValueError):
    """Base class for every error raised by this library."""


class MalformedAutomatonError(AutomatonError):
    """The pieces given to the constructor do not form a valid automaton."""


class PreconditionError(AutomatonError):
    """An operation was given an automaton it is not defined for."""


class AlphabetMismatchError(AutomatonError):
    """A binary operation was given automata over different alphabets."""

    def __init__(self, operation: str, left: FrozenSet, right: FrozenSet):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"{operation} requires equal alphabets, got "
            f"{_format_symbols(left)} and {_format_symbols(right)}"
        )


class AutomatonType(Enum):
    DFA = 1
    NFA = 2
    EPSILON_NFA = 3


def _format_symbols(symbols) -> str:
    return "{" + ", ".join(sorted(repr(s) for s in symbols)) + "}"


def _check_alphabets(operation: str, a: "Automaton", b: "Automaton"):
    if a.alphabet != b.alphabet:
        raise AlphabetMismatchError(operation, a.alphabet, b.alphabet)


@dataclass(frozen=True)
class Automaton:
    """
    Finite word automaton over an explicit alphabet.

    States are the integers 0..n-1, local to this instance. A transition is a
    (source, symbol, target) triple; symbol None is an epsilon transition.
    The same class holds DFAs and NFAs: `type` and `is_deterministic` are
    computed from the structure, never declared.

    Instances are immutable and every operation returns a new automaton.
    """

    alphabet: FrozenSet[Symbol] = field(default_factory=frozenset)
    states: FrozenSet[State] = field(default_factory=frozenset)
    start_states: FrozenSet[State] = field(default_factory=frozenset)
    accepting_states: FrozenSet[State] = field(default_factory=frozenset)
    transition_relation: FrozenSet[Transition] = field(default_factory=frozenset)

    _transitions: Dict[Tuple[State, Optional[Symbol]], FrozenSet[State]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self):
        """Freeze the inputs and validate the structure."""
        for name in (
            "alphabet",
            "states",
            "start_states",
            "accepting_states",
            "transition_relation",
        ):
            object.__setattr__(self, name, frozenset(getattr(self, name)))

        if None in self.alphabet:
            raise MalformedAutomatonError(
                "None is reserved for epsilon transitions and cannot be a symbol"
            )

        if self.states != frozenset(range(len(self.states))):
            raise MalformedAutomatonError(
                f"states must be numbered 0..{len(self.states) - 1}, "
                f"got {sorted(self.states, key=repr)}"
            )

        if not self.start_states <= self.states:
            raise MalformedAutomatonError(
                f"start states {sorted(self.start_states - self.states, key=repr)} "
                "are not in the state set"
            )

        if not self.accepting_states <= self.states:
            raise MalformedAutomatonError(
                f"accepting states {sorted(self.accepting_states - self.states, key=repr)} "
                "are not in the state set"
            )

        result = defaultdict(set)
        for transition in self.transition_relation:
            if len(transition) != 3:
                raise MalformedAutomatonError(
                    f"transition {transition!r} is not a (source, symbol, target) triple"
                )
            src, sym, tgt = transition
            if src not in self.states or tgt not in self.states:
                raise MalformedAutomatonError(
                    f"transition {transition!r} leaves the state set"
                )
            if sym is not None and sym not in self.alphabet:
                raise MalformedAutomatonError(
                    f"transition {transition!r} uses symbol {sym!r} "
                    "outside the alphabet"
                )
            result[(src, sym)].add(tgt)

        object.__setattr__(
            self, "_transitions", {k: frozenset(v) for k, v in result.items()}
        )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def build(
        cls,
        alphabet: Iterable[Symbol],
        size: int,
        start_states: Iterable[State],
        accepting_states: Iterable[State],
        transitions: Iterable[Transition] = (),
    ) -> "Automaton":
        """Build an automaton with states 0..size-1."""
        return cls(
            alphabet=frozenset(alphabet),
            states=frozenset(range(size)),
            start_states=frozenset(start_states),
            accepting_states=frozenset(accepting_states),
            transition_relation=frozenset(transitions),
        )

    @classmethod
    def empty(cls, alphabet: Iterable[Symbol]) -> "Automaton":
        """Deterministic automaton accepting no word at all."""
        return cls.build(alphabet, 1, {0}, set())

    @classmethod
    def empty_word(cls, alphabet: Iterable[Symbol]) -> "Automaton":
        """Deterministic automaton accepting only the empty word."""
        return cls.build(alphabet, 1, {0}, {0})

    @classmethod
    def symbol(cls, alphabet: Iterable[Symbol], symbol: Symbol) -> "Automaton":
        """Deterministic automaton accepting the one-symbol word `symbol`."""
        return cls.word(alphabet, [symbol])

    @classmethod
    def word(cls, alphabet: Iterable[Symbol], word: Iterable[Symbol]) -> "Automaton":
        """Deterministic automaton accepting exactly `word`."""
        word = list(word)
        return cls.build(
            alphabet,
            len(word) + 1,
            {0},
            {len(word)},
            {(i, a, i + 1) for i, a in enumerate(word)},
        )

    @classmethod
    def full(cls, alphabet: Iterable[Symbol]) -> "Automaton":
        """Complete deterministic automaton accepting every word."""
        alphabet = frozenset(alphabet)
        return cls.build(alphabet, 1, {0}, {0}, {(0, a, 0) for a in alphabet})

    @classmethod
    def length(cls, alphabet: Iterable[Symbol], n: int) -> "Automaton":
        """Deterministic automaton accepting all words of length `n`."""
        if n < 0:
            raise ValueError(f"word length must be non-negative, got {n}")
        alphabet = frozenset(alphabet)
        return cls.build(
            alphabet,
            n + 1,
            {0},
            {n},
            {(i, a, i + 1) for i in range(n) for a in alphabet},
        )

    def with_alphabet(self, symbols: Iterable[Symbol]) -> "Automaton":
        """
        Same automaton over the alphabet extended by `symbols`.

        The new symbols have no transitions, so the language does not change.
        Use this to line up alphabets before a binary operation.
        """
        return Automaton(
            alphabet=self.alphabet | frozenset(symbols),
            states=self.states,
            start_states=self.start_states,
            accepting_states=self.accepting_states,
            transition_relation=self.transition_relation,
        )

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.states)

    @property
    def transitions(self) -> Dict[Tuple[State, Optional[Symbol]], FrozenSet[State]]:
        """(state, symbol) -> target states; symbol None for epsilon."""
        return dict(self._transitions)

    def targets(self, state: State, symbol: Optional[Symbol]) -> FrozenSet[State]:
        return self._transitions.get((state, symbol), frozenset())

    def _sorted_alphabet(self) -> List[Symbol]:
        return sorted(self.alphabet)

    def _has_epsilon(self) -> bool:
        return any(sym is None for _, sym, _ in self.transition_relation)

    def epsilon_closure(self, states: Iterable[State]) -> FrozenSet[State]:
        """All states reachable from `states` through epsilon transitions."""
        closure = set(states)
        stack = list(closure)
        while stack:
            s = stack.pop()
            for next_state in self.targets(s, None):
                if next_state not in closure:
                    closure.add(next_state)
                    stack.append(next_state)
        return frozenset(closure)

    def _reachable(self, seeds: Iterable[State], reverse: bool = False) -> Set[State]:
        """States reachable from `seeds`, epsilon edges counted as ordinary edges."""
        successors = defaultdict(set)
        for src, _, tgt in self.transition_relation:
            if reverse:
                successors[tgt].add(src)
            else:
                successors[src].add(tgt)

        seen = set(seeds)
        queue = deque(seen)
        while queue:
            state = queue.popleft()
            for next_state in successors[state]:
                if next_state not in seen:
                    seen.add(next_state)
                    queue.append(next_state)
        return seen

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def is_deterministic(self) -> bool:
        """One start state, no epsilon transitions, at most one target per pair."""
        if len(self.start_states) != 1:
            return False
        return all(
            sym is not None and len(targets) <= 1
            for (_, sym), targets in self._transitions.items()
        )

    @property
    def is_complete(self) -> bool:
        """Every (state, symbol) pair has exactly one target."""
        if self._has_epsilon():
            return False
        return all(
            len(self.targets(state, symbol)) == 1
            for state in self.states
            for symbol in self.alphabet
        )

    @property
    def type(self) -> AutomatonType:
        if self.is_deterministic:
            return AutomatonType.DFA
        if self._has_epsilon():
            return AutomatonType.EPSILON_NFA
        return AutomatonType.NFA

    @property
    def is_accessible(self) -> bool:
        return len(self._reachable(self.start_states)) == self.size

    @property
    def is_coaccessible(self) -> bool:
        return len(self._reachable(self.accepting_states, reverse=True)) == self.size

    @property
    def is_trimmed(self) -> bool:
        return self.is_accessible and self.is_coaccessible

    def is_empty(self) -> bool:
        """True iff the automaton accepts no word."""
        return not (self._reachable(self.start_states) & self.accepting_states)

    def is_full(self) -> bool:
        """True iff the automaton accepts every word over its alphabet."""
        return self.complement().is_empty()

    def accepts(self, word: Iterable[Symbol]) -> bool:
        """
        Check if the automaton accepts `word`.

        Words containing a symbol outside the alphabet are rejected.
        """
        current = self.epsilon_closure(self.start_states)
        for symbol in word:
            if symbol not in self.alphabet:
                return False
            step = set()
            for state in current:
                step.update(self.targets(state, symbol))
            if not step:
                return False
            current = self.epsilon_closure(step)
        return bool(current & self.accepting_states)

    # -------------------------------------------------------------------------
    # Determinization, completion, complement
    # -------------------------------------------------------------------------

    def determinize(self) -> "Automaton":
        """
        Equivalent DFA by subset construction.

        Only subsets reachable from the epsilon closure of the start states
        are built. Missing targets are left out, so the result may be
        incomplete.
        """
        alphabet = self._sorted_alphabet()
        new_start = self.epsilon_closure(self.start_states)

        index: Dict[FrozenSet[State], State] = {new_start: 0}
        queue = deque([new_start])
        new_relation = set()

        while queue:
            S = queue.popleft()
            for a in alphabet:
                target_set = set()
                for q in S:
                    target_set.update(self.targets(q, a))
                if not target_set:
                    continue

                target = self.epsilon_closure(target_set)
                if target not in index:
                    index[target] = len(index)
                    queue.append(target)
                new_relation.add((index[S], a, index[target]))

        accepting = {i for S, i in index.items() if S & self.accepting_states}

        logger.debug(
            "subset construction: %d states -> %d states", self.size, len(index)
        )
        return Automaton.build(self.alphabet, len(index), {0}, accepting, new_relation)

    def complete(self) -> "Automaton":
        """
        Add a non-accepting sink state for every missing transition.

        Only defined for deterministic automata; raises PreconditionError
        otherwise. A complete automaton is returned unchanged.
        """
        if not self.is_deterministic:
            raise PreconditionError(
                "complete() requires a deterministic automaton; call determinize() first"
            )
        if self.is_complete:
            return self

        sink = self.size
        new_relation = set(self.transition_relation)
        for state in range(sink + 1):
            for symbol in self.alphabet:
                if not self.targets(state, symbol):
                    new_relation.add((state, symbol, sink))

        return Automaton.build(
            self.alphabet,
            sink + 1,
            self.start_states,
            self.accepting_states,
            new_relation,
        )

    def _to_complete_dfa(self, operation: str) -> "Automaton":
        dfa = self
        if not dfa.is_deterministic:
            logger.debug("%s: determinizing a %d-state automaton", operation, dfa.size)
            dfa = dfa.determinize()
        if not dfa.is_complete:
            logger.debug("%s: completing a %d-state automaton", operation, dfa.size)
            dfa = dfa.complete()
        return dfa

    def complement(self) -> "Automaton":
        """
        Automaton accepting exactly the words over the alphabet this one rejects.

        The input is determinized and completed first when needed, so any
        automaton is accepted; the result is a complete DFA.
        """
        dfa = self._to_complete_dfa("complement")
        return Automaton(
            alphabet=dfa.alphabet,
            states=dfa.states,
            start_states=dfa.start_states,
            accepting_states=dfa.states - dfa.accepting_states,
            transition_relation=dfa.transition_relation,
        )

    # -------------------------------------------------------------------------
    # Binary algebra
    # -------------------------------------------------------------------------

    def union(self, other: "Automaton") -> "Automaton":
        """
        NFA accepting the words of either operand.

        State 0 is a fresh start state with epsilon transitions into both
        operands, which are renumbered from 1.
        """
        _check_alphabets("union", self, other)

        left = 1
        right = 1 + self.size
        new_relation = {(0, None, left + s) for s in self.start_states}
        new_relation |= {(0, None, right + s) for s in other.start_states}
        new_relation |= {(left + p, a, left + q) for p, a, q in self.transition_relation}
        new_relation |= {(right + p, a, right + q) for p, a, q in other.transition_relation}

        accepting = {left + s for s in self.accepting_states}
        accepting |= {right + s for s in other.accepting_states}

        return Automaton.build(
            self.alphabet, 1 + self.size + other.size, {0}, accepting, new_relation
        )

    def intersection(self, other: "Automaton") -> "Automaton":
        """
        Product automaton accepting the words of both operands.

        Both operands are determinized and completed first when needed. Only
        pairs reachable from the pair of start states are built; a pair is
        accepting iff both components are.
        """
        _check_alphabets("intersection", self, other)

        a = self._to_complete_dfa("intersection")
        b = other._to_complete_dfa("intersection")
        alphabet = a._sorted_alphabet()

        start = (next(iter(a.start_states)), next(iter(b.start_states)))
        index: Dict[Tuple[State, State], State] = {start: 0}
        queue = deque([start])
        new_relation = set()

        while queue:
            pair = queue.popleft()
            p, q = pair
            for symbol in alphabet:
                (p2,) = a.targets(p, symbol)
                (q2,) = b.targets(q, symbol)
                target = (p2, q2)
                if target not in index:
                    index[target] = len(index)
                    queue.append(target)
                new_relation.add((index[pair], symbol, index[target]))

        accepting = {
            i
            for (p, q), i in index.items()
            if p in a.accepting_states and q in b.accepting_states
        }

        logger.debug(
            "product construction: %d x %d states -> %d reachable pairs",
            a.size,
            b.size,
            len(index),
        )
        return Automaton.build(self.alphabet, len(index), {0}, accepting, new_relation)

    def difference(self, other: "Automaton") -> "Automaton":
        """Automaton accepting the words of this automaton that `other` rejects."""
        _check_alphabets("difference", self, other)
        return self.intersection(other.complement())

    def concatenation(self, other: "Automaton") -> "Automaton":
        """
        NFA accepting uv for u accepted by this automaton and v by `other`.

        `other` is renumbered above this automaton and every accepting state
        of this automaton gets an epsilon transition to the start states of
        `other`. If `other` accepts the empty word, the accepting states of
        this automaton stay accepting.
        """
        _check_alphabets("concatenation", self, other)

        shift = self.size
        new_relation = set(self.transition_relation)
        new_relation |= {(shift + p, a, shift + q) for p, a, q in other.transition_relation}
        new_relation |= {
            (f, None, shift + s)
            for f, s in product(self.accepting_states, other.start_states)
        }

        accepting = {shift + s for s in other.accepting_states}
        if other.accepts(()):
            accepting |= self.accepting_states

        return Automaton.build(
            self.alphabet,
            self.size + other.size,
            self.start_states,
            accepting,
            new_relation,
        )

    def star(self) -> "Automaton":
        """
        Kleene closure.

        State 0 is a fresh accepting start state with an epsilon transition to
        the old start states; every old accepting state gets an epsilon
        transition back to the old start states.
        """
        new_relation = {(1 + p, a, 1 + q) for p, a, q in self.transition_relation}
        new_relation |= {(0, None, 1 + s) for s in self.start_states}
        new_relation |= {
            (1 + f, None, 1 + s)
            for f, s in product(self.accepting_states, self.start_states)
        }
        accepting = {0} | {1 + f for f in self.accepting_states}
        return Automaton.build(self.alphabet, 1 + self.size, {0}, accepting, new_relation)

    def at_most(self, n: int) -> "Automaton":
        """Between zero and `n` repetitions."""
        if n < 0:
            raise ValueError(f"repetition count must be non-negative, got {n}")
        optional = self.union(Automaton.empty_word(self.alphabet))
        result = Automaton.empty_word(self.alphabet)
        for _ in range(n):
            result = result.concatenation(optional)
        return result

    def at_least(self, n: int) -> "Automaton":
        """`n` or more repetitions."""
        if n < 0:
            raise ValueError(f"repetition count must be non-negative, got {n}")
        result = Automaton.empty_word(self.alphabet)
        for _ in range(n):
            result = result.concatenation(self)
        return result.concatenation(self.star())

    def repeat(self, minimum: int, maximum: Optional[int] = None) -> "Automaton":
        """
        Between `minimum` and `maximum` repetitions; no upper bound if
        `maximum` is None. An empty range gives the empty language.
        """
        if minimum < 0:
            raise ValueError(f"minimum must be non-negative, got {minimum}")
        if maximum is None:
            return self.at_least(minimum)
        if maximum < minimum:
            return Automaton.empty(self.alphabet)

        result = Automaton.empty_word(self.alphabet)
        for _ in range(minimum):
            result = result.concatenation(self)
        return result.concatenation(self.at_most(maximum - minimum))

    # -------------------------------------------------------------------------
    # Structural cleanup
    # -------------------------------------------------------------------------

    def _restrict(self, keep: Iterable[State]) -> "Automaton":
        """Sub-automaton on `keep`, renumbered in increasing order."""
        renumber = {old: new for new, old in enumerate(sorted(keep))}
        return Automaton.build(
            self.alphabet,
            len(renumber),
            {renumber[s] for s in self.start_states if s in renumber},
            {renumber[s] for s in self.accepting_states if s in renumber},
            {
                (renumber[p], a, renumber[q])
                for p, a, q in self.transition_relation
                if p in renumber and q in renumber
            },
        )

    def accessible(self) -> "Automaton":
        """Keep only states reachable from a start state."""
        return self._restrict(self._reachable(self.start_states))

    def co_accessible(self) -> "Automaton":
        """Keep only states from which an accepting state is reachable."""
        return self._restrict(self._reachable(self.accepting_states, reverse=True))

    def trim(self) -> "Automaton":
        """Keep only states that are both accessible and co-accessible."""
        keep = self._reachable(self.start_states) & self._reachable(
            self.accepting_states, reverse=True
        )
        return self._restrict(keep)

    def reverse(self) -> "Automaton":
        """Automaton accepting the mirror image of every accepted word."""
        return Automaton(
            alphabet=self.alphabet,
            states=self.states,
            start_states=self.accepting_states,
            accepting_states=self.start_states,
            transition_relation=frozenset(
                (q, a, p) for p, a, q in self.transition_relation
            ),
        )

    # -------------------------------------------------------------------------
    # Minimization and equivalence
    # -------------------------------------------------------------------------

    def compute_equivalence_classes(self) -> Set[FrozenSet[State]]:
        """
        Nerode classes of a complete DFA by iterative refinement.

        Starts from {accepting, non-accepting} and splits classes by the
        classes their transitions lead to, until a fixed point is reached.
        """
        if not (self.is_deterministic and self.is_complete):
            raise PreconditionError(
                "equivalence classes are only defined for complete DFAs"
            )

        alphabet = self._sorted_alphabet()
        accepting_class = frozenset(self.accepting_states)
        non_accepting_class = self.states - self.accepting_states

        current_classes = {c for c in (accepting_class, non_accepting_class) if c}

        while True:
            class_index = {}
            for i, eq_class in enumerate(current_classes):
                for state in eq_class:
                    class_index[state] = i

            new_classes = set()
            for old_class in current_classes:
                signature_groups = defaultdict(set)
                for state in old_class:
                    signature = tuple(
                        class_index[next(iter(self.targets(state, symbol)))]
                        for symbol in alphabet
                    )
                    signature_groups[signature].add(state)
                new_classes.update(frozenset(g) for g in signature_groups.values())

            if len(new_classes) == len(current_classes):
                return current_classes
            current_classes = new_classes

    def minimize(self) -> "Automaton":
        """
        The minimal complete DFA of the language.

        Any automaton is accepted: it is determinized (which also drops
        unreachable states) and completed first. States of the result are
        numbered in breadth-first order from the start state, following
        symbols in sorted order, so two automata with the same language
        minimize to equal objects.
        """
        dfa = self.determinize().complete()
        equiv_classes = dfa.compute_equivalence_classes()

        state_to_class = {}
        for eq_class in equiv_classes:
            for state in eq_class:
                state_to_class[state] = eq_class

        alphabet = dfa._sorted_alphabet()
        start = state_to_class[next(iter(dfa.start_states))]
        index = {start: 0}
        queue = deque([start])
        new_relation = set()

        while queue:
            eq_class = queue.popleft()
            representative = next(iter(eq_class))
            for symbol in alphabet:
                (next_state,) = dfa.targets(representative, symbol)
                next_class = state_to_class[next_state]
                if next_class not in index:
                    index[next_class] = len(index)
                    queue.append(next_class)
                new_relation.add((index[eq_class], symbol, index[next_class]))

        accepting = {
            i for eq_class, i in index.items() if eq_class & dfa.accepting_states
        }

        logger.debug("minimization: %d states -> %d states", dfa.size, len(index))
        return Automaton.build(self.alphabet, len(index), {0}, accepting, new_relation)

    def equals(self, other: "Automaton") -> bool:
        """
        True iff both automata accept the same language.

        Both sides are reduced to canonically numbered minimal complete DFAs;
        those are isomorphic iff they are equal as objects.
        """
        _check_alphabets("equals", self, other)
        return self.minimize() == other.minimize()

    def contains(self, other: "Automaton") -> bool:
        """True iff every word accepted by `other` is accepted by this automaton."""
        _check_alphabets("contains", self, other)
        return other.difference(self).is_empty()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __or__(self, other: "Automaton") -> "Automaton":
        return self.union(other)

    def __and__(self, other: "Automaton") -> "Automaton":
        return self.intersection(other)

    def __sub__(self, other: "Automaton") -> "Automaton":
        return self.difference(other)

    def __mul__(self, other: "Automaton") -> "Automaton":
        return self.concatenation(other)

    def __invert__(self) -> "Automaton":
        return self.complement()

    # -------------------------------------------------------------------------
    # Visualization
    # -------------------------------------------------------------------------

    def to_graphviz(self, filename: Optional[str] = None, view: bool = False) -> Digraph:
        """
        Build a Graphviz graph of this automaton.

        The graph is only rendered to disk when `filename` is given.
        """
        name = self.type.name

        dot = Digraph(
            name=name,
            format="png",
            graph_attr={
                "rankdir": "LR",
                "label": name,
                "labelloc": "t",
                "fontsize": "14",
                "fontname": "Arial",
            },
            node_attr={
                "shape": "circle",
                "fontsize": "14",
                "fontname": "Arial",
                "style": "filled",
                "fillcolor": "lightblue",
            },
            edge_attr={"fontsize": "12", "fontname": "Arial", "arrowsize": "0.8"},
        )

        for state in sorted(self.states):
            if state in self.accepting_states:
                dot.node(
                    f"q{state}",
                    label=f"q{state}",
                    shape="doublecircle",
                    fillcolor="lightgreen",
                )
            else:
                dot.node(f"q{state}", label=f"q{state}")

        for state in sorted(self.start_states):
            dot.node(f"__start{state}__", shape="point", style="invis")
            dot.edge(f"__start{state}__", f"q{state}", penwidth="2")

        labels = defaultdict(list)
        for src, sym, tgt in self.transition_relation:
            labels[(src, tgt)].append(EPSILON if sym is None else str(sym))

        for (src, tgt), symbols in sorted(labels.items()):
            label = ", ".join(sorted(symbols))
            if src == tgt:
                dot.edge(f"q{src}", f"q{tgt}", label=label, headport="n", tailport="n")
            else:
                dot.edge(f"q{src}", f"q{tgt}", label=label)

        if filename is not None:
            dot.render(filename, view=view, cleanup=True)
        return dot
