import logging
from dataclasses import dataclass
from typing_extensions import *

from automaton import (
    EMPTY_SET,
    EPSILON,
    AlphabetMismatchError,
    Automaton,
    AutomatonError,
)

logger = logging.getLogger(__name__)


class MalformedRegexError(AutomatonError):
    """The tree is not built from the regex node types, or uses foreign symbols."""


# -----------------------------------------------------------------------------
# Syntax tree
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Empty:
    """Matches nothing."""


@dataclass(frozen=True)
class Epsilon:
    """Matches only the empty word."""


@dataclass(frozen=True)
class Literal:
    symbol: Any


@dataclass(frozen=True)
class Union:
    left: Any
    right: Any


@dataclass(frozen=True)
class Concat:
    left: Any
    right: Any


@dataclass(frozen=True)
class Star:
    inner: Any


NODE_TYPES = (Empty, Epsilon, Literal, Union, Concat, Star)


def _postfix(node) -> List:
    """The nodes of the tree, children before parents, left before right."""
    order = []
    stack = [node]
    while stack:
        n = stack.pop()
        if isinstance(n, (Union, Concat)):
            stack.extend((n.left, n.right))
        elif isinstance(n, Star):
            stack.append(n.inner)
        elif not isinstance(n, (Empty, Epsilon, Literal)):
            raise MalformedRegexError(f"{n!r} is not a regex node")
        order.append(n)
    order.reverse()
    return order


def symbols(node) -> FrozenSet:
    """All literal symbols occurring in the tree."""
    return frozenset(n.symbol for n in _postfix(node) if isinstance(n, Literal))


def simplify(node):
    """
    Rewrite the tree bottom-up with language-preserving identities:
    ∅|x = x, x|x = x, ε|x* = x*, ∅x = x∅ = ∅, εx = xε = x,
    ∅* = ε* = ε, (x*)* = x*.
    """
    stack = []
    for n in _postfix(node):
        if isinstance(n, Union):
            right = stack.pop()
            left = stack.pop()
            if isinstance(left, Empty):
                n = right
            elif isinstance(right, Empty) or left == right:
                n = left
            elif isinstance(left, Epsilon) and isinstance(right, Star):
                n = right
            elif isinstance(right, Epsilon) and isinstance(left, Star):
                n = left
            else:
                n = Union(left, right)

        elif isinstance(n, Concat):
            right = stack.pop()
            left = stack.pop()
            if isinstance(left, Empty) or isinstance(right, Empty):
                n = Empty()
            elif isinstance(left, Epsilon):
                n = right
            elif isinstance(right, Epsilon):
                n = left
            else:
                n = Concat(left, right)

        elif isinstance(n, Star):
            inner = stack.pop()
            if isinstance(inner, (Empty, Epsilon)):
                n = Epsilon()
            elif isinstance(inner, Star):
                n = inner
            else:
                n = Star(inner)

        stack.append(n)
    return stack.pop()


def to_string(node) -> str:
    # stack of (text, binding strength) pairs
    stack: List[Tuple[str, int]] = []
    for n in _postfix(node):
        if isinstance(n, Empty):
            stack.append((EMPTY_SET, 4))
        elif isinstance(n, Epsilon):
            stack.append((EPSILON, 4))
        elif isinstance(n, Literal):
            stack.append((str(n.symbol), 4))
        elif isinstance(n, Star):
            inner = stack.pop()
            stack.append((f"{_wrap(inner, 3)}*", 3))
        else:
            right = stack.pop()
            left = stack.pop()
            if isinstance(n, Union):
                # union is associative, so a union on the right needs no parentheses
                stack.append((f"{_wrap(left, 1)}|{_wrap(right, 1)}", 1))
            else:
                stack.append((f"{_wrap(left, 2)}{_wrap(right, 2)}", 2))
    return stack.pop()[0]


def _wrap(item: Tuple[str, int], level: int) -> str:
    text, strength = item
    if strength < level:
        return f"({text})"
    return text


# -----------------------------------------------------------------------------
# Thompson construction
# -----------------------------------------------------------------------------


class _ThompsonBuilder:
    """Allocates states and collects transitions for one construction."""

    def __init__(self):
        self.size = 0
        self.transitions: Set[Tuple[int, Any, int]] = set()

    def new_state(self) -> int:
        state = self.size
        self.size += 1
        return state

    def fragment(self, node) -> Tuple[int, FrozenSet[int]]:
        """
        Build `node`, returning its start state and its accepting states.

        Works on an explicit stack of (node, expanded, start) entries. Union
        and Star allocate their fresh start state before their operands, and
        the left operand is always built before the right one.
        """
        # finished fragments as (start, accepting) pairs
        fragments: List[Tuple[int, FrozenSet[int]]] = []
        stack: List[Tuple[Any, bool, Optional[int]]] = [(node, False, None)]

        while stack:
            n, expanded, start = stack.pop()

            if isinstance(n, (Empty, Epsilon, Literal)):
                start = self.new_state()
                accept = self.new_state()
                if isinstance(n, Epsilon):
                    self.transitions.add((start, None, accept))
                elif isinstance(n, Literal):
                    self.transitions.add((start, n.symbol, accept))
                fragments.append((start, frozenset({accept})))

            elif not expanded:
                if isinstance(n, (Union, Star)):
                    start = self.new_state()
                if isinstance(n, (Union, Concat)):
                    stack.append((n, True, start))
                    stack.append((n.right, False, None))
                    stack.append((n.left, False, None))
                elif isinstance(n, Star):
                    stack.append((n, True, start))
                    stack.append((n.inner, False, None))
                else:
                    raise MalformedRegexError(f"{n!r} is not a regex node")

            elif isinstance(n, Union):
                right_start, right_accepting = fragments.pop()
                left_start, left_accepting = fragments.pop()
                self.transitions.add((start, None, left_start))
                self.transitions.add((start, None, right_start))
                fragments.append((start, left_accepting | right_accepting))

            elif isinstance(n, Concat):
                right_start, right_accepting = fragments.pop()
                left_start, left_accepting = fragments.pop()
                for acc in left_accepting:
                    self.transitions.add((acc, None, right_start))
                fragments.append((left_start, right_accepting))

            else:
                inner_start, inner_accepting = fragments.pop()
                self.transitions.add((start, None, inner_start))
                for acc in inner_accepting:
                    self.transitions.add((acc, None, inner_start))
                fragments.append((start, inner_accepting | {start}))

        return fragments.pop()


def thompson(node, alphabet: Iterable) -> Automaton:
    """Epsilon-NFA for the tree `node` over `alphabet`."""
    builder = _ThompsonBuilder()
    start, accepting = builder.fragment(node)
    logger.debug("thompson construction: %d states", builder.size)
    return Automaton.build(alphabet, builder.size, {start}, accepting, builder.transitions)


# -----------------------------------------------------------------------------
# Regular expression over a fixed alphabet
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class RegularExpression:
    """
    Regular expression tree bound to an alphabet.

    Trees are built from Empty, Epsilon, Literal, Union, Concat and Star.
    Parsing pattern strings is left to the caller.
    """

    alphabet: FrozenSet
    tree: Any

    def __post_init__(self):
        object.__setattr__(self, "alphabet", frozenset(self.alphabet))

        if None in self.alphabet:
            raise MalformedRegexError(
                "None is reserved for epsilon transitions and cannot be a symbol"
            )

        unknown = symbols(self.tree) - self.alphabet
        if unknown:
            raise MalformedRegexError(
                f"literals {sorted(map(repr, unknown))} are not in the alphabet"
            )

    def __str__(self):
        return to_string(self.tree)

    def __repr__(self):
        return f"RegularExpression({str(self)!r})"

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_nfa(self) -> Automaton:
        """Convert to an epsilon-NFA using Thompson's construction."""
        return thompson(self.tree, self.alphabet)

    def to_dfa(self) -> Automaton:
        return self.to_nfa().determinize()

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def simplify(self) -> "RegularExpression":
        return RegularExpression(self.alphabet, simplify(self.tree))

    def _combine(self, operation: str, other: "RegularExpression") -> FrozenSet:
        if self.alphabet != other.alphabet:
            raise AlphabetMismatchError(operation, self.alphabet, other.alphabet)
        return self.alphabet

    def union(self, other: "RegularExpression") -> "RegularExpression":
        alphabet = self._combine("union", other)
        return RegularExpression(alphabet, Union(self.tree, other.tree))

    def concatenate(self, other: "RegularExpression") -> "RegularExpression":
        alphabet = self._combine("concatenation", other)
        return RegularExpression(alphabet, Concat(self.tree, other.tree))

    def star(self) -> "RegularExpression":
        return RegularExpression(self.alphabet, Star(self.tree))

    def optional(self) -> "RegularExpression":
        """x? written as x|ε."""
        return RegularExpression(self.alphabet, Union(self.tree, Epsilon()))

    def plus(self) -> "RegularExpression":
        """x+ written as xx*."""
        return RegularExpression(self.alphabet, Concat(self.tree, Star(self.tree)))

    # Constructors ----------------------------------------------------------

    @classmethod
    def literal(cls, alphabet: Iterable, symbol) -> "RegularExpression":
        return cls(alphabet, Literal(symbol))

    @classmethod
    def any_of(cls, alphabet: Iterable, choices: List) -> "RegularExpression":
        """
        Union of the given symbols, ∅ when there are none. Neighbouring
        terms are paired level by level, so the tree depth is logarithmic.
        """
        terms = [Literal(symbol) for symbol in choices]
        if not terms:
            return cls(alphabet, Empty())
        while len(terms) > 1:
            paired = [Union(terms[i], terms[i + 1]) for i in range(0, len(terms) - 1, 2)]
            if len(terms) % 2:
                paired.append(terms[-1])
            terms = paired
        return cls(alphabet, terms[0])
