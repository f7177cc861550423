"""Cost policies for edit distance computation."""


from enum import Enum
from typing import Any, NamedTuple


class CostKind(Enum):
    INSERTION = 1
    DELETION = 2
    SUBSTITUTION = 3
    NO_ACTION = 4


class Cost(NamedTuple):
    """Cumulative cost of reaching a matrix cell, tagged by the last step."""
    kind: CostKind
    value: int


def Insertion(value: int) -> Cost:
    return Cost(CostKind.INSERTION, value)


def Deletion(value: int) -> Cost:
    return Cost(CostKind.DELETION, value)


def Substitution(value: int) -> Cost:
    return Cost(CostKind.SUBSTITUTION, value)


def NoAction(value: int) -> Cost:
    return Cost(CostKind.NO_ACTION, value)


SYMBOLS = {
    CostKind.INSERTION: '+',
    CostKind.DELETION: '-',
    CostKind.SUBSTITUTION: '~',
    CostKind.NO_ACTION: 'o',
}


def show_cost(cost: Cost) -> str:
    return f'{SYMBOLS[cost.kind]} {cost.value}'


class Costs:
    """Prices of the edit steps and the rule for picking one per cell.

    Subclasses supply the three prices. lower_cost receives the candidate
    totals for the cell and returns the one to record, preferring insertion,
    then deletion, then substitution. Insertion or deletion only win a tie
    with substitution when the two elements are equal.
    """

    def insertion_cost(self, t: Any) -> int:
        raise NotImplementedError

    def deletion_cost(self, t: Any) -> int:
        raise NotImplementedError

    def substitution_cost(self, t1: Any, t2: Any) -> int:
        raise NotImplementedError

    def lower_cost(self, t1: Any, t2: Any, deletion: int, substitution: int,
            insertion: int) -> Cost:
        if insertion < deletion:
            if insertion < substitution or \
                    (insertion == substitution and t1 == t2):
                return Insertion(insertion)
            return Substitution(substitution)
        if deletion < substitution or \
                (deletion == substitution and t1 == t2):
            return Deletion(deletion)
        return Substitution(substitution)


class LevenshteinCosts(Costs):

    def insertion_cost(self, t):
        return 1

    def deletion_cost(self, t):
        return 1

    def substitution_cost(self, t1, t2):
        if t1 == t2:
            return 0
        return 1

    def __eq__(self, other):
        return isinstance(other, LevenshteinCosts)

    def __hash__(self):
        return hash(LevenshteinCosts)

    def __repr__(self):
        return 'LevenshteinCosts()'


class WeightedCosts(Costs):
    """Levenshtein with configurable step prices.

    Substituting equal elements is free. With different insertion and
    deletion prices the resulting distance is not symmetric.
    """

    def __init__(self, insertion: int=1, deletion: int=1,
            substitution: int=1) -> None:
        for name, weight in (('insertion', insertion), ('deletion', deletion),
                ('substitution', substitution)):
            if weight < 0:
                raise ValueError(f'{name} cost must be non-negative, got {weight}')
        self.insertion = insertion
        self.deletion = deletion
        self.substitution = substitution

    def insertion_cost(self, t):
        return self.insertion

    def deletion_cost(self, t):
        return self.deletion

    def substitution_cost(self, t1, t2):
        if t1 == t2:
            return 0
        return self.substitution

    def __eq__(self, other):
        if not isinstance(other, WeightedCosts):
            return NotImplemented
        return (self.insertion, self.deletion, self.substitution) == \
                (other.insertion, other.deletion, other.substitution)

    def __hash__(self):
        return hash((self.insertion, self.deletion, self.substitution))

    def __repr__(self):
        return f'WeightedCosts(insertion={self.insertion}, ' \
                f'deletion={self.deletion}, substitution={self.substitution})'


LEVENSHTEIN = LevenshteinCosts()


def levenshtein_costs() -> LevenshteinCosts:
    return LEVENSHTEIN
