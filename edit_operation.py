"""Edit operations produced by the backtrace, and ways to replay them."""


from typing import Any, Iterable, List, NamedTuple, Sequence, Union


from costs import Costs


class Insert(NamedTuple):
    element: Any


class Delete(NamedTuple):
    element: Any


class Substitute(NamedTuple):
    old: Any
    new: Any


class Keep(NamedTuple):
    element: Any


EditOperation = Union[Insert, Delete, Substitute, Keep]
Script = List[EditOperation]


def apply_operations(operations: Iterable[EditOperation], source: Sequence[Any]) -> List[Any]:
    """Replays a script on source and returns the resulting elements.

    Raises ValueError if a Keep, Delete or Substitute does not match the
    next source element, or if source elements are left over.
    """
    result: List[Any] = []
    i = 0
    for op in operations:
        if isinstance(op, Insert):
            result.append(op.element)
            continue
        if i >= len(source):
            raise ValueError(f'{op} past the end of the source')
        expected = op.old if isinstance(op, Substitute) else op.element
        if source[i] != expected:
            raise ValueError(f'{op} does not match source element {source[i]!r} at {i}')
        if isinstance(op, Substitute):
            result.append(op.new)
        elif isinstance(op, Keep):
            result.append(op.element)
        i += 1
    if i != len(source):
        raise ValueError(f'{len(source) - i} source elements not consumed')
    return result


def operation_cost(costs: Costs, op: EditOperation) -> int:
    if isinstance(op, Insert):
        return costs.insertion_cost(op.element)
    if isinstance(op, Delete):
        return costs.deletion_cost(op.element)
    if isinstance(op, Substitute):
        return costs.substitution_cost(op.old, op.new)
    return 0


def show_operation(op: EditOperation) -> str:
    if isinstance(op, Insert):
        return f'+{op.element}'
    if isinstance(op, Delete):
        return f'-{op.element}'
    if isinstance(op, Substitute):
        return f'~{op.old}/{op.new}'
    return str(op.element)
