import logging


from costs import Cost, CostKind, Costs, Deletion, Insertion, LEVENSHTEIN, \
        NoAction, show_cost
from edit_operation import Delete, Insert, Keep, Script, Substitute
from matrix import Matrix, init_matrix, pp_matrix
from typing import Any, Sequence


String = Sequence[Any]


def compute_alignment(costs: Costs, source: String, target: String) -> Matrix[Cost]:
    height = len(source) + 1
    width = len(target) + 1
    result: Matrix[Cost] = init_matrix(height, width, NoAction(0))
    for i in range(height):
        for j in range(width):
            if i == 0 and j == 0:
                cost = Insertion(0)
            elif i == 0:
                cost = Insertion(result.rows[0][j - 1].value
                        + costs.insertion_cost(target[j - 1]))
            elif j == 0:
                cost = Deletion(result.rows[i - 1][0].value
                        + costs.deletion_cost(source[i - 1]))
            else:
                cost = cost_of(costs, source, target, i, j, result)
            result.set_value(i, j, cost)
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug('Matrix:\n%s', pp_matrix(result, show_cost))
    return result


def cost_of(costs: Costs, source: String, target: String, i: int, j: int,
        matrix: Matrix[Cost]) -> Cost:
    """Computes the cost of cell (i, j) from its three neighbors.

    (i-1, j-1) (i-1, j)
    (i, j-1)   (i, j)

    Going down deletes source[i-1], going right inserts target[j-1], going
    diagonally substitutes source[i-1] by target[j-1].
    """
    up = matrix.get_value(i - 1, j)
    left = matrix.get_value(i, j - 1)
    diagonal = matrix.get_value(i - 1, j - 1)
    assert up is not None and left is not None and diagonal is not None
    t1 = source[i - 1]
    t2 = target[j - 1]
    result = costs.lower_cost(
        t1,
        t2,
        up.value + costs.deletion_cost(t1),
        diagonal.value + costs.substitution_cost(t1, t2),
        left.value + costs.insertion_cost(t2),
    )
    # A substitution that adds nothing leaves the element unchanged
    if result.kind == CostKind.SUBSTITUTION and result.value == diagonal.value:
        return NoAction(result.value)
    return result


def distance(matrix: Matrix[Cost]) -> int:
    return matrix.rows[-1][-1].value


def extract_operations(matrix: Matrix[Cost], source: String, target: String) -> Script:
    if (matrix.height, matrix.width) != (len(source) + 1, len(target) + 1):
        raise ValueError(f'{matrix.height}x{matrix.width} matrix does not fit '
                f'sequences of length {len(source)} and {len(target)}')
    script: Script = []
    i = len(source)
    j = len(target)
    while (i, j) != (0, 0):
        kind = matrix.rows[i][j].kind
        if kind == CostKind.NO_ACTION and i > 0 and j > 0:
            script.append(Keep(source[i - 1]))
            i, j = i - 1, j - 1
        elif kind == CostKind.SUBSTITUTION and i > 0 and j > 0:
            script.append(Substitute(source[i - 1], target[j - 1]))
            i, j = i - 1, j - 1
        elif kind == CostKind.DELETION and i > 0:
            script.append(Delete(source[i - 1]))
            i -= 1
        elif kind == CostKind.INSERTION and j > 0:
            script.append(Insert(target[j - 1]))
            j -= 1
        else:
            raise ValueError(f'{kind.name} at ({i}, {j}) has no predecessor')
        logging.debug('%s', script[-1])
    script.reverse()
    return script


def edit_distance(source: String, target: String, costs: Costs=LEVENSHTEIN) -> int:
    return distance(compute_alignment(costs, source, target))


def diff(source: String, target: String, costs: Costs=LEVENSHTEIN) -> Script:
    matrix = compute_alignment(costs, source, target)
    return extract_operations(matrix, source, target)
