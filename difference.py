"""Renders edit scripts as strings with the changed spans highlighted."""


from edit_operation import Delete, EditOperation, Insert, Keep, Substitute, \
        show_operation
from typing import Callable, Iterable, List, NamedTuple, Union


GREEN = '\033[32m'
RED = '\033[31m'
CYAN = '\033[36m'
END = '\033[0m'


class Separators(NamedTuple):
    start: str
    end: str


def make_char_separators(c1: str, c2: str) -> Separators:
    return Separators(c1, c2)


def brackets_separators() -> Separators:
    return make_char_separators('[', ']')


def parens_separators() -> Separators:
    return make_char_separators('(', ')')


class ShortenOptions(NamedTuple):
    size: int = 20
    text: str = '...'


def default_display_edit_operation(op: EditOperation) -> str:
    return show_operation(op)


def colored_display_edit_operation(op: EditOperation) -> str:
    if isinstance(op, Insert):
        return GREEN + str(op.element) + END
    if isinstance(op, Delete):
        return RED + str(op.element) + END
    if isinstance(op, Substitute):
        return CYAN + str(op.old) + END
    return str(op.element)


class DisplayOptions(NamedTuple):
    separators: Separators = brackets_separators()
    shorten_options: ShortenOptions = ShortenOptions()
    display_edit_operation: Callable[[EditOperation], str] = \
            default_display_edit_operation


def default_display_options() -> DisplayOptions:
    return DisplayOptions()


class Delimiter(NamedTuple):
    text: str


class Kept(NamedTuple):
    text: str


Token = Union[Delimiter, Kept]


def show_token(token: Token) -> str:
    return token.text


def display_diffs(options: DisplayOptions, operations: Iterable[EditOperation]) -> str:
    """Encloses each run of changes in separators.

    Unchanged text outside the separators is shortened according to
    options.shorten_options.
    """
    start = Delimiter(options.separators.start)
    end = Delimiter(options.separators.end)
    tokens: List[Token] = []
    different = False
    for op in operations:
        if isinstance(op, Keep):
            if different:
                tokens.append(end)
            different = False
        else:
            if not different:
                tokens.append(start)
            different = True
        tokens.append(Kept(options.display_edit_operation(op)))
    if different:
        tokens.append(end)
    shortened = shorten_tokens(options.shorten_options, start, end, tokens)
    return ''.join(show_token(t) for t in shortened)


def shorten_tokens(options: ShortenOptions, start: Delimiter, end: Delimiter,
        tokens: List[Token]) -> List[Token]:
    """Shortens the unchanged runs between delimited spans.

    A leading run keeps its last options.size characters, a trailing run its
    first options.size, an inner run options.size at each side. Text without
    any delimiter is returned unchanged.
    """
    result: List[Token] = []
    run: List[str] = []
    inside = False
    seen_delimiter = False

    def flush(leading: bool, trailing: bool) -> None:
        if run:
            text = shorten(options, ''.join(run), leading, trailing)
            result.append(Kept(text))
            run.clear()
    for token in tokens:
        if isinstance(token, Delimiter) and not inside and token == start:
            flush(not seen_delimiter, False)
            inside = True
            seen_delimiter = True
            result.append(token)
        elif isinstance(token, Delimiter) and inside and token == end:
            inside = False
            result.append(token)
        elif inside:
            result.append(token)
        else:
            run.append(token.text)
    if seen_delimiter:
        flush(False, True)
    else:
        # nothing changed, keep everything
        if run:
            result.append(Kept(''.join(run)))
    return result


def shorten(options: ShortenOptions, text: str, leading: bool, trailing: bool) -> str:
    size = options.size
    if leading:
        if len(text) <= size:
            return text
        return options.text + text[len(text) - size:]
    if trailing:
        if len(text) <= size:
            return text
        return text[:size] + options.text
    if len(text) <= 2 * size:
        return text
    return text[:size] + options.text + text[len(text) - size:]
