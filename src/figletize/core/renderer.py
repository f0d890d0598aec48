"""Rendering engine.

Composes the glyphs of a message into one banner. Each new glyph is moved
left as far as the tightest of its rows allows under the effective layout,
and the single boundary column where the glyphs meet is merged through the
smushing rules.

The engine is a pure function of (font, message, smush override); it keeps
no state between calls and never mutates the font.
"""

from figletize.core.smush import try_smush
from figletize.domain.font import FULL_WIDTH, Font, Glyph

NEWLINE = "\n"


def _fit_move(font: Font, mode: int, previous: Glyph, glyph: Glyph) -> int:
    """Number of columns ``glyph`` may slide into ``previous``.

    Every row is limited by its own padding plus one column when the
    boundary characters smush; the smallest row limit applies to all rows.
    """
    move = None
    for left, right in zip(previous.rows, glyph.rows):
        row_move = left.space_after + right.space_before
        if (
            len(left) > 2
            and len(right) > 2
            and try_smush(left.back_char, right.front_char, mode, font.hard_blank, font.direction)
            is not None
        ):
            row_move += 1
        row_move = min(row_move, len(right))
        if move is None or row_move < move:
            move = row_move
    return move or 0


def _place(
    font: Font, mode: int, output: list[list[str]], previous: Glyph | None, glyph: Glyph, fit_move: int
) -> None:
    """Append ``glyph`` to every output row, ``fit_move`` columns to the left.

    Rows shorter than the banner so far are padded with spaces, so the glyph
    starts at the same column in every row.
    """
    origin = max(len(emitted) for emitted in output) - fit_move
    for row, line in enumerate(glyph.rows):
        emitted = output[row]
        to_move = fit_move
        if previous is not None:
            trim = min(previous.rows[row].space_after, to_move)
            while trim and emitted and emitted[-1] == " ":
                emitted.pop()
                to_move -= 1
                trim -= 1

        if len(emitted) < origin + to_move:
            emitted.extend(" " * (origin + to_move - len(emitted)))

        if to_move and emitted:
            merged = try_smush(
                emitted[-1], line.content[to_move - 1], mode, font.hard_blank, font.direction
            )
            if merged is not None:
                emitted[-1] = merged
        emitted.extend(line.content[to_move:])


def _is_blank(row: str) -> bool:
    return not row.strip()


def render(font: Font, message: str, smush_override: int | None = None) -> str:
    """Render ``message`` as a banner in ``font``.

    Characters the font lacks use the fallback glyph at codepoint 0, or are
    skipped when there is none. Blank rows are trimmed from the top and the
    bottom, but at least one row is always kept; an empty message renders as
    an empty string.

    Args:
        font: Parsed font
        message: Text to render
        smush_override: Smush mode to use instead of the font's own, for this
            call only

    Returns:
        Rows joined with newlines, without a trailing newline
    """
    mode = font.smush_mode if smush_override is None else smush_override
    output: list[list[str]] = [[] for _ in range(font.height)]
    previous: Glyph | None = None

    for char in message:
        glyph = font.get_glyph(char)
        if glyph is None:
            continue

        fit_move = 0
        if mode != FULL_WIDTH and previous is not None:
            fit_move = _fit_move(font, mode, previous, glyph)

        _place(font, mode, output, previous, glyph, fit_move)
        previous = glyph

    rows = ["".join(chars).replace(font.hard_blank, " ") for chars in output]

    start = 0
    while start < len(rows) - 1 and _is_blank(rows[start]):
        start += 1
    end = len(rows)
    while end - 1 > start and _is_blank(rows[end - 1]):
        end -= 1

    return NEWLINE.join(rows[start:end])
