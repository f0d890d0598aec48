"""Smushing rules.

Decides whether two characters meeting at a glyph boundary may merge into
one column, and what the merged character is. Rules are evaluated in a
fixed order and the first rule that applies wins:

1. A space yields the other character.
2. Kerning-only layouts never merge two visible characters.
3. Universal smushing (no rule bits): hard blanks yield the other side,
   otherwise the character later in reading order overwrites.
4. Hard blank rule: two hard blanks merge into one.
5. Equal character rule.
6. Underscore rule: ``_`` gives way to ``|/\\[]{}()<>``.
7. Hierarchy rule: ``|`` < ``/\\`` < ``[]`` < ``{}`` < ``()`` < ``<>``.
8. Opposite pair rule: ``[]``, ``{}``, ``()`` become ``|``.
9. Big X rule: ``/\\`` -> ``|``, ``\\/`` -> ``Y``, ``><`` -> ``X``.
"""

from figletize.domain.font import RULES, SmushMode, TextDirection

LOWLINE_PARTNERS = "|/\\[]{}()<>"
HIERARCHY_CLASSES: tuple[str, ...] = ("|", "/\\", "[]", "{}", "()", "<>")
OPPOSITE_PAIRS: frozenset[tuple[str, str]] = frozenset(
    {("[", "]"), ("]", "["), ("{", "}"), ("}", "{"), ("(", ")"), (")", "(")}
)
BIG_X: dict[tuple[str, str], str] = {
    ("/", "\\"): "|",
    ("\\", "/"): "Y",
    (">", "<"): "X",
}


def _hierarchy_winner(left: str, right: str) -> str | None:
    for rank, members in enumerate(HIERARCHY_CLASSES):
        higher = "".join(HIERARCHY_CLASSES[rank + 1 :])
        if left in members and right in higher:
            return right
        if right in members and left in higher:
            return left
    return None


def try_smush(
    left: str,
    right: str,
    mode: int,
    hard_blank: str,
    direction: TextDirection = TextDirection.LEFT_TO_RIGHT,
) -> str | None:
    """Merge two boundary characters.

    Args:
        left: Last column of the already placed text
        right: First overlapping column of the new glyph
        mode: Effective smush mode bits
        hard_blank: The font's hard blank sentinel
        direction: Print direction, decides universal smushing ties

    Returns:
        The merged character, or None when the pair cannot merge
    """
    if left == " ":
        return right
    if right == " ":
        return left

    if not mode & SmushMode.SMUSH:
        return None

    if not mode & RULES:
        if left == hard_blank:
            return right
        if right == hard_blank:
            return left
        return right if direction == TextDirection.LEFT_TO_RIGHT else left

    if left == hard_blank and right == hard_blank:
        return left if mode & SmushMode.HARDBLANK else None

    if mode & SmushMode.EQUAL and left == right:
        return left

    if mode & SmushMode.LOWLINE:
        if left == "_" and right in LOWLINE_PARTNERS:
            return right
        if right == "_" and left in LOWLINE_PARTNERS:
            return left

    if mode & SmushMode.HIERARCHY:
        winner = _hierarchy_winner(left, right)
        if winner is not None:
            return winner

    if mode & SmushMode.PAIR and (left, right) in OPPOSITE_PAIRS:
        return "|"

    if mode & SmushMode.BIGX:
        merged = BIG_X.get((left, right))
        if merged is not None:
            return merged

    return None
