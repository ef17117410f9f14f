"""Fuzzy subsequence scoring for window titles.

Scores follow the familiar fzf/skim "v2" scheme: every matched character earns
a fixed score, gaps between matched characters are penalised (opening a gap
costs more than extending it), and characters sitting on word boundaries,
camelCase humps or digit transitions earn a bonus. Runs of consecutive matches
keep the bonus of the character that started the run, so "fire" scores far
higher against "Firefox" than against "File Reader".
"""

from __future__ import annotations

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL_123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_UNREACHABLE = -(1 << 30)

_NON_WORD, _LOWER, _UPPER, _NUMBER, _LETTER = range(5)


def _char_class(ch: str) -> int:
    if ch.islower():
        return _LOWER
    if ch.isupper():
        return _UPPER
    if ch.isdigit():
        return _NUMBER
    if ch.isalpha():
        return _LETTER
    return _NON_WORD


def _position_bonus(prev: int, current: int) -> int:
    if prev == _NON_WORD and current != _NON_WORD:
        return BONUS_BOUNDARY
    if (prev == _LOWER and current == _UPPER) or (prev != _NUMBER and current == _NUMBER):
        return BONUS_CAMEL_123
    if current == _NON_WORD:
        return BONUS_NON_WORD
    return 0


def is_case_sensitive(pattern: str) -> bool:
    """Smart case: only patterns containing an uppercase letter match case."""
    return any(ch.isupper() for ch in pattern)


def _is_subsequence(needle: list[str], haystack: list[str]) -> bool:
    remaining = iter(haystack)
    return all(ch in remaining for ch in needle)


def fuzzy_score(text: str, pattern: str) -> int | None:
    """Return the best alignment score of ``pattern`` within ``text``.

    ``None`` means the pattern is not a subsequence of the text. An empty
    pattern scores 0.
    """
    if not pattern:
        return 0
    if is_case_sensitive(pattern):
        haystack = list(text)
        needle = list(pattern)
    else:
        haystack = [ch.lower() for ch in text]
        needle = [ch.lower() for ch in pattern]
    if len(needle) > len(haystack) or not _is_subsequence(needle, haystack):
        return None

    bonuses: list[int] = []
    prev_class = _NON_WORD
    for ch in text:
        current = _char_class(ch)
        bonuses.append(_position_bonus(prev_class, current))
        prev_class = current

    width = len(haystack)
    prev_row = [_UNREACHABLE] * width
    prev_run_bonus = [0] * width
    for row, pattern_ch in enumerate(needle):
        scores = [_UNREACHABLE] * width
        run_bonus = [0] * width
        # Best score of the previous row plus the penalty of a gap ending just before column j.
        gap_best = _UNREACHABLE
        for col in range(width):
            if row > 0 and col >= 2:
                extended = gap_best + SCORE_GAP_EXTENSION if gap_best > _UNREACHABLE else _UNREACHABLE
                opened = (
                    prev_row[col - 2] + SCORE_GAP_START
                    if prev_row[col - 2] > _UNREACHABLE
                    else _UNREACHABLE
                )
                gap_best = max(extended, opened)
            if haystack[col] != pattern_ch:
                continue

            bonus = bonuses[col]
            if row == 0:
                scores[col] = SCORE_MATCH + bonus * BONUS_FIRST_CHAR_MULTIPLIER
                run_bonus[col] = bonus
                continue

            best = _UNREACHABLE
            best_run = 0
            if col >= 1 and prev_row[col - 1] > _UNREACHABLE:
                run = bonus if bonus >= BONUS_BOUNDARY else prev_run_bonus[col - 1]
                best = prev_row[col - 1] + SCORE_MATCH + max(bonus, run, BONUS_CONSECUTIVE)
                best_run = run
            if gap_best > _UNREACHABLE:
                gapped = gap_best + SCORE_MATCH + bonus
                if gapped > best:
                    best = gapped
                    best_run = bonus
            scores[col] = best
            run_bonus[col] = best_run
        prev_row = scores
        prev_run_bonus = run_bonus

    result = max(prev_row)
    return result if result > _UNREACHABLE else None
